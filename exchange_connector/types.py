"""Normalized market data and trading records shared across exchanges."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .symbol import Symbol


class _StrEnum(str, Enum):
    """String enum whose str() is its value."""

    def __str__(self) -> str:
        return self.value


class ExchangeName(_StrEnum):
    """Supported exchanges."""

    BINANCE = "binance"
    OKX = "okx"
    BYBIT = "bybit"
    GATE = "gate"
    MEXC = "mexc"


class MarketType(_StrEnum):
    """Market segments."""

    SPOT = "spot"
    FUTURESUSDT = "futures_usdt"  # USDT-margined
    FUTURESCOIN = "futures_coin"  # coin-margined


class Interval(_StrEnum):
    """Candle intervals."""

    INTERVAL_1M = "1m"
    INTERVAL_3M = "3m"
    INTERVAL_5M = "5m"
    INTERVAL_15M = "15m"
    INTERVAL_30M = "30m"
    INTERVAL_1H = "1h"
    INTERVAL_4H = "4h"
    INTERVAL_1D = "1d"


class OrderSide(_StrEnum):
    """Side of an order."""

    BUY = "buy"
    SELL = "sell"


class OrderType(_StrEnum):
    """Type of an order."""

    MARKET = "market"
    LIMIT = "limit"


class OrderStatus(_StrEnum):
    """Lifecycle status of an order."""

    PENDING = "pending"
    OPEN = "open"
    FILLED = "filled"
    PARTIALLY = "partially"
    CANCELED = "canceled"
    REJECTED = "rejected"


class SymbolStatus(_StrEnum):
    """Trading status of a symbol."""

    TRADING = "TRADING"
    HALT = "HALT"
    BREAK = "BREAK"
    AUCTION_MATCH = "AUCTION_MATCH"


@dataclass
class PriceLevel:
    """A single order book level."""

    price: Decimal = Decimal(0)
    quantity: Decimal = Decimal(0)


@dataclass
class Depth:
    """Order book snapshot; bids descending, asks ascending by price."""

    exchange: ExchangeName | None = None
    market: MarketType | None = None
    symbol: str = ""
    bids: list[PriceLevel] = field(default_factory=list)
    asks: list[PriceLevel] = field(default_factory=list)
    updated_at: datetime | None = None
    last_update_id: str = ""


@dataclass
class Ticker:
    """Latest price of a symbol."""

    exchange: ExchangeName | None = None
    market: MarketType | None = None
    symbol: str = ""
    price: Decimal = Decimal(0)
    volume: Decimal = Decimal(0)
    quote_vol: Decimal = Decimal(0)
    timestamp: datetime | None = None


@dataclass
class Kline:
    """A normalized candle."""

    exchange: ExchangeName | None = None
    market: MarketType | None = None
    symbol: str = ""
    interval: Interval | None = None
    open_time: datetime | None = None
    close_time: datetime | None = None
    open: Decimal = Decimal(0)
    high: Decimal = Decimal(0)
    low: Decimal = Decimal(0)
    close: Decimal = Decimal(0)
    volume: Decimal = Decimal(0)
    quote_volume: Decimal = Decimal(0)
    trade_num: int = 0
    is_final: bool = False
    event_time: datetime | None = None
    adapt_volume: Decimal = Decimal(0)


@dataclass
class Order:
    """A trading order."""

    exchange: ExchangeName | None = None
    market: MarketType | None = None
    symbol: str = ""
    order_id: str = ""
    client_order_id: str = ""
    side: OrderSide | None = None
    type: OrderType | None = None
    status: OrderStatus | None = None
    price: Decimal = Decimal(0)
    quantity: Decimal = Decimal(0)
    filled_qty: Decimal = Decimal(0)
    remaining_qty: Decimal = Decimal(0)
    quote_qty: Decimal = Decimal(0)
    filled_quote_qty: Decimal = Decimal(0)
    commission: Decimal = Decimal(0)
    commission_asset: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    time_in_force: str = ""
    stop_price: Decimal = Decimal(0)
    iceberg_qty: Decimal = Decimal(0)


@dataclass
class Trade:
    """A completed trade."""

    exchange: ExchangeName | None = None
    market: MarketType | None = None
    symbol: str = ""
    trade_id: str = ""
    order_id: str = ""
    client_order_id: str = ""
    side: OrderSide | None = None
    type: OrderType | None = None
    price: Decimal = Decimal(0)
    quantity: Decimal = Decimal(0)
    quote_qty: Decimal = Decimal(0)
    commission: Decimal = Decimal(0)
    commission_asset: str = ""
    timestamp: datetime | None = None
    is_maker: bool = False
    fee: Decimal = Decimal(0)
    fee_asset: str = ""


@dataclass
class RateLimit:
    """An API rate limit rule."""

    rate_limit_type: str = ""
    interval: str = ""
    interval_num: int = 0
    limit: int = 0


@dataclass
class Filter:
    """A symbol's trading filter rule."""

    filter_type: str = ""
    min_price: str = ""
    max_price: str = ""
    tick_size: str = ""
    min_qty: str = ""
    max_qty: str = ""
    step_size: str = ""
    min_notional: str = ""
    max_notional: str = ""


@dataclass
class ExchangeInfo:
    """Trading rules and symbols offered by an exchange market."""

    exchange: ExchangeName | None = None
    market: MarketType | None = None
    symbols: list[Symbol] = field(default_factory=list)
    updated_at: datetime | None = None
    server_time: datetime | None = None
    rate_limits: list[RateLimit] = field(default_factory=list)
    timezone: str = ""