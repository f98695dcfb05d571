"""Trading pair symbols: parsing, exchange-specific formatting and reverse parsing."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .types import ExchangeName, MarketType


class SymbolError(ValueError):
    """Raised when a symbol cannot be parsed or formatted."""


def _as_exchange(value: ExchangeName | str | None) -> ExchangeName | str | None:
    if value is None or isinstance(value, ExchangeName):
        return value
    try:
        return ExchangeName(value)
    except ValueError:
        return value


def _as_market(value: MarketType | str | None) -> MarketType | str | None:
    if value is None or isinstance(value, MarketType):
        return value
    try:
        return MarketType(value)
    except ValueError:
        return value


@dataclass
class Symbol:
    """A trading pair together with the exchange and market it belongs to."""

    symbol: str = ""
    base: str = ""
    quote: str = ""
    margin: str = ""
    exchange_name: ExchangeName | str | None = None
    market_type: MarketType | str | None = None
    quantity_precision: int = 0
    price_precision: int = 0
    min_quantity: str = ""
    min_notional: str = ""
    max_quantity: str = ""

    def __str__(self) -> str:
        if self.margin:
            return f"{self.base}/{self.quote}:{self.margin}"
        return f"{self.base}/{self.quote}"

    def is_spot(self) -> bool:
        """Whether this is a spot market symbol."""
        return self.market_type == MarketType.SPOT

    def is_futures(self) -> bool:
        """Whether this is a futures market symbol of either kind."""
        return self.market_type in (MarketType.FUTURESUSDT, MarketType.FUTURESCOIN)

    def is_usdt_margined(self) -> bool:
        """Whether this is a USDT-margined futures symbol."""
        return self.market_type == MarketType.FUTURESUSDT

    def is_coin_margined(self) -> bool:
        """Whether this is a coin-margined futures symbol."""
        return self.market_type == MarketType.FUTURESCOIN


def new_symbol(symbol, base, quote, margin, exchange_name, market_type):
    """Build a Symbol with upper-cased currencies."""
    return Symbol(
        symbol=symbol,
        base=base.upper(),
        quote=quote.upper(),
        margin=margin.upper(),
        exchange_name=_as_exchange(exchange_name),
        market_type=_as_market(market_type),
    )


def new_symbol_from_string(symbol, base, quote, margin, exchange_name, market_type):
    """Build a Symbol from plain strings, lower-casing exchange and market."""
    return Symbol(
        symbol=symbol,
        base=base.upper(),
        quote=quote.upper(),
        margin=margin.upper(),
        exchange_name=_as_exchange(exchange_name.lower()),
        market_type=_as_market(market_type.lower()),
    )


def normalize_exchange_name(name):
    """Trim and lower-case an exchange name."""
    return _as_exchange(name.strip().lower())


_MARKET_ALIASES = {
    "futuresusdt": MarketType.FUTURESUSDT,
    "futures_usdt": MarketType.FUTURESUSDT,
    "usdt_futures": MarketType.FUTURESUSDT,
    "futurescoin": MarketType.FUTURESCOIN,
    "futures_coin": MarketType.FUTURESCOIN,
    "coin_futures": MarketType.FUTURESCOIN,
    "spot": MarketType.SPOT,
}


def normalize_market_type(market):
    """Trim, lower-case and map known aliases of a market type."""
    market = market.strip().lower()
    return _MARKET_ALIASES.get(market, _as_market(market))


def _parse_base_quote(base_quote: str) -> tuple[str, str]:
    base_quote = base_quote.strip()
    if "/" not in base_quote:
        raise SymbolError(f"invalid format: must be [base]/[quote], got: {base_quote}")
    parts = base_quote.split("/")
    if len(parts) != 2:
        raise SymbolError(f"invalid format: must be [base]/[quote], got: {base_quote}")
    base, quote = (part.strip() for part in parts)
    if not base or not quote:
        raise SymbolError(
            f"invalid format: base and quote cannot be empty, got: {base_quote}"
        )
    return base, quote


def parse_symbol(symbol_str):
    """Parse "BASE/QUOTE" or "BASE/QUOTE:MARGIN", inferring the market type.

    A margin equal to the base currency means a coin-margined contract; any
    other margin is treated as USDT-margined.
    """
    symbol_str = symbol_str.strip()

    if ":" in symbol_str:
        parts = symbol_str.split(":")
        if len(parts) != 2:
            raise SymbolError(
                "invalid futures symbol format: must be [base]/[quote]:[margin], "
                f"got: {symbol_str}"
            )
        base_quote, margin = parts
        try:
            base, quote = _parse_base_quote(base_quote)
        except SymbolError as exc:
            raise SymbolError(f"invalid base/quote format in futures symbol: {exc}") from exc

        if margin == quote:
            market_type = MarketType.FUTURESUSDT
        elif margin == base:
            market_type = MarketType.FUTURESCOIN
        else:
            market_type = MarketType.FUTURESUSDT

        return Symbol(
            symbol=symbol_str,
            base=base.upper(),
            quote=quote.upper(),
            margin=margin.upper(),
            market_type=market_type,
        )

    try:
        base, quote = _parse_base_quote(symbol_str)
    except SymbolError as exc:
        raise SymbolError(f"invalid spot symbol format: {exc}") from exc

    return Symbol(
        symbol=symbol_str,
        base=base.upper(),
        quote=quote.upper(),
        margin="",
        market_type=MarketType.SPOT,
    )


def _format_binance(base: str, quote: str, market_type) -> str:
    if market_type == MarketType.FUTURESCOIN:
        return f"{base}{quote}_PERP"
    return f"{base}{quote}"


_OKX_SWAP_MARKETS = frozenset({"FUTURESUSDT", "FUTURESCOIN"})


def _format_okx(base: str, quote: str, market_type) -> str:
    if market_type is not None and str(market_type) in _OKX_SWAP_MARKETS:
        return f"{base}-{quote}-SWAP"
    return f"{base}-{quote}"


def _format_concat(base: str, quote: str, market_type) -> str:
    return f"{base}{quote}"


def _format_gate(base: str, quote: str, market_type) -> str:
    return f"{base}_{quote}"


_FORMATTERS: dict[ExchangeName, Callable[[str, str, object], str]] = {
    ExchangeName.BINANCE: _format_binance,
    ExchangeName.OKX: _format_okx,
    ExchangeName.BYBIT: _format_concat,
    ExchangeName.GATE: _format_gate,
    ExchangeName.MEXC: _format_concat,
}


def _format(exchange_name, base: str, quote: str, market_type) -> str:
    formatter = _FORMATTERS.get(_as_exchange(exchange_name), _format_concat)
    return formatter(base, quote, market_type)


def format_symbol(symbol, exchange_name):
    """Render a Symbol in the given exchange's subscription format."""
    if symbol is None:
        raise SymbolError("symbol cannot be None")
    return _format(exchange_name, symbol.base, symbol.quote, symbol.market_type)


def format_symbol_by_exchange(exchange_name, base, quote, margin, market_type):
    """Render currencies and market type in the given exchange's format."""
    symbol = Symbol(
        base=base.upper(),
        quote=quote.upper(),
        margin=margin.upper(),
        market_type=market_type,
    )
    return format_symbol(symbol, exchange_name)


def _default_margin(base: str, quote: str, market_type) -> str:
    if market_type == MarketType.FUTURESUSDT:
        return quote
    if market_type == MarketType.FUTURESCOIN:
        return base
    return ""


def reverse_parse_symbol(base, quote, margin, exchange_name, market_type):
    """Build a Symbol, with its exchange-specific name, from its currencies."""
    if not base:
        raise SymbolError("base cannot be empty")
    if not quote:
        raise SymbolError("quote cannot be empty")

    exchange = normalize_exchange_name(exchange_name)
    market = normalize_market_type(market_type)

    if not margin:
        margin = _default_margin(base, quote, market)

    exchange_symbol = _format(exchange, base, quote, market)
    return new_symbol(exchange_symbol, base, quote, margin, exchange, market)


_SMART_QUOTES = ("USDT", "BTC", "ETH", "BNB", "BUSD", "USDC", "USD", "EUR", "GBP")
_BINANCE_QUOTES = ("BTC", "ETH", "BNB", "BUSD", "USDC")


def _smart_reverse_parse(symbol: str) -> tuple[str, str]:
    symbol = symbol.upper()
    for quote in _SMART_QUOTES:
        if symbol.endswith(quote):
            base = symbol[: -len(quote)]
            if len(base) >= 2:
                return base, quote
    raise SymbolError(f"cannot smart parse symbol: {symbol}")


def _reverse_binance(symbol: str, market_type: str) -> tuple[str, str]:
    symbol = symbol.upper()
    market = market_type.lower()
    if market in ("spot", "futuresusdt", "futures_usdt"):
        if symbol.endswith("USDT"):
            return symbol[: -len("USDT")], "USDT"
        for quote in _BINANCE_QUOTES:
            if symbol.endswith(quote):
                return symbol[: -len(quote)], quote
    elif market in ("futurescoin", "futures_coin"):
        if symbol.endswith("_PERP"):
            symbol = symbol[: -len("_PERP")]
            if symbol.endswith("USD"):
                return symbol[: -len("USD")], "USD"
    return _smart_reverse_parse(symbol)


def _reverse_okx(symbol: str, market_type: str) -> tuple[str, str]:
    symbol = symbol.upper()
    if symbol.endswith("-SWAP"):
        symbol = symbol[: -len("-SWAP")]
    parts = symbol.split("-")
    if len(parts) >= 2:
        return parts[0], parts[1]
    raise SymbolError(f"cannot parse OKX symbol: {symbol}")


def _reverse_gate(symbol: str, market_type: str) -> tuple[str, str]:
    symbol = symbol.upper()
    parts = symbol.split("_")
    if len(parts) >= 2:
        return parts[0], parts[1]
    raise SymbolError(f"cannot parse Gate symbol: {symbol}")


def _reverse_smart(symbol: str, market_type: str) -> tuple[str, str]:
    return _smart_reverse_parse(symbol)


_REVERSE_PARSERS: dict[ExchangeName, Callable[[str, str], tuple[str, str]]] = {
    ExchangeName.BINANCE: _reverse_binance,
    ExchangeName.OKX: _reverse_okx,
    ExchangeName.BYBIT: _reverse_smart,
    ExchangeName.GATE: _reverse_gate,
    ExchangeName.MEXC: _reverse_smart,
}


def parse_exchange_symbol(exchange_symbol, exchange_name, market_type):
    """Recover base, quote and margin from an exchange-specific symbol."""
    if not exchange_symbol:
        raise SymbolError("exchange symbol cannot be empty")

    exchange = normalize_exchange_name(exchange_name)
    market = normalize_market_type(market_type)

    parser = _REVERSE_PARSERS.get(exchange, _reverse_smart)
    base, quote = parser(exchange_symbol, str(market))

    margin = _default_margin(base, quote, market)
    return new_symbol(exchange_symbol, base, quote, margin, exchange, market)


def convert_symbol(from_symbol, from_exchange, from_market, to_exchange, to_market):
    """Translate a symbol from one exchange's format into another's."""
    try:
        symbol = parse_exchange_symbol(from_symbol, from_exchange, from_market)
    except SymbolError as exc:
        raise SymbolError(f"failed to parse source symbol: {exc}") from exc
    try:
        return format_symbol(symbol, _as_exchange(to_exchange))
    except SymbolError as exc:
        raise SymbolError(f"failed to format target symbol: {exc}") from exc