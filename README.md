# exchange-connector

Shared building blocks for working with cryptocurrency exchange market data.
The package has no third-party dependencies.

- **`exchange_connector.types`** – dataclasses for order books (`Depth`,
  `PriceLevel`), candles (`Kline`), tickers (`Ticker`), orders (`Order`),
  trades (`Trade`) and exchange trading rules (`ExchangeInfo`, `RateLimit`,
  `Filter`), plus string enums `ExchangeName`, `MarketType`, `Interval`,
  `OrderSide`, `OrderType`, `OrderStatus` and `SymbolStatus`. Prices and
  quantities are `decimal.Decimal`.
- **`exchange_connector.responses`** – dataclasses for raw REST responses from
  Binance, OKX, Bybit, Gate and MEXC, each built from decoded JSON with
  `from_dict`.
- **`exchange_connector.symbol`** – the `Symbol` dataclass and functions for
  parsing unified symbols such as `BTC/USDT`, `BTC/USDT:USDT` and
  `BTC/USD:BTC`, and for converting them to and from each exchange's own format.
- **`exchange_connector.logger`** – a small process-wide levelled logger.

## Installation

```
pip install .
```

## Symbols

A unified symbol is `BASE/QUOTE` for spot, or `BASE/QUOTE:MARGIN` for futures.
`parse_symbol` infers the market type from the margin currency: a margin equal
to the base currency gives `MarketType.FUTURESCOIN`, any other margin gives
`MarketType.FUTURESUSDT`.

```python
from exchange_connector.symbol import parse_symbol, format_symbol, convert_symbol
from exchange_connector.types import ExchangeName

sym = parse_symbol("ETH/USD:ETH")
sym.market_type        # MarketType.FUTURESCOIN
str(sym)               # "ETH/USD:ETH"
sym.is_coin_margined() # True

format_symbol(parse_symbol("BTC/USDT"), ExchangeName.OKX)   # "BTC-USDT"

convert_symbol("BTCUSDT", "binance", "spot", "gate", "spot")  # "BTC_USDT"
```

Other functions in the module:

- `format_symbol_by_exchange(exchange_name, base, quote, margin, market_type)` –
  format currencies directly, without building a `Symbol` first.
- `reverse_parse_symbol(base, quote, margin, exchange_name, market_type)` –
  build a `Symbol` with its exchange-specific name; an empty margin is filled
  in as the quote (USDT-margined) or the base (coin-margined).
- `parse_exchange_symbol(exchange_symbol, exchange_name, market_type)` –
  recover base, quote and margin from a name such as `BTCUSDT`, `BTC-USDT`,
  `BTC_USDT` or `BTCUSD_PERP`.
- `normalize_exchange_name` and `normalize_market_type` – trim and lower-case
  names; market aliases such as `futuresusdt` or `coin_futures` are mapped to
  the `MarketType` members.
- `new_symbol` and `new_symbol_from_string` – constructors that upper-case the
  currencies.

Exchange and market names are case-insensitive where they are given as plain
strings. Malformed input raises `SymbolError`, a subclass of `ValueError`.

## Responses

```python
from exchange_connector.responses import BinanceDepthResponse

book = BinanceDepthResponse.from_dict(
    {"lastUpdateId": 42, "bids": [["100.5", "2"]], "asks": [["101", "1"]]}
)
book.last_update_id    # 42
book.bids              # [["100.5", "2"]]
```

Missing keys take empty defaults, keys are matched regardless of letter case,
and a value of the wrong JSON type raises `ValueError`. Bybit responses keep
their `result` in a nested dataclass whose `items` holds the response's
`list`. Candle endpoints that return bare arrays are described by the type
aliases `BinanceKlineResponse`, `GateKlineResponse` and `MEXCKlineResponse`.

## Logging

```python
from exchange_connector import logger

logger.init()                     # reads the LOG_LEVEL environment variable
logger.info("subscribed %s", "BTCUSDT")
logger.set_log_level_from_string("debug")
logger.is_debug_enabled()         # True
```

Levels are `LogLevel.DEBUG`, `INFO` (the default), `WARN` and `ERROR`; an
unknown level name falls back to `INFO`. Messages are written with a level
prefix and a timestamp, to standard output, or to standard error for `error`.

## What this package does not do

It holds data models, response models, symbol handling and logging only. It
does not connect to any exchange: there is no REST client, no WebSocket
subscription, no in-memory market data cache and no command-line program.

## Running the tests

```
pip install ".[test]"
pytest
```