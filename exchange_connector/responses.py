"""Raw REST response shapes of the supported exchanges."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields
from typing import Any, TypeVar

_T = TypeVar("_T")

# Candle endpoints that return bare arrays.
BinanceKlineResponse = list[list[Any]]
GateKlineResponse = list[list[str]]
MEXCKlineResponse = list[list[Any]]


def _object(data: Any, what: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{what}: expected a JSON object, got {type(data).__name__}")
    return data


def _lookup(data: Mapping[str, Any], key: str) -> Any:
    """Find a key, preferring an exact match but accepting any letter case."""
    if key in data:
        return data[key]
    folded = key.casefold()
    for name, value in data.items():
        if isinstance(name, str) and name.casefold() == folded:
            return value
    return None


def _string(data: Mapping[str, Any], key: str) -> str:
    value = _lookup(data, key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r}: expected a string, got {type(value).__name__}")
    return value


def _integer(data: Mapping[str, Any], key: str) -> int:
    value = _lookup(data, key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r}: expected an integer, got {type(value).__name__}")
    return value


def _cell(key: str, cell: Any) -> str:
    if cell is None:
        return ""
    if isinstance(cell, str):
        return cell
    raise ValueError(f"field {key!r}: expected string cells, got {type(cell).__name__}")


def _string_rows(data: Mapping[str, Any], key: str) -> list[list[str]]:
    value = _lookup(data, key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"field {key!r}: expected an array, got {type(value).__name__}")
    rows = []
    for row in value:
        if row is None:
            rows.append([])
        elif isinstance(row, list):
            rows.append([_cell(key, cell) for cell in row])
        else:
            raise ValueError(f"field {key!r}: expected an array of arrays")
    return rows


def _objects(data: Mapping[str, Any], key: str, parse: Callable[[Any], _T]) -> list[_T]:
    value = _lookup(data, key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"field {key!r}: expected an array, got {type(value).__name__}")
    return [parse(item) for item in value]


# Field declarations: each records the JSON key and how to read it.

def _str(key: str) -> Any:
    return field(default="", metadata={"key": key, "parse": _string})


def _int(key: str) -> Any:
    return field(default=0, metadata={"key": key, "parse": _integer})


def _rows(key: str) -> Any:
    return field(default_factory=list, metadata={"key": key, "parse": _string_rows})


def _list_of(key: str, item: type) -> Any:
    def parse(data: Mapping[str, Any], name: str) -> list[Any]:
        return _objects(data, name, item.from_dict)

    return field(default_factory=list, metadata={"key": key, "parse": parse})


def _nested(key: str, item: type) -> Any:
    def parse(data: Mapping[str, Any], name: str) -> Any:
        return item.from_dict(_lookup(data, name))

    return field(default_factory=item, metadata={"key": key, "parse": parse})


def _build(cls: type[_T], data: Any) -> _T:
    """Build a response dataclass from a decoded JSON object using its field declarations."""
    obj = _object(data, cls.__name__)
    return cls(**{f.name: f.metadata["parse"](obj, f.metadata["key"]) for f in fields(cls)})


@dataclass
class BinanceTickerResponse:
    """Binance ticker price."""

    symbol: str = _str("symbol")
    price: str = _str("price")

    @classmethod
    def from_dict(cls, data):
        return _build(cls, data)


@dataclass
class BinanceFuturesTickerResponse:
    """Binance futures ticker."""

    symbol: str = _str("symbol")
    price: str = _str("price")
    volume: str = _str("volume")
    quote_vol: str = _str("quoteVolume")
    timestamp: int = _int("time")

    @classmethod
    def from_dict(cls, data):
        return _build(cls, data)


@dataclass
class BinanceDepthResponse:
    """Binance order book snapshot."""

    last_update_id: int = _int("lastUpdateId")
    bids: list[list[str]] = _rows("bids")
    asks: list[list[str]] = _rows("asks")

    @classmethod
    def from_dict(cls, data):
        return _build(cls, data)


@dataclass
class OKXTickerData:
    """One entry of an OKX ticker response."""

    last: str = _str("last")
    vol24h: str = _str("vol24h")
    inst_id: str = _str("instId")
    ts: str = _str("ts")

    @classmethod
    def from_dict(cls, data):
        return _build(cls, data)


@dataclass
class OKXTickerResponse:
    """OKX ticker response."""

    data: list[OKXTickerData] = _list_of("data", OKXTickerData)

    @classmethod
    def from_dict(cls, data):
        return _build(cls, data)


@dataclass
class OKXKlineResponse:
    """OKX candle response."""

    data: list[list[str]] = _rows("data")

    @classmethod
    def from_dict(cls, data):
        return _build(cls, data)


@dataclass
class OKXDepthData:
    """One entry of an OKX order book response."""

    bids: list[list[str]] = _rows("bids")
    asks: list[list[str]] = _rows("asks")
    ts: str = _str("ts")

    @classmethod
    def from_dict(cls, data):
        return _build(cls, data)


@dataclass
class OKXDepthResponse:
    """OKX order book response."""

    data: list[OKXDepthData] = _list_of("data", OKXDepthData)

    @classmethod
    def from_dict(cls, data):
        return _build(cls, data)


@dataclass
class BybitTickerItem:
    """One ticker of a Bybit ticker response."""

    symbol: str = _str("symbol")
    last_price: str = _str("lastPrice")
    volume_24h: str = _str("turnover24h")
    time: int = _int("time")

    @classmethod
    def from_dict(cls, data):
        return _build(cls, data)


@dataclass
class BybitTickerResult:
    """Result part of a Bybit ticker response."""

    category: str = _str("category")
    items: list[BybitTickerItem] = _list_of("list", BybitTickerItem)

    @classmethod
    def from_dict(cls, data):
        return _build(cls, data)


@dataclass
class BybitTickerResponse:
    """Bybit ticker response."""

    ret_code: int = _int("retCode")
    ret_msg: str = _str("retMsg")
    result: BybitTickerResult = _nested("result", BybitTickerResult)

    @classmethod
    def from_dict(cls, data):
        return _build(cls, data)


@dataclass
class BybitKlineResult:
    """Result part of a Bybit candle response."""

    category: str = _str("category")
    symbol: str = _str("symbol")
    items: list[list[str]] = _rows("list")

    @classmethod
    def from_dict(cls, data):
        return _build(cls, data)


@dataclass
class BybitKlineResponse:
    """Bybit candle response."""

    ret_code: int = _int("retCode")
    ret_msg: str = _str("retMsg")
    result: BybitKlineResult = _nested("result", BybitKlineResult)

    @classmethod
    def from_dict(cls, data):
        return _build(cls, data)


@dataclass
class BybitDepthResult:
    """Result part of a Bybit order book response."""

    category: str = _str("category")
    symbol: str = _str("symbol")
    bids: list[list[str]] = _rows("b")
    asks: list[list[str]] = _rows("a")
    ts: int = _int("ts")

    @classmethod
    def from_dict(cls, data):
        return _build(cls, data)


@dataclass
class BybitDepthResponse:
    """Bybit order book response."""

    ret_code: int = _int("retCode")
    ret_msg: str = _str("retMsg")
    result: BybitDepthResult = _nested("result", BybitDepthResult)

    @classmethod
    def from_dict(cls, data):
        return _build(cls, data)


@dataclass
class GateTickerResponse:
    """Gate ticker."""

    currency_pair: str = _str("currency_pair")
    last: str = _str("last")
    base_volume: str = _str("base_volume")
    time: int = _int("timestamp")

    @classmethod
    def from_dict(cls, data):
        return _build(cls, data)


@dataclass
class GateDepthResponse:
    """Gate order book snapshot."""

    currency_pair: str = _str("currency_pair")
    asks: list[list[str]] = _rows("asks")
    bids: list[list[str]] = _rows("bids")
    update: int = _int("update")

    @classmethod
    def from_dict(cls, data):
        return _build(cls, data)


@dataclass
class MEXCTickerResponse:
    """MEXC ticker."""

    symbol: str = _str("symbol")
    price: str = _str("price")
    volume: str = _str("volume")
    timestamp: int = _int("timestamp")

    @classmethod
    def from_dict(cls, data):
        return _build(cls, data)


@dataclass
class MEXCDepthResponse:
    """MEXC order book snapshot."""

    symbol: str = _str("symbol")
    bids: list[list[str]] = _rows("bids")
    asks: list[list[str]] = _rows("asks")
    ts: int = _int("Ts")

    @classmethod
    def from_dict(cls, data):
        return _build(cls, data)