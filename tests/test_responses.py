import json

import pytest

from exchange_connector.responses import (
    BinanceDepthResponse,
    BinanceFuturesTickerResponse,
    BinanceTickerResponse,
    BybitDepthResponse,
    BybitKlineResponse,
    BybitTickerResponse,
    GateDepthResponse,
    GateTickerResponse,
    MEXCDepthResponse,
    MEXCTickerResponse,
    OKXDepthResponse,
    OKXKlineResponse,
    OKXTickerResponse,
)


def test_binance_ticker():
    resp = BinanceTickerResponse.from_dict({"symbol": "BTCUSDT", "price": "65000.10"})
    assert resp.symbol == "BTCUSDT"
    assert resp.price == "65000.10"


def test_binance_futures_ticker_renamed_keys():
    resp = BinanceFuturesTickerResponse.from_dict(
        {"symbol": "BTCUSDT", "price": "1", "volume": "2", "quoteVolume": "3", "time": 1700000000000}
    )
    assert resp.quote_vol == "3"
    assert resp.timestamp == 1700000000000
    assert resp.volume == "2"


def test_binance_depth_from_json_text():
    raw = '{"lastUpdateId": 42, "bids": [["100.0", "1.5"]], "asks": [["101.0", "2"]]}'
    resp = BinanceDepthResponse.from_dict(json.loads(raw))
    assert resp.last_update_id == 42
    assert resp.bids == [["100.0", "1.5"]]
    assert resp.asks == [["101.0", "2"]]


def test_missing_fields_take_zero_values():
    resp = BinanceDepthResponse.from_dict({})
    assert resp.last_update_id == 0
    assert resp.bids == []
    assert resp == BinanceDepthResponse()


def test_null_fields_take_zero_values():
    resp = GateTickerResponse.from_dict({"currency_pair": None, "timestamp": None})
    assert resp.currency_pair == ""
    assert resp.time == 0


def test_okx_ticker_nested_entries():
    resp = OKXTickerResponse.from_dict(
        {"data": [{"last": "5", "vol24h": "6", "instId": "BTC-USDT", "ts": "7"}]}
    )
    assert len(resp.data) == 1
    assert resp.data[0].inst_id == "BTC-USDT"
    assert resp.data[0].vol24h == "6"


def test_okx_kline_and_depth():
    kline = OKXKlineResponse.from_dict({"data": [["1", "2", "3"]]})
    assert kline.data == [["1", "2", "3"]]
    depth = OKXDepthResponse.from_dict({"data": [{"bids": [["9", "1"]], "asks": [], "ts": "8"}]})
    assert depth.data[0].bids == [["9", "1"]]
    assert depth.data[0].asks == []
    assert depth.data[0].ts == "8"


def test_bybit_ticker_result_list():
    resp = BybitTickerResponse.from_dict(
        {
            "retCode": 0,
            "retMsg": "OK",
            "result": {
                "category": "spot",
                "list": [{"symbol": "BTCUSDT", "lastPrice": "10", "turnover24h": "20", "time": 5}],
            },
        }
    )
    assert resp.ret_msg == "OK"
    assert resp.result.category == "spot"
    assert resp.result.items[0].volume_24h == "20"
    assert resp.result.items[0].last_price == "10"


def test_bybit_kline_result():
    resp = BybitKlineResponse.from_dict(
        {"retCode": 0, "result": {"symbol": "BTCUSDT", "list": [["1", "2"]]}}
    )
    assert resp.result.symbol == "BTCUSDT"
    assert resp.result.items == [["1", "2"]]


def test_bybit_depth_short_keys():
    resp = BybitDepthResponse.from_dict(
        {"result": {"b": [["1", "2"]], "a": [["3", "4"]], "ts": 99}}
    )
    assert resp.result.bids == [["1", "2"]]
    assert resp.result.asks == [["3", "4"]]
    assert resp.result.ts == 99


def test_bybit_missing_result_is_empty():
    resp = BybitDepthResponse.from_dict({"retCode": 10001})
    assert resp.ret_code == 10001
    assert resp.result.bids == []


def test_gate_depth():
    resp = GateDepthResponse.from_dict(
        {"currency_pair": "BTC_USDT", "asks": [["2", "1"]], "bids": [["1", "1"]], "update": 12}
    )
    assert resp.currency_pair == "BTC_USDT"
    assert resp.update == 12
    assert resp.asks == [["2", "1"]]


def test_mexc_ticker():
    resp = MEXCTickerResponse.from_dict({"symbol": "BTCUSDT", "price": "1", "timestamp": 3})
    assert resp.timestamp == 3
    assert resp.volume == ""


def test_key_matching_ignores_case():
    resp = MEXCDepthResponse.from_dict({"symbol": "BTCUSDT", "ts": 77, "BIDS": [["1", "1"]]})
    assert resp.ts == 77
    assert resp.bids == [["1", "1"]]


def test_exact_key_preferred_over_case_variant():
    resp = MEXCDepthResponse.from_dict({"ts": 1, "Ts": 2})
    assert resp.ts == 2


@pytest.mark.parametrize("payload", [[1, 2], "text", 5])
def test_non_object_rejected(payload):
    with pytest.raises(ValueError):
        BinanceTickerResponse.from_dict(payload)


def test_wrong_field_type_rejected():
    with pytest.raises(ValueError):
        BinanceTickerResponse.from_dict({"symbol": 12})
    with pytest.raises(ValueError):
        BinanceDepthResponse.from_dict({"lastUpdateId": "42"})
    with pytest.raises(ValueError):
        BinanceDepthResponse.from_dict({"lastUpdateId": True})


def test_bad_depth_rows_rejected():
    with pytest.raises(ValueError):
        BinanceDepthResponse.from_dict({"bids": [[1.5, "2"]]})
    with pytest.raises(ValueError):
        BinanceDepthResponse.from_dict({"bids": "100"})