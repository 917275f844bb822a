"""Tests for /getweatherstatus and /getpainstatus decoding."""

import json
import logging
from datetime import UTC, datetime

import pytest

from zutool.ingest.errors import DecodeError, EmbeddedApiError
from zutool.ingest.status_decoder import decode_pain_status, decode_weather_status
from zutool.models.common import DayKey
from zutool.models.forecast import Trend
from zutool.reporting.window_renderer import render_day


class TestDecodeWeatherStatus:
    def test_fixture(self, load_fixture):
        status = decode_weather_status(load_fixture("weather_status.json"))
        assert status.place_name == "渋谷区"
        assert status.place_id == "113"
        assert status.prefecture_id == "13"
        assert status.date_time == datetime(2024, 5, 1, 9, tzinfo=UTC)
        assert len(status.day(DayKey.TODAY)) == 24
        assert len(status.day(DayKey.TOMORROW)) == 10
        assert status.day(DayKey.DAY_AFTER_TOMORROW) == []

    def test_sample_fields(self, load_fixture):
        status = decode_weather_status(load_fixture("weather_status.json"))
        first = status.today[0]
        assert first.hour_label == "0"
        assert first.weather_code == "100"
        assert first.temperature == 10.0
        assert first.pressure == 1005.0
        assert first.pressure_level == "0"

    def test_null_temperature_and_bad_pressure(self, caplog):
        body = json.dumps({
            "today": [
                {"time": "0", "weather": "200", "temp": None,
                 "pressure": "n/a", "pressure_level": "9"},
            ],
        })
        with caplog.at_level(logging.WARNING):
            status = decode_weather_status(body)
        sample = status.today[0]
        assert sample.temperature is None
        assert sample.pressure is None
        assert sample.pressure_level == "9"
        assert "pressure 'n/a'" in caplog.text
        assert "unknown pressure level" in caplog.text

    def test_non_finite_pressure_is_not_numeric(self):
        body = json.dumps({
            "today": [
                {"time": str(h), "weather": "100", "temp": "15.0",
                 "pressure": p, "pressure_level": "0"}
                for h, p in enumerate(["1008.0", "NaN", "1009.0", "1010.0"])
            ],
        })
        status = decode_weather_status(body)
        assert [s.pressure for s in status.today] == [1008.0, None, 1009.0, 1010.0]
        windows = render_day(status.today, 0)
        assert windows[0].trends == [
            Trend.STEADY, Trend.UNKNOWN, Trend.RISING, Trend.RISING,
        ]
        assert windows[0].pressures[1] == "?"

    def test_unparseable_temperature_flagged(self):
        body = json.dumps({
            "today": [
                {"time": "0", "weather": "100", "temp": "abc",
                 "pressure": "1008.0", "pressure_level": "0"},
                {"time": "1", "weather": "100", "temp": None,
                 "pressure": "1008.0", "pressure_level": "0"},
            ],
        })
        status = decode_weather_status(body)
        assert [s.temperature_invalid for s in status.today] == [True, False]
        assert render_day(status.today, 0)[0].temperatures == ["?℃", "-℃"]

    def test_day_not_list(self):
        with pytest.raises(DecodeError):
            decode_weather_status('{"today": "x"}')

    def test_embedded_error(self):
        with pytest.raises(EmbeddedApiError):
            decode_weather_status('{"error_code": 1, "error_message": "bad city"}')


class TestDecodePainStatus:
    def test_fixture(self, load_fixture):
        status = decode_pain_status(load_fixture("pain_status.json"))
        assert status.area_name == "東京都"
        assert status.rates == [40.0, 30.0, 20.0, 10.0]

    def test_negative_rate(self):
        body = json.dumps({"painnoterate_status": {"area_name": "x", "rate_0": -1}})
        with pytest.raises(DecodeError):
            decode_pain_status(body)

    def test_missing_status(self):
        with pytest.raises(DecodeError):
            decode_pain_status("{}")

    def test_embedded_error(self):
        body = '{"error_code": 1, "error_message": "存在しない都道府県コードです"}'
        with pytest.raises(EmbeddedApiError) as exc_info:
            decode_pain_status(body)
        assert "存在しない" in exc_info.value.message
