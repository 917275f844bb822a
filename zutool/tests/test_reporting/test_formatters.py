"""Tests for table and JSON formatters."""

import json
from datetime import UTC, datetime, timedelta

from zutool.models.common import Number, Text
from zutool.models.forecast import (
    Element,
    OtenkiForecast,
    PainStatus,
    WeatherPoint,
    WeatherStatus,
)
from zutool.reporting.formatters import (
    format_otenki_text,
    format_otenki_value,
    format_pain_status_text,
    format_weather_points_text,
    format_weather_status_text,
    to_json,
)
from zutool.reporting.window_renderer import render_day

DAY0 = datetime(2024, 5, 1, tzinfo=UTC)
DAY1 = DAY0 + timedelta(days=1)


def _forecast() -> OtenkiForecast:
    return OtenkiForecast(
        status="OK",
        date_time=DAY0,
        elements=[
            Element("day_pre", "降水確率", {DAY0: Number(10.0), DAY1: Number(30.0)}),
            Element("hight_temp", "最高気温", {DAY0: Number(22.5), DAY1: Number(19.0)}),
        ],
    )


class TestPainStatusText:
    def test_rates_and_legend(self):
        status = PainStatus("東京都", "09", "12", 40.0, 30.0, 20.0, 10.0)
        text = format_pain_status_text(status)
        lines = text.splitlines()
        assert lines[0] == "今のみんなの体調は? <東京都>"
        assert lines[2] == "😃" * 20 + " 40%"
        assert lines[5] == "🤯" * 5 + " 10%"
        assert "かなり痛い" in lines[-1]


class TestWeatherPointsText:
    def test_kata_column(self):
        points = [WeatherPoint("13113", "ｼﾌﾞﾔｸ", "渋谷区")]
        text = format_weather_points_text(points, "渋谷", kata=True)
        assert text.splitlines()[1] == "13113\t渋谷区\tｼﾌﾞﾔｸ"

    def test_no_results(self):
        assert "見つかりませんでした" in format_weather_points_text([], "zzz")


class TestWeatherStatusText:
    def test_two_windows(self, make_samples):
        samples = make_samples([1000.0 + i for i in range(24)])
        status = WeatherStatus("渋谷区", "113", "13", DAY0, [], samples, [], [])
        text = format_weather_status_text(status, "tomorrow", 1, render_day(samples, 1), 24)
        lines = text.splitlines()
        assert lines[0] == "<渋谷区|113>の気圧予報"
        assert lines[1] == "tomorrow = 2024-05-02"
        assert lines[2].split("\t")[0] == "0"
        assert lines[5].split("\t")[:2] == ["→1000.0", "↗1001.0"]
        assert lines[7].split("\t")[0] == "12"
        assert lines[10].split("\t")[0] == "↗1012.0"
        assert "警告" not in text

    def test_short_day_warning(self, make_samples):
        samples = make_samples([1000.0] * 10)
        status = WeatherStatus("渋谷区", "113", "13", DAY0, [], samples, [], [])
        text = format_weather_status_text(status, "today", 0, render_day(samples, 0), 10)
        assert "(10時間分)" in text

    def test_no_data(self):
        status = WeatherStatus("渋谷区", "113", "13", None, [], [], [], [])
        assert format_weather_status_text(status, "yesterday", -1, [], 0) == (
            "yesterday のデータがありません。"
        )


class TestOtenkiValue:
    def test_weather_symbol(self):
        assert format_otenki_value(Element("day_tenki", "天気"), Text("201")) == "☁"

    def test_unmapped_weather_code_kept(self):
        assert format_otenki_value(Element("day_tenki", "天気"), Text("550")) == "550"

    def test_integral_content(self):
        assert format_otenki_value(Element("day_pre", "p"), Number(30.0)) == "30"
        assert format_otenki_value(Element("day_pre", "p"), Number(30.5)) == "30.5"

    def test_decimal_content(self):
        assert format_otenki_value(Element("hight_temp", "t"), Number(19.0)) == "19.0"

    def test_text_passthrough(self):
        assert format_otenki_value(Element("day_wind_d", "d"), Text("北西")) == "北西"

    def test_missing(self):
        assert format_otenki_value(Element("day_pre", "p"), None) == "-"


class TestOtenkiText:
    def test_one_row_per_date_in_element_order(self):
        text = format_otenki_text(_forecast(), [DAY1, DAY0], "東京", "13101")
        lines = text.splitlines()
        assert lines[0] == "<東京|13101>の天気情報"
        assert lines[1].startswith("日付\t天気")
        assert lines[2:] == ["05/01\t10\t22.5", "05/02\t30\t19.0"]

    def test_missing_key_placeholder(self):
        forecast = _forecast()
        forecast.elements.append(Element("low_humidity", "最小湿度", {DAY0: Number(40.0)}))
        lines = format_otenki_text(forecast, [DAY1], "東京", "13101").splitlines()
        assert lines[2] == "05/02\t30\t19.0\t-"

    def test_no_elements(self):
        empty = OtenkiForecast("OK", None, [])
        assert "要素がありません" in format_otenki_text(empty, [DAY0], "東京", "13101")

    def test_no_dates(self):
        assert "日付がありません" in format_otenki_text(_forecast(), [], "東京", "13101")


class TestToJson:
    def test_series_keys_and_scalars(self):
        data = json.loads(to_json(_forecast()))
        assert data["status"] == "OK"
        assert data["elements"][0]["content_id"] == "day_pre"
        assert data["elements"][0]["series"]["2024-05-01T00:00:00+00:00"] == 10.0

    def test_indent(self):
        assert to_json([WeatherPoint("13113", "ｼﾌﾞﾔｸ", "渋谷区")], indent=4).startswith(
            "[\n    {"
        )

    def test_non_ascii_kept(self):
        assert "渋谷区" in to_json(WeatherPoint("13113", "ｼﾌﾞﾔｸ", "渋谷区"))
