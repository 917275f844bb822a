"""Output formatters: tab-separated tables and JSON."""

import dataclasses
import json
from datetime import datetime, timedelta
from enum import Enum
from typing import Any

from zutool.config.defaults import UNKNOWN_SYMBOL
from zutool.models.common import Number, Text, TypedScalar
from zutool.models.forecast import (
    Element,
    OtenkiForecast,
    PainStatus,
    RenderWindow,
    WeatherPoint,
    WeatherStatus,
)
from zutool.reporting.window_renderer import weather_symbol

SICKNESS_LEVELS = [
    ("😃", "普通"),
    ("😐", "少し痛い"),
    ("😞", "痛い"),
    ("🤯", "かなり痛い"),
]

OTENKI_HEADER = [
    "日付", "天気", "降水確率", "最高気温", "最低気温",
    "最大風速", "最大風速時風向", "気圧予報レベル", "最小湿度",
]

# Content ids whose whole-number values print without a decimal
INTEGRAL_CONTENTS = {"day_pre", "low_humidity", "zutu_level_day", "day_wind_d"}
WEATHER_CONTENT = "day_tenki"
MISSING = "-"


def _row(cells: list[str]) -> str:
    return "\t".join(cells)


def format_pain_status_text(s: PainStatus) -> str:
    lines = [
        f"今のみんなの体調は? <{s.area_name}>",
        f"(集計時間: {s.time_start}時-{s.time_end}時台)",
    ]
    for (emoji, _), rate in zip(SICKNESS_LEVELS, s.rates):
        lines.append(f"{emoji * int(rate / 2)} {rate:.0f}%")
    legend = ", ".join(f"{emoji}･･･{label}" for emoji, label in SICKNESS_LEVELS)
    lines.append(f"[{legend}]")
    return "\n".join(lines)


def format_weather_points_text(
    points: list[WeatherPoint], keyword: str, kata: bool = False
) -> str:
    if not points:
        return f"「{keyword}」に一致する地域が見つかりませんでした。"
    headers = ["地域コード", "地域名"]
    if kata:
        headers.append("地域カナ")
    lines = [_row(headers)]
    for p in points:
        row = [p.city_code, p.name]
        if kata:
            row.append(p.name_kata)
        lines.append(_row(row))
    lines.append(f"「{keyword}」の検索結果")
    return "\n".join(lines)


def format_window(w: RenderWindow) -> str:
    pressures = [
        f"{trend.arrow}{value}" for trend, value in zip(w.trends, w.pressures)
    ]
    return "\n".join([
        _row(w.hours),
        _row(w.weather),
        _row(w.temperatures),
        _row(pressures),
        _row(w.pressure_levels),
    ])


def format_weather_status_text(
    status: WeatherStatus,
    day_name: str,
    day_offset: int,
    windows: list[RenderWindow],
    sample_count: int,
) -> str:
    if sample_count == 0:
        return f"{day_name} のデータがありません。"

    if status.date_time is not None:
        display_date = (status.date_time + timedelta(days=day_offset)).strftime("%Y-%m-%d")
    else:
        display_date = MISSING
    lines = [
        f"<{status.place_name}|{status.place_id}>の気圧予報",
        f"{day_name} = {display_date}",
    ]
    if sample_count < 24:
        lines.append(
            f"警告: {day_name} のデータが24時間分ありません ({sample_count}時間分)。"
        )
    lines.extend(format_window(w) for w in windows)
    return "\n".join(lines)


def format_otenki_value(element: Element, value: TypedScalar | None) -> str:
    """Format one cell of the Otenki table."""
    match value:
        case None:
            return MISSING
        case Text(value=text):
            if element.content_id == WEATHER_CONTENT:
                symbol = weather_symbol(text)
                # Codes without a symbol and free text print as-is
                return text if symbol == UNKNOWN_SYMBOL else symbol
            return text
        case Number(value=number):
            if element.content_id in INTEGRAL_CONTENTS and number.is_integer():
                return str(int(number))
            return f"{number:.1f}"
    raise TypeError(f"unexpected cell value {value!r}")


def format_otenki_text(
    forecast: OtenkiForecast,
    dates: list[datetime],
    city_name: str,
    city_code: str,
) -> str:
    if not forecast.elements:
        return "表示する天気情報要素がありません。"
    if not dates:
        return "表示対象の日付がありません。"

    lines = [f"<{city_name}|{city_code}>の天気情報", _row(OTENKI_HEADER)]
    for date in sorted(dates):
        row = [date.strftime("%m/%d")]
        for element in forecast.elements:
            row.append(format_otenki_value(element, element.series.get(date)))
        lines.append(_row(row))
    return "\n".join(lines)


def _jsonable(obj: Any) -> Any:
    if isinstance(obj, (Text, Number)):
        return obj.value
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {
            f.name: _jsonable(getattr(obj, f.name))
            for f in dataclasses.fields(obj)
        }
    if isinstance(obj, dict):
        return {_json_key(k): _jsonable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_jsonable(v) for v in obj]
    if isinstance(obj, datetime):
        return obj.isoformat()
    if isinstance(obj, Enum):
        return obj.value
    return obj


def _json_key(key: Any) -> str:
    if isinstance(key, datetime):
        return key.isoformat()
    return str(key)


def to_json(data: Any, indent: int = 4) -> str:
    """Indented JSON of a decoded model, keys in declaration order."""
    return json.dumps(_jsonable(data), indent=indent, ensure_ascii=False)
