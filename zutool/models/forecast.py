"""Forecast data models for zutool.jp and Otenki ASP responses."""

import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

from zutool.models.common import DayKey, TypedScalar

_CITY_CODE_RE = re.compile(r"^\d{5}$")
_HALF_WIDTH_KANA_RE = re.compile(r"^[\uff61-\uff9f]+$")


class PressureLevel(StrEnum):
    NORMAL = "0"
    SLIGHT_ALERT = "2"
    CAUTION = "3"
    ALERT = "4"
    SEVERE_ALERT = "5"


class Trend(StrEnum):
    RISING = "rising"
    FALLING = "falling"
    STEADY = "steady"
    UNKNOWN = "unknown"

    @property
    def arrow(self) -> str:
        return _TREND_ARROWS[self]


_TREND_ARROWS = {
    Trend.RISING: "↗",
    Trend.FALLING: "↘",
    Trend.STEADY: "→",
    Trend.UNKNOWN: "?",
}


@dataclass(frozen=True)
class Element:
    content_id: str  # e.g. "day_tenki"
    title: str
    series: dict[datetime, TypedScalar] = field(default_factory=dict)


@dataclass(frozen=True)
class OtenkiForecast:
    status: str
    date_time: datetime | None
    elements: list[Element]


@dataclass(frozen=True)
class WeatherPoint:
    city_code: str
    name_kata: str
    name: str

    def validate(self) -> None:
        """Raise ValueError unless city_code is 5 digits and name_kata is half-width kana."""
        if not _CITY_CODE_RE.match(self.city_code):
            raise ValueError(
                f"city_code must be 5 digits, got {self.city_code!r}"
            )
        if not _HALF_WIDTH_KANA_RE.match(self.name_kata):
            raise ValueError(
                f"name_kata must be half-width katakana, got {self.name_kata!r}"
            )


@dataclass(frozen=True)
class HourlySample:
    hour_label: str
    weather_code: str
    temperature: float | None
    pressure: float | None  # None when the upstream text is not numeric
    pressure_level: str
    temperature_invalid: bool = False  # present upstream but not numeric


@dataclass(frozen=True)
class WeatherStatus:
    place_name: str
    place_id: str
    prefecture_id: str
    date_time: datetime | None
    yesterday: list[HourlySample]
    today: list[HourlySample]
    tomorrow: list[HourlySample]
    day_after_tomorrow: list[HourlySample]

    def day(self, key: DayKey) -> list[HourlySample]:
        return {
            DayKey.YESTERDAY: self.yesterday,
            DayKey.TODAY: self.today,
            DayKey.TOMORROW: self.tomorrow,
            DayKey.DAY_AFTER_TOMORROW: self.day_after_tomorrow,
        }[key]


@dataclass(frozen=True)
class PainStatus:
    area_name: str
    time_start: str
    time_end: str
    rate_normal: float
    rate_little: float
    rate_painful: float
    rate_bad: float

    @property
    def rates(self) -> list[float]:
        return [self.rate_normal, self.rate_little, self.rate_painful, self.rate_bad]


@dataclass(frozen=True)
class RenderWindow:
    start_hour: int
    hours: list[str]
    weather: list[str]
    temperatures: list[str]
    trends: list[Trend]
    pressures: list[str]
    pressure_levels: list[str]
    carry_out: float | None
