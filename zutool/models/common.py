"""Common types and helpers shared across models."""

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias


@dataclass(frozen=True)
class Text:
    value: str


@dataclass(frozen=True)
class Number:
    value: float


# Decoded value of an untyped upstream cell
TypedScalar: TypeAlias = Text | Number


class OutputFormat(StrEnum):
    TABLE = "table"
    JSON = "json"


class DayKey(StrEnum):
    YESTERDAY = "yesterday"
    TODAY = "today"
    TOMORROW = "tomorrow"
    DAY_AFTER_TOMORROW = "dayaftertomorrow"

    @classmethod
    def from_offset(cls, offset: int) -> "DayKey":
        try:
            return _DAY_KEYS_BY_OFFSET[offset]
        except KeyError:
            raise ValueError(f"No day key for offset {offset}") from None

    @property
    def offset(self) -> int:
        return _DAY_OFFSETS[self]


_DAY_OFFSETS = {
    DayKey.YESTERDAY: -1,
    DayKey.TODAY: 0,
    DayKey.TOMORROW: 1,
    DayKey.DAY_AFTER_TOMORROW: 2,
}
_DAY_KEYS_BY_OFFSET = {v: k for k, v in _DAY_OFFSETS.items()}
