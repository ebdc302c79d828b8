"""A single planned event and its one-line text form."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, time

_FIELD_SEPARATOR = "|"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    """Parse the integer at the start of *text*, ignoring anything after it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"expected an integer, got {text!r}")
    return int(match.group(1))


def _parse_date(text: str) -> date:
    """Parse a ``dd/mm/yyyy`` date."""
    day_str, _, rest = text.partition("/")
    month_str, _, year_str = rest.partition("/")
    return date(_leading_int(year_str), _leading_int(month_str), _leading_int(day_str))


def _parse_time(text: str) -> time:
    """Parse an ``hh:mm:ss`` time of day."""
    hour_str, _, rest = text.partition(":")
    minute_str, _, second_str = rest.partition(":")
    total = (
        _leading_int(hour_str) * 3600
        + _leading_int(minute_str) * 60
        + _leading_int(second_str)
    )
    if not 0 <= total < 24 * 3600:
        raise ValueError(f"time of day out of range: {text!r}")
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    return time(hours, minutes, seconds)


def _format_iso_date(value: date) -> str:
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def _format_time(value: time) -> str:
    return f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"


@dataclass
class Event:
    """An event with a title, description, date, time of day and location."""

    id: int
    title: str
    description: str
    date: date
    hour: time
    location: str

    def details(self) -> str:
        """Multi-line description including the event's id."""
        return (
            f"Detalii eveniment {self.title} cu ID {self.id}:\n"
            f"\tDescriere eveniment: {self.description}\n"
            f"\tData eveniment {self.title}: {_format_iso_date(self.date)}, "
            f"ora: {_format_time(self.hour)}\n"
            f"\tLocatie eveniment: {self.location}\n"
        )

    def __str__(self) -> str:
        return (
            f"Detalii eveniment {self.title}:\n"
            f"\tDescriere eveniment: {self.description}\n"
            f"\tData eveniment {self.title}:{_format_iso_date(self.date)}, "
            f"ora: {_format_time(self.hour)}\n"
            f"\tLocatie eveniment: {self.location}\n"
        )

    def when(self) -> datetime:
        """The event's date and time of day combined."""
        return datetime.combine(self.date, self.hour)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.when() < other.when()

    def serialize(self) -> str:
        """One line: ``id|title|description|dd/mm/yyyy|hh:mm:ss|location``."""
        return _FIELD_SEPARATOR.join(
            (
                str(self.id),
                self.title,
                self.description,
                f"{self.date.day:02d}/{self.date.month:02d}/{self.date.year}",
                _format_time(self.hour),
                self.location,
            )
        )

    @classmethod
    def deserialize(cls, line: str) -> Event:
        """Build an event from a line written by :meth:`serialize`."""
        fields = line.split(_FIELD_SEPARATOR)
        if len(fields) < 6:
            raise ValueError(f"expected 6 fields, got {len(fields)}: {line!r}")
        event_id = _leading_int(fields[0])
        if event_id < 0:
            raise ValueError(f"event id must not be negative: {fields[0]!r}")
        return cls(
            id=event_id,
            title=fields[1],
            description=fields[2],
            date=_parse_date(fields[3]),
            hour=_parse_time(fields[4]),
            location=fields[5],
        )