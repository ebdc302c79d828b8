"""A collection of events with lookup, editing, notification and file storage."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Iterator
from datetime import datetime, timedelta, timezone
from pathlib import Path

from eventplanner.event import Event

UTC_OFFSET = timedelta(hours=3)
"""Fixed offset of the events' local time from UTC."""

DEFAULT_WINDOW = timedelta(hours=24)


def _utc_now_seconds(now: datetime | None) -> datetime:
    """Naive UTC time, truncated to whole seconds."""
    if now is None:
        now = datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc).replace(tzinfo=None)
    return now.replace(microsecond=0)


class EventManager:
    """Holds events in insertion order and hands out ids."""

    def __init__(self, events: Iterable[Event] | None = None) -> None:
        self._events: list[Event] = list(events) if events is not None else []
        self._current_id = 0

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(self._events)

    def next_id(self) -> int:
        """Return the next free id and advance the counter."""
        event_id = self._current_id
        self._current_id += 1
        return event_id

    def reset_current_id(self, id: int) -> None:
        """Make *id* the next id handed out."""
        self._current_id = id

    def add(self, event: Event) -> None:
        self._events.append(event)

    def delete(self, event_id: int) -> bool:
        """Remove every event with *event_id*; report whether any was removed."""
        before = len(self._events)
        self._events = [ev for ev in self._events if ev.id != event_id]
        return len(self._events) < before

    def edit(self, event_id: int, new_event: Event) -> bool:
        """Replace the first event with *event_id*, keeping its id."""
        for position, ev in enumerate(self._events):
            if ev.id == event_id:
                self._events[position] = dataclasses.replace(new_event, id=ev.id)
                return True
        return False

    def find_by_id(self, event_id: int) -> Event | None:
        return next((ev for ev in self._events if ev.id == event_id), None)

    def find_by_title(self, title: str) -> list[Event]:
        return [ev for ev in self._events if ev.title == title]

    def upcoming(
        self, now: datetime | None = None, window: timedelta = DEFAULT_WINDOW
    ) -> list[tuple[Event, timedelta]]:
        """Events starting within *window* of *now*, with the time left for each.

        *now* is UTC: either timezone-aware or naive UTC. Event times are local
        time at :data:`UTC_OFFSET`.
        """
        now = _utc_now_seconds(now)
        result = []
        for ev in self._events:
            remaining = ev.when() - UTC_OFFSET - now
            if timedelta(0) <= remaining <= window:
                result.append((ev, remaining))
        return result

    def upcoming_report(self, now: datetime | None = None) -> str:
        """Text notice of the events in the next 24 hours."""
        found = self.upcoming(now, DEFAULT_WINDOW)
        if not found:
            hours = int(DEFAULT_WINDOW.total_seconds()) // 3600
            return f"Nu exista evenimente in urmatoarele {hours} ore.\n"
        lines = []
        for ev, remaining in found:
            total = int(remaining.total_seconds())
            hours_left = total // 3600
            minutes_left = total // 60 % 60
            seconds_left = total % 60
            lines.append(
                f"Upcoming event: {ev.title} at "
                f"{ev.hour.hour:02d}:{ev.hour.minute:02d}:{ev.hour.second:02d}"
                f" on {ev.date.year}/{ev.date.month}/{ev.date.day}"
                f" in {ev.location}"
                f" (in {hours_left}h {minutes_left}m {seconds_left}s)\n"
            )
        return "".join(lines)

    def listing(self) -> str:
        """Details of every event, each followed by a separator line."""
        if not self._events:
            return "Nu exista evenimente de afisat!\n"
        return "".join(f"{ev.details()}-----\n" for ev in self._events)

    def save(self, filename: str | Path) -> None:
        """Write one serialized event per line."""
        with open(filename, "w", encoding="utf-8") as fout:
            for ev in self._events:
                fout.write(ev.serialize())
                fout.write("\n")

    def load(self, filename: str | Path) -> None:
        """Replace the events with those in *filename* and move the id counter past them."""
        with open(filename, encoding="utf-8") as fin:
            events = [Event.deserialize(line) for line in fin.read().splitlines()]
        self._events = events
        self._current_id = max((ev.id for ev in events), default=0) + 1