"""Interactive menu for managing a planner of events."""

from __future__ import annotations

import argparse
import re
import sys
from datetime import date, time
from typing import TextIO

from eventplanner.event import Event
from eventplanner.manager import EventManager

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_MENU = (
    "Introduceti optiunea dorita:\n"
    "\t1. Adaugare eveniment\n"
    "\t2. Stergere eveniment\n"
    "\t3. Editare eveniment\n"
    "\t4. Afisare evenimente\n"
    "\t5. Cautare evenimente dupa ID\n"
    "\t6. Cautare evenimente dupa titlu\n"
    "\t7. Notifica despre urmatoarele evenimente\n"
    "\t8. Salveaza in fisier evenimentele\n"
    "\t9. Incarca din fisier evenimentele\n"
    "\t10. Iesire\n"
)

_QUIT = 10


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"expected an integer, got {text!r}")
    return int(match.group(1))


def parse_date(text: str) -> date:
    """Parse a date typed as ``dd/mm/yyyy``."""
    day_str, _, rest = text.partition("/")
    month_str, _, year_str = rest.partition("/")
    return date(_leading_int(year_str), _leading_int(month_str), _leading_int(day_str))


def parse_time(text: str) -> time:
    """Parse a time of day typed as ``hh:mm``; seconds are always zero."""
    hour_str, _, minute_str = text.partition(":")
    total = _leading_int(hour_str) * 60 + _leading_int(minute_str)
    if not 0 <= total < 24 * 60:
        raise ValueError(f"time of day out of range: {text!r}")
    hours, minutes = divmod(total, 60)
    return time(hours, minutes)


class _Input:
    """Reads whitespace-separated words and whole lines from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buffer = ""

    def _fill(self) -> bool:
        chunk = self._stream.readline()
        self._buffer += chunk
        return bool(chunk)

    def word(self) -> str:
        while True:
            self._buffer = self._buffer.lstrip()
            if self._buffer:
                break
            if not self._fill():
                raise EOFError
        match = re.match(r"\S+", self._buffer)
        token = match.group(0)
        self._buffer = self._buffer[len(token):]
        return token

    def line(self) -> str:
        while "\n" not in self._buffer:
            if not self._fill():
                if not self._buffer:
                    raise EOFError
                text, self._buffer = self._buffer, ""
                return text
        text, _, self._buffer = self._buffer.partition("\n")
        return text

    def ignore(self) -> None:
        if not self._buffer and not self._fill():
            return
        self._buffer = self._buffer[1:]

    def number(self) -> int:
        token = self.word()
        if not token.isdigit():
            raise ValueError(f"expected a non-negative integer, got {token!r}")
        return int(token)


def _read_option(reader: _Input) -> int:
    while True:
        token = reader.word()
        if token.isdigit() and 1 <= int(token) <= _QUIT:
            return int(token)


def _add(manager: EventManager, reader: _Input, out: TextIO) -> None:
    out.write("Titlu eveniment: ")
    title = reader.line()
    out.write(f"Descriere eveniment {title}: ")
    description = reader.line()
    out.write("Data eveniment (Format: ZZ/LL/AAAA):")
    date_text = reader.word()
    reader.ignore()
    out.write("Ora eveniment (Format hh:mm::ss):")
    time_text = reader.word()
    reader.ignore()
    out.write("Locatie eveniment: ")
    location = reader.line()

    hour = parse_time(time_text)
    day = parse_date(date_text)
    event = Event(manager.next_id(), title, description, day, hour, location)
    manager.add(event)
    out.write(f"Evenimentul {event.title} a fost adaugat cu succes in planificator.\n")


def _delete(manager: EventManager, reader: _Input, out: TextIO) -> None:
    out.write("Introduceti ID-ul evenimentului dorit a fi sters: ")
    event_id = reader.number()
    if manager.find_by_id(event_id) is not None:
        manager.delete(event_id)


def _edit(manager: EventManager, reader: _Input, out: TextIO) -> None:
    out.write("Introduceti ID-ul evenimentului de editat: ")
    event_id = reader.number()
    reader.ignore()
    if manager.find_by_id(event_id) is None:
        out.write("Nu exista eveniment cu acest ID!\n")
        return
    out.write("Titlu nou: ")
    title = reader.line()
    out.write("Descriere noua: ")
    description = reader.line()
    out.write("Data noua (Format: ZZ/LL/AAAA): ")
    date_text = reader.word()
    reader.ignore()
    out.write("Ora noua (Format: hh:mm): ")
    time_text = reader.word()
    reader.ignore()
    out.write("Locatie noua: ")
    location = reader.word()
    reader.ignore()

    new_event = Event(
        event_id, title, description, parse_date(date_text), parse_time(time_text), location
    )
    if manager.edit(event_id, new_event):
        out.write("Eveniment editat cu succes!\n")
    else:
        out.write("Eroare la editarea evenimentului!\n")


def _find_by_id(manager: EventManager, reader: _Input, out: TextIO) -> None:
    out.write("Introduceti ID-ul cautat: ")
    event = manager.find_by_id(reader.number())
    if event is not None:
        out.write(event.details())
    else:
        out.write("Nu exista eveniment cu acest ID!\n")


def _find_by_title(manager: EventManager, reader: _Input, out: TextIO) -> None:
    out.write("Introduceti titlul: ")
    results = manager.find_by_title(reader.line())
    if not results:
        out.write("Nu exista evenimente cu acest titlu!\n")
        return
    for event in results:
        out.write(f"{event.details()}-----\n")


def _save(manager: EventManager, reader: _Input, out: TextIO) -> None:
    out.write("Introduceti numele fisierului pentru salvare: ")
    filename = reader.word()
    try:
        manager.save(filename)
    except OSError:
        print(f"Error in opening {filename}.", file=sys.stderr)
    out.write("Salvare terminata!\n")


def _load(manager: EventManager, reader: _Input, out: TextIO) -> None:
    out.write("Introduceti numele fisierului pentru incarcare: ")
    filename = reader.word()
    try:
        manager.load(filename)
    except OSError:
        print(f"Error in opening {filename}.", file=sys.stderr)
    out.write("Incarcare terminata!\n")


def run(manager: EventManager, stdin: TextIO, stdout: TextIO) -> None:
    """Run the menu loop until the user quits or the input ends.

    Raises ValueError when a typed date, time or id cannot be parsed.
    """
    reader = _Input(stdin)
    try:
        while True:
            stdout.write(_MENU)
            stdout.flush()
            option = _read_option(reader)
            reader.ignore()
            if option == 1:
                _add(manager, reader, stdout)
            elif option == 2:
                _delete(manager, reader, stdout)
            elif option == 3:
                _edit(manager, reader, stdout)
            elif option == 4:
                stdout.write(manager.listing())
            elif option == 5:
                _find_by_id(manager, reader, stdout)
            elif option == 6:
                _find_by_title(manager, reader, stdout)
            elif option == 7:
                stdout.write(manager.upcoming_report())
            elif option == 8:
                _save(manager, reader, stdout)
            elif option == 9:
                _load(manager, reader, stdout)
            else:
                return
            stdout.flush()
    except EOFError:
        return


def main(argv: list[str] | None = None) -> int:
    """Start the interactive planner on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="eventplanner", description="Interactive event planner."
    )
    parser.parse_args(argv)
    try:
        run(EventManager(), sys.stdin, sys.stdout)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0