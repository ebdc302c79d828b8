# eventplanner

A small event planner. It keeps a list of events. Each event has an ID, a title, a description, a date, a time of day and a location. You can add, edit, delete and search events. You can also see the events that start within the next 24 hours. The list can be saved to a plain-text file and loaded back later.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Interactive use

```
eventplanner
```

This opens a numbered menu. Its prompts are in Romanian.

1. Add an event. Enter the title, the description, the date, the time and the location.
2. Delete an event by ID. Nothing happens if no event has that ID.
3. Edit an event by ID. The event keeps its ID. The new location is read as a single word.
4. List all events.
5. Find an event by ID.
6. Find events by title. The title must match exactly.
7. Show the events that start within the next 24 hours, with the time left until each one.
8. Save the events to a file.
9. Load events from a file.
10. Quit.

The program also stops when the input ends.

Enter dates as `DD/MM/YYYY`. Enter times as `hh:mm`, without seconds; the seconds are always taken as zero.

If a date, a time or an ID cannot be parsed, the program prints `error: ...` to standard error and exits with status 1. If a file cannot be opened for saving or loading, the program prints `Error in opening <name>.` to standard error and goes back to the menu.

## Storage format

Each event takes one line in the file. The fields are separated by `|`:

```
id|title|description|DD/MM/YYYY|hh:mm:ss|location
```

Loading a file replaces the current list. New IDs then start one past the highest ID that was loaded.

## Library use

```python
from datetime import date, time
from eventplanner.event import Event
from eventplanner.manager import EventManager

manager = EventManager()
manager.add(Event(manager.next_id(), "Standup", "Daily sync",
                  date(2025, 8, 1), time(9, 30), "Room 2"))
manager.save("events.txt")

print(manager.listing())
print(manager.upcoming_report())
```

### `eventplanner.event`

`Event` is a dataclass with the fields `id`, `title`, `description`, `date`, `hour` and `location`.

- `when()` returns the date and the time of day combined into one `datetime`.
- `details()` returns a text description that includes the ID.
- `str(event)` returns the same description without the ID.
- Events compare with `<` by date and time, so `sorted()` works on them.
- `serialize()` turns an event into one line in the storage format.
- `Event.deserialize(line)` does the reverse. It raises `ValueError` on a malformed line.

### `eventplanner.manager`

`EventManager` holds events in the order they were added. It supports `len()` and iteration.

- `next_id()` hands out IDs, starting from 0. `reset_current_id(id)` sets the next ID to be handed out.
- `add(event)` adds an event.
- `delete(event_id)` removes every event with that ID.
- `edit(event_id, new_event)` replaces the first event with that ID. The event keeps its ID.
- Both `delete` and `edit` return whether anything changed.
- `find_by_id(event_id)` returns the event, or `None`.
- `find_by_title(title)` returns a list of matching events.
- `upcoming(now=None, window=timedelta(hours=24))` returns `(event, time_left)` pairs for events that start within `window` of `now`.
- `upcoming_report(now=None)` returns those pairs as text.
- `listing()` returns the details of every event.
- `save(filename)` writes the events to a file. `load(filename)` reads them back.

For `upcoming()` and `upcoming_report()`, `now` is taken as UTC. It may be a naive UTC value or a timezone-aware value, and it defaults to the current time. Event times are taken as local time at a fixed offset of UTC+3 (`UTC_OFFSET`).

### `eventplanner.cli`

- `parse_date(text)` parses `DD/MM/YYYY`.
- `parse_time(text)` parses `hh:mm`.
- `run(manager, stdin, stdout)` runs the menu on any pair of text streams.
- `main()` runs the menu on standard input and output. It is the function behind the `eventplanner` command.

## Limitations

- Events are kept in memory only. They are lost when the program ends unless you save them to a file with menu option 8 or `save()`.
- The time zone offset is fixed at UTC+3. It does not follow daylight saving time or the local settings of your system.
- There are no reminders in the background. Upcoming events are shown only when you ask for them.