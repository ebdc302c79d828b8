import io
from datetime import date, time

import pytest

from eventplanner.cli import main, parse_date, parse_time, run
from eventplanner.event import Event
from eventplanner.manager import EventManager


def _party(event_id=0):
    return Event(event_id, "Party", "Fun time", date(2025, 8, 5), time(18, 30), "Home")


def _run(manager, text):
    out = io.StringIO()
    run(manager, io.StringIO(text), out)
    return out.getvalue()


def test_parse_date():
    assert parse_date("05/08/2025") == date(2025, 8, 5)


def test_parse_date_invalid():
    with pytest.raises(ValueError):
        parse_date("aa/08/2025")


def test_parse_time_hours_minutes():
    assert parse_time("14:30") == time(14, 30)
    assert parse_time("9:05") == time(9, 5)


def test_parse_time_ignores_seconds():
    assert parse_time("10:30:45") == time(10, 30)


@pytest.mark.parametrize("text", ["abc", "25:00", "12:xx"])
def test_parse_time_invalid(text):
    with pytest.raises(ValueError):
        parse_time(text)


def test_add_event():
    manager = EventManager()
    output = _run(manager, "1\nParty\nFun time\n05/08/2025\n18:30\nHome\n10\n")
    assert list(manager) == [_party(0)]
    assert "Evenimentul Party a fost adaugat cu succes in planificator." in output


def test_add_assigns_increasing_ids():
    manager = EventManager()
    _run(
        manager,
        "1\nA\nd\n01/01/2025\n10:00\nX\n1\nB\nd\n02/01/2025\n11:00\nY\n10\n",
    )
    assert [ev.id for ev in manager] == [0, 1]
    assert [ev.title for ev in manager] == ["A", "B"]


def test_delete_event():
    manager = EventManager([_party(0), _party(1)])
    _run(manager, "2\n0\n10\n")
    assert [ev.id for ev in manager] == [1]


def test_delete_missing_id_keeps_events():
    manager = EventManager([_party(0)])
    _run(manager, "2\n7\n10\n")
    assert len(manager) == 1


def test_edit_event():
    manager = EventManager([_party(0)])
    output = _run(manager, "3\n0\nNew\nDesc\n01/01/2026\n09:15\nOffice\n10\n")
    assert "Eveniment editat cu succes!" in output
    assert list(manager) == [
        Event(0, "New", "Desc", date(2026, 1, 1), time(9, 15), "Office")
    ]


def test_edit_missing_id():
    manager = EventManager([_party(0)])
    output = _run(manager, "3\n5\n10\n")
    assert "Nu exista eveniment cu acest ID!" in output
    assert list(manager) == [_party(0)]


def test_show_events_empty_and_filled():
    assert "Nu exista evenimente de afisat!" in _run(EventManager(), "4\n10\n")
    event = _party(0)
    assert event.details() in _run(EventManager([event]), "4\n10\n")


def test_find_by_id():
    event = _party(3)
    assert event.details() in _run(EventManager([event]), "5\n3\n10\n")
    assert "Nu exista eveniment cu acest ID!" in _run(EventManager([event]), "5\n4\n10\n")


def test_find_by_title():
    event = _party(0)
    output = _run(EventManager([event]), "6\nParty\n10\n")
    assert event.details() + "-----\n" in output
    missing = _run(EventManager([event]), "6\nNothing\n10\n")
    assert "Nu exista evenimente cu acest titlu!" in missing


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "events.txt"
    events = [_party(0), Event(4, "Meet", "Talk", date(2025, 9, 1), time(8, 0), "Office")]
    saved = _run(EventManager(events), f"8\n{path}\n10\n")
    assert "Salvare terminata!" in saved

    loaded = EventManager()
    output = _run(loaded, f"9\n{path}\n10\n")
    assert "Incarcare terminata!" in output
    assert list(loaded) == events
    assert loaded.next_id() == 5


def test_out_of_range_options_are_skipped():
    output = _run(EventManager(), "0\n11\n4\n10\n")
    assert "Nu exista evenimente de afisat!" in output


def test_end_of_input_stops():
    manager = EventManager([_party(0)])
    output = _run(manager, "")
    assert "\t10. Iesire\n" in output
    assert len(manager) == 1


def test_bad_date_raises():
    with pytest.raises(ValueError):
        _run(EventManager(), "1\nA\nd\nxx/01/2025\n10:00\nX\n10\n")


def test_main_quits(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("10\n"))
    assert main([]) == 0
    assert "Introduceti optiunea dorita:" in capsys.readouterr().out


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\nA\nd\n01/01/2025\nzz\nX\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err