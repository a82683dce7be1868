# tests/test_task_store.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from orion_tasks.tasks.task_models import Deadline, Event, Todo
from orion_tasks.tasks.task_store import (
    CsvTaskStore,
    TaskStoreInitError,
    TaskStoreWriteError,
    task_to_row,
)


def _sample_tasks():
    return [
        Todo(id=1, description="buy milk", completed=True),
        Deadline(id=2, description="submit report", due_at=datetime(2024, 12, 1, 23, 59)),
        Event(
            id=5,
            description="team sync",
            start_at=datetime(2024, 12, 2, 9, 0),
            end_at=datetime(2024, 12, 2, 10, 30),
        ),
    ]


def test_missing_or_empty_file_reads_as_empty(csv_store: CsvTaskStore) -> None:
    assert csv_store.read() == []
    csv_store.path.write_text("", "utf-8")
    assert csv_store.read() == []


def test_write_then_read_preserves_order_and_fields(csv_store: CsvTaskStore) -> None:
    tasks = _sample_tasks()
    csv_store.write(tasks)
    assert csv_store.read() == tasks


def test_on_disk_format(csv_store: CsvTaskStore) -> None:
    csv_store.write(_sample_tasks())
    assert csv_store.path.read_text("utf-8").splitlines() == [
        "1,TODO,buy milk,true",
        "2,DEADLINE,submit report,false,2024-12-01T23:59:00",
        "5,EVENT,team sync,false,2024-12-02T09:00:00|2024-12-02T10:30:00",
    ]
    assert not (csv_store.path.parent / "tasks.csv.tmp").exists()


def test_write_overwrites_previous_contents(csv_store: CsvTaskStore) -> None:
    csv_store.write(_sample_tasks())
    csv_store.write([Todo(id=1, description="only one")])
    assert csv_store.path.read_text("utf-8") == "1,TODO,only one,false\n"


def test_reads_minute_precision_and_skips_blank_lines(csv_store: CsvTaskStore) -> None:
    csv_store.path.write_text(
        "1,TODO,read book,TRUE\n"
        "\n"
        "2,DEADLINE,return book,false,2019-12-02T18:00\n"
        "3,EVENT,project meeting,false,2019-08-06T14:00|2019-08-06T16:00\n",
        "utf-8",
    )
    tasks = csv_store.read()
    assert [t.id for t in tasks] == [1, 2, 3]
    assert tasks[0].completed is True
    assert tasks[1] == Deadline(
        id=2, description="return book", due_at=datetime(2019, 12, 2, 18, 0)
    )
    assert tasks[2].end_at == datetime(2019, 8, 6, 16, 0)


def test_description_with_delimiter_survives_round_trip(csv_store: CsvTaskStore) -> None:
    tasks = [Todo(id=1, description='eggs, milk, "fresh" bread')]
    csv_store.write(tasks)
    assert csv_store.read() == tasks


@pytest.mark.parametrize(
    "line",
    [
        "1,TODO,buy milk",
        "x,TODO,buy milk,false",
        "0,TODO,buy milk,false",
        "1,CHORE,buy milk,false",
        "1,TODO,buy milk,maybe",
        "1,TODO,,false",
        "1,DEADLINE,   ,false,2024-12-01T23:59:00",
        "1,TODO,buy, milk,false",
        "1,DEADLINE,submit,false",
        "1,DEADLINE,submit,false,tomorrow",
        "1,EVENT,sync,false,2024-12-02T09:00:00",
    ],
)
def test_malformed_rows_raise_init_error(csv_store: CsvTaskStore, line: str) -> None:
    csv_store.path.write_text("1,TODO,fine,false\n" + line + "\n", "utf-8")
    with pytest.raises(TaskStoreInitError, match="line 2"):
        csv_store.read()


def test_undecodable_file_raises_init_error(csv_store: CsvTaskStore) -> None:
    csv_store.path.write_bytes(b"1,TODO,\xff\xfe,false\n")
    with pytest.raises(TaskStoreInitError):
        csv_store.read()


def test_write_failure_raises_and_keeps_nothing_partial(tmp_path: Path) -> None:
    target = tmp_path / "tasks.csv"
    target.mkdir()  # a directory cannot be replaced by a file
    store = CsvTaskStore(target)
    with pytest.raises(TaskStoreWriteError):
        store.write([Todo(id=1, description="x")])
    assert target.is_dir()
    assert not (tmp_path / "tasks.csv.tmp").exists()


def test_unencodable_description_raises_write_error(csv_store: CsvTaskStore) -> None:
    csv_store.write([Todo(id=1, description="keep me")])

    # lone surrogate, as produced by surrogateescape-decoded input
    with pytest.raises(TaskStoreWriteError):
        csv_store.write([Todo(id=1, description="bad \udcff")])

    assert csv_store.read() == [Todo(id=1, description="keep me")]
    assert not (csv_store.path.parent / "tasks.csv.tmp").exists()


def test_stores_with_different_suffixes_use_separate_temp_files(tmp_path: Path) -> None:
    csv_a = CsvTaskStore(tmp_path / "tasks.csv")
    csv_b = CsvTaskStore(tmp_path / "tasks.bak")
    (tmp_path / "tasks.tmp").mkdir()  # would block a shared temp name

    csv_a.write([Todo(id=1, description="a")])
    csv_b.write([Todo(id=2, description="b")])

    assert csv_a.read() == [Todo(id=1, description="a")]
    assert csv_b.read() == [Todo(id=2, description="b")]


def test_unknown_task_type_is_rejected() -> None:
    with pytest.raises(TypeError, match="Unknown task type"):
        task_to_row(object())  # type: ignore[arg-type]
