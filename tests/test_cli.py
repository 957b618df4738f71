# SPDX-License-Identifier: MIT

from pathlib import Path

import yaml
from click.testing import Result
from typer.testing import CliRunner

from keepsake import configuration
from keepsake.repository.book import BOOK_REPO
from keepsake.repository.note import NOTE_REPO
from keepsake.repository.phrase import PHRASE_REPO
from keepsake.template.phrase import DEFAULT_PHRASES
from keepsake.terminal.app import app

runner = CliRunner()


def invoke(*args: str, input: str | None = None) -> Result:
    return runner.invoke(app, ["--no-header", *args], input=input)


def test_book_lifecycle(fresh_app: Path) -> None:
    result = invoke("book", "add", "Dune", "--author", "Frank Herbert")
    assert result.exit_code == 0, result.output
    assert "Dune" in result.output

    result = invoke("book", "list")
    assert result.exit_code == 0, result.output
    assert "Dune" in result.output

    result = invoke("book", "start", "1", "--total-pages", "400")
    assert result.exit_code == 0, result.output
    assert "reading" in result.output

    result = invoke("book", "progress", "1", "100")
    assert result.exit_code == 0, result.output
    assert "25%" in result.output

    result = invoke("book", "complete", "1", "--rating", "9")
    assert result.exit_code == 0, result.output

    result = invoke("book", "list", "--rating", "high", "--period", "this_month")
    assert "Dune" in result.output
    result = invoke("book", "list", "--rating", "low")
    assert "Dune" not in result.output

    books = BOOK_REPO.get_all_records()
    assert len(books) == 1
    assert books[0]["state"]["status"] == "completed"
    assert (fresh_app / "books.yaml").is_file()


def test_book_rejects_invalid_input(fresh_app: Path) -> None:
    assert invoke("book", "add", "   ").exit_code == 2
    assert invoke("book", "add", "Dune", "--rating", "11").exit_code == 2

    invoke("book", "add", "Dune")
    assert invoke("book", "show", "7").exit_code == 2
    assert invoke("book", "progress", "1", "10").exit_code == 2

    assert BOOK_REPO.count() == 1


def test_delete_asks_for_confirmation(fresh_app: Path) -> None:
    invoke("book", "add", "Dune")
    invoke("book", "list")

    result = invoke("book", "delete", "1", input="n\n")
    assert result.exit_code == 1
    assert BOOK_REPO.count() == 1

    result = invoke("book", "delete", "1", "--yes")
    assert result.exit_code == 0, result.output
    assert "Deleted 1 book(s)" in result.output
    assert BOOK_REPO.count() == 0


def test_delete_counts_only_existing_books(fresh_app: Path) -> None:
    invoke("book", "add", "Dune")
    invoke("book", "add", "Emma")
    invoke("book", "list")
    assert invoke("book", "delete", "1", "--yes").exit_code == 0

    result = invoke("book", "delete", "1,2", input="y\n")
    assert result.exit_code == 0, result.output
    assert "Delete 1 book(s)?" in result.output
    assert "Deleted 1 book(s)" in result.output

    result = invoke("book", "delete", "1")
    assert result.exit_code == 0, result.output
    assert "No book(s) to delete" in result.output
    assert BOOK_REPO.count() == 0


def test_book_add_rejects_fields_for_another_status(fresh_app: Path) -> None:
    assert invoke("book", "add", "Dune", "--rating", "9").exit_code == 2
    assert (
        invoke(
            "book", "add", "Dune", "--status", "completed", "--current-page", "5"
        ).exit_code
        == 2
    )
    assert BOOK_REPO.count() == 0

    result = invoke("book", "add", "Dune", "--status", "completed", "--rating", "9")
    assert result.exit_code == 0, result.output
    assert BOOK_REPO.get_all_records()[0]["state"]["rating"] == 9


def test_unreadable_data_files_do_not_break_commands(fresh_app: Path) -> None:
    (fresh_app / "books.yaml").write_text("books: [{title: x, id: abc}]\n")
    (fresh_app / "daily_state.yaml").write_text("daily_state: {day: '2020-01-01'}\n")

    result = invoke("book", "list")
    assert result.exit_code == 0, result.output

    invoke("phrase", "restore-defaults")
    result = invoke("phrase", "tonight")
    assert result.exit_code == 0, result.output
    assert "practice: not yet" in result.output


def test_evening_ritual(fresh_app: Path) -> None:
    result = invoke("phrase", "restore-defaults")
    assert result.exit_code == 0, result.output
    assert f"Restored {len(DEFAULT_PHRASES)} default phrase(s)" in result.output

    result = invoke("phrase", "tonight")
    assert result.exit_code == 0, result.output
    assert "practice: not yet" in result.output

    result = invoke("phrase", "done")
    assert "practice: done" in result.output

    result = invoke("phrase", "light")
    assert "Light off" in result.output

    assert PHRASE_REPO.count() == len(DEFAULT_PHRASES)


def test_notes_and_search(fresh_app: Path) -> None:
    result = invoke("note", "add", "Groceries", "--text", "oat milk", "--tag", "home")
    assert result.exit_code == 0, result.output

    result = invoke("note", "pin", "1")
    assert "Pinned" in result.output

    result = invoke("search", "milk")
    assert result.exit_code == 0, result.output
    assert "Groceries" in result.output

    result = invoke("search", "milk", "--kind", "book")
    assert "Groceries" not in result.output

    notes = NOTE_REPO.get_all_records()
    assert notes[0]["pinned"] is True
    assert notes[0]["tags"] == ["home"]


def test_config_set(fresh_app: Path) -> None:
    result = invoke("config", "set", "--yearly-reading-goal", "30")
    assert result.exit_code == 0, result.output
    assert "Configuration updated" in result.output

    saved = yaml.safe_load(configuration.APP_CONFIG_PATH.read_text())
    assert saved["yearly_reading_goal"] == 30

    result = invoke("config", "view")
    assert result.exit_code == 0, result.output
    assert "30" in result.output
