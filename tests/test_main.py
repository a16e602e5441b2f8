import asyncio
import logging

import pytest

import main
from dashboard.storage import Mozlz4Storage
from dashboard.store import TreeStore
from dashboard.tree import find_folder


@pytest.fixture
def run_menu(tmp_path, monkeypatch):
    data_path = tmp_path / "startpage.jsonlz4"

    def run(*answers):
        replies = iter(answers)
        monkeypatch.setattr("builtins.input", lambda *_args: next(replies))
        try:
            with pytest.raises(SystemExit) as exc:
                main.main(["--data", str(data_path)])
        finally:
            logging.basicConfig(level=logging.WARNING, handlers=[logging.NullHandler()], force=True)
        return exc.value.code

    run.data_path = data_path
    return run


def test_show_then_exit(run_menu, capsys):
    assert run_menu("1", "0") == 0

    out = capsys.readouterr().out
    assert "Tech & News" in out
    assert "[add-btn]" in out


def test_move_from_menu_is_persisted(run_menu):
    assert run_menu("5", "github", "tech-folder", "q") == 0

    document = asyncio.run(TreeStore(Mozlz4Storage(run_menu.data_path)).get_sections())
    assert len(find_folder(document, "tech-folder").items) == 5


def test_storage_errors_are_reported(run_menu, capsys):
    run_menu.data_path.write_bytes(b"garbage")

    assert run_menu("1", "0") == 0
    assert "Invalid mozlz4 format" in capsys.readouterr().out


def test_invalid_option(run_menu, capsys):
    assert run_menu("42", "0") == 0
    assert "Invalid option." in capsys.readouterr().out
