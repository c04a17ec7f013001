# tests/test_cli.py
import pytest
from click.testing import CliRunner

from cli.main import cli
from core.config import get_settings
from core.sa.database import Database
from core.sa.models import Person, Book

@pytest.fixture
def db_url(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'cli.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    get_settings.cache_clear()
    yield url
    get_settings.cache_clear()

@pytest.fixture
def runner():
    return CliRunner()

def test_init_db(runner, db_url):
    result = runner.invoke(cli, ["init-db"])
    assert result.exit_code == 0, result.output
    assert "Schema is up to date" in result.output

def test_seed_is_repeatable(runner, db_url):
    assert runner.invoke(cli, ["seed"]).exit_code == 0
    result = runner.invoke(cli, ["seed"])
    assert result.exit_code == 0, result.output
    assert "Skipping existing book" in result.output

    with Database(db_url) as database, database.session_scope() as session:
        jack = session.query(Person).one()
        assert jack.email == "jack@email.com"
        books = session.query(Book).all()
        assert sorted(b.call_number for b in books) == [1234, 2345, 3456]
        assert {b.person_id for b in books} == {jack.id}

def test_serve_exits_when_database_unreachable(runner, tmp_path, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'no' / 'such' / 'dir.db'}")
    get_settings.cache_clear()
    calls = []
    monkeypatch.setattr("cli.commands.serve.uvicorn.run", lambda *args, **kwargs: calls.append(kwargs))

    result = runner.invoke(cli, ["serve"])
    get_settings.cache_clear()

    assert result.exit_code == 1
    assert calls == []

def test_serve_runs_uvicorn(runner, db_url, monkeypatch):
    calls = []
    monkeypatch.setattr("cli.commands.serve.uvicorn.run", lambda app, **kwargs: calls.append((app, kwargs)))

    result = runner.invoke(cli, ["serve", "--port", "9090"])

    assert result.exit_code == 0, result.output
    assert calls == [("api.main:app", {"host": "0.0.0.0", "port": 9090})]
