"""Tests for the seed/inspection CLI, run against the in-memory store."""

from contextlib import contextmanager

import pytest
from typer.testing import CliRunner

from phonebook import cli
from phonebook.infrastructure import InMemoryPersonRepository

runner = CliRunner()


@pytest.fixture
def repository(monkeypatch):
    repo = InMemoryPersonRepository([("Ada Lovelace", "3944532352"), ("Dan Abramov", "1243234345")])

    @contextmanager
    def fake_open_repository(settings):
        yield repo

    monkeypatch.setattr(cli, "open_repository", fake_open_repository)
    monkeypatch.setattr(cli, "load_env_file", lambda: None)
    return repo


def test_list_entries(repository):
    result = runner.invoke(cli.app, [])
    assert result.exit_code == 0
    assert result.output == "phonebook:\nAda Lovelace 3944532352\nDan Abramov 1243234345\n"


def test_add_entry(repository):
    result = runner.invoke(cli.app, ["Arto Hellas", "0401234560"])
    assert result.exit_code == 0
    assert result.output == "added Arto Hellas number 0401234560 to phonebook\n"
    assert repository.count() == 3


def test_add_rejected_entry(repository):
    result = runner.invoke(cli.app, ["Ada Lovelace", "0409999999"])
    assert result.exit_code == 1
    assert "name must be unique" in result.output
    assert repository.count() == 2


@pytest.mark.parametrize("args", [["only-a-name"], ["Arto Hellas", "0401234560", "extra"]])
def test_wrong_argument_count_is_usage_error(repository, args):
    result = runner.invoke(cli.app, args)
    assert result.exit_code == 2
    assert repository.count() == 2


def test_memory_store_from_environment(monkeypatch):
    monkeypatch.setattr(cli, "load_env_file", lambda: None)
    result = runner.invoke(cli.app, ["Arto Hellas", "0401234560"], env={"NEO4J_URI": "memory://"})
    assert result.exit_code == 0
    assert "added Arto Hellas" in result.output
