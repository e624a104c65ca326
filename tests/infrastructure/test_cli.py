"""Tests for the beerstock command-line interface."""

import pytest
from click.testing import CliRunner

from beerstock.application.stock_manager import StockManager
from beerstock.infrastructure.cli import beer_commands
from beerstock.infrastructure.cli.main import cli
from tests.fakes import FakeBeerRepository


@pytest.fixture
def runner(monkeypatch):
    repo = FakeBeerRepository()
    monkeypatch.setattr(beer_commands, "stock_manager", lambda: StockManager(repo))
    return CliRunner()


def _create(runner, name="Brahma", quantity="10"):
    return runner.invoke(cli, [
        "beer", "create", "--name", name, "--brand", "Ambev",
        "--type", "lager", "--max", "50", "--quantity", quantity,
    ])


class TestBeerCommands:

    def test_create(self, runner):
        result = _create(runner)

        assert result.exit_code == 0
        assert "Beer #1 'Brahma' created with 10 of 50" in result.output

    def test_create_duplicate_fails(self, runner):
        _create(runner)

        result = _create(runner)

        assert result.exit_code == 1
        assert "already registered" in result.output

    def test_show(self, runner):
        _create(runner)

        result = runner.invoke(cli, ["beer", "show", "--name", "Brahma"])

        assert result.exit_code == 0
        assert "Stock: 10 / 50" in result.output

    def test_show_unknown_fails(self, runner):
        result = runner.invoke(cli, ["beer", "show", "--name", "Skol"])

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_list_empty(self, runner):
        result = runner.invoke(cli, ["beer", "list"])

        assert result.exit_code == 0
        assert "No beers found." in result.output

    def test_list(self, runner):
        _create(runner, "Brahma")
        _create(runner, "Skol")

        result = runner.invoke(cli, ["beer", "list"])

        assert "Brahma" in result.output
        assert "Skol" in result.output

    def test_increment_and_decrement(self, runner):
        _create(runner)

        inc = runner.invoke(cli, ["beer", "increment", "--id", "1", "--quantity", "10"])
        dec = runner.invoke(cli, ["beer", "decrement", "--id", "1", "--quantity", "20"])

        assert "Stock: 20 / 50" in inc.output
        assert "Stock: 0 / 50" in dec.output

    def test_increment_over_capacity_fails(self, runner):
        _create(runner)

        result = runner.invoke(cli, ["beer", "increment", "--id", "1", "--quantity", "45"])

        assert result.exit_code == 1
        assert "above max capacity" in result.output

    def test_delete(self, runner):
        _create(runner)

        result = runner.invoke(cli, ["beer", "delete", "--id", "1"])
        missing = runner.invoke(cli, ["beer", "delete", "--id", "1"])

        assert result.exit_code == 0
        assert "Beer #1 deleted." in result.output
        assert missing.exit_code == 1

    def test_padded_name_is_found_by_plain_name(self, runner):
        _create(runner, name=" Brahma ")

        result = runner.invoke(cli, ["beer", "show", "--name", "Brahma"])
        duplicate = _create(runner, name="Brahma")

        assert result.exit_code == 0
        assert "'Brahma'" in result.output
        assert duplicate.exit_code == 1
