"""Unit tests for the sample menu runner and CLI."""

import json
import logging

import pytest
from rich.console import Console

from src.menu import (
    build_sample_pizzas,
    make_pizza,
    check_missing_toppings,
    cheese_analysis,
    describe_menu,
    render,
)
from src.models.models import Cheese, CheeseCatalog, Topping
from src.utils.config import config

import query


@pytest.fixture
def console():
    """Console that records output without terminal styling."""
    return Console(record=True, width=200, color_system=None)


class TestSampleMenu:
    """Tests for the sample pizzas and their descriptions."""

    def test_sample_pizzas(self):
        """Test the menu holds three pizzas, the last unnamed."""
        pizzas = build_sample_pizzas()
        assert [name for name, _ in pizzas] == ["Cheese Pizza", "Meat Lovers' Pizza", None]

    def test_describe_menu(self):
        """Test descriptions are produced in menu order."""
        assert describe_menu(build_sample_pizzas()) == [
            "Cheese Pizza is made with Mozzarella cheese, and has no toppings on it.",
            "Meat Lovers' Pizza is made with Mozzarella, Parmesan cheese, "
            "and has Ham, Meatball, Pepperoni, Sausage, Bacon on it.",
            "This pizza is made with Mozzarella cheese, and has Ham, Pineapple on it.",
        ]


class TestMakePizza:
    """Tests for menu pizza construction and default cheese reporting."""

    def _defaulted_records(self, caplog):
        return [r for r in caplog.records if "defaulting to standard cheese (Mozzarella)" in r.getMessage()]

    def test_default_reported_at_info_when_flag_set(self, caplog, monkeypatch):
        """Test DEFAULT_CHEESE_WARNING raises the report to INFO."""
        monkeypatch.setattr(config, "DEFAULT_CHEESE_WARNING", True)
        caplog.set_level(logging.DEBUG, logger="pizza_service")

        pizza = make_pizza("Cheese Pizza", toppings=[])

        records = self._defaulted_records(caplog)
        assert [r.levelno for r in records] == [logging.INFO]
        assert records[0].pizza_name == "Cheese Pizza"
        assert [c.name for c in pizza.cheeses] == ["Mozzarella"]

    def test_default_reported_at_debug_when_flag_unset(self, caplog, monkeypatch):
        """Test the report stays at DEBUG by default."""
        monkeypatch.setattr(config, "DEFAULT_CHEESE_WARNING", False)
        caplog.set_level(logging.DEBUG, logger="pizza_service")

        make_pizza(None, toppings=[Topping.HAM])

        records = self._defaulted_records(caplog)
        assert [r.levelno for r in records] == [logging.DEBUG]
        assert records[0].pizza_name == "unnamed"

    def test_given_cheeses_not_reported(self, caplog, monkeypatch):
        """Test nothing is reported when cheeses are supplied."""
        monkeypatch.setattr(config, "DEFAULT_CHEESE_WARNING", True)
        caplog.set_level(logging.DEBUG, logger="pizza_service")

        make_pizza("Plain", toppings=[], cheeses=[CheeseCatalog.parmesan()])

        assert self._defaulted_records(caplog) == []


class TestCheeseAnalysis:
    """Tests for the cheese analysis section."""

    def test_standard_cheese(self):
        """Test analysis lines for Mozzarella."""
        assert cheese_analysis(CheeseCatalog.standard()) == [
            "What is Mozzarella cheese made from?",
            "Animal type: Italian buffalo.",
            "Mozzarella cheese is made from Italian buffalo milk and has 22.00% fat milk.",
        ]

    def test_cheese_without_origin(self):
        """Test unknown name and origin match the description's fallbacks."""
        lines = cheese_analysis(Cheese())
        assert lines[0] == "What is An Unknown cheese made from?"
        assert lines[1] == "Animal type: Unknown animal."
        assert lines[2] == "An Unknown cheese."


class TestMissingToppings:
    """Tests for the required toppings demonstration."""

    def test_missing_toppings_reported(self):
        """Test building a pizza without toppings reports a validation error."""
        error = check_missing_toppings()
        assert error is not None
        assert "toppings" in error


class TestRender:
    """Tests for rendering the menu to a console."""

    def test_render_text(self, console, monkeypatch):
        """Test text output includes descriptions and cheese analysis."""
        monkeypatch.setattr(config, "SHOW_CHEESE_ANALYSIS", True)
        render(console, output_format="text")
        output = console.export_text()

        assert "Cheese Pizza is made with Mozzarella cheese, and has no toppings on it." in output
        assert "What is Mozzarella cheese made from?" in output

    def test_render_text_without_analysis(self, console, monkeypatch):
        """Test the cheese analysis can be turned off."""
        monkeypatch.setattr(config, "SHOW_CHEESE_ANALYSIS", False)
        render(console, output_format="text")
        assert "made from?" not in console.export_text()

    def test_render_analysis_uses_configured_cheese(self, console, monkeypatch):
        """Test ANALYSIS_CHEESE picks the analysed catalog cheese."""
        monkeypatch.setattr(config, "SHOW_CHEESE_ANALYSIS", True)
        monkeypatch.setattr(config, "ANALYSIS_CHEESE", "parmesan")
        render(console, output_format="text")
        assert "Animal type: cow." in console.export_text()

    def test_render_json(self, console, monkeypatch):
        """Test JSON output holds names, descriptions and pizza data."""
        monkeypatch.setattr(config, "SHOW_CHEESE_ANALYSIS", False)
        render(console, output_format="json")
        data = json.loads(console.export_text())

        assert len(data) == 3
        assert data[1]["name"] == "Meat Lovers' Pizza"
        assert data[1]["pizza"]["toppings"] == ["Ham", "Meatball", "Pepperoni", "Sausage", "Bacon"]
        assert data[2]["name"] is None
        assert data[2]["pizza"]["cheeses"][0]["name"] == "Mozzarella"

    def test_render_shows_missing_toppings(self, console, monkeypatch):
        """Test the debug section shows the rejected pizza."""
        monkeypatch.setattr(config, "SHOW_CHEESE_ANALYSIS", False)
        render(console, output_format="text", show_missing_toppings=True)
        assert "Pizza without toppings was rejected" in console.export_text()

    def test_render_rejects_unknown_format(self, console):
        """Test unsupported output formats raise ValueError."""
        with pytest.raises(ValueError, match="output_format"):
            render(console, output_format="xml")


class TestQueryCli:
    """Tests for query.py flag parsing and error handling."""

    def test_parse_no_flags(self):
        """Test no flags gives configured format and no debug."""
        assert query.parse_args([]) == (None, False)

    def test_parse_flags(self):
        """Test --json and --debug are recognised."""
        assert query.parse_args(["--json", "--debug"]) == ("json", True)

    def test_unknown_flag_exits(self):
        """Test unknown flags exit with status 1."""
        with pytest.raises(SystemExit) as exc:
            query.parse_args(["--yaml"])
        assert exc.value.code == 1

    def test_run_menu_failure_exits(self, monkeypatch):
        """Test rendering failures exit with status 1."""
        def broken_render(*args, **kwargs):
            raise ValueError("boom")

        monkeypatch.setattr(query, "render", broken_render)
        with pytest.raises(SystemExit) as exc:
            query.run_menu("text")
        assert exc.value.code == 1
