"""Tests for the Typer CLI."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from disaster_watch import __version__
from disaster_watch.cli import app
from disaster_watch.models import WatchPreferences
from disaster_watch.store import FileStore, load_preferences, save_preferences

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_store(monkeypatch, tmp_path):
    monkeypatch.setenv("DISASTER_WATCH_STORE_DIR", str(tmp_path / "store"))
    return tmp_path / "store"


class TestVersion:
    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestRunCommand:
    def test_writes_json(self, sample_events, tmp_path):
        output = tmp_path / "out.json"
        with patch("disaster_watch.cli.fetch_all_disasters", return_value=sample_events):
            result = runner.invoke(app, ["run", "--output", str(output)])
        assert result.exit_code == 0, result.output
        assert "Total events: 4" in result.output
        assert len(json.loads(output.read_text())) == 4

    def test_filters_and_format(self, sample_events, tmp_path):
        output = tmp_path / "out.geojson"
        with patch("disaster_watch.cli.fetch_all_disasters", return_value=sample_events):
            result = runner.invoke(
                app,
                ["run", "-c", "earthquake", "-f", "geojson", "-o", str(output)],
            )
        assert result.exit_code == 0, result.output
        data = json.loads(output.read_text())
        assert [f["id"] for f in data["features"]] == ["eq1", "eq2"]

    def test_near_radius(self, sample_events, tmp_path):
        output = tmp_path / "out.json"
        with patch("disaster_watch.cli.fetch_all_disasters", return_value=sample_events):
            result = runner.invoke(
                app,
                ["run", "--near", "35.68,139.69", "--radius", "100", "-o", str(output)],
            )
        assert result.exit_code == 0, result.output
        assert [e["id"] for e in json.loads(output.read_text())] == ["eq1"]

    def test_use_prefs(self, sample_events, tmp_path, isolated_store):
        save_preferences(
            FileStore("user", root=isolated_store),
            WatchPreferences(categories=["wildfire", "flood"], min_severity="high"),
        )
        output = tmp_path / "out.json"
        with patch("disaster_watch.cli.fetch_all_disasters", return_value=sample_events):
            result = runner.invoke(app, ["run", "--use-prefs", "-o", str(output)])
        assert result.exit_code == 0, result.output
        assert [e["id"] for e in json.loads(output.read_text())] == ["wf1"]

    def test_no_matches(self, sample_events, tmp_path):
        output = tmp_path / "out.json"
        with patch("disaster_watch.cli.fetch_all_disasters", return_value=sample_events):
            result = runner.invoke(app, ["run", "-q", "atlantis", "-o", str(output)])
        assert result.exit_code == 0
        assert "No events matched" in result.output
        assert not output.exists()

    def test_unknown_category(self):
        result = runner.invoke(app, ["run", "-c", "meteor"])
        assert result.exit_code == 2

    def test_invalid_near(self):
        result = runner.invoke(app, ["run", "--near", "north"])
        assert result.exit_code == 2

    def test_aggregation_failure_exits_1(self):
        with patch(
            "disaster_watch.cli.fetch_all_disasters", side_effect=RuntimeError("boom")
        ):
            result = runner.invoke(app, ["run"])
        assert result.exit_code == 1
        assert "Aggregation failed" in result.output


class TestStatsCommand:
    def test_prints_summary(self, sample_events):
        with patch("disaster_watch.cli.fetch_all_disasters", return_value=sample_events):
            result = runner.invoke(app, ["stats"])
        assert result.exit_code == 0, result.output
        assert "Total events" in result.output
        assert "earthquake" in result.output


class TestPrefsCommands:
    def test_set_show_clear(self, isolated_store):
        result = runner.invoke(
            app,
            [
                "prefs", "set",
                "--categories", "earthquake, flood",
                "--min-severity", "high",
                "--locations", "Brasil,Global",
            ],
        )
        assert result.exit_code == 0, result.output

        prefs = load_preferences(FileStore("user", root=isolated_store))
        assert prefs.categories == ["earthquake", "flood"]
        assert prefs.min_severity == "high"
        assert prefs.locations == ["Brasil", "Global"]

        result = runner.invoke(app, ["prefs", "show"])
        assert "earthquake, flood" in result.output

        result = runner.invoke(app, ["prefs", "clear"])
        assert result.exit_code == 0
        assert load_preferences(FileStore("user", root=isolated_store)) == WatchPreferences()

    def test_set_keeps_omitted_values(self, isolated_store):
        runner.invoke(app, ["prefs", "set", "--categories", "volcano"])
        runner.invoke(app, ["prefs", "set", "--min-severity", "medium"])
        prefs = load_preferences(FileStore("user", root=isolated_store))
        assert prefs.categories == ["volcano"]
        assert prefs.min_severity == "medium"

    def test_set_rejects_unknown_category(self):
        result = runner.invoke(app, ["prefs", "set", "--categories", "asteroid"])
        assert result.exit_code == 2
