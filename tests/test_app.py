import json
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from charts.ui import CHART_ERROR_MESSAGE
from config.settings import DATA_BASE_ENV
from crime_map.ui import MAP_ERROR_MESSAGE
from summary_tables.logic import LOAD_ERROR_MESSAGE

APP_PATH = Path(__file__).resolve().parents[1] / "app.py"


@pytest.fixture
def run_app(tmp_path, monkeypatch, payloads):
    def _run(missing):
        for filename, payload in payloads.items():
            if filename != missing:
                (tmp_path / filename).write_text(json.dumps(payload), encoding="utf-8")
        monkeypatch.setenv(DATA_BASE_ENV, str(tmp_path))
        at = AppTest.from_file(str(APP_PATH), default_timeout=60)
        at.run()
        assert not at.exception
        return at

    return _run


def _messages(at):
    return [element.value for element in at.markdown]


def _count(at, message):
    return sum(message in text for text in _messages(at))


def test_missing_trend_fails_only_the_trend_table(run_app):
    at = run_app("tren.json")

    assert _count(at, LOAD_ERROR_MESSAGE) == 1
    assert _count(at, MAP_ERROR_MESSAGE) == 0
    assert _count(at, CHART_ERROR_MESSAGE) == 0
    # Ranking and percent tables still render.
    assert len(at.dataframe) == 2


def test_missing_percent_fails_only_the_percent_table(run_app):
    at = run_app("persen_kekerasan.json")

    assert _count(at, LOAD_ERROR_MESSAGE) == 1
    assert _count(at, MAP_ERROR_MESSAGE) == 0
    assert len(at.dataframe) == 2


def test_missing_map_dataset_replaces_only_the_map(run_app):
    at = run_app("gangguan.json")

    assert _count(at, MAP_ERROR_MESSAGE) == 1
    assert _count(at, LOAD_ERROR_MESSAGE) == 0
    assert _count(at, CHART_ERROR_MESSAGE) == 0
    assert len(at.dataframe) == 3


def test_missing_chart_dataset_shows_chart_error(run_app):
    at = run_app("10besar.json")

    assert _count(at, CHART_ERROR_MESSAGE) == 1
    assert _count(at, MAP_ERROR_MESSAGE) == 0
    assert _count(at, LOAD_ERROR_MESSAGE) == 0
    assert len(at.dataframe) == 3


def test_ranking_falls_back_to_crime_dataset(run_app):
    at = run_app("top5.json")

    assert _count(at, LOAD_ERROR_MESSAGE) == 0
    ranking = at.dataframe[0].value
    assert list(ranking["Region"]) == ["Polda Jawa Timur", "Polda Metro Jaya", "Polda Papua"]
