"""Tests for vtcore settings, logging and tracing setup."""

import json
import logging
import sys

import pytest
from pydantic import ValidationError

from conftest import make_motif, make_style_prior
from vtcore import (
    ENGINE_LOGGERS,
    JsonFormatter,
    Settings,
    get_logger,
    get_settings,
    setup_logging,
    setup_tracing,
    traced,
)
from vtharmony import generate_progression_candidates
from vtmotif import calculate_motif_score


@pytest.fixture
def engine_loggers():
    """Snapshot and restore the engine loggers around a test."""
    loggers = [logging.getLogger(name) for name in ENGINE_LOGGERS]
    saved = [(list(lg.handlers), lg.level, lg.propagate) for lg in loggers]
    yield loggers
    for lg, (handlers, level, propagate) in zip(loggers, saved):
        lg.handlers[:] = handlers
        lg.setLevel(level)
        lg.propagate = propagate


def json_lines(text):
    return [json.loads(line) for line in text.splitlines() if line.strip()]


class TestSettings:
    def test_defaults(self, monkeypatch):
        for var in ("VT_LOG_LEVEL", "VT_LOG_FORMAT", "VT_OTEL_ENDPOINT", "VT_ENV"):
            monkeypatch.delenv(var, raising=False)

        s = get_settings()
        assert s.VT_LOG_LEVEL == "INFO"
        assert s.VT_LOG_FORMAT == "json"
        assert s.VT_OTEL_ENDPOINT is None
        assert s.VT_ENV == "development"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("VT_LOG_LEVEL", "debug")
        monkeypatch.setenv("VT_LOG_FORMAT", "TEXT")
        monkeypatch.setenv("VT_ENV", "ci")

        s = get_settings()
        assert s.VT_LOG_LEVEL == "DEBUG"
        assert s.VT_LOG_FORMAT == "text"
        assert s.VT_ENV == "ci"

    def test_memoized(self):
        assert get_settings() is get_settings()

    def test_blank_endpoint_is_none(self):
        assert Settings(VT_OTEL_ENDPOINT="  ").VT_OTEL_ENDPOINT is None

    def test_invalid_values(self):
        with pytest.raises(ValidationError):
            Settings(VT_LOG_LEVEL="LOUD")
        with pytest.raises(ValidationError):
            Settings(VT_LOG_FORMAT="xml")


class TestJsonFormatter:
    def test_basic_fields(self):
        record = logging.LogRecord("vtharmony", logging.INFO, __file__, 1, "hello %s", ("C",), None)
        payload = json.loads(JsonFormatter().format(record))

        assert payload["level"] == "INFO"
        assert payload["name"] == "vtharmony"
        assert payload["message"] == "hello C"
        assert "time" in payload

    def test_engine_context_fields(self):
        record = logging.LogRecord("vtmotif.scoring", logging.DEBUG, __file__, 1, "scored", None, None)
        record.motif_id = "hook-1"
        record.overall = 72.5
        payload = json.loads(JsonFormatter().format(record))

        assert payload["motif_id"] == "hook-1"
        assert payload["overall"] == 72.5
        assert "families" not in payload

    def test_includes_exception(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord(
                "vtmotif", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
            )
        payload = json.loads(JsonFormatter().format(record))
        assert "ValueError: boom" in payload["exc_info"]


class TestEngineLogging:
    def test_get_logger_for_engine_modules(self):
        assert get_logger("vtharmony.candidates").name == "vtharmony.candidates"
        assert get_logger("vtmotif").name == "vtmotif"

    def test_get_logger_rejects_foreign_names(self):
        with pytest.raises(ValueError):
            get_logger("requests")

    def test_setup_configures_engine_loggers_only(self, engine_loggers):
        root = logging.getLogger()
        root_handlers = list(root.handlers)

        handler = setup_logging("warning", "json")

        for lg in engine_loggers:
            assert lg.handlers == [handler]
            assert lg.level == logging.WARNING
            assert lg.propagate is False
        assert isinstance(handler.formatter, JsonFormatter)
        assert root.handlers == root_handlers

    def test_setup_reads_settings(self, monkeypatch, engine_loggers):
        monkeypatch.setenv("VT_LOG_FORMAT", "text")
        monkeypatch.setenv("VT_LOG_LEVEL", "DEBUG")
        handler = setup_logging()

        assert engine_loggers[0].level == logging.DEBUG
        assert not isinstance(handler.formatter, JsonFormatter)

    def test_setup_rejects_unknown_format(self, engine_loggers):
        with pytest.raises(ValueError):
            setup_logging(fmt="xml")

    def test_candidate_selection_is_logged(self, capsys, engine_loggers):
        setup_logging("debug", "json")
        generate_progression_candidates(make_style_prior("driving house"), "A", 2)

        records = [r for r in json_lines(capsys.readouterr().out) if r["name"] == "vtharmony.candidates"]
        assert len(records) == 1
        assert records[0]["families"] == ["house"]
        assert records[0]["candidate_count"] == 2

    def test_motif_score_is_logged(self, capsys, engine_loggers, style_prior):
        setup_logging("debug", "json")
        report = calculate_motif_score(make_motif(id="hook-7"), style_prior)

        records = [r for r in json_lines(capsys.readouterr().out) if r["name"] == "vtmotif.scoring"]
        assert records[-1]["motif_id"] == "hook-7"
        assert records[-1]["overall"] == report.overall

    def test_quiet_above_debug(self, capsys, engine_loggers, style_prior):
        setup_logging("info", "json")
        calculate_motif_score(make_motif(), style_prior)
        generate_progression_candidates(style_prior, "C", 3)

        assert capsys.readouterr().out == ""


class TestTracing:
    def test_disabled_without_endpoint(self, monkeypatch):
        monkeypatch.delenv("VT_OTEL_ENDPOINT", raising=False)
        assert setup_tracing() is False

    def test_traced_is_a_context_manager(self):
        with traced("vtmotif.test", motif_id="x"):
            value = 1 + 1
        assert value == 2
