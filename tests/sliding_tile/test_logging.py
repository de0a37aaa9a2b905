"""Tests for sliding_tile.logging: renderer and output stream selection."""

import io
import json

import structlog

from sliding_tile.logging import setup_logging


def test_logs_written_to_given_stream(capsys):
    stream = io.StringIO()
    setup_logging(level=20, json_output=True, stream=stream)

    structlog.get_logger("test").info("bridge_event", channel="a/b")

    line = json.loads(stream.getvalue().strip())
    assert line["event"] == "bridge_event"
    assert line["channel"] == "a/b"
    assert line["level"] == "info"
    assert capsys.readouterr().out == ""


def test_level_filter(capsys):
    stream = io.StringIO()
    setup_logging(level=30, json_output=True, stream=stream)

    structlog.get_logger("test").info("dropped")
    structlog.get_logger("test").warning("kept")

    events = [json.loads(l)["event"] for l in stream.getvalue().splitlines()]
    assert events == ["kept"]


def test_console_renderer_without_colors_on_redirected_stream():
    stream = io.StringIO()
    setup_logging(level=20, stream=stream)

    structlog.get_logger("test").info("plain_event")

    assert "plain_event" in stream.getvalue()
    assert "\x1b[" not in stream.getvalue()
