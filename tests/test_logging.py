# py
import io
import json

from loguru import logger

from app.core.logging import configure_logging


def test_configure_logging_json_sink():
    sink = io.StringIO()
    try:
        configure_logging("debug", json_logs=True, sink=sink)
        logger.debug("bmi stored", calc_id=7)
        lines = [json.loads(line) for line in sink.getvalue().splitlines()]
    finally:
        configure_logging("INFO")

    assert lines[0]["record"]["extra"] == {"level": "DEBUG", "json_logs": True}
    assert lines[1]["record"]["message"] == "bmi stored"
    assert lines[1]["record"]["extra"]["calc_id"] == 7


def test_configure_logging_respects_level():
    sink = io.StringIO()
    try:
        configure_logging("warning", sink=sink)
        logger.info("hidden")
        logger.warning("shown")
    finally:
        configure_logging("INFO")

    output = sink.getvalue()
    assert "hidden" not in output
    assert "WARNING" in output and "shown" in output
