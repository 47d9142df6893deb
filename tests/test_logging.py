from __future__ import annotations

import json

import pytest
import structlog

from dblang.config import LangSettings
from dblang.logging import configure_logging


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


def test_json_output_outside_dev(capsys, tmp_path):
    configure_logging(LangSettings(data_dir=tmp_path, environment="prod"))
    structlog.get_logger().info("buffer_flushed", statements=4)

    line = capsys.readouterr().out.strip().splitlines()[-1]
    event = json.loads(line)
    assert event["event"] == "buffer_flushed"
    assert event["statements"] == 4
    assert event["level"] == "info"


def test_level_filters_debug_events(capsys, tmp_path):
    configure_logging(LangSettings(data_dir=tmp_path), level="WARNING", json_output=True)
    log = structlog.get_logger()
    log.debug("form_properties_resolved", app_form="Notes.FormMain")
    log.warning("culture_argument_invalid", value="xx")

    out = capsys.readouterr().out
    assert "form_properties_resolved" not in out
    assert "culture_argument_invalid" in out


def test_console_output_in_dev(capsys, tmp_path):
    configure_logging(LangSettings(data_dir=tmp_path, log_level="INFO"))
    structlog.get_logger().info("schema_ensured")

    out = capsys.readouterr().out
    assert "schema_ensured" in out
    assert not out.strip().startswith("{")
