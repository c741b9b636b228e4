import json
import logging

import uvicorn

from tto_survey.apps.copilot import main as copilot_main
from tto_survey.core.error_handler import UNKNOWN_ERROR, describe_exception
from tto_survey.core.logging import JsonFormatter


def test_json_formatter_includes_extra_fields():
    record = logging.makeLogRecord(
        {
            "name": "tto.test",
            "levelno": logging.WARNING,
            "levelname": "WARNING",
            "msg": "upstream %s",
            "args": ("rejected",),
            "upstream_status": 429,
        }
    )

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "WARNING"
    assert payload["name"] == "tto.test"
    assert payload["message"] == "upstream rejected"
    assert payload["upstream_status"] == 429
    assert "args" not in payload


def test_describe_exception():
    assert describe_exception(RuntimeError("  boom ")) == "boom"
    assert describe_exception(RuntimeError()) == UNKNOWN_ERROR
    assert describe_exception(None) == UNKNOWN_ERROR


def test_main_runs_uvicorn_with_parsed_arguments(monkeypatch):
    captured = {}

    def fake_run(app, **kwargs):
        captured["app"] = app
        captured.update(kwargs)

    monkeypatch.setattr(uvicorn, "run", fake_run)

    copilot_main.main(["--host", "0.0.0.0", "--port", "9001"])

    assert captured == {
        "app": "tto_survey.apps.copilot.app:app",
        "host": "0.0.0.0",
        "port": 9001,
        "reload": False,
        "log_config": None,
    }
