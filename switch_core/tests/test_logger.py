import json
import logging

from switch_core.infrastructure.logging.logger import JsonFormatter, redact


def test_redact_masks_credentials():
    payload = redact({
        "auth_token": "sk-1234567890",
        "api_key": "short",
        "base_url": "https://a",
        "nested": {"OPENAI_API_KEY": "sk-abcdefghij"},
    })
    assert payload["auth_token"] == "sk-1***"
    assert payload["api_key"] == "***"
    assert payload["base_url"] == "https://a"
    assert payload["nested"]["OPENAI_API_KEY"] == "sk-a***"


def test_json_formatter_includes_extra():
    record = logging.LogRecord("switch_core", logging.INFO, __file__, 1, "Switched %s", ("CS",), None)
    record.extra = {"index": 1, "auth_token": "sk-1234567890"}
    line = json.loads(JsonFormatter().format(record))
    assert line["msg"] == "Switched CS"
    assert line["level"] == "INFO"
    assert line["extra"]["index"] == 1
    assert line["extra"]["auth_token"] == "sk-1***"
    assert line["ts"].endswith("Z")


def test_json_formatter_extra_cannot_clobber_core_fields():
    record = logging.LogRecord("switch_core", logging.ERROR, __file__, 1, "real message", (), None)
    record.extra = {"msg": "forged", "level": "DEBUG", "ts": "never"}
    line = json.loads(JsonFormatter().format(record))
    assert line["msg"] == "real message"
    assert line["level"] == "ERROR"
    assert line["ts"] != "never"
    assert line["extra"] == {"msg": "forged", "level": "DEBUG", "ts": "never"}
