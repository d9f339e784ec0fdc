import tempfile
from pathlib import Path

import pytest

from switch_core import COMMANDS, invoke


class DummySettings:
    secrets_file_name = ".zshrc_secrets"

    def __init__(self, home: Path):
        self.home_dir = str(home)


@pytest.fixture
def home(monkeypatch):
    with tempfile.TemporaryDirectory() as d:
        root = Path(d)
        monkeypatch.setattr("switch_core.config.paths.settings", DummySettings(root))
        yield root


def test_all_commands_registered():
    assert len(COMMANDS) == 14
    assert "switch_anthropic_config" in COMMANDS


def test_invoke_success(home):
    (home / ".zshrc_secrets").write_text('export ANTHROPIC_BASE_URL="https://x"\n', encoding="utf-8")
    result = invoke("read_anthropic_config")
    assert result == {"ok": True, "data": {"base_url": "https://x", "auth_token": ""}}


def test_invoke_reports_io_error(home):
    result = invoke("read_env_config")
    assert result["ok"] is False
    assert result["error"]["code"] == "FILE_READ_ERROR"
    assert result["error"]["message"].startswith("Failed to read file:")


def test_invoke_reports_invalid_index(home):
    (home / ".zshrc_secrets").write_text("", encoding="utf-8")
    result = invoke("switch_cs_config", index=0)
    assert result["ok"] is False
    assert result["error"]["code"] == "INVALID_CONFIG_INDEX"
    assert result["error"]["message"] == "Invalid config index"


def test_invoke_unknown_command_and_bad_arguments():
    unknown = invoke("format_disk")
    assert unknown["ok"] is False
    assert unknown["error"]["code"] == "UNKNOWN_COMMAND"

    bad = invoke("switch_cs_config")
    assert bad["ok"] is False
    assert bad["error"]["code"] == "INVALID_ARGUMENTS"


def test_invoke_reports_string_index(home):
    (home / ".zshrc_secrets").write_text(
        'export CS_BASE_URL="https://a"\nexport CS_AUTH_TOKEN="t1"\n', encoding="utf-8"
    )
    result = invoke("switch_cs_config", index="1")
    assert result["ok"] is False
    assert result["error"]["code"] == "INVALID_CONFIG_INDEX"
    assert result["error"]["message"] == "Invalid config index"
