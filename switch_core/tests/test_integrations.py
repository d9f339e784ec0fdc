import json
import tempfile
from pathlib import Path

import pytest

from switch_core.domain.exceptions import ParseError, StorageError
from switch_core.domain.models import CodexConfig, EnvConfig
from switch_core.integrations import create_adapter
from switch_core.integrations.claude import ClaudeSettingsFile
from switch_core.integrations.codex import CodexConfigFiles
from switch_core.integrations.droid import DroidSettingsFile
from switch_core.integrations.opencode import OpencodeConfigFile
from switch_core.integrations.registry import get_tool_config


CODEX_TOML = """# codex config
model = "gpt-5"

[model_providers.custom]
name = "custom"
base_url = "https://old"
wire_api = "responses"
"""


def _write_json(path: Path, data) -> None:
    path.write_text(json.dumps(data), encoding="utf-8")


def _read_json(path: Path):
    return json.loads(path.read_text(encoding="utf-8"))


def test_registry_lookup():
    assert str(get_tool_config("Codex").files["config"].relative_path) == ".codex/config.toml"
    with pytest.raises(KeyError):
        get_tool_config("vim")
    with pytest.raises(KeyError):
        create_adapter("vim")


def test_claude_apply_creates_env():
    with tempfile.TemporaryDirectory() as d:
        path = Path(d) / "settings.json"
        _write_json(path, {"model": "opus"})
        adapter = ClaudeSettingsFile(path)
        adapter.apply(EnvConfig(cs_base_url="https://a", cs_auth_token="t1"))
        data = _read_json(path)
        assert data["model"] == "opus"
        assert data["env"] == {"CS_BASE_URL": "https://a", "CS_AUTH_TOKEN": "t1"}
        assert adapter.read() == EnvConfig("https://a", "t1")


def test_claude_apply_keeps_other_env_keys():
    with tempfile.TemporaryDirectory() as d:
        path = Path(d) / "settings.json"
        _write_json(path, {"env": {"DEBUG": "1", "CS_BASE_URL": "https://old"}})
        ClaudeSettingsFile(path).apply(EnvConfig("https://new", "t"))
        assert _read_json(path)["env"] == {"DEBUG": "1", "CS_BASE_URL": "https://new", "CS_AUTH_TOKEN": "t"}


def test_claude_env_not_an_object_is_left_alone():
    with tempfile.TemporaryDirectory() as d:
        path = Path(d) / "settings.json"
        _write_json(path, {"env": ["x"]})
        ClaudeSettingsFile(path).apply(EnvConfig("https://new", "t"))
        assert _read_json(path) == {"env": ["x"]}


def test_codex_read_and_apply_preserves_toml_layout():
    with tempfile.TemporaryDirectory() as d:
        config_path = Path(d) / "config.toml"
        auth_path = Path(d) / "auth.json"
        config_path.write_text(CODEX_TOML, encoding="utf-8")
        _write_json(auth_path, {"OPENAI_API_KEY": "sk-old", "tokens": None})

        adapter = CodexConfigFiles(config_path, auth_path)
        assert adapter.read() == CodexConfig(base_url="https://old", api_key="sk-old")

        adapter.apply(CodexConfig(base_url="https://new", api_key="sk-new"))
        text = config_path.read_text(encoding="utf-8")
        assert text.startswith("# codex config")
        assert 'base_url = "https://new"' in text
        assert "https://old" not in text
        assert text.index('name = "custom"') < text.index("base_url") < text.index("wire_api")
        assert _read_json(auth_path) == {"OPENAI_API_KEY": "sk-new", "tokens": None}
        assert adapter.read() == CodexConfig(base_url="https://new", api_key="sk-new")


def test_codex_apply_inserts_missing_section():
    with tempfile.TemporaryDirectory() as d:
        config_path = Path(d) / "config.toml"
        auth_path = Path(d) / "auth.json"
        config_path.write_text('model = "gpt-5"\n', encoding="utf-8")
        _write_json(auth_path, {})

        adapter = CodexConfigFiles(config_path, auth_path)
        assert adapter.read() == CodexConfig(base_url="", api_key="")
        adapter.apply(CodexConfig(base_url="https://new", api_key="sk"))
        assert adapter.read() == CodexConfig(base_url="https://new", api_key="sk")
        assert 'model = "gpt-5"' in config_path.read_text(encoding="utf-8")


def test_codex_missing_and_broken_files():
    with tempfile.TemporaryDirectory() as d:
        config_path = Path(d) / "config.toml"
        adapter = CodexConfigFiles(config_path, Path(d) / "auth.json")
        with pytest.raises(StorageError) as exc:
            adapter.read()
        assert exc.value.code == "FILE_READ_ERROR"
        assert exc.value.message.startswith("Failed to read codex config:")

        config_path.write_text("[model_providers", encoding="utf-8")
        with pytest.raises(ParseError):
            adapter.read()


def test_droid_read_defaults_and_apply():
    with tempfile.TemporaryDirectory() as d:
        path = Path(d) / "settings.json"
        _write_json(path, {"customModels": [{"model": "m", "baseUrl": "https://old"}, {"model": "n"}]})
        adapter = DroidSettingsFile(path)
        assert adapter.read() == CodexConfig(base_url="https://old", api_key="")

        adapter.apply(CodexConfig(base_url="https://new", api_key="k"))
        data = _read_json(path)
        assert data["customModels"][0] == {"model": "m", "baseUrl": "https://new", "apiKey": "k"}
        assert data["customModels"][1] == {"model": "n"}


def test_droid_apply_inserts_first_model():
    with tempfile.TemporaryDirectory() as d:
        path = Path(d) / "settings.json"
        _write_json(path, {"theme": "dark"})
        adapter = DroidSettingsFile(path)
        assert adapter.read() == CodexConfig(base_url="", api_key="")
        adapter.apply(CodexConfig(base_url="https://new", api_key="k"))
        assert _read_json(path) == {"theme": "dark", "customModels": [{"baseUrl": "https://new", "apiKey": "k"}]}


def test_opencode_read_and_apply():
    with tempfile.TemporaryDirectory() as d:
        path = Path(d) / "opencode.json"
        _write_json(path, {"$schema": "https://opencode.ai/config.json", "provider": {"openai": {"models": {}}}})
        adapter = OpencodeConfigFile(path)
        assert adapter.read() == CodexConfig(base_url="", api_key="")

        adapter.apply(CodexConfig(base_url="https://new", api_key="k"))
        data = _read_json(path)
        assert data["provider"]["openai"] == {"models": {}, "options": {"baseURL": "https://new", "apiKey": "k"}}
        assert data["$schema"] == "https://opencode.ai/config.json"
        assert adapter.read() == CodexConfig(base_url="https://new", api_key="k")
