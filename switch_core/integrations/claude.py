"""Claude CLI 适配器：~/.claude/settings.json 中的 env.CS_BASE_URL / env.CS_AUTH_TOKEN。"""

from pathlib import Path
from typing import Any, Optional

from switch_core.config import paths
from switch_core.domain.models import EnvConfig
from switch_core.infrastructure.storage import documents, file_store


LABEL = "claude settings"
ENV_BASE_URL = "CS_BASE_URL"
ENV_AUTH_TOKEN = "CS_AUTH_TOKEN"


def extract_env(document: Any) -> EnvConfig:
    return EnvConfig(
        cs_base_url=documents.get_str(document, ["env", ENV_BASE_URL]),
        cs_auth_token=documents.get_str(document, ["env", ENV_AUTH_TOKEN]),
    )


def merge_env(document: Any, config: EnvConfig) -> Any:
    """把 CS_* 写进 env 对象；env 不存在时新建，存在但不是对象时不动。"""

    if not isinstance(document, dict):
        return document
    env = documents.ensure_table(document, ["env"])
    if env is not None:
        env[ENV_BASE_URL] = config.cs_base_url
        env[ENV_AUTH_TOKEN] = config.cs_auth_token
    return document


class ClaudeSettingsFile:
    name = "claude"

    def __init__(self, path: Optional[Path] = None):
        self._path = path

    @property
    def path(self) -> Path:
        return self._path or paths.claude_settings_path()

    def _load(self) -> Any:
        return documents.parse_json(file_store.read_text(self.path, LABEL), LABEL)

    def read(self) -> EnvConfig:
        return extract_env(self._load())

    def apply(self, config: EnvConfig) -> None:
        document = merge_env(self._load(), config)
        file_store.write_text(self.path, documents.dump_json(document, LABEL), LABEL)
