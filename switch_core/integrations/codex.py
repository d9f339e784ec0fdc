"""Codex CLI 适配器。

Codex 把配置拆在两个文件里：

- ~/.codex/config.toml: ``[model_providers.custom]`` 下的 ``base_url``。
- ~/.codex/auth.json: 顶层的 ``OPENAI_API_KEY``。

TOML 用 tomlkit 改写，文件里的注释、其他 provider 以及键顺序都会保留。
"""

from pathlib import Path
from typing import Any, Optional

import tomlkit

from switch_core.config import paths
from switch_core.domain.models import CodexConfig
from switch_core.infrastructure.storage import documents, file_store


CONFIG_LABEL = "codex config"
AUTH_LABEL = "codex auth"
BASE_URL_PATH = ("model_providers", "custom", "base_url")
API_KEY_FIELD = "OPENAI_API_KEY"


def extract_base_url(document: Any) -> str:
    return documents.get_str(document, BASE_URL_PATH)


def merge_base_url(document: tomlkit.TOMLDocument, base_url: str) -> tomlkit.TOMLDocument:
    table = documents.ensure_table(document, BASE_URL_PATH[:-1], factory=tomlkit.table)
    if table is not None:
        table[BASE_URL_PATH[-1]] = base_url
    return document


def extract_api_key(document: Any) -> str:
    return documents.get_str(document, [API_KEY_FIELD])


def merge_api_key(document: Any, api_key: str) -> Any:
    if isinstance(document, dict):
        document[API_KEY_FIELD] = api_key
    return document


class CodexConfigFiles:
    name = "codex"

    def __init__(self, config_path: Optional[Path] = None, auth_path: Optional[Path] = None):
        self._config_path = config_path
        self._auth_path = auth_path

    @property
    def config_path(self) -> Path:
        return self._config_path or paths.codex_config_path()

    @property
    def auth_path(self) -> Path:
        return self._auth_path or paths.codex_auth_path()

    def _load_config(self) -> tomlkit.TOMLDocument:
        return documents.parse_toml(file_store.read_text(self.config_path, CONFIG_LABEL), CONFIG_LABEL)

    def _load_auth(self) -> Any:
        return documents.parse_json(file_store.read_text(self.auth_path, AUTH_LABEL), AUTH_LABEL)

    def read(self) -> CodexConfig:
        base_url = extract_base_url(self._load_config())
        api_key = extract_api_key(self._load_auth())
        return CodexConfig(base_url=base_url, api_key=api_key)

    def apply(self, config: CodexConfig) -> None:
        toml_doc = merge_base_url(self._load_config(), config.base_url)
        file_store.write_text(self.config_path, documents.dump_toml(toml_doc), CONFIG_LABEL)

        auth = merge_api_key(self._load_auth(), config.api_key)
        file_store.write_text(self.auth_path, documents.dump_json(auth, AUTH_LABEL), AUTH_LABEL)
