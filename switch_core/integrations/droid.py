"""Droid 适配器：~/.factory/settings.json 中 customModels[0] 的 baseUrl / apiKey。"""

from pathlib import Path
from typing import Any, Optional

from switch_core.config import paths
from switch_core.domain.models import CodexConfig
from switch_core.infrastructure.storage import documents, file_store


LABEL = "droid settings"


def extract_model(document: Any) -> CodexConfig:
    return CodexConfig(
        base_url=documents.get_str(document, ["customModels", 0, "baseUrl"]),
        api_key=documents.get_str(document, ["customModels", 0, "apiKey"]),
    )


def merge_model(document: Any, config: CodexConfig) -> Any:
    """更新第一个自定义模型；customModels 缺失或为空时插入一个。"""

    if not isinstance(document, dict):
        return document
    models = document.setdefault("customModels", [])
    if not isinstance(models, list):
        return document
    if not models:
        models.append({})
    first = models[0]
    if isinstance(first, dict):
        first["baseUrl"] = config.base_url
        first["apiKey"] = config.api_key
    return document


class DroidSettingsFile:
    name = "droid"

    def __init__(self, path: Optional[Path] = None):
        self._path = path

    @property
    def path(self) -> Path:
        return self._path or paths.droid_settings_path()

    def _load(self) -> Any:
        return documents.parse_json(file_store.read_text(self.path, LABEL), LABEL)

    def read(self) -> CodexConfig:
        return extract_model(self._load())

    def apply(self, config: CodexConfig) -> None:
        document = merge_model(self._load(), config)
        file_store.write_text(self.path, documents.dump_json(document, LABEL), LABEL)
