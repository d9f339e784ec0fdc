"""opencode 适配器：~/.config/opencode/opencode.json 中 provider.openai.options 的 baseURL / apiKey。"""

from pathlib import Path
from typing import Any, Optional

from switch_core.config import paths
from switch_core.domain.models import CodexConfig
from switch_core.infrastructure.storage import documents, file_store


LABEL = "opencode config"
OPTIONS_PATH = ("provider", "openai", "options")


def extract_options(document: Any) -> CodexConfig:
    return CodexConfig(
        base_url=documents.get_str(document, [*OPTIONS_PATH, "baseURL"]),
        api_key=documents.get_str(document, [*OPTIONS_PATH, "apiKey"]),
    )


def merge_options(document: Any, config: CodexConfig) -> Any:
    if not isinstance(document, dict):
        return document
    options = documents.ensure_table(document, OPTIONS_PATH)
    if options is not None:
        options["baseURL"] = config.base_url
        options["apiKey"] = config.api_key
    return document


class OpencodeConfigFile:
    name = "opencode"

    def __init__(self, path: Optional[Path] = None):
        self._path = path

    @property
    def path(self) -> Path:
        return self._path or paths.opencode_config_path()

    def _load(self) -> Any:
        return documents.parse_json(file_store.read_text(self.path, LABEL), LABEL)

    def read(self) -> CodexConfig:
        return extract_options(self._load())

    def apply(self, config: CodexConfig) -> None:
        document = merge_options(self._load(), config)
        file_store.write_text(self.path, documents.dump_json(document, LABEL), LABEL)
