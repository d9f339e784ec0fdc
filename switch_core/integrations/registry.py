"""各 CLI 工具的配置文件登记表。

本模块把“工具名”与“主目录下的相对路径”解耦：

- 逻辑文件名（如 "settings"、"auth"）在代码里使用统一名称。
- relative_path：相对用户主目录的实际位置，例如 ".codex/config.toml"。

上层只关心工具名 + 逻辑文件名，路径集中配置在这里，便于后续新增工具。"""

from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Dict, Mapping


@dataclass(frozen=True)
class ConfigFile:
    """单个配置文件的登记信息。"""

    logical_name: str
    relative_path: PurePosixPath


@dataclass(frozen=True)
class ToolConfig:
    """某个 CLI 工具的全部配置文件。"""

    name: str
    files: Dict[str, ConfigFile]


CLAUDE_CONFIG = ToolConfig(
    name="claude",
    files={
        "settings": ConfigFile("settings", PurePosixPath(".claude/settings.json")),
    },
)

CODEX_CONFIG = ToolConfig(
    name="codex",
    files={
        "config": ConfigFile("config", PurePosixPath(".codex/config.toml")),
        "auth": ConfigFile("auth", PurePosixPath(".codex/auth.json")),
    },
)

DROID_CONFIG = ToolConfig(
    name="droid",
    files={
        "settings": ConfigFile("settings", PurePosixPath(".factory/settings.json")),
    },
)

OPENCODE_CONFIG = ToolConfig(
    name="opencode",
    files={
        "config": ConfigFile("config", PurePosixPath(".config/opencode/opencode.json")),
    },
)


TOOL_REGISTRY: Mapping[str, ToolConfig] = {
    "claude": CLAUDE_CONFIG,
    "codex": CODEX_CONFIG,
    "droid": DROID_CONFIG,
    "opencode": OPENCODE_CONFIG,
}


def get_tool_config(name: str) -> ToolConfig:
    """根据名称获取 ToolConfig，名称不区分大小写。"""

    key = name.lower()
    for k, cfg in TOOL_REGISTRY.items():
        if k.lower() == key:
            return cfg
    raise KeyError(f"Unknown tool: {name!r}")
