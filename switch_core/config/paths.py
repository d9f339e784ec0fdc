"""主目录解析：为每个配置文件给出绝对路径。

所有函数在调用时读取 settings，便于测试用 monkeypatch 把主目录指到临时目录。
"""

from pathlib import Path

from switch_core.config.settings import settings
from switch_core.integrations.registry import get_tool_config


def home_dir() -> Path:
    override = getattr(settings, "home_dir", None)
    if override:
        return Path(override).expanduser()
    return Path.home()


def tool_file_path(tool: str, logical_name: str) -> Path:
    """返回某工具某个逻辑配置文件的绝对路径。"""

    cfg = get_tool_config(tool)
    entry = cfg.files[logical_name]
    return home_dir().joinpath(*entry.relative_path.parts)


def secrets_path() -> Path:
    return home_dir() / getattr(settings, "secrets_file_name", ".zshrc_secrets")


def claude_settings_path() -> Path:
    return tool_file_path("claude", "settings")


def codex_config_path() -> Path:
    return tool_file_path("codex", "config")


def codex_auth_path() -> Path:
    return tool_file_path("codex", "auth")


def droid_settings_path() -> Path:
    return tool_file_path("droid", "settings")


def opencode_config_path() -> Path:
    return tool_file_path("opencode", "config")
