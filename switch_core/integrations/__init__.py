"""CLI 工具配置集成层。

该包下的模块负责：
- 定义适配器协议 (base)。
- 维护工具与配置文件路径的登记表 (registry)。
- 提供各工具的具体实现 (claude、codex、droid、opencode)。
"""

from switch_core.integrations.base import ToolConfigAdapter
from switch_core.integrations.claude import ClaudeSettingsFile
from switch_core.integrations.codex import CodexConfigFiles
from switch_core.integrations.droid import DroidSettingsFile
from switch_core.integrations.opencode import OpencodeConfigFile


def create_adapter(name: str) -> ToolConfigAdapter:
    """根据工具名创建适配器实例，名称不区分大小写。"""

    tool = name.lower()
    if tool == "claude":
        return ClaudeSettingsFile()
    if tool == "codex":
        return CodexConfigFiles()
    if tool == "droid":
        return DroidSettingsFile()
    if tool == "opencode":
        return OpencodeConfigFile()
    raise KeyError(f"Unknown tool: {name!r}")
