"""Switch Core 顶层包。

该包提供桌面端“AI CLI 配置切换器”的后端实现，
包括配置加载、领域模型、shell secrets 编辑器、
各 CLI 工具（Claude / Codex / Droid / opencode）的配置适配与命令注册表。
"""

from switch_core.api.commands import COMMANDS, invoke

__all__ = ["COMMANDS", "invoke"]
