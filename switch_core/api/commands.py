"""命令注册表。

UI 层按名称调用命令，所有错误都被转换成 ``{"ok": False, "error": {...}}``，
其中 error.message 可以直接展示给用户。
"""

import inspect
from typing import Any, Callable, Dict

from switch_core.api import service
from switch_core.domain.exceptions import BusinessError, UnknownCommandError, ValidationError


Command = Callable[..., Any]

COMMANDS: Dict[str, Command] = {
    "read_env_config": service.read_env_config,
    "save_env_config": service.save_env_config,
    "read_codex_config": service.read_codex_config,
    "save_codex_config": service.save_codex_config,
    "read_cs_config_groups": service.read_cs_config_groups,
    "switch_cs_config": service.switch_cs_config,
    "read_anthropic_config_groups": service.read_anthropic_config_groups,
    "switch_anthropic_config": service.switch_anthropic_config,
    "read_anthropic_config": service.read_anthropic_config,
    "save_anthropic_config": service.save_anthropic_config,
    "read_droid_config": service.read_droid_config,
    "read_opencode_config": service.read_opencode_config,
    "apply_codex_to_droid": service.apply_codex_to_droid,
    "apply_codex_to_opencode": service.apply_codex_to_opencode,
}


def invoke(name: str, **kwargs: Any) -> Dict[str, Any]:
    """按名称执行命令并返回统一结果结构。"""

    try:
        func = COMMANDS.get(name)
        if func is None:
            raise UnknownCommandError(code="UNKNOWN_COMMAND", message=f"Unknown command: {name}")
        try:
            inspect.signature(func).bind(**kwargs)
        except TypeError as e:
            raise ValidationError(code="INVALID_ARGUMENTS", message=f"Invalid arguments for {name}: {e}") from e
        data = func(**kwargs)
    except BusinessError as e:
        return {"ok": False, "error": e.to_dict()}
    return {"ok": True, "data": data}
