"""对外 API 服务模块。

提供简化的函数接口供桌面端 UI 调用。每个函数都是一次独立的
读 → 改 → 写，入参与返回值都是普通 dict / list，便于序列化。
"""

from typing import Any, Callable, Dict, List, Mapping, TypeVar

from switch_core.config import paths
from switch_core.domain.exceptions import BusinessError
from switch_core.domain.models import (
    AnthropicConfig,
    CodexConfig,
    ConfigGroup,
    EnvConfig,
    from_mapping,
    to_dict,
)
from switch_core.editors import shell_secrets
from switch_core.infrastructure.logging.logger import logger
from switch_core.infrastructure.storage import file_store
from switch_core.integrations import create_adapter


CS_PREFIX = "CS"
ANTHROPIC_PREFIX = "ANTHROPIC"

T = TypeVar("T")


def _logged(operation: str, func: Callable[[], T], **extra: Any) -> T:
    try:
        return func()
    except BusinessError as e:
        logger.error(f"{operation} failed: {e.message}", extra={"extra": {
            "operation": operation,
            "code": e.code,
            **extra,
        }})
        raise


# ---- secrets file helpers ---------------------------------------------


def _read_secrets() -> str:
    return file_store.read_text(paths.secrets_path())


def _write_secrets(content: str) -> None:
    file_store.write_text(paths.secrets_path(), content)


def _read_pair(base_key: str, token_key: str) -> tuple[str, str]:
    content = _read_secrets()
    return shell_secrets.read_value(content, base_key), shell_secrets.read_value(content, token_key)


def _save_pair(base_key: str, base_value: str, token_key: str, token_value: str) -> None:
    content = _read_secrets()
    updated = shell_secrets.upsert_value(content, base_key, base_value)
    updated = shell_secrets.upsert_value(updated, token_key, token_value)
    _write_secrets(updated)


def _list_groups(prefix: str) -> List[ConfigGroup]:
    return shell_secrets.list_groups(_read_secrets(), prefix)


def _switch(prefix: str, index: int) -> ConfigGroup | None:
    """切换 secrets 文件中的配置组，返回新生效的组；目标已生效时返回 None。"""

    content = _read_secrets()
    groups = shell_secrets.list_groups(content, prefix)
    updated = shell_secrets.switch_group(content, groups, index, prefix)
    target = groups[index]
    if target.active:
        return None
    _write_secrets(updated)
    logger.info("Switched config group", extra={"extra": {
        "prefix": prefix,
        "index": index,
        "base_url": target.base_url,
    }})
    return target


# ---- CS (Claude) ---------------------------------------------------------


def read_env_config() -> Dict[str, Any]:
    """读取 secrets 文件中生效的 CS_BASE_URL / CS_AUTH_TOKEN。"""

    def run() -> Dict[str, Any]:
        base_url, token = _read_pair(
            shell_secrets.base_url_key(CS_PREFIX), shell_secrets.auth_token_key(CS_PREFIX)
        )
        return to_dict(EnvConfig(cs_base_url=base_url, cs_auth_token=token))

    return _logged("read_env_config", run)


def save_env_config(config: Mapping[str, Any] | EnvConfig) -> None:
    """写入 CS_* 到 secrets 文件，并同步到 ~/.claude/settings.json。"""

    record = from_mapping(EnvConfig, config)

    def run() -> None:
        _save_pair(
            shell_secrets.base_url_key(CS_PREFIX), record.cs_base_url,
            shell_secrets.auth_token_key(CS_PREFIX), record.cs_auth_token,
        )
        create_adapter("claude").apply(record)
        logger.info("Saved CS config", extra={"extra": {"base_url": record.cs_base_url}})

    _logged("save_env_config", run)


def read_cs_config_groups() -> List[Dict[str, Any]]:
    return _logged("read_cs_config_groups", lambda: [to_dict(g) for g in _list_groups(CS_PREFIX)])


def switch_cs_config(index: int) -> None:
    """切换 CS 配置组；切换成功后同步 Claude settings。"""

    def run() -> None:
        target = _switch(CS_PREFIX, index)
        if target is not None:
            create_adapter("claude").apply(
                EnvConfig(cs_base_url=target.base_url, cs_auth_token=target.auth_token)
            )

    _logged("switch_cs_config", run, index=index)


# ---- ANTHROPIC ------------------------------------------------------------


def read_anthropic_config_groups() -> List[Dict[str, Any]]:
    return _logged(
        "read_anthropic_config_groups",
        lambda: [to_dict(g) for g in _list_groups(ANTHROPIC_PREFIX)],
    )


def switch_anthropic_config(index: int) -> None:
    _logged("switch_anthropic_config", lambda: _switch(ANTHROPIC_PREFIX, index), index=index)


def read_anthropic_config() -> Dict[str, Any]:
    def run() -> Dict[str, Any]:
        base_url, token = _read_pair(
            shell_secrets.base_url_key(ANTHROPIC_PREFIX), shell_secrets.auth_token_key(ANTHROPIC_PREFIX)
        )
        return to_dict(AnthropicConfig(base_url=base_url, auth_token=token))

    return _logged("read_anthropic_config", run)


def save_anthropic_config(config: Mapping[str, Any] | AnthropicConfig) -> None:
    record = from_mapping(AnthropicConfig, config)

    def run() -> None:
        _save_pair(
            shell_secrets.base_url_key(ANTHROPIC_PREFIX), record.base_url,
            shell_secrets.auth_token_key(ANTHROPIC_PREFIX), record.auth_token,
        )
        logger.info("Saved ANTHROPIC config", extra={"extra": {"base_url": record.base_url}})

    _logged("save_anthropic_config", run)


# ---- Codex / Droid / opencode --------------------------------------------


def read_codex_config() -> Dict[str, Any]:
    return _logged("read_codex_config", lambda: to_dict(create_adapter("codex").read()))


def save_codex_config(config: Mapping[str, Any] | CodexConfig) -> None:
    record = from_mapping(CodexConfig, config)

    def run() -> None:
        create_adapter("codex").apply(record)
        logger.info("Saved codex config", extra={"extra": {"base_url": record.base_url}})

    _logged("save_codex_config", run)


def read_droid_config() -> Dict[str, Any]:
    return _logged("read_droid_config", lambda: to_dict(create_adapter("droid").read()))


def read_opencode_config() -> Dict[str, Any]:
    return _logged("read_opencode_config", lambda: to_dict(create_adapter("opencode").read()))


def apply_codex_to_droid(config: Mapping[str, Any] | CodexConfig) -> None:
    """把 Codex 的 base_url / api_key 写进 Droid 的第一个自定义模型。"""

    record = from_mapping(CodexConfig, config)

    def run() -> None:
        create_adapter("droid").apply(record)
        logger.info("Applied codex config to droid", extra={"extra": {"base_url": record.base_url}})

    _logged("apply_codex_to_droid", run)


def apply_codex_to_opencode(config: Mapping[str, Any] | CodexConfig) -> None:
    """把 Codex 的 base_url / api_key 写进 opencode 的 openai provider。"""

    record = from_mapping(CodexConfig, config)

    def run() -> None:
        create_adapter("opencode").apply(record)
        logger.info("Applied codex config to opencode", extra={"extra": {"base_url": record.base_url}})

    _logged("apply_codex_to_opencode", run)
