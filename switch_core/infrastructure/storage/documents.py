"""JSON / TOML 文档的解析、序列化与可选字段访问。

- JSON 使用标准库 json，写回时 pretty-print。
- TOML 使用 tomlkit，写回时保留注释、顺序与原有格式。
- get_field / get_str 是“可选字段链”：任何一环缺失或类型不符都返回缺省值，
  不抛异常。
"""

import json
from typing import Any, Optional, Sequence, Union

import tomlkit
from tomlkit.exceptions import TOMLKitError

from switch_core.config.settings import settings
from switch_core.domain.exceptions import ParseError


PathPart = Union[str, int]
_MISSING = object()


def parse_json(content: str, label: str = "document") -> Any:
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ParseError(code="JSON_PARSE_ERROR", message=f"Failed to parse {label}: {e}") from e


def dump_json(document: Any, label: str = "document") -> str:
    indent = getattr(settings, "json_indent", 2)
    try:
        return json.dumps(document, indent=indent, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise ParseError(code="JSON_SERIALIZE_ERROR", message=f"Failed to serialize {label}: {e}") from e


def parse_toml(content: str, label: str = "document") -> tomlkit.TOMLDocument:
    try:
        return tomlkit.parse(content)
    except TOMLKitError as e:
        raise ParseError(code="TOML_PARSE_ERROR", message=f"Failed to parse {label}: {e}") from e


def dump_toml(document: tomlkit.TOMLDocument) -> str:
    return tomlkit.dumps(document)


def get_field(document: Any, path: Sequence[PathPart], default: Any = None) -> Any:
    """按路径取值；字符串访问 dict，整数访问 list。"""

    current = document
    for part in path:
        if isinstance(part, int):
            if not isinstance(current, list) or not -len(current) <= part < len(current):
                return default
            current = current[part]
        else:
            if not isinstance(current, dict):
                return default
            current = current.get(part, _MISSING)
            if current is _MISSING:
                return default
    return current


def get_str(document: Any, path: Sequence[PathPart], default: str = "") -> str:
    """取字符串字段，缺失或非字符串时返回 default。"""

    value = get_field(document, path)
    return str(value) if isinstance(value, str) else default


def ensure_table(document: dict, path: Sequence[str], factory=dict) -> Optional[dict]:
    """沿路径逐级取出（必要时创建）dict 并返回最后一级。

    某一级已存在但不是 dict 时返回 None，调用方应放弃写入而不是覆盖。
    """

    current: Any = document
    for key in path:
        if key not in current:
            current[key] = factory()
        current = current[key]
        if not isinstance(current, dict):
            return None
    return current
