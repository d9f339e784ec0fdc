"""配置记录的统一数据模型。

本模块定义了 API 层与各工具适配器之间传递的标准数据结构：

- ConfigLine: secrets 文件中的一行（原文 + 解析结果）。
- ConfigGroup: 一组相邻的 BASE_URL / AUTH_TOKEN 配置。
- EnvConfig / AnthropicConfig / CodexConfig: 各命令读写的配置记录。

这些对象只在一次读或写调用内存活，磁盘上的文件才是唯一的真实来源。
"""

from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

from switch_core.domain.exceptions import ValidationError


COMMENT_MARKER = "#"
EXPORT_PREFIX = "export "

T = TypeVar("T")


@dataclass
class ConfigLine:
    """secrets 文件中的一行。

    - raw: 原始文本（含缩进）。
    - trimmed: 去掉首尾空白后的文本。
    - active: 未被 ``#`` 注释时为 True。
    - key: 形如 ``export KEY=`` / ``#export KEY=`` 时识别出的变量名，否则为 None。
    - value: 去掉引号后的值；未识别时为空字符串。
    """

    raw: str
    trimmed: str
    active: bool
    key: Optional[str] = None
    value: str = ""

    @classmethod
    def parse(cls, raw: str) -> "ConfigLine":
        trimmed = raw.strip()
        active = not trimmed.startswith(COMMENT_MARKER)
        body = trimmed if active else trimmed[len(COMMENT_MARKER):]
        if not body.startswith(EXPORT_PREFIX) or "=" not in body:
            return cls(raw=raw, trimmed=trimmed, active=active)
        name, _, value = body[len(EXPORT_PREFIX):].partition("=")
        if not name or name != name.strip():
            return cls(raw=raw, trimmed=trimmed, active=active)
        return cls(raw=raw, trimmed=trimmed, active=active, key=name, value=value.strip('"'))

    def is_assignment(self, key: str, active: bool) -> bool:
        return self.key == key and self.active == active


@dataclass
class ConfigGroup:
    """一组 BASE_URL + AUTH_TOKEN；active 为 True 表示两行都未注释。"""

    base_url: str
    auth_token: str
    active: bool


@dataclass
class EnvConfig:
    cs_base_url: str
    cs_auth_token: str


@dataclass
class AnthropicConfig:
    base_url: str
    auth_token: str


@dataclass
class CodexConfig:
    """Codex / Droid / opencode 共用的 base_url + api_key 记录。"""

    base_url: str
    api_key: str


def to_dict(record: Any) -> Dict[str, Any]:
    return asdict(record)


def from_mapping(record_type: Type[T], data: Mapping[str, Any] | T) -> T:
    """把 UI 传来的 dict 转成记录对象；已是记录对象时原样返回。

    缺失字段按空字符串处理，多余字段忽略。
    """

    if isinstance(data, record_type):
        return data
    if not isinstance(data, Mapping):
        raise ValidationError(
            code="INVALID_CONFIG",
            message=f"Expected a mapping for {record_type.__name__}",
        )
    kwargs = {f.name: str(data.get(f.name) or "") for f in fields(record_type)}  # type: ignore[arg-type]
    return record_type(**kwargs)
