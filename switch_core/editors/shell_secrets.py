"""Shell secrets 文件编辑器。

文件由若干 ``export KEY="value"`` 行组成，被 ``#`` 注释掉的行
（``#export KEY="value"``）视为备用配置。所有函数都是纯函数：
输入文件内容，返回新内容，不接触磁盘。
"""

from __future__ import annotations

from typing import List, Sequence

from switch_core.domain.exceptions import ValidationError
from switch_core.domain.models import COMMENT_MARKER, ConfigGroup, ConfigLine


def split_lines(content: str) -> tuple[List[str], bool]:
    """只按换行符断行并去掉行尾回车；返回 (行列表, 是否以换行结尾)。"""

    if not content:
        return [], False
    lines = [line[:-1] if line.endswith("\r") else line for line in content.split("\n")]
    trailing_newline = content.endswith("\n")
    if trailing_newline:
        lines.pop()
    return lines, trailing_newline


def _join(lines: Sequence[str], trailing_newline: bool) -> str:
    text = "\n".join(lines)
    return text + "\n" if trailing_newline and lines else text


def base_url_key(prefix: str) -> str:
    return f"{prefix}_BASE_URL"


def auth_token_key(prefix: str) -> str:
    return f"{prefix}_AUTH_TOKEN"


def format_assignment(key: str, value: str) -> str:
    return f'export {key}="{value}"'


def read_value(content: str, key: str) -> str:
    """返回第一条生效的 ``export KEY=`` 的值（去引号）；不存在时返回空字符串。"""

    for raw in split_lines(content)[0]:
        line = ConfigLine.parse(raw)
        if line.is_assignment(key, active=True):
            return line.value
    return ""


def upsert_value(content: str, key: str, new_value: str) -> str:
    """原位替换第一条生效的 KEY 行；没有则追加到末尾。"""

    lines, trailing_newline = split_lines(content)
    for i, raw in enumerate(lines):
        if ConfigLine.parse(raw).is_assignment(key, active=True):
            lines[i] = format_assignment(key, new_value)
            break
    else:
        lines.append(format_assignment(key, new_value))
    return _join(lines, trailing_newline)


def _pair_at(lines: Sequence[ConfigLine], i: int, prefix: str, active: bool) -> ConfigGroup | None:
    if i + 1 >= len(lines):
        return None
    first, second = lines[i], lines[i + 1]
    if first.is_assignment(base_url_key(prefix), active) and second.is_assignment(auth_token_key(prefix), active):
        return ConfigGroup(base_url=first.value, auth_token=second.value, active=active)
    return None


def _scan_groups(content: str, prefix: str) -> List[tuple[int, ConfigGroup]]:
    lines = [ConfigLine.parse(raw) for raw in split_lines(content)[0]]
    found: List[tuple[int, ConfigGroup]] = []
    i = 0
    while i < len(lines):
        group = _pair_at(lines, i, prefix, active=True) or _pair_at(lines, i, prefix, active=False)
        if group is not None:
            found.append((i, group))
            i += 2
        else:
            i += 1
    return found


def list_groups(content: str, prefix: str) -> List[ConfigGroup]:
    """按文件顺序列出 PREFIX 的所有配置组（生效的与被注释的）。

    只有相邻且注释状态一致的 BASE_URL + AUTH_TOKEN 两行才算一组。
    """

    return [group for _, group in _scan_groups(content, prefix)]


def switch_group(content: str, groups: Sequence[ConfigGroup], target_index: int, prefix: str) -> str:
    """切换到 groups[target_index]，返回新内容。

    - 下标越界抛出 ValidationError，内容不变。
    - 目标已生效时原样返回。
    - 否则注释掉所有生效的 BASE_URL / AUTH_TOKEN 行，
      并取消注释第一组值与目标相同的备用配置（按值匹配，不按位置）。
    """

    if isinstance(target_index, bool) or not isinstance(target_index, int) or not 0 <= target_index < len(groups):
        raise ValidationError(
            code="INVALID_CONFIG_INDEX",
            message="Invalid config index",
            index=target_index,
            count=len(groups),
        )
    target = groups[target_index]
    if target.active:
        return content

    lines, trailing_newline = split_lines(content)
    parsed = [ConfigLine.parse(raw) for raw in lines]
    toggled_keys = {base_url_key(prefix), auth_token_key(prefix)}

    enable_at = None
    for i, group in _scan_groups(content, prefix):
        if not group.active and (group.base_url, group.auth_token) == (target.base_url, target.auth_token):
            enable_at = i
            break

    for i, line in enumerate(parsed):
        if line.active and line.key in toggled_keys:
            lines[i] = COMMENT_MARKER + line.trimmed
        elif enable_at is not None and i in (enable_at, enable_at + 1):
            lines[i] = line.trimmed[len(COMMENT_MARKER):]
    return _join(lines, trailing_newline)
