"""本地配置文件读写。

每次调用都是独立的 读 → 改 → 写；写入先落到同目录临时文件再 os.replace，
并保留原文件权限（secrets 文件通常是 0600）。
"""

import os
import shutil
from pathlib import Path
from uuid import uuid4

from switch_core.domain.exceptions import StorageError


def read_text(path: Path, label: str = "file") -> str:
    """读取 UTF-8 文本；失败时抛出 StorageError("Failed to read <label>: ...")。"""

    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise StorageError(
            code="FILE_READ_ERROR",
            message=f"Failed to read {label}: {e}",
            path=str(path),
        ) from e


def write_text(path: Path, content: str, label: str = "file") -> None:
    """写入 UTF-8 文本，临时文件 + 原子替换。"""

    path = Path(path)
    tmp_path = path.with_name(f".{path.name}.{uuid4().hex}.tmp")
    try:
        tmp_path.write_text(content, encoding="utf-8")
        if path.exists():
            shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    except OSError as e:
        tmp_path.unlink(missing_ok=True)
        raise StorageError(
            code="FILE_WRITE_ERROR",
            message=f"Failed to write {label}: {e}",
            path=str(path),
        ) from e
