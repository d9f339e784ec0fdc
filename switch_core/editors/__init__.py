"""配置文本编辑器。

- shell_secrets: 逐行解析 ``export KEY="value"`` 形式的 secrets 文件，
  支持读取、写入以及按注释切换 BASE_URL / AUTH_TOKEN 配置组。
"""

from .shell_secrets import list_groups, read_value, switch_group, upsert_value

__all__ = ["list_groups", "read_value", "switch_group", "upsert_value"]
