"""工具配置适配器协议。

API 层不直接操作各工具的 JSON / TOML 结构，而是依赖此协议：

- 每个工具实现一个适配器（如 CodexConfigFiles）。
- 负责：定位文件、解析文档、在文档字段与统一记录之间做转换、写回。

这样新增一个 CLI 工具时只需新增一个适配器，不用改 API 层。
"""

from typing import Any, Protocol


class ToolConfigAdapter(Protocol):
    """CLI 工具配置适配器协议。

    实现者需要提供：
    - name: 工具名称，用于日志。
    - read(): 读取配置并返回统一记录，缺失字段为空字符串。
    - apply(config): 把记录写回工具的配置文件，字段不存在时插入。
    """

    name: str

    def read(self) -> Any:
        ...

    def apply(self, config: Any) -> None:
        ...
