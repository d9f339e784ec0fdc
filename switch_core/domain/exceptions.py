"""统一业务异常模型。

所有跨模块抛出的业务级错误都应该继承自 BusinessError，
便于在 API 层或 UI 层做统一捕获，并把 message 原样展示给用户。
"""


class BusinessError(Exception):
    """业务异常基类。

    Attributes:
        code: 机器可读错误码（如 "FILE_READ_ERROR"）。
        message: 用户可读错误信息。
        http_status: 映射到 HTTP 时可用的状态码，默认 400。
        extra: 其他补充字段（例如 path、command 等）。
    """

    def __init__(self, code: str, message: str, http_status: int = 400, **extra):
        self.code = code
        self.message = message
        self.http_status = http_status
        self.extra = extra
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message, **self.extra}


class StorageError(BusinessError):
    """文件读写失败：文件不存在、无权限、磁盘错误等。"""


class ParseError(BusinessError):
    """JSON / TOML 内容无法解析或无法序列化。"""


class ValidationError(BusinessError):
    """参数校验失败，例如切换配置时下标越界。"""


class UnknownCommandError(BusinessError):
    """调用了未注册的命令。"""
