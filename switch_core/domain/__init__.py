"""领域层模型与异常。

包含：
- models: ConfigLine / ConfigGroup 以及各命令读写的配置记录。
- exceptions: 业务异常类型定义。
"""
