import json
import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

from switch_core.config.settings import settings


_SENSITIVE_KEY = re.compile(r"(token|key|secret|password)", re.IGNORECASE)


def redact(payload: Dict[str, Any]) -> Dict[str, Any]:
    """把 key 名看起来像凭据的字段值替换为掩码。"""

    redacted: Dict[str, Any] = {}
    for key, value in payload.items():
        if isinstance(value, dict):
            redacted[key] = redact(value)
        elif _SENSITIVE_KEY.search(str(key)) and value:
            text = str(value)
            redacted[key] = f"{text[:4]}***" if len(text) > 8 else "***"
        else:
            redacted[key] = value
    return redacted


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        msg = record.getMessage()
        redact_content = getattr(settings, "log_redact_content", True)
        if redact_content:
            msg = (msg or "")[:200]
        payload = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "name": record.name,
            "msg": msg,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload["extra"] = redact(extra) if redact_content else extra
        return json.dumps(payload, ensure_ascii=False)


def setup_logger() -> logging.Logger:
    logger = logging.getLogger("switch_core")
    logger.setLevel(getattr(settings, "log_level", "INFO"))
    if logger.handlers:
        return logger
    log_dir = Path(settings.log_dir).expanduser()
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_dir / "switch.log", encoding="utf-8")
    except OSError:
        # 日志目录不可写时退化为 stderr
        handler = logging.StreamHandler()
    handler.setLevel(logger.level)
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    return logger


logger = setup_logger()
