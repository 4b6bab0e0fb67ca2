import json
import logging
import sys
import time
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, Iterator

command_ctx: ContextVar[str | None] = ContextVar("command", default=None)

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(command)s] %(message)s"


class CommandFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        name = command_ctx.get()
        record.command = name or "-"
        return True


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        base: Dict[str, Any] = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "time": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created)),
            "command": getattr(record, "command", "-"),
        }
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False)


def init_logging(debug: bool = False, fmt: str = "json") -> None:
    root = logging.getLogger()
    root.handlers.clear()
    level = logging.DEBUG if debug else logging.INFO
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.addFilter(CommandFilter())
    if fmt == "text":
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    else:
        handler.setFormatter(JsonFormatter())
    root.addHandler(handler)


@contextmanager
def command_context(name: str) -> Iterator[None]:
    """Tag every log record emitted while a command body runs."""
    token = command_ctx.set(name)
    logger = logging.getLogger("fxform.command")
    logger.debug("command start")
    try:
        yield
    finally:
        logger.debug("command end")
        command_ctx.reset(token)
