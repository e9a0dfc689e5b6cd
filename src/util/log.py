import sys
import traceback
from typing import Any

from uvicorn.server import logger

from util.config import config

LEVELS = {"trace": 0, "debug": 1, "info": 2, "warn": 3, "warning": 3, "error": 4}
DEFAULT_LEVEL = LEVELS["info"]


def _is_enabled(level: str) -> bool:
    if config.log_level == "local":
        return True  # local runs print everything
    threshold = LEVELS.get(config.log_level, DEFAULT_LEVEL)
    return LEVELS.get(level.lower(), DEFAULT_LEVEL) >= threshold


def _compose(*args: Any) -> tuple[str, list[BaseException]]:
    parts: list[str] = []
    exceptions: list[BaseException] = []
    for arg in args:
        if isinstance(arg, BaseException):
            exceptions.append(arg)
            parts.append(f"! {type(arg).__name__} (see below)")
        else:
            parts.append(str(arg))

    if len(parts) <= 1:
        return "".join(parts), exceptions
    if exceptions:
        return "\n ├─ ".join(parts), exceptions
    return "\n ├─ ".join(parts[:-1]) + f"\n └─ {parts[-1]}", exceptions


def _trace_of(exception: BaseException) -> str | None:
    if not exception.__traceback__:
        return None
    return "".join(traceback.format_tb(exception.__traceback__)).strip()


def _print_locally(level: str, message: str, exceptions: list[BaseException]):
    if _is_enabled(level):
        print(f"[{level[0]}] {message}")
    for exception in exceptions:
        print(f" ‼  Message: {exception}", file = sys.stderr)
        if trace := _trace_of(exception):
            print(trace, file = sys.stderr)


def _emit(level: str, *args: Any) -> str:
    message, exceptions = _compose(*args)
    if not _is_enabled(level) and not exceptions:
        return message

    if config.log_level == "local":
        _print_locally(level, message, exceptions)
        return message

    try:
        if _is_enabled(level):
            match level:
                case "TRACE" | "DEBUG":
                    logger.debug(message)
                case "INFO":
                    logger.info(message)
                case "WARN":
                    logger.warning(message)
                case "ERROR":
                    logger.error(message)
        for exception in exceptions:
            logger.error(f"Message: {exception}")
            if trace := _trace_of(exception):
                logger.error(f"Details:\n └─ {trace}")
    except Exception:
        # the uvicorn logger is unusable outside of a server process
        _print_locally(level, message, exceptions)
    return message


def t(*args: Any) -> str:
    return _emit("TRACE", *args)


def d(*args: Any) -> str:
    return _emit("DEBUG", *args)


def i(*args: Any) -> str:
    return _emit("INFO", *args)


def w(*args: Any) -> str:
    return _emit("WARN", *args)


def e(*args: Any) -> str:
    return _emit("ERROR", *args)
