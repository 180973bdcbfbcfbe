"""
日誌工具模組

所有 logger 都掛在 "mandarin_rhymes" 命名空間下，
使用者可以直接透過標準 logging 控制輸出:

    import logging
    logging.getLogger("mandarin_rhymes").setLevel(logging.DEBUG)

或使用便捷函數:

    from mandarin_rhymes import enable_debug_logging
    enable_debug_logging()
"""

import functools
import logging
import time
from typing import Callable, Optional

ROOT_LOGGER_NAME = "mandarin_rhymes"
_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# 函式庫預設不輸出任何東西
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    取得命名空間下的 logger

    Args:
        name: 子 logger 名稱 (如 "engine.rhymes")，None 則回傳根 logger

    Returns:
        logging.Logger
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, fmt: str = _DEFAULT_FORMAT) -> logging.Logger:
    """
    為根 logger 加上 StreamHandler (重複呼叫只會調整等級)
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    has_stream = any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.NullHandler)
        for h in logger.handlers
    )
    if not has_stream:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)
    return logger


def enable_debug_logging() -> logging.Logger:
    """開啟 DEBUG 等級日誌"""
    return setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> logging.Logger:
    """只開啟計時日誌 (timing logger 設為 DEBUG)"""
    setup_logger(level=logging.DEBUG)
    timing_logger = get_logger("timing")
    timing_logger.setLevel(logging.DEBUG)
    return timing_logger


class TimingContext:
    """
    計時 context manager

    使用方式:
        with TimingContext("RhymeEngine.get_rhymes", logger):
            ...

    離開區塊時以指定等級記錄耗時，若有 callback 則一併呼叫
    callback(operation, elapsed)。
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or get_logger("timing")
        self.level = level
        self.callback = callback
        self.elapsed: float = 0.0
        self._start: float = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.elapsed = time.perf_counter() - self._start
        self.logger.log(self.level, f"[Timing] {self.operation}: {self.elapsed * 1000:.2f}ms")
        if self.callback is not None:
            self.callback(self.operation, self.elapsed)
        return False


def log_timing(operation: Optional[str] = None, level: int = logging.DEBUG):
    """
    計時裝飾器

    Args:
        operation: 記錄用名稱，預設為函式的 __qualname__
        level: 日誌等級
    """

    def decorator(func):
        name = operation or func.__qualname__

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with TimingContext(name, get_logger("timing"), level):
                return func(*args, **kwargs)

        return wrapper

    return decorator
