"""
引擎抽象基類

定義押韻引擎共用的日誌與計時設定。
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional

from mandarin_rhymes.utils.logger import TimingContext, get_logger, setup_logger


class BaseEngine(ABC):
    """
    押韻引擎的共用部分

    子類別在 __init__ 開頭呼叫 _init_logger，之後以 _log_timing 包住
    需要計時的階段；計時結果寫入 engine.<name> logger，並交給 on_timing 回呼。
    create_query() 回傳的查詢物件沿用同一個回呼。
    """

    _engine_name: str = "base"

    def _init_logger(
        self,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ) -> None:
        self._verbose = verbose
        self._timing_callback = on_timing

        if verbose:
            setup_logger(level=logging.DEBUG)

        self._logger = get_logger(f"engine.{self._engine_name}")

    def _log_timing(self, operation: str) -> TimingContext:
        return TimingContext(
            operation=operation,
            logger=self._logger,
            level=logging.DEBUG,
            callback=self._timing_callback,
        )

    @abstractmethod
    def create_query(self, hanzi: str) -> Any:
        pass

    @abstractmethod
    def is_initialized(self) -> bool:
        pass

    @abstractmethod
    def get_backend_stats(self) -> Dict[str, Any]:
        pass
