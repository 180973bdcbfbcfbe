"""
引擎設定

RhymesConfig 把引擎層級的設定集中在一個不可變物件，
可以在多個 RhymeEngine 之間共用:

    config = RhymesConfig(verbose=True, on_timing=lambda op, s: print(op, s))
    engine = RhymeEngine(dictionary, frequency, config=config)

不傳 config 時，RhymeEngine 以 verbose= / on_timing= / zhuyin_config=
參數組出同樣的設定。
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from .phonetics.config import DEFAULT_ZHUYIN_CONFIG, ZhuyinConfig
from .utils.logger import setup_logger

TimingCallback = Callable[[str, float], None]


def configure_logging(verbose: bool = False) -> None:
    """verbose 時為 mandarin_rhymes 命名空間加上 DEBUG 等級的輸出"""
    if verbose:
        setup_logger(level=logging.DEBUG)


@dataclass(frozen=True)
class RhymesConfig:
    """
    屬性:
        verbose: 建立引擎時開啟 DEBUG 日誌
        on_timing: 計時回呼 (operation, elapsed_seconds)，引擎初始化與每次查詢都會呼叫
        zhuyin: 注音規則表 (字母替代、聲調符號、韻母分組)
    """

    verbose: bool = False
    on_timing: Optional[TimingCallback] = None
    zhuyin: ZhuyinConfig = field(default_factory=lambda: DEFAULT_ZHUYIN_CONFIG)
