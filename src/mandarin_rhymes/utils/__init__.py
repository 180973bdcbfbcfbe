"""
工具模組

提供日誌、計時、延遲導入等通用工具。
"""

from .lazy_imports import (
    CHINESE_INSTALL_HINT,
    check_chinese_dependencies,
    is_chinese_available,
    is_hanziconv_available,
)
from .logger import (
    TimingContext,
    enable_debug_logging,
    enable_timing_logging,
    get_logger,
    log_timing,
    setup_logger,
)

__all__ = [
    # 日誌工具
    "get_logger",
    "setup_logger",
    "enable_debug_logging",
    "enable_timing_logging",
    "log_timing",
    "TimingContext",

    # 依賴檢查
    "is_chinese_available",
    "is_hanziconv_available",
    "check_chinese_dependencies",
    "CHINESE_INSTALL_HINT",
]
