"""
mandarin_rhymes - 中文押韻查詢 (Mandarin Rhymes)

核心概念:
- 把查詢詞轉為帶數字聲調的拼音，再轉為注音
- 從注音萃取決定押韻的韻腳 (平舌/捲舌、ㄨㄥ/ㄩㄥ 刻意合併)
- 以韻腳序列走訪預先建好的押韻字典，依字頻由常用到罕用排序

官方入口（穩定 API）:
- `mandarin_rhymes.RhymeEngine`
- `mandarin_rhymes.RhymeDictionary`
- `mandarin_rhymes.FrequencyTable`
"""

# =============================================================================
# Engine 層（官方入口）
# =============================================================================
from mandarin_rhymes.engine import RhymeEngine
from mandarin_rhymes.query import BoundQuery, MandarinRhymes

# =============================================================================
# 資料來源與模型
# =============================================================================
from mandarin_rhymes.dictionary import RhymeDictionary, RhymeNode
from mandarin_rhymes.frequency import FrequencyTable
from mandarin_rhymes.models import QueryOptions, QueryResult, SelfInfo, Syllable, Word

# =============================================================================
# 配置與日誌工具
# =============================================================================
from mandarin_rhymes.config import RhymesConfig, configure_logging
from mandarin_rhymes.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

# =============================================================================
# 依賴檢查工具
# =============================================================================
from mandarin_rhymes.utils.lazy_imports import check_chinese_dependencies, is_chinese_available

# =============================================================================
# 例外
# =============================================================================
from mandarin_rhymes.core.errors import (
    ConversionError,
    DictionaryFormatError,
    FrequencyDataError,
    MandarinRhymesError,
    UnknownLetterError,
)

# =============================================================================
# Backend 層（進階用途）
# =============================================================================
from mandarin_rhymes.backend import PypinyinBackend, get_pypinyin_backend

__all__ = [
    # Engine
    "RhymeEngine",
    "MandarinRhymes",
    "BoundQuery",
    # Data
    "RhymeDictionary",
    "RhymeNode",
    "FrequencyTable",
    "Word",
    "Syllable",
    "SelfInfo",
    "QueryOptions",
    "QueryResult",
    # Config & logging
    "RhymesConfig",
    "configure_logging",
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
    # Dependency checks
    "is_chinese_available",
    "check_chinese_dependencies",
    # Errors
    "MandarinRhymesError",
    "ConversionError",
    "UnknownLetterError",
    "DictionaryFormatError",
    "FrequencyDataError",
    # Backend (advanced)
    "PypinyinBackend",
    "get_pypinyin_backend",
]

__version__ = "0.1.0"
