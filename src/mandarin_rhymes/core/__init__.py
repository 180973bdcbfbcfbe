"""
核心抽象層

定義例外、外部協作者 Protocol 與引擎基類。
"""

from .engine_interface import BaseEngine
from .errors import (
    ConversionError,
    DictionaryFormatError,
    FrequencyDataError,
    MandarinRhymesError,
    UnknownLetterError,
)
from .protocols import FrequencyProvider, SpellingConverter, SyllableChunk, SyllableConverter

__all__ = [
    "BaseEngine",
    "MandarinRhymesError",
    "ConversionError",
    "UnknownLetterError",
    "DictionaryFormatError",
    "FrequencyDataError",
    "SyllableConverter",
    "SpellingConverter",
    "FrequencyProvider",
    "SyllableChunk",
]
