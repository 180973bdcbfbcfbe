"""
注音與韻腳模組

- SyllableNormalizer: 拼音音節 → 注音 (含特例修正)
- extract_tone / extract_tones: 拼音數字聲調
- strip_tone / extract_rhyme_key: 注音 → 韻腳
- ZhuyinConfig: 符號集合與替代表
"""

from .config import DEFAULT_ZHUYIN_CONFIG, ZhuyinConfig
from .normalizer import SyllableNormalizer, is_borrowed_letter
from .rhyme_key import extract_rhyme_key, extract_rhyme_keys, strip_tone
from .tones import extract_tone, extract_tones

__all__ = [
    "ZhuyinConfig",
    "DEFAULT_ZHUYIN_CONFIG",
    "SyllableNormalizer",
    "is_borrowed_letter",
    "strip_tone",
    "extract_rhyme_key",
    "extract_rhyme_keys",
    "extract_tone",
    "extract_tones",
]
