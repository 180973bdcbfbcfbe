"""
聲調萃取

拼音音節最後一個字元若是數字即為聲調，否則視為一聲
(例如 A咖 的 "A" 通常沒有標聲調，一般讀作一聲)。
"""

from typing import Iterable, Tuple

from .config import ZhuyinConfig


def extract_tone(pinyin: str) -> int:
    """
    取得單一音節的聲調

    >>> extract_tone("neng2")
    2
    >>> extract_tone("A")
    1
    """
    if pinyin and "0" <= pinyin[-1] <= "9":
        return int(pinyin[-1])
    return ZhuyinConfig.DEFAULT_TONE


def extract_tones(syllables: Iterable[str]) -> Tuple[int, ...]:
    return tuple(extract_tone(s) for s in syllables)
