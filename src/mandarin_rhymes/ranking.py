"""
候選詞排序與過濾

- rank_by_frequency: 以平均字頻排名排序 (越小越常用)
- separate_self: 把查詢詞本身從候選中拿出來
- filter_by_tones: 只保留聲調序列與查詢詞相同的候選
"""

from typing import Iterable, List, Optional, Sequence, Tuple

from mandarin_rhymes.core.errors import FrequencyDataError
from mandarin_rhymes.core.protocols import FrequencyProvider
from mandarin_rhymes.models import Word


def average_frequency(text: str, provider: FrequencyProvider) -> float:
    """
    計算詞的平均字頻排名

    例如 "成绩" 為 (成的排名 + 绩的排名) / 2
    """
    if not text:
        raise ValueError("無法計算空字串的字頻")

    total = 0
    for char in text:
        record = provider.get_character_frequency(char)
        try:
            total += int(record["number"])
        except (KeyError, TypeError, ValueError) as exc:
            raise FrequencyDataError(f"字頻紀錄格式錯誤: {char!r} -> {record!r}") from exc
    return total / len(text)


def rank_by_frequency(words: Iterable[Word], provider: FrequencyProvider) -> List[Word]:
    """為每個候選附上平均字頻並由常用到罕用排序 (穩定排序)"""
    scored = [w.with_frequency(average_frequency(w.simplified, provider)) for w in words]
    return sorted(scored, key=lambda w: w.average_frequency)


def separate_self(words: Sequence[Word], hanzi: str) -> Tuple[Optional[Word], List[Word]]:
    """
    移除第一個簡體或繁體與查詢詞相同的候選

    Returns:
        (查詢詞本身或 None, 其餘候選)
    """
    for i, word in enumerate(words):
        if word.matches(hanzi):
            return word, list(words[:i]) + list(words[i + 1:])
    return None, list(words)


def matches_tones(word: Word, tone_numbers: Sequence[int]) -> bool:
    # 長度不同視為不相符
    if len(word.tone_numbers) != len(tone_numbers):
        return False
    return all(a == b for a, b in zip(word.tone_numbers, tone_numbers))


def filter_by_tones(words: Iterable[Word], tone_numbers: Sequence[int]) -> List[Word]:
    return [w for w in words if matches_tones(w, tone_numbers)]
