"""
韻腳萃取 (Rhyme Key Extraction)

將帶聲調的注音拼寫化約為決定押韻的韻母類別，作為押韻字典的查詢 key。

兩個步驟:
1. 去聲調：移除結尾的 ˊ ˇ ˋ ˙ (一聲不標記，不需處理)
2. 萃取韻腳：看最後一個符號 (鼻音韻尾再多看前一個)

合併規則 (刻意的模糊押韻，不是發音錯誤):
- 平舌 ㄗㄘㄙ 與捲舌 ㄓㄔㄕㄖ 都映射為佔位符號 ø
- ㄨㄥ 與 ㄩㄥ 發音相同，合併為 uㄥ
"""

from typing import Iterable, Optional, Tuple

from .config import DEFAULT_ZHUYIN_CONFIG, ZhuyinConfig


def strip_tone(zhuyin: str, config: Optional[ZhuyinConfig] = None) -> str:
    """
    移除注音結尾的聲調符號

    >>> strip_tone("ㄋㄥˊ")
    'ㄋㄥ'
    >>> strip_tone("ㄕㄥ")
    'ㄕㄥ'
    """
    config = config or DEFAULT_ZHUYIN_CONFIG
    if not zhuyin:
        return zhuyin
    last = config.TONE_MARK_ALIASES.get(zhuyin[-1], zhuyin[-1])
    if last in config.TONE_MARKS:
        return zhuyin[:-1]
    return zhuyin


def extract_rhyme_key(zhuyin: str, config: Optional[ZhuyinConfig] = None) -> str:
    """
    從注音拼寫萃取韻腳

    Args:
        zhuyin: 帶聲調的注音 (如 "ㄌㄧˋ")
        config: 符號配置，預設 DEFAULT_ZHUYIN_CONFIG

    Returns:
        str: 一或兩個符號的韻腳 (如 "ㄧ"、"ㄧㄢ"、"øㄥ"、"uㄥ"、"ø")

    範例:
        >>> extract_rhyme_key("ㄕˋ")
        'ø'
        >>> extract_rhyme_key("ㄒㄩㄥˊ")
        'uㄥ'
    """
    config = config or DEFAULT_ZHUYIN_CONFIG
    stripped = strip_tone(zhuyin, config)
    if not stripped:
        raise ValueError(f"無法從空的注音萃取韻腳: {zhuyin!r}")

    last = stripped[-1]
    penultimate = stripped[-2] if len(stripped) > 1 else ""

    if last in config.DENTI_ALVEOLAR_SERIES or last in config.RETROFLEX_SERIES:
        return config.placeholder

    if last in config.NASAL_SERIES:
        if penultimate == config.MEDIAL_I:
            return penultimate + last
        if penultimate in (config.MEDIAL_U, config.MEDIAL_V):
            medial = config.fuzzy_u_symbol if last == config.VELAR_NASAL else penultimate
            return medial + last
        return config.placeholder + last

    return last


def extract_rhyme_keys(
    spellings: Iterable[str], config: Optional[ZhuyinConfig] = None
) -> Tuple[str, ...]:
    return tuple(extract_rhyme_key(z, config) for z in spellings)
