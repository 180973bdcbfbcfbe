"""
pypinyin 轉換後端

預設的外部轉換器實作:
- to_syllables: 漢字詞 → 帶數字聲調的拼音 (TONE3，輕聲標 5，ü 保留)
- to_zhuyin: 單一拼音音節 → 注音 (先轉為聲調符號拼音，再轉 BOPOMOFO)

注意：此模組使用延遲導入 (Lazy Import) 機制，
僅在實際轉換時才會載入 pypinyin。
"""

import asyncio
from functools import lru_cache
from typing import Any, Dict, List, Tuple

from mandarin_rhymes.core.errors import ConversionError
from mandarin_rhymes.utils.lazy_imports import _get_pypinyin
from mandarin_rhymes.utils.logger import get_logger

_logger = get_logger("backend.pypinyin")


# =============================================================================
# 拼音快取 (Performance Critical)
# =============================================================================
# 音節轉換是純函數，結果與查詢無關，可以安全地跨查詢快取

@lru_cache(maxsize=50000)
def cached_get_tone3_syllables(hanzi: str) -> Tuple[Tuple[str, ...], ...]:
    """快取版拼音計算 (保留 pypinyin 的巢狀群組形狀)"""
    pypinyin = _get_pypinyin()
    groups = pypinyin.pinyin(
        hanzi,
        style=pypinyin.Style.TONE3,
        heteronym=False,
        neutral_tone_with_five=True,
        v_to_u=True,
    )
    return tuple(tuple(g) for g in groups)


@lru_cache(maxsize=5000)
def cached_get_zhuyin(syllable: str) -> str:
    """快取版注音計算"""
    pypinyin = _get_pypinyin()
    from pypinyin.contrib.tone_convert import to_tone
    from pypinyin.style import convert as convert_style

    marked = to_tone(syllable)
    zhuyin = convert_style(marked, pypinyin.Style.BOPOMOFO, strict=True)
    if not zhuyin:
        raise ConversionError(f"pypinyin 無法轉換注音: {syllable!r}", source=syllable)
    return zhuyin


class PypinyinBackend:
    """
    以 pypinyin 實作 SyllableConverter 與 SpellingConverter

    使用方式:
        backend = PypinyinBackend()
        syllables = await backend.to_syllables("能力")   # [["neng2"], ["li4"]]
        backend.to_zhuyin("neng2")                       # ["ㄋㄥˊ"]
    """

    def __init__(self):
        self._initialized = False

    def initialize(self) -> None:
        """預先載入 pypinyin (缺少依賴時在此拋出 ImportError)"""
        if not self._initialized:
            _get_pypinyin()
            self._initialized = True

    async def to_syllables(self, hanzi: str) -> List[List[str]]:
        self.initialize()
        try:
            # 在執行緒中轉換，event loop 不等待 pypinyin
            groups = await asyncio.to_thread(cached_get_tone3_syllables, hanzi)
        except Exception as exc:
            raise ConversionError(f"拼音轉換失敗: {hanzi!r}", source=hanzi) from exc
        _logger.debug(f"  [Pinyin] {hanzi} -> {groups}")
        return [list(g) for g in groups]

    def to_zhuyin(self, syllable: str) -> List[str]:
        self.initialize()
        return [cached_get_zhuyin(syllable)]

    def get_cache_stats(self) -> Dict[str, Any]:
        stats = {}
        for name, func in (("pinyin", cached_get_tone3_syllables), ("zhuyin", cached_get_zhuyin)):
            info = func.cache_info()
            stats[name] = {
                "hits": info.hits,
                "misses": info.misses,
                "maxsize": info.maxsize,
                "currsize": info.currsize,
            }
        return stats

    @staticmethod
    def cache_clear() -> None:
        cached_get_tone3_syllables.cache_clear()
        cached_get_zhuyin.cache_clear()


_default_backend = None


def get_pypinyin_backend() -> PypinyinBackend:
    """取得共享的預設後端"""
    global _default_backend
    if _default_backend is None:
        _default_backend = PypinyinBackend()
    return _default_backend
