"""
音節正規化 (Syllable Normalizer)

在把拼音交給注音轉換器之前，處理轉換器無法正確處理的音節:

1. 單一英文字母 (如 A咖 的 A)：查英文字母替代表
2. 含 ü 的音節：轉換器會出錯，改用虛擬音節取得聲母與聲調後重組
3. 兒化音 r5：轉換結果錯誤，直接寫死
4. 其他：交給轉換器，取第一個候選
"""

from typing import Optional

from mandarin_rhymes.core.errors import ConversionError, UnknownLetterError
from mandarin_rhymes.core.protocols import SpellingConverter
from mandarin_rhymes.utils.logger import get_logger

from .config import DEFAULT_ZHUYIN_CONFIG, ZhuyinConfig
from .rhyme_key import strip_tone


def is_borrowed_letter(pinyin: str) -> bool:
    """是否為單一英文字母 (不分大小寫)"""
    return len(pinyin) == 1 and pinyin.isascii() and pinyin.isalpha()


class SyllableNormalizer:
    """
    拼音音節 → 注音拼寫

    Args:
        converter: 拼音→注音轉換器
        config: 注音配置
    """

    def __init__(self, converter: SpellingConverter, config: Optional[ZhuyinConfig] = None):
        self.converter = converter
        self.config = config or DEFAULT_ZHUYIN_CONFIG
        self._logger = get_logger("phonetics.normalizer")

    def to_zhuyin(self, pinyin: str) -> str:
        """
        將一個帶數字聲調的拼音音節轉為注音

        Raises:
            UnknownLetterError: 英文字母不在替代表中
            ConversionError: 轉換器失敗或沒有回傳候選
        """
        config = self.config

        if is_borrowed_letter(pinyin):
            zhuyin = config.ENGLISH_LETTER_SUBS.get(pinyin.upper())
            if zhuyin is None:
                raise UnknownLetterError(f"英文字母 {pinyin!r} 沒有對應的注音替代", source=pinyin)
            self._logger.debug(f"  [Letter] {pinyin} -> {zhuyin}")
            return zhuyin

        if config.U_UMLAUT in pinyin:
            return self._convert_u_umlaut(pinyin)

        if pinyin in config.SPECIAL_SYLLABLES:
            return config.SPECIAL_SYLLABLES[pinyin]

        return self._convert(pinyin)

    def _convert_u_umlaut(self, pinyin: str) -> str:
        config = self.config
        initial = pinyin[: pinyin.index(config.U_UMLAUT)]
        # 虛擬音節只用來取得聲母與聲調，如 "lü4" -> "la4"
        dummy = initial + config.DUMMY_VOWEL + pinyin[-1]
        dummy_zhuyin = self._convert(dummy)

        body = strip_tone(dummy_zhuyin, config)
        tone_mark = dummy_zhuyin[len(body):]
        # 一聲不標記，body 只需去掉虛擬韻母 ㄚ
        zhuyin_initial = body[:-1]
        vowel = config.U_UMLAUT_E_ZHUYIN if config.U_UMLAUT_E in pinyin else config.U_UMLAUT_ZHUYIN

        zhuyin = zhuyin_initial + vowel + tone_mark
        self._logger.debug(f"  [ü] {pinyin} (via {dummy} -> {dummy_zhuyin}) -> {zhuyin}")
        return zhuyin

    def _convert(self, pinyin: str) -> str:
        try:
            candidates = self.converter.to_zhuyin(pinyin)
        except ConversionError:
            raise
        except Exception as exc:
            raise ConversionError(f"注音轉換失敗: {pinyin!r}", source=pinyin) from exc

        if not candidates:
            raise ConversionError(f"注音轉換沒有回傳結果: {pinyin!r}", source=pinyin)
        return candidates[0]
