"""
外部協作者 Protocol

定義查詢流程依賴的三個外部介面（漢字→拼音、拼音→注音、字頻）。
"""

from typing import Any, Mapping, Protocol, Sequence, Union, runtime_checkable

# 轉換器可以回傳扁平列表，也可以回傳 [["neng2"], ["li4"]] 這種巢狀單元素群組
SyllableChunk = Union[str, Sequence[str]]


@runtime_checkable
class SyllableConverter(Protocol):
    async def to_syllables(self, hanzi: str) -> Sequence[SyllableChunk]:
        """將漢字詞轉為帶數字聲調的拼音音節 (如 "能力" -> ["neng2", "li4"])"""
        ...


@runtime_checkable
class SpellingConverter(Protocol):
    def to_zhuyin(self, syllable: str) -> Sequence[str]:
        """將單一拼音音節轉為注音候選列表，只取第一個"""
        ...


@runtime_checkable
class FrequencyProvider(Protocol):
    def get_character_frequency(self, char: str) -> Mapping[str, Any]:
        """查詢單字字頻，回傳至少含 "number" (排名，越小越常用) 的紀錄"""
        ...
