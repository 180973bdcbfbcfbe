"""
資料模型

- Syllable: 單一音節 (拼音、注音、聲調、韻腳)
- Word: 押韻字典中的詞
- SelfInfo: 查詢詞不在字典中時，只保留聲調資訊
- QueryOptions: 單次查詢的選項 (不可變)
- QueryResult: 查詢結果
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from mandarin_rhymes.core.errors import DictionaryFormatError

# 字典紀錄中已由 Word 欄位承接的 key
_RECORD_KEYS = ("simplified", "traditional", "toneNumberArray", "tone_numbers", "averageFrequency")


@dataclass(frozen=True)
class Syllable:
    pinyin: str
    zhuyin: str
    tone: int
    rhyme_key: str


@dataclass(frozen=True)
class Word:
    """
    押韻字典中的詞

    Attributes:
        simplified: 簡體
        traditional: 繁體 (可能與簡體相同)
        tone_numbers: 每個字的聲調 (1-5)
        average_frequency: 平均字頻排名，越小越常用；尚未排名時為 None
        extra: 字典紀錄中的其他欄位 (如 pinyin、definition)，原樣保留
    """
    simplified: str
    traditional: str = ""
    tone_numbers: Tuple[int, ...] = ()
    average_frequency: Optional[float] = None
    extra: Dict[str, Any] = field(default_factory=dict, hash=False, compare=False)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Word":
        """
        由字典紀錄建立 Word

        接受 {"simplified", "traditional", "toneNumberArray"} 或
        {"simplified", "traditional", "tone_numbers"} 兩種欄位名稱。
        """
        if not isinstance(record, Mapping) or "simplified" not in record:
            raise DictionaryFormatError(f"詞條缺少 simplified 欄位: {record!r}")

        tones = record.get("toneNumberArray", record.get("tone_numbers", ()))
        try:
            tone_numbers = tuple(int(t) for t in tones)
        except (TypeError, ValueError) as exc:
            raise DictionaryFormatError(f"詞條聲調格式錯誤: {record!r}") from exc

        simplified = record["simplified"]
        return cls(
            simplified=simplified,
            traditional=record.get("traditional") or simplified,
            tone_numbers=tone_numbers,
            average_frequency=record.get("averageFrequency"),
            extra={k: v for k, v in record.items() if k not in _RECORD_KEYS},
        )

    def with_frequency(self, average_frequency: float) -> "Word":
        return replace(self, average_frequency=average_frequency)

    def matches(self, hanzi: str) -> bool:
        """簡體或繁體與查詢字串完全相同"""
        return self.simplified == hanzi or self.traditional == hanzi

    def to_dict(self) -> Dict[str, Any]:
        data = dict(self.extra)
        data.update(
            {
                "simplified": self.simplified,
                "traditional": self.traditional,
                "toneNumberArray": list(self.tone_numbers),
            }
        )
        if self.average_frequency is not None:
            data["averageFrequency"] = self.average_frequency
        return data


@dataclass(frozen=True)
class SelfInfo:
    """查詢詞本身不在候選中時，self 只帶聲調序列"""
    tone_numbers: Tuple[int, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {"toneNumberArray": list(self.tone_numbers)}


@dataclass(frozen=True)
class QueryOptions:
    """
    單次查詢選項

    只作用在傳入的那一次查詢，不會留在查詢物件上。

    Attributes:
        match_tones: 只保留聲調序列與查詢詞完全相同的候選
    """
    match_tones: bool = False

    def with_tone_matching(self) -> "QueryOptions":
        return replace(self, match_tones=True)


DEFAULT_OPTIONS = QueryOptions()


@dataclass(frozen=True)
class QueryResult:
    """
    押韻查詢結果

    Attributes:
        self_word: 查詢詞本身 (在字典中時為 Word，否則為 SelfInfo)
        rhymes: 依平均字頻排序的押韻詞 (不含查詢詞)
        rhyme_keys: 查詢詞每個音節的韻腳
        tone_numbers: 查詢詞每個音節的聲調
    """
    self_word: Union[Word, SelfInfo]
    rhymes: Tuple[Word, ...] = ()
    rhyme_keys: Tuple[str, ...] = ()
    tone_numbers: Tuple[int, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "self": self.self_word.to_dict(),
            "rhymes": [w.to_dict() for w in self.rhymes],
        }
