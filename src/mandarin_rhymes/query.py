"""
押韻查詢 (MandarinRhymes)

單一詞的查詢物件，由 RhymeEngine.create_query() 建立。

查詢流程:
    漢字 → 拼音音節 (外部轉換器，唯一的 await)
         → 聲調序列 + 注音 → 韻腳序列
         → 押韻字典走訪 → 候選詞
         → 字頻排序 → 移出查詢詞本身 → (可選) 聲調過濾

查詢物件建立後不可變；聲調比對等選項以 QueryOptions 傳入單次呼叫，
因此同一物件上的並行查詢不會互相影響。

使用方式:
    query = engine.create_query("能力")
    result = await query.get_rhymes()
    result = await query.with_tone_matching().get_rhymes()
"""

from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from mandarin_rhymes.core.errors import ConversionError
from mandarin_rhymes.core.protocols import FrequencyProvider, SyllableChunk, SyllableConverter
from mandarin_rhymes.dictionary import RhymeDictionary
from mandarin_rhymes.models import DEFAULT_OPTIONS, QueryOptions, QueryResult, SelfInfo, Syllable
from mandarin_rhymes.phonetics import (
    SyllableNormalizer,
    ZhuyinConfig,
    extract_rhyme_key,
    extract_tone,
)
from mandarin_rhymes.ranking import filter_by_tones, rank_by_frequency, separate_self
from mandarin_rhymes.utils.logger import TimingContext, get_logger

if TYPE_CHECKING:
    from mandarin_rhymes.engine import RhymeEngine


def strip_symbols(hanzi: str, config: ZhuyinConfig) -> str:
    """移除不影響押韻的符號 (如 "·"、","、空白)"""
    return "".join(ch for ch in hanzi if ch not in config.IGNORED_SYMBOLS)


def flatten_syllables(chunks: Sequence[SyllableChunk], text: str) -> List[str]:
    """
    將轉換器輸出攤平為每個字一個音節

    - 巢狀群組只取第一個元素
    - 字串以空白切開
    - 原文中連續的英文字母 (如 "AB咖" 的 "AB") 拆成單一字母
    """
    syllables: List[str] = []
    for chunk in chunks:
        if isinstance(chunk, str):
            parts = chunk.split()
        elif chunk:
            parts = [chunk[0]]
        else:
            continue

        for part in parts:
            if len(part) > 1 and part.isascii() and part.isalpha() and part in text:
                syllables.extend(part)
            else:
                syllables.append(part)
    return syllables


def unsupported_characters(text: str) -> List[str]:
    """回傳 text 中無法轉為注音的 ASCII 字元 (英文字母以外)"""
    return [ch for ch in text if ch.isascii() and not ch.isalpha()]


class MandarinRhymes:
    """
    中文押韻查詢

    Attributes:
        hanzi: 原始查詢字串
        text: 移除符號後實際查詢的字串
    """

    @classmethod
    def _from_engine(cls, engine: "RhymeEngine", hanzi: str) -> "MandarinRhymes":
        """
        由 RhymeEngine 調用的內部工廠方法

        使用 Engine 提供的共享元件，避免重複初始化。
        """
        instance = cls.__new__(cls)
        instance._engine = engine
        instance._logger = get_logger("query.rhymes")
        instance._timing_callback = engine._timing_callback
        instance.dictionary = engine.dictionary
        instance.frequency = engine.frequency
        instance.syllable_converter = engine.syllable_converter
        instance.normalizer = engine.normalizer
        instance.config = engine.zhuyin_config
        instance._set_hanzi(hanzi)
        return instance

    def __init__(
        self,
        hanzi: str,
        *,
        dictionary: RhymeDictionary,
        frequency: FrequencyProvider,
        syllable_converter: SyllableConverter,
        normalizer: SyllableNormalizer,
        config: Optional[ZhuyinConfig] = None,
    ):
        self._engine = None
        self._logger = get_logger("query.rhymes")
        self._timing_callback = None
        self.dictionary = dictionary
        self.frequency = frequency
        self.syllable_converter = syllable_converter
        self.normalizer = normalizer
        self.config = config or normalizer.config
        self._set_hanzi(hanzi)

    def _set_hanzi(self, hanzi: str) -> None:
        text = strip_symbols(hanzi or "", self.config)
        if not text:
            raise ValueError(f"查詢字串不可為空: {hanzi!r}")
        self.hanzi = hanzi
        self.text = text

    def __repr__(self) -> str:
        return f"MandarinRhymes({self.hanzi!r})"

    # ========== 流程各階段 ==========

    async def to_syllables(self) -> List[str]:
        """
        漢字 → 帶數字聲調的拼音 (每個字一個音節)

        英文字母以外的 ASCII 字元 (數字、標點，如 "3D打印" 的 "3") 沒有對應的
        注音，直接拒絕，不呼叫轉換器。

        Raises:
            ConversionError: 含不支援的 ASCII 字元、轉換器失敗，或音節數與字數不符
        """
        unsupported = unsupported_characters(self.text)
        if unsupported:
            raise ConversionError(
                f"不支援的字元 {unsupported}: {self.text!r} (只接受漢字與英文字母)",
                source=self.text,
            )

        try:
            chunks = await self.syllable_converter.to_syllables(self.text)
        except ConversionError:
            raise
        except Exception as exc:
            raise ConversionError(f"拼音轉換失敗: {self.text!r}", source=self.text) from exc

        syllables = flatten_syllables(chunks, self.text)
        if len(syllables) != len(self.text):
            raise ConversionError(
                f"音節數 ({len(syllables)}) 與字數 ({len(self.text)}) 不符: {self.text!r} -> {syllables}",
                source=self.text,
            )
        return syllables

    def analyze(self, syllables: Sequence[str]) -> Tuple[Syllable, ...]:
        """拼音音節 → Syllable (注音、聲調、韻腳)"""
        analyzed = []
        for pinyin in syllables:
            zhuyin = self.normalizer.to_zhuyin(pinyin)
            analyzed.append(
                Syllable(
                    pinyin=pinyin,
                    zhuyin=zhuyin,
                    tone=extract_tone(pinyin),
                    rhyme_key=extract_rhyme_key(zhuyin, self.config),
                )
            )
        return tuple(analyzed)

    def rhyme_keys_for(self, syllables: Sequence[str]) -> Tuple[str, ...]:
        return tuple(s.rhyme_key for s in self.analyze(syllables))

    # ========== 查詢 ==========

    async def get_rhymes(self, options: Optional[QueryOptions] = None) -> QueryResult:
        """
        查詢押韻詞

        Args:
            options: 本次查詢的選項，None 表示預設 (不比對聲調)

        Returns:
            QueryResult: self_word 為查詢詞本身 (不在字典時只有聲調)，
                         rhymes 由常用到罕用排序
        """
        options = options or DEFAULT_OPTIONS

        with TimingContext(f"MandarinRhymes.get_rhymes({self.text})", self._logger,
                           callback=self._timing_callback):
            syllables = await self.to_syllables()
            analyzed = self.analyze(syllables)
            tone_numbers = tuple(s.tone for s in analyzed)
            rhyme_keys = tuple(s.rhyme_key for s in analyzed)
            self._logger.debug(f"  [Keys] {self.text} -> {rhyme_keys} tones={tone_numbers}")

            candidates = self.dictionary.lookup(rhyme_keys)
            if not candidates:
                self._logger.debug(f"  [Lookup] no dictionary path for {rhyme_keys}")
                return QueryResult(
                    self_word=SelfInfo(tone_numbers),
                    rhyme_keys=rhyme_keys,
                    tone_numbers=tone_numbers,
                )

            ranked = rank_by_frequency(candidates, self.frequency)
            self_word, rhymes = separate_self(ranked, self.hanzi)
            if self_word is None and self.text != self.hanzi:
                self_word, rhymes = separate_self(ranked, self.text)

            if options.match_tones:
                rhymes = filter_by_tones(rhymes, tone_numbers)

            self._logger.debug(
                f"  [Rhymes] {self.text}: {len(candidates)} candidates -> {len(rhymes)} rhymes"
                f" (match_tones={options.match_tones})"
            )
            return QueryResult(
                self_word=self_word if self_word is not None else SelfInfo(tone_numbers),
                rhymes=tuple(rhymes),
                rhyme_keys=rhyme_keys,
                tone_numbers=tone_numbers,
            )

    def with_tone_matching(self) -> "BoundQuery":
        """回傳只在下一次 get_rhymes() 比對聲調的綁定查詢，原物件不受影響"""
        return BoundQuery(self, DEFAULT_OPTIONS.with_tone_matching())


class BoundQuery:
    """查詢物件 + 不可變選項，供 query.with_tone_matching().get_rhymes() 使用"""

    def __init__(self, query: MandarinRhymes, options: QueryOptions):
        self.query = query
        self.options = options

    def with_tone_matching(self) -> "BoundQuery":
        return BoundQuery(self.query, self.options.with_tone_matching())

    async def get_rhymes(self) -> QueryResult:
        return await self.query.get_rhymes(self.options)
