"""
押韻引擎 (RhymeEngine)

負責持有共享、唯讀的押韻字典、字頻表與轉換器，
並提供工廠方法建立輕量的 MandarinRhymes 查詢物件。

使用方式:
    from mandarin_rhymes import FrequencyTable, RhymeDictionary, RhymeEngine

    engine = RhymeEngine(
        RhymeDictionary.from_json("rhyming-dictionary.json"),
        FrequencyTable.from_csv("hanzi_frequency.csv"),
    )
    result = await engine.get_rhymes("能力")
    result = engine.get_rhymes_sync("能力", QueryOptions(match_tones=True))
"""

import asyncio
from typing import Any, Callable, Dict, Optional

from mandarin_rhymes.backend import get_pypinyin_backend
from mandarin_rhymes.config import RhymesConfig
from mandarin_rhymes.core.engine_interface import BaseEngine
from mandarin_rhymes.core.protocols import FrequencyProvider, SpellingConverter, SyllableConverter
from mandarin_rhymes.dictionary import RhymeDictionary
from mandarin_rhymes.models import QueryOptions, QueryResult
from mandarin_rhymes.phonetics import DEFAULT_ZHUYIN_CONFIG, SyllableNormalizer, ZhuyinConfig
from mandarin_rhymes.query import MandarinRhymes


class RhymeEngine(BaseEngine):
    """
    押韻引擎

    Args:
        dictionary: 押韻字典
        frequency: 字頻來源
        syllable_converter: 漢字 → 拼音，None 時使用 pypinyin
        spelling_converter: 拼音 → 注音，None 時使用 pypinyin
        config: 引擎設定；提供時忽略 verbose / on_timing / zhuyin_config
        verbose / on_timing / zhuyin_config: 未提供 config 時的簡便參數
    """

    _engine_name = "rhymes"

    def __init__(
        self,
        dictionary: RhymeDictionary,
        frequency: FrequencyProvider,
        *,
        syllable_converter: Optional[SyllableConverter] = None,
        spelling_converter: Optional[SpellingConverter] = None,
        config: Optional[RhymesConfig] = None,
        zhuyin_config: Optional[ZhuyinConfig] = None,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ):
        if config is None:
            config = RhymesConfig(
                verbose=verbose,
                on_timing=on_timing,
                zhuyin=zhuyin_config or DEFAULT_ZHUYIN_CONFIG,
            )
        self._config = config
        self._init_logger(verbose=config.verbose, on_timing=config.on_timing)

        with self._log_timing("RhymeEngine.__init__"):
            self._backend = None
            if syllable_converter is None or spelling_converter is None:
                self._backend = get_pypinyin_backend()
                self._backend.initialize()

            self._dictionary = dictionary
            self._frequency = frequency
            self._syllable_converter = syllable_converter or self._backend
            self._spelling_converter = spelling_converter or self._backend
            self._normalizer = SyllableNormalizer(self._spelling_converter, config=config.zhuyin)

            self._initialized = True
            self._logger.info("RhymeEngine initialized")

    @property
    def dictionary(self) -> RhymeDictionary:
        return self._dictionary

    @property
    def frequency(self) -> FrequencyProvider:
        return self._frequency

    @property
    def syllable_converter(self) -> SyllableConverter:
        return self._syllable_converter

    @property
    def spelling_converter(self) -> SpellingConverter:
        return self._spelling_converter

    @property
    def normalizer(self) -> SyllableNormalizer:
        return self._normalizer

    @property
    def config(self) -> RhymesConfig:
        return self._config

    @property
    def zhuyin_config(self) -> ZhuyinConfig:
        return self._config.zhuyin

    def is_initialized(self) -> bool:
        return self._initialized

    def get_backend_stats(self) -> Dict[str, Any]:
        if self._backend is None:
            return {}
        return self._backend.get_cache_stats()

    def create_query(self, hanzi: str) -> MandarinRhymes:
        return MandarinRhymes._from_engine(engine=self, hanzi=hanzi)

    async def get_rhymes(self, hanzi: str, options: Optional[QueryOptions] = None) -> QueryResult:
        return await self.create_query(hanzi).get_rhymes(options)

    def get_rhymes_sync(self, hanzi: str, options: Optional[QueryOptions] = None) -> QueryResult:
        """同步版本，不可在已執行中的 event loop 內呼叫"""
        return asyncio.run(self.get_rhymes(hanzi, options))
