"""
押韻查詢端到端測試 (以替身轉換器取代 pypinyin)
"""

import asyncio

import pytest

from mandarin_rhymes import (
    ConversionError,
    MandarinRhymes,
    QueryOptions,
    RhymeEngine,
    RhymesConfig,
    SelfInfo,
    UnknownLetterError,
    Word,
)
from mandarin_rhymes.phonetics import DEFAULT_ZHUYIN_CONFIG, SyllableNormalizer, ZhuyinConfig


def simplified(result):
    return [w.simplified for w in result.rhymes]


class TestNengLiScenarios:
    """能力：有/無聲調比對"""

    @pytest.fixture(autouse=True)
    def setup(self, engine):
        self.engine = engine
        self.query = engine.create_query("能力")

    def test_tone_matching_excludes_shengqi(self):
        result = asyncio.run(self.query.with_tone_matching().get_rhymes())
        assert simplified(result).count("生气") == 0
        assert simplified(result).count("成绩") == 1

    def test_without_tone_matching_includes_both(self):
        result = asyncio.run(self.query.get_rhymes())
        assert simplified(result).count("生气") == 1
        assert simplified(result).count("成绩") == 1

    def test_self_is_separated(self):
        result = asyncio.run(self.query.get_rhymes())
        assert isinstance(result.self_word, Word)
        assert result.self_word.simplified == "能力"
        assert "能力" not in simplified(result)

    def test_rhymes_sorted_by_frequency(self):
        result = asyncio.run(self.query.get_rhymes())
        assert simplified(result) == ["生气", "正义", "成绩"]
        scores = [w.average_frequency for w in result.rhymes]
        assert scores == sorted(scores)

    def test_keys_and_tones_exposed(self):
        result = asyncio.run(self.query.get_rhymes())
        assert result.rhyme_keys == ("øㄥ", "ㄧ")
        assert result.tone_numbers == (2, 4)

    def test_tone_matching_does_not_persist(self):
        """聲調比對只作用於單次查詢"""
        matched = asyncio.run(self.query.with_tone_matching().get_rhymes())
        unmatched = asyncio.run(self.query.get_rhymes())
        assert "生气" not in simplified(matched)
        assert "生气" in simplified(unmatched)

    def test_options_value(self):
        result = asyncio.run(self.query.get_rhymes(QueryOptions(match_tones=True)))
        assert all(w.tone_numbers == (2, 4) for w in result.rhymes)

    def test_concurrent_calls_keep_their_own_options(self):
        async def run_both():
            return await asyncio.gather(
                self.query.with_tone_matching().get_rhymes(),
                self.query.get_rhymes(),
                self.query.get_rhymes(QueryOptions(match_tones=True)),
            )

        matched, unmatched, matched_again = asyncio.run(run_both())
        assert simplified(matched) == ["成绩"]
        assert simplified(unmatched) == ["生气", "正义", "成绩"]
        assert simplified(matched_again) == ["成绩"]

    def test_to_dict(self):
        data = asyncio.run(self.query.get_rhymes()).to_dict()
        assert data["self"]["simplified"] == "能力"
        assert [r["simplified"] for r in data["rhymes"]] == ["生气", "正义", "成绩"]
        assert data["rhymes"][0]["averageFrequency"] == 115


class TestNoDictionaryPath:
    """应该是空的：五個音節沒有字典路徑"""

    @pytest.fixture(autouse=True)
    def setup(self, engine):
        self.query = engine.create_query("应该是空的")

    def test_with_tone_matching(self):
        result = asyncio.run(self.query.with_tone_matching().get_rhymes())
        assert result.rhymes == ()

    def test_without_tone_matching(self):
        result = asyncio.run(self.query.get_rhymes())
        assert result.rhymes == ()

    def test_self_still_has_tones(self):
        result = asyncio.run(self.query.get_rhymes())
        assert isinstance(result.self_word, SelfInfo)
        assert result.self_word.tone_numbers == (1, 1, 4, 1, 5)
        assert result.rhyme_keys == ("ㄧㄥ", "ㄞ", "ø", "uㄥ", "ㄜ")
        assert result.to_dict() == {"self": {"toneNumberArray": [1, 1, 4, 1, 5]}, "rhymes": []}


class TestSingleSyllables:

    @pytest.fixture(autouse=True)
    def setup(self, engine):
        self.engine = engine

    def test_u_umlaut_word(self):
        """绿 (lü4) 經 ü 特例處理後與 雨、去 押韻"""
        result = asyncio.run(self.engine.get_rhymes("绿"))
        assert result.self_word.simplified == "绿"
        assert simplified(result) == ["去", "雨"]

    def test_apical_series_rhyme_together(self):
        result = asyncio.run(self.engine.get_rhymes("四"))
        assert simplified(result) == ["是", "字"]

    def test_self_not_in_dictionary(self):
        result = asyncio.run(self.engine.get_rhymes("熊"))
        assert isinstance(result.self_word, SelfInfo)
        assert result.rhyme_keys == ("uㄥ",)


class TestQueryInput:

    @pytest.fixture(autouse=True)
    def setup(self, engine, pinyin_converter):
        self.engine = engine
        self.pinyin_converter = pinyin_converter

    def test_symbols_are_stripped(self):
        query = self.engine.create_query("能·力")
        assert query.text == "能力"
        result = asyncio.run(query.get_rhymes())
        assert self.pinyin_converter.calls == ["能力"]
        assert len(result.rhyme_keys) == 2

    def test_empty_query(self):
        with pytest.raises(ValueError):
            self.engine.create_query("·")

    def test_borrowed_letter(self):
        query = self.engine.create_query("A咖")
        syllables = asyncio.run(query.to_syllables())
        assert syllables == ["A", "ka1"]
        assert query.rhyme_keys_for(syllables) == ("ㄟ", "ㄚ")

    def test_unknown_borrowed_letter_propagates(self):
        with pytest.raises(UnknownLetterError):
            asyncio.run(self.engine.get_rhymes("F咖"))

    def test_key_length_matches_character_count(self):
        for hanzi in ("能力", "应该是空的", "绿", "A咖"):
            query = self.engine.create_query(hanzi)
            syllables = asyncio.run(query.to_syllables())
            assert len(query.rhyme_keys_for(syllables)) == len(hanzi)

    def test_digits_are_rejected_before_conversion(self):
        query = self.engine.create_query("3D打印")
        with pytest.raises(ConversionError) as exc_info:
            asyncio.run(query.get_rhymes())
        assert "3" in str(exc_info.value)
        assert exc_info.value.source == "3D打印"
        assert self.pinyin_converter.calls == []

    def test_repr(self):
        assert repr(self.engine.create_query("能力")) == "MandarinRhymes('能力')"


class TestConverterFailures:

    def test_syllable_converter_failure_is_typed(self, rhyme_dictionary, frequency_table, zhuyin_converter):
        class FailingConverter:
            async def to_syllables(self, hanzi):
                raise RuntimeError("network down")

        engine = RhymeEngine(
            rhyme_dictionary,
            frequency_table,
            syllable_converter=FailingConverter(),
            spelling_converter=zhuyin_converter,
        )
        with pytest.raises(ConversionError) as exc_info:
            asyncio.run(engine.get_rhymes("能力"))
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_conversion_error_passes_through_unchanged(self, rhyme_dictionary, frequency_table, zhuyin_converter):
        original = ConversionError("boom", source="能力")

        class FailingConverter:
            async def to_syllables(self, hanzi):
                raise original

        query = MandarinRhymes(
            "能力",
            dictionary=rhyme_dictionary,
            frequency=frequency_table,
            syllable_converter=FailingConverter(),
            normalizer=SyllableNormalizer(zhuyin_converter),
        )
        with pytest.raises(ConversionError) as exc_info:
            asyncio.run(query.get_rhymes())
        assert exc_info.value is original

    def test_syllable_count_mismatch(self, rhyme_dictionary, frequency_table, zhuyin_converter):
        class ShortConverter:
            async def to_syllables(self, hanzi):
                return ["neng2"]

        engine = RhymeEngine(
            rhyme_dictionary,
            frequency_table,
            syllable_converter=ShortConverter(),
            spelling_converter=zhuyin_converter,
        )
        with pytest.raises(ConversionError):
            asyncio.run(engine.get_rhymes("能力"))


class TestEngine:

    def test_sync_wrapper(self, engine):
        result = engine.get_rhymes_sync("能力", QueryOptions().with_tone_matching())
        assert simplified(result) == ["成绩"]

    def test_flat_string_output_is_split(self, rhyme_dictionary, frequency_table, zhuyin_converter):
        class FlatConverter:
            async def to_syllables(self, hanzi):
                return ["neng2 li4"]

        engine = RhymeEngine(
            rhyme_dictionary,
            frequency_table,
            syllable_converter=FlatConverter(),
            spelling_converter=zhuyin_converter,
        )
        result = engine.get_rhymes_sync("能力")
        assert result.rhyme_keys == ("øㄥ", "ㄧ")

    def test_timing_callback(self, rhyme_dictionary, frequency_table, pinyin_converter, zhuyin_converter):
        timings = []
        engine = RhymeEngine(
            rhyme_dictionary,
            frequency_table,
            syllable_converter=pinyin_converter,
            spelling_converter=zhuyin_converter,
            on_timing=lambda op, elapsed: timings.append(op),
        )
        engine.get_rhymes_sync("能力")
        assert "RhymeEngine.__init__" in timings
        assert any(op.startswith("MandarinRhymes.get_rhymes") for op in timings)

    def test_backend_stats_without_pypinyin_backend(self, engine):
        assert engine.is_initialized()
        assert engine.get_backend_stats() == {}

    def test_config_object_drives_engine(self, rhyme_dictionary, frequency_table, pinyin_converter, zhuyin_converter):
        timings = []
        config = RhymesConfig(on_timing=lambda op, elapsed: timings.append(op))
        engine = RhymeEngine(
            rhyme_dictionary,
            frequency_table,
            syllable_converter=pinyin_converter,
            spelling_converter=zhuyin_converter,
            config=config,
        )
        assert engine.config is config
        assert engine.zhuyin_config is DEFAULT_ZHUYIN_CONFIG
        engine.get_rhymes_sync("能力")
        assert "RhymeEngine.__init__" in timings
        assert any(op.startswith("MandarinRhymes.get_rhymes") for op in timings)

    def test_config_zhuyin_rules_reach_queries(self, rhyme_dictionary, frequency_table, pinyin_converter, zhuyin_converter):
        config = RhymesConfig(zhuyin=ZhuyinConfig(placeholder="_"))
        engine = RhymeEngine(
            rhyme_dictionary,
            frequency_table,
            syllable_converter=pinyin_converter,
            spelling_converter=zhuyin_converter,
            config=config,
        )
        assert engine.normalizer.config is config.zhuyin
        result = engine.get_rhymes_sync("能力")
        assert result.rhyme_keys == ("_ㄥ", "ㄧ")
        assert result.rhymes == ()

    def test_keyword_arguments_build_config(self, engine):
        assert isinstance(engine.config, RhymesConfig)
        assert engine.config.verbose is False
        assert engine.config.on_timing is None
        assert engine.zhuyin_config is DEFAULT_ZHUYIN_CONFIG
