"""
押韻字典測試
"""

import json

import pytest

from mandarin_rhymes import DictionaryFormatError, RhymeDictionary, Word

from conftest import RHYME_DATA


class TestRhymeDictionary:

    @pytest.fixture(autouse=True)
    def setup(self, rhyme_dictionary):
        self.dictionary = rhyme_dictionary

    def test_full_path_returns_words(self):
        words = self.dictionary.lookup(("øㄥ", "ㄧ"))
        assert [w.simplified for w in words] == ["成绩", "正义", "能力", "生气"]
        assert all(isinstance(w, Word) for w in words)

    def test_missing_first_level(self):
        assert self.dictionary.lookup(("ㄠ", "ㄧ")) == ()

    def test_missing_intermediate_level(self):
        """中間節點存在但後續缺少時回傳空結果"""
        assert self.dictionary.lookup(("ㄧㄥ", "ㄞ", "ø", "uㄥ", "ㄜ")) == ()

    def test_intermediate_node_without_words(self):
        assert self.dictionary.lookup(("ㄧㄥ", "ㄞ")) == ()
        assert ("ㄧㄥ", "ㄞ") not in self.dictionary

    def test_lookup_is_pure(self):
        """相同的韻腳序列永遠得到相同的候選"""
        first = self.dictionary.lookup(("øㄥ", "ㄧ"))
        second = self.dictionary.lookup(["øㄥ", "ㄧ"])
        assert first == second

    def test_empty_keys(self):
        assert self.dictionary.lookup(()) == ()

    def test_depth(self):
        assert self.dictionary.depth == 3

    def test_nodes_are_read_only(self):
        with pytest.raises(TypeError):
            self.dictionary.root.children["new"] = None

    def test_word_records_are_parsed(self):
        words = self.dictionary.lookup(("øㄥ", "ㄧ"))
        chengji = words[0]
        assert chengji.traditional == "成績"
        assert chengji.tone_numbers == (2, 4)
        nengli = words[2]
        assert nengli.traditional == "能力"


class TestRhymeDictionaryLoading:

    def test_from_json(self, tmp_path):
        path = tmp_path / "rhyming-dictionary.json"
        path.write_text(json.dumps(RHYME_DATA, ensure_ascii=False), encoding="utf-8")

        dictionary = RhymeDictionary.from_json(path)
        assert len(dictionary.lookup(("ㄩ",))) == 3

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(DictionaryFormatError):
            RhymeDictionary.from_json(path)

    def test_words_must_be_list(self):
        with pytest.raises(DictionaryFormatError):
            RhymeDictionary.from_mapping({"ㄚ": {"words": "媽媽"}})

    def test_node_must_be_mapping(self):
        with pytest.raises(DictionaryFormatError):
            RhymeDictionary.from_mapping({"ㄚ": ["媽媽"]})

    def test_record_without_simplified(self):
        with pytest.raises(DictionaryFormatError):
            RhymeDictionary.from_mapping({"ㄚ": {"words": [{"traditional": "媽"}]}})

    def test_snake_case_tones_accepted(self):
        dictionary = RhymeDictionary.from_mapping(
            {"ㄚ": {"words": [{"simplified": "妈", "tone_numbers": ["1"]}]}}
        )
        assert dictionary.lookup(("ㄚ",))[0].tone_numbers == (1,)


class TestWord:

    def test_extra_fields_round_trip(self):
        word = Word.from_record(
            {"simplified": "能力", "toneNumberArray": [2, 4], "pinyin": "neng2 li4"}
        )
        data = word.to_dict()
        assert data["pinyin"] == "neng2 li4"
        assert data["traditional"] == "能力"
        assert "averageFrequency" not in data

    def test_with_frequency_returns_new_instance(self):
        word = Word("能力", "能力", (2, 4))
        scored = word.with_frequency(75.0)
        assert word.average_frequency is None
        assert scored.average_frequency == 75.0
        assert scored.to_dict()["averageFrequency"] == 75.0

    def test_matches_simplified_or_traditional(self):
        word = Word("生气", "生氣", (1, 4))
        assert word.matches("生气")
        assert word.matches("生氣")
        assert not word.matches("生")
