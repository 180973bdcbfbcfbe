"""
共用測試替身

以固定對照表取代 pypinyin，讓測試不依賴外部轉換器的版本差異。
"""

import asyncio

import pytest

from mandarin_rhymes import FrequencyTable, RhymeDictionary, RhymeEngine

# 漢字 -> 帶數字聲調拼音
PINYIN = {
    "能": "neng2", "力": "li4", "生": "sheng1", "气": "qi4", "成": "cheng2",
    "绩": "ji4", "正": "zheng4", "义": "yi4", "应": "ying1", "该": "gai1",
    "是": "shi4", "空": "kong1", "的": "de5", "绿": "lü4", "雨": "yu3",
    "去": "qu4", "学": "xüe2", "四": "si4", "字": "zi4", "熊": "xiong2",
    "红": "hong2", "咖": "ka1", "翰": "han4",
}

# 拼音 -> 注音 (含 ü 特例處理時使用的虛擬音節)
ZHUYIN = {
    "neng2": "ㄋㄥˊ", "li4": "ㄌㄧˋ", "sheng1": "ㄕㄥ", "qi4": "ㄑㄧˋ",
    "cheng2": "ㄔㄥˊ", "ji4": "ㄐㄧˋ", "zheng4": "ㄓㄥˋ", "yi4": "ㄧˋ",
    "ying1": "ㄧㄥ", "gai1": "ㄍㄞ", "shi4": "ㄕˋ", "kong1": "ㄎㄨㄥ",
    "de5": "ㄉㄜ˙", "si4": "ㄙˋ", "zi4": "ㄗˋ", "xiong2": "ㄒㄩㄥˊ",
    "hong2": "ㄏㄨㄥˊ", "ka1": "ㄎㄚ", "han4": "ㄏㄢˋ", "yu3": "ㄩˇ", "qu4": "ㄑㄩˋ",
    "la4": "ㄌㄚˋ", "la1": "ㄌㄚ", "xa2": "ㄒㄚˊ",
}

FREQUENCY = {
    "的": 1, "是": 3, "生": 30, "能": 50, "成": 60, "正": 80, "力": 100,
    "气": 200, "义": 300, "绩": 900, "去": 90, "雨": 700, "绿": 800,
    "四": 200, "字": 150, "应": 120, "该": 180, "空": 400,
}


def word(simplified, tones, traditional=None, **extra):
    record = {"simplified": simplified, "toneNumberArray": list(tones)}
    if traditional:
        record["traditional"] = traditional
    record.update(extra)
    return record


RHYME_DATA = {
    "øㄥ": {
        "ㄧ": {
            "words": [
                word("成绩", (2, 4), "成績"),
                word("正义", (4, 4), "正義"),
                word("能力", (2, 4)),
                word("生气", (1, 4), "生氣"),
            ]
        }
    },
    # 只有中間節點，沒有完整路徑
    "ㄧㄥ": {"ㄞ": {"ø": {}}},
    "ㄩ": {"words": [word("绿", (4,), "綠"), word("雨", (3,)), word("去", (4,))]},
    "ø": {"words": [word("是", (4,)), word("四", (4,)), word("字", (4,))]},
}


class StubPinyinConverter:
    """以對照表取代 pypinyin，回傳巢狀單元素群組"""

    def __init__(self):
        self.calls = []

    async def to_syllables(self, hanzi):
        self.calls.append(hanzi)
        await asyncio.sleep(0)
        return [[PINYIN.get(ch, ch)] for ch in hanzi]


class StubZhuyinConverter:
    def __init__(self):
        self.calls = []

    def to_zhuyin(self, syllable):
        self.calls.append(syllable)
        if syllable not in ZHUYIN:
            raise KeyError(syllable)
        return [ZHUYIN[syllable]]


@pytest.fixture
def rhyme_dictionary():
    return RhymeDictionary.from_mapping(RHYME_DATA)


@pytest.fixture
def frequency_table():
    return FrequencyTable.from_mapping(FREQUENCY, simplify_fallback=False)


@pytest.fixture
def pinyin_converter():
    return StubPinyinConverter()


@pytest.fixture
def zhuyin_converter():
    return StubZhuyinConverter()


@pytest.fixture
def engine(rhyme_dictionary, frequency_table, pinyin_converter, zhuyin_converter):
    return RhymeEngine(
        rhyme_dictionary,
        frequency_table,
        syllable_converter=pinyin_converter,
        spelling_converter=zhuyin_converter,
    )
