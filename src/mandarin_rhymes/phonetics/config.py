"""
注音押韻配置模組

定義韻腳萃取所需的注音符號集合與特例替代表。
"""

from dataclasses import dataclass


@dataclass
class ZhuyinConfig:
    """
    注音押韻配置

    Attributes:
        placeholder (str): 代表「沒有可區分韻母」的佔位符號
        fuzzy_u_symbol (str): ㄨ/ㄩ + ㄥ 合併後使用的符號
    """
    placeholder: str = "ø"
    fuzzy_u_symbol: str = "u"

    # =========================================================================
    # 1. 英文字母替代表 (Borrowed Letters)
    # =========================================================================
    # 用於含英文字母的詞 (如 A咖)
    # 很多組合在普通話中並不存在，這裡只是為了判斷押韻而取的近似音
    # 字典的押韻分組是依照這份表建立的，數值不可任意修正
    ENGLISH_LETTER_SUBS = {
        "A": "ㄟ",
        "B": "ㄅㄧ",
        "C": "ㄙㄧ",
        "D": "ㄉㄧ",
        "E": "ㄧ",
        "G": "ㄐㄧ",
        "H": "ㄟㄔㄜ",
        "K": "ㄎㄟ",
        "L": "ㄝㄌㄜ",
        "M": "ㄝㄇㄜ",
        "N": "ㄝㄋ",
        "O": "ㄡ",
        "P": "ㄆㄧ",
        "R": "ㄦ",
        "S": "ㄝㄙㄜ",
        "T": "ㄊㄧ",
        "U": "ㄧㄨ",
        "Q": "ㄎㄧㄨ",
        # 普通話沒有 v 子音；押韻只需 ㄧ，ø 僅為一致性
        "V": "øㄧ",
        "X": "ㄝㄜㄙ",
    }

    # =========================================================================
    # 2. 聲調符號 (Tone Marks)
    # =========================================================================
    # 依序代表 2、3、4、5 (輕聲) 聲；注音的一聲不標記
    TONE_MARKS = ("ˊ", "ˇ", "ˋ", "˙")
    # 部分轉換器以 ASCII 反引號表示四聲
    TONE_MARK_ALIASES = {"`": "ˋ"}

    # =========================================================================
    # 3. 韻腳萃取用的符號集合
    # =========================================================================
    # 平舌音 zi/ci/si 與捲舌音 zhi/chi/shi/ri 沒有獨立韻母
    # 兩系列都以佔位符號表示，刻意讓它們互相押韻
    DENTI_ALVEOLAR_SERIES = frozenset({"ㄗ", "ㄙ", "ㄘ"})
    RETROFLEX_SERIES = frozenset({"ㄓ", "ㄔ", "ㄕ", "ㄖ"})

    # 鼻音韻尾需要再往前看一個介音才能判斷押韻
    NASAL_SERIES = frozenset({"ㄢ", "ㄣ", "ㄤ", "ㄥ"})
    MEDIAL_I = "ㄧ"
    MEDIAL_U = "ㄨ"
    MEDIAL_V = "ㄩ"
    VELAR_NASAL = "ㄥ"

    # =========================================================================
    # 4. 拼音特例 (Converter Workarounds)
    # =========================================================================
    # 含 ü 的音節直接轉換不可靠，改用虛擬韻母 a 取得聲母與聲調
    U_UMLAUT = "ü"
    U_UMLAUT_E = "üe"
    DUMMY_VOWEL = "a"
    U_UMLAUT_ZHUYIN = "ㄩ"
    U_UMLAUT_E_ZHUYIN = "ㄩㄝ"

    # 兒化音 r5 的轉換結果錯誤，直接寫死
    SPECIAL_SYLLABLES = {
        "r5": "儿˙",
    }

    # 不影響押韻、查詢前先移除的符號
    IGNORED_SYMBOLS = frozenset({",", "·", "，", "・", "•", " ", "　"})

    DEFAULT_TONE = 1


DEFAULT_ZHUYIN_CONFIG = ZhuyinConfig()
