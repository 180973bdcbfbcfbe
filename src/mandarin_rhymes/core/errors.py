"""
例外類別

所有由本套件拋出的錯誤都繼承 MandarinRhymesError。
外部轉換器的失敗一律包成 ConversionError，原始例外保留在 __cause__。
"""


class MandarinRhymesError(Exception):
    """套件錯誤基類"""


class ConversionError(MandarinRhymesError):
    """
    拼音/注音轉換失敗

    Attributes:
        source: 轉換時的輸入 (漢字或拼音音節)
    """

    def __init__(self, message: str, source: str = ""):
        super().__init__(message)
        self.source = source


class UnknownLetterError(ConversionError):
    """借用英文字母不在注音替代表中"""


class DictionaryFormatError(MandarinRhymesError):
    """押韻字典資源格式錯誤"""


class FrequencyDataError(MandarinRhymesError):
    """字頻資源格式錯誤"""
