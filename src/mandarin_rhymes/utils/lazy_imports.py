"""
延遲導入工具

pypinyin 與 hanziconv 只在實際轉換拼音/繁簡時才載入，
沒有安裝時給出明確的安裝提示。
"""

import importlib.util

CHINESE_INSTALL_HINT = (
    "缺少中文依賴。請執行:\n"
    "  pip install \"mandarin-rhymes[ch]\"\n"
    "或直接安裝:\n"
    "  pip install pypinyin hanziconv"
)

_pypinyin = None
_hanziconv = None


def _get_pypinyin():
    """延遲載入 pypinyin 模組"""
    global _pypinyin

    if _pypinyin is not None:
        return _pypinyin

    try:
        import pypinyin
    except ImportError:
        raise ImportError(CHINESE_INSTALL_HINT)

    _pypinyin = pypinyin
    return _pypinyin


def _get_hanziconv():
    """延遲載入 hanziconv 的 HanziConv 類別"""
    global _hanziconv

    if _hanziconv is not None:
        return _hanziconv

    try:
        from hanziconv import HanziConv
    except ImportError:
        raise ImportError(CHINESE_INSTALL_HINT)

    _hanziconv = HanziConv
    return _hanziconv


def is_chinese_available() -> bool:
    """檢查拼音轉換依賴是否已安裝"""
    return importlib.util.find_spec("pypinyin") is not None


def is_hanziconv_available() -> bool:
    return importlib.util.find_spec("hanziconv") is not None


def check_chinese_dependencies() -> None:
    """
    檢查中文依賴，缺少時拋出 ImportError
    """
    missing = []
    if not is_chinese_available():
        missing.append("pypinyin")
    if not is_hanziconv_available():
        missing.append("hanziconv")
    if missing:
        raise ImportError(f"{CHINESE_INSTALL_HINT}\n(缺少: {', '.join(missing)})")
