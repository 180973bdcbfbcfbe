"""
押韻字典 (Rhyme Dictionary)

預先建好的巢狀結構，每一層以一個音節的韻腳為 key，
深度等於詞的音節數；節點上的 "words" 列出韻腳序列與路徑完全相同的詞。

    {
        "øㄥ": {
            "ㄧ": {"words": [{"simplified": "能力", "traditional": "能力",
                              "toneNumberArray": [2, 4]}, ...]}
        }
    }

載入一次後即不可變，可在多個查詢 / 執行緒間共享。
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

from mandarin_rhymes.core.errors import DictionaryFormatError
from mandarin_rhymes.models import Word
from mandarin_rhymes.utils.logger import get_logger

WORDS_KEY = "words"

_logger = get_logger("dictionary")


@dataclass(frozen=True, eq=False)
class RhymeNode:
    """
    字典節點

    Attributes:
        key: 進入此節點的韻腳 (根節點為空字串)
        children: 韻腳 -> 子節點 (唯讀)
        words: 韻腳序列恰好走到此節點的詞
    """
    key: str = ""
    children: Mapping[str, "RhymeNode"] = field(default_factory=lambda: MappingProxyType({}))
    words: Tuple[Word, ...] = ()

    def child(self, key: str) -> Optional["RhymeNode"]:
        return self.children.get(key)

    @property
    def is_terminal(self) -> bool:
        return bool(self.words)

    @property
    def depth(self) -> int:
        """此節點以下的最大層數"""
        if not self.children:
            return 0
        return 1 + max(c.depth for c in self.children.values())


def _build_node(key: str, raw: Any, path: Tuple[str, ...]) -> RhymeNode:
    if not isinstance(raw, Mapping):
        raise DictionaryFormatError(f"節點必須是 mapping: {'/'.join(path) or '<root>'}")

    children = {}
    words: Tuple[Word, ...] = ()
    for child_key, value in raw.items():
        if child_key == WORDS_KEY:
            if not isinstance(value, Sequence) or isinstance(value, (str, bytes)):
                raise DictionaryFormatError(f"words 必須是列表: {'/'.join(path)}")
            words = tuple(v if isinstance(v, Word) else Word.from_record(v) for v in value)
        else:
            children[child_key] = _build_node(child_key, value, path + (child_key,))

    return RhymeNode(key=key, children=MappingProxyType(children), words=words)


class RhymeDictionary:
    """
    押韻字典 (Trie)

    使用方式:
        dictionary = RhymeDictionary.from_json("rhyming-dictionary.json")
        words = dictionary.lookup(("øㄥ", "ㄧ"))
    """

    def __init__(self, root: RhymeNode):
        self._root = root
        self._depth: Optional[int] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RhymeDictionary":
        """由巢狀 dict 建立字典"""
        return cls(_build_node("", data, ()))

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "RhymeDictionary":
        """
        讀取 JSON 押韻字典

        Raises:
            DictionaryFormatError: 檔案不是合法 JSON 或結構錯誤
        """
        path = Path(path)
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as exc:
            raise DictionaryFormatError(f"押韻字典不是合法 JSON: {path}") from exc

        dictionary = cls.from_mapping(data)
        _logger.info(f"Loaded rhyme dictionary from {path} (depth={dictionary.depth})")
        return dictionary

    @property
    def root(self) -> RhymeNode:
        return self._root

    @property
    def depth(self) -> int:
        """支援的最大音節數"""
        if self._depth is None:
            self._depth = self._root.depth
        return self._depth

    def find_node(self, rhyme_keys: Sequence[str]) -> Optional[RhymeNode]:
        """沿韻腳序列往下走，任何一層缺少子節點即回傳 None"""
        node = self._root
        for key in rhyme_keys:
            node = node.child(key)
            if node is None:
                return None
        return node

    def lookup(self, rhyme_keys: Sequence[str]) -> Tuple[Word, ...]:
        """
        取得韻腳序列完全相符的候選詞

        路徑不存在時回傳空 tuple (不是錯誤)。
        """
        if not rhyme_keys:
            return ()
        node = self.find_node(rhyme_keys)
        if node is None:
            return ()
        return node.words

    def __contains__(self, rhyme_keys: Sequence[str]) -> bool:
        return bool(self.lookup(rhyme_keys))
