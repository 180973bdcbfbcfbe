"""
字頻表 (Frequency Table)

提供單字的字頻排名 (1 = 最常用)，作為押韻候選排序的依據。

支援的資料來源:
- dict: {"的": 1, "一": 2, ...}
- CSV/TSV: 含 character 與 frequency_rank (或 number) 欄位的表頭
  (如 Jun Da 現代漢語字頻表經 hanziDB 匯出的格式)
- JSON: {"的": 1, ...} 或 [{"character": "的", "number": 1}, ...]
"""

import csv
import json
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from mandarin_rhymes.core.errors import FrequencyDataError
from mandarin_rhymes.utils.lazy_imports import _get_hanziconv, is_hanziconv_available
from mandarin_rhymes.utils.logger import get_logger

_CHAR_COLUMNS = ("character", "char", "hanzi")
_RANK_COLUMNS = ("frequency_rank", "number", "rank")


class FrequencyTable:
    """
    字頻表

    Args:
        ranks: 單字 -> 排名
        unknown_rank: 查不到的字使用的排名，預設為表大小 + 1
        simplify_fallback: 查不到時先以 hanziconv 轉簡體再查一次

    使用方式:
        table = FrequencyTable.from_csv("hanzi_frequency.csv")
        table.get_character_frequency("的")  # {"character": "的", "number": 1}
    """

    def __init__(
        self,
        ranks: Mapping[str, int],
        *,
        unknown_rank: Optional[int] = None,
        simplify_fallback: bool = True,
    ):
        self._ranks = MappingProxyType(dict(ranks))
        self.unknown_rank = unknown_rank if unknown_rank is not None else len(self._ranks) + 1
        self.simplify_fallback = simplify_fallback and is_hanziconv_available()
        self._logger = get_logger("frequency")

    # ========== 載入 ==========

    @classmethod
    def from_mapping(cls, ranks: Mapping[str, Any], **kwargs) -> "FrequencyTable":
        parsed: Dict[str, int] = {}
        for char, rank in ranks.items():
            try:
                parsed[char] = int(rank)
            except (TypeError, ValueError) as exc:
                raise FrequencyDataError(f"字頻排名不是整數: {char!r} -> {rank!r}") from exc
        return cls(parsed, **kwargs)

    @classmethod
    def from_csv(cls, path: Union[str, Path], delimiter: Optional[str] = None, **kwargs) -> "FrequencyTable":
        """
        讀取含表頭的 CSV/TSV 字頻表 (.tsv 預設以 tab 分隔)
        """
        path = Path(path)
        if delimiter is None:
            delimiter = "\t" if path.suffix.lower() == ".tsv" else ","

        ranks: Dict[str, int] = {}
        with path.open("r", encoding="utf-8", newline="") as f:
            reader = csv.DictReader(f, delimiter=delimiter)
            fields = reader.fieldnames or []
            char_col = next((c for c in _CHAR_COLUMNS if c in fields), None)
            rank_col = next((c for c in _RANK_COLUMNS if c in fields), None)
            if char_col is None or rank_col is None:
                raise FrequencyDataError(f"字頻表缺少字或排名欄位: {path} ({fields})")

            for row in reader:
                char = (row.get(char_col) or "").strip()
                if len(char) != 1:
                    continue
                try:
                    rank = int(row[rank_col])
                except (TypeError, ValueError):
                    continue
                # 同一字重複出現時保留較常用的排名
                if char not in ranks or rank < ranks[char]:
                    ranks[char] = rank

        table = cls(ranks, **kwargs)
        table._logger.info(f"Loaded {len(ranks)} character frequencies from {path}")
        return table

    @classmethod
    def from_json(cls, path: Union[str, Path], **kwargs) -> "FrequencyTable":
        path = Path(path)
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as exc:
            raise FrequencyDataError(f"字頻表不是合法 JSON: {path}") from exc

        if isinstance(data, list):
            try:
                data = {item["character"]: item["number"] for item in data}
            except (KeyError, TypeError) as exc:
                raise FrequencyDataError(f"字頻紀錄缺少 character/number: {path}") from exc
        if not isinstance(data, Mapping):
            raise FrequencyDataError(f"無法辨識的字頻表格式: {path}")
        return cls.from_mapping(data, **kwargs)

    # ========== 查詢 ==========

    def __len__(self) -> int:
        return len(self._ranks)

    def __contains__(self, char: str) -> bool:
        return char in self._ranks

    def rank(self, char: str) -> int:
        """取得單字排名，查不到時回傳 unknown_rank"""
        rank = self._ranks.get(char)
        if rank is not None:
            return rank

        if self.simplify_fallback:
            simplified = _get_hanziconv().toSimplified(char)
            rank = self._ranks.get(simplified)
            if rank is not None:
                return rank

        self._logger.debug(f"  [Frequency] {char!r} not found, using {self.unknown_rank}")
        return self.unknown_rank

    def get_character_frequency(self, char: str) -> Dict[str, Any]:
        return {"character": char, "number": self.rank(char)}
