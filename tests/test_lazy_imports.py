"""
延遲導入與安裝提示測試
"""

import sys

import pytest

from mandarin_rhymes.utils import lazy_imports


class TestLazyImports:

    def test_missing_pypinyin_points_to_ch_extra(self, monkeypatch):
        monkeypatch.setattr(lazy_imports, "_pypinyin", None)
        monkeypatch.setitem(sys.modules, "pypinyin", None)
        with pytest.raises(ImportError, match=r"mandarin-rhymes\[ch\]"):
            lazy_imports._get_pypinyin()

    def test_missing_hanziconv_points_to_ch_extra(self, monkeypatch):
        monkeypatch.setattr(lazy_imports, "_hanziconv", None)
        monkeypatch.setitem(sys.modules, "hanziconv", None)
        with pytest.raises(ImportError, match=r"mandarin-rhymes\[ch\]"):
            lazy_imports._get_hanziconv()

    def test_engine_with_own_converters_does_not_load_pypinyin(self, engine):
        assert engine.get_backend_stats() == {}
