"""
基本使用範例

需要準備:
- rhyming-dictionary.json: 預先建好的押韻字典
- hanzi_frequency.csv: 含 frequency_rank 與 character 欄位的字頻表
"""

import asyncio
import sys

from mandarin_rhymes import FrequencyTable, QueryOptions, RhymeDictionary, RhymeEngine


async def main(dictionary_path: str, frequency_path: str, hanzi: str) -> None:
    engine = RhymeEngine(
        RhymeDictionary.from_json(dictionary_path),
        FrequencyTable.from_csv(frequency_path),
        verbose=True,
    )

    query = engine.create_query(hanzi)
    result = await query.get_rhymes()
    print(f"{hanzi} 押韻 ({len(result.rhymes)}): {[w.simplified for w in result.rhymes[:20]]}")

    matched = await query.get_rhymes(QueryOptions(match_tones=True))
    print(f"{hanzi} 同聲調 ({len(matched.rhymes)}): {[w.simplified for w in matched.rhymes[:20]]}")


if __name__ == "__main__":
    if len(sys.argv) != 4:
        print("usage: basic_usage.py rhyming-dictionary.json hanzi_frequency.csv 能力")
        sys.exit(1)
    asyncio.run(main(*sys.argv[1:]))
