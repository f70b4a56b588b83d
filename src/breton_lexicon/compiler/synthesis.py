"""Extra spellings for mutated proper nouns.

A mutated proper noun such as ``Gemper`` (``Kemper`` after ``e``) is also
written with the mutated initial prefixed to the unchanged name: ``gKemper``.
Those spellings are added to the lexicon so each one can be looked up.
"""
from __future__ import annotations

import re

from breton_lexicon.common.types import OutputRecord

# (word initial, lemma initial pattern, prefix), first match wins.
PROPER_NOUN_CORRESPONDENCES: tuple[tuple[str, re.Pattern[str], str], ...] = (
    ("G", re.compile(r"K"), "g"),  # gKemper
    ("C’h", re.compile(r"K|G[^w]"), "c’h"),  # c’hKemper
    ("D", re.compile(r"T"), "d"),  # dThomas
    ("Z", re.compile(r"[DT]"), "z"),  # zThomas
    ("B", re.compile(r"P"), "b"),  # bPariz
    ("F", re.compile(r"P"), "f"),  # fPariz
    ("V", re.compile(r"[BM]"), "v"),  # vBrest
    ("P", re.compile(r"B"), "p"),  # pBrest
    ("T", re.compile(r"D"), "t"),  # tDakar
    ("K", re.compile(r"G[^w]"), "k"),  # kGauguin
)


def is_mutated_proper_noun(record: OutputRecord) -> bool:
    return (
        record.tag.startswith("Z ")
        and " M:" in record.tag
        and record.word[:1].isupper()
    )


def synthesize_entries(record: OutputRecord) -> list[OutputRecord]:
    if not is_mutated_proper_noun(record):
        return []
    for word_initial, lemma_pattern, prefix in PROPER_NOUN_CORRESPONDENCES:
        if record.word.startswith(word_initial) and lemma_pattern.match(record.lemma):
            return [OutputRecord(word=prefix + record.lemma, lemma=record.lemma, tag=record.tag)]
    return []


__all__ = ["PROPER_NOUN_CORRESPONDENCES", "is_mutated_proper_noun", "synthesize_entries"]
