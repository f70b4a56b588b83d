"""Compile the expanded analyzer dictionary into a grammar checker lexicon.

Each input line ``word:lemma<tag1>…<tagN>`` goes through the tag
simplifier, the mutation classifier, the irregular-word annotator and the
proper-noun synthesizer. Lines whose tags cannot be simplified are kept in
an error channel so gaps in the tag table stay visible.
"""
from __future__ import annotations

import logging
import re
from collections import Counter
from dataclasses import dataclass, field, replace
from typing import Iterable

from tqdm import tqdm

from breton_lexicon.common.config import get_config_paths
from breton_lexicon.common.types import (
    ErrorRecord,
    InputEntry,
    MutationAnomaly,
    OutputRecord,
)

from .irregular import IrregularAnnotator, PluralMismatch
from .mutation import MutationClassifier
from .synthesis import synthesize_entries
from .tags import normalize_lemma, simplify_tag
from .wordlists import WordLists

logger = logging.getLogger(__name__)

_LINE_RE = re.compile(r"^([^: _~]+):(>:)?([^:<]+)([^#]*)(#.*)?")


def parse_line(line: str) -> InputEntry | None:
    """Split an ``lt-expand`` line; return ``None`` for lines of other shapes."""

    text = line.rstrip("\r\n")
    match = _LINE_RE.match(text)
    if match is None:
        return None
    word, _, lemma, raw_tag, _ = match.groups()
    return InputEntry(word=word, lemma=lemma, raw_tag=raw_tag, line=text)


@dataclass
class CompileResult:
    """Everything a compilation run produced, in emission order."""

    records: list[OutputRecord] = field(default_factory=list)
    extra_records: list[OutputRecord] = field(default_factory=list)
    errors: list[ErrorRecord] = field(default_factory=list)
    anomalies: list[MutationAnomaly] = field(default_factory=list)
    plural_mismatches: list[PluralMismatch] = field(default_factory=list)
    override_conflicts: list[PluralMismatch] = field(default_factory=list)
    handled: int = 0
    unhandled: int = 0
    synthesized: int = 0
    lemmas: set[str] = field(default_factory=set)
    words: set[str] = field(default_factory=set)
    unseen_plurals: list[str] = field(default_factory=list)

    @property
    def lexicon(self) -> list[OutputRecord]:
        return self.records + self.extra_records

    @property
    def tag_counts(self) -> Counter[str]:
        return Counter(record.tag for record in self.lexicon)

    def missing_lemmas(self) -> list[str]:
        """Lemmas that never appear as a word of their own."""

        return sorted(self.lemmas - self.words)


class LexiconCompiler:
    """Turn ``lt-expand`` output into ``word\\tlemma\\ttag`` records.

    The compiler holds only read-only tables; every call to :meth:`compile`
    starts from fresh counters and "seen" flags. Without explicit word lists
    the bundled ones are loaded.
    """

    def __init__(self, word_lists: WordLists | None = None) -> None:
        if word_lists is None:
            word_lists = WordLists.load(get_config_paths()["wordlists"])
        self.word_lists = word_lists
        self.classifier = MutationClassifier(self.word_lists.mutation_exceptions)

    def compile_entry(
        self,
        entry: InputEntry,
        annotator: IrregularAnnotator,
        result: CompileResult,
    ) -> list[OutputRecord]:
        lemma = normalize_lemma(entry.word, entry.lemma)
        result.lemmas.add(lemma)
        result.words.add(entry.word)

        tag = simplify_tag(entry.raw_tag)
        if tag is None:
            result.errors.append(
                ErrorRecord(line=entry.line, word=entry.word, lemma=lemma, raw_tag=entry.raw_tag)
            )
            result.unhandled += 1
            return []

        decision = self.classifier.classify(lemma, entry.word, tag)
        if decision.anomaly is not None:
            result.anomalies.append(replace(decision.anomaly, line=entry.line))
        tag = annotator.annotate(lemma, entry.word, decision.tag)

        record = OutputRecord(word=entry.word, lemma=lemma, tag=tag)
        synthesized = synthesize_entries(record)
        result.handled += 1
        result.synthesized += len(synthesized)
        return [record, *synthesized]

    def compile(self, lines: Iterable[str], *, progress: bool = False) -> CompileResult:
        result = CompileResult()
        annotator = IrregularAnnotator(self.word_lists)

        for line in tqdm(lines, desc="Compiling lexicon", unit="line", disable=not progress):
            entry = parse_line(line)
            if entry is None:
                continue
            result.records.extend(self.compile_entry(entry, annotator, result))

        result.extra_records = list(self.word_lists.extra_entries)
        result.plural_mismatches = list(annotator.mismatches)
        result.override_conflicts = list(annotator.conflicts)
        result.unseen_plurals = annotator.unseen_plurals()

        logger.info("handled [%d] words, unhandled [%d] words", result.handled, result.unhandled)
        if result.anomalies:
            logger.info("%d unexpected mutations", len(result.anomalies))
        for word in result.unseen_plurals:
            logger.warning("*** plural noun [%s] is missing in the analyzer dictionary.", word)
        return result


def compile_lexicon(
    lines: Iterable[str],
    word_lists: WordLists | None = None,
    *,
    progress: bool = False,
) -> CompileResult:
    return LexiconCompiler(word_lists).compile(lines, progress=progress)


__all__ = ["CompileResult", "LexiconCompiler", "compile_lexicon", "parse_line"]
