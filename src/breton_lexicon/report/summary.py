"""Render the lexicon, the error channel and the maintenance reports."""

from __future__ import annotations

from typing import Iterable, Mapping

from breton_lexicon.common.types import ErrorRecord, MutationAnomaly, OutputRecord
from breton_lexicon.compiler.driver import CompileResult


def format_lexicon(records: Iterable[OutputRecord]) -> list[str]:
    return [record.to_line() for record in records]


def format_errors(errors: Iterable[ErrorRecord]) -> list[str]:
    return [error.to_line() for error in errors]


def format_anomalies(anomalies: Iterable[MutationAnomaly]) -> list[str]:
    return [anomaly.to_line() for anomaly in anomalies]


def format_tag_report(tag_counts: Mapping[str, int]) -> list[str]:
    """One ``count\\ttag`` line per distinct tag, sorted by tag."""

    return [f"{tag_counts[tag]}\t{tag}" for tag in sorted(tag_counts)]


def format_summary(result: CompileResult) -> str:
    return (
        f"Created [{result.handled}] words, unhandled [{result.unhandled}] words, "
        f"synthesized [{result.synthesized}] words, "
        f"unexpected mutations [{len(result.anomalies)}]"
    )


def format_missing_report(result: CompileResult) -> list[str]:
    """List lemmas never seen as words and plural nouns never matched."""

    missing_lemmas = result.missing_lemmas()
    lines = [f"# Lemma words missing from dictionary: {len(missing_lemmas)}"]
    lines.extend(missing_lemmas)
    lines.append("")
    lines.append(f"# Plural person nouns missing from dictionary: {len(result.unseen_plurals)}")
    lines.extend(result.unseen_plurals)
    return lines


__all__ = [
    "format_anomalies",
    "format_errors",
    "format_lexicon",
    "format_missing_report",
    "format_summary",
    "format_tag_report",
]
