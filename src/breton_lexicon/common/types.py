"""Shared record types for the Breton lexicon compiler.

Every stage of the compiler passes these small immutable records around
instead of raw tuples, so the lexicon writer, the error channel and the
reports all agree on field order.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


# Order in which rule identifiers are written in a mutation annotation.
RULE_ORDER: tuple[str, ...] = ("0a", "1", "1a", "1b", "2", "3", "4")


class MutationClass(str, Enum):
    """Initial-consonant alternation patterns of Breton."""

    NONE = "none"
    LENITION = "lenition"
    HARDENING = "hardening"
    SPIRANTIZATION = "spirantization"
    MIXED = "mixed"


def _rule_rank(rule: str) -> tuple[int, str]:
    try:
        return RULE_ORDER.index(rule), rule
    except ValueError:
        return len(RULE_ORDER), rule


@dataclass(frozen=True)
class Mutation:
    """A mutation class together with the rule numbers it satisfies.

    A single initial alternation often satisfies several numbered rules of
    the grammar books at once (``k`` -> ``g`` is both rule 1 and 1a), so all
    of them are kept.
    """

    kind: MutationClass
    rules: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def of(cls, kind: MutationClass, *rules: str) -> "Mutation":
        return cls(kind=kind, rules=frozenset(rules))

    @property
    def ordered_rules(self) -> list[str]:
        return sorted(self.rules, key=_rule_rank)

    def annotation(self) -> str:
        """Return the tag field, e.g. ``M:1:1a:``; empty when nothing mutated."""

        if self.kind is MutationClass.NONE or not self.rules:
            return ""
        return "M:" + "".join(f"{rule}:" for rule in self.ordered_rules)


NO_MUTATION = Mutation(kind=MutationClass.NONE)


@dataclass(frozen=True)
class InputEntry:
    word: str
    lemma: str
    raw_tag: str
    line: str = ""


@dataclass(frozen=True)
class OutputRecord:
    word: str
    lemma: str
    tag: str

    def to_line(self) -> str:
        return f"{self.word}\t{self.lemma}\t{self.tag}"


@dataclass(frozen=True)
class ErrorRecord:
    """An input line whose tag could not be simplified."""

    line: str
    word: str
    lemma: str
    raw_tag: str

    def to_line(self) -> str:
        return f"{self.line} -> word={self.word} lemma={self.lemma} tags={self.raw_tag}"


@dataclass(frozen=True)
class MutationAnomaly:
    """A (lemma, word) initial pair that no mutation rule explains."""

    lemma: str
    word: str
    lemma_initial: str
    word_initial: str
    tag: str
    line: str = ""

    def describe(self) -> str:
        return (
            f"unexpected mutation [{self.lemma_initial}] -> [{self.word_initial}] "
            f"lemma=[{self.lemma}] word=[{self.word}] tag=[{self.tag}]"
        )

    def to_line(self) -> str:
        return f"{self.line} -> {self.describe()}" if self.line else self.describe()


__all__ = [
    "RULE_ORDER",
    "MutationClass",
    "Mutation",
    "NO_MUTATION",
    "InputEntry",
    "OutputRecord",
    "ErrorRecord",
    "MutationAnomaly",
]
