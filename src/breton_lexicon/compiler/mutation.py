"""Detect initial consonant mutations by comparing a word with its lemma.

A Breton word can start with a different consonant than its lemma: ``gomz``
is ``komz`` after a particle triggering lenition. The grammar rules need to
know which mutation produced a word to spot missing or spurious mutations,
so each mutated word gets an ``M:`` field listing the numbered rules of the
grammar books its initial alternation satisfies, e.g. ``M:1:1a:``.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Mapping, Sequence

from breton_lexicon.common.types import (
    NO_MUTATION,
    Mutation,
    MutationAnomaly,
    MutationClass,
)

from .wordlists import MutationException

logger = logging.getLogger(__name__)

# Digraphs come before their one-letter prefixes.
LEMMA_INITIALS: tuple[str, ...] = ("gw", "k", "t", "p", "g", "d", "b", "m")
WORD_INITIALS: tuple[str, ...] = (
    "kw", "gw", "c’h", "g", "d", "b", "z", "f", "k", "t", "v", "p", "w",
)

_LENITION = MutationClass.LENITION
_HARDENING = MutationClass.HARDENING
_SPIRANTIZATION = MutationClass.SPIRANTIZATION
_MIXED = MutationClass.MIXED

# (lemma initial, word initial) -> mutation.
MUTATION_RULES: dict[tuple[str, str], Mutation] = {
    ("k", "c’h"): Mutation.of(_SPIRANTIZATION, "0a", "2"),
    ("k", "g"): Mutation.of(_LENITION, "1", "1a"),
    ("k", "gw"): Mutation.of(_LENITION, "1", "1a"),
    ("t", "d"): Mutation.of(_LENITION, "1", "1a"),
    ("t", "z"): Mutation.of(_SPIRANTIZATION, "2"),
    ("p", "b"): Mutation.of(_LENITION, "1", "1a"),
    ("p", "f"): Mutation.of(_SPIRANTIZATION, "2"),
    ("gw", "w"): Mutation.of(_LENITION, "1", "1a", "1b", "4"),
    ("gw", "kw"): Mutation.of(_HARDENING, "3"),
    ("gw", "c’h"): Mutation.of(_MIXED, "4"),
    ("g", "c’h"): Mutation.of(_LENITION, "1", "1a", "1b", "4"),
    ("g", "k"): Mutation.of(_HARDENING, "3"),
    ("d", "z"): Mutation.of(_LENITION, "1", "1b", "4"),
    ("d", "t"): Mutation.of(_HARDENING, "3", "4"),
    ("b", "v"): Mutation.of(_LENITION, "1", "1a", "1b", "4"),
    ("b", "p"): Mutation.of(_HARDENING, "3"),
    ("m", "v"): Mutation.of(_LENITION, "1", "1a", "1b", "4"),
}

# Spelling variants rather than mutations: kwezh, kwir… next to kezh, kir.
ORTHOGRAPHIC_VARIANTS = frozenset({("k", "kw")})

# Lemmas in gou[ei]- lenite to ou[ei]- like gw- lemmas lenite to w-.
_ALTERNATING_ONSET_RE = re.compile(r"gou[ei]", re.IGNORECASE)
_ALTERNATE_LENITED_RE = re.compile(r"ou[ei]", re.IGNORECASE)
ALTERNATING_ONSET_RULES: dict[str, Mutation] = {
    "k": Mutation.of(_HARDENING, "3"),
    "c’h": Mutation.of(_MIXED, "4"),
}
ALTERNATE_LENITION = Mutation.of(_LENITION, "1", "1a", "1b", "4")


def initial_class(text: str, initials: Sequence[str]) -> str:
    """Return the first of ``initials`` that ``text`` starts with, or ``""``."""

    lowered = text.lower()
    for initial in initials:
        if lowered.startswith(initial):
            return initial
    return ""


def lemma_initial(lemma: str) -> str:
    return initial_class(lemma, LEMMA_INITIALS)


def word_initial(word: str) -> str:
    return initial_class(word, WORD_INITIALS)


def mutation_class_for_rules(rules: Sequence[str]) -> MutationClass:
    """Guess the mutation class from rule numbers alone."""

    rule_set = set(rules)
    if not rule_set:
        return MutationClass.NONE
    if rule_set & {"1", "1a", "1b"}:
        return _LENITION
    if "3" in rule_set:
        return _HARDENING
    if rule_set & {"0a", "2"}:
        return _SPIRANTIZATION
    return _MIXED


def append_annotation(tag: str, mutation: Mutation) -> str:
    annotation = mutation.annotation()
    return f"{tag} {annotation}" if annotation else tag


@dataclass(frozen=True)
class MutationDecision:
    tag: str
    mutation: Mutation = NO_MUTATION
    anomaly: MutationAnomaly | None = None

    @property
    def mutated(self) -> bool:
        return bool(self.mutation.annotation())


class MutationClassifier:
    """Annotate simplified tags with the mutation that produced a word.

    Words listed in the mutation exceptions are decided first. Lemmas with an
    alternating ``gou[ei]`` onset are compared against their alternate onsets.
    Every other word is looked up in :data:`MUTATION_RULES` by the initial
    classes of its lemma and itself.
    """

    def __init__(
        self,
        exceptions: Sequence[MutationException] = (),
        rules: Mapping[tuple[str, str], Mutation] | None = None,
    ) -> None:
        self.exceptions = tuple(exceptions)
        self.rules = dict(MUTATION_RULES if rules is None else rules)

    def classify(self, lemma: str, word: str, tag: str) -> MutationDecision:
        for exception in self.exceptions:
            if exception.matches(lemma, word):
                mutation = Mutation.of(
                    mutation_class_for_rules(exception.rules), *exception.rules
                )
                return MutationDecision(tag=append_annotation(tag, mutation), mutation=mutation)

        first_word = word_initial(word)

        if _ALTERNATING_ONSET_RE.match(lemma):
            if _ALTERNATE_LENITED_RE.match(word):
                mutation = ALTERNATE_LENITION
            else:
                mutation = ALTERNATING_ONSET_RULES.get(first_word, NO_MUTATION)
            return MutationDecision(tag=append_annotation(tag, mutation), mutation=mutation)

        first_lemma = lemma_initial(lemma)
        if not first_lemma or not first_word or first_lemma == first_word:
            return MutationDecision(tag=tag)
        if (first_lemma, first_word) in ORTHOGRAPHIC_VARIANTS:
            return MutationDecision(tag=tag)

        mutation = self.rules.get((first_lemma, first_word))
        if mutation is None:
            anomaly = MutationAnomaly(
                lemma=lemma,
                word=word,
                lemma_initial=first_lemma,
                word_initial=first_word,
                tag=tag,
            )
            logger.warning("*** %s", anomaly.describe())
            return MutationDecision(tag=tag, anomaly=anomaly)
        return MutationDecision(tag=append_annotation(tag, mutation), mutation=mutation)


__all__ = [
    "ALTERNATE_LENITION",
    "ALTERNATING_ONSET_RULES",
    "LEMMA_INITIALS",
    "MUTATION_RULES",
    "ORTHOGRAPHIC_VARIANTS",
    "WORD_INITIALS",
    "MutationClassifier",
    "MutationDecision",
    "append_annotation",
    "initial_class",
    "lemma_initial",
    "mutation_class_for_rules",
    "word_initial",
]
