"""Tag corrections for word classes the analyzer does not distinguish."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from .wordlists import WordLists

logger = logging.getLogger(__name__)

PERSONS_MARKER = "t"

_GENDERED_NOUN_RE = re.compile(r"^N [fm]\b")
_PLURAL_MASCULINE_RE = re.compile(r"^N m p\b")
# Capitalized plurals in -iz are demonyms: Kemperiz, Pariziz.
_DEMONYM_RE = re.compile(r"^[A-Z].*iz$")


@dataclass(frozen=True)
class PluralMismatch:
    word: str
    lemma: str
    tag: str


def insert_field(tag: str, value: str) -> str:
    """Add ``value`` as a field of ``tag``, keeping the ``M:`` field last."""

    base, separator, annotation = tag.partition(" M:")
    return f"{base} {value}{separator}{annotation}"


class IrregularAnnotator:
    """Apply the epicene and plural-persons corrections, in that order.

    The annotator owns the "seen" flags of the plural-persons reference set,
    so a fresh instance is needed for each compilation run.
    """

    def __init__(self, word_lists: WordLists) -> None:
        self.epicene = word_lists.epicene
        self.plural_reference = word_lists.plural_reference()
        self.mismatches: list[PluralMismatch] = []
        self.conflicts: list[PluralMismatch] = []

    def is_plural_person(self, word: str) -> bool:
        return word in self.plural_reference or _DEMONYM_RE.match(word) is not None

    def annotate(self, lemma: str, word: str, tag: str) -> str:
        made_epicene = False
        if _GENDERED_NOUN_RE.match(tag) and any(
            rule.matches(lemma, word) for rule in self.epicene
        ):
            tag = _GENDERED_NOUN_RE.sub("N e", tag, count=1)
            made_epicene = True

        if not self.is_plural_person(word):
            return tag

        if made_epicene:
            logger.warning(
                "Epicene word [%s] (lemma [%s]) is also a plural person noun; tag [%s]",
                word,
                lemma,
                tag,
            )
            self.conflicts.append(PluralMismatch(word=word, lemma=lemma, tag=tag))

        if _PLURAL_MASCULINE_RE.match(tag):
            if word in self.plural_reference:
                self.plural_reference[word] = True
            return insert_field(tag, PERSONS_MARKER)

        if tag.startswith("N "):
            logger.warning("Plural person noun [%s] is tagged [%s] by the analyzer", word, tag)
            self.mismatches.append(PluralMismatch(word=word, lemma=lemma, tag=tag))
        return tag

    def unseen_plurals(self) -> list[str]:
        return sorted(word for word, seen in self.plural_reference.items() if not seen)


__all__ = ["IrregularAnnotator", "PERSONS_MARKER", "PluralMismatch", "insert_field"]
