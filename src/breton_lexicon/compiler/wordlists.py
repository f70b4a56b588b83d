"""Load the curated word lists that drive the irregular-word handling."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Mapping

import yaml

from breton_lexicon.common.types import OutputRecord

logger = logging.getLogger(__name__)

_SOFT = {"b": "v", "d": "z", "g": "c’h", "k": "g", "m": "v", "p": "b", "t": "d"}
_HARD = {"b": "p", "d": "t", "g": "k"}
_SPIRANT = {"k": "c’h", "p": "f", "t": "z"}

_GOUEI_RE = re.compile(r"gou[ei]", re.IGNORECASE)
_GH_RE = re.compile(r"^(g)h", re.IGNORECASE)
_GW_RE = re.compile(r"^([gG])[wW]")


class WordListError(ValueError):
    """Raised when the curated word list file is malformed."""


def _replace_initial(word: str, table: Mapping[str, str]) -> str | None:
    first = word[:1]
    replacement = table.get(first.lower())
    if replacement is None:
        return None
    if first.isupper():
        replacement = replacement[:1].upper() + replacement[1:]
    return replacement + word[1:]


def _soften(word: str) -> str | None:
    if word[:1].lower() not in _SOFT:
        return None
    if _GOUEI_RE.match(word):
        # gou[ei]… lenites to ou[ei]…
        return ("O" if word[0] == "G" else "o") + word[2:]
    # Ghanaianed -> C’hanaianed, not C’hhanaianed.
    softened = _GH_RE.sub(r"\1", word)
    softened = _GW_RE.sub(lambda match: "W" if match.group(1) == "G" else "w", softened)
    return _replace_initial(softened, _SOFT) or softened


def expand_mutated_spellings(word: str) -> list[str]:
    """Return ``word`` followed by its soft, hard and spirant mutations.

    Case is preserved: ``Kelted`` gives ``Gelted`` and ``C’helted``.
    """

    spellings = [word]
    for variant in (
        _soften(word),
        _replace_initial(word, _HARD),
        _replace_initial(word, _SPIRANT),
    ):
        if variant and variant not in spellings:
            spellings.append(variant)
    return spellings


@dataclass(frozen=True)
class EpiceneRule:
    """A lemma used with both genders although the analyzer gives only one."""

    lemma: str
    word_pattern: re.Pattern[str]

    def matches(self, lemma: str, word: str) -> bool:
        return lemma == self.lemma and self.word_pattern.fullmatch(word) is not None


@dataclass(frozen=True)
class MutationException:
    """Mutation of a word that its initial letters do not explain."""

    rules: tuple[str, ...]
    word_pattern: re.Pattern[str] | None = None
    lemma: str | None = None
    excluded_pattern: re.Pattern[str] | None = None

    def matches(self, lemma: str, word: str) -> bool:
        if self.lemma is not None and lemma != self.lemma:
            return False
        if self.word_pattern is not None and self.word_pattern.fullmatch(word) is None:
            return False
        if self.excluded_pattern is not None and self.excluded_pattern.search(word):
            return False
        return True


@dataclass(frozen=True)
class WordLists:
    plural_persons: tuple[str, ...] = ()
    epicene: tuple[EpiceneRule, ...] = ()
    mutation_exceptions: tuple[MutationException, ...] = ()
    extra_entries: tuple[OutputRecord, ...] = ()
    source: Path | None = field(default=None, compare=False)

    @classmethod
    def load(cls, path: Path) -> "WordLists":
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"Word list file '{path}' does not exist or is not a file")
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            raise WordListError(f"Cannot parse word list file '{path}': {exc}") from exc
        if not isinstance(data, dict):
            raise WordListError(f"Word list file '{path}' must contain a mapping")
        word_lists = cls.from_mapping(data, source=path)
        logger.debug(
            "Loaded word lists from %s: %d plural persons, %d epicene rules, "
            "%d mutation exceptions, %d extra entries",
            path,
            len(word_lists.plural_persons),
            len(word_lists.epicene),
            len(word_lists.mutation_exceptions),
            len(word_lists.extra_entries),
        )
        return word_lists

    @classmethod
    def from_mapping(cls, data: Mapping[str, object], *, source: Path | None = None) -> "WordLists":
        return cls(
            plural_persons=tuple(_strings(data.get("plural_persons"), "plural_persons")),
            epicene=tuple(_epicene_rules(data.get("epicene"))),
            mutation_exceptions=tuple(_mutation_exceptions(data.get("mutation_exceptions"))),
            extra_entries=tuple(_extra_entries(data.get("extra_entries"))),
            source=source,
        )

    def plural_reference(self) -> dict[str, bool]:
        """Return every plural-persons spelling mapped to a "seen" flag."""

        reference: dict[str, bool] = {}
        for word in self.plural_persons:
            for spelling in expand_mutated_spellings(word):
                reference.setdefault(spelling, False)
        return reference


def _strings(values: object, key: str) -> list[str]:
    if values is None:
        return []
    if not isinstance(values, list):
        raise WordListError(f"'{key}' must be a list")
    words = [str(value).strip() for value in values if value is not None]
    return [word for word in words if word]


def _compile(pattern: object, key: str) -> re.Pattern[str]:
    try:
        return re.compile(str(pattern))
    except re.error as exc:
        raise WordListError(f"Invalid regex {pattern!r} in '{key}': {exc}") from exc


def _epicene_rules(values: object) -> Iterable[EpiceneRule]:
    if values is None:
        return
    if not isinstance(values, list):
        raise WordListError("'epicene' must be a list")
    for item in values:
        if not isinstance(item, dict) or not item.get("lemma") or not item.get("word"):
            raise WordListError(f"Epicene entry {item!r} needs 'lemma' and 'word'")
        yield EpiceneRule(lemma=str(item["lemma"]), word_pattern=_compile(item["word"], "epicene"))


def _mutation_exceptions(values: object) -> Iterable[MutationException]:
    if values is None:
        return
    if not isinstance(values, list):
        raise WordListError("'mutation_exceptions' must be a list")
    for item in values:
        if not isinstance(item, dict) or not (item.get("word") or item.get("lemma")):
            raise WordListError(f"Mutation exception {item!r} needs 'word' or 'lemma'")
        word = item.get("word")
        excluded = item.get("not_word")
        yield MutationException(
            rules=tuple(str(rule) for rule in item.get("rules") or []),
            word_pattern=_compile(word, "mutation_exceptions") if word else None,
            lemma=str(item["lemma"]) if item.get("lemma") else None,
            excluded_pattern=_compile(excluded, "mutation_exceptions") if excluded else None,
        )


def _extra_entries(values: object) -> Iterable[OutputRecord]:
    if values is None:
        return
    if not isinstance(values, list):
        raise WordListError("'extra_entries' must be a list")
    for item in values:
        if not isinstance(item, (list, tuple)) or len(item) != 3:
            raise WordListError(f"Extra entry {item!r} must be [word, lemma, tag]")
        word, lemma, tag = (str(value) for value in item)
        yield OutputRecord(word=word, lemma=lemma, tag=tag)


__all__ = [
    "EpiceneRule",
    "MutationException",
    "WordListError",
    "WordLists",
    "expand_mutated_spellings",
]
