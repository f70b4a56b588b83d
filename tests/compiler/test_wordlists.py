import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from breton_lexicon.common.config import get_config_paths
from breton_lexicon.common.types import OutputRecord
from breton_lexicon.compiler.wordlists import (
    WordListError,
    WordLists,
    expand_mutated_spellings,
)


@pytest.mark.parametrize(
    "word, expected",
    [
        ("Kelted", ["Kelted", "Gelted", "C’helted"]),
        ("Bretoned", ["Bretoned", "Vretoned", "Pretoned"]),
        ("tadoù", ["tadoù", "dadoù", "zadoù"]),
        ("Ghanaianed", ["Ghanaianed", "C’hanaianed", "Khanaianed"]),
        ("Gwenedourien", ["Gwenedourien", "Wenedourien", "Kwenedourien"]),
        ("gouerien", ["gouerien", "ouerien", "kouerien"]),
        ("merourien", ["merourien", "verourien"]),
        ("Arabed", ["Arabed"]),
    ],
)
def test_expand_mutated_spellings(word, expected):
    assert expand_mutated_spellings(word) == expected


def test_load_bundled_wordlists():
    word_lists = WordLists.load(get_config_paths()["wordlists"])

    assert "Bretoned" in word_lists.plural_persons
    assert len(word_lists.epicene) == 11
    assert len(word_lists.extra_entries) == 7
    assert word_lists.extra_entries[0] == OutputRecord("kiz", "kiz", "N f s")
    assert word_lists.mutation_exceptions[0].lemma == "kaout"

    reference = word_lists.plural_reference()
    assert "Vretoned" in reference
    assert "Pretoned" in reference
    assert not any(reference.values())


def test_load_from_custom_file(tmp_path):
    path = tmp_path / "lists.yml"
    path.write_text(
        "\n".join(
            [
                "plural_persons: [Kelted]",
                "epicene:",
                "  - {lemma: ment, word: '[mv]ent'}",
                "mutation_exceptions:",
                "  - {word: dud, rules: ['1', '1a']}",
                "extra_entries:",
                "  - [giz, kiz, 'N f s M:1:1a:']",
            ]
        ),
        encoding="utf-8",
    )

    word_lists = WordLists.load(path)

    assert word_lists.plural_persons == ("Kelted",)
    assert word_lists.epicene[0].matches("ment", "vent")
    assert not word_lists.epicene[0].matches("ment", "gent")
    assert word_lists.mutation_exceptions[0].rules == ("1", "1a")
    assert word_lists.extra_entries[0].tag == "N f s M:1:1a:"
    assert word_lists.source == path


def test_empty_file_gives_empty_lists(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")

    word_lists = WordLists.load(path)

    assert word_lists.plural_persons == ()
    assert word_lists.plural_reference() == {}


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        WordLists.load(tmp_path / "nope.yml")


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "plural_persons: Kelted\n",
        "epicene:\n  - {lemma: ment}\n",
        "mutation_exceptions:\n  - {word: '(unclosed', rules: []}\n",
        "extra_entries:\n  - [kiz, kiz]\n",
        "plural_persons: [\n",
    ],
)
def test_malformed_files_raise_wordlist_error(tmp_path, content):
    path = tmp_path / "bad.yml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(WordListError):
        WordLists.load(path)


def test_environment_overrides_wordlists_path(monkeypatch, tmp_path):
    custom = tmp_path / "custom.yml"
    monkeypatch.setenv("BRETON_LEXICON_WORDLISTS", str(custom))

    assert get_config_paths()["wordlists"] == custom
