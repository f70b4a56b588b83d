import logging
import re
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from breton_lexicon.compiler.irregular import IrregularAnnotator, insert_field
from breton_lexicon.compiler.wordlists import EpiceneRule, WordLists


def _annotator(plurals=("Kelted", "studierien"), epicene=()):
    return IrregularAnnotator(WordLists(plural_persons=tuple(plurals), epicene=tuple(epicene)))


def test_plural_person_gets_marker_and_is_marked_seen():
    annotator = _annotator()

    assert annotator.annotate("Kelt", "Kelted", "N m p") == "N m p t"
    assert annotator.plural_reference["Kelted"] is True
    assert "Kelted" not in annotator.unseen_plurals()


def test_marker_goes_before_the_mutation_field():
    annotator = _annotator()

    assert annotator.annotate("Kelt", "Gelted", "N m p M:1:1a:") == "N m p t M:1:1a:"
    assert annotator.plural_reference["Gelted"] is True


def test_capitalized_iz_plurals_are_persons_without_being_listed():
    annotator = _annotator(plurals=())

    assert annotator.annotate("Kemperad", "Kemperiz", "N m p") == "N m p t"
    assert annotator.unseen_plurals() == []


def test_lowercase_iz_words_are_not_persons():
    annotator = _annotator(plurals=())

    assert annotator.annotate("priz", "priz", "N m s") == "N m s"


def test_plural_person_with_other_noun_tag_is_only_logged(caplog):
    annotator = _annotator()

    with caplog.at_level(logging.WARNING):
        tag = annotator.annotate("studier", "studierien", "N m s")

    assert tag == "N m s"
    assert "studierien" in caplog.text
    assert annotator.mismatches[0].tag == "N m s"
    assert "studierien" in annotator.unseen_plurals()


def test_plural_person_with_non_noun_tag_is_ignored(caplog):
    annotator = _annotator()

    with caplog.at_level(logging.WARNING):
        tag = annotator.annotate("Kelted", "Kelted", "Z e p top")

    assert tag == "Z e p top"
    assert caplog.records == []


def test_epicene_rewrites_gender_only():
    annotator = _annotator(
        epicene=[EpiceneRule(lemma="ment", word_pattern=re.compile("[mv]ent"))]
    )

    assert annotator.annotate("ment", "vent", "N m s M:1:1a:1b:4:") == "N e s M:1:1a:1b:4:"
    assert annotator.annotate("ment", "ment", "N f s") == "N e s"
    assert annotator.annotate("ment", "mentoù", "N m p") == "N m p"
    assert annotator.annotate("ment", "ment", "J") == "J"


def test_epicene_and_plural_conflict_is_logged(caplog):
    annotator = _annotator(
        plurals=("brudoù",),
        epicene=[EpiceneRule(lemma="brud", word_pattern=re.compile("brudoù"))],
    )

    with caplog.at_level(logging.WARNING):
        tag = annotator.annotate("brud", "brudoù", "N m p")

    assert tag == "N e p"
    assert len(annotator.conflicts) == 1
    assert "also a plural person noun" in caplog.text


def test_unseen_plurals_include_generated_spellings():
    annotator = _annotator(plurals=("Kelted",))
    annotator.annotate("Kelt", "Kelted", "N m p")

    assert annotator.unseen_plurals() == ["C’helted", "Gelted"]


def test_insert_field_without_mutation():
    assert insert_field("N m p", "t") == "N m p t"
