"""Translate Apertium tags into the compact tags used by the grammar rules.

The simplified tags are close to the French ones so that rules for both
languages can be written with the same conventions. Information is lost in
the conversion on purpose: short tags keep the rule regexes readable.
"""
from __future__ import annotations

import re

# Lemmas the analyzer uses when a form is its own lemma.
PLACEHOLDER_LEMMAS = frozenset({"direct", "prpers"})

CATEGORY_MARKERS = frozenset("DLICAJRKPNZSV")

_ADJ_SUFFIX_RE = re.compile(r"(<adj><mf><sp>)\+.*")
_VERB_SUFFIX_RE = re.compile(r"(<vblex><pri><p.><..>)\+.*")

EXACT_TAGS: dict[str, str] = {
    # Determiners.
    "<det><def><sp>": "D e sp",  # an, ar, al
    "<det><ind><sp>": "D e sp",  # un, ur, ul
    "<det><ind><mf><sg>": "D e s",  # bep
    "<det><pos><mf><sp>": "D e sp",  # hon
    "<det><pos><m><sp>": "D m sp",  # e
    "<det><pos><f><sp>": "D f sp",  # he
    # Verbal particles.
    "<vpart>": "L a",  # a
    "<vpart><obj>": "L e",  # e, ec’h, ez
    "<vpart><ger>": "L o",  # o
    "<vpart><neg>": "L n",  # na
    "<vpart><opt>": "L r",  # ra
    "<ij>": "I",  # ac’hanta
    # Conjunctions.
    "<cnjcoo>": "C coor",  # ha, met
    "<cnjadv>": "C adv",  # eta, emichañs
    # Adverbs.
    "<adv>": "A",  # alies, alese, amañ
    "<adv><neg>": "A neg",  # ne, ned, n’
    "<adv><itg>": "A itg",  # perak, penaos
    "<preadv>": "A pre",  # gwall, ken, pegen
    # Adjectives.
    "<adj><mf><sp>": "J",  # brav, fur
    "<adj><sint><comp>": "J cmp",  # bravoc’h
    "<adj><sint><sup>": "J sup",  # bravañ
    "<adj><sint><excl>": "J exc",  # bravat
    "<adj><itg><mf><sp>": "J itg",  # peseurt, petore
    "<adj><ind><mf><sp>": "J ind",  # all, memes
    # Subject, reflexive, interrogative, demonstrative pronouns.
    "<prn><subj><p1><mf><sg>": "R suj e s 1",  # me
    "<prn><subj><p2><mf><sg>": "R suj e s 2",  # te
    "<prn><subj><p3><m><sg>": "R suj m s 3",  # eñ
    "<prn><subj><p3><f><sg>": "R suj f s 3",  # hi
    "<prn><subj><p1><mf><pl>": "R suj e p 1",  # ni
    "<prn><subj><p2><mf><pl>": "R suj e p 2",  # c’hwi
    "<prn><subj><p3><mf><pl>": "R suj e p 3",  # int
    "<prn><ref><p1><mf><sg>": "R ref e s 1",  # ma-unan
    "<prn><ref><p2><mf><sg>": "R ref e s 2",  # da-unan
    "<prn><ref><p3><f><sg>": "R ref f s 3",  # he-unan
    "<prn><ref><p3><m><sg>": "R ref m s 3",  # e-unan
    "<prn><ref><p1><mf><pl>": "R ref e p 1",  # hon-unan
    "<prn><ref><p2><mf><pl>": "R ref e p 2",  # hoc’h-unan
    "<prn><ref><p3><mf><pl>": "R ref e p 3",  # o-unan
    "<prn><itg><mf><sp>": "R itg e sp",  # petra, piv
    "<prn><itg><mf><pl>": "R itg e p",  # pere
    "<prn><dem><m><sg>": "R dem m s",  # hemañ
    "<prn><dem><f><sg>": "R dem f s",  # homañ
    "<prn><dem><mf><sg>": "R dem e s",  # se
    "<prn><ind><mf><sg>": "R ind mf s",  # hini
    "<prn><ind><mf><pl>": "R ind mf p",  # re
    "<prn><def><mf><sg>": "R def e s",  # henn
    "<prn><def><m><sg>": "R def m s",  # egile
    "<prn><def><f><sg>": "R def f s",  # eben
    # Object pronouns. The grammar rules match "R m s 1 obj" for e/he.
    "<prn><obj><p1><mf><sg>": "R e s 1 obj",  # ma, va
    "<prn><obj><p1><mf><pl>": "R e p 1 obj",  # hon, hor, hol
    "<prn><obj><p2><mf><sg>": "R e s 2 obj",  # az
    "<prn><obj><p2><mf><pl>": "R e p 2 obj",  # ho
    "<prn><obj><p3><m><sg>": "R m s 1 obj",  # e
    "<prn><obj><p3><f><sg>": "R f s 1 obj",  # he
    "<prn><obj><p3><mf><pl>": "R e p 3 obj",  # o
    # Numbers.
    "<num><mf><sg>": "K e s",
    "<num><m><pl>": "K m p",
    "<num><f><pl>": "K f p",
    "<num><mf><pl>": "K e p",
    "<num><ord><mf><sp>": "K e sp o",
    "<num><ord><mf><sg>": "K e s o",
    "<num><ord><mf><pl>": "K e p o",
    "<num><ord><m><pl>": "K m p o",
    "<num><ord><m><sp>": "K m sp o",
    "<num><ord><f><pl>": "K f p o",
    # Prepositions, with indirect object pronoun forms.
    "<pr>": "P",  # da
    "<pr>+indirect<prn><obj><p1><mf><sg>": "P e 1 s",  # din
    "<pr>+indirect<prn><obj><p2><mf><sg>": "P e 2 s",  # dit
    "<pr>+indirect<prn><obj><p3><m><sg>": "P m 3 s",  # dezhañ
    "<pr>+indirect<prn><obj><p3><f><sg>": "P f 3 s",  # dezhi
    "<pr>+indirect<prn><obj><p1><mf><pl>": "P e 1 p",  # dimp
    "<pr>+indirect<prn><obj><p2><mf><pl>": "P e 2 p",  # deoc’h
    "<pr>+indirect<prn><obj><p3><mf><pl>": "P e 3 p",  # dezho
    # Nouns.
    "<n><m><sg>": "N m s",
    "<n><m><pl>": "N m p",
    "<n><f><sg>": "N f s",
    "<n><f><pl>": "N f p",
    "<n><mf><sg>": "N e s",
    "<n><mf><pl>": "N e p",
    "<n><m><sp>": "N m sp",
    # Proper nouns.
    "<np><top><sg>": "Z e s top",  # Aostria
    "<np><top><pl>": "Z e p top",  # Azorez
    "<np><top><m><sg>": "Z m s top",  # Kreiz-Breizh
    "<np><cog><mf><sg>": "Z e s cog",
    "<np><ant><m><sg>": "Z m s ant",  # Alan
    "<np><ant><f><sg>": "Z f s ant",  # Youna
    "<np><al><mf><sg>": "Z e s al",  # Leclerc
    "<np><al><m><sg>": "Z m s al",  # Ofis
    "<np><al><f><sg>": "Z f s al",  # Bibl
    # Acronyms.
    "<n><acr><m><sg>": "S m s",  # TER
    # Verbs.
    "<vblex><inf>": "V inf",  # komz
    "<vblex><pp>": "V ppa",  # komzet
    # Present.
    "<vblex><pri><p1><sg>": "V pres 1 s",  # komzan
    "<vblex><pri><p2><sg>": "V pres 2 s",  # komzez
    "<vblex><pri><p3><sg>": "V pres 3 s",  # komz
    "<vblex><pri><p1><pl>": "V pres 1 p",  # komzomp
    "<vblex><pri><p2><pl>": "V pres 2 p",  # komzit
    "<vblex><pri><p3><pl>": "V pres 3 p",  # komzont
    "<vblex><pri><impers><sp>": "V pres impers sp",  # komzer
    "<vblex><pri><impers><pl>": "V pres impers p",  # oad
    # Imperfect.
    "<vblex><pii><p1><sg>": "V impa 1 s",  # komzen
    "<vblex><pii><p2><sg>": "V impa 2 s",  # komzes
    "<vblex><pii><p3><sg>": "V impa 3 s",  # komze
    "<vblex><pii><p1><pl>": "V impa 1 p",  # komzemp
    "<vblex><pii><p2><pl>": "V impa 2 p",  # komzec’h
    "<vblex><pii><p3><pl>": "V impa 3 p",  # komzent
    "<vblex><pii><impers><sp>": "V impa impers sp",  # komzed
    "<vblex><pii><impers><pl>": "V impa impers p",  # oad
    # Past definite.
    "<vblex><past><p1><sg>": "V pass 1 s",  # komzis
    "<vblex><past><p2><sg>": "V pass 2 s",  # komzjout
    "<vblex><past><p3><sg>": "V pass 3 s",  # komzas
    "<vblex><past><p1><pl>": "V pass 1 p",  # komzjomp
    "<vblex><past><p2><pl>": "V pass 2 p",  # komzjoc’h
    "<vblex><past><p3><pl>": "V pass 3 p",  # komzjont
    "<vblex><past><impers><sp>": "V pass impers sp",  # komzod
    "<vblex><past><impers><pl>": "V pass impers pl",  # poed
    # Future.
    "<vblex><fti><p1><sg>": "V futu 1 s",  # komzin
    "<vblex><fti><p2><sg>": "V futu 2 s",  # komzi
    "<vblex><fti><p3><sg>": "V futu 3 s",  # komzo
    "<vblex><fti><p1><pl>": "V futu 1 p",  # komzimp
    "<vblex><fti><p2><pl>": "V futu 2 p",  # komzot
    "<vblex><fti><p3><pl>": "V futu 3 p",  # komzint
    "<vblex><fti><impers><sp>": "V futu impers sp",  # komzor
    "<vblex><fti><impers><pl>": "V futu impers p",  # pior
    # Conditional, potential.
    "<vblex><cni><p1><sg>": "V conf 1 s",  # komzfen
    "<vblex><cni><p2><sg>": "V conf 2 s",  # komzfes
    "<vblex><cni><p3><sg>": "V conf 3 s",  # komzfe
    "<vblex><cni><p1><pl>": "V conf 1 p",  # komzfemp
    "<vblex><cni><p2><pl>": "V conf 2 p",  # komzfec’h
    "<vblex><cni><p3><pl>": "V conf 3 p",  # komzfent
    "<vblex><cni><impers><sp>": "V conf impers sp",  # komzfed
    "<vblex><cni><impers><pl>": "V conf impers p",
    # Conditional, irreal.
    "<vblex><cip><p1><sg>": "V conj 1 s",  # komzjen
    "<vblex><cip><p2><sg>": "V conj 2 s",  # komzjes
    "<vblex><cip><p3><sg>": "V conj 3 s",  # komzje
    "<vblex><cip><p1><pl>": "V conj 1 p",  # komzjemp
    "<vblex><cip><p2><pl>": "V conj 2 p",  # komzjec’h
    "<vblex><cip><p3><pl>": "V conj 3 p",  # komzjent
    "<vblex><cip><impers><sp>": "V conj impers sp",  # komzjed
    "<vblex><cip><impers><pl>": "V conj impers p",  # komzjed
    # Imperative.
    "<vblex><imp><p2><sg>": "V impe 2 s",  # komz
    "<vblex><imp><p3><sg>": "V impe 3 s",  # komzet
    "<vblex><imp><p1><pl>": "V impe 1 p",  # komzomp
    "<vblex><imp><p2><pl>": "V impe 2 p",  # komzit
    "<vblex><imp><p3><pl>": "V impe 3 p",  # komzent
    # Present, habitual.
    "<vblex><prh><p1><sg>": "V preh 1 s",  # pezan
    "<vblex><prh><p2><sg>": "V preh 2 s",  # pezez
    "<vblex><prh><p3><sg>": "V preh 3 s",  # pez
    "<vblex><prh><p1><pl>": "V preh 1 p",  # pezomp
    "<vblex><prh><p2><pl>": "V preh 2 p",  # pezit
    "<vblex><prh><p3><pl>": "V preh 3 p",  # pezont
    "<vblex><prh><impers><pl>": "V preh impers p",  # pezer
    # Imperfect, habitual.
    "<vblex><pih><p1><sg>": "V imph 1 s",  # bezen
    "<vblex><pih><p2><sg>": "V imph 2 s",  # pezen
    "<vblex><pih><p3><sg>": "V imph 3 s",  # peze
    "<vblex><pih><p1><pl>": "V imph 1 p",  # pezemp
    "<vblex><pih><p2><pl>": "V imph 2 p",  # pezec’h
    "<vblex><pih><p3><pl>": "V imph 3 p",  # pezent
    "<vblex><pih><impers><pl>": "V imph impers",  # pezed
    # Present, locative.
    "<vbloc><pri><p1><sg>": "V prel 1 s",  # emaoñ
    "<vbloc><pri><p2><sg>": "V prel 2 s",  # emaout
    "<vbloc><pri><p3><sg>": "V prel 3 s",  # emañ
    "<vbloc><pri><p1><pl>": "V prel 1 p",  # emaomp
    "<vbloc><pri><p2><pl>": "V prel 2 p",  # emaoc’h
    "<vbloc><pri><p3><pl>": "V prel 3 p",  # emaint
    "<vbloc><pri><impers><sp>": "V prel impers",  # emeur
    # Imperfect, locative.
    "<vbloc><pii><p1><sg>": "V impl 1 s",  # edon
    "<vbloc><pii><p2><sg>": "V impl 2 s",  # edos
    "<vbloc><pii><p3><sg>": "V impl 3 s",  # edo
    "<vbloc><pii><p1><pl>": "V impl 1 p",  # edomp
    "<vbloc><pii><p2><pl>": "V impl 2 p",  # edoc’h
    "<vbloc><pii><p3><pl>": "V impl 3 p",  # edont
    "<vbloc><pii><impers><sp>": "V impl impers",  # emod
}

# Checked in order after the exact table: the analyzer appends details
# to these tags that the grammar rules do not need.
PREFIX_TAGS: tuple[tuple[str, str], ...] = (
    ("<cnjsub>", "C sub"),  # mar, pa
    ("<pr>", "P"),  # er, ez
)


def normalize_raw_tag(raw_tag: str) -> str:
    """Drop the ``+…`` continuations of adjective and present-tense verb tags."""

    tag = _ADJ_SUFFIX_RE.sub(r"\1", raw_tag)
    return _VERB_SUFFIX_RE.sub(r"\1", tag)


def normalize_lemma(word: str, lemma: str) -> str:
    return word if lemma in PLACEHOLDER_LEMMAS else lemma


def simplify_tag(raw_tag: str) -> str | None:
    """Return the simplified tag for ``raw_tag``, or ``None`` if unrecognized."""

    tag = normalize_raw_tag(raw_tag)
    simplified = EXACT_TAGS.get(tag)
    if simplified is not None:
        return simplified
    for prefix, simplified in PREFIX_TAGS:
        if tag.startswith(prefix):
            return simplified
    return None


def category_of(tag: str) -> str:
    """Return the category marker (first field) of a simplified tag."""

    return tag.split(" ", 1)[0] if tag else ""


__all__ = [
    "CATEGORY_MARKERS",
    "EXACT_TAGS",
    "PLACEHOLDER_LEMMAS",
    "PREFIX_TAGS",
    "category_of",
    "normalize_lemma",
    "normalize_raw_tag",
    "simplify_tag",
]
