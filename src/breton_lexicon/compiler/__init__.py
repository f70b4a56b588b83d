"""Lexicon compilation stages, from analyzer tags to annotated records."""

from .driver import CompileResult, LexiconCompiler, compile_lexicon, parse_line
from .irregular import IrregularAnnotator
from .mutation import MutationClassifier, MutationDecision, initial_class
from .synthesis import synthesize_entries
from .tags import simplify_tag
from .wordlists import WordListError, WordLists, expand_mutated_spellings

__all__ = [
    "CompileResult",
    "IrregularAnnotator",
    "LexiconCompiler",
    "MutationClassifier",
    "MutationDecision",
    "WordListError",
    "WordLists",
    "compile_lexicon",
    "expand_mutated_spellings",
    "initial_class",
    "parse_line",
    "simplify_tag",
    "synthesize_entries",
]
