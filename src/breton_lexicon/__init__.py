"""Build the LanguageTool lexicon for Breton from Apertium's dictionary."""

from .compiler import (
    CompileResult,
    LexiconCompiler,
    MutationClassifier,
    WordLists,
    compile_lexicon,
    simplify_tag,
)

__all__ = [
    "CompileResult",
    "LexiconCompiler",
    "MutationClassifier",
    "WordLists",
    "compile_lexicon",
    "simplify_tag",
]
