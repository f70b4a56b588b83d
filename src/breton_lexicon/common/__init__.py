"""Shared infrastructure for the Breton lexicon compiler."""

from __future__ import annotations

from .config import get_config_paths, output_paths_for
from .types import (
    NO_MUTATION,
    ErrorRecord,
    InputEntry,
    Mutation,
    MutationAnomaly,
    MutationClass,
    OutputRecord,
)

__all__ = [
    "get_config_paths",
    "output_paths_for",
    "NO_MUTATION",
    "ErrorRecord",
    "InputEntry",
    "Mutation",
    "MutationAnomaly",
    "MutationClass",
    "OutputRecord",
]
