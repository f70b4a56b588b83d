from __future__ import annotations

import os
from pathlib import Path

WORDLISTS_ENV = "BRETON_LEXICON_WORDLISTS"


def get_config_paths() -> dict[str, Path]:
    """Return canonical on-disk locations for curated data and artifacts."""

    package_dir = Path(__file__).resolve().parents[1]
    data_dir = package_dir / "data"

    wordlists = data_dir / "wordlists.yml"
    override = os.environ.get(WORDLISTS_ENV, "").strip()
    if override:
        wordlists = Path(override).expanduser()

    return {
        "wordlists": wordlists,
        "dictionary": Path("apertium-br-fr.br.dix"),
        "lexicon": Path("apertium-br-fr.br.dix-LT.txt"),
        "errors": Path("apertium-br-fr.br.dix-LT.err"),
        "tag_report": Path("all_tags.txt"),
        "missing_report": Path("missing_words.txt"),
    }


def output_paths_for(dictionary: Path) -> dict[str, Path]:
    """Derive lexicon and error file names from an analyzer dictionary path."""

    return {
        "lexicon": dictionary.with_name(f"{dictionary.name}-LT.txt"),
        "errors": dictionary.with_name(f"{dictionary.name}-LT.err"),
    }
