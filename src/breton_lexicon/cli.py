"""Command line interface for the Breton lexicon compiler."""
from __future__ import annotations

import argparse
import contextlib
import logging
import os
import subprocess
import sys
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Callable, Iterable, Iterator

from dotenv import find_dotenv, load_dotenv

from .common.config import get_config_paths, output_paths_for
from .compiler.driver import CompileResult, LexiconCompiler
from .compiler.wordlists import WordLists
from .report.summary import (
    format_anomalies,
    format_errors,
    format_lexicon,
    format_missing_report,
    format_summary,
    format_tag_report,
)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
ANALYZER_COMMAND = "lt-expand"
logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _validate_input_file(path: Path, description: str) -> None:
    if not path.exists() or not path.is_file():
        raise FileNotFoundError(f"{description} '{path}' does not exist or is not a file")
    with path.open("r", encoding="utf-8") as handle:
        handle.read(128)


def _atomic_write(path: Path, write_fn: Callable[[NamedTemporaryFile], None], *, mode: str = "w", newline: str | None = "\n") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with NamedTemporaryFile(mode=mode, delete=False, dir=str(path.parent), encoding="utf-8", newline=newline) as tmp:
        write_fn(tmp)
        tmp.flush()
        os.fsync(tmp.fileno())
    os.replace(tmp.name, path)


def _write_lines(path: Path, lines: Iterable[str]) -> None:
    def writer(tmp: NamedTemporaryFile) -> None:
        for line in lines:
            tmp.write(line)
            tmp.write("\n")

    _atomic_write(path, writer)


@contextlib.contextmanager
def _analyzer_lines(dictionary: Path, command: str = ANALYZER_COMMAND) -> Iterator[Iterator[str]]:
    """Stream the expanded forms of ``dictionary`` from ``lt-expand``."""

    _validate_input_file(dictionary, "Analyzer dictionary")
    process = subprocess.Popen(
        [command, str(dictionary)],
        stdout=subprocess.PIPE,
        text=True,
        encoding="utf-8",
    )
    try:
        yield iter(process.stdout)
    finally:
        process.stdout.close()
        returncode = process.wait()
    if returncode:
        raise subprocess.CalledProcessError(returncode, [command, str(dictionary)])


@contextlib.contextmanager
def _input_lines(args: argparse.Namespace) -> Iterator[Iterable[str]]:
    if args.dix is not None:
        with _analyzer_lines(args.dix, args.analyzer) as lines:
            yield lines
        return
    if args.input == "-":
        yield sys.stdin
        return
    path = Path(args.input)
    _validate_input_file(path, "Expanded dictionary")
    with path.open("r", encoding="utf-8") as handle:
        yield handle


def _resolve_outputs(args: argparse.Namespace) -> dict[str, Path]:
    paths = get_config_paths()
    if args.dix is not None:
        paths.update(output_paths_for(args.dix))
    return {
        "lexicon": args.output or paths["lexicon"],
        "errors": args.errors or paths["errors"],
        "tag_report": args.tag_report or paths["tag_report"],
        "missing_report": args.missing_report or paths["missing_report"],
    }


def _write_outputs(result: CompileResult, outputs: dict[str, Path]) -> None:
    _write_lines(outputs["lexicon"], format_lexicon(result.lexicon))
    _write_lines(
        outputs["errors"],
        format_errors(result.errors) + format_anomalies(result.anomalies),
    )
    _write_lines(outputs["tag_report"], format_tag_report(result.tag_counts))
    _write_lines(outputs["missing_report"], format_missing_report(result))
    for name, path in outputs.items():
        logger.debug("Wrote %s to %s", name, path)


def _run_compile(args: argparse.Namespace) -> None:
    wordlists_path = args.wordlists or get_config_paths()["wordlists"]
    word_lists = WordLists.load(Path(wordlists_path))
    compiler = LexiconCompiler(word_lists)
    outputs = _resolve_outputs(args)

    with _input_lines(args) as lines:
        result = compiler.compile(lines, progress=not args.quiet and sys.stderr.isatty())

    _write_outputs(result, outputs)
    for lemma in result.missing_lemmas():
        logger.debug("Lemma [%s] is missing from the dictionary", lemma)
    print(format_summary(result))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    compile_parser = subparsers.add_parser(
        "compile", help="Build the grammar checker lexicon from analyzer output"
    )
    source = compile_parser.add_mutually_exclusive_group()
    source.add_argument(
        "--input",
        default=None,
        help="Expanded dictionary (lt-expand output); '-' reads standard input",
    )
    source.add_argument(
        "--dix",
        type=Path,
        default=None,
        help="Apertium dictionary to expand with lt-expand",
    )
    compile_parser.add_argument(
        "--analyzer", default=ANALYZER_COMMAND, help="Command used to expand --dix"
    )
    compile_parser.add_argument(
        "--wordlists", type=Path, default=None, help="Curated word lists (YAML)"
    )
    compile_parser.add_argument("--output", type=Path, default=None, help="Lexicon output path")
    compile_parser.add_argument("--errors", type=Path, default=None, help="Unrecognized entries output path")
    compile_parser.add_argument("--tag-report", type=Path, default=None, help="Tag frequency report path")
    compile_parser.add_argument(
        "--missing-report", type=Path, default=None, help="Missing lemmas and plural nouns report path"
    )
    compile_parser.add_argument("--quiet", action="store_true", help="Disable the progress bar")
    compile_parser.set_defaults(handler=_run_compile)

    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv(find_dotenv(usecwd=True))
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:  # pragma: no cover - delegated to argparse
        return exc.code

    if getattr(args, "input", None) is None and getattr(args, "dix", None) is None:
        args.dix = get_config_paths()["dictionary"]

    _configure_logging(args.verbose)

    try:
        args.handler(args)
    except (FileNotFoundError, OSError, ValueError, subprocess.CalledProcessError) as error:
        logger.error("Command failed: %s", error)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
