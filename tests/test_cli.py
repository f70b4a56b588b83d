import io
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from breton_lexicon import cli

WORDLISTS = "\n".join(
    [
        "plural_persons: [Kelted]",
        "extra_entries:",
        "  - [kiz, kiz, 'N f s']",
    ]
)

EXPANDED = "\n".join(
    [
        "komz:komz<vblex><inf>",
        "gomz:komz<vblex><inf>",
        "Kelted:Kelt<n><m><pl>",
        "word:lemma<tag>",
        "",
    ]
)


def _read(path: Path) -> list[str]:
    return path.read_text(encoding="utf-8").splitlines()


def _wordlists(tmp_path: Path) -> Path:
    path = tmp_path / "lists.yml"
    path.write_text(WORDLISTS, encoding="utf-8")
    return path


def test_compile_writes_all_outputs(tmp_path, capsys):
    source = tmp_path / "expanded.txt"
    source.write_text(EXPANDED, encoding="utf-8")
    out = tmp_path / "out"

    code = cli.main(
        [
            "compile",
            "--input",
            str(source),
            "--wordlists",
            str(_wordlists(tmp_path)),
            "--output",
            str(out / "lexicon.txt"),
            "--errors",
            str(out / "lexicon.err"),
            "--tag-report",
            str(out / "tags.txt"),
            "--missing-report",
            str(out / "missing.txt"),
            "--quiet",
        ]
    )

    assert code == 0
    assert _read(out / "lexicon.txt") == [
        "komz\tkomz\tV inf",
        "gomz\tkomz\tV inf M:1:1a:",
        "Kelted\tKelt\tN m p t",
        "kiz\tkiz\tN f s",
    ]
    assert _read(out / "lexicon.err") == ["word:lemma<tag> -> word=word lemma=lemma tags=<tag>"]
    assert _read(out / "tags.txt") == [
        "1\tN f s",
        "1\tN m p t",
        "1\tV inf",
        "1\tV inf M:1:1a:",
    ]
    missing = _read(out / "missing.txt")
    assert missing[:3] == ["# Lemma words missing from dictionary: 2", "Kelt", "lemma"]
    assert missing[-2:] == ["C’helted", "Gelted"]
    assert "Created [3] words, unhandled [1] words" in capsys.readouterr().out


def test_compile_runs_analyzer_on_dictionary(tmp_path, monkeypatch):
    dictionary = tmp_path / "apertium-br-fr.br.dix"
    dictionary.write_text("<dictionary/>", encoding="utf-8")
    calls = []

    class FakeProcess:
        def __init__(self, command, **kwargs):
            calls.append(command)
            self.stdout = io.StringIO(EXPANDED)

        def wait(self):
            return 0

    monkeypatch.setattr(cli.subprocess, "Popen", FakeProcess)
    monkeypatch.chdir(tmp_path)

    code = cli.main(
        ["compile", "--dix", str(dictionary), "--wordlists", str(_wordlists(tmp_path)), "--quiet"]
    )

    assert code == 0
    assert calls == [["lt-expand", str(dictionary)]]
    assert len(_read(tmp_path / "apertium-br-fr.br.dix-LT.txt")) == 4
    assert len(_read(tmp_path / "apertium-br-fr.br.dix-LT.err")) == 1
    assert (tmp_path / "all_tags.txt").exists()
    assert (tmp_path / "missing_words.txt").exists()


def test_analyzer_failure_is_reported(tmp_path, monkeypatch, caplog):
    dictionary = tmp_path / "broken.dix"
    dictionary.write_text("<dictionary/>", encoding="utf-8")

    class FailingProcess:
        def __init__(self, command, **kwargs):
            self.stdout = io.StringIO("")

        def wait(self):
            return 1

    monkeypatch.setattr(cli.subprocess, "Popen", FailingProcess)
    monkeypatch.chdir(tmp_path)

    code = cli.main(["compile", "--dix", str(dictionary), "--quiet"])

    assert code == 2
    assert "Command failed" in caplog.text
    assert not (tmp_path / "broken.dix-LT.txt").exists()


def test_missing_input_returns_error_code(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    code = cli.main(["compile", "--input", str(tmp_path / "nope.txt"), "--quiet"])

    assert code == 2


def test_malformed_wordlists_return_error_code(tmp_path, monkeypatch):
    source = tmp_path / "expanded.txt"
    source.write_text(EXPANDED, encoding="utf-8")
    lists = tmp_path / "bad.yml"
    lists.write_text("- not\n- a mapping\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    code = cli.main(["compile", "--input", str(source), "--wordlists", str(lists), "--quiet"])

    assert code == 2



def test_undecodable_input_returns_error_code(tmp_path, monkeypatch, caplog):
    source = tmp_path / "expanded.txt"
    valid = "komz:komz<vblex><inf>\n" * 100
    source.write_bytes(valid.encode("utf-8") + b"\xff\xfe:bad<n><m><sg>\n")
    monkeypatch.chdir(tmp_path)

    code = cli.main(
        ["compile", "--input", str(source), "--wordlists", str(_wordlists(tmp_path)), "--quiet"]
    )

    assert code == 2
    assert "Command failed" in caplog.text
    assert not (tmp_path / "apertium-br-fr.br.dix-LT.txt").exists()


def test_unexpected_mutations_go_to_the_error_file(tmp_path):
    source = tmp_path / "expanded.txt"
    source.write_text("famm:mamm<n><f><sg>\nword:lemma<tag>\n", encoding="utf-8")
    out = tmp_path / "out"

    code = cli.main(
        [
            "compile",
            "--input",
            str(source),
            "--wordlists",
            str(_wordlists(tmp_path)),
            "--output",
            str(out / "lexicon.txt"),
            "--errors",
            str(out / "lexicon.err"),
            "--tag-report",
            str(out / "tags.txt"),
            "--missing-report",
            str(out / "missing.txt"),
            "--quiet",
        ]
    )

    assert code == 0
    assert _read(out / "lexicon.txt")[0] == "famm\tmamm\tN f s"
    assert _read(out / "lexicon.err") == [
        "word:lemma<tag> -> word=word lemma=lemma tags=<tag>",
        "famm:mamm<n><f><sg> -> unexpected mutation [m] -> [f] "
        "lemma=[mamm] word=[famm] tag=[N f s]",
    ]
