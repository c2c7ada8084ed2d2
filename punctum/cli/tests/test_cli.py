import pytest

from punctum import feature_flags
from punctum.cli.main import cli_entry_point
from punctum.punct.errors import UnexpectedPunctuationError


def _run_cli(argv: list[str]) -> int | str | None:
    with pytest.raises(SystemExit) as e:
        cli_entry_point(argv)
    return e.value.code


def test_cli_declare(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run_cli(["<=>", "--name", "LeftRightArrow"]) == 0

    out = capsys.readouterr().out
    assert "LeftRightArrow `<=>`" in out
    assert "Atoms: <= >" in out
    assert "Locations: 2" in out


def test_cli_check_input(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run_cli(["::=", "--input", "::= rest"]) == 0

    out = capsys.readouterr().out
    assert "Peek: True" in out
    assert "Rest: 'rest'" in out
    assert "Printed: ::=" in out


def test_cli_check_input_mismatch(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run_cli(["@@", "--input", "@ @"]) == 1

    captured = capsys.readouterr()
    assert "Peek: False" in captured.out
    assert "Expected `@@`" in captured.err


def test_cli_check_input_without_parsing(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run_cli(["@@", "--input", "@@", "--no-parsing"]) == 1
    assert "has no parsing" in capsys.readouterr().err


def test_cli_rejects_unknown_punctuation(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run_cli(["<$>"]) == 1
    assert "[unexpected-punctuation-error]" in capsys.readouterr().err


def test_cli_unfriendly_errors_propagate() -> None:
    with pytest.raises(UnexpectedPunctuationError):
        cli_entry_point(["<$>", "--cli-unfriendly-errors"])


def test_cli_without_symbol() -> None:
    assert _run_cli([]) == 1


def test_cli_version(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run_cli(["--version", "--no-clone"]) == 0

    out = capsys.readouterr().out
    assert "FEATURE_PARSING = True" in out
    assert "enabled for this invocation: parsing, printing, extra-traits" in out


def test_cli_features_follow_feature_flags(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(feature_flags, "FEATURE_EXTRA_TRAITS", False)
    assert _run_cli(["--version"]) == 0
    assert "enabled for this invocation: parsing, printing, clone)" in capsys.readouterr().out
