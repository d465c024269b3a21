from pathlib import Path

import pytest

from parsing_util import ints, intsall, is_digits, readinputs
from util import AocError, Config, checkaccum, checkwidth, run


def test_config_build() -> None:
    config = Config.build(["prog", "input.txt"])
    assert config.file_path == "input.txt"


def test_config_missing_path() -> None:
    with pytest.raises(AocError) as exc:
        Config.build(["prog"])
    assert exc.value.kind == "config"
    assert exc.value.message == "Filepath Missing from Arguments!"


def test_config_extra_arguments() -> None:
    with pytest.raises(AocError) as exc:
        Config.build(["prog", "a.txt", "b.txt"])
    assert exc.value.kind == "config"


def test_error_rendering() -> None:
    assert str(AocError("parse", "bad")) == "Error parsing input text, bad"
    assert str(AocError("config", "oops")) == "Problem getting arguments, oops"


def test_readinputs(tmp_path: Path) -> None:
    p = tmp_path / "in.txt"
    p.write_text(" 1 2 \n3 4\n", encoding="utf-8")
    assert readinputs(p) == ["1 2", "3 4"]
    assert readinputs(p, raw=True) == " 1 2 \n3 4\n"


def test_readinputs_missing_file(tmp_path: Path) -> None:
    with pytest.raises(AocError) as exc:
        readinputs(tmp_path / "nope.txt")
    assert exc.value.kind == "io"


def test_ints_strict() -> None:
    assert ints("1  22\t333") == [1, 22, 333]
    assert ints("") == []
    for bad in ["1 -2", "1 +2", "1 2x", "1,2"]:
        with pytest.raises(AocError):
            ints(bad)


def test_intsall_skips_blank() -> None:
    assert intsall(["1 2", "", "  ", "3"]) == [[1, 2], [3]]


def test_is_digits() -> None:
    assert is_digits("0123")
    assert not is_digits("")
    assert not is_digits("12a")
    assert not is_digits("²")


def test_checkwidth() -> None:
    checkwidth(0, 8)
    checkwidth(255, 8)
    with pytest.raises(AssertionError):
        checkwidth(256, 8)
    with pytest.raises(AssertionError):
        checkwidth(-1, 8)


def test_run_prints_answers(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    p = tmp_path / "in.txt"
    p.write_text("abc", encoding="utf-8")
    code = run(lambda dat: (len(dat), dat.upper()), ["prog", str(p)], raw=True)
    out = capsys.readouterr().out
    assert code == 0
    assert out == "Part 1 = 3\nPart 2 = ABC\n"


def test_run_reports_errors_on_stdout(capsys: pytest.CaptureFixture) -> None:
    def solve(dat):
        raise AssertionError("solver should not run")

    code = run(solve, ["prog"])
    out = capsys.readouterr().out
    assert code == 1
    assert out == "Problem getting arguments, Filepath Missing from Arguments!\n"


def test_ints_rejects_values_past_32_bits() -> None:
    assert ints("4294967295 0000000000001") == [4294967295, 1]
    for bad in ["4294967296", "99999999999999999999", "1" * 5000]:
        with pytest.raises(AocError) as exc:
            ints(bad)
        assert exc.value.kind == "parse"


def test_unknown_error_kind() -> None:
    with pytest.raises(ValueError):
        AocError("bogus", "msg")


def test_checkaccum() -> None:
    checkaccum((1 << 64) - 1, 64)
    with pytest.raises(AocError) as exc:
        checkaccum(1 << 64, 64)
    assert exc.value.kind == "overflow"
