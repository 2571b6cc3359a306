# tests/test_cli.py
import io
import sys
from unittest.mock import patch

import pytest

from catr.cli import create_arg_parser, get_config, main
from catr.errors import ConfigurationError
from catr.models import CatConfig, NumberingMode


def _main(args):
    with patch.object(sys, "argv", ["catr", *args]):
        main()


# --- Test 1: Argument parsing ---

def test_defaults_to_stdin():
    config = get_config([])
    assert config == CatConfig(files=("-",), number_all=False, number_nonblank=False)
    assert config.numbering is NumberingMode.NONE


def test_flags_map_to_config():
    assert get_config(["-n", "a"]).numbering is NumberingMode.ALL
    assert get_config(["--number-nonblank", "a"]).numbering is NumberingMode.NONBLANK
    assert get_config(["-n", "-b", "a", "b"]) == CatConfig(files=("a", "b"), number_all=True, number_nonblank=True)


def test_empty_token_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        get_config([""])


def test_parser_keeps_file_order():
    args = create_arg_parser().parse_args(["z", "-", "a"])
    assert args.files == ["z", "-", "a"]


# --- Test 2: End-to-end runs through main() ---

def test_number_all_scenario(sample_files, capsys):
    a, b = sample_files
    _main(["-n", str(a), str(b)])
    captured = capsys.readouterr()
    assert captured.out == "     1\thello\n     2\t\n     3\tworld\n"
    assert captured.err == ""


def test_number_nonblank_scenario(sample_files, capsys):
    a, b = sample_files
    _main(["-b", str(a), str(b)])
    assert capsys.readouterr().out == "     1\thello\n\n     2\tworld\n"


def test_stdin_scenario(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"foo\nbar\n")))
    _main(["-"])
    assert capsys.readouterr().out == "foo\nbar\n"


def test_no_arguments_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"only\n")))
    _main([])
    assert capsys.readouterr().out == "only\n"


def test_missing_file_scenario_exits_zero(tmp_path, sample_files, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    # main() returning normally means exit status 0
    _main(["missing.txt", "a.txt"])
    captured = capsys.readouterr()
    assert captured.out == "hello\n\n"
    assert "Failed to open missing.txt: No such file or directory" in captured.err


# --- Test 3: Exit codes ---

def test_unknown_flag_exits_one(capsys):
    with pytest.raises(SystemExit) as excinfo:
        _main(["-x"])
    assert excinfo.value.code == 1
    assert "usage: catr" in capsys.readouterr().err


def test_empty_token_exits_one(capsys):
    with pytest.raises(SystemExit) as excinfo:
        _main([""])
    assert excinfo.value.code == 1
    assert "catr: FILE tokens must not be empty" in capsys.readouterr().err


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        _main(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() == "catr 0.1.0"


def test_unexpected_error_exits_one(capsys):
    with patch("catr.cli.run", side_effect=RuntimeError("boom")):
        with pytest.raises(SystemExit) as excinfo:
            _main(["whatever"])
    assert excinfo.value.code == 1
    assert "An unexpected error occurred: boom" in capsys.readouterr().err


def test_broken_pipe_is_quiet(capsys):
    with patch("catr.cli.run", side_effect=BrokenPipeError()):
        _main(["whatever"])
    assert capsys.readouterr().err == ""


def test_flags_between_files(sample_files, capsys):
    a, b = sample_files
    _main([str(a), "-n", str(b)])
    captured = capsys.readouterr()
    assert captured.out == "     1\thello\n     2\t\n     3\tworld\n"
    assert captured.err == ""


def test_get_config_accepts_intermixed_flags():
    config = get_config(["a", "-b", "b", "-n", "c"])
    assert config == CatConfig(files=("a", "b", "c"), number_all=True, number_nonblank=True)
