import io
import sys

import pytest

from pipex.cli import USAGE_ERROR, bonus_main, main


@pytest.fixture
def infile(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("alpha\nbeta\ngamma\n")
    return path


def test_main_wrong_argument_count(capsys):
    assert main(["a", "b", "c"]) == 1
    assert capsys.readouterr().err == USAGE_ERROR


def test_main_missing_infile_reports_name(tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    status = main([str(missing), "cat", "cat", str(tmp_path / "out.txt")])
    assert status == 1
    assert capsys.readouterr().err.startswith(f"{missing}: ")


def test_main_cat_cat_copies_input(infile, tmp_path):
    out = tmp_path / "out.txt"
    assert main([str(infile), "cat", "cat", str(out)]) == 0
    assert out.read_text() == infile.read_text()


def test_main_truncates_existing_output(infile, tmp_path):
    out = tmp_path / "out.txt"
    out.write_text("x" * 500)
    assert main([str(infile), "cat", "cat", str(out)]) == 0
    assert out.read_text() == infile.read_text()


def test_main_transforms_text(tmp_path):
    source = tmp_path / "in.txt"
    source.write_text("hello\n")
    out = tmp_path / "out.txt"
    assert main([str(source), "cat", "tr a-z A-Z", str(out)]) == 0
    assert out.read_text() == "HELLO\n"


def test_main_unknown_command_exits_127(infile, tmp_path, capsys):
    out = tmp_path / "out.txt"
    status = main([str(infile), "cat", "no-such-command-xyz", str(out)])
    assert status == 127
    assert "no-such-command-xyz: command not a found" in capsys.readouterr().err


def test_main_empty_command_fails(infile, tmp_path):
    out = tmp_path / "out.txt"
    assert main([str(infile), "   ", "cat", str(out)]) == 1


def test_main_unwritable_output(infile, tmp_path, capsys):
    target = tmp_path / "nodir" / "out.txt"
    assert main([str(infile), "cat", "cat", str(target)]) == 1
    assert capsys.readouterr().err.startswith(f"{target}: ")


def test_bonus_too_few_arguments(capsys):
    assert bonus_main(["a", "b", "c"]) == 1
    assert capsys.readouterr().err == USAGE_ERROR


def test_bonus_many_commands_preserve_input(infile, tmp_path):
    out = tmp_path / "out.txt"
    assert bonus_main([str(infile), "cat", "cat", "cat", "cat", str(out)]) == 0
    assert out.read_text() == infile.read_text()


def test_bonus_filter_in_middle(infile, tmp_path):
    out = tmp_path / "out.txt"
    assert bonus_main([str(infile), "cat", "grep beta", "cat", str(out)]) == 0
    assert out.read_text() == "beta\n"


def test_bonus_status_comes_from_last_command(infile, tmp_path):
    out = tmp_path / "out.txt"
    assert bonus_main([str(infile), "cat", "cat", "false", str(out)]) == 1


def test_bonus_unknown_last_command(infile, tmp_path, capsys):
    out = tmp_path / "out.txt"
    status = bonus_main([str(infile), "cat", "cat", "missing-cmd-abc", str(out)])
    assert status == 127
    assert "missing-cmd-abc: command not a found" in capsys.readouterr().err


def test_bonus_missing_infile(tmp_path, capsys):
    missing = tmp_path / "absent.txt"
    out = tmp_path / "out.txt"
    assert bonus_main([str(missing), "cat", "cat", str(out)]) == 1
    assert capsys.readouterr().err.startswith(f"{missing}: ")


def test_here_doc_collects_until_limiter(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("one\ntwo\nEND\nthree\n"))
    out = tmp_path / "out.txt"
    assert bonus_main(["here_doc", "END", "cat", "cat", str(out)]) == 0
    assert out.read_text() == "one\ntwo\n"
    assert capsys.readouterr().out.count("> ") == 3


def test_here_doc_keeps_text_without_limiter(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("first\nsecond\n"))
    out = tmp_path / "out.txt"
    assert bonus_main(["here_doc", "STOP", "cat", "cat", str(out)]) == 0
    assert out.read_text() == "first\nsecond\n"


def test_here_doc_wrong_argument_count(tmp_path, capsys):
    out = tmp_path / "out.txt"
    assert bonus_main(["here_doc", "END", "cat", "cat", "cat", str(out)]) == 1
    assert capsys.readouterr().err == USAGE_ERROR


def test_here_doc_unwritable_output(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("x\nEND\n"))
    target = tmp_path / "nodir" / "out.txt"
    assert bonus_main(["here_doc", "END", "cat", "cat", str(target)]) == 1
    assert capsys.readouterr().err.startswith(f"{target}: ")