import io
import sys

import pytest

from minishellpy.shell import main, scan_line


@pytest.mark.parametrize(
    "line, expected",
    [
        ("ls || wc", "have a ||"),
        ("cat << end", "have a double <<"),
        ("cat >> f", "have a double <<"),
        ("ls > f", "have a < or > operator"),
        ("ls | wc", "have a | "),
        ('echo "x"', 'have a " '),
        ("a\\b", "have a \\ "),
        ("echo hi", None),
        ("", None),
    ],
)
def test_scan_line(line, expected):
    assert scan_line(line) == expected


def test_scan_line_reports_first_metacharacter():
    assert scan_line("a | b > c") == "have a | "
    assert scan_line("a > b | c") == "have a < or > operator"


def test_main_rejects_arguments(capsys):
    assert main(["extra"]) == 1
    assert "error" in capsys.readouterr().out


def test_main_echoes_lines_until_eof(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("hello\nworld\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert " hello\n" in out
    assert " world\n" in out


def test_main_stops_on_metacharacter(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("ls | wc\nnever\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "have a | " in out
    assert " never" not in out