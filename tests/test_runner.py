from unittest import mock

import pytest

from aocsolver.runner import (
    COOKIE_ENV,
    CaseFailure,
    MissingCookieError,
    TestCase,
    check_cases,
    fetch_input,
    read_input,
    run,
    submit,
)

COOKIE = "session=token"


def _fake_response(urlopen, body: bytes):
    urlopen.return_value.__enter__.return_value.read.return_value = body


@mock.patch("urllib.request.urlopen")
def test_read_input_downloads_missing_file(urlopen, tmp_path, capsys):
    _fake_response(urlopen, b"x" * 9310 + b"\n")
    target = tmp_path / "testfile"
    text = read_input(2021, 1, str(target), COOKIE)
    assert len(text) == 9310
    assert target.exists()
    assert "successfully created" in capsys.readouterr().out
    request = urlopen.call_args[0][0]
    assert request.get_full_url().endswith("/2021/day/1/input")
    assert request.get_header("Cookie") == COOKIE


@mock.patch("urllib.request.urlopen")
def test_read_input_uses_existing_file(urlopen, tmp_path, capsys):
    target = tmp_path / "puzzle.txt"
    target.write_text("1\n2", encoding="utf-8")
    assert read_input(2024, 1, str(target)) == "1\n2"
    assert "already exists" in capsys.readouterr().out
    assert urlopen.call_count == 0


def test_read_input_without_cookie_raises(tmp_path, monkeypatch):
    monkeypatch.delenv(COOKIE_ENV, raising=False)
    with pytest.raises(MissingCookieError):
        read_input(2024, 1, str(tmp_path / "missing.txt"))


@mock.patch("urllib.request.urlopen")
def test_fetch_input_strips_one_newline_and_reads_env(urlopen, monkeypatch):
    monkeypatch.setenv(COOKIE_ENV, COOKIE)
    _fake_response(urlopen, b"abc\n\n")
    assert fetch_input(2024, 3) == "abc\n"
    assert urlopen.call_args[0][0].get_header("Cookie") == COOKIE


@mock.patch("urllib.request.urlopen")
def test_submit_prints_main_section(urlopen, capsys):
    _fake_response(urlopen, b"<html>\n<main>\nThat's the right answer!\nMore\n</main>\nfooter")
    lines = submit(2024, 5, 2, 123, COOKIE)
    assert lines == ["That's the right answer!", "More"]
    out = capsys.readouterr().out
    assert "Will submit for 2024/5/2: 123" in out
    request = urlopen.call_args[0][0]
    assert request.get_method() == "POST"
    assert request.data == b"level=2&answer=123"
    assert request.get_header("Content-type") == "application/x-www-form-urlencoded"


@mock.patch("urllib.request.urlopen")
def test_run_does_not_submit_zero(urlopen, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    folder = tmp_path / "cmd" / "2024" / "01"
    folder.mkdir(parents=True)
    (folder / "puzzle.txt").write_text("", encoding="utf-8")
    assert run(len, 2024, 1, 1, submit_answer=True) == 0
    assert urlopen.call_count == 0


def test_check_cases_passes_and_ignores_zero():
    cases = [TestCase("abc", 3, 0), TestCase("abcd", 0, 8)]
    check_cases(cases, len, lambda s: 2 * len(s))
    assert cases[1].expected_part2 == 8


def test_check_cases_reports_part1_failure():
    with pytest.raises(CaseFailure, match="PART1: 3 but expected 4"):
        check_cases([TestCase("abc", 4, 0)], len, len)


def test_check_cases_reports_part2_and_hides_input():
    with pytest.raises(CaseFailure) as excinfo:
        check_cases([TestCase("abc", 3, 7)], len, len, hide_input=True)
    assert "PART2: 3 but expected 7" in str(excinfo.value)
    assert "Input" not in str(excinfo.value)