#!/usr/bin/env python3
"""
Tests for bppscan.output line formatting.
"""

import io

from bppscan.output import format_result, write_results
from bppscan.scanner import Result


def test_two_decimals_and_tab():
    assert format_result(Result(0.8, "/pics/a.png")) == "0.80\t/pics/a.png"
    assert format_result(Result(8.0, "/pics/a.png")) == "8.00\t/pics/a.png"
    assert format_result(Result(12.3456, "/x y/b.jpg")) == "12.35\t/x y/b.jpg"


def test_write_results_one_line_each_in_order():
    buf = io.StringIO()
    n = write_results([Result(1.0, "/a"), Result(0.125, "/b")], stream=buf)
    assert n == 2
    assert buf.getvalue() == "1.00\t/a\n0.12\t/b\n"


def test_write_results_empty():
    buf = io.StringIO()
    assert write_results([], stream=buf) == 0
    assert buf.getvalue() == ""


def test_write_results_defaults_to_stdout(capsys):
    write_results([Result(3.0, "/c")], flush=True)
    assert capsys.readouterr().out == "3.00\t/c\n"
