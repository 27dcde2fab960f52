"""Tests for diagnostic formatting."""

import pytest

from fileassert.output import (
    count_lines,
    decorate,
    print_kv_multi,
    print_kv_single,
    print_kv_single_or_multi,
)


def test_count_lines():
    assert count_lines("") == 0
    assert count_lines("a") == 1
    assert count_lines("a\n") == 1
    assert count_lines("a\nb") == 2


def test_kv_single_pads_key_column():
    assert print_kv_single(4, "path", "/tmp/a") == "path : /tmp/a\n"
    assert print_kv_single(8, "path", "/tmp/a") == "path     : /tmp/a\n"


def test_kv_single_multiple_pairs():
    out = print_kv_single(6, "path", "/a", "output", "x")
    assert out == "path   : /a\noutput : x\n"


def test_kv_single_rejects_odd_arguments():
    with pytest.raises(ValueError, match="pairs"):
        print_kv_single(4, "path")


def test_kv_multi_reports_line_count():
    assert print_kv_multi("output", "a\nb") == "output (2 lines):\na\nb\n"


def test_single_or_multi_uses_single_for_one_line():
    assert print_kv_single_or_multi(8, "output", "hello") == "output   : hello\n"


def test_single_or_multi_indents_multi_line_values():
    out = print_kv_single_or_multi(8, "output", "a\nb")
    assert out == "output (2 lines):\n  a\n  b\n"


def test_decorate_wraps_body():
    assert decorate("oops", "path : x\n") == "-- oops --\npath : x\n--\n"


def test_decorate_terminates_body():
    assert decorate("oops", "path : x") == "-- oops --\npath : x\n--\n"
