## profargs — Copyright © 2017, Andrei Pangin.  Licensed under Apache 2.0; see http://www.apache.org/licenses/LICENSE-2.0 ⚘

import os
import time

import pytest

from profargs import filenames
from profargs.filenames import expand_file_pattern, detect_output_format, FILE_PATTERN_LIMIT
from profargs.types import Output


@pytest.fixture
def fixed_process(monkeypatch):
    monkeypatch.setattr(os, "getpid", lambda: 4242)
    monkeypatch.setattr(time, "localtime", lambda *_: time.struct_time((2024, 3, 9, 7, 5, 1, 5, 69, 0)))


def test_expands_pid_and_timestamp(fixed_process):
    assert expand_file_pattern("out-%p.jfr") == "out-4242.jfr"
    assert expand_file_pattern("%t.html") == "20240309-070501.html"
    assert expand_file_pattern("%p-%t.jfr") == "4242-20240309-070501.jfr"


def test_other_escapes_keep_the_character(fixed_process):
    assert expand_file_pattern("100%%") == "100%"
    assert expand_file_pattern("a%xb") == "axb"
    assert expand_file_pattern("trailing%") == "trailing"


def test_output_is_cut_at_limit(fixed_process):
    assert expand_file_pattern("%p-%t.jfr", limit=6) == "4242-2"
    assert expand_file_pattern("abc", limit=0) == ""


def test_limit_leaves_room_for_both_terminators():
    assert FILE_PATTERN_LIMIT == 510


def test_long_patterns_never_exceed_limit():
    result = expand_file_pattern("%p-%t.jfr" * 200)
    assert len(result) == FILE_PATTERN_LIMIT
    assert "%" not in result


@pytest.mark.parametrize("filename, expected", [
    ("out.html", Output.FLAMEGRAPH),
    ("/tmp/profile.jfr", Output.JFR),
    ("stacks.collapsed", Output.COLLAPSED),
    ("stacks.folded", Output.COLLAPSED),
    ("out.txt", Output.FLAT),
    ("out", Output.FLAT),
    ("out.html.gz", Output.FLAT),
    ("dir.html/out", Output.FLAT),
])
def test_detect_output_format(filename, expected):
    assert detect_output_format(filename) == expected
