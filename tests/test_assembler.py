"""Tests for sample assembly."""

import pytest

from sampler.assembler import assemble, collect
from sampler.errors import EmptySampleError
from sampler.scanner import scan

TWENTY = "\n".join(f"line {i}" for i in range(1, 21))

GREET = '// sample(greet)\nconsole.log("hi");\n// end-sample\ndone();'


def _numbers(sample):
    return [line.number for line in sample.lines]


def test_no_selector_is_whole_file():
    sample = assemble(scan(GREET))
    assert _numbers(sample) == [1, 2, 3, 4]


def test_named_region():
    sample = assemble(scan(GREET), "greet")
    assert [(line.number, line.text) for line in sample.lines] == [(2, 'console.log("hi");')]


def test_numeric_range():
    sample = assemble(scan(TWENTY), "3-5")
    assert _numbers(sample) == [3, 4, 5]


def test_numeric_range_clamped_past_end():
    sample = assemble(scan(TWENTY), "18-25")
    assert _numbers(sample) == [18, 19, 20]


def test_numeric_range_entirely_past_end_is_empty():
    with pytest.raises(EmptySampleError):
        assemble(scan(TWENTY), "30-40")


def test_selector_order_and_duplicates():
    sample = assemble(scan(TWENTY), "5,1-2,5")
    assert _numbers(sample) == [5, 1, 2, 5]


def test_mixed_names_and_numbers():
    sample = assemble(scan(GREET), "4,greet")
    assert _numbers(sample) == [4, 2]


def test_unknown_name_contributes_nothing():
    sample = assemble(scan(GREET), "nope,4")
    assert _numbers(sample) == [4]


def test_unknown_name_alone_is_an_error():
    with pytest.raises(EmptySampleError) as excinfo:
        assemble(scan(GREET), "gret", url="hello.js")
    assert excinfo.value.url == "hello.js"
    assert excinfo.value.selector == "gret"
    assert excinfo.value.kind == "empty-sample"


def test_reversed_range_is_an_error():
    with pytest.raises(EmptySampleError):
        assemble(scan(TWENTY), "6-3")


def test_skip_tagged_lines_dropped_even_when_selected():
    file = scan("a\nb /* skip-sample */\nc")
    assert _numbers(assemble(file, "1-3")) == [1, 3]
    assert _numbers(assemble(file, "2,3")) == [3]


def test_skip_tag_needs_word_boundary():
    file = scan("a\nnoskip-samples\nc")
    assert _numbers(assemble(file)) == [1, 2, 3]


def test_all_lines_skipped_is_an_error():
    with pytest.raises(EmptySampleError):
        assemble(scan("x # skip-sample"), "1")


def test_whole_file_with_blank_selector():
    assert _numbers(assemble(scan("a\nb"), " , ")) == [1, 2]


def test_collect_allows_empty():
    sample = collect(scan(GREET), "missing")
    assert sample.lines == []
    assert sample.source_length == 4


def test_assemble_is_deterministic():
    file = scan(TWENTY)
    first = assemble(file, "2-4,9")
    second = assemble(scan(TWENTY), "2-4,9")
    assert first.lines == second.lines
