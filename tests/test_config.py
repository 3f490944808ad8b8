"""Tests for configuration layering and option resolution."""

import pytest
from git import Repo

from sampler.config import SamplerConfig, load_config, parse_line_numbers, parse_skip, resolve_options
from sampler.models import LineNumberMode, LineNumbers

SEQ1 = LineNumbers(LineNumberMode.SEQUENTIAL, 1)
ORIGINAL = LineNumbers(LineNumberMode.ORIGINAL)
OFF = LineNumbers()


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, None),
        (True, SEQ1),
        (False, OFF),
        ("true", SEQ1),
        ("Yes", SEQ1),
        ("original", ORIGINAL),
        ("false", OFF),
        ("no", OFF),
        ("0", OFF),
        ("12", LineNumbers(LineNumberMode.SEQUENTIAL, 12)),
        (5, LineNumbers(LineNumberMode.SEQUENTIAL, 5)),
        ("sideways", OFF),
    ],
)
def test_parse_line_numbers(value, expected):
    assert parse_line_numbers(value) == expected


def test_parse_skip_string():
    assert parse_skip("delimiters, 3-4  7") == ["delimiters", "3-4", "7"]


def test_parse_skip_list():
    assert parse_skip(["delimiters", " 2 ", ""]) == ["delimiters", "2"]


def test_merged_accepts_both_key_styles():
    config = SamplerConfig().merged({"proxy-url": "x/", "remove_indentation": "yes", "line-numbers": "original"})
    assert config.proxy_url == "x/"
    assert config.remove_indentation is True
    assert config.line_numbers == ORIGINAL


def test_merged_ignores_unset_values():
    base = SamplerConfig(proxy_url="a/")
    assert base.merged({"proxy_url": None, "colour": "red"}).proxy_url == "a/"


def test_load_config_defaults(tmp_path):
    config = load_config(tmp_path)
    assert config == SamplerConfig()


def test_load_config_layers(tmp_path):
    repo = Repo.init(tmp_path)
    writer = repo.config_writer("repository")
    writer.set_value("sampler", "proxy-url", "git-proxy/")
    writer.set_value("sampler", "remove-indentation", "true")
    writer.set_value("sampler", "skip", "delimiters")
    writer.release()

    front_matter = {"title": "Talk", "sampler": {"proxy_url": "deck-proxy/", "line_numbers": True}}
    config = load_config(tmp_path, front_matter, overrides={"skip": "1"})

    assert config.proxy_url == "deck-proxy/"
    assert config.remove_indentation is True
    assert config.line_numbers == SEQ1
    assert config.skip == ["1"]


def test_load_config_ignores_non_mapping_front_matter(tmp_path):
    assert load_config(tmp_path, {"sampler": "yes"}) == SamplerConfig()


def test_resolve_options_defaults():
    options = resolve_options(SamplerConfig())
    assert options.remove_indentation is False
    assert options.line_numbers == OFF
    assert options.marked == set()
    assert options.skip_delimiters is False
    assert options.skip == set()


def test_resolve_options_attributes():
    options = resolve_options(
        SamplerConfig(),
        {"mark": "2,4-5", "skip": "delimiters,1", "indent": "remove", "line-numbers": "original"},
    )
    assert options.marked == {1, 3, 4}
    assert options.skip_delimiters is True
    assert options.skip == {0}
    assert options.remove_indentation is True
    assert options.line_numbers == ORIGINAL


def test_resolve_options_global_skip_used_when_element_has_none():
    options = resolve_options(SamplerConfig(skip=["delimiter", "3"]))
    assert options.skip_delimiters is True
    assert options.skip == {2}


def test_resolve_options_element_skip_replaces_global():
    options = resolve_options(SamplerConfig(skip=["delimiters"]), {"skip": "2"})
    assert options.skip_delimiters is False
    assert options.skip == {1}


def test_resolve_options_indent_keep_beats_global():
    options = resolve_options(SamplerConfig(remove_indentation=True), {"indent": "keep"})
    assert options.remove_indentation is False


def test_resolve_options_indent_inherits_global():
    assert resolve_options(SamplerConfig(remove_indentation=True), {"indent": "whatever"}).remove_indentation


def test_resolve_options_line_numbers_inherit():
    assert resolve_options(SamplerConfig(line_numbers=ORIGINAL)).line_numbers == ORIGINAL
    assert resolve_options(SamplerConfig(line_numbers=ORIGINAL), {"line-numbers": "no"}).line_numbers == OFF
