"""Layered sampler configuration and per-element render options."""

import re
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from sampler.git import read_sampler_config
from sampler.models import LineNumberMode, LineNumbers, RenderOptions
from sampler.selector import selector_offsets

_SKIP_SPLIT = re.compile(r"[,\s]+")
_DELIMITERS_WORD = re.compile(r"\bdelimiters?\b")

_TRUE = ("true", "yes", "on", "1")
_FALSE = ("false", "no", "off", "0", "")


@dataclass
class SamplerConfig:
    """Global defaults, overridable per sample element."""

    proxy_url: str = ""
    remove_indentation: bool = False
    line_numbers: LineNumbers = field(default_factory=LineNumbers)
    skip: list[str] = field(default_factory=list)

    @property
    def skip_selector(self) -> str:
        return ",".join(self.skip)

    def merged(self, values: dict[str, Any] | None) -> "SamplerConfig":
        """Return a copy with keys from values applied.

        Accepts hyphenated or underscored keys. Unknown keys are ignored.
        """
        if not values:
            return self
        values = {str(k).replace("-", "_"): v for k, v in values.items()}
        changes: dict[str, Any] = {}
        if values.get("proxy_url") is not None:
            changes["proxy_url"] = str(values["proxy_url"])
        if values.get("remove_indentation") is not None:
            changes["remove_indentation"] = _as_bool(values["remove_indentation"])
        if values.get("line_numbers") is not None:
            changes["line_numbers"] = parse_line_numbers(values["line_numbers"]) or LineNumbers()
        if values.get("skip") is not None:
            changes["skip"] = parse_skip(values["skip"])
        return replace(self, **changes)


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE
    return bool(value)


def parse_line_numbers(value: Any) -> LineNumbers | None:
    """Parse a line-number setting. None means "not set, inherit".

    "original" -> original file numbers
    True, "true", "yes" -> sequential from 1
    7, "7" -> sequential from 7
    False, "no", "0" -> off
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return LineNumbers(LineNumberMode.SEQUENTIAL, 1) if value else LineNumbers()
    if isinstance(value, int):
        return LineNumbers(LineNumberMode.SEQUENTIAL, value) if value > 0 else LineNumbers()

    text = str(value).strip().lower()
    if text == "original":
        return LineNumbers(LineNumberMode.ORIGINAL)
    if text in _TRUE:
        return LineNumbers(LineNumberMode.SEQUENTIAL, 1)
    if text in _FALSE:
        return LineNumbers()
    if text.isdigit():
        return LineNumbers(LineNumberMode.SEQUENTIAL, int(text))
    return LineNumbers()


def parse_skip(value: Any) -> list[str]:
    """Normalize a skip setting (list or "a, b c" string) to a list."""
    if isinstance(value, (list, tuple)):
        items = [str(v) for v in value]
    else:
        items = _SKIP_SPLIT.split(str(value))
    return [item.strip() for item in items if item.strip()]


def load_config(
    repo_path: str | Path = ".",
    front_matter: dict[str, Any] | None = None,
    overrides: dict[str, Any] | None = None,
) -> SamplerConfig:
    """Build the effective config: defaults < git config < front-matter < overrides."""
    config = SamplerConfig().merged(read_sampler_config(repo_path))
    if front_matter:
        section = front_matter.get("sampler")
        if isinstance(section, dict):
            config = config.merged(section)
    return config.merged(overrides)


def resolve_options(config: SamplerConfig, attributes: dict[str, str] | None = None) -> RenderOptions:
    """Combine global config with one element's attributes.

    Attributes: mark, skip, indent (remove|keep) and line-numbers.
    """
    attributes = attributes or {}
    skip = attributes.get("skip") or config.skip_selector
    indent = attributes.get("indent")
    line_numbers = parse_line_numbers(attributes.get("line-numbers"))

    return RenderOptions(
        remove_indentation=indent == "remove" or (config.remove_indentation and indent != "keep"),
        line_numbers=line_numbers if line_numbers is not None else config.line_numbers,
        marked=selector_offsets(attributes.get("mark", "")),
        skip_delimiters=bool(_DELIMITERS_WORD.search(skip)),
        skip=selector_offsets(skip),
    )
