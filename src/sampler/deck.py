"""Markdown slide decks with embedded sample fences.

A fenced block whose info string starts with "sample" is replaced by the
rendered sample:

    ```sample src/hello.js#greet mark=2 line-numbers=original
    ```
"""

import asyncio
import logging
import re
import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from markdown_it import MarkdownIt

from sampler.assembler import assemble
from sampler.config import SamplerConfig, load_config, resolve_options
from sampler.errors import SampleError
from sampler.fetch import ContentLoader, SampleFiles
from sampler.models import RenderedLine, SampleRequest
from sampler.output import language_for, to_html, to_markdown
from sampler.renderer import render
from sampler.selector import split_target

logger = logging.getLogger(__name__)

FENCE_WORD = "sample"
_FENCE_PREFIX = re.compile(r"^(.*?)(`{3,}|~{3,})")


@dataclass
class DeckElement:
    """A sample fence and where it sits in the deck (0-based, end exclusive)."""

    request: SampleRequest
    start: int
    end: int
    prefix: str = ""


@dataclass
class ElementResult:
    """Outcome of rendering one element: lines or an error."""

    element: DeckElement
    lines: list[RenderedLine] = field(default_factory=list)
    error: SampleError | None = None

    @property
    def request(self) -> SampleRequest:
        return self.element.request

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class Deck:
    path: Path
    text: str
    meta: dict[str, Any]
    config: SamplerConfig
    elements: list[DeckElement]

    @property
    def base_path(self) -> Path:
        return self.path.parent


def extract_front_matter(text: str) -> dict[str, Any]:
    """Return the YAML front-matter mapping, or {} if absent or invalid."""
    if not text.startswith("---"):
        return {}

    match = re.match(r"^---\r?\n(.*?)\r?\n---\r?\n?", text, re.DOTALL)
    if not match:
        return {}

    try:
        meta = yaml.safe_load(match.group(1)) or {}
    except yaml.YAMLError:
        meta = {}

    return meta if isinstance(meta, dict) else {}


def parse_attributes(words: list[str]) -> dict[str, str]:
    """Parse key=value words; a bare key is stored as "true"."""
    attributes = {}
    for word in words:
        key, sep, value = word.partition("=")
        attributes[key.strip().lower()] = value if sep else "true"
    return attributes


def build_request(target: str, attributes: dict[str, str], config: SamplerConfig, index: int = 0) -> SampleRequest:
    """Resolve a path#selector target against the configured proxy URL."""
    identifier, selector = split_target(target)
    return SampleRequest(
        target=target,
        url=config.proxy_url + identifier,
        selector=selector,
        attributes=attributes,
        language=attributes.get("lang") or language_for(identifier),
        index=index,
    )


def _split_info(info: str) -> list[str]:
    try:
        return shlex.split(info)
    except ValueError:
        return info.split()


def find_elements(text: str, config: SamplerConfig) -> list[DeckElement]:
    """Find sample fences in document order."""
    md = MarkdownIt("commonmark")
    lines = text.split("\n")
    elements = []

    for token in md.parse(text):
        if token.type != "fence" or token.map is None:
            continue
        words = _split_info(token.info)
        if not words or words[0] != FENCE_WORD:
            continue
        start, end = token.map
        if len(words) < 2:
            logger.warning("sample fence without a target on line %d", start + 1)
            continue

        request = build_request(words[1], parse_attributes(words[2:]), config, index=len(elements))
        match = _FENCE_PREFIX.match(lines[start])
        elements.append(DeckElement(request, start, end, prefix=match.group(1) if match else ""))

    return elements


def open_deck(path: str | Path, overrides: dict[str, Any] | None = None) -> Deck:
    """Read a deck file and resolve its configuration."""
    path = Path(path).resolve()
    text = path.read_bytes().decode("utf-8")
    meta = extract_front_matter(text)
    config = load_config(path.parent, meta, overrides)
    return Deck(path=path, text=text, meta=meta, config=config, elements=find_elements(text, config))


async def render_request(files: SampleFiles, request: SampleRequest, config: SamplerConfig) -> list[RenderedLine]:
    """Fetch, assemble and render one request. Raises SampleError."""
    file = await files.fetch(request.url)
    sample = assemble(file, request.selector, url=request.url)
    return render(sample, resolve_options(config, request.attributes))


async def render_element(files: SampleFiles, element: DeckElement, config: SamplerConfig) -> ElementResult:
    """Render one element. Failures are returned, not raised."""
    try:
        lines = await render_request(files, element.request, config)
    except SampleError as exc:
        logger.debug("element %d (%s) failed: %s", element.request.index, element.request.target, exc)
        return ElementResult(element, error=exc)
    return ElementResult(element, lines=lines)


async def render_deck(deck: Deck, files: SampleFiles | None = None) -> list[ElementResult]:
    """Render every element concurrently, in document order."""
    files = files or SampleFiles(ContentLoader(deck.base_path))
    return list(await asyncio.gather(*(render_element(files, e, deck.config) for e in deck.elements)))


def expand_deck(text: str, results: list[ElementResult], output_format: str = "markdown") -> str:
    """Replace rendered sample fences in text. Failed elements stay as written."""
    newline = "\r\n" if "\r\n" in text else "\n"
    lines = text.split(newline)
    for result in sorted(results, key=lambda r: r.element.start, reverse=True):
        if not result.ok:
            continue
        element = result.element
        if output_format == "html":
            block = to_html(result.lines, result.request.language)
        else:
            block = to_markdown(result.lines, result.request.language)
        lines[element.start : element.end] = [element.prefix + line for line in block.split("\n")]
    return newline.join(lines)
