"""Data models for sampler."""

import re
from dataclasses import dataclass, field
from enum import Enum

_SKIP_TAG_RE = re.compile(r"\bskip-sample\b")


class DelimiterKind(Enum):
    """Structural role of a delimiter line."""

    START = "start"
    END = "end"
    END_NAMED = "end-named"


@dataclass(frozen=True)
class Line:
    """One physical line of a scanned file."""

    number: int
    text: str = ""
    delimiter: DelimiterKind | None = None

    @property
    def is_delimiter(self) -> bool:
        return self.delimiter is not None


@dataclass
class ScannedFile:
    """A file split into lines plus its named regions."""

    lines: list[Line] = field(default_factory=list)
    regions: dict[str, list[Line]] = field(default_factory=dict)

    def region(self, name: str) -> list[Line]:
        """Lines of a named region, or an empty list if it was never opened."""
        return self.regions.get(name, [])

    def slice(self, start: int, length: int | None = None) -> list[Line]:
        """Lines by zero-based offset, clamped to what exists."""
        start = max(start, 0)
        if length is None:
            return self.lines[start:]
        if length <= 0:
            return []
        return self.lines[start : start + length]


@dataclass(frozen=True)
class NumericRange:
    """A run of lines by zero-based offset."""

    start: int
    length: int


@dataclass(frozen=True)
class NamedRange:
    """A reference to a named region."""

    name: str


RangeDescriptor = NumericRange | NamedRange


@dataclass
class Sample:
    """Lines selected from a file, in selector order."""

    lines: list[Line] = field(default_factory=list)
    source_length: int = 0

    def add(self, lines: list[Line]) -> None:
        """Append lines, dropping any tagged with skip-sample."""
        self.lines.extend(line for line in lines if not _SKIP_TAG_RE.search(line.text))


class LineNumberMode(Enum):
    OFF = "off"
    SEQUENTIAL = "sequential"
    ORIGINAL = "original"


@dataclass(frozen=True)
class LineNumbers:
    """How rendered lines are numbered."""

    mode: LineNumberMode = LineNumberMode.OFF
    start: int = 1


@dataclass
class RenderOptions:
    """Per-render decoration settings."""

    remove_indentation: bool = False
    line_numbers: LineNumbers = field(default_factory=LineNumbers)
    marked: set[int] = field(default_factory=set)
    skip_delimiters: bool = False
    skip: set[int] = field(default_factory=set)


@dataclass(frozen=True)
class RenderedLine:
    """A decorated output line."""

    number: str | None
    marked: bool
    text: str

    def to_dict(self) -> dict:
        return {"number": self.number, "marked": self.marked, "text": self.text}


@dataclass
class SampleRequest:
    """Everything one sample element needs, carried through retrieval."""

    target: str
    url: str
    selector: str = ""
    attributes: dict[str, str] = field(default_factory=dict)
    language: str = ""
    index: int = 0
