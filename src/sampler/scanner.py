"""Split source files into lines and named sample regions."""

import re

from sampler.models import DelimiterKind, Line, ScannedFile

# Checked in order; end-sample without a name must come last.
_DELIMITERS: list[tuple[DelimiterKind, re.Pattern]] = [
    (DelimiterKind.START, re.compile(r"^[/*#\s]*sample\(([^)\r\n]+)\)")),
    (DelimiterKind.END_NAMED, re.compile(r"^[/*#\s]*end-sample\(([^)\r\n]+)\)")),
    (DelimiterKind.END, re.compile(r"^[/*#\s]*end-sample")),
]

_LINE_BREAK = re.compile(r"\r?\n")


def classify_line(text: str) -> tuple[DelimiterKind | None, str | None]:
    """Classify a line as a delimiter.

    Returns (kind, name); (None, None) for ordinary content.

        "// sample(greet)" -> (START, "greet")
        "# end-sample(greet)" -> (END_NAMED, "greet")
        "/* end-sample */" -> (END, None)
    """
    for kind, pattern in _DELIMITERS:
        match = pattern.match(text)
        if match:
            return kind, match.group(1) if match.groups() else None
    return None, None


def split_lines(content: str) -> list[str]:
    """Split on \\n or \\r\\n. A trailing newline leaves one empty last line."""
    return _LINE_BREAK.split(content)


def scan(content: str) -> ScannedFile:
    """Scan file content into a ScannedFile.

    Each `sample(NAME)` opens a new instance of NAME, even if one is
    already open. `end-sample(NAME)` closes the innermost open NAME,
    `end-sample` closes the most recent instance of any name. Unmatched
    ends are ignored. Delimiter lines stay in `lines` but never join a
    region; content lines join every open region once.
    """
    result = ScannedFile()
    open_names: list[str] = []

    for index, text in enumerate(split_lines(content)):
        kind, name = classify_line(text)
        line = Line(number=index + 1, text=text, delimiter=kind)
        result.lines.append(line)

        if kind is DelimiterKind.START:
            open_names.append(name)
            result.regions.setdefault(name, [])
        elif kind is DelimiterKind.END_NAMED:
            _close_innermost(open_names, name)
        elif kind is DelimiterKind.END:
            if open_names:
                open_names.pop()
        else:
            for open_name in dict.fromkeys(open_names):
                result.regions[open_name].append(line)

    return result


def _close_innermost(open_names: list[str], name: str) -> None:
    for i in range(len(open_names) - 1, -1, -1):
        if open_names[i] == name:
            del open_names[i]
            return
