"""Turn an assembled sample into decorated output lines."""

import re

from sampler.models import Line, LineNumberMode, RenderedLine, RenderOptions, Sample

# Trailing "mark this line" comments: // mark-sample, # mark-sample,
# /* mark-sample */ and <!-- mark-sample -->.
MARK_TAG = re.compile(
    r"(\s*(//|#)\s*mark-sample\s*$)"
    r"|(\s*/\*\s*mark-sample\s*\*/(\s*$)?)"
    r"|(\s*<!--\s*mark-sample\s*-->(\s*$)?)"
)

_INDENT = re.compile(r"^[ \t]+")


def indentation_length(lines: list[Line]) -> int:
    """Length of the shortest leading whitespace among non-blank lines."""
    widths = []
    for line in lines:
        if not line.text.strip():
            continue
        match = _INDENT.match(line.text)
        widths.append(match.end() if match else 0)
    return min(widths, default=0)


def strip_mark_tag(text: str) -> tuple[str, bool]:
    """Remove an inline mark tag. Returns (text, was_marked)."""
    if not MARK_TAG.search(text):
        return text, False
    return MARK_TAG.sub("", text, count=1), True


def _number_width(options: RenderOptions, sample: Sample, count: int) -> int:
    numbering = options.line_numbers
    if numbering.mode is LineNumberMode.ORIGINAL:
        largest = max([sample.source_length] + [line.number for line in sample.lines])
    else:
        largest = numbering.start + count - 1
    return len(str(largest))


def render(sample: Sample, options: RenderOptions | None = None) -> list[RenderedLine]:
    """Render a sample.

    Skip and mark offsets refer to positions in the sample as assembled,
    before delimiter lines are dropped.
    """
    options = options or RenderOptions()

    surviving: list[tuple[int, Line]] = [
        (index, line)
        for index, line in enumerate(sample.lines)
        if not (options.skip_delimiters and line.is_delimiter) and index not in options.skip
    ]
    if not surviving:
        return []

    offset = indentation_length([line for _, line in surviving]) if options.remove_indentation else 0
    numbering = options.line_numbers
    width = _number_width(options, sample, len(surviving))

    rendered = []
    for position, (index, line) in enumerate(surviving):
        if numbering.mode is LineNumberMode.ORIGINAL:
            number = str(line.number).rjust(width)
        elif numbering.mode is LineNumberMode.SEQUENTIAL:
            number = str(numbering.start + position).rjust(width)
        else:
            number = None

        text, tagged = strip_mark_tag(line.text[offset:])
        rendered.append(RenderedLine(number=number, marked=tagged or index in options.marked, text=text))

    return rendered


def join_lines(lines: list[RenderedLine]) -> str:
    """Join rendered line texts; newlines only go between lines."""
    return "\n".join(line.text for line in lines)
