"""Parse sample selectors like "3-6,12,greet"."""

import re

from sampler.models import NamedRange, NumericRange, RangeDescriptor

_NUMERIC = re.compile(r"^\s*(\d+)(?:-(\d+))?\s*$")
_TARGET = re.compile(r"^([^#]*)(?:#(.*))?$", re.DOTALL)


def parse_item(item: str) -> RangeDescriptor | None:
    """Parse one comma-separated selector item.

    "5" -> NumericRange(4, 1)
    "3-6" -> NumericRange(2, 4)
    "greet" -> NamedRange("greet")
    "  " -> None
    """
    match = _NUMERIC.match(item)
    if match:
        first = int(match.group(1))
        last = int(match.group(2)) if match.group(2) is not None else first
        start, length = first - 1, last - first + 1
        if start < 0:
            # Line 0 does not exist; keep whatever part of the range does.
            length += start
            start = 0
        return NumericRange(start=start, length=length)

    name = item.strip()
    if not name:
        return None
    return NamedRange(name=name)


def parse_selector(selector: str | None) -> list[RangeDescriptor]:
    """Parse a selector into ranges, in input order.

    An empty list means the whole file.
    """
    if not selector:
        return []
    ranges = []
    for item in selector.split(","):
        parsed = parse_item(item)
        if parsed is not None:
            ranges.append(parsed)
    return ranges


def selector_offsets(selector: str | None) -> set[int]:
    """Expand the numeric items of a selector to zero-based offsets.

    "3-6,12" -> {2, 3, 4, 5, 11}. Named items are ignored.
    """
    offsets: set[int] = set()
    for item in parse_selector(selector):
        if isinstance(item, NumericRange):
            offsets.update(range(item.start, item.start + item.length))
    return offsets


def split_target(target: str) -> tuple[str, str]:
    """Split "path#selector" into (path, selector)."""
    match = _TARGET.match(target.strip())
    return match.group(1), match.group(2) or ""
