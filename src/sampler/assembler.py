"""Assemble a sample from a scanned file and a selector."""

from sampler.errors import EmptySampleError
from sampler.models import NamedRange, NumericRange, Sample, ScannedFile
from sampler.selector import parse_selector


def collect(file: ScannedFile, selector: str | None = None) -> Sample:
    """Concatenate the lines a selector picks, in selector order.

    Numeric ranges are clamped to the file, unknown names add nothing,
    repeated items repeat their lines. Lines tagged skip-sample are
    dropped. No selector (or one with no usable items) means the whole
    file.
    """
    sample = Sample(source_length=len(file.lines))
    ranges = parse_selector(selector)

    if not ranges:
        sample.add(file.lines)
        return sample

    for item in ranges:
        if isinstance(item, NumericRange):
            sample.add(file.slice(item.start, item.length))
        elif isinstance(item, NamedRange):
            sample.add(file.region(item.name))

    return sample


def assemble(file: ScannedFile, selector: str | None = None, url: str = "") -> Sample:
    """Like collect(), but an empty result raises EmptySampleError."""
    sample = collect(file, selector)
    if not sample.lines:
        raise EmptySampleError(url, selector or "")
    return sample
