"""Shared helpers for CLI command handlers."""

import json
import logging
import sys

from sampler.models import RenderedLine


def configure_logging(verbosity: int = 0) -> None:
    """Log to stderr; -v for INFO, -vv for DEBUG."""
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
        level=level,
    )


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2))


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)


def config_overrides(args) -> dict:
    """Config keys set on the command line."""
    overrides = {}
    if getattr(args, "proxy_url", None) is not None:
        overrides["proxy_url"] = args.proxy_url
    return overrides


def element_attributes(args) -> dict[str, str]:
    """Per-sample attributes from CLI flags, skipping the unset ones."""
    attributes = {}
    for flag, key in (("mark", "mark"), ("skip", "skip"), ("indent", "indent"), ("line_numbers", "line-numbers"), ("lang", "lang")):
        value = getattr(args, flag, None)
        if value is not None:
            attributes[key] = value
    return attributes


def lines_to_json(lines: list[RenderedLine]) -> list[dict]:
    return [line.to_dict() for line in lines]
