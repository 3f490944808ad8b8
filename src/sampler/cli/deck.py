"""Handler for 'sampler deck'."""

import asyncio
import logging
import sys
from pathlib import Path

from sampler.cli._common import config_overrides, error, output_json
from sampler.deck import expand_deck, open_deck, render_deck

logger = logging.getLogger(__name__)


def deck(args) -> int:
    """Expand every sample fence in a deck. Exit 1 if any failed."""
    try:
        opened = open_deck(args.deck, overrides=config_overrides(args))
    except OSError as e:
        error(f"cannot read {args.deck}: {e.strerror or e}", args.json)

    results = asyncio.run(render_deck(opened))
    failures = [r for r in results if not r.ok]
    for result in failures:
        logger.error("sample %s failed: %s", result.request.target, result.error)

    if args.json:
        output_json(
            {
                "deck": str(opened.path),
                "elements": len(results),
                "errors": [r.error.to_dict() for r in failures],
            }
        )
        return 1 if failures else 0

    expanded = expand_deck(opened.text, results, args.format)
    if args.output:
        Path(args.output).write_text(expanded, encoding="utf-8")
    else:
        sys.stdout.write(expanded)

    return 1 if failures else 0
