"""Handler for 'sampler show'."""

import asyncio
from pathlib import Path

from rich.console import Console

from sampler.cli._common import config_overrides, element_attributes, error, lines_to_json, output_json
from sampler.config import load_config
from sampler.deck import build_request, render_request
from sampler.errors import SampleError
from sampler.fetch import ContentLoader, SampleFiles
from sampler.output import to_html, to_rich


def show(args) -> int:
    """Render one path#selector sample to stdout."""
    config = load_config(args.repo, overrides=config_overrides(args))
    request = build_request(args.target, element_attributes(args), config)
    files = SampleFiles(ContentLoader(Path.cwd()))

    try:
        lines = asyncio.run(render_request(files, request, config))
    except SampleError as e:
        error(str(e), args.json)

    if args.json:
        output_json(
            {
                "target": request.target,
                "url": request.url,
                "language": request.language,
                "lines": lines_to_json(lines),
            }
        )
    elif args.format == "html":
        print(to_html(lines, request.language))
    else:
        Console().print(to_rich(lines, request.language), soft_wrap=True, highlight=False)

    return 0
