"""CLI argument parser and dispatch for sampler."""

import argparse

from sampler.cli.deck import deck
from sampler.cli.samples import list_samples
from sampler.cli.show import show
from sampler.cli.view import view, web


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--repo", default=".", help="Git repository to read [sampler] config from (default: .)")
    common.add_argument("--json", action="store_true", help="Machine-readable JSON output")
    common.add_argument("-v", "--verbose", action="count", default=0, help="More logging (repeat for debug)")

    parser = argparse.ArgumentParser(
        prog="sampler",
        description="Extract and render code samples from source files",
        parents=[common],
    )

    commands = parser.add_subparsers(dest="noun")

    # --- show ---
    show_p = commands.add_parser("show", help="Render one sample", parents=[common])
    show_p.add_argument("target", help="FILE[#SELECTOR], e.g. src/app.js#3-6,greet")
    show_p.add_argument("--mark", help="Lines to mark, numbered within the sample (e.g. 2,4-5)")
    show_p.add_argument("--skip", help="Lines to skip within the sample; 'delimiters' drops sample markers")
    show_p.add_argument("--indent", choices=["remove", "keep"], help="Strip common indentation or keep it")
    show_p.add_argument("--line-numbers", dest="line_numbers", help="true, original, a start number, or false")
    show_p.add_argument("--lang", help="Language label (default: file extension)")
    show_p.add_argument("--proxy-url", dest="proxy_url", help="Prefix prepended to the file identifier")
    show_p.add_argument("--format", choices=["text", "html"], default="text", help="Output format (default: text)")
    show_p.set_defaults(func=show)

    # --- list ---
    list_p = commands.add_parser("list", help="List named samples in a file", parents=[common])
    list_p.add_argument("file", help="Source file")
    list_p.set_defaults(func=list_samples)

    # --- deck ---
    deck_p = commands.add_parser("deck", help="Expand sample fences in a markdown deck", parents=[common])
    deck_p.add_argument("deck", help="Markdown deck")
    deck_p.add_argument("--format", choices=["markdown", "html"], default="markdown", help="Block format (default: markdown)")
    deck_p.add_argument("-o", "--output", help="Write to file instead of stdout")
    deck_p.add_argument("--proxy-url", dest="proxy_url", help="Prefix prepended to every file identifier")
    deck_p.set_defaults(func=deck)

    # --- view ---
    view_p = commands.add_parser("view", help="Browse a deck's samples in the terminal", parents=[common])
    view_p.add_argument("deck", help="Markdown deck")
    view_p.add_argument("--proxy-url", dest="proxy_url", help="Prefix prepended to every file identifier")
    view_p.set_defaults(func=view)

    # --- web ---
    web_p = commands.add_parser("web", help="Serve the deck viewer in a browser", parents=[common])
    web_p.add_argument("deck", help="Markdown deck")
    web_p.add_argument("--host", default="localhost", help="Bind address (default: localhost)")
    web_p.add_argument("--port", type=int, default=8618, help="Port (default: 8618)")
    web_p.set_defaults(func=web)

    return parser
