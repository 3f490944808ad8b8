"""Handlers for 'sampler view' and 'sampler web'."""

import shutil
import sys
from pathlib import Path

from textual_serve.server import Server

from sampler.cli._common import config_overrides


def view(args) -> int:
    """Open a deck in the terminal viewer."""
    from sampler.ui import SamplerApp

    SamplerApp(Path(args.deck).resolve(), overrides=config_overrides(args)).run()
    return 0


def web(args) -> int:
    """Serve the deck viewer in a browser."""
    deck_path = str(Path(args.deck).resolve())

    sampler = shutil.which("sampler")
    if sampler is None:
        print("error: sampler not found on PATH", file=sys.stderr)
        return 1

    command = f"{sampler} view {deck_path}"
    server = Server(command, host=args.host, port=args.port, title="sampler")

    print(f"serving {deck_path} at http://{args.host}:{args.port}")
    server.serve()
    return 0
