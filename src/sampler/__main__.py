"""Entry point for sampler CLI."""

import sys
from pathlib import Path

NOUNS = {"show", "list", "deck", "view", "web"}


def main():
    # A bare deck path = viewer
    if len(sys.argv) == 2 and sys.argv[1] not in NOUNS and not sys.argv[1].startswith("-"):
        from sampler.ui import SamplerApp

        SamplerApp(Path(sys.argv[1]).resolve()).run()
        return

    from sampler.cli import build_parser
    from sampler.cli._common import configure_logging

    parser = build_parser()
    args = parser.parse_args()

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    configure_logging(args.verbose)
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
