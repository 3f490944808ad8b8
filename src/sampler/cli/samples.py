"""Handler for 'sampler list'."""

from pathlib import Path

from sampler.cli._common import error, output_json
from sampler.scanner import scan


def list_samples(args) -> int:
    """List the named samples in a file with their line counts."""
    path = Path(args.file)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        error(f"cannot read {path}: {e.strerror or e}", args.json)

    file = scan(content)
    items = [{"name": name, "lines": len(lines)} for name, lines in file.regions.items()]

    if args.json:
        output_json({"file": str(path), "lines": len(file.lines), "samples": items})
    elif not items:
        print("no samples")
    else:
        width = max(len(item["name"]) for item in items)
        for item in items:
            noun = "line" if item["lines"] == 1 else "lines"
            print(f"{item['name']:<{width}}  {item['lines']} {noun}")

    return 0
