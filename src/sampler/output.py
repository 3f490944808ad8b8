"""Format rendered lines as text, HTML or rich Text."""

import re
from html import escape
from pathlib import PurePosixPath

from rich.syntax import Syntax
from rich.text import Text

from sampler.models import RenderedLine

MARK_STYLE = "bold reverse"
NUMBER_STYLE = "dim"

_BACKTICKS = re.compile(r"`+")


def language_for(url: str) -> str:
    """Content-type label from the identifier's extension ("js", "py", ...)."""
    suffix = PurePosixPath(url.split("#", 1)[0]).suffix
    return suffix[1:].lower()


def to_text(lines: list[RenderedLine]) -> str:
    """Plain text, line numbers as "N: " prefixes."""
    return "\n".join(f"{line.number}: {line.text}" if line.number is not None else line.text for line in lines)


def to_markdown(lines: list[RenderedLine], language: str = "") -> str:
    """A fenced code block tagged with the language."""
    body = to_text(lines)
    longest = max((len(run) for run in _BACKTICKS.findall(body)), default=0)
    fence = "`" * max(3, longest + 1)
    return f"{fence}{language}\n{body}\n{fence}"


def to_html(lines: list[RenderedLine], language: str = "") -> str:
    """A <pre><code> block, one <span class="line"> per line.

    Marked lines wrap their text in <mark>. The newline separating two
    lines belongs to the first line's span.
    """
    spans = []
    for i, line in enumerate(lines):
        attrs = ' class="line"'
        if line.number is not None:
            attrs += f' data-line-number="{escape(line.number)}"'
        text = escape(line.text, quote=False)
        if line.marked:
            text = f"<mark>{text}</mark>"
        newline = "\n" if i < len(lines) - 1 else ""
        spans.append(f"<span{attrs}>{text}{newline}</span>")

    css_class = f' class="language-{escape(language)}"' if language else ""
    return f"<pre><code{css_class} data-noescape>{''.join(spans)}</code></pre>"


def _highlighted(lines: list[RenderedLine], language: str) -> list[Text]:
    plain = [Text(line.text) for line in lines]
    if not language or not lines:
        return plain
    code = "\n".join(line.text for line in lines)
    lexer = Syntax.guess_lexer(f"sample.{language}", code)
    highlighted = Syntax(code, lexer, background_color="default").highlight(code).split("\n", allow_blank=True)
    if len(highlighted) != len(lines):
        return plain
    return list(highlighted)


def to_rich(lines: list[RenderedLine], language: str = "") -> Text:
    """Rich Text for terminal display, with marks and line numbers styled."""
    result = Text()
    for i, (line, text) in enumerate(zip(lines, _highlighted(lines, language))):
        if i:
            result.append("\n")
        if line.number is not None:
            result.append(f"{line.number}: ", style=NUMBER_STYLE)
        if line.marked:
            text.stylize(MARK_STYLE)
        result.append_text(text)
    return result
