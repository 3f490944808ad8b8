"""Widgets showing one rendered sample or its failure."""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Static

from sampler.deck import ElementResult
from sampler.output import to_rich


class SampleBlock(Vertical):
    """A titled, rendered sample."""

    DEFAULT_CSS = """
    SampleBlock {
        height: auto;
        margin: 0 0 1 0;
        border: round $primary;
        padding: 0 1;
    }
    SampleBlock .sample-title {
        color: $text-muted;
    }
    """

    def __init__(self, result: ElementResult, **kwargs) -> None:
        super().__init__(**kwargs)
        self.result = result
        self.border_title = result.request.language or None

    def compose(self) -> ComposeResult:
        yield Static(self.result.request.target, classes="sample-title")
        yield Static(to_rich(self.result.lines, self.result.request.language), classes="sample-body")


class ErrorBlock(Static):
    """Placeholder for an element that failed to render."""

    DEFAULT_CSS = """
    ErrorBlock {
        height: auto;
        margin: 0 0 1 0;
        border: round $error;
        padding: 0 1;
        color: $error;
    }
    """

    def __init__(self, message: str, **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.message = message
