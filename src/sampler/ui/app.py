"""Main Textual application for sampler."""

import asyncio
from pathlib import Path
from typing import Any

from textual.app import App, ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Footer, Header, Static

from sampler.deck import Deck, ElementResult, open_deck, render_deck
from sampler.fetch import ContentLoader, Loader, SampleFiles
from sampler.ui.blocks import ErrorBlock, SampleBlock


class SamplerApp(App):
    """Browse the rendered samples of a deck."""

    CSS = """
    #samples {
        padding: 1 2;
    }
    """

    TITLE = "sampler"
    BINDINGS = [
        ("r", "reload", "Reload"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, deck_path: Path, overrides: dict[str, Any] | None = None, loader: Loader | None = None):
        super().__init__()
        self.deck_path = deck_path
        self.overrides = overrides
        self.loader = loader
        self.deck: Deck | None = None
        self.results: list[ElementResult] = []
        self.loads = 0  # completed loads, including failed ones

    def compose(self) -> ComposeResult:
        yield Header()
        yield VerticalScroll(id="samples")
        yield Footer()

    async def on_mount(self) -> None:
        await self._load_deck()

    async def _load_deck(self) -> None:
        """Read the deck, render all samples and rebuild the list."""
        try:
            await self._rebuild()
        finally:
            self.loads += 1

    async def _rebuild(self) -> None:
        container = self.query_one("#samples", VerticalScroll)
        await container.remove_children()

        try:
            self.deck = await asyncio.to_thread(open_deck, self.deck_path, self.overrides)
        except OSError as e:
            self.results = []
            await container.mount(ErrorBlock(f"cannot read {self.deck_path}: {e.strerror or e}"))
            return

        self.sub_title = self.deck.path.name
        # Fresh cache per load so reload picks up edited files.
        files = SampleFiles(self.loader or ContentLoader(self.deck.base_path))
        self.results = await render_deck(self.deck, files)

        if not self.results:
            await container.mount(Static("no samples in this deck", id="empty"))
            return

        blocks = [SampleBlock(r) if r.ok else ErrorBlock(f"{r.request.target}: {r.error}") for r in self.results]
        await container.mount_all(blocks)

    async def action_reload(self) -> None:
        await self._load_deck()
