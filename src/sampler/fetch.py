"""Fetch sample files, once per URL."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from pathlib import Path

from sampler.errors import RetrievalError
from sampler.git import read_blob
from sampler.models import ScannedFile
from sampler.scanner import scan

logger = logging.getLogger(__name__)

Loader = Callable[[str], Awaitable[str]]

GIT_PREFIX = "git:"


class ContentLoader:
    """Load file content from disk or from a git revision.

    "git:REV:PATH" reads PATH at REV from the repository containing
    base_path; anything else is a path relative to base_path.
    """

    def __init__(self, base_path: str | Path = "."):
        self.base_path = Path(base_path)

    async def __call__(self, url: str) -> str:
        if url.startswith(GIT_PREFIX):
            rev, sep, path = url[len(GIT_PREFIX) :].partition(":")
            if not sep or not path:
                raise ValueError(f"expected git:REV:PATH, got '{url}'")
            return await read_blob(self.base_path, rev or "HEAD", path)
        return await asyncio.to_thread(self._read_file, url)

    def _read_file(self, url: str) -> str:
        path = Path(url).expanduser()
        if not path.is_absolute():
            path = self.base_path / path
        return path.read_text(encoding="utf-8")


class SampleFiles:
    """Scanned files by URL, with one retrieval per URL.

    Requests arriving while a URL is in flight share that retrieval and
    are resolved in the order they arrived. Cancelling one request does
    not cancel the retrieval the others are waiting on. A failed
    retrieval is logged once, raised to every waiter and then forgotten,
    so a later request fetches again.
    """

    def __init__(self, loader: Loader | None = None):
        self._loader = loader or ContentLoader()
        self._files: dict[str, ScannedFile] = {}
        self._pending: dict[str, asyncio.Task] = {}

    async def fetch(self, url: str) -> ScannedFile:
        file = self._files.get(url)
        if file is not None:
            return file

        task = self._pending.get(url)
        if task is None:
            task = self._pending[url] = asyncio.create_task(self._retrieve(url))
        return await asyncio.shield(task)

    async def _retrieve(self, url: str) -> ScannedFile:
        try:
            content = await self._loader(url)
            file = scan(content)
        except Exception as exc:
            logger.warning("failed to get file %s: %s", url, exc)
            raise RetrievalError(url, message=f"failed to get file {url}: {exc}") from exc
        else:
            self._files[url] = file
            return file
        finally:
            del self._pending[url]
