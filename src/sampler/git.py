"""Git access for sampler, with sync and async variants."""

import asyncio
from pathlib import Path
from typing import Any

from git import InvalidGitRepositoryError, NoSuchPathError, Repo

SAMPLER_DEFAULTS = {
    "proxy-url": "",
    "remove-indentation": False,
    "line-numbers": "false",
    "skip": "",
}


def _python_key(git_key: str) -> str:
    """Convert git-style key (hyphenated) to Python-style (underscored)."""
    return git_key.replace("-", "_")


def _coerce_sampler_value(git_key: str, raw: str):
    """Type-coerce sampler section values using defaults."""
    default = SAMPLER_DEFAULTS.get(git_key)
    if isinstance(default, bool):
        return raw.lower() in ("true", "yes", "1")
    return raw


def _get_repo(repo_path: str | Path) -> Repo:
    return Repo(repo_path, search_parent_directories=True)


def is_git_repo(path: str | Path) -> bool:
    """Check if path is inside a git repository."""
    try:
        _get_repo(path)
        return True
    except (InvalidGitRepositoryError, NoSuchPathError):
        return False


def read_sampler_config(repo_path: str | Path) -> dict[str, Any]:
    """Read the [sampler] git config section into a dict.

    Keys come back Python-style (underscored). Only keys that are set
    are returned; outside a git repository the result is empty.
    """
    if not is_git_repo(repo_path):
        return {}
    reader = _get_repo(repo_path).config_reader()
    if not reader.has_section("sampler"):
        return {}
    return {_python_key(k): _coerce_sampler_value(k, raw) for k, raw in reader.items("sampler")}


def read_blob_sync(repo_path: str | Path, rev: str, path: str) -> str:
    """Read a file's content at a revision.

    Raises KeyError if the path does not exist at that revision.
    """
    repo = _get_repo(repo_path)
    blob = repo.commit(rev).tree / path
    return blob.data_stream.read().decode("utf-8")


async def read_blob(repo_path: str | Path, rev: str, path: str) -> str:
    """Read a file's content at a revision."""
    return await asyncio.to_thread(read_blob_sync, repo_path, rev, path)
