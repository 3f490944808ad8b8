"""Shared fixtures for CLI tests."""

from argparse import Namespace

import pytest

HELLO = """// sample(greet)
function greet(name) {
    console.log("hi " + name); // mark-sample
}
// end-sample
greet("you"); /* skip-sample */
"""


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """A working directory holding hello.js."""
    (tmp_path / "hello.js").write_text(HELLO)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def show_args(workdir):
    """Factory for 'sampler show' arguments."""

    def make(target, **kwargs):
        values = dict(
            repo=str(workdir),
            json=False,
            target=target,
            mark=None,
            skip=None,
            indent=None,
            line_numbers=None,
            lang=None,
            proxy_url=None,
            format="text",
        )
        values.update(kwargs)
        return Namespace(**values)

    return make
