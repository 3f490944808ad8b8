"""Tests for 'sampler deck'."""

import json
from argparse import Namespace

from sampler.cli.deck import deck


def _args(path, **kwargs):
    values = dict(deck=str(path), json=False, format="markdown", output=None, proxy_url=None)
    values.update(kwargs)
    return Namespace(**values)


def test_deck_to_stdout(workdir, capsys):
    (workdir / "talk.md").write_text("# Hi\n\n```sample hello.js#greet indent=remove\n```\n")
    assert deck(_args(workdir / "talk.md")) == 0

    out = capsys.readouterr().out
    assert out.startswith("# Hi\n\n```js\nfunction greet(name) {\n")
    assert '    console.log("hi " + name);\n}\n```\n' in out


def test_deck_to_file(workdir):
    (workdir / "talk.md").write_text("```sample hello.js#2\n```\n")
    assert deck(_args(workdir / "talk.md", output=str(workdir / "out.md"))) == 0
    assert (workdir / "out.md").read_text() == "```js\nfunction greet(name) {\n```\n"


def test_deck_html(workdir, capsys):
    (workdir / "talk.md").write_text("```sample hello.js#2 line-numbers=true\n```\n")
    assert deck(_args(workdir / "talk.md", format="html")) == 0
    assert 'data-line-number="1"' in capsys.readouterr().out


def test_deck_failure_exit_code(workdir, capsys):
    (workdir / "talk.md").write_text("```sample hello.js#nope\n```\n\n```sample hello.js#2\n```\n")
    assert deck(_args(workdir / "talk.md")) == 1

    out = capsys.readouterr().out
    assert "```sample hello.js#nope" in out
    assert "function greet(name) {" in out


def test_deck_json(workdir, capsys):
    (workdir / "talk.md").write_text("```sample missing.js\n```\n")
    assert deck(_args(workdir / "talk.md", json=True)) == 1

    data = json.loads(capsys.readouterr().out)
    assert data["elements"] == 1
    assert data["errors"][0]["kind"] == "retrieval"
    assert data["errors"][0]["url"] == "missing.js"


def test_deck_proxy_url(workdir, capsys):
    (workdir / "talk.md").write_text("```sample js/hello.js#2\n```\n")
    assert deck(_args(workdir / "talk.md", proxy_url="../")) == 1
    capsys.readouterr()

    (workdir / "slides").mkdir()
    (workdir / "slides" / "talk.md").write_text("```sample hello.js#2\n```\n")
    assert deck(_args(workdir / "slides" / "talk.md", proxy_url="../")) == 0
    assert "function greet(name) {" in capsys.readouterr().out
