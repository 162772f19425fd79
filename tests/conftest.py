from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from create_starter import OperationCancelled  # noqa: E402

CANCEL = object()

WEAPP_MANIFEST = {
    "name": "weapp-starter",
    "version": "0.0.0",
    "private": True,
    "description": "小程序模板",
    "scripts": {"dev": "vite", "build": "vite build"},
    "devDependencies": {"vite": "^5.0.0"},
}


class ScriptedPrompter:
    """Answers prompts from a fixed script and records every interaction.

    ``None`` in a text slot accepts the default; :data:`CANCEL` anywhere
    simulates an interrupted prompt.
    """

    def __init__(self, answers):
        self.answers = list(answers)
        self.calls: list[tuple[str, str]] = []
        self.errors: list[str] = []
        self.defaults: dict[str, str] = {}

    def _next(self):
        assert self.answers, f"unexpected prompt after {self.calls}"
        answer = self.answers.pop(0)
        if answer is CANCEL:
            raise OperationCancelled()
        return answer

    def text(self, message, *, default, normalize=None, validate=None):
        self.calls.append(("text", message))
        self.defaults[message] = default
        while True:
            answer = self._next()
            if answer is None:
                answer = default
            if normalize:
                answer = normalize(answer) or default
            error = validate(answer) if validate else None
            if error is None:
                return answer
            self.errors.append(error)

    def confirm(self, message):
        self.calls.append(("confirm", message))
        return self._next()

    def select(self, message, choices):
        self.calls.append(("select", message))
        name = self._next()
        for node in choices:
            if node.name == name:
                return node
        raise AssertionError(f"{name!r} is not one of {[node.name for node in choices]}")


def _write_template(root: Path, directory: str, manifest: dict) -> Path:
    template = root / f"template-{directory}"
    (template / "src" / "pages" / "index").mkdir(parents=True)
    (template / "public").mkdir()
    (template / "README.md").write_text(f"# {directory}\n", encoding="utf-8")
    (template / ".gitignore").write_text("node_modules\ndist\n", encoding="utf-8")
    (template / "src" / "main.js").write_text("console.log('hello')\n", encoding="utf-8")
    (template / "src" / "pages" / "index" / "index.vue").write_text("<template></template>\n", encoding="utf-8")
    (template / "public" / "logo.png").write_bytes(bytes(range(256)) * 4)
    (template / "package.json").write_text(json.dumps(manifest, indent=4, ensure_ascii=False), encoding="utf-8")
    return template


@pytest.fixture()
def scripted():
    return ScriptedPrompter


@pytest.fixture()
def templates_root(tmp_path: Path) -> Path:
    root = tmp_path / "templates"
    root.mkdir()
    _write_template(root, "weapp-starter", WEAPP_MANIFEST)
    _write_template(
        root,
        "lib-unbuild-starter",
        {"name": "lib-unbuild-starter", "version": "0.1.0", "type": "module"},
    )
    return root


@pytest.fixture()
def workdir(tmp_path: Path) -> Path:
    cwd = tmp_path / "work"
    cwd.mkdir()
    return cwd
