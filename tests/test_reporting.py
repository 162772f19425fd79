from __future__ import annotations

from pathlib import Path

import pytest

from create_starter import StepTracker, next_steps, package_manager_from_user_agent


@pytest.mark.parametrize(
    ("user_agent", "expected"),
    [
        ("npm/10.2.4 node/v20.11.0 darwin arm64 workspaces/false", ("npm", "10.2.4")),
        ("yarn/1.22.19 npm/? node/v18.0.0", ("yarn", "1.22.19")),
        ("pnpm", ("pnpm", None)),
        (None, None),
        ("", None),
        ("   ", None),
    ],
)
def test_package_manager_from_user_agent(user_agent, expected):
    assert package_manager_from_user_agent(user_agent) == expected


def test_next_steps_for_subdirectory(tmp_path: Path):
    steps = next_steps(tmp_path / "nested" / "demo", tmp_path, "yarn")
    assert steps == [f"cd {Path('nested') / 'demo'}", "git init", "yarn", "yarn dev"]


def test_next_steps_in_current_directory(tmp_path: Path):
    assert next_steps(tmp_path, tmp_path, "pnpm") == ["git init", "pnpm i", "pnpm dev"]


def test_next_steps_default_package_manager(tmp_path: Path):
    assert next_steps(tmp_path / "app", tmp_path) == ["cd app", "git init", "npm i", "npm run dev"]
    assert next_steps(tmp_path / "app", tmp_path, "bun")[-2:] == ["bun i", "bun run dev"]


def test_step_tracker_updates_and_refreshes():
    refreshed = []
    tracker = StepTracker("Scaffold")
    tracker.attach_refresh(lambda: refreshed.append(True))
    tracker.add("copy", "Copy template files")
    tracker.add("copy", "duplicate ignored")
    tracker.start("copy", "running")
    tracker.complete("copy", "3 entries")
    tracker.skip("extra")

    assert tracker.steps[0] == {"key": "copy", "label": "Copy template files", "status": "done", "detail": "3 entries"}
    assert tracker.steps[1] == {"key": "extra", "label": "extra", "status": "skipped", "detail": ""}
    assert len(refreshed) == 4
    assert tracker.render().label == "[cyan]Scaffold[/cyan]"
