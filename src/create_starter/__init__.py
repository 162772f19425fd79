#!/usr/bin/env python3
# /// script
# requires-python = ">=3.11"
# dependencies = [
#     "typer",
#     "rich",
#     "readchar",
# ]
# ///
"""
create-starter - Scaffold a new front-end project from a bundled starter template

Usage:
    uvx create-starter
    uvx create-starter my-project --template unbuild
    uvx create-starter . -t weapp --version 1.0.0

Or install globally:
    uv tool install create-starter
    create-starter <project-dir>
"""

import json
import os
import re
import shutil
import sys
from dataclasses import dataclass, field, replace
from datetime import datetime
from pathlib import Path
from typing import Callable, Protocol, Sequence

import typer
from rich.align import Align
from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

# For cross-platform keyboard input
import readchar

__version__ = "0.1.0"

# Constants
DEFAULT_TARGET_DIR = "my-project"
MANIFEST_NAME = "package.json"
VCS_METADATA_DIR = ".git"
TEMPLATES_ENVVAR = "CREATE_STARTER_TEMPLATES"
USER_AGENT_ENVVAR = "npm_config_user_agent"
DEFAULT_TEMPLATES_ROOT = Path(__file__).resolve().parent / "templates"
CANCELLED_MESSAGE = "Operation cancelled"


class OperationCancelled(Exception):
    """Raised when the user declines or interrupts a prompt."""

    def __init__(self, message: str = CANCELLED_MESSAGE):
        super().__init__(message)


class TemplateNotFoundError(RuntimeError):
    """The catalog points at a template directory that is not on disk."""


class ManifestError(RuntimeError):
    """The template's package.json is missing or cannot be parsed."""


# ---------------------------------------------------------------------------
# Template catalog
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TemplateLeaf:
    """A selectable template backed by ``template-<directory>`` on disk."""

    name: str
    directory: str
    style: str = field(default="white", compare=False)
    recommended: bool = field(default=False, compare=False)


@dataclass(frozen=True)
class TemplateGroup:
    """A framework whose variants are chosen in a second selection step."""

    name: str
    children: tuple[TemplateLeaf, ...]
    style: str = field(default="white", compare=False)

    def __post_init__(self):
        if not self.children:
            raise ValueError(f"template group '{self.name}' has no variants")


TemplateNode = TemplateLeaf | TemplateGroup

FRAMEWORKS: tuple[TemplateNode, ...] = (
    TemplateGroup(
        "lib",
        (
            TemplateLeaf("unbuild", "lib-unbuild-starter", "bright_blue", recommended=True),
            TemplateLeaf("rollup", "lib-rollup-starter", "bright_red"),
        ),
        style="red",
    ),
    TemplateGroup(
        "vue3",
        (
            TemplateLeaf("PCWeb-Soybean-Admin", "vue3-pcweb-soybean-admin", "bright_blue", recommended=True),
            TemplateLeaf("PCWeb-TDesign", "vue3-pcweb-tdesign-starter", "bright_blue", recommended=True),
            TemplateLeaf("PCWeb-NaiveUI", "vue3-pcweb-naiveui-starter", "bright_blue"),
            TemplateLeaf("H5Web-Vant", "vue3-h5web-vant-starter", "bright_blue"),
            TemplateLeaf("H5Web-VarletUI", "vue3-h5web-varlet-starter", "bright_blue"),
            TemplateLeaf("crx-NaiveUI", "vue3-crx-starter", "blue"),
            TemplateLeaf("Uniapp-uview-plus", "vue3-uniapp-starter", "yellow"),
            TemplateLeaf("Taro-NutUI", "vue3-taro-starter", "yellow"),
        ),
        style="green",
    ),
    TemplateGroup(
        "vue2",
        (
            TemplateLeaf("Vue2.7-PCWeb-Elementui", "vue2.7-pcweb-element-starter", "bright_blue"),
            TemplateLeaf("Vue2.7-PCWeb-TDesign", "vue2.7-pcweb-tdesign-starter", "bright_blue"),
            TemplateLeaf("Vue2-Uniapp-Uview", "vue2-uniapp-starter", "green"),
        ),
        style="bright_red",
    ),
    TemplateGroup(
        "react",
        (
            TemplateLeaf("React-Soybean-Admin", "react-soybean-admin", "bright_yellow"),
            TemplateLeaf("React-Crx-Starter", "react-crx-starter", "bright_green"),
        ),
        style="bright_cyan",
    ),
    TemplateLeaf("weapp", "weapp-starter", "cyan"),
)


def iter_templates(nodes: Sequence[TemplateNode] = FRAMEWORKS):
    """Yield every selectable leaf in catalog order."""
    for node in nodes:
        if isinstance(node, TemplateGroup):
            yield from node.children
        else:
            yield node


def template_names(nodes: Sequence[TemplateNode] = FRAMEWORKS) -> list[str]:
    """Flattened list of leaf names accepted by ``--template``."""
    return [leaf.name for leaf in iter_templates(nodes)]


def find_template(name: str | None, nodes: Sequence[TemplateNode] = FRAMEWORKS) -> TemplateLeaf | None:
    """Exact, case-sensitive lookup. Ambiguous or unknown names give ``None``."""
    if not name:
        return None
    matches = [leaf for leaf in iter_templates(nodes) if leaf.name == name]
    return matches[0] if len(matches) == 1 else None


def template_directory(leaf: TemplateLeaf, templates_root: Path) -> Path:
    return (Path(templates_root) / f"template-{leaf.directory}").resolve()


def render_label(node: TemplateNode) -> str:
    """Rich markup for a catalog entry; presentation only."""
    label = f"[{node.style}]{escape(node.name)}[/{node.style}]"
    if isinstance(node, TemplateGroup):
        label += f" [dim]({len(node.children)} variants)[/dim]"
    elif node.recommended:
        label += " [dim](recommended)[/dim]"
    return label


def render_catalog_tree(nodes: Sequence[TemplateNode] = FRAMEWORKS) -> Tree:
    tree = Tree("[cyan]Available templates[/cyan]", guide_style="grey50")
    for node in nodes:
        branch = tree.add(render_label(node))
        if isinstance(node, TemplateGroup):
            for leaf in node.children:
                branch.add(render_label(leaf))
    return tree


# ---------------------------------------------------------------------------
# Validation and normalisation
# ---------------------------------------------------------------------------

_PACKAGE_NAME_PATTERN = re.compile(r"(?:@[a-z0-9-*~][a-z0-9-*._~]*/)?[a-z0-9-~][a-z0-9-._~]*")
_VERSION_PATTERN = re.compile(r"\d+\.\d+\.\d+(?:-[a-zA-Z0-9]+(?:\.[a-zA-Z0-9]+)*)?")
_TRAILING_SEPARATORS = re.compile(r"[\s/]+$")


def is_valid_project_name(name: str) -> bool:
    """Check ``name`` against the npm package-name grammar."""
    return _PACKAGE_NAME_PATTERN.fullmatch(name) is not None


def is_valid_version(version: str) -> bool:
    """Accept ``MAJOR.MINOR.PATCH`` with an optional ``-prerelease`` tag."""
    return _VERSION_PATTERN.fullmatch(version) is not None


def normalize_project_name(name: str) -> str:
    """Turn an arbitrary directory name into a usable package name."""
    name = name.strip().lower()
    name = re.sub(r"\s+", "-", name)
    name = re.sub(r"^[._]", "", name)
    return re.sub(r"[^a-z0-9-~]+", "-", name)


def normalize_target_dir(target_dir: str | None) -> str | None:
    """Trim whitespace and drop trailing slashes; ``None`` passes through."""
    if target_dir is None:
        return None
    return _TRAILING_SEPARATORS.sub("", target_dir.strip())


def default_version(now: datetime | None = None) -> str:
    """Timestamp fallback version in ``YYYY.MMDD.HHmm`` form."""
    return (now or datetime.now()).strftime("%Y.%m%d.%H%M")


def _check_project_name(name: str) -> str | None:
    return None if is_valid_project_name(name) else "Invalid package.json name"


def _check_version(version: str) -> str | None:
    return None if is_valid_version(version) else "Invalid package.json version"


def is_empty_dir(path: Path) -> bool:
    """True for a directory with no entries, or only a ``.git`` directory."""
    entries = [entry.name for entry in Path(path).iterdir()]
    return not entries or entries == [VCS_METADATA_DIR]


# ---------------------------------------------------------------------------
# Terminal prompts
# ---------------------------------------------------------------------------

class Prompter(Protocol):
    """The three interactions the resolver needs from a terminal."""

    def text(
        self,
        message: str,
        *,
        default: str,
        normalize: Callable[[str], str | None] | None = None,
        validate: Callable[[str], str | None] | None = None,
    ) -> str: ...

    def confirm(self, message: str) -> bool: ...

    def select(self, message: str, choices: Sequence[TemplateNode]) -> TemplateNode: ...


def get_key():
    """Get a single keypress in a cross-platform way using readchar."""
    key = readchar.readkey()

    # Arrow keys
    if key == readchar.key.UP:
        return 'up'
    if key == readchar.key.DOWN:
        return 'down'

    # Enter/Return
    if key == readchar.key.ENTER:
        return 'enter'

    # Escape
    if key == readchar.key.ESC:
        return 'escape'

    # Ctrl+C
    if key == readchar.key.CTRL_C:
        raise KeyboardInterrupt

    return key


def select_with_arrows(choices: Sequence[TemplateNode], prompt_text: str = "Select an option", *, output: Console | None = None) -> TemplateNode:
    """
    Interactive selection using arrow keys with Rich Live display.

    Args:
        choices: Catalog nodes to choose from, shown in order
        prompt_text: Text to show above the options
        output: Console to render on (defaults to the module console)

    Returns:
        The selected node

    Raises:
        OperationCancelled: on Esc or Ctrl+C
    """
    output = output or console
    selected_index = 0

    def create_selection_panel():
        """Create the selection panel with current selection highlighted."""
        table = Table.grid(padding=(0, 2))
        table.add_column(style="cyan", justify="left", width=3)
        table.add_column(style="white", justify="left")

        for i, node in enumerate(choices):
            table.add_row("▶" if i == selected_index else " ", render_label(node))

        table.add_row("", "")
        table.add_row("", "[dim]Use ↑/↓ to navigate, Enter to select, Esc to cancel[/dim]")

        return Panel(
            table,
            title=f"[bold]{prompt_text}[/bold]",
            border_style="cyan",
            padding=(1, 2)
        )

    output.print()

    with Live(create_selection_panel(), console=output, transient=True, auto_refresh=False) as live:
        while True:
            try:
                key = get_key()
            except KeyboardInterrupt:
                raise OperationCancelled() from None
            if key == 'up':
                selected_index = (selected_index - 1) % len(choices)
            elif key == 'down':
                selected_index = (selected_index + 1) % len(choices)
            elif key == 'enter':
                break
            elif key == 'escape':
                raise OperationCancelled()

            live.update(create_selection_panel(), refresh=True)

    selected = choices[selected_index]
    output.print(f"[cyan]{prompt_text}[/cyan] {render_label(selected)}")
    return selected


class ConsolePrompter:
    """Prompter backed by Rich prompts and the arrow-key selector."""

    def __init__(self, console: Console):
        self.console = console

    def text(self, message, *, default, normalize=None, validate=None):
        while True:
            try:
                answer = Prompt.ask(message, default=default, console=self.console)
            except (KeyboardInterrupt, EOFError):
                raise OperationCancelled() from None
            if normalize:
                answer = normalize(answer) or default
            error = validate(answer) if validate else None
            if error is None:
                return answer
            self.console.print(f"[red]{error}[/red]")

    def confirm(self, message):
        try:
            return Confirm.ask(message, default=False, console=self.console)
        except (KeyboardInterrupt, EOFError):
            raise OperationCancelled() from None

    def select(self, message, choices):
        return select_with_arrows(choices, message, output=self.console)


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ResolvedSelection:
    """Everything the materializer needs; produced once per invocation."""

    target_directory: Path
    package_name: str
    version: str
    template_directory: Path
    overwrite: bool
    template: TemplateLeaf


@dataclass(frozen=True)
class ResolutionState:
    """Partial answers collected while walking the resolution steps."""

    cwd: Path
    default_version: str
    target_dir: str | None = None
    template_flag: str | None = None
    overwrite: bool = False
    package_name: str | None = None
    version: str | None = None
    framework: TemplateNode | None = None
    variant: TemplateLeaf | None = None

    @property
    def target_path(self) -> Path:
        return self.cwd / self.target_dir

    @property
    def project_name(self) -> str:
        """Name derived from the target directory (cwd name for ``.``)."""
        if self.target_dir == ".":
            return self.cwd.resolve().name
        return self.target_dir

    def chosen_template(self) -> TemplateLeaf | None:
        if self.variant is not None:
            return self.variant
        if isinstance(self.framework, TemplateLeaf):
            return self.framework
        return find_template(self.template_flag)


Step = Callable[[ResolutionState, Prompter], ResolutionState]


def ask_target_dir(state: ResolutionState, prompter: Prompter) -> ResolutionState:
    if state.target_dir:
        return state
    answer = prompter.text("Project name", default=DEFAULT_TARGET_DIR, normalize=normalize_target_dir)
    return replace(state, target_dir=normalize_target_dir(answer) or DEFAULT_TARGET_DIR)


def confirm_overwrite(state: ResolutionState, prompter: Prompter) -> ResolutionState:
    target = state.target_path
    if not target.exists() or is_empty_dir(target):
        return replace(state, overwrite=False)
    where = "Current directory" if state.target_dir == "." else f'Target directory "{escape(state.target_dir)}"'
    if not prompter.confirm(f"{where} is not empty. Remove existing files and continue?"):
        raise OperationCancelled()
    return replace(state, overwrite=True)


def ask_package_name(state: ResolutionState, prompter: Prompter) -> ResolutionState:
    derived = state.project_name
    if is_valid_project_name(derived):
        return replace(state, package_name=derived)
    answer = prompter.text(
        "Package name",
        default=normalize_project_name(derived),
        validate=_check_project_name,
    )
    return replace(state, package_name=answer)


def ask_version(state: ResolutionState, prompter: Prompter) -> ResolutionState:
    answer = prompter.text("Version", default=state.default_version, validate=_check_version)
    return replace(state, version=answer)


def select_framework(state: ResolutionState, prompter: Prompter) -> ResolutionState:
    if state.template_flag is not None and find_template(state.template_flag):
        return state
    if state.template_flag is not None:
        message = f'"{escape(state.template_flag)}" isn\'t a valid template. Please choose from below:'
    else:
        message = "Select a template:"
    return replace(state, framework=prompter.select(message, FRAMEWORKS))


def select_variant(state: ResolutionState, prompter: Prompter) -> ResolutionState:
    if not isinstance(state.framework, TemplateGroup):
        return state
    variant = prompter.select("Select a variant:", state.framework.children)
    return replace(state, variant=variant)


RESOLUTION_STEPS: tuple[Step, ...] = (
    ask_target_dir,
    confirm_overwrite,
    ask_package_name,
    ask_version,
    select_framework,
    select_variant,
)


def resolve(
    prompter: Prompter,
    *,
    cwd: Path,
    templates_root: Path,
    target_dir: str | None = None,
    template: str | None = None,
    version: str | None = None,
    now: datetime | None = None,
    steps: Sequence[Step] = RESOLUTION_STEPS,
) -> ResolvedSelection:
    """Walk the resolution steps and return the final selection.

    Raises :class:`OperationCancelled` if the user backs out at any step. No
    filesystem writes happen here.
    """
    state = ResolutionState(
        cwd=Path(cwd),
        default_version=version or default_version(now),
        target_dir=normalize_target_dir(target_dir) or None,
        template_flag=template,
    )
    for step in steps:
        state = step(state, prompter)

    leaf = state.chosen_template()
    if leaf is None:
        raise RuntimeError("template resolution finished without a template")

    return ResolvedSelection(
        target_directory=state.target_path.resolve(),
        package_name=state.package_name,
        version=state.version,
        template_directory=template_directory(leaf, templates_root),
        overwrite=state.overwrite,
        template=leaf,
    )


# ---------------------------------------------------------------------------
# Progress tracking
# ---------------------------------------------------------------------------

class StepTracker:
    """Track and render hierarchical steps without emojis.
    Supports live auto-refresh via an attached refresh callback.
    """
    def __init__(self, title: str):
        self.title = title
        self.steps = []  # list of dicts: {key, label, status, detail}
        self._refresh_cb = None  # callable to trigger UI refresh

    def attach_refresh(self, cb):
        self._refresh_cb = cb

    def add(self, key: str, label: str):
        if key not in [s["key"] for s in self.steps]:
            self.steps.append({"key": key, "label": label, "status": "pending", "detail": ""})
            self._maybe_refresh()

    def start(self, key: str, detail: str = ""):
        self._update(key, status="running", detail=detail)

    def complete(self, key: str, detail: str = ""):
        self._update(key, status="done", detail=detail)

    def error(self, key: str, detail: str = ""):
        self._update(key, status="error", detail=detail)

    def skip(self, key: str, detail: str = ""):
        self._update(key, status="skipped", detail=detail)

    def _update(self, key: str, status: str, detail: str):
        for s in self.steps:
            if s["key"] == key:
                s["status"] = status
                if detail:
                    s["detail"] = detail
                self._maybe_refresh()
                return
        # If not present, add it
        self.steps.append({"key": key, "label": key, "status": status, "detail": detail})
        self._maybe_refresh()

    def _maybe_refresh(self):
        if self._refresh_cb:
            self._refresh_cb()

    def render(self):
        tree = Tree(f"[cyan]{self.title}[/cyan]", guide_style="grey50")
        symbols = {
            "done": "[green]●[/green]",
            "pending": "[green dim]○[/green dim]",
            "running": "[cyan]○[/cyan]",
            "error": "[red]●[/red]",
            "skipped": "[yellow]○[/yellow]",
        }
        for step in self.steps:
            label = step["label"]
            detail_text = step["detail"].strip() if step["detail"] else ""
            symbol = symbols.get(step["status"], " ")

            if step["status"] == "pending":
                # Entire line light gray (pending)
                suffix = f" ({detail_text})" if detail_text else ""
                line = f"{symbol} [bright_black]{label}{suffix}[/bright_black]"
            elif detail_text:
                line = f"{symbol} [white]{label}[/white] [bright_black]({escape(detail_text)})[/bright_black]"
            else:
                line = f"{symbol} [white]{label}[/white]"

            tree.add(line)
        return tree


# ---------------------------------------------------------------------------
# Materialization
# ---------------------------------------------------------------------------

def empty_dir(path: Path) -> None:
    """Remove everything inside ``path`` but keep the directory itself."""
    path = Path(path)
    if not path.exists():
        return
    for entry in path.iterdir():
        if entry.is_dir() and not entry.is_symlink():
            shutil.rmtree(entry)
        else:
            entry.unlink()


def copy_entry(src: Path, dest: Path) -> None:
    """Copy a file or a whole directory tree; symlinks are followed."""
    if src.is_dir():
        copy_dir(src, dest)
    else:
        shutil.copy(src, dest)


def copy_dir(src_dir: Path, dest_dir: Path) -> None:
    dest_dir.mkdir(parents=True, exist_ok=True)
    for entry in sorted(src_dir.iterdir()):
        copy_entry(entry, dest_dir / entry.name)


def read_manifest(template_dir: Path) -> dict:
    source = Path(template_dir) / MANIFEST_NAME
    try:
        manifest = json.loads(source.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ManifestError(f"Template manifest not found: {source}") from e
    except json.JSONDecodeError as e:
        raise ManifestError(f"Malformed template manifest {source}: {e}") from e
    if not isinstance(manifest, dict):
        raise ManifestError(f"Template manifest {source} must contain a JSON object")
    return manifest


def write_manifest(manifest: dict, target_dir: Path, *, name: str, version: str) -> Path:
    """Write ``manifest`` with ``name``/``version`` replaced; other keys keep their order."""
    patched = dict(manifest)
    patched["name"] = name
    patched["version"] = version
    target = Path(target_dir) / MANIFEST_NAME
    target.write_text(json.dumps(patched, indent=2, ensure_ascii=False) + "\n", encoding="utf-8", newline="\n")
    return target


def materialize(selection: ResolvedSelection, *, tracker: StepTracker | None = None) -> Path:
    """Copy the selected template into the target directory and patch its manifest.

    Uses tracker if provided (with keys: prepare, copy, manifest). Nothing is
    rolled back on failure: files copied before the error stay in place.
    """
    template_dir = selection.template_directory
    root = selection.target_directory

    if not template_dir.is_dir():
        if tracker:
            tracker.error("prepare", "template missing")
        raise TemplateNotFoundError(f"Template directory does not exist: {template_dir}")

    if selection.overwrite:
        if tracker:
            tracker.start("prepare")
        empty_dir(root)
        if tracker:
            tracker.complete("prepare", "emptied existing directory")
    elif not root.exists():
        if tracker:
            tracker.start("prepare")
        root.mkdir(parents=True)
        if tracker:
            tracker.complete("prepare", "created")
    elif tracker:
        tracker.skip("prepare", "existing empty directory reused")

    if tracker:
        tracker.start("copy", f"from template-{selection.template.directory}")
    entries = [entry for entry in sorted(template_dir.iterdir()) if entry.name != MANIFEST_NAME]
    try:
        for entry in entries:
            copy_entry(entry, root / entry.name)
    except OSError as e:
        if tracker:
            tracker.error("copy", str(e))
        raise
    if tracker:
        tracker.complete("copy", f"{len(entries)} entries")

    if tracker:
        tracker.start("manifest")
    try:
        manifest = read_manifest(template_dir)
        write_manifest(manifest, root, name=selection.package_name, version=selection.version)
    except (OSError, ManifestError) as e:
        if tracker:
            tracker.error("manifest", str(e))
        raise
    if tracker:
        tracker.complete("manifest", f"{selection.package_name}@{selection.version}")

    return root


# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------

def package_manager_from_user_agent(user_agent: str | None) -> tuple[str, str | None] | None:
    """Parse ``"<name>/<version> ..."`` as set by npm, yarn and pnpm."""
    if not user_agent or not user_agent.strip():
        return None
    spec = user_agent.split()[0]
    name, _, version = spec.partition("/")
    return name, (version or None)


def next_steps(root: Path, cwd: Path, package_manager: str = "npm") -> list[str]:
    """Commands the user should run after scaffolding."""
    commands = []
    if Path(root).resolve() != Path(cwd).resolve():
        commands.append(f"cd {os.path.relpath(root, cwd)}")
    commands.append("git init")
    if package_manager == "yarn":
        commands += ["yarn", "yarn dev"]
    elif package_manager == "pnpm":
        commands += ["pnpm i", "pnpm dev"]
    else:
        commands += [f"{package_manager} i", f"{package_manager} run dev"]
    return commands


# ASCII Art Banner
BANNER = """
╔═╗╔╦╗╔═╗╦═╗╔╦╗╔═╗╦═╗
╚═╗ ║ ╠═╣╠╦╝ ║ ║╣ ╠╦╝
╚═╝ ╩ ╩ ╩╩╚═ ╩ ╚═╝╩╚═
"""

TAGLINE = "create-starter - Front-end project scaffolding"

console = Console()

app = typer.Typer(
    name="create-starter",
    help="Scaffold a new project from a bundled starter template",
    add_completion=False,
)


def show_banner():
    """Display the ASCII art banner."""
    # Create gradient effect with different colors
    banner_lines = BANNER.strip().split('\n')
    colors = ["bright_blue", "cyan", "bright_cyan"]

    styled_banner = Text()
    for i, line in enumerate(banner_lines):
        color = colors[i % len(colors)]
        styled_banner.append(line + "\n", style=color)

    console.print(Align.center(styled_banner))
    console.print(Align.center(Text(TAGLINE, style="italic bright_yellow")))
    console.print()


def build_prompter() -> Prompter:
    return ConsolePrompter(console)


def _report_failure(e: BaseException, *, debug: bool, cwd: Path, templates_root: Path) -> None:
    """Print the Failure panel; must be called from inside the except block."""
    console.print(Panel(f"[red]{type(e).__name__}[/red]: {escape(str(e))}", title="Failure", border_style="red"))
    if debug:
        console.print_exception()
        _env_pairs = [
            ("Python", sys.version.split()[0]),
            ("Platform", sys.platform),
            ("CWD", str(cwd)),
            ("Templates", str(templates_root)),
        ]
        _label_width = max(len(k) for k, _ in _env_pairs)
        env_lines = [f"{k.ljust(_label_width)} → [bright_black]{v}[/bright_black]" for k, v in _env_pairs]
        console.print(Panel("\n".join(env_lines), title="Debug Environment", border_style="magenta"))


@app.command()
def create(
    target_dir: str = typer.Argument(None, help="Directory to create the project in (prompted for if omitted)"),
    template: str = typer.Option(None, "--template", "-t", help="Template name to use, e.g. unbuild or weapp (see --list)"),
    version: str = typer.Option(None, "--version", help="Default offered at the version prompt (defaults to YYYY.MMDD.HHmm)"),
    templates_dir: Path = typer.Option(None, "--templates-dir", envvar=TEMPLATES_ENVVAR, help="Directory holding the template-* folders"),
    list_templates: bool = typer.Option(False, "--list", help="Print the template catalog and exit"),
    debug: bool = typer.Option(False, "--debug", help="Show verbose diagnostic output on failure"),
):
    """
    Create a new project from one of the starter templates.

    This command will:
    1. Ask for the target directory, package name and version
    2. Let you pick a framework and, where there are several, a variant
    3. Copy the template into the target directory
    4. Write package.json with the chosen name and version

    Examples:
        create-starter
        create-starter my-app
        create-starter my-app --template unbuild
        create-starter . -t weapp --version 1.0.0
    """
    show_banner()

    if list_templates:
        console.print(render_catalog_tree())
        return

    cwd = Path.cwd()
    templates_root = Path(templates_dir or DEFAULT_TEMPLATES_ROOT).expanduser().resolve()

    try:
        selection = resolve(
            build_prompter(),
            cwd=cwd,
            templates_root=templates_root,
            target_dir=target_dir,
            template=template,
            version=version,
        )
    except OperationCancelled as e:
        console.print(f"[red]✖[/red] {e}")
        return
    except OSError as e:
        _report_failure(e, debug=debug, cwd=cwd, templates_root=templates_root)
        raise typer.Exit(1)

    setup_lines = [
        "[cyan]Project Setup[/cyan]",
        "",
        f"{'Package':<15} [green]{selection.package_name}@{selection.version}[/green]",
        f"{'Template':<15} {render_label(selection.template)}",
        f"{'Target Path':<15} [dim]{selection.target_directory}[/dim]",
    ]
    console.print(Panel("\n".join(setup_lines), border_style="cyan", padding=(1, 2)))

    tracker = StepTracker("Scaffold Project")
    tracker.add("resolve", "Resolve template")
    tracker.complete("resolve", selection.template.name)
    for key, label in [
        ("prepare", "Prepare target directory"),
        ("copy", "Copy template files"),
        ("manifest", "Write package.json"),
        ("final", "Finalize"),
    ]:
        tracker.add(key, label)

    # Use transient so live tree is replaced by the final static render (avoids duplicate output)
    with Live(tracker.render(), console=console, refresh_per_second=8, transient=True) as live:
        tracker.attach_refresh(lambda: live.update(tracker.render()))
        try:
            root = materialize(selection, tracker=tracker)
            tracker.complete("final", "project ready")
        except Exception as e:
            tracker.error("final", str(e))
            live.stop()
            console.print(tracker.render())
            _report_failure(e, debug=debug, cwd=cwd, templates_root=templates_root)
            raise typer.Exit(1)

    # Final static tree (ensures finished state visible after Live context ends)
    console.print(tracker.render())
    console.print(f"\n[bold green]Project scaffolded in {escape(str(root))}[/bold green]")

    pkg_info = package_manager_from_user_agent(os.environ.get(USER_AGENT_ENVVAR))
    package_manager = pkg_info[0] if pkg_info else "npm"
    steps_lines = [f"[cyan]{escape(command)}[/cyan]" for command in next_steps(root, cwd, package_manager)]
    console.print()
    console.print(Panel("\n".join(steps_lines), title="Next Steps", border_style="cyan", padding=(1, 2)))


def main():
    app()


if __name__ == "__main__":
    main()
