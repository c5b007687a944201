#!/usr/bin/env python3
# /// script
# requires-python = ">=3.11"
# dependencies = [
#     "typer",
#     "rich",
#     "readchar",
#     "httpx",
#     "truststore",
# ]
# ///
"""
Starter CLI - Bootstrap a React project from a remote template

Usage:
    uvx starter-cli my-react-app
    uvx starter-cli my-react-app --no-prompt

Or install globally:
    uv tool install starter-cli
    starter my-react-app
"""

import json
import os
import re
import shutil
import stat
import subprocess
import sys
import tempfile
import zipfile
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Sequence

import typer
import httpx
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.prompt import Prompt
from rich.text import Text
from rich.live import Live
from rich.align import Align
from rich.table import Table
from typer.core import TyperCommand

# For cross-platform keyboard input
import readchar
import ssl
import truststore

__version__ = "0.1.0"

ssl_context = truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)

def _github_token(cli_token: str | None = None) -> str | None:
    """Return sanitized GitHub token (cli arg takes precedence) or None."""
    return ((cli_token or os.getenv("GH_TOKEN") or os.getenv("GITHUB_TOKEN") or "").strip()) or None

def _github_auth_headers(cli_token: str | None = None) -> dict:
    """Return Authorization header dict only when a non-empty token exists."""
    token = _github_token(cli_token)
    return {"Authorization": f"Bearer {token}"} if token else {}

# Constants
PROGRAM_NAME = "starter"
DEFAULT_TEMPLATE = "direct:https://github.com/maxiximxx/react-app-template.git"
TEMPLATE_CHOICES = {
    "JavaScript": "React + JavaScript",
    "TypeScript": "React + TypeScript",
}
TEMPLATE_BRANCHES = {
    "JavaScript": "main",
    "TypeScript": "typescript",
}
DEFAULT_VERSION = "1.0.0"
VERSION_PATTERN = re.compile(r"\d{1,2}\.\d{1,2}\.\d{1,2}")
MANIFEST_FILENAME = "package.json"

# install args, run-script prefix
PACKAGE_MANAGERS = {
    "npm": (("install",), "npm run"),
    "yarn": (("install",), "yarn"),
    "pnpm": (("install",), "pnpm run"),
}
RUN_SCRIPT_HINTS = [
    ("start", "Start the node server"),
    ("dev", "Start the development server"),
    ("build", "Bundle the app into static files for production"),
]

# host prefix -> (default host, clone url template, archive url template)
SOURCE_HOSTS = {
    "github": (
        "github.com",
        "https://{host}/{owner}/{name}.git",
        "https://{host}/{owner}/{name}/archive/{checkout}.zip",
    ),
    "gitlab": (
        "gitlab.com",
        "https://{host}/{owner}/{name}.git",
        "https://{host}/{owner}/{name}/repository/archive.zip?ref={checkout}",
    ),
    "bitbucket": (
        "bitbucket.org",
        "https://{host}/{owner}/{name}.git",
        "https://{host}/{owner}/{name}/get/{checkout}.zip",
    ),
}
DEFAULT_CHECKOUT = "master"
GITHUB_REPO_URL = re.compile(r"https?://github\.com/([^/]+)/([^/]+?)(?:\.git)?/?")

# ASCII Art Banner
BANNER = """
███████╗████████╗ █████╗ ██████╗ ████████╗███████╗██████╗
██╔════╝╚══██╔══╝██╔══██╗██╔══██╗╚══██╔══╝██╔════╝██╔══██╗
███████╗   ██║   ███████║██████╔╝   ██║   █████╗  ██████╔╝
╚════██║   ██║   ██╔══██║██╔══██╗   ██║   ██╔══╝  ██╔══██╗
███████║   ██║   ██║  ██║██║  ██║   ██║   ███████╗██║  ██║
╚══════╝   ╚═╝   ╚═╝  ╚═╝╚═╝  ╚═╝   ╚═╝   ╚══════╝╚═╝  ╚═╝
"""

TAGLINE = "Starter - Bootstrap React projects from a template"


class StarterError(Exception):
    """Base class for errors raised while creating a project."""


class PromptError(StarterError):
    """The interactive questions could not be asked or were cancelled."""


class TemplateSourceError(StarterError):
    """A template reference could not be understood."""


class TemplateFetchError(StarterError):
    """The template could not be downloaded into the target directory."""


class ProcessLaunchError(StarterError):
    """A child process could not be started."""

    def __init__(self, command: str, reason: str):
        self.command = command
        self.reason = reason
        super().__init__(f"Failed to run '{command}': {reason}")


@dataclass(frozen=True)
class InitAnswers:
    template: str
    author: str = ""
    description: str = ""
    version: str = DEFAULT_VERSION


@dataclass(frozen=True)
class ManifestPatch:
    """Fields written onto the template's package.json."""

    name: str
    author: str = ""
    description: str = ""
    version: str = DEFAULT_VERSION

    @classmethod
    def from_answers(cls, project_name: str, answers: InitAnswers) -> "ManifestPatch":
        return cls(
            name=project_name,
            author=answers.author,
            description=answers.description,
            version=answers.version,
        )


@dataclass(frozen=True)
class TemplateSource:
    """A parsed template reference such as ``github:owner/name#branch``.

    ``kind`` is ``direct`` for a plain URL, otherwise one of SOURCE_HOSTS.
    """

    kind: str
    url: str = ""
    host: str = ""
    owner: str = ""
    name: str = ""
    checkout: str = ""

    def clone_url(self) -> str:
        if self.kind == "direct":
            return self.url
        _, clone_template, _ = SOURCE_HOSTS[self.kind]
        return clone_template.format(host=self.host, owner=self.owner, name=self.name)

    def archive_url(self) -> str:
        if self.kind == "direct":
            return self.url
        _, _, archive_template = SOURCE_HOSTS[self.kind]
        return archive_template.format(
            host=self.host,
            owner=self.owner,
            name=self.name,
            checkout=self.checkout or DEFAULT_CHECKOUT,
        )


def parse_template_source(ref: str) -> TemplateSource:
    """Parse a template reference.

    Supported forms::

        direct:https://example.com/repo.git#branch
        github:owner/name#branch
        gitlab:git.example.com:owner/name
        owner/name
    """
    ref = (ref or "").strip()
    if not ref:
        raise TemplateSourceError("Template reference is empty")

    if ref.startswith("direct:"):
        url, _, checkout = ref[len("direct:"):].partition("#")
        if not url:
            raise TemplateSourceError(f"Missing URL in template reference '{ref}'")
        return TemplateSource(kind="direct", url=url, checkout=checkout)

    body, _, checkout = ref.partition("#")
    kind = "github"
    prefix, sep, rest = body.partition(":")
    if sep:
        if prefix not in SOURCE_HOSTS:
            raise TemplateSourceError(
                f"Unknown template host '{prefix}'. Choose from: direct, {', '.join(SOURCE_HOSTS)}"
            )
        kind = prefix
        body = rest

    host = SOURCE_HOSTS[kind][0]
    if ":" in body:
        host, _, body = body.partition(":")

    owner, _, name = body.partition("/")
    if not owner or not name or "/" in name:
        raise TemplateSourceError(f"Expected 'owner/name' in template reference '{ref}'")
    return TemplateSource(kind=kind, host=host, owner=owner, name=name, checkout=checkout)


def with_branch(ref: str, branch: str) -> str:
    """Return ``ref`` pointing at ``branch`` (replaces any existing checkout)."""
    base = ref.split("#", 1)[0]
    return f"{base}#{branch}"


def archive_source(source: TemplateSource) -> TemplateSource:
    """Return the source to download as an archive.

    A ``direct:`` GitHub repository URL is turned into its ``github:`` form so
    the checkout picks the archive. Any other direct URL must already point at
    an archive and cannot select a branch.
    """
    if source.kind != "direct":
        return source
    match = GITHUB_REPO_URL.fullmatch(source.url)
    if match:
        owner, name = match.groups()
        return TemplateSource(kind="github", host="github.com", owner=owner, name=name, checkout=source.checkout)
    if source.checkout:
        raise TemplateSourceError(
            f"Cannot download branch '{source.checkout}' of {source.url} as an archive; "
            "use --clone or a github:, gitlab: or bitbucket: reference"
        )
    return source


console = Console()


class BannerCommand(TyperCommand):
    """Custom command that shows banner before help."""

    def format_help(self, ctx, formatter):
        # Show banner before help
        show_banner()
        super().format_help(ctx, formatter)


app = typer.Typer(
    name=PROGRAM_NAME,
    help="Create a React project from a remote template",
    add_completion=False,
)


def show_banner():
    """Display the ASCII art banner."""
    # Create gradient effect with different colors
    banner_lines = BANNER.strip().split('\n')
    colors = ["bright_blue", "blue", "cyan", "bright_cyan", "white", "bright_white"]

    styled_banner = Text()
    for i, line in enumerate(banner_lines):
        color = colors[i % len(colors)]
        styled_banner.append(line + "\n", style=color)

    console.print(Align.center(styled_banner))
    console.print(Align.center(Text(TAGLINE, style="italic bright_yellow")))
    console.print()


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


def select_with_arrows(options: dict, prompt_text: str = "Select an option", default_key: str = None) -> str:
    """
    Interactive selection using arrow keys with Rich Live display.

    Args:
        options: Dict with keys as option keys and values as descriptions
        prompt_text: Text to show above the options
        default_key: Default option key to start with

    Returns:
        Selected option key

    Raises:
        PromptError: when the selection is cancelled
    """
    option_keys = list(options.keys())
    if default_key and default_key in option_keys:
        selected_index = option_keys.index(default_key)
    else:
        selected_index = 0

    def create_selection_panel():
        table = Table.grid(padding=(0, 2))
        table.add_column(style="cyan", justify="left", width=3)
        table.add_column(style="white", justify="left")

        for i, key in enumerate(option_keys):
            marker = "▶" if i == selected_index else " "
            table.add_row(marker, f"[cyan]{key}[/cyan] [dim]({options[key]})[/dim]")

        table.add_row("", "")
        table.add_row("", "[dim]Use ↑/↓ to navigate, Enter to select, Esc to cancel[/dim]")

        return Panel(
            table,
            title=f"[bold]{prompt_text}[/bold]",
            border_style="cyan",
            padding=(1, 2)
        )

    console.print()
    with Live(create_selection_panel(), console=console, transient=True, auto_refresh=False) as live:
        while True:
            try:
                key = get_key()
            except KeyboardInterrupt:
                raise PromptError("Selection cancelled")
            if key == 'up':
                selected_index = (selected_index - 1) % len(option_keys)
            elif key == 'down':
                selected_index = (selected_index + 1) % len(option_keys)
            elif key == 'enter':
                return option_keys[selected_index]
            elif key == 'escape':
                raise PromptError("Selection cancelled")

            live.update(create_selection_panel(), refresh=True)


def validate_version(value: str) -> bool:
    """Return True for versions like ``1.0.0`` (one or two digits per part)."""
    return VERSION_PATTERN.fullmatch(value) is not None


def prompt_version(default: str = DEFAULT_VERSION) -> str:
    """Ask for the project version until a valid one is given."""
    while True:
        value = Prompt.ask("[cyan]Version[/cyan]", default=default, console=console).strip() or default
        if validate_version(value):
            return value
        console.print("[red]Please input a valid version, e.g. 1.0.0[/red]")


def collect_answers() -> InitAnswers:
    """Ask the init questions in order: template, author, description, version.

    Raises PromptError if the terminal is not interactive or a prompt fails.
    """
    if not sys.stdin.isatty():
        raise PromptError("Interactive prompts require a TTY")
    try:
        template = select_with_arrows(TEMPLATE_CHOICES, "Choose a template:", "JavaScript")
        console.print(f"[cyan]Template:[/cyan] {template}")
        author = Prompt.ask("[cyan]Author[/cyan]", default="", show_default=False, console=console).strip()
        description = Prompt.ask("[cyan]Description[/cyan]", default="", show_default=False, console=console).strip()
        version = prompt_version()
    except PromptError:
        raise
    except (KeyboardInterrupt, Exception) as e:
        raise PromptError(str(e) or type(e).__name__) from e
    return InitAnswers(template=template, author=author, description=description, version=version)


def check_project_name(project_name: Optional[str]) -> None:
    """Exit with a usage message when no project directory was given."""
    if project_name:
        return
    console.print("[red]Please specify the project directory[/red]")
    console.print(f"  [cyan]{PROGRAM_NAME}[/cyan] [green]<project-directory>[/green]")
    console.print()
    console.print("For example:")
    console.print(f"  [cyan]{PROGRAM_NAME}[/cyan] [green]my-react-app[/green]")
    console.print()
    console.print(f"Run [cyan]{PROGRAM_NAME} --help[/cyan] to see all options.")
    raise typer.Exit(1)


def check_dir_exist(project_name: str) -> None:
    """Exit when anything already exists at ``project_name``."""
    if os.path.lexists(project_name):
        console.print(f"[red]{project_name} already exists in this directory[/red]")
        raise typer.Exit(1)


def check_tool(tool: str) -> Optional[str]:
    """Return the resolved executable path for ``tool`` or None."""
    return shutil.which(tool)


def clone_template(source: TemplateSource, dest: Path) -> None:
    """Shallow-clone ``source`` into ``dest`` and drop the template's history."""
    git = check_tool("git")
    if git is None:
        raise TemplateFetchError("git is required to clone the template but was not found on PATH")

    cmd = [git, "clone", "--depth", "1"]
    if source.checkout:
        cmd += ["--branch", source.checkout]
    cmd += [source.clone_url(), str(dest)]

    try:
        subprocess.run(cmd, check=True, capture_output=True, text=True)
    except subprocess.CalledProcessError as e:
        detail = (e.stderr or "").strip() or f"git clone exited with {e.returncode}"
        raise TemplateFetchError(detail) from e
    except OSError as e:
        raise TemplateFetchError(str(e)) from e

    git_dir = dest / ".git"
    if git_dir.exists():
        try:
            remove_tree(git_dir)
        except OSError as e:
            raise TemplateFetchError(f"Error removing template history: {e}") from e


def _clear_readonly(func, path, _exc):
    # git marks pack files read-only; Windows refuses to delete those
    os.chmod(path, stat.S_IWRITE)
    func(path)


def remove_tree(path: Path) -> None:
    """Delete ``path`` recursively, clearing read-only bits that block removal."""
    if sys.version_info >= (3, 12):
        shutil.rmtree(path, onexc=_clear_readonly)
    else:
        shutil.rmtree(path, onerror=_clear_readonly)


def extract_archive(zip_path: Path, dest: Path) -> None:
    """Extract ``zip_path`` into ``dest``, flattening a single top-level directory."""
    dest.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(zip_path, 'r') as zip_ref:
        zip_ref.extractall(dest)

    extracted_items = list(dest.iterdir())
    # Handle GitHub-style ZIP with a single root directory
    if len(extracted_items) == 1 and extracted_items[0].is_dir():
        # Rename first so a child sharing the root's name can move up
        nested_dir = extracted_items[0].rename(dest / f".{extracted_items[0].name}.extract")
        for item in list(nested_dir.iterdir()):
            shutil.move(str(item), str(dest / item.name))
        nested_dir.rmdir()


def download_archive(source: TemplateSource, dest: Path, *, client: httpx.Client, github_token: str = None) -> None:
    """Stream the template archive to a temporary file and extract it into ``dest``."""
    url = source.archive_url()
    headers = _github_auth_headers(github_token) if source.kind == "github" else {}
    with tempfile.TemporaryDirectory() as temp_dir:
        zip_path = Path(temp_dir) / "template.zip"
        try:
            with client.stream("GET", url, timeout=60, follow_redirects=True, headers=headers) as response:
                if response.status_code != 200:
                    raise TemplateFetchError(f"Download failed with {response.status_code} for {url}")
                with open(zip_path, 'wb') as f:
                    for chunk in response.iter_bytes(chunk_size=8192):
                        f.write(chunk)
        except httpx.HTTPError as e:
            raise TemplateFetchError(f"Error downloading {url}: {e}") from e

        try:
            extract_archive(zip_path, dest)
        except (zipfile.BadZipFile, OSError) as e:
            raise TemplateFetchError(f"Error extracting template: {e}") from e


def download_template(ref: str, dest: Path, *, clone: bool = True, client: httpx.Client = None, github_token: str = None) -> None:
    """Materialize the template ``ref`` into ``dest``.

    Clone mode runs ``git clone``; archive mode downloads a zip over HTTP.
    A partially written ``dest`` is left as is on failure.
    """
    source = parse_template_source(ref)
    if clone:
        clone_template(source, dest)
        return

    source = archive_source(source)
    owns_client = client is None
    if owns_client:
        client = httpx.Client(verify=ssl_context)
    try:
        download_archive(source, dest, client=client, github_token=github_token)
    finally:
        if owns_client:
            client.close()


def fetch_project(project_name: str, ref: str, *, clone: bool = True, skip_tls: bool = False, github_token: str = None, debug: bool = False) -> Path:
    """Download the template into ``project_name`` with a spinner; exit on failure."""
    root = Path(project_name).resolve()
    console.print(f"Creating a new react app in [green]{root}[/green]")
    console.print()

    if debug:
        console.print(Panel(
            f"{'Template':<10} → [bright_black]{ref}[/bright_black]\n"
            f"{'Mode':<10} → [bright_black]{'clone' if clone else 'archive'}[/bright_black]\n"
            f"{'Target':<10} → [bright_black]{root}[/bright_black]",
            title="Fetch",
            border_style="magenta",
        ))

    client = None if clone else httpx.Client(verify=False if skip_tls else ssl_context)
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            progress.add_task("Downloading react project template", total=None)
            download_template(ref, root, clone=clone, client=client, github_token=github_token)
    except StarterError as e:
        console.print("[red]✖[/red] Download failed")
        console.print(str(e), style="red", markup=False)
        raise typer.Exit(1)
    finally:
        if client is not None:
            client.close()

    console.print("[green]✔ Download success[/green]")
    return root


def patch_manifest(project_path: Path, patch: ManifestPatch) -> bool:
    """Write ``patch`` onto ``project_path/package.json``.

    Returns False when the template ships no manifest. Parse errors are not
    handled here.
    """
    manifest_path = project_path / MANIFEST_FILENAME
    if not manifest_path.exists():
        return False

    data = json.loads(manifest_path.read_text(encoding="utf-8"))
    data["name"] = patch.name
    if patch.author:
        data["author"] = patch.author
    if patch.description:
        data["description"] = patch.description
    data["version"] = patch.version
    manifest_path.write_text(json.dumps(data, indent="\t", ensure_ascii=False), encoding="utf-8")
    return True


def run_process(command: str, args: Sequence[str], cwd: Path) -> int:
    """Run ``command`` in ``cwd`` with the terminal attached and return its exit code.

    Only a failure to start the process is an error; the exit code is returned as is.
    """
    executable = check_tool(command)
    if executable is None:
        raise ProcessLaunchError(command, "command not found")
    try:
        result = subprocess.run([executable, *args], cwd=cwd)
    except OSError as e:
        raise ProcessLaunchError(command, str(e)) from e
    return result.returncode


def init_git_repo(project_path: Path, debug: bool = False) -> None:
    """Run ``git init`` in the new project. Exits only if git cannot be started."""
    try:
        code = run_process("git", ["init"], project_path)
    except ProcessLaunchError as e:
        console.print("[red]Initialize git repository fail[/red]")
        console.print(str(e), style="red", markup=False)
        raise typer.Exit(1)
    if debug:
        console.print(f"[bright_black]git init exited with {code}[/bright_black]")
    console.print("[green]Initialize git repository success[/green]")


def run_install(cwd: Path, callback: Callable[[], None], command: str = "npm", args: Sequence[str] = ("install",), debug: bool = False) -> None:
    """Install dependencies, then call ``callback`` whatever the exit code."""
    console.print()
    console.print("Installing dependencies")
    try:
        code = run_process(command, args, cwd)
    except ProcessLaunchError as e:
        console.print("[red]Install dependencies fail[/red]")
        console.print(str(e), style="red", markup=False)
        raise typer.Exit(1)
    if debug:
        console.print(f"[bright_black]{command} {' '.join(args)} exited with {code}[/bright_black]")
    callback()


def print_next_steps(project_name: str, package_manager: str = "npm") -> None:
    _, run_prefix = PACKAGE_MANAGERS[package_manager]
    steps_lines = [f"[cyan]cd {project_name}[/cyan]"]
    for script, description in RUN_SCRIPT_HINTS:
        steps_lines.append("")
        steps_lines.append(f"[cyan]{run_prefix} {script}[/cyan]")
        steps_lines.append(f"  {description}")

    console.print()
    console.print("[bold green]React project initial success[/bold green]")
    console.print()
    console.print(Panel("\n".join(steps_lines), title="Next Steps", border_style="cyan", padding=(1, 2)))


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(__version__)
        raise typer.Exit()


@app.command(cls=BannerCommand)
def create(
    project_directory: Optional[str] = typer.Argument(None, metavar="[PROJECT-DIRECTORY]", help="Name for your new project directory", show_default=False),
    version: bool = typer.Option(False, "--version", "-v", help="Show version and exit.", callback=version_callback, is_eager=True),
    no_prompt: bool = typer.Option(False, "--no-prompt", help="Skip the questions, manifest update and git init; use the template as is"),
    template: Optional[str] = typer.Option(None, "--template", envvar="STARTER_TEMPLATE", help="Template reference, e.g. github:owner/name#branch or direct:<git-url>"),
    clone: bool = typer.Option(True, "--clone/--archive", help="Fetch the template with git clone or as a zip archive"),
    package_manager: str = typer.Option("npm", "--package-manager", "-p", help="Package manager used to install dependencies: npm, yarn or pnpm"),
    github_token: Optional[str] = typer.Option(None, "--github-token", help="GitHub token for archive downloads (or set GH_TOKEN or GITHUB_TOKEN environment variable)"),
    skip_tls: bool = typer.Option(False, "--skip-tls", help="Skip SSL/TLS verification for archive downloads (not recommended)"),
    debug: bool = typer.Option(False, "--debug", help="Show verbose diagnostic output"),
):
    """
    Create a new React project from the remote template.

    This command will:
    1. Check that the project directory does not exist yet
    2. Ask for template flavor, author, description and version
    3. Download the template into the project directory
    4. Update package.json with your answers
    5. Initialize a git repository
    6. Install dependencies

    Examples:
        starter my-react-app
        starter my-react-app --no-prompt
        starter my-react-app --package-manager pnpm
        starter my-react-app --template github:owner/name#main --archive
    """
    check_project_name(project_directory)
    check_dir_exist(project_directory)

    if package_manager not in PACKAGE_MANAGERS:
        console.print(f"[red]Error:[/red] Invalid package manager '{package_manager}'. Choose from: {', '.join(PACKAGE_MANAGERS)}")
        raise typer.Exit(1)

    ref = template or DEFAULT_TEMPLATE
    try:
        source = parse_template_source(ref)
    except TemplateSourceError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    answers = None
    if not no_prompt:
        try:
            answers = collect_answers()
        except PromptError as e:
            if debug:
                console.print(Panel(str(e), title="Prompt Error", border_style="red"))
            console.print("[red]Init project fail, please retry[/red]")
            raise typer.Exit(1)
        # An explicit #branch on the reference wins over the flavor branch
        if not source.checkout:
            ref = with_branch(ref, TEMPLATE_BRANCHES[answers.template])

    project_path = fetch_project(project_directory, ref, clone=clone, skip_tls=skip_tls, github_token=github_token, debug=debug)

    if answers is not None:
        patch_manifest(project_path, ManifestPatch.from_answers(project_directory, answers))
        init_git_repo(project_path, debug=debug)

    install_args, _ = PACKAGE_MANAGERS[package_manager]
    run_install(
        project_path,
        lambda: print_next_steps(project_directory, package_manager),
        command=package_manager,
        args=install_args,
        debug=debug,
    )


def main():
    app()


if __name__ == "__main__":
    main()
