#!/usr/bin/env python3
"""
README Builder CLI

Compose a README.md from predefined and custom sections, preview it in the terminal,
copy it to the clipboard, or save it to disk.

Commands:
    sections - List predefined sections
    build    - Build a README from command-line options
    edit     - Interactive editing session

Examples:\n

    readme_builder.py sections

    readme_builder.py build --title Demo --description "A demo app"

    readme_builder.py build -t Demo -s features -s license --value "features=Fast\\nSmall"

    readme_builder.py build -t Demo -s usage --custom Acknowledgements --value "custom-0=Thanks!" -o .

    readme_builder.py build -t Demo -s custom:Overview -s features --value "custom-0=Why it exists"

    readme_builder.py edit --output-dir docs/
"""

import os
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table
from typing_extensions import Annotated

from readmegen.contexts.composition import UnknownSectionError, get_section_registry, render_state
from readmegen.contexts.editor import EditorSession, build_state
from readmegen.contexts.editor.logger import setup_editor_logger
from readmegen.contexts.export import ClipboardExporter, CopyStatus, ExportError, save_markdown

load_dotenv()
LOG_DIR = Path(os.getenv("READMEGEN_LOG_DIR", "outs/logs"))

console = Console()

app = typer.Typer(
    help="Compose README.md files from ordered, templated sections",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _session_log_dir(mode: str) -> Path:
    return LOG_DIR / f"{mode}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"


def _print_markdown(markdown: str, raw: bool) -> None:
    if raw:
        typer.echo(markdown)
    else:
        console.print(Markdown(markdown))


@app.command("sections")
def sections_command():
    """
    List predefined sections that can be added to a README.
    """
    registry = get_section_registry()

    table = Table(title="Predefined sections")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Input")
    table.add_column("Placeholder", style="dim")

    for descriptor in registry.descriptors():
        shape = descriptor.input_shape.value
        if descriptor.is_multiline:
            shape = f"{shape} ({descriptor.rows} rows)"
        table.add_row(
            descriptor.section_id,
            descriptor.name,
            shape,
            descriptor.placeholder.replace("\n", " / "),
        )

    console.print(table)


@app.command("build")
def build_command(
    title: Annotated[str, typer.Option("--title", "-t", help="Project title")] = "",
    description: Annotated[
        str, typer.Option("--description", "-d", help="One-sentence project description")
    ] = "",
    sections: Annotated[
        Optional[List[str]],
        typer.Option("--section", "-s", help="Section to include, in order: a predefined id or custom:TITLE (repeatable)"),
    ] = None,
    customs: Annotated[
        Optional[List[str]],
        typer.Option("--custom", "-c", help="Custom section title, added after all --section entries (repeatable; keys custom-0, custom-1, ...)"),
    ] = None,
    values: Annotated[
        Optional[List[str]],
        typer.Option("--value", "-v", help="Field text as KEY=TEXT; '\\n' becomes a newline"),
    ] = None,
    copy: Annotated[bool, typer.Option("--copy", help="Copy the README to the clipboard")] = False,
    output_dir: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Save README.md into this directory", file_okay=False),
    ] = None,
    force: Annotated[bool, typer.Option("--force", "-f", help="Overwrite an existing README.md")] = False,
    raw: Annotated[bool, typer.Option("--raw", help="Print Markdown source instead of a rendered preview")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", help="Also log to the console")] = False,
):
    """
    Build a README from options and print the preview.

    Examples:\n

        $ readme_builder.py build -t Demo -d "A demo app" -s license

        $ readme_builder.py build -t Demo -s features -v "features=One\\nTwo" --copy
    """
    setup_editor_logger(_session_log_dir("build"), mode="build", console=verbose)

    try:
        state = build_state(title, description, sections or [], customs or [], values or [])
    except UnknownSectionError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--value")

    markdown = render_state(state)
    _print_markdown(markdown, raw)

    if copy:
        status = ClipboardExporter().copy(markdown)
        color = typer.colors.GREEN if status is CopyStatus.COPIED else typer.colors.RED
        typer.secho(status.value, fg=color, err=True)

    if output_dir is not None:
        try:
            path = save_markdown(markdown, output_dir, overwrite=force)
        except ExportError as e:
            typer.secho(str(e), fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)
        typer.secho(f"Saved {path}", fg=typer.colors.GREEN, err=True)


@app.command("edit")
def edit_command(
    output_dir: Annotated[
        Optional[Path],
        typer.Option("--output-dir", "-o", help="Default directory for 'save'", file_okay=False),
    ] = None,
    force: Annotated[bool, typer.Option("--force", "-f", help="Let 'save' overwrite README.md")] = False,
    raw: Annotated[bool, typer.Option("--raw", help="Show Markdown source instead of a rendered preview")] = False,
):
    """
    Start an interactive session. Type 'help' for commands.
    """
    log_file = setup_editor_logger(_session_log_dir("edit"), mode="edit")
    session = EditorSession(output_dir=output_dir, overwrite=force)

    typer.secho("README editor. Type 'help' for commands, 'quit' to exit.", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"Log file: {log_file}")

    while True:
        try:
            line = typer.prompt("readme", prompt_suffix="> ", default="", show_default=False)
        except typer.Abort:
            typer.echo()
            break

        command = line.strip().split(" ", 1)[0].lower()
        result = session.execute(line)

        if command == "show" and result.ok:
            _print_markdown(result.message, raw)
        elif result.message:
            typer.secho(result.message, fg=None if result.ok else typer.colors.RED)

        if not result.keep_running:
            break


if __name__ == "__main__":
    app()
