"""
Editor Session

The controller for one editing session. It owns the ReadmeState, applies transitions in
response to text commands, memoizes the rendered Markdown per state, and routes the
copy and save actions to the export context.

Commands:
    add <id>               Append a predefined section
    custom <title>         Append a custom section
    delete <key>           Remove a section from the README
    move <source> <target> Move source to target's position
    up <key> / down <key>  Move a section by one position
    set <key> <text>       Set a field ('title', 'description', or a section key).
                           "\\n" in text becomes a newline.
    show                   Print the rendered README
    list                   List active and available sections
    copy                   Copy the README to the clipboard
    save [dir]             Save README.md
    help                   Show this list
    quit                   End the session
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional

from readmegen.contexts.composition import (
    TITLE_BLOCK,
    ReadmeState,
    SectionRegistry,
    UnknownSectionError,
    add_custom_section,
    add_section,
    available_sections,
    delete_section,
    get_section_registry,
    initial_state,
    render_state,
    reorder_sections,
    resolve_key,
    section_label,
    shift_section,
    update_field,
)
from readmegen.contexts.editor.logger import _log_info, log_command, log_command_failed
from readmegen.contexts.export import ClipboardExporter, CopyStatus, ExportError, save_markdown

HELP_TEXT = __doc__.split("Commands:\n", 1)[1].rstrip()


@dataclass
class CommandResult:
    """
    Outcome of one editor command.

    Attributes:
        message: Text to show the user
        ok: False when the command was rejected
        keep_running: False once the user quits
    """

    message: str = ""
    ok: bool = True
    keep_running: bool = True


def unescape_newlines(text: str) -> str:
    return text.replace("\\n", "\n")


class EditorSession:
    """
    In-memory README editing session.

    Args:
        registry: Section registry (shared default if omitted)
        exporter: Clipboard exporter (pyperclip-backed if omitted)
        output_dir: Default directory for ``save``
        overwrite: Whether ``save`` replaces an existing README.md
        state: Starting state (title block only if omitted)
    """

    def __init__(
        self,
        registry: SectionRegistry = None,
        exporter: ClipboardExporter = None,
        output_dir: Optional[Path] = None,
        overwrite: bool = False,
        state: ReadmeState = None,
    ):
        self.registry = registry or get_section_registry()
        self.exporter = exporter or ClipboardExporter()
        self.output_dir = output_dir
        self.overwrite = overwrite

        self._state = state or initial_state()
        self._rendered_state: Optional[ReadmeState] = None
        self._markdown = ""

        self._commands: Dict[str, Callable[[List[str]], CommandResult]] = {
            "add": self._add,
            "custom": self._custom,
            "delete": self._delete,
            "move": self._move,
            "up": lambda args: self._shift(args, -1),
            "down": lambda args: self._shift(args, 1),
            "set": self._set,
            "show": lambda args: CommandResult(self.markdown),
            "list": self._list,
            "copy": self._copy,
            "save": self._save,
            "help": lambda args: CommandResult(HELP_TEXT),
            "quit": lambda args: CommandResult("Bye.", keep_running=False),
        }

    @property
    def state(self) -> ReadmeState:
        return self._state

    @property
    def markdown(self) -> str:
        """Rendered README, recomputed only when the state object changes."""
        if self._rendered_state is not self._state:
            self._markdown = render_state(self._state, self.registry)
            self._rendered_state = self._state
        return self._markdown

    @property
    def copy_status(self) -> CopyStatus:
        return self.exporter.status

    def execute(self, line: str) -> CommandResult:
        """
        Run one command line.

        Unknown commands, unknown section keys, and failed saves are reported in the
        result and leave the state unchanged.
        """
        line = line.strip()
        if not line:
            return CommandResult()

        log_command(line)
        name, _, rest = line.partition(" ")
        handler = self._commands.get(name.lower())

        if handler is None:
            return CommandResult(f"Unknown command '{name}'. Type 'help' for commands.", ok=False)

        # set and custom take free text, everything else takes whitespace-separated keys
        args = [rest.strip()] if name.lower() in ("set", "custom") else rest.split()

        try:
            return handler(args)
        except (UnknownSectionError, ExportError) as e:
            log_command_failed(line, e)
            return CommandResult(str(e), ok=False)

    # ------------------------------------------------------------------
    # Command handlers
    # ------------------------------------------------------------------

    def _require(self, args: List[str], count: int, usage: str) -> Optional[CommandResult]:
        if len(args) != count or not all(args):
            return CommandResult(f"Usage: {usage}", ok=False)
        return None

    def _add(self, args: List[str]) -> CommandResult:
        error = self._require(args, 1, "add <section>")
        if error:
            return error

        before = self._state
        self._state = add_section(self._state, args[0], self.registry)
        if self._state is before:
            return CommandResult(f"'{args[0]}' is already in the README.")
        return CommandResult(f"Added {args[0]}.")

    def _custom(self, args: List[str]) -> CommandResult:
        title = args[0] if args else ""
        before = self._state
        self._state = add_custom_section(self._state, title)

        if self._state is before:
            return CommandResult("Usage: custom <title>", ok=False)

        section = self._state.sections[-1]
        return CommandResult(f"Added custom section '{title.strip()}' as {section.key}.")

    def _delete(self, args: List[str]) -> CommandResult:
        error = self._require(args, 1, "delete <section>")
        if error:
            return error

        section = resolve_key(self._state, args[0], self.registry)
        if section == TITLE_BLOCK:
            return CommandResult("The title block cannot be deleted.", ok=False)

        before = self._state
        self._state = delete_section(self._state, section)
        if self._state is before:
            return CommandResult(f"'{section.key}' is not in the README.")
        return CommandResult(f"Deleted {section.key}.")

    def _move(self, args: List[str]) -> CommandResult:
        error = self._require(args, 2, "move <source> <target>")
        if error:
            return error

        source = resolve_key(self._state, args[0], self.registry)
        target = resolve_key(self._state, args[1], self.registry)
        self._state = reorder_sections(self._state, source, target)
        return CommandResult(self._order_summary())

    def _shift(self, args: List[str], offset: int) -> CommandResult:
        error = self._require(args, 1, "up|down <section>")
        if error:
            return error

        section = resolve_key(self._state, args[0], self.registry)
        self._state = shift_section(self._state, section, offset)
        return CommandResult(self._order_summary())

    def _set(self, args: List[str]) -> CommandResult:
        key, _, text = (args[0] if args else "").partition(" ")
        if not key:
            return CommandResult("Usage: set <field> <text>", ok=False)

        self._state = update_field(self._state, key, unescape_newlines(text.strip()), self.registry)
        return CommandResult(f"Updated {key}.")

    def _list(self, args: List[str]) -> CommandResult:
        lines = ["Active sections:", f"  {TITLE_BLOCK.key:<18} Project Title / Description"]
        for section in self._state.sections:
            label = section_label(self._state, section, self.registry)
            lines.append(f"  {section.key:<18} {label}")

        remaining = available_sections(self._state, self.registry)
        if remaining:
            lines.append("Available sections:")
            for descriptor in remaining:
                lines.append(f"  {descriptor.section_id:<18} {descriptor.name}")

        return CommandResult("\n".join(lines))

    def _copy(self, args: List[str]) -> CommandResult:
        status = self.exporter.copy(self.markdown)
        return CommandResult(status.value, ok=status is CopyStatus.COPIED)

    def _save(self, args: List[str]) -> CommandResult:
        output_dir = Path(args[0]) if args else self.output_dir
        path = save_markdown(self.markdown, output_dir, overwrite=self.overwrite)
        _log_info(f"Session saved README to {path}")
        return CommandResult(f"Saved {path}")

    def _order_summary(self) -> str:
        return "Order: " + " > ".join([TITLE_BLOCK.key] + self._state.active_keys)
