from typing import List, Tuple

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dirble.errors import DirbleError, ExtensionFileUnavailable, HelpRequested, VersionRequested
from dirble.schema import FLAGS, PROG, VERSION, FlagSpec

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def lines_from_file(path: str) -> List[str]:
    """Load a newline separated file, trimming lines and dropping blank ones."""
    try:
        with open(path, "r") as f:
            return [line.strip() for line in f if line.strip()]
    except (OSError, UnicodeDecodeError) as e:
        raise ExtensionFileUnavailable(path, getattr(e, "strerror", None) or str(e)) from e


def usage_line(flags: Tuple[FlagSpec, ...] = FLAGS) -> str:
    positionals = " ".join(f"<{spec.value_name or spec.name}>" for spec in flags if spec.positional)
    return f"USAGE: {PROG} [FLAGS] [OPTIONS] {positionals}"


def format_default(spec: FlagSpec) -> str:
    if not spec.takes_value or spec.positional:
        return ""
    if spec.default in (None, ()):
        return "[dim]-[/dim]"
    return escape(str(spec.default))


def help_table(flags: Tuple[FlagSpec, ...] = FLAGS) -> Table:
    """Build the rich table listing every flag, its default and relations."""
    table = Table(
        title=f"{PROG} {VERSION} - finds pages and folders on websites",
        show_header=True,
        header_style="bold magenta",
        expand=True,
    )
    table.add_column("Flag", style="cyan", no_wrap=True)
    table.add_column("Default", style="green")
    table.add_column("Description", no_wrap=False)

    for spec in flags:
        notes = []
        if spec.required:
            notes.append("required")
        if spec.conflicts_with:
            notes.append("conflicts with " + ", ".join(_displays(spec.conflicts_with, flags)))
        if spec.requires:
            notes.append("requires " + ", ".join(_displays(spec.requires, flags)))
        description = escape(spec.help)
        if notes:
            description += f" [yellow]({escape('; '.join(notes))})[/yellow]"
        table.add_row(escape(spec.spellings), format_default(spec), description)
    return table


def print_help(flags: Tuple[FlagSpec, ...] = FLAGS, target: Console = console) -> None:
    target.print(escape(usage_line(flags)))
    target.print(help_table(flags))


def _displays(names, flags: Tuple[FlagSpec, ...]) -> List[str]:
    by_name = {spec.name: spec for spec in flags}
    return [by_name[name].display for name in sorted(names)]


def report_error(error: DirbleError) -> None:
    """Print the diagnostic for a parsing failure, usage text for structural ones."""
    if isinstance(error, HelpRequested):
        print_help()
        return
    if isinstance(error, VersionRequested):
        console.print(escape(error.message))
        return

    err_console.print(f"[bold red]error:[/bold red] {escape(error.message)}")
    if getattr(error, "show_help", False):
        err_console.print()
        print_help(target=err_console)
    elif error.show_usage:
        err_console.print()
        err_console.print(escape(usage_line()))
        err_console.print()
        err_console.print("For more information try --help")
