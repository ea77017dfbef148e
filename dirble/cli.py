import typer
from pydantic import ValidationError
from rich.markup import escape
from rich.table import Table

from dirble.builder import build_config
from dirble.errors import DirbleError
from dirble.helpers import console, err_console, report_error
from dirble.log_setup import setup_logging
from dirble.models import Configuration
from dirble.settings import load_settings

app = typer.Typer(help="dirble - finds pages and folders on websites", add_completion=False)


def print_banner():
    console.print("""
[bold blue]
    ___  _      __   __
   / _ \\(_)____/ /  / /__
  / // / / __/ _ \\/ / -_)
 /____/_/_/ /_.__/_/\\__/
[/bold blue]
    """)


def _flag(value: bool) -> str:
    return "[green]yes[/green]" if value else "[dim]no[/dim]"


def display_config(config: Configuration):
    """Display the resolved configuration in a formatted table."""
    table = Table(
        title="Scan Configuration",
        show_header=True,
        header_style="bold magenta",
        show_lines=False,
        expand=True,
    )
    table.add_column("Setting", style="cyan", width=20)
    table.add_column("Value", no_wrap=False)

    if not config.proxy_enabled:
        proxy = "[dim]system default[/dim]"
    elif config.proxy_address:
        proxy = escape(config.proxy_address)
    else:
        proxy = "[yellow]disabled[/yellow]"

    extensions = ", ".join(repr(ext) for ext in config.extensions)
    redirects = f"{_flag(True)} (max {config.max_redirects})" if config.follow_redirects else _flag(False)

    table.add_row("Target", escape(config.target_uri))
    table.add_row("Wordlist", escape(config.wordlist))
    table.add_row("Extensions", escape(extensions))
    table.add_row("Max threads", str(config.max_threads))
    table.add_row("Proxy", proxy)
    table.add_row("Ignore certificate", _flag(config.ignore_cert))
    table.add_row("Show htaccess", _flag(config.show_htaccess))
    table.add_row("Throttle", f"{config.throttle} ms")
    table.add_row("Recursion", _flag(not config.disable_recursion))
    table.add_row("User agent", escape(config.user_agent) if config.user_agent else "[dim]N/A[/dim]")
    table.add_row("Follow redirects", redirects)
    table.add_row("Credentials", escape(config.username) if config.username else "[dim]N/A[/dim]")

    console.print(table)


# Flags are declared once in dirble.schema and parsed by the click command
# that dirble.parser generates from it, so the outer command forwards argv.
@app.command(
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        "help_option_names": [],
    }
)
def main(ctx: typer.Context):
    """
    Build the scan configuration from the command line and show it.
    """
    try:
        settings = load_settings()
    except ValidationError as e:
        reasons = "; ".join(error["msg"] for error in e.errors())
        err_console.print(f"[bold red]error:[/bold red] invalid environment settings: {escape(reasons)}")
        raise typer.Exit(code=1)
    setup_logging(settings.log_level)

    try:
        config = build_config(ctx.args)
    except DirbleError as e:
        report_error(e)
        raise typer.Exit(code=e.exit_code)

    if settings.show_banner:
        print_banner()
    display_config(config)


if __name__ == "__main__":
    app()
