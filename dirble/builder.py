import logging
import sys
from typing import Callable, Iterable, Optional

from dirble.errors import DirbleError
from dirble.extensions import LineReader, resolve_extensions
from dirble.helpers import console, lines_from_file, report_error
from dirble.models import Configuration
from dirble.parser import TokenParser
from dirble.proxy import proxy_advisory, resolve_credentials, resolve_proxy

logger = logging.getLogger(__name__)

Advisory = Callable[[str], None]


def print_advisory(message: str) -> None:
    console.print(f"[yellow]{message}[/yellow]")


def build_config(
    argv: Iterable[str],
    read_lines: LineReader = lines_from_file,
    on_advisory: Optional[Advisory] = print_advisory,
) -> Configuration:
    """Parse, validate and assemble a Configuration, raising DirbleError on failure."""
    matches = TokenParser().parse(argv)

    extensions = resolve_extensions(
        matches.value_of("extensions"),
        matches.value_of("extension_file"),
        read_lines=read_lines,
    )

    proxy = resolve_proxy(
        proxy=matches.value_of("proxy"),
        burp=matches.value_of("burp"),
        no_proxy=matches.value_of("no_proxy"),
    )
    advisory = proxy_advisory(proxy)
    if advisory and on_advisory is not None:
        on_advisory(advisory)

    username, password = resolve_credentials(
        matches.value_of("username"), matches.value_of("password")
    )

    config = Configuration(
        target_uri=matches.value_of("target"),
        wordlist=matches.value_of("wordlist"),
        extensions=extensions,
        max_threads=matches.value_of("max_threads"),
        proxy_enabled=proxy.enabled,
        proxy_address=proxy.address,
        proxy_source=proxy.source,
        proxy_auth_enabled=False,
        ignore_cert=matches.value_of("ignore_cert"),
        show_htaccess=matches.value_of("show_htaccess"),
        throttle=matches.value_of("throttle"),
        disable_recursion=matches.value_of("disable_recursion"),
        user_agent=matches.value_of("user_agent"),
        follow_redirects=matches.value_of("follow_redirects"),
        max_redirects=matches.value_of("max_redirects"),
        username=username,
        password=password,
    )
    logger.debug("Configuration assembled for %s", config.target_uri)
    return config


def get_args(argv: Optional[Iterable[str]] = None) -> Configuration:
    """Build the Configuration for this process or exit with a diagnostic."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        return build_config(argv)
    except DirbleError as e:
        report_error(e)
        sys.exit(e.exit_code)
