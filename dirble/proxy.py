import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

BURP_DEFAULT_PROXY = "http://localhost:8080"


class ProxySource(str, Enum):
    UNSET = "unset"
    EXPLICIT = "explicit"
    BURP = "burp"
    DISABLED = "disabled"


@dataclass(frozen=True)
class ProxySettings:
    enabled: bool
    address: str
    source: ProxySource


def resolve_proxy(
    proxy: Optional[str] = None,
    burp: bool = False,
    no_proxy: bool = False,
) -> ProxySettings:
    """Pick the proxy decision: explicit address, then --burp, then --no-proxy.

    The parser rejects any two of these together, but the order still holds
    when the resolver is called directly. With none of them the decision is
    left to the system default downstream.
    """
    if proxy is not None:
        settings = ProxySettings(True, proxy, ProxySource.EXPLICIT)
    elif burp:
        settings = ProxySettings(True, BURP_DEFAULT_PROXY, ProxySource.BURP)
    elif no_proxy:
        settings = ProxySettings(True, "", ProxySource.DISABLED)
    else:
        settings = ProxySettings(False, "", ProxySource.UNSET)
    logger.debug("Proxy resolved from %s: %r", settings.source.value, settings.address)
    return settings


def proxy_advisory(settings: ProxySettings) -> Optional[str]:
    """Return a hint when --proxy spells out the burp default, else None."""
    if settings.source is ProxySource.EXPLICIT and settings.address == BURP_DEFAULT_PROXY:
        return "You could use the --burp flag instead of the --proxy flag!"
    return None


def resolve_credentials(
    username: Optional[str] = None,
    password: Optional[str] = None,
) -> Tuple[Optional[str], Optional[str]]:
    """Forward the username/password pair unchanged; pairing is enforced by the
    parser's requires relation and by the Configuration model."""
    return username, password
