"""dirble - command-line configuration for web content discovery."""
from dirble.builder import build_config, get_args
from dirble.models import Configuration
from dirble.schema import VERSION as __version__

__all__ = ["Configuration", "build_config", "get_args", "__version__"]
