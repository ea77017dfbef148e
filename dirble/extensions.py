import logging
from typing import Callable, Iterable, List, Optional, Tuple

from dirble.helpers import lines_from_file

logger = logging.getLogger(__name__)

LineReader = Callable[[str], List[str]]


def resolve_extensions(
    inline: Iterable[str] = (),
    extension_file: Optional[str] = None,
    read_lines: LineReader = lines_from_file,
) -> Tuple[str, ...]:
    """Merge inline and file-sourced extensions into one sorted, unique set.

    The bare path is always probed, so the empty extension is seeded before
    anything else and survives deduplication exactly once. Inline tokens and
    file lines are kept verbatim. A file that cannot be read raises
    ``ExtensionFileUnavailable`` from the reader.
    """
    extensions = [""]
    extensions.extend(inline)

    if extension_file is not None:
        from_file = read_lines(extension_file)
        logger.debug("Read %d extensions from %s", len(from_file), extension_file)
        extensions.extend(from_file)

    extensions.sort()
    resolved = [ext for i, ext in enumerate(extensions) if i == 0 or ext != extensions[i - 1]]
    return tuple(resolved)
