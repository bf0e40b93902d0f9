"""
Secret file support for the BlueRange settings.

``BLUERANGE_USER_ACCESS_TOKEN_FILE=/run/secrets/token`` provides the access
token without putting it into the process environment listing. Only the
variables owned by this tool are resolved.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List, Tuple

from .logging import get_logger

logger = get_logger(__name__)

SECRET_FILE_PREFIXES: Tuple[str, ...] = ("BLUERANGE_", "LOG_")
SECRET_FILE_SUFFIX = "_FILE"


def _secret_file_variables(prefixes: Iterable[str]) -> List[Tuple[str, str]]:
    """Return ``(target, path)`` pairs for every ``<prefix>*_FILE`` variable."""
    prefixes = tuple(prefixes)
    return [
        (key[: -len(SECRET_FILE_SUFFIX)], path)
        for key, path in os.environ.items()
        if key.endswith(SECRET_FILE_SUFFIX) and key.startswith(prefixes)
    ]


def load_secret_file_variables(
    prefixes: Iterable[str] = SECRET_FILE_PREFIXES,
) -> List[str]:
    """
    Expose the content of ``NAME_FILE`` as ``NAME`` where ``NAME`` is unset.

    A variable that is set, even to an empty string, wins over its file.
    Unreadable files are logged and skipped.

    Args:
        prefixes: Variable prefixes eligible for resolution

    Returns:
        List[str]: Names of the variables read from files
    """
    resolved: List[str] = []
    for target, path in _secret_file_variables(prefixes):
        if target in os.environ or not path:
            continue
        try:
            os.environ[target] = Path(path).read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(
                "env.secret_file.unreadable",
                variable=target,
                path=path,
                error=str(exc),
            )
            continue
        resolved.append(target)

    if resolved:
        logger.debug("env.secret_file.resolved", variables=resolved)
    return resolved
