"""Layered path resolution for SSH keys and config files."""

import os
from pathlib import Path
from typing import Iterable, Optional, Union

from gitsy.errors import GitsyError, PathNotFound

PathLike = Union[str, Path]


def resolve_path(explicit: Optional[PathLike], fallback_parent: PathLike,
                 fallback_components: Iterable[str], context: str) -> Path:
    """Turn an optional path plus fallbacks into one existing absolute path.

    A relative explicit path is joined onto the fallback parent, and a
    relative fallback parent is taken from the current directory. Without an
    explicit path, the fallback components are joined onto the fallback
    parent in order.

    Args:
        explicit: Path supplied by the user, or None
        fallback_parent: Base directory for relative and fallback paths
        fallback_components: Path segments used when no explicit path is given
        context: Label naming what is being resolved (for error messages)

    Returns:
        The candidate path, always absolute

    Raises:
        PathNotFound: If the candidate does not exist

    Example:
        >>> resolve_path(None, Path('/home/alice/.ssh'), ['github.com', 'alice'], 'private_key')
        PosixPath('/home/alice/.ssh/github.com/alice')
    """
    parent = Path(fallback_parent).absolute()

    if explicit is not None:
        candidate = Path(explicit)
        if not candidate.is_absolute():
            candidate = parent / candidate
    else:
        candidate = parent.joinpath(*fallback_components)

    if not candidate.exists():
        raise PathNotFound(candidate, context)
    return candidate


def ssh_home() -> Path:
    """Return the user's SSH directory (~/.ssh).

    Uses the OS home lookup first, then HOME, then USERPROFILE.
    """
    try:
        home = Path.home()
    except RuntimeError:
        home = None

    if home is None or not str(home):
        env_home = os.environ.get('HOME') or os.environ.get('USERPROFILE')
        if not env_home:
            raise GitsyError("Failed to determine SSH home directory")
        home = Path(env_home)

    return home / '.ssh'


def to_absolute(path: PathLike) -> Path:
    """Normalize an absolute path, rejecting relative ones."""
    path = Path(path)
    if not path.is_absolute():
        raise ValueError("Provided path is not absolute")
    return Path(*path.parts)
