"""Exceptions raised by gitsy."""

from pathlib import Path


class GitsyError(Exception):
    """Base exception for gitsy errors."""

    pass


class PathNotFound(GitsyError):
    """A resolved candidate path does not exist."""

    def __init__(self, path: Path, context: str):
        self.path = path
        self.context = context
        super().__init__(f"Path not found: {path}, Context: {context}")


class ConfigCommandFailed(GitsyError):
    """A `git config` (or `git init`) invocation exited non-zero."""

    def __init__(self, message: str, scope: str = '', status: int = 1, stderr: str = ''):
        self.scope = scope
        self.status = status
        self.stderr = stderr
        super().__init__(message)


class KeygenFailed(GitsyError):
    """ssh-keygen exited non-zero."""

    def __init__(self, status: int, stderr: str = ''):
        self.status = status
        self.stderr = stderr
        super().__init__(f"SSH Keygen Error |> exit status: {status} |> {stderr}")


class PromptRejected(GitsyError):
    """Input matched none of the prompt options."""

    def __init__(self, default_label: str):
        self.default_label = default_label
        super().__init__(f"Invalid option selected. Defaulting to: {default_label}")


class IoFailure(GitsyError):
    """Reading, writing or removing a local file failed."""

    pass
