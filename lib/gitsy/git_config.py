"""Read and write git configuration at the four git scopes."""

from enum import Enum
from pathlib import Path
from typing import Callable, Optional

import click

from gitsy.errors import ConfigCommandFailed, GitsyError
from gitsy.paths import to_absolute
from gitsy.prompts import confirm as ask_confirm
from gitsy.runner import CommandRunner

NOT_IN_REPOSITORY = 'can only be used inside a git repository'


class Scope(Enum):
    """Git configuration layer."""

    GLOBAL = 'global'
    LOCAL = 'local'
    SYSTEM = 'system'
    WORKTREE = 'worktree'

    @property
    def flag(self) -> str:
        return f'--{self.value}'


class GitConfig:
    """Git config access with confirmation before overwriting values."""

    def __init__(self, runner: Optional[CommandRunner] = None,
                 confirm: Callable[[str], bool] = ask_confirm):
        self.runner = runner or CommandRunner()
        self.confirm = confirm

    def _git(self, *args: str):
        return self.runner.run([self.runner.git, *args])

    def list(self, scope: Scope) -> str:
        """Return a report of every entry set at scope.

        Raises:
            ConfigCommandFailed: If git exits non-zero
        """
        result = self._git('config', scope.flag, '--list')
        if result.returncode != 0:
            raise ConfigCommandFailed(
                f"Git Config Error |> exit status: {result.returncode} |> {result.stderr}",
                scope=scope.value, status=result.returncode, stderr=result.stderr,
            )
        return f"===| Git Config: {scope.value.upper()} |===\n{result.stdout}"

    def get(self, scope: Scope, key: str) -> Optional[str]:
        """Return the value of key at scope, or None.

        Any failure reads as "not set". Outside a repository the user is
        offered `git init .`, after which the lookup is attempted exactly
        once more.
        """
        result = self._git('config', scope.flag, '--get', key)
        if result.returncode == 0:
            return result.stdout.strip()

        if NOT_IN_REPOSITORY not in result.stderr:
            self._debug(f"git config {scope.flag} --get {key}: {result.stderr.strip() or 'not set'}")
            return None

        if not self.confirm("Git repository not initialized. Do you want to initialize it?"):
            return None

        try:
            self.init_repository()
        except ConfigCommandFailed as e:
            click.secho(f"❌ {e}", fg='red', err=True)
            return None

        result = self._git('config', scope.flag, '--get', key)
        if result.returncode == 0:
            return result.stdout.strip()
        self._debug(f"git config {scope.flag} --get {key}: {result.stderr.strip() or 'not set'}")
        return None

    def set(self, scope: Scope, key: str, value: str) -> None:
        """Set key at scope, asking before replacing a different value.

        Does nothing when the current value already matches, or when the
        user declines the overwrite.

        Raises:
            ConfigCommandFailed: If the write fails
        """
        current = self.get(scope, key)

        if current is not None:
            if current == value:
                return
            if not self.confirm(
                f"Update the {scope.value} config key '{key}' from '{current}' to '{value}'?"
            ):
                return

        result = self._git('config', scope.flag, '--replace-all', key, value)
        if result.returncode != 0:
            raise ConfigCommandFailed(
                f"Failed to update Git config for key: {key} "
                f"|> exit status: {result.returncode} |> {result.stderr.strip()}",
                scope=scope.value, status=result.returncode, stderr=result.stderr,
            )
        click.echo(f"Updated the {scope.value} git config: {key} = {value}")

    def init_repository(self) -> None:
        """Initialize a git repository in the current directory."""
        result = self.runner.run([self.runner.git, 'init', '.'], interactive=True)
        if result.returncode != 0:
            raise ConfigCommandFailed(
                f"Failed to initialize Git in the current directory. "
                f"|> exit status: {result.returncode} |> {result.stderr.strip()}",
                status=result.returncode, stderr=result.stderr,
            )

    def top_level_dir(self) -> Path:
        """Return the root of the enclosing git repository."""
        result = self._git('rev-parse', '--show-toplevel')
        if result.returncode != 0:
            raise GitsyError(
                f"Failed to get Git top-level directory "
                f"|> exit status: {result.returncode} |> {result.stderr.strip()}"
            )
        return to_absolute(result.stdout.strip())

    def _debug(self, message: str) -> None:
        if self.runner.verbose:
            click.secho(message, dim=True, err=True)
