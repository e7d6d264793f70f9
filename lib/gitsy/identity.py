"""Git identity and SSH key bootstrap workflow."""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

import click

from gitsy.errors import GitsyError
from gitsy.git_config import GitConfig, Scope
from gitsy.paths import resolve_path, ssh_home
from gitsy.runner import CommandRunner
from gitsy.ssh_keys import (
    generate_key_pair, merge_ssh_config, public_key_path, render_ssh_config,
)
from gitsy.system import SystemIdentity, system_identity


@dataclass(frozen=True)
class ResolvedIdentity:
    """A fully populated identity, produced by IdentityRecord.update()."""

    host: str
    name: str
    email: Optional[str]
    label: str
    ssh_dir: Path
    private_key: Path
    public_key: Path
    config_file: Path
    config_content: str
    regenerate: bool = False

    def describe(self) -> str:
        """Multi-line summary for display."""
        lines = [
            "Git Information:",
            f"Label: {self.label}",
            f"Name: {self.name}",
            f"Host: {self.host}",
            f"Email: {self.email or '(not set)'}",
            f"SSH Dir: {self.ssh_dir}",
            f"Private Key: {self.private_key}",
            f"Public Key: {self.public_key}",
            f"Config File: {self.config_file}",
            f"Config Content:\n{self.config_content}",
        ]
        return '\n'.join(lines)


@dataclass
class IdentityRecord:
    """SSH/Git identity being assembled.

    Unset fields are None. update() fills them from the system identity and
    the file system; execute() then applies the result.

    Example:
        record = IdentityRecord().with_host('github.com').with_name('alice')
        record.with_email('alice@example.com').execute()
    """

    host: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    label: Optional[str] = None
    ssh_dir: Optional[Path] = None
    private_key: Optional[Path] = None
    public_key: Optional[Path] = None
    config_file: Optional[Path] = None
    config_content: Optional[str] = None
    regenerate: bool = False

    def regenerate_key_pair(self) -> 'IdentityRecord':
        self.regenerate = True
        return self

    def with_host(self, host: str) -> 'IdentityRecord':
        self.host = host
        return self

    def with_name(self, name: str) -> 'IdentityRecord':
        self.name = name
        return self

    def with_email(self, email: str) -> 'IdentityRecord':
        self.email = email
        return self

    def with_label(self, label: str) -> 'IdentityRecord':
        self.label = label
        return self

    def with_ssh_dir(self, path: Union[str, Path]) -> 'IdentityRecord':
        self.ssh_dir = Path(path)
        return self

    def with_key(self, path: Union[str, Path]) -> 'IdentityRecord':
        self.private_key = Path(path)
        return self

    def with_config(self, path: Union[str, Path]) -> 'IdentityRecord':
        self.config_file = Path(path)
        return self

    def update(self, identity_provider: Optional[Callable[[], SystemIdentity]] = None,
               home: Optional[Path] = None) -> ResolvedIdentity:
        """Fill every unset field and resolve the key and config paths.

        Fields that are already set are left alone, so calling this twice is
        harmless.

        Args:
            identity_provider: Returns (username, hostname, distro); defaults
                to the current system
            home: SSH home directory (defaults to ~/.ssh)

        Returns:
            Snapshot of the populated record

        Raises:
            PathNotFound: If the SSH directory, private key or config file
                does not exist
        """
        username, hostname, distro = (identity_provider or system_identity)()

        if not self.label:
            self.label = f"{username}@{hostname} on {distro}"
        if not self.name:
            self.name = username.lower()
        if not self.host:
            self.host = hostname.lower()

        ssh_dir = resolve_path(self.ssh_dir, home or ssh_home(), [], 'ssh_dir')
        self.ssh_dir = ssh_dir

        private_key = resolve_path(self.private_key, ssh_dir, [self.host, self.name], 'private_key')
        self.private_key = private_key

        # Derived only; ssh-keygen creates it
        self.public_key = public_key_path(private_key)

        self.config_file = resolve_path(self.config_file, ssh_dir, ['config'], 'config_file')
        self.config_content = render_ssh_config(self.host, self.name, private_key)

        return ResolvedIdentity(
            host=self.host,
            name=self.name,
            email=self.email,
            label=self.label,
            ssh_dir=self.ssh_dir,
            private_key=self.private_key,
            public_key=self.public_key,
            config_file=self.config_file,
            config_content=self.config_content,
            regenerate=self.regenerate,
        )

    def execute(self, runner: Optional[CommandRunner] = None,
                git_config: Optional[GitConfig] = None,
                identity_provider: Optional[Callable[[], SystemIdentity]] = None,
                home: Optional[Path] = None) -> ResolvedIdentity:
        """Resolve the identity, then generate keys, write SSH config and set git config.

        Exits the process with status 1 if the identity cannot be resolved.
        """
        try:
            resolved = self.update(identity_provider, home)
        except GitsyError as e:
            click.secho(f"❌ Error: {e}", fg='red', err=True)
            sys.exit(1)

        apply_identity(resolved, runner, git_config)
        return resolved


def apply_identity(identity: ResolvedIdentity, runner: Optional[CommandRunner] = None,
                   git_config: Optional[GitConfig] = None) -> None:
    """Perform the side effects for a resolved identity."""
    runner = runner or CommandRunner()
    git_config = git_config or GitConfig(runner)

    generated = generate_key_pair(
        identity.private_key, identity.public_key, identity.label,
        identity.regenerate, runner,
    )
    if not generated:
        click.echo(f"✓ SSH keys already exist at {identity.private_key}")

    if not merge_ssh_config(identity.config_file, identity.config_content):
        click.echo(f"✓ {identity.config_file} already has an entry for {identity.host}")

    git_config.set(Scope.LOCAL, 'user.name', identity.name)
    if identity.email:
        git_config.set(Scope.LOCAL, 'user.email', identity.email)
    else:
        click.secho("⚠️  No email given, leaving user.email unchanged", fg='yellow', err=True)
