"""SSH key pair generation and SSH client config merging."""

from pathlib import Path
from typing import Optional

import click

from gitsy.clipboard import copy_to_clipboard
from gitsy.errors import IoFailure, KeygenFailed
from gitsy.runner import CommandRunner


def generate_key_pair(private_key: Path, public_key: Path, label: str,
                      regenerate: bool = False,
                      runner: Optional[CommandRunner] = None) -> bool:
    """Generate an ed25519 SSH key pair.

    Existing keys are kept unless regenerate is set. A half-present pair
    (only one of the two files) is always replaced. ssh-keygen runs attached
    to the terminal so the user can enter a passphrase.

    Args:
        private_key: Path of the private key file
        public_key: Path of the public key file
        label: Key comment
        regenerate: Replace keys even when both files exist
        runner: Command runner (defaults to a real one)

    Returns:
        True if a new key pair was generated, False if skipped

    Raises:
        KeygenFailed: If ssh-keygen exits non-zero
        IoFailure: If old keys cannot be removed or the directory created
    """
    runner = runner or CommandRunner()

    if private_key.exists() and public_key.exists() and not regenerate:
        return False

    try:
        for key_file in (private_key, public_key):
            if key_file.exists():
                key_file.unlink()
        private_key.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise IoFailure(f"Failed to prepare {private_key}: {e}") from e

    result = runner.run([
        runner.ssh_keygen,
        '-t', 'ed25519',
        '-a', '100',  # KDF rounds
        '-f', str(private_key),
        '-C', label,
    ], interactive=True)

    if result.returncode != 0:
        raise KeygenFailed(result.returncode, result.stderr or '')

    try:
        pubkey = public_key.read_text().strip()
    except OSError as e:
        raise IoFailure(f"Failed to read {public_key}: {e}") from e

    try:
        copy_to_clipboard(pubkey)
    except RuntimeError as e:
        click.secho(f"⚠️  Could not copy public key to clipboard: {e}", fg='yellow', err=True)
        click.secho("✓ SSH keys generated successfully.", fg='green')
        click.echo(pubkey)
        return True

    click.secho(
        "✓ SSH keys generated successfully and the public key has been copied to the clipboard.",
        fg='green',
    )
    return True


def public_key_path(private_key: Path) -> Path:
    """Public key written by `ssh-keygen -f <private_key>`: the full name plus .pub."""
    return Path(f"{private_key}.pub")


def render_ssh_config(host: str, name: str, private_key: Path) -> str:
    """Build the SSH client config block for one identity."""
    return (
        f"Host {host}\n"
        f"\tUser {name}\n"
        f"\tHostName {host}\n"
        f"\tIdentityFile {private_key}\n"
    )


def merge_ssh_config(config_file: Path, content: str) -> bool:
    """Add content to the SSH config file unless it is already there.

    Duplicates are detected by literal substring match only, so a block
    that differs by whitespace is appended again.

    Returns:
        True if the file was written, False if it already held the content
    """
    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)

        if not config_file.exists():
            config_file.write_text(content)
            click.echo(f"✓ Created {config_file}")
            return True

        current = config_file.read_text()
        if content in current:
            return False

        config_file.write_text(f"{current}\n{content}")
        click.echo(f"✓ Updated {config_file}")
        return True
    except OSError as e:
        raise IoFailure(f"Failed to update {config_file}: {e}") from e
