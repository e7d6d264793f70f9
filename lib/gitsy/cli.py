#!/usr/bin/env python3
"""gitsy CLI - bootstrap a git identity and SSH key pair."""

import sys
from pathlib import Path
from typing import Optional

import click

from gitsy.errors import GitsyError
from gitsy.git_config import GitConfig, Scope
from gitsy.identity import IdentityRecord
from gitsy.project_config import ProjectConfig
from gitsy.prompts import OptionPrompt
from gitsy.runner import CommandRunner

SCOPE_CHOICE = click.Choice([scope.value for scope in Scope], case_sensitive=False)


def identity_options(func):
    """Options shared by the commands that build an identity record."""
    options = [
        click.option('--host', help='SSH host alias and HostName (default: device name)'),
        click.option('--name', help='Git user.name and SSH User (default: username)'),
        click.option('--email', help='Git user.email'),
        click.option('--label', help='Key comment (default: user@device on distro)'),
        click.option('--ssh-dir', type=click.Path(), help='SSH directory (default: ~/.ssh)'),
        click.option('--key', type=click.Path(),
                     help='Private key path, relative to the SSH directory (default: <host>/<name>)'),
        click.option('--config', 'config_file', type=click.Path(),
                     help='SSH config file, relative to the SSH directory (default: config)'),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build_record(host: Optional[str], name: Optional[str], email: Optional[str],
                  label: Optional[str], ssh_dir: Optional[str], key: Optional[str],
                  config_file: Optional[str]) -> IdentityRecord:
    """Merge gitsy.yml (if any) with command-line options, options winning."""
    try:
        project = ProjectConfig.load(Path.cwd())
    except (ValueError, OSError) as e:
        click.secho(f"❌ Invalid gitsy.yml: {e}", fg='red', err=True)
        sys.exit(1)

    record = project.to_record() if project else IdentityRecord()
    if host:
        record.with_host(host)
    if name:
        record.with_name(name)
    if email:
        record.with_email(email)
    if label:
        record.with_label(label)
    if ssh_dir:
        record.with_ssh_dir(ssh_dir)
    if key:
        record.with_key(key)
    if config_file:
        record.with_config(config_file)
    return record


def _ask_scope() -> Scope:
    prompt = OptionPrompt(
        'Which git config scope?',
        [('g', 'Global'), ('l', 'Local'), ('s', 'System'), ('w', 'Worktree')],
        ('l', 'Local'),
    )
    return Scope(prompt.choose().lower())


@click.group()
@click.version_option()
@click.option('--verbose', '-v', is_flag=True, help='Show spawned commands and git diagnostics')
@click.pass_context
def main(ctx, verbose):
    """Bootstrap a git identity and SSH key pair."""
    ctx.obj = CommandRunner(verbose=verbose)


@main.command()
@identity_options
@click.option('--regenerate', is_flag=True, help='Replace an existing key pair')
@click.pass_obj
def init(runner, host, name, email, label, ssh_dir, key, config_file, regenerate):
    """Generate SSH keys, update SSH config and set git user.name/user.email."""
    record = _build_record(host, name, email, label, ssh_dir, key, config_file)
    if regenerate:
        record.regenerate_key_pair()

    click.echo("🔧 Bootstrapping git identity...")
    try:
        resolved = record.execute(runner=runner, git_config=GitConfig(runner))
    except GitsyError as e:
        click.secho(f"❌ Error: {e}", fg='red', err=True)
        sys.exit(1)

    click.echo(f"\n✅ Identity ready for {resolved.name}@{resolved.host}")


@main.command()
@identity_options
@click.pass_obj
def show(runner, host, name, email, label, ssh_dir, key, config_file):
    """Show the local git config and the resolved identity."""
    record = _build_record(host, name, email, label, ssh_dir, key, config_file)

    try:
        click.echo(GitConfig(runner).list(Scope.LOCAL))
    except GitsyError as e:
        click.secho(str(e), fg='red', err=True)

    try:
        resolved = record.update()
    except GitsyError as e:
        click.secho(f"❌ Error: {e}", fg='red', err=True)
        sys.exit(1)

    click.echo(resolved.describe())


@main.group()
def config():
    """Read and write git config values."""
    pass


@config.command('list')
@click.option('--scope', '-s', type=SCOPE_CHOICE, help='Config scope (asked interactively if omitted)')
@click.pass_obj
def config_list(runner, scope):
    """List every entry at a config scope."""
    try:
        selected = Scope(scope.lower()) if scope else _ask_scope()
        click.echo(GitConfig(runner).list(selected))
    except GitsyError as e:
        click.secho(f"❌ {e}", fg='red', err=True)
        sys.exit(1)


@config.command('get')
@click.argument('key')
@click.option('--scope', '-s', type=SCOPE_CHOICE, default='local', help='Config scope')
@click.pass_obj
def config_get(runner, key, scope):
    """Print the value of KEY."""
    value = GitConfig(runner).get(Scope(scope.lower()), key)
    if value is None:
        click.secho(f"{key} is not set", fg='yellow', err=True)
        sys.exit(1)
    click.echo(value)


@config.command('set')
@click.argument('key')
@click.argument('value')
@click.option('--scope', '-s', type=SCOPE_CHOICE, default='local', help='Config scope')
@click.pass_obj
def config_set(runner, key, value, scope):
    """Set KEY to VALUE, confirming before overwriting a different value."""
    try:
        GitConfig(runner).set(Scope(scope.lower()), key, value)
    except GitsyError as e:
        click.secho(f"❌ {e}", fg='red', err=True)
        sys.exit(1)


@main.command()
@click.pass_obj
def toplevel(runner):
    """Print the root directory of the current git repository."""
    try:
        click.echo(str(GitConfig(runner).top_level_dir()))
    except (GitsyError, ValueError) as e:
        click.secho(f"❌ {e}", fg='red', err=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
