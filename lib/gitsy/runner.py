"""Spawning of the external git and ssh-keygen programs."""

import subprocess
from typing import List

import click


class CommandRunner:
    """Runs git and ssh-keygen and waits for them to exit.

    Every external program call goes through run(), so tests can swap in a
    runner that replays scripted results.
    """

    def __init__(self, git: str = 'git', ssh_keygen: str = 'ssh-keygen', verbose: bool = False):
        self.git = git
        self.ssh_keygen = ssh_keygen
        self.verbose = verbose

    def run(self, args: List[str], interactive: bool = False) -> subprocess.CompletedProcess:
        """Run a command to completion.

        Args:
            args: Full argument list, program first
            interactive: Connect the child to the terminal instead of capturing
                its output (used for passphrase prompts)

        Returns:
            CompletedProcess; a missing program is reported as exit status 127,
            one that cannot be started (e.g. not executable) as 126
        """
        if self.verbose:
            click.secho(f"$ {' '.join(args)}", dim=True, err=True)

        try:
            if interactive:
                result = subprocess.run(args, check=False)
                return subprocess.CompletedProcess(args, result.returncode, '', '')
            return subprocess.run(args, capture_output=True, text=True, check=False)
        except FileNotFoundError as e:
            return subprocess.CompletedProcess(args, 127, '', str(e))
        except OSError as e:
            return subprocess.CompletedProcess(args, 126, '', str(e))
