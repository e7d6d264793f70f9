import subprocess

import pytest


class FakeRunner:
    """Stands in for CommandRunner: records calls, replays scripted results.

    Unscripted calls succeed with empty output.
    """

    def __init__(self, results=None, on_run=None):
        self.git = 'git'
        self.ssh_keygen = 'ssh-keygen'
        self.verbose = False
        self.results = list(results or [])
        self.on_run = on_run
        self.calls = []

    def run(self, args, interactive=False):
        self.calls.append((list(args), interactive))
        if self.on_run:
            self.on_run(args)
        if self.results:
            returncode, stdout, stderr = self.results.pop(0)
        else:
            returncode, stdout, stderr = 0, '', ''
        return subprocess.CompletedProcess(args, returncode, stdout, stderr)


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def make_runner():
    return FakeRunner
