import subprocess
import pytest
from unittest.mock import patch, MagicMock
from gitsy.clipboard import copy_to_clipboard


def test_copy_uses_first_available_tool():
    available = {'xclip'}
    with patch('shutil.which', side_effect=lambda name: name if name in available else None):
        with patch('subprocess.run', return_value=MagicMock(returncode=0)) as mock_run:
            copy_to_clipboard('ssh-ed25519 AAAA')

    args, kwargs = mock_run.call_args
    assert args[0] == ['xclip', '-selection', 'clipboard']
    assert kwargs['input'] == 'ssh-ed25519 AAAA'


def test_copy_without_tool_raises():
    with patch('shutil.which', return_value=None):
        with pytest.raises(RuntimeError, match='No clipboard tool'):
            copy_to_clipboard('text')


def test_copy_tool_failure_raises():
    error = subprocess.CalledProcessError(1, ['wl-copy'], stderr='no display\n')
    with patch('shutil.which', side_effect=lambda name: name if name == 'wl-copy' else None):
        with patch('subprocess.run', side_effect=error):
            with pytest.raises(RuntimeError, match='no display'):
                copy_to_clipboard('text')
