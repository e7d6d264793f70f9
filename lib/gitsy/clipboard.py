"""Copy text to the system clipboard via the platform's clipboard tool."""

import shutil
import subprocess
from typing import List, Optional

# Tried in order; the first one on PATH wins
CLIPBOARD_COMMANDS = [
    ['pbcopy'],
    ['wl-copy'],
    ['xclip', '-selection', 'clipboard'],
    ['xsel', '--clipboard', '--input'],
    ['clip.exe'],
    ['clip'],
]


def _detect_command() -> Optional[List[str]]:
    for cmd in CLIPBOARD_COMMANDS:
        if shutil.which(cmd[0]):
            return cmd
    return None


def copy_to_clipboard(text: str) -> None:
    """Make text the current clipboard content.

    Raises:
        RuntimeError: If no clipboard tool is available or it fails
    """
    cmd = _detect_command()
    if cmd is None:
        raise RuntimeError("No clipboard tool found (pbcopy, wl-copy, xclip, xsel or clip).")

    try:
        subprocess.run(cmd, input=text, text=True, capture_output=True, check=True)
    except subprocess.CalledProcessError as e:
        raise RuntimeError(f"{cmd[0]} failed: {e.stderr.strip()}") from e
