"""Current user, device and OS distribution."""

import getpass
import platform
from typing import NamedTuple


class SystemIdentity(NamedTuple):
    username: str
    hostname: str
    distro: str


def distro_name() -> str:
    """Human-readable OS name, e.g. 'Ubuntu 24.04 LTS' or 'macOS 14.5'."""
    try:
        release = platform.freedesktop_os_release()
        return release.get('PRETTY_NAME') or release.get('NAME', 'Linux')
    except OSError:
        pass

    if platform.system() == 'Darwin':
        return f"macOS {platform.mac_ver()[0]}".strip()
    return f"{platform.system()} {platform.release()}".strip() or 'unknown'


def system_identity() -> SystemIdentity:
    return SystemIdentity(getpass.getuser(), platform.node(), distro_name())
