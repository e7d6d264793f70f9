"""Parse gitsy.yml identity defaults."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from gitsy.identity import IdentityRecord

KNOWN_FIELDS = {'host', 'name', 'email', 'label', 'ssh_dir', 'key', 'config', 'regenerate'}


@dataclass
class ProjectConfig:
    """Identity defaults from gitsy.yml in the working directory."""
    host: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    label: Optional[str] = None
    ssh_dir: Optional[str] = None
    key: Optional[str] = None
    config: Optional[str] = None
    regenerate: bool = False

    @classmethod
    def load(cls, workspace: Path) -> Optional['ProjectConfig']:
        """Load gitsy.yml from workspace. Returns None if not present."""
        config_file = workspace / 'gitsy.yml'
        if not config_file.exists():
            return None

        with open(config_file, encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError("gitsy.yml must contain a mapping")

        unknown = set(data.keys()) - KNOWN_FIELDS
        if unknown:
            raise ValueError(f"Unknown gitsy.yml field(s): {', '.join(sorted(unknown))}")

        def text(field: str) -> Optional[str]:
            value = data.get(field)
            return None if value is None else str(value)

        def path(field: str) -> Optional[str]:
            value = text(field)
            return None if value is None else str(Path(value).expanduser())

        return cls(
            host=text('host'),
            name=text('name'),
            email=text('email'),
            label=text('label'),
            ssh_dir=path('ssh_dir'),
            key=path('key'),
            config=path('config'),
            regenerate=bool(data.get('regenerate', False)),
        )

    def to_record(self) -> IdentityRecord:
        """Build an IdentityRecord from the configured fields."""
        record = IdentityRecord()
        if self.host:
            record.with_host(self.host)
        if self.name:
            record.with_name(self.name)
        if self.email:
            record.with_email(self.email)
        if self.label:
            record.with_label(self.label)
        if self.ssh_dir:
            record.with_ssh_dir(self.ssh_dir)
        if self.key:
            record.with_key(self.key)
        if self.config:
            record.with_config(self.config)
        if self.regenerate:
            record.regenerate_key_pair()
        return record
