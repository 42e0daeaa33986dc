import yaml
from pathlib import Path
from typing import Optional

from .defaults import (
    CONFIG_FILENAME, DEFAULT_BATCH_SIZE, DEFAULT_DISCOVERY, DEFAULT_SEED_DEFAULTS,
    DISCOVERY_STRATEGIES,
)


class Config:
    def __init__(self, project_root: Path, discovery: Optional[str] = None):
        self.project_root = Path(project_root)
        self.config_file = self.project_root / CONFIG_FILENAME
        self._discovery_override = discovery
        self._loaded = None

    def exists(self) -> bool:
        return self.config_file.exists()

    def load(self) -> dict:
        if self._loaded is None:
            self._loaded = self._read()
        return self._loaded

    def _read(self) -> dict:
        defaults = {
            'discovery': DEFAULT_DISCOVERY,
            'batchSize': DEFAULT_BATCH_SIZE,
            'seedDefaults': DEFAULT_SEED_DEFAULTS,
        }
        if not self.exists():
            return defaults

        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f) or {}
        except (OSError, UnicodeDecodeError, yaml.YAMLError):
            return defaults

        if not isinstance(config, dict):
            return defaults

        discovery = config.get('discovery', DEFAULT_DISCOVERY)
        if discovery not in DISCOVERY_STRATEGIES:
            discovery = DEFAULT_DISCOVERY

        batch_size = config.get('batchSize', DEFAULT_BATCH_SIZE)
        if not isinstance(batch_size, int) or isinstance(batch_size, bool) or batch_size < 1:
            batch_size = DEFAULT_BATCH_SIZE

        return {
            'discovery': discovery,
            'batchSize': batch_size,
            'seedDefaults': bool(config.get('seedDefaults', DEFAULT_SEED_DEFAULTS)),
        }

    @property
    def discovery(self) -> str:
        return self._discovery_override or self.load()['discovery']

    @property
    def batch_size(self) -> int:
        return self.load()['batchSize']

    @property
    def seed_defaults(self) -> bool:
        return self.load()['seedDefaults']
