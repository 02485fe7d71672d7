"""This module loads the library defaults from a YAML settings file.

The packaged defaults live in `helperkit/data/settings.yaml`. A different
file can be loaded with `Settings.load` and passed explicitly through the
`settings` argument of `helperkit.strings.split_string`,
`helperkit.numeric.zero_fill` and `helperkit.numeric.convert_string`.
When that argument is None, the packaged defaults from `get_settings` apply.
"""

__docformat__ = 'google'

__all__ = [
    # Classes
    'Settings',
    # Functions
    'default_settings_path',
    'get_settings'
]

import logging
from dataclasses import dataclass, asdict, fields
from functools import cache
from importlib import resources
from pathlib import Path
import yaml
from helperkit.exceptions import SettingsError

logger = logging.getLogger(__name__)

def default_settings_path():
    """ Packaged defaults """
    return resources.files('helperkit.data').joinpath('settings.yaml')

@dataclass(frozen=True)
class Settings:
    """
    Defaults consulted when an optional argument is left as None.

    Args:
        include_blanks: Keep empty segments in `helperkit.strings.split_string`
        fill_char: Padding character for `helperkit.numeric.zero_fill`
        strict_conversion: Raise instead of returning zero in `helperkit.numeric.convert_string`
    """
    include_blanks: bool = True
    fill_char: str = '0'
    strict_conversion: bool = False

    def __post_init__(self):
        for name in ('include_blanks', 'strict_conversion'):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise SettingsError(f"{name} must be true or false, got {value!r}")
        if not isinstance(self.fill_char, str) or len(self.fill_char) != 1:
            raise SettingsError(f"fill_char must be a single character, got {self.fill_char!r}")

    @classmethod
    def load(cls, file_path = None):
        """
        Read settings from a YAML mapping.

        Keys missing from the file keep their dataclass defaults.

        Args:
            file_path: Path to a YAML file. Defaults to the packaged settings.

        Raises:
            SettingsError: If the document is not a mapping or has unknown keys
        """
        file_path = Path(file_path) if file_path else default_settings_path()

        with file_path.open('r') as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise SettingsError("Settings file must contain a mapping", path=str(file_path))

        known = {field.name for field in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise SettingsError(f"Unknown settings: {', '.join(unknown)}", path=str(file_path))

        logger.debug("Loaded settings from %s", file_path)
        return cls(**data)

    def save(self, file_path):
        output_dir = Path(file_path).parent
        output_dir.mkdir(parents=True, exist_ok=True)

        with open(file_path, 'w') as f:
            yaml.dump(asdict(self), f, sort_keys=False)

@cache
def get_settings() -> Settings:
    """
    Packaged default settings, read once.
    """
    return Settings.load()
