"""
YAML configuration loading for labtools.

A configuration file is optional. Without an explicit path, the first file
named in ``ConfigParser.DEFAULT_CONFIG_NAMES`` found in the working directory,
the home directory or ``~/.config/labtools`` is used. Sections and keys the
file leaves out keep their ``LabConfig`` defaults.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, Optional, List, Union
import logging
from dataclasses import dataclass, field

from ..models.config import LabConfig, validate_config_dict


logger = logging.getLogger(__name__)

SECTION_COMMENTS = {
    'search': "File search defaults",
    'permutations': "Permutation defaults (strategy: swap, heap or prefix)",
    'logging': "Logging settings",
}


@dataclass
class ConfigParseResult:
    """
    Outcome of loading a configuration.

    Attributes:
        config: The validated configuration
        config_path: File the values came from, None when defaults were used
        warnings: Non-fatal remarks about the loaded values
    """
    config: LabConfig
    config_path: Optional[Path] = None
    warnings: List[str] = field(default_factory=list)

    @property
    def is_default(self) -> bool:
        return self.config_path is None


class ConfigurationError(Exception):
    """Raised when a configuration file cannot be read, parsed or validated."""
    pass


class ConfigParser:
    """
    Finds, reads and validates labtools configuration files.

    ``load_config`` is the entry point used by the command line; ``render``
    and ``write`` produce the YAML written by ``labtools config init``.
    """

    DEFAULT_CONFIG_NAMES = [
        '.labtools.yaml',
        '.labtools.yml',
        'labtools.yaml',
        'labtools.yml',
    ]

    def __init__(self, strict_mode: bool = False):
        """
        Args:
            strict_mode: Raise ConfigurationError instead of returning warnings
        """
        self.strict_mode = strict_mode
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def search_dirs(self) -> List[Path]:
        """Directories searched for a configuration file, in priority order."""
        return [Path.cwd(), Path.home(), Path.home() / '.config' / 'labtools']

    def discover(self) -> Optional[Path]:
        """Return the first existing default configuration file, if any."""
        for directory in self.search_dirs():
            for name in self.DEFAULT_CONFIG_NAMES:
                candidate = directory / name
                if candidate.is_file():
                    return candidate
        return None

    def read(self, path: Path) -> Dict[str, Any]:
        """
        Parse a YAML file into a mapping.

        An empty file reads as an empty mapping.

        Raises:
            ConfigurationError: If the file is unreadable, not YAML, or not a mapping
        """
        try:
            text = path.read_text(encoding='utf-8')
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e

        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"{path} must contain a YAML mapping, got {type(data).__name__}")
        return data

    def build(self, data: Dict[str, Any]) -> LabConfig:
        """
        Turn raw section data into a LabConfig.

        Raises:
            ConfigurationError: On unknown sections or invalid values
        """
        try:
            return LabConfig.from_dict(validate_config_dict(data))
        except ValueError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e

    def load_config(self, config_path: Optional[Union[str, Path]] = None) -> ConfigParseResult:
        """
        Load the configuration from ``config_path`` or a discovered file.

        Args:
            config_path: Explicit file to load; discovery is used when None

        Returns:
            ConfigParseResult with the configuration and any warnings

        Raises:
            ConfigurationError: If an explicit file is missing, or any file is invalid
        """
        if config_path is not None:
            path = Path(config_path)
            if not path.is_file():
                raise ConfigurationError(f"Configuration file not found: {path}")
        else:
            path = self.discover()

        if path is None:
            self.logger.info("No configuration file found, using defaults")
            config = LabConfig()
        else:
            config = self.build(self.read(path))
            self.logger.info(f"Loaded configuration from {path}")

        warnings = config.validate_configuration()
        if path is None:
            warnings.append("No configuration file found, using default settings")

        if self.strict_mode and warnings:
            raise ConfigurationError(f"Configuration warnings in strict mode: {'; '.join(warnings)}")

        return ConfigParseResult(config=config, config_path=path, warnings=warnings)

    def render(self, config: LabConfig) -> str:
        """Serialize a configuration as commented YAML."""
        lines = ["# labtools configuration", ""]
        for section, values in config.to_dict().items():
            lines.append(f"# {SECTION_COMMENTS[section]}")
            lines.append(yaml.safe_dump({section: values}, default_flow_style=False, sort_keys=False).rstrip())
            lines.append("")
        return "\n".join(lines)

    def write(self, config: LabConfig, output_path: Union[str, Path], overwrite: bool = False) -> Path:
        """
        Write ``config`` as YAML to ``output_path``.

        Returns:
            The path written

        Raises:
            ConfigurationError: If the file exists and overwrite is False, or cannot be written
        """
        output_path = Path(output_path)
        if output_path.exists() and not overwrite:
            raise ConfigurationError(f"Configuration file already exists: {output_path}")

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(self.render(config), encoding='utf-8')
        except OSError as e:
            raise ConfigurationError(f"Cannot write configuration file {output_path}: {e}") from e

        self.logger.info(f"Configuration written to {output_path}")
        return output_path


def load_config(config_path: Optional[Union[str, Path]] = None, strict_mode: bool = False) -> ConfigParseResult:
    """Load configuration with a one-off ConfigParser."""
    return ConfigParser(strict_mode=strict_mode).load_config(config_path)
