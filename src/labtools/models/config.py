"""
Configuration data models for labtools.

This module defines the configuration structure loaded from YAML files:
default search options, permutation options and logging settings.
"""

from typing import Dict, List, Any
import logging
from pydantic import BaseModel, Field, field_validator

from .permutation import PermutationStrategy


LOG_LEVELS = ['CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG']


class SearchConfig(BaseModel):
    """
    Default options for file name searches.

    Attributes:
        case_sensitive: Whether names are compared exactly
    """

    case_sensitive: bool = Field(True, description="Whether name matching is case-sensitive")

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


class PermutationConfig(BaseModel):
    """
    Default options for permutation generation.

    Attributes:
        include_duplicates: Keep repeated permutations of inputs with repeated characters
        strategy: Default generation algorithm
        max_length: Longest input the command line accepts
    """

    include_duplicates: bool = Field(True, description="Keep repeated permutations")
    strategy: PermutationStrategy = Field(PermutationStrategy.SWAP, description="Default generation algorithm")
    max_length: int = Field(10, gt=0, le=12, description="Longest input accepted by the command line")

    @field_validator('strategy', mode='before')
    @classmethod
    def validate_strategy(cls, v) -> PermutationStrategy:
        """Ensure strategy is a PermutationStrategy enum."""
        if isinstance(v, str):
            try:
                return PermutationStrategy(v.lower())
            except ValueError:
                raise ValueError(f"Invalid permutation strategy: {v}")
        return v

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        data = self.model_dump()
        data['strategy'] = self.strategy.value
        return data


class LoggingConfig(BaseModel):
    """
    Logging settings applied by the command line.

    Attributes:
        level: Standard logging level name
        format: Format string passed to the logging handler
    """

    level: str = Field('WARNING', description="Logging level name")
    format: str = Field('%(asctime)s %(levelname)s %(name)s: %(message)s', description="Log record format")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and validate the logging level name."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid logging level: {v}. Must be one of {LOG_LEVELS}")
        return level

    def get_level_number(self) -> int:
        """Get the numeric logging level."""
        return getattr(logging, self.level)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


class LabConfig(BaseModel):
    """
    Main configuration class for labtools.

    Attributes:
        search: Default file search options
        permutations: Default permutation options
        logging: Logging settings
    """

    search: SearchConfig = Field(default_factory=SearchConfig, description="File search defaults")
    permutations: PermutationConfig = Field(default_factory=PermutationConfig, description="Permutation defaults")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging settings")

    def validate_configuration(self) -> List[str]:
        """
        Validate the configuration and return any warnings.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        if self.permutations.max_length > 10:
            warnings.append(
                f"max_length {self.permutations.max_length} allows more than 10! permutations "
                "and may exhaust memory"
            )

        if self.logging.level == 'DEBUG':
            warnings.append("DEBUG logging is enabled and may be verbose")

        return warnings

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary representation."""
        return {
            'search': self.search.to_dict(),
            'permutations': self.permutations.to_dict(),
            'logging': self.logging.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LabConfig':
        """Create LabConfig from dictionary."""
        return cls.model_validate(data)

    def __str__(self) -> str:
        """String representation of configuration."""
        parts = [f"case_sensitive={self.search.case_sensitive}"]
        parts.append(f"strategy={self.permutations.strategy.value}")
        parts.append(f"include_duplicates={self.permutations.include_duplicates}")
        parts.append(f"log_level={self.logging.level}")
        return f"LabConfig({', '.join(parts)})"


def validate_config_dict(config_data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate a raw configuration dictionary.

    Args:
        config_data: Configuration data loaded from YAML

    Returns:
        The validated configuration data

    Raises:
        ValueError: If an unknown section is present or a section is malformed
    """
    known_sections = set(LabConfig.model_fields)
    unknown = [key for key in config_data if key not in known_sections]
    if unknown:
        raise ValueError(f"Unknown configuration sections: {', '.join(sorted(unknown))}")

    for section, value in config_data.items():
        if value is not None and not isinstance(value, dict):
            raise ValueError(f"Section '{section}' must be a mapping, got {type(value).__name__}")

    return {key: value for key, value in config_data.items() if value is not None}
