"""
Unit tests for the configuration data models.
"""

import logging
import pytest
from pydantic import ValidationError

from labtools.models.config import (
    LabConfig,
    SearchConfig,
    PermutationConfig,
    LoggingConfig,
    validate_config_dict,
)
from labtools.models.permutation import PermutationStrategy


class TestLabConfig:
    """Test cases for LabConfig."""

    def test_defaults(self):
        """Test default configuration values."""
        config = LabConfig()

        assert config.search.case_sensitive is True
        assert config.permutations.include_duplicates is True
        assert config.permutations.strategy is PermutationStrategy.SWAP
        assert config.permutations.max_length == 10
        assert config.logging.level == 'WARNING'

    def test_from_dict(self):
        """Test creating configuration from a dictionary."""
        config = LabConfig.from_dict({
            'search': {'case_sensitive': False},
            'permutations': {'strategy': 'prefix', 'include_duplicates': False},
            'logging': {'level': 'info'},
        })

        assert config.search.case_sensitive is False
        assert config.permutations.strategy is PermutationStrategy.PREFIX
        assert config.permutations.include_duplicates is False
        assert config.logging.level == 'INFO'

    def test_to_dict_round_trip(self):
        """Test that to_dict output is accepted by from_dict."""
        config = LabConfig.from_dict({'permutations': {'strategy': 'heap'}})
        data = config.to_dict()

        assert data['permutations']['strategy'] == 'heap'
        assert LabConfig.from_dict(data) == config

    def test_validate_configuration_warnings(self):
        """Test warnings for risky settings."""
        assert LabConfig().validate_configuration() == []

        config = LabConfig.from_dict({
            'permutations': {'max_length': 12},
            'logging': {'level': 'DEBUG'},
        })
        warnings = config.validate_configuration()

        assert len(warnings) == 2
        assert any('max_length' in w for w in warnings)

    def test_string_representation(self):
        """Test string representation."""
        assert "strategy=swap" in str(LabConfig())


class TestSectionConfigs:
    """Test cases for the individual configuration sections."""

    def test_invalid_strategy(self):
        """Test that unknown strategies are rejected."""
        with pytest.raises(ValidationError, match="Invalid permutation strategy"):
            PermutationConfig(strategy='bubble')

    def test_max_length_bounds(self):
        """Test max_length limits."""
        with pytest.raises(ValidationError):
            PermutationConfig(max_length=0)

        with pytest.raises(ValidationError):
            PermutationConfig(max_length=13)

    def test_invalid_log_level(self):
        """Test that unknown logging levels are rejected."""
        with pytest.raises(ValidationError, match="Invalid logging level"):
            LoggingConfig(level='LOUD')

    def test_log_level_number(self):
        """Test numeric logging level lookup."""
        assert LoggingConfig(level=' error ').get_level_number() == logging.ERROR

    def test_search_config_to_dict(self):
        """Test search section conversion."""
        assert SearchConfig(case_sensitive=False).to_dict() == {'case_sensitive': False}


class TestValidateConfigDict:
    """Test cases for validate_config_dict."""

    def test_valid_data(self):
        """Test that known sections pass through."""
        data = {'search': {'case_sensitive': True}}

        assert validate_config_dict(data) == data

    def test_empty_sections_dropped(self):
        """Test that sections without values are removed."""
        assert validate_config_dict({'search': None}) == {}

    def test_unknown_section(self):
        """Test that unknown sections are rejected."""
        with pytest.raises(ValueError, match="Unknown configuration sections"):
            validate_config_dict({'roots': ['.']})

    def test_non_mapping_section(self):
        """Test that scalar sections are rejected."""
        with pytest.raises(ValueError, match="must be a mapping"):
            validate_config_dict({'search': True})
