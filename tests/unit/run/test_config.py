"""
Unit tests for Config class.
"""

import configparser
import pytest
import os
from phenonet.run.config import Config


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def test_config_dir():
    """Return the directory containing test configuration files."""
    return os.path.join(os.path.dirname(__file__), 'test_configs')


# ============================================================================
# Test Config Initialization
# ============================================================================

class TestConfigInit:
    """Test Config initialization."""

    def test_init_without_file_uses_defaults(self):
        """Test that Config() without file holds the default settings."""
        config = Config()

        assert config.num_inputs is None
        assert config.num_outputs is None
        assert config.is_acyclic is True
        assert config.activation == 'leaky_relu'
        assert config.activation_count == 1
        assert config.bounded_output is False
        assert config.suppress_hardware_acceleration is False
        assert config.precision == 'double'
        assert config.num_jobs == 1
        assert config.null_fitness == 0.0

    def test_init_with_nonexistent_file_raises_error(self):
        """Test that Config with nonexistent file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="Configuration file .* not found"):
            Config('nonexistent_file.ini')

    def test_init_with_minimal_config(self, test_config_dir):
        """Test that a file with only the network size takes defaults for the rest."""
        config = Config(os.path.join(test_config_dir, 'minimal.ini'))

        assert config.num_inputs == 2
        assert config.num_outputs == 1
        assert config.is_acyclic is True
        assert config.activation == 'leaky_relu'
        assert config.activation_count == 1
        assert config.precision == 'double'
        assert config.num_jobs == 1

    def test_missing_num_inputs_raises_error(self, test_config_dir):
        """Test that num_inputs is required when a file is given."""
        with pytest.raises(configparser.NoOptionError):
            Config(os.path.join(test_config_dir, 'missing_inputs.ini'))


# ============================================================================
# Test Config Sections
# ============================================================================

class TestConfigNetwork:
    """Test Config NETWORK section parsing."""

    def test_network_section(self, test_config_dir):
        config = Config(os.path.join(test_config_dir, 'full.ini'))
        assert config.num_inputs == 3
        assert config.num_outputs == 2
        assert config.is_acyclic is False
        assert config.activation == 'tanh'


class TestConfigDecoder:
    """Test Config DECODER section parsing."""

    def test_decoder_section(self, test_config_dir):
        config = Config(os.path.join(test_config_dir, 'full.ini'))
        assert config.activation_count == 5
        assert config.bounded_output is True
        assert config.suppress_hardware_acceleration is True
        assert config.precision == 'single'

    def test_invalid_precision(self, test_config_dir):
        """Test that an unknown precision is rejected."""
        with pytest.raises(ValueError, match="precision"):
            Config(os.path.join(test_config_dir, 'invalid_precision.ini'))

    def test_invalid_activation_count(self, test_config_dir):
        """Test that activation_count must be positive."""
        with pytest.raises(ValueError, match="activation_count"):
            Config(os.path.join(test_config_dir, 'invalid_activation_count.ini'))

    @pytest.mark.parametrize("key", ['activation_count', 'bounded_output',
                                     'suppress_hardware_acceleration', 'precision'])
    def test_none_decoder_setting_rejected(self, tmp_path, key):
        """Test that decoder settings cannot be set to None."""
        config_file = tmp_path / "none_decoder.ini"
        config_file.write_text(f"[NETWORK]\nnum_inputs = 1\nnum_outputs = 1\n\n[DECODER]\n{key} = none\n")
        with pytest.raises(ValueError, match=key):
            Config(str(config_file))


class TestConfigEvaluation:
    """Test Config EVALUATION section parsing."""

    def test_evaluation_section(self, test_config_dir):
        config = Config(os.path.join(test_config_dir, 'full.ini'))
        assert config.num_jobs == -1
        assert config.null_fitness == -1.5

    def test_none_value(self, tmp_path):
        """Test that 'None' in the file parses as None."""
        config_file = tmp_path / "none.ini"
        config_file.write_text("[NETWORK]\nnum_inputs = 1\nnum_outputs = None\n")
        config = Config(str(config_file))
        assert config.num_outputs is None
