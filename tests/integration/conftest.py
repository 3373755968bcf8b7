"""
Shared fixtures for integration tests.
"""

import pytest
import numpy as np


@pytest.fixture
def xor_inputs():
    """XOR inputs, each preceded by a constant bias input of 1.0."""
    return [[1.0, 0.0, 0.0], [1.0, 0.0, 1.0], [1.0, 1.0, 0.0], [1.0, 1.0, 1.0]]


@pytest.fixture
def xor_outputs():
    """XOR expected outputs."""
    return np.array([0.0, 1.0, 1.0, 0.0])


@pytest.fixture
def xor_genome_dict():
    """
    Hand-built ReLU network solving XOR exactly:
        h11 = relu(x + y), h27 = relu(x + y - 1), out = relu(h11 - 2 * h27)
    Input 0 is the bias, hidden node IDs are deliberately sparse.
    """
    return {
        'nodes': [
            {'id': 0,  'type': 'input'},
            {'id': 1,  'type': 'input'},
            {'id': 2,  'type': 'input'},
            {'id': 3,  'type': 'output'},
            {'id': 11, 'type': 'hidden'},
            {'id': 27, 'type': 'hidden'},
        ],
        'connections': [
            {'from': 1,  'to': 11, 'weight': 1.0},
            {'from': 2,  'to': 11, 'weight': 1.0},
            {'from': 1,  'to': 27, 'weight': 1.0},
            {'from': 2,  'to': 27, 'weight': 1.0},
            {'from': 0,  'to': 27, 'weight': -1.0},
            {'from': 11, 'to': 3,  'weight': 1.0},
            {'from': 27, 'to': 3,  'weight': -2.0},
            {'from': 0,  'to': 3,  'weight': 5.0, 'enabled': False},
        ],
        'activation': 'relu'
    }


@pytest.fixture
def xor_config_file(tmp_path):
    """Write an INI file describing the XOR setting and return its path."""
    def write(is_acyclic=True, activation_count=1, suppress=False, precision='double', num_jobs=1):
        config_file = tmp_path / "xor.ini"
        config_file.write_text(f"[NETWORK]\n"
                               f"num_inputs  = 3\n"
                               f"num_outputs = 1\n"
                               f"is_acyclic  = {is_acyclic}\n"
                               f"activation  = relu\n"
                               f"\n"
                               f"[DECODER]\n"
                               f"activation_count               = {activation_count}\n"
                               f"suppress_hardware_acceleration = {suppress}\n"
                               f"precision                      = {precision}\n"
                               f"\n"
                               f"[EVALUATION]\n"
                               f"num_jobs     = {num_jobs}\n"
                               f"null_fitness = -1.0\n")
        return str(config_file)
    return write
