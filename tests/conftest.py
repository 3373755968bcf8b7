"""Pytest configuration and shared fixtures."""

import pytest
import sys
from pathlib import Path

# Add the source directory to the Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))


@pytest.fixture
def identity_genome_dict():
    """2 inputs, 1 output, a single connection input0 → output with weight 2.0."""
    return {
        'nodes': [
            {'id': 0, 'type': 'input'},
            {'id': 1, 'type': 'input'},
            {'id': 2, 'type': 'output'},
        ],
        'connections': [
            {'from': 0, 'to': 2, 'weight': 2.0},
        ],
        'activation': 'identity'
    }


@pytest.fixture
def sparse_hidden_genome_dict():
    """Hidden nodes with non-contiguous IDs, one connection skipping a layer."""
    return {
        'nodes': [
            {'id': 0, 'type': 'input'},
            {'id': 1, 'type': 'input'},
            {'id': 2, 'type': 'output'},
            {'id': 17, 'type': 'hidden'},
            {'id': 42, 'type': 'hidden'},
        ],
        'connections': [
            {'from': 0,  'to': 42, 'weight': 0.5},
            {'from': 1,  'to': 42, 'weight': -1.0},
            {'from': 42, 'to': 17, 'weight': 2.0},
            {'from': 17, 'to': 2,  'weight': 1.5},
            {'from': 0,  'to': 2,  'weight': 0.25},
        ],
        'activation': 'leaky_relu'
    }


@pytest.fixture
def recurrent_genome_dict():
    """1 input, 1 output, a hidden node feeding back on itself and from the output."""
    return {
        'nodes': [
            {'id': 0, 'type': 'input'},
            {'id': 1, 'type': 'output'},
            {'id': 5, 'type': 'hidden'},
        ],
        'connections': [
            {'from': 0, 'to': 5, 'weight': 1.0},
            {'from': 5, 'to': 5, 'weight': 0.5},
            {'from': 5, 'to': 1, 'weight': 1.0},
            {'from': 1, 'to': 5, 'weight': -0.25},
        ],
        'is_acyclic': False,
        'activation': 'tanh'
    }
