"""
Unit tests for the genome decoders.

Tests cover the network types produced, rejection of malformed and cyclic
genomes, disabled connections, the node ID maps returned by build_graph, and
the configuration carried by each decoder.
"""

import numpy as np
import pytest
from phenonet.activations             import get_activation
from phenonet.decoding.genome_decoder import GenomeDecoder, GenomeDecoderAcyclic, GenomeDecoderCyclic
from phenonet.errors                  import CycleDetectedError, DecodeError, MalformedGenomeError
from phenonet.genotype                import Genome
from phenonet.graphs                  import AcyclicGraph
from phenonet.phenotype               import NetworkAcyclic, NetworkCyclic


# ============================================================================
# Test Fixtures
# ============================================================================

@pytest.fixture
def acyclic_decoder():
    return GenomeDecoderAcyclic(get_activation('leaky_relu'))

@pytest.fixture
def cyclic_decoder():
    return GenomeDecoderCyclic(get_activation('tanh'), activation_count=1)


# ============================================================================
# Test Classes
# ============================================================================

class TestGenomeDecoderBase:
    """Test the abstract decoder."""

    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            GenomeDecoder(get_activation('relu'))

    def test_attributes(self):
        decoder = GenomeDecoderAcyclic(get_activation('relu'), bounded_output=True,
                                       vectorized=False, dtype=np.float32)
        assert decoder.activation.name == 'relu'
        assert decoder.bounded_output is True
        assert decoder.vectorized is False
        assert decoder.dtype == np.float32

    def test_repr(self, acyclic_decoder):
        assert repr(acyclic_decoder) == ("GenomeDecoderAcyclic(activation=leaky_relu, bounded_output=False, "
                                         "vectorized=True, dtype=float64)")


class TestGenomeDecoderAcyclic:
    """Test decoding to acyclic networks."""

    def test_decode_type(self, acyclic_decoder, sparse_hidden_genome_dict):
        net = acyclic_decoder.decode(Genome.from_dict(sparse_hidden_genome_dict))
        assert isinstance(net, NetworkAcyclic)
        np.testing.assert_allclose(net.activate([2.0, 0.5]), [2.0])

    def test_network_settings(self, sparse_hidden_genome_dict):
        """The network inherits the decoder's settings."""
        decoder = GenomeDecoderAcyclic(get_activation('leaky_relu'), bounded_output=True,
                                       vectorized=False, dtype=np.float32)
        net = decoder.decode(Genome.from_dict(sparse_hidden_genome_dict))
        assert net.bounded_output is True
        assert net.vectorized is False
        assert net.dtype == np.float32
        np.testing.assert_allclose(net.activate([2.0, 0.5]), [1.0])

    def test_build_graph(self, acyclic_decoder, sparse_hidden_genome_dict):
        """build_graph returns the layered graph and a map straight to its indices."""
        graph, node_id_map = acyclic_decoder.build_graph(Genome.from_dict(sparse_hidden_genome_dict))
        assert isinstance(graph, AcyclicGraph)
        assert node_id_map.map(2) == 4
        assert node_id_map.map(17) == 3
        assert node_id_map.map(42) == 2

    def test_cycle_rejected(self, acyclic_decoder, recurrent_genome_dict):
        with pytest.raises(CycleDetectedError):
            acyclic_decoder.decode(Genome.from_dict(recurrent_genome_dict))

    def test_disabled_back_connection_ignored(self, acyclic_decoder):
        """A cycle made only through a disabled connection is not a cycle."""
        genome = Genome.from_dict({
            'nodes': [{'id': 0, 'type': 'input'}, {'id': 1, 'type': 'output'}, {'id': 5, 'type': 'hidden'}],
            'connections': [{'from': 0, 'to': 5, 'weight': 1.0},
                            {'from': 5, 'to': 1, 'weight': 1.0},
                            {'from': 1, 'to': 5, 'weight': 1.0, 'enabled': False}]
        })
        net = acyclic_decoder.decode(genome)
        np.testing.assert_allclose(net.activate([2.0]), [2.0])

    def test_unknown_node_rejected(self, acyclic_decoder):
        genome = Genome.from_dict({
            'nodes': [{'id': 0, 'type': 'input'}, {'id': 1, 'type': 'output'}],
            'connections': [{'from': 0, 'to': 99, 'weight': 1.0}]
        })
        with pytest.raises(MalformedGenomeError):
            acyclic_decoder.decode(genome)

    def test_errors_share_base_class(self, acyclic_decoder, recurrent_genome_dict):
        with pytest.raises(DecodeError):
            acyclic_decoder.decode(Genome.from_dict(recurrent_genome_dict))

    def test_decodes_are_independent(self, acyclic_decoder, identity_genome_dict):
        """Each decode builds a new network."""
        genome = Genome.from_dict(identity_genome_dict)
        assert acyclic_decoder.decode(genome) is not acyclic_decoder.decode(genome)


class TestGenomeDecoderCyclic:
    """Test decoding to cyclic networks."""

    def test_decode_type(self, cyclic_decoder, recurrent_genome_dict):
        net = cyclic_decoder.decode(Genome.from_dict(recurrent_genome_dict))
        assert isinstance(net, NetworkCyclic)
        assert net.activation_count == 1

    def test_activation_count_must_be_positive(self):
        with pytest.raises(ValueError):
            GenomeDecoderCyclic(get_activation('tanh'), activation_count=0)

    def test_acyclic_genome_accepted(self, identity_genome_dict):
        """A feedforward genome can always be decoded as a cyclic network."""
        net = GenomeDecoderCyclic(get_activation('identity'), 1).decode(Genome.from_dict(identity_genome_dict))
        np.testing.assert_array_equal(net.activate([3.0, 0.0]), [6.0])

    def test_build_graph_keeps_outputs_fixed(self, cyclic_decoder, recurrent_genome_dict):
        """Inputs and outputs keep their IDs as indices; hidden nodes follow."""
        graph, node_id_map = cyclic_decoder.build_graph(Genome.from_dict(recurrent_genome_dict))
        assert graph.total_node_count == 3
        assert node_id_map.map(0) == 0
        assert node_id_map.map(1) == 1
        assert node_id_map.map(5) == 2

    def test_unknown_node_rejected(self, cyclic_decoder):
        genome = Genome.from_dict({
            'nodes': [{'id': 0, 'type': 'input'}, {'id': 1, 'type': 'output'}],
            'connections': [{'from': 7, 'to': 1, 'weight': 1.0}],
            'is_acyclic': False
        })
        with pytest.raises(MalformedGenomeError):
            cyclic_decoder.decode(genome)

    def test_duplicate_connection_rejected(self, cyclic_decoder):
        genome = Genome.from_dict({
            'nodes': [{'id': 0, 'type': 'input'}, {'id': 1, 'type': 'output'}],
            'connections': [{'from': 0, 'to': 1, 'weight': 1.0},
                            {'from': 0, 'to': 1, 'weight': 2.0}],
            'is_acyclic': False
        })
        with pytest.raises(MalformedGenomeError):
            cyclic_decoder.decode(genome)
