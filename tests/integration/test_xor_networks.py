"""
Integration tests decoding an XOR-solving genome end to end.

These tests go from a genome dictionary to a running network through the
public decoding API, for both network classes, both execution paths and both
precisions, and check that every combination solves XOR.
"""

import numpy as np
import pytest
from phenonet import (CycleDetectedError,
                      Genome,
                      NetworkAcyclic,
                      NetworkCyclic,
                      create_genome_decoder_acyclic,
                      create_genome_decoder_cyclic,
                      decode)
from phenonet.graphs import render_graph


def _run_all(network, inputs, reset=False):
    outputs = []
    for sample in inputs:
        if reset:
            network.reset()
        outputs.append(network.activate(sample)[0])
    return np.array(outputs)


# ============================================================================
# Acyclic decoding
# ============================================================================

class TestXorAcyclic:
    """XOR as a feedforward network."""

    def test_decode_solves_xor(self, xor_genome_dict, xor_inputs, xor_outputs):
        net = decode(Genome.from_dict(xor_genome_dict))
        assert isinstance(net, NetworkAcyclic)
        np.testing.assert_array_equal(_run_all(net, xor_inputs), xor_outputs)

    @pytest.mark.parametrize("suppress", [True, False])
    @pytest.mark.parametrize("precision", ["double", "single"])
    def test_all_paths_solve_xor(self, xor_genome_dict, xor_inputs, xor_outputs, suppress, precision):
        decoder = create_genome_decoder_acyclic('relu',
                                                suppress_hardware_acceleration = suppress,
                                                precision                      = precision)
        net = decoder.decode(Genome.from_dict(xor_genome_dict))
        np.testing.assert_allclose(_run_all(net, xor_inputs), xor_outputs, atol=1e-6)

    def test_bounded_output(self, xor_genome_dict, xor_inputs, xor_outputs):
        """XOR outputs already lie in [0, 1]; bounding leaves them unchanged."""
        net = create_genome_decoder_acyclic('relu', bounded_output=True).decode(Genome.from_dict(xor_genome_dict))
        np.testing.assert_array_equal(_run_all(net, xor_inputs), xor_outputs)

    def test_layers(self, xor_genome_dict):
        """Inputs, the two hidden nodes, then the output."""
        decoder = create_genome_decoder_acyclic('relu')
        graph, node_id_map = decoder.build_graph(Genome.from_dict(xor_genome_dict))
        assert graph.layer_count == 3
        assert [graph.node_layers[node_id_map.map(i)] for i in (0, 1, 2, 11, 27, 3)] == [0, 0, 0, 1, 1, 2]

    def test_render(self, xor_genome_dict):
        """The decoded graph renders with its genome IDs."""
        decoder = create_genome_decoder_acyclic('relu')
        graph, node_id_map = decoder.build_graph(Genome.from_dict(xor_genome_dict))
        source = render_graph(graph, node_id_map, decoder.activation).source
        assert "id=27" in source
        assert "RLU" in source

    def test_back_connection_breaks_acyclic_decode(self, xor_genome_dict):
        """Adding a connection from the output back to a hidden node makes the genome cyclic."""
        genome = Genome.from_dict(xor_genome_dict)
        genome.add_connection(3, 11, 0.5)
        with pytest.raises(CycleDetectedError):
            decode(genome)


# ============================================================================
# Cyclic decoding
# ============================================================================

class TestXorCyclic:
    """XOR as a recurrent network."""

    @pytest.mark.parametrize("suppress", [True, False])
    def test_two_iterations_solve_xor(self, xor_genome_dict, xor_inputs, xor_outputs, suppress):
        """Two hops from input to output need two relaxation iterations."""
        decoder = create_genome_decoder_cyclic('relu', 2, suppress_hardware_acceleration=suppress)
        net = decoder.decode(Genome.from_dict(xor_genome_dict))
        assert isinstance(net, NetworkCyclic)
        np.testing.assert_array_equal(_run_all(net, xor_inputs, reset=True), xor_outputs)

    def test_one_iteration_lags_one_sample(self, xor_genome_dict, xor_inputs, xor_outputs):
        """With one iteration per call each output reflects the previous call's inputs."""
        net = create_genome_decoder_cyclic('relu', 1).decode(Genome.from_dict(xor_genome_dict))
        outputs = _run_all(net, xor_inputs)
        np.testing.assert_array_equal(outputs, np.concatenate([[0.0], xor_outputs[:-1]]))

    def test_one_iteration_after_reset(self, xor_genome_dict, xor_inputs):
        """Resetting before every sample leaves the output at zero after one iteration."""
        net = create_genome_decoder_cyclic('relu', 1).decode(Genome.from_dict(xor_genome_dict))
        np.testing.assert_array_equal(_run_all(net, xor_inputs, reset=True), np.zeros(4))

    def test_decode_from_meta(self, xor_genome_dict):
        """A genome marked cyclic decodes to a cyclic network with the default single iteration."""
        net = decode(Genome.from_dict(dict(xor_genome_dict, is_acyclic=False)))
        assert isinstance(net, NetworkCyclic)
        assert net.activation_count == 1

    def test_recurrent_genome_matches_acyclic_when_settled(self, xor_genome_dict, xor_inputs):
        """On a feedforward genome, enough iterations reproduce the acyclic network exactly."""
        genome  = Genome.from_dict(xor_genome_dict)
        acyclic = create_genome_decoder_acyclic('relu').decode(genome)
        cyclic  = create_genome_decoder_cyclic('relu', 5).decode(genome)
        np.testing.assert_array_equal(_run_all(cyclic, xor_inputs, reset=True), _run_all(acyclic, xor_inputs))
