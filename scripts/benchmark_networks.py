#!/usr/bin/env python3
"""
Utility script to time network activation.

A random genome is decoded into acyclic and cyclic networks, each on the
scalar and the vectorized execution path, and every network is activated
repeatedly on fixed random inputs.

Usage:
    python scripts/benchmark_networks.py
    python scripts/benchmark_networks.py --hidden 100 --activations 5000 --activation-count 2
"""

import sys
import argparse
import time
import numpy as np
from pathlib import Path

# Add source directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from phenonet.decoding import create_genome_decoder_acyclic, create_genome_decoder_cyclic
from phenonet.genotype import Genome, MetaGenome


def make_random_genome(num_inputs, num_outputs, num_hidden, density, activation, seed):
    """
    Random feedforward genome. Connections only go forward in the order
    inputs, hidden, outputs, so the genome decodes with either decoder.
    """
    rng    = np.random.default_rng(seed)
    meta   = MetaGenome(num_inputs, num_outputs, True, activation)
    genome = Genome(meta, hidden_ids=[num_inputs + num_outputs + i for i in range(num_hidden)])

    order = genome.input_ids + genome.hidden_ids + genome.output_ids
    for i, src in enumerate(order):
        for tgt in order[max(i + 1, num_inputs):]:
            if rng.random() < density:
                genome.add_connection(src, tgt, float(rng.uniform(-1.0, 1.0)))
    return genome

def time_activations(network, inputs, repeats):
    """Return the mean time of one activation, in microseconds."""
    network.activate(inputs)
    start = time.perf_counter()
    for _ in range(repeats):
        network.activate(inputs)
    return (time.perf_counter() - start) / repeats * 1e6


def main():
    parser = argparse.ArgumentParser(description='Time activation of decoded networks')
    parser.add_argument('--inputs', type=int, default=14, help='Number of input nodes')
    parser.add_argument('--outputs', type=int, default=4, help='Number of output nodes')
    parser.add_argument('--hidden', type=int, default=30, help='Number of hidden nodes')
    parser.add_argument('--density', type=float, default=0.2,
                        help='Probability of each forward connection being present')
    parser.add_argument('--activation', type=str, default='leaky_relu',
                        help='Activation function')
    parser.add_argument('--activation-count', type=int, default=1,
                        help='Relaxation iterations per activation of the cyclic networks')
    parser.add_argument('--activations', type=int, default=1000,
                        help='Number of timed activations per network')
    parser.add_argument('--seed', type=int, default=42)
    args = parser.parse_args()

    genome = make_random_genome(args.inputs, args.outputs, args.hidden, args.density,
                                args.activation, args.seed)
    inputs = np.random.default_rng(args.seed).random(args.inputs)
    print(f"Genome: {args.inputs} inputs, {args.outputs} outputs, {args.hidden} hidden, "
          f"{len(genome.conn_genes)} connections")

    for suppress in (True, False):
        decoders = {
            'acyclic': create_genome_decoder_acyclic(args.activation, suppress_hardware_acceleration=suppress),
            'cyclic' : create_genome_decoder_cyclic(args.activation, args.activation_count,
                                                    suppress_hardware_acceleration=suppress),
        }
        for name, decoder in decoders.items():
            network = decoder.decode(genome)
            path    = 'vectorized' if network.vectorized else 'scalar'
            elapsed = time_activations(network, inputs, args.activations)
            print(f"{name:8s} {path:10s} {elapsed:10.2f} us/activation")


if __name__ == '__main__':
    main()
