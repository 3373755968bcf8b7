"""
XOR Network Example

This module decodes and evaluates a small population of XOR genomes, the
classic benchmark for networks that need a hidden layer. It shows the full
path from genome description to fitness: the configuration selects the
decoder, the evaluator decodes every genome into a fresh network and scores
it, and genomes that cannot be decoded are discarded with the null fitness.

The XOR Problem:
    XOR is a two-input, one-output boolean function where the output is True
    only when the inputs differ:
        Input (0, 0) → Output 0
        Input (0, 1) → Output 1
        Input (1, 0) → Output 1
        Input (1, 1) → Output 0

Fitness Function:
    Fitness = 4.0 - Σ(output - target)²

    Maximum fitness of 4.0 is achieved when all four XOR cases produce exact outputs.

Usage:
    python examples/xor_network.py
    python examples/xor_network.py --config examples/config_xor.ini --cyclic --num-jobs -1
"""

import argparse
import logging
import numpy as np
from pathlib import Path

from phenonet import Config, Genome, GenomeListEvaluator, MetaGenome, create_genome_decoder

# Input 0 is a constant bias; inputs 1 and 2 carry the XOR operands
XOR_INPUTS  = np.array([[1.0, 0.0, 0.0],
                        [1.0, 0.0, 1.0],
                        [1.0, 1.0, 0.0],
                        [1.0, 1.0, 1.0]])
XOR_OUTPUTS = np.array([0.0, 1.0, 1.0, 0.0])

# Solves XOR exactly with ReLU: out = relu(h11 - 2 * h27), h11 = relu(x + y), h27 = relu(x + y - 1)
XOR_CONNECTIONS = [(1, 11, 1.0), (2, 11, 1.0), (1, 27, 1.0), (2, 27, 1.0), (0, 27, -1.0),
                   (11, 3, 1.0), (27, 3, -2.0)]

def make_population(meta: MetaGenome, size: int, noise: float, seed: int) -> list[Genome]:
    """
    Create genomes sharing the XOR topology, with perturbed weights.

    The last genome also gets a connection from the output back to a hidden
    node, so it cannot be decoded as an acyclic network.
    """
    rng = np.random.default_rng(seed)
    population = []
    for i in range(size):
        genome = Genome(meta, hidden_ids=[11, 27])
        for node_in, node_out, weight in XOR_CONNECTIONS:
            perturbation = rng.normal(0.0, noise) if i > 0 else 0.0
            genome.add_connection(node_in, node_out, weight + perturbation)
        population.append(genome)

    population[-1].add_connection(3, 11, 0.5)
    return population

def make_xor_fitness(reset_between_cases: bool):
    """Return the XOR fitness function; cyclic networks are reset before every case."""
    def xor_fitness(network) -> float:
        fitness = 4.0  # max possible fitness
        for inputs, target in zip(XOR_INPUTS, XOR_OUTPUTS):
            if reset_between_cases:
                network.reset()
            output   = network.activate(inputs)[0]
            fitness -= (output - target) ** 2
        return float(fitness)
    return xor_fitness

def main():
    parser = argparse.ArgumentParser(description='Decode and evaluate a population of XOR networks')
    parser.add_argument('--config', type=str, default=str(Path(__file__).parent / 'config_xor.ini'),
                        help='Path to the INI configuration file')
    parser.add_argument('--cyclic', action='store_true',
                        help='Decode as recurrent networks, regardless of the configuration')
    parser.add_argument('--population', type=int, default=20,
                        help='Number of genomes to evaluate')
    parser.add_argument('--noise', type=float, default=0.3,
                        help='Standard deviation of the weight perturbations')
    parser.add_argument('--num-jobs', type=int, default=None,
                        help='Number of parallel jobs (overrides the configuration)')
    parser.add_argument('--seed', type=int, default=42)
    parser.add_argument('--verbose', action='store_true', help='Show decoder debug logging')
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    config = Config(args.config)
    if args.cyclic:
        config.is_acyclic = False
    if args.num_jobs is not None:
        config.num_jobs = args.num_jobs

    meta       = MetaGenome.from_config(config)
    decoder    = create_genome_decoder(meta, config)
    population = make_population(meta, args.population, args.noise, args.seed)
    evaluator  = GenomeListEvaluator.from_config(decoder, make_xor_fitness(not meta.is_acyclic), config)

    print(f"Decoder: {decoder!r}")
    fitness = evaluator.evaluate(population)

    for idx, fit in enumerate(fitness):
        print(f"Genome {idx:3d}  fitness={fit:+.4f}")

    best = population[int(np.argmax(fitness))]
    network = decoder.decode(best)
    print(f"\nBest genome (fitness={max(fitness):.4f}):\n{best}\n")
    print("     x      y  |  output  target")
    for inputs, target in zip(XOR_INPUTS, XOR_OUTPUTS):
        network.reset()
        output = network.activate(inputs)[0]
        print(f"{inputs[1]:6.1f} {inputs[2]:6.1f}  |  {output:6.3f}  {target:6.1f}")

if __name__ == '__main__':
    main()
