#!/usr/bin/env python3
"""
Utility script to visualize decoded networks.

The genome is read from a JSON file in the format accepted by Genome.from_dict,
decoded with the decoder its meta information calls for, and rendered with
nodes labelled by their genome IDs.

Usage:
    python scripts/visualize_network.py --genome genome.json
"""

import sys
import argparse
import json
from pathlib import Path

# Add source directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from phenonet.decoding import create_genome_decoder
from phenonet.errors   import DecodeError
from phenonet.genotype import Genome
from phenonet.graphs   import render_graph
from phenonet.run      import Config


def visualize_genome(genome, config=None, output_file='network', format='png', view=True):
    """
    Decode a genome and render the resulting graph.

    Args:
        genome: The genome to visualize
        config: Decoder settings (defaults if None)
        output_file: Output filename (without extension)
        format: Output format (png, pdf, svg, etc.)
        view: Whether to automatically open the generated file
    """
    decoder = create_genome_decoder(genome.meta, config)
    graph, node_id_map = decoder.build_graph(genome)

    dot = render_graph(graph, node_id_map, decoder.activation)
    dot.format = format
    dot.render(output_file, view=view, cleanup=True)
    print(f"Network visualization saved to {output_file}.{format}")


def main():
    parser = argparse.ArgumentParser(description='Visualize decoded NEAT networks')
    parser.add_argument('--genome', type=str, required=True,
                        help='Path to JSON genome file')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to INI configuration file (decoder settings)')
    parser.add_argument('--output', type=str, default='network',
                        help='Output filename (without extension)')
    parser.add_argument('--format', type=str, default='png',
                        choices=['png', 'pdf', 'svg'],
                        help='Output format')
    parser.add_argument('--no-view', action='store_true',
                        help='Do not automatically open the generated file')

    args = parser.parse_args()

    # Load genome
    with open(args.genome, 'r') as f:
        genome = Genome.from_dict(json.load(f))

    config = Config(args.config) if args.config else None

    try:
        visualize_genome(genome, config, args.output, args.format, not args.no_view)
    except DecodeError as e:
        print(f"Error: genome cannot be decoded: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
