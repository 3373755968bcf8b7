"""
NEAT Genotype Package

The genetic representation that the decoders consume: node IDs and weighted
connection genes, plus the meta information shared by a whole population
(input/output counts, acyclic flag, activation function).

Modules:
    connection_gene: ConnectionGene class
    genome:          MetaGenome and Genome classes

Exported Classes:
    ConnectionGene: Gene encoding a weighted connection between nodes
    MetaGenome:     Properties shared by all genomes of a population
    Genome:         Node IDs and connection genes describing one network
"""

from phenonet.genotype.connection_gene import ConnectionGene
from phenonet.genotype.genome          import Genome, MetaGenome

__all__ = ['ConnectionGene',
           'Genome',
           'MetaGenome']
