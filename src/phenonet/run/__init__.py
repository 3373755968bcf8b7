"""
Run Package

Configuration and fitness evaluation of decoded networks.

Modules:
    config:    Config class, parsed from an INI file
    evaluator: GenomeListEvaluator class

Exported Classes:
    Config:              Decoder and evaluation settings
    GenomeListEvaluator: Decodes genomes and evaluates their fitness, optionally in parallel
"""

from phenonet.run.config    import Config
from phenonet.run.evaluator import GenomeListEvaluator

__all__ = ['Config',
           'GenomeListEvaluator']
