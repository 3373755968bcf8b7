"""
Phenotype Package

Executable networks decoded from genomes. The two implementations share only
the NetworkBase interface ('activate' / 'reset'):

Modules:
    network_base:    Abstract base class for network implementations
    network_acyclic: Layered feedforward network, evaluated in one sweep
    network_cyclic:  Recurrent network, evaluated by synchronous relaxation

Exported Classes:
    NetworkBase:    Abstract base class for network implementations
    NetworkAcyclic: Layered feedforward network
    NetworkCyclic:  Recurrent network with persistent state
"""

from phenonet.phenotype.network_base    import NetworkBase
from phenonet.phenotype.network_acyclic import NetworkAcyclic
from phenonet.phenotype.network_cyclic  import NetworkCyclic

__all__ = ['NetworkBase',
           'NetworkAcyclic',
           'NetworkCyclic']
