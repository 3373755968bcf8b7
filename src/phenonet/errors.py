"""
Decoding Errors Module

Exceptions raised while translating a genome into an executable network.
Once a network has been decoded, activating it cannot fail (short of being
handed a wrong number of inputs), so all of these surface at decode time.

Classes:
    DecodeError:          Base class for all decode failures
    MalformedGenomeError: The genome references nodes it does not declare, or is otherwise inconsistent
    CycleDetectedError:   An acyclic decode was requested for a graph that contains a cycle
"""

class DecodeError(Exception):
    """Base class for errors raised while decoding a genome."""

class MalformedGenomeError(DecodeError, ValueError):
    """
    The genome cannot be expressed as a graph.

    Raised when a connection references a node ID that is neither in the fixed
    (input/output) range nor among the genome's hidden nodes, when two
    connections share the same source and target, or when a weight is not finite.
    """

class CycleDetectedError(DecodeError, ValueError):
    """
    An acyclic network was requested for a graph containing a cycle.

    Attributes:
        source: dense index of the node where the back-reference starts (may be None)
        target: dense index of the node where the back-reference ends   (may be None)
    """

    def __init__(self, message: str, source: int | None = None, target: int | None = None):
        super().__init__(message)
        self.source = source
        self.target = target
