"""
NEAT Connection Gene Module

Classes:
    ConnectionGene: Gene encoding a weighted connection between nodes
"""

class ConnectionGene:
    """
    A gene describing a weighted connection between two nodes in a Neural Network.

    Each connection gene represents a directed edge in the neural network graph,
    connecting a source node to a destination node with an associated weight.
    Disabled connections stay in the genome but are not expressed in the decoded
    network.

    Public Attributes:
        node_in:  ID of the source node
        node_out: ID of the destination node
        weight:   Weight of the connection
        enabled:  Whether this connection is expressed in the network
    """

    def __init__(self,
                 node_in : int,
                 node_out: int,
                 weight  : float,
                 enabled : bool = True):
        """
        Parameters:
            node_in:  ID of the source node
            node_out: ID of the destination node
            weight:   Weight of the connection
            enabled:  Whether this connection is expressed in the network
        """
        self.node_in : int   = node_in
        self.node_out: int   = node_out
        self.weight  : float = weight
        self.enabled : bool  = enabled

    def __eq__(self, other):
        if not isinstance(other, ConnectionGene):
            return NotImplemented
        return (self.node_in, self.node_out, self.weight, self.enabled) == \
               (other.node_in, other.node_out, other.weight, other.enabled)

    def __repr__(self):
        return (f"ConnectionGene(node_in={self.node_in:03d}, node_out={self.node_out:03d}, "
                f"weight={self.weight:+.6f}, enabled={self.enabled})")

    def __str__(self):
        return f"[{'E' if self.enabled else 'D'},{self.node_in:02d}=>{self.node_out:02d},{self.weight:+.02f}]"
