"""
NEAT Genome Module

This module implements the genome representation consumed by the decoders:
the set of node IDs plus the weighted connections between them, together with
the meta information shared by every genome of a population.

Classes:
    MetaGenome: Properties shared by all genomes of a population
    Genome:     Node IDs and connection genes describing one network
"""

from typing import Iterable, Iterator, NamedTuple, TYPE_CHECKING

from phenonet.activations             import ActivationFunction, get_activation
from phenonet.genotype.connection_gene import ConnectionGene
if TYPE_CHECKING:
    from phenonet.run.config import Config

class MetaGenome(NamedTuple):
    """
    Properties shared by all genomes of a population.

    Attributes:
        input_count:     Number of input nodes
        output_count:    Number of output nodes
        is_acyclic:      Whether genomes must decode to acyclic (feedforward) networks
        activation_name: Name of the activation function applied to every non-input node
    """
    input_count    : int
    output_count   : int
    is_acyclic     : bool = True
    activation_name: str  = "leaky_relu"

    @property
    def activation_fn(self) -> ActivationFunction:
        """The ActivationFunction named by 'activation_name'."""
        return get_activation(self.activation_name)

    @classmethod
    def from_config(cls, config: 'Config') -> 'MetaGenome':
        """Create a MetaGenome from the [NETWORK] section of a Config."""
        if config.num_inputs is None or config.num_outputs is None:
            raise ValueError("Config does not specify 'num_inputs' and 'num_outputs'")
        return cls(config.num_inputs, config.num_outputs, config.is_acyclic, config.activation)

class Genome:
    """
    A NEAT genome: node IDs plus weighted connection genes.

    Node numbering convention:
        - Input nodes:  [0, num_inputs)
        - Output nodes: [num_inputs, num_inputs + num_outputs)
        - Hidden nodes: [num_inputs + num_outputs, ...), not necessarily contiguous

    The genome performs no structural checks on its connections; it is the
    decoder that rejects connections to undeclared nodes or cycles in genomes
    that must be acyclic.

    Attributes:
        meta:       The MetaGenome shared by the population
        conn_genes: List of ConnectionGene objects

    Public Properties:
        input_ids:           IDs of the input nodes
        output_ids:          IDs of the output nodes
        hidden_ids:          IDs of the hidden nodes, sorted
        node_ids:            All node IDs
        enabled_connections: Connection genes expressed in the network

    Public Methods:
        add_hidden_node(node_id):           Declare a hidden node
        add_connection(from, to, weight):   Append a connection gene
        connection_triples():               Enabled connections as (from, to, weight)
        to_dict():                          Convert genome to dictionary representation

    Class Methods:
        from_dict(genome_dict): Create a genome from a dictionary description
    """

    def __init__(self,
                 meta      : MetaGenome,
                 hidden_ids: Iterable[int] = (),
                 conn_genes: Iterable[ConnectionGene] = ()):
        """
        Parameters:
            meta:       Properties shared by all genomes of the population
            hidden_ids: IDs of the hidden nodes
            conn_genes: Connection genes
        """
        self.meta       : MetaGenome           = meta
        self._hidden_ids: set[int]             = set(hidden_ids)
        self.conn_genes : list[ConnectionGene] = list(conn_genes)

    @classmethod
    def from_dict(cls, genome_dict: dict) -> 'Genome':
        """
        Create a genome from a dictionary description.

        Expected format:
            {
                'nodes': [
                    {'id': 0, 'type': 'input'},
                    {'id': 1, 'type': 'output'},
                    {'id': 5, 'type': 'hidden'},
                    ...
                ],
                'connections': [
                    {'from': 0, 'to': 5, 'weight': 0.5},
                    {'from': 5, 'to': 1, 'weight': -1.2, 'enabled': False},
                    ...
                ],
                'is_acyclic': True,            # optional, default True
                'activation': 'leaky_relu'     # optional, default 'leaky_relu'
            }

        Parameters:
            genome_dict: Dictionary describing the genome

        Returns:
            The new Genome

        Raises:
            ValueError: if node types are unknown or the numbering convention is violated
        """
        input_ids, output_ids, hidden_ids = [], [], []
        for node in genome_dict.get('nodes', []):
            node_type = node['type'].lower()
            if node_type == 'input':
                input_ids.append(node['id'])
            elif node_type == 'output':
                output_ids.append(node['id'])
            elif node_type == 'hidden':
                hidden_ids.append(node['id'])
            else:
                raise ValueError(f"Unknown node type '{node['type']}' for node {node['id']}")

        cls._validate_node_numbering(input_ids, output_ids, hidden_ids)

        meta = MetaGenome(input_count     = len(input_ids),
                          output_count    = len(output_ids),
                          is_acyclic      = genome_dict.get('is_acyclic', True),
                          activation_name = genome_dict.get('activation', 'leaky_relu'))

        conn_genes = [ConnectionGene(conn['from'],
                                     conn['to'],
                                     float(conn['weight']),
                                     conn.get('enabled', True))
                      for conn in genome_dict.get('connections', [])]

        return cls(meta, hidden_ids, conn_genes)

    def to_dict(self) -> dict:
        """Convert the genome to the dictionary format accepted by 'from_dict'."""
        nodes  = [{'id': node_id, 'type': 'input'}  for node_id in self.input_ids]
        nodes += [{'id': node_id, 'type': 'output'} for node_id in self.output_ids]
        nodes += [{'id': node_id, 'type': 'hidden'} for node_id in self.hidden_ids]

        connections = []
        for conn in self.conn_genes:
            entry = {'from': conn.node_in, 'to': conn.node_out, 'weight': conn.weight}
            if not conn.enabled:
                entry['enabled'] = False
            connections.append(entry)

        return {'nodes'      : nodes,
                'connections': connections,
                'is_acyclic' : self.meta.is_acyclic,
                'activation' : self.meta.activation_name}

    @staticmethod
    def _validate_node_numbering(input_ids: list, output_ids: list, hidden_ids: list) -> None:
        """
        Check the node numbering convention:
            - inputs are [0, num_inputs)
            - outputs are [num_inputs, num_inputs + num_outputs)
            - hidden nodes are all >= num_inputs + num_outputs
            - no ID appears twice
        """
        num_inputs  = len(input_ids)
        num_outputs = len(output_ids)

        expected_input_ids = list(range(num_inputs))
        if sorted(input_ids) != expected_input_ids:
            raise ValueError(f"Input nodes must be numbered {expected_input_ids}, got {sorted(input_ids)}")

        expected_output_ids = list(range(num_inputs, num_inputs + num_outputs))
        if sorted(output_ids) != expected_output_ids:
            raise ValueError(f"Output nodes must be numbered {expected_output_ids}, got {sorted(output_ids)}")

        min_hidden_id = num_inputs + num_outputs
        for hid in hidden_ids:
            if hid < min_hidden_id:
                raise ValueError(f"Hidden node {hid} has ID below minimum {min_hidden_id}")

        if len(set(hidden_ids)) != len(hidden_ids):
            raise ValueError("Duplicate node IDs found in node list")

    @property
    def input_ids(self) -> list[int]:
        return list(range(self.meta.input_count))

    @property
    def output_ids(self) -> list[int]:
        start = self.meta.input_count
        return list(range(start, start + self.meta.output_count))

    @property
    def hidden_ids(self) -> list[int]:
        return sorted(self._hidden_ids)

    @property
    def node_ids(self) -> list[int]:
        return self.input_ids + self.output_ids + self.hidden_ids

    @property
    def enabled_connections(self) -> list[ConnectionGene]:
        return [conn for conn in self.conn_genes if conn.enabled]

    def add_hidden_node(self, node_id: int) -> None:
        """Declare a hidden node with the given ID."""
        if node_id < self.meta.input_count + self.meta.output_count:
            raise ValueError(f"Hidden node {node_id} has ID below minimum "
                             f"{self.meta.input_count + self.meta.output_count}")
        self._hidden_ids.add(node_id)

    def add_connection(self, node_in: int, node_out: int, weight: float, enabled: bool = True) -> ConnectionGene:
        """Append a connection gene and return it."""
        gene = ConnectionGene(node_in, node_out, weight, enabled)
        self.conn_genes.append(gene)
        return gene

    def connection_triples(self) -> Iterator[tuple[int, int, float]]:
        """Iterate over the enabled connections as (source ID, target ID, weight)."""
        for conn in self.conn_genes:
            if conn.enabled:
                yield conn.node_in, conn.node_out, conn.weight

    def __str__(self):
        s  = f"inputs={self.meta.input_count}, outputs={self.meta.output_count}, hidden={self.hidden_ids}\n"
        s += " ".join(str(conn) for conn in self.conn_genes)
        return s

    def __repr__(self):
        return (f"Genome(meta={self.meta}, hidden={len(self._hidden_ids)}, "
                f"connections={len(self.conn_genes)})")
