"""
Directed Graph Module

This module defines the normalized, array-based graph that every network is
built from: a node count plus parallel arrays describing the weighted
connections, with node IDs already translated to dense indices.

Classes:
    DirectedGraph: Node count and weighted connections over dense node indices

Functions:
    build_directed_graph: Build a DirectedGraph (and its NodeIdMap) from genome connections
"""

import logging
import math
import numpy as np
from typing import Iterable, Iterator

from phenonet.errors              import MalformedGenomeError
from phenonet.graphs.node_id_map  import DictionaryNodeIdMap

logger = logging.getLogger(__name__)

class DirectedGraph:
    """
    A directed, weighted graph over the dense node index space [0, total_node_count).

    Connections are held as three parallel arrays: source index, target index and
    weight. Input nodes always occupy [0, input_count). The arrays are read-only;
    a DirectedGraph is never modified after construction and may be shared by
    any number of networks.

    Public Properties:
        total_node_count: Number of nodes in the graph
        input_count:      Number of input nodes
        output_count:     Number of output nodes
        connection_count: Number of connections
        source_ids:       Source node index of each connection (int32 array)
        target_ids:       Target node index of each connection (int32 array)
        weights:          Weight of each connection (float array)

    Public Methods:
        iter_connections(): Iterate over (source, target, weight) triples
    """

    def __init__(self,
                 total_node_count: int,
                 input_count     : int,
                 output_count    : int,
                 source_ids      : np.ndarray,
                 target_ids      : np.ndarray,
                 weights         : np.ndarray):
        if not (len(source_ids) == len(target_ids) == len(weights)):
            raise ValueError("Connection arrays must all have the same length")

        self._total_node_count = total_node_count
        self._input_count      = input_count
        self._output_count     = output_count

        self._source_ids = np.array(source_ids, dtype=np.int32)
        self._target_ids = np.array(target_ids, dtype=np.int32)
        self._weights    = np.array(weights   , dtype=np.float64)
        for arr in (self._source_ids, self._target_ids, self._weights):
            arr.setflags(write=False)

    @property
    def total_node_count(self) -> int:
        return self._total_node_count

    @property
    def input_count(self) -> int:
        return self._input_count

    @property
    def output_count(self) -> int:
        return self._output_count

    @property
    def connection_count(self) -> int:
        return len(self._weights)

    @property
    def source_ids(self) -> np.ndarray:
        return self._source_ids

    @property
    def target_ids(self) -> np.ndarray:
        return self._target_ids

    @property
    def weights(self) -> np.ndarray:
        return self._weights

    def iter_connections(self) -> Iterator[tuple[int, int, float]]:
        """Iterate over the connections as (source index, target index, weight)."""
        for src, tgt, weight in zip(self._source_ids, self._target_ids, self._weights):
            yield int(src), int(tgt), float(weight)

    def __repr__(self):
        return (f"{type(self).__name__}(nodes={self._total_node_count}, "
                f"inputs={self._input_count}, outputs={self._output_count}, "
                f"connections={self.connection_count})")

def build_directed_graph(connections     : Iterable[tuple[int, int, float]],
                         input_count     : int,
                         output_count    : int,
                         hidden_ids      : Iterable[int],
                         fixed_node_count: int | None = None) -> tuple[DirectedGraph, DictionaryNodeIdMap]:
    """
    Build a DirectedGraph from connections expressed in the genome's node ID space.

    Node IDs below 'fixed_node_count' keep their value as dense index. The remaining
    IDs (the hidden nodes, and the output nodes if they are not part of the fixed
    range) are sorted and assigned consecutive indices after the fixed range.

    Parameters:
        connections:      (source ID, target ID, weight) triples
        input_count:      Number of input nodes, IDs [0, input_count)
        output_count:     Number of output nodes, IDs [input_count, input_count + output_count)
        hidden_ids:       IDs of the hidden nodes
        fixed_node_count: Size of the identity-mapped ID range
                          (defaults to input_count + output_count)

    Returns:
        The graph, and the NodeIdMap used to translate node IDs to dense indices

    Raises:
        MalformedGenomeError: if a connection references an unknown node, a
                              (source, target) pair repeats, or a weight is not finite
    """
    io_count = input_count + output_count
    if fixed_node_count is None:
        fixed_node_count = io_count
    if not input_count <= fixed_node_count <= io_count:
        raise ValueError(f"fixed_node_count must lie in [{input_count}, {io_count}], got {fixed_node_count}")

    # Every ID outside the fixed range gets a slot after it, in ascending ID order
    mapped_ids = list(range(fixed_node_count, io_count))
    for node_id in sorted(set(hidden_ids)):
        if node_id < io_count:
            raise MalformedGenomeError(f"Hidden node ID {node_id} collides with the input/output ID range")
        mapped_ids.append(node_id)
    node_id_map = DictionaryNodeIdMap(fixed_node_count,
                                      {node_id: fixed_node_count + i for i, node_id in enumerate(mapped_ids)})

    conn_list: list[tuple[int, int, float]] = []
    seen: set[tuple[int, int]] = set()
    for src_id, tgt_id, weight in connections:
        try:
            src = node_id_map.map(src_id)
            tgt = node_id_map.map(tgt_id)
        except KeyError as e:
            raise MalformedGenomeError(f"Connection {src_id}=>{tgt_id} references unknown node ID {e.args[0]}") from e

        if (src, tgt) in seen:
            raise MalformedGenomeError(f"Duplicate connection {src_id}=>{tgt_id}")
        if not math.isfinite(weight):
            raise MalformedGenomeError(f"Connection {src_id}=>{tgt_id} has non-finite weight {weight}")

        seen.add((src, tgt))
        conn_list.append((src, tgt, weight))

    # Sort by source, then target, so the graph does not depend on gene order
    conn_list.sort(key=lambda c: (c[0], c[1]))

    graph = DirectedGraph(node_id_map.count,
                          input_count,
                          output_count,
                          np.array([c[0] for c in conn_list], dtype=np.int32),
                          np.array([c[1] for c in conn_list], dtype=np.int32),
                          np.array([c[2] for c in conn_list], dtype=np.float64))

    logger.debug("Built %r", graph)
    return graph, node_id_map
