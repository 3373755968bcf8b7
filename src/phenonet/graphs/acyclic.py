"""
Acyclic Graph Module

This module turns a cycle-free DirectedGraph into an execution plan that a
network can evaluate with one linear sweep over its nodes and connections.

Every node is assigned a layer, defined as the length of the longest path
reaching it: input nodes (and any node with no incoming connection) sit in
layer 0, every other node sits one layer above its deepest predecessor.
Longest-path layering guarantees that all of a node's inputs are final by the
time its layer is reached, including inputs arriving over connections that
skip layers.

Nodes are then renumbered so that each layer occupies a contiguous range of
dense indices, and connections are grouped by the layer of their source node.

Classes:
    LayerInfo:    End node and end connection index of one layer
    AcyclicGraph: A DirectedGraph renumbered and grouped by layer

Functions:
    compute_layers:      Longest-path layer of every node (raises on cycles)
    build_acyclic_graph: Build an AcyclicGraph (and its NodeIdMap) from a DirectedGraph
"""

import logging
import numpy as np
from collections import deque, defaultdict
from typing      import NamedTuple

from phenonet.errors                import CycleDetectedError
from phenonet.graphs.directed_graph import DirectedGraph
from phenonet.graphs.node_id_map    import DictionaryNodeIdMap, NodeIdMap

logger = logging.getLogger(__name__)

class LayerInfo(NamedTuple):
    """
    Boundaries of one layer in an AcyclicGraph.

    end_node_idx:       One past the last node index in the layer
    end_connection_idx: One past the last connection whose source node is in the layer
    """
    end_node_idx      : int
    end_connection_idx: int

class AcyclicGraph(DirectedGraph):
    """
    A DirectedGraph whose nodes are ordered by layer.

    Nodes of layer 'k' occupy [layer_array[k-1].end_node_idx, layer_array[k].end_node_idx),
    and the connections leaving them occupy
    [layer_array[k-1].end_connection_idx, layer_array[k].end_connection_idx).
    Input nodes keep their indices [0, input_count) at the head of layer 0.

    Because output nodes are placed by layer like any other non-input node,
    their positions are recorded in 'output_node_idx_array'.

    Public Properties (in addition to DirectedGraph's):
        layer_array:           LayerInfo for each layer, in increasing layer order
        output_node_idx_array: Dense index of each output node, in output order
        node_layers:           Layer of each node, by dense index
        layer_count:           Number of layers
    """

    def __init__(self,
                 graph                : DirectedGraph,
                 layer_array          : list[LayerInfo],
                 output_node_idx_array: np.ndarray,
                 node_layers          : np.ndarray):
        super().__init__(graph.total_node_count,
                         graph.input_count,
                         graph.output_count,
                         graph.source_ids,
                         graph.target_ids,
                         graph.weights)

        self._layer_array           = tuple(layer_array)
        self._output_node_idx_array = np.array(output_node_idx_array, dtype=np.int32)
        self._node_layers           = np.array(node_layers, dtype=np.int32)
        self._output_node_idx_array.setflags(write=False)
        self._node_layers.setflags(write=False)

    @property
    def layer_array(self) -> tuple[LayerInfo, ...]:
        return self._layer_array

    @property
    def output_node_idx_array(self) -> np.ndarray:
        return self._output_node_idx_array

    @property
    def node_layers(self) -> np.ndarray:
        return self._node_layers

    @property
    def layer_count(self) -> int:
        return len(self._layer_array)

def compute_layers(graph: DirectedGraph) -> np.ndarray:
    """
    Assign every node of the graph to a layer, using longest-path layering.

    This is Kahn's topological sort, with each node's layer pushed to one more
    than the layer of the node being released whenever an edge is consumed.
    Nodes that are never released are part of (or downstream of) a cycle.

    Parameters:
        graph: The graph to layer

    Returns:
        Integer array with the layer of each node, indexed by dense node index

    Raises:
        CycleDetectedError: if the graph contains a directed cycle, or a
                            connection ends on an input node
    """
    num_nodes = graph.total_node_count
    adjacency = defaultdict(list)
    in_degree = np.zeros(num_nodes, dtype=np.int64)

    for src, tgt, _ in graph.iter_connections():
        # Input nodes are pinned to layer 0, so an edge into one always points backwards
        if tgt < graph.input_count:
            raise CycleDetectedError(f"Connection {src}=>{tgt} ends on an input node", src, tgt)
        adjacency[src].append(tgt)
        in_degree[tgt] += 1

    layers = np.zeros(num_nodes, dtype=np.int32)
    queue  = deque(idx for idx in range(num_nodes) if in_degree[idx] == 0)
    visited = 0

    while queue:
        node_idx = queue.popleft()
        visited += 1

        for neighbor in adjacency[node_idx]:
            layers[neighbor] = max(layers[neighbor], layers[node_idx] + 1)
            in_degree[neighbor] -= 1
            if in_degree[neighbor] == 0:
                queue.append(neighbor)

    if visited < num_nodes:
        # Unreleased nodes lie on a cycle, or downstream of one
        stuck = [int(idx) for idx in np.flatnonzero(in_degree > 0)]
        raise CycleDetectedError(f"Graph contains a cycle; nodes {stuck} cannot be layered")

    return layers

def build_acyclic_graph(graph: DirectedGraph, node_id_map: NodeIdMap) -> tuple[AcyclicGraph, DictionaryNodeIdMap]:
    """
    Renumber a cycle-free graph by layer and build its execution plan.

    Parameters:
        graph:       The graph to convert; must not contain cycles
        node_id_map: The map that produced 'graph' from genome node IDs

    Returns:
        The AcyclicGraph, and a NodeIdMap from genome node IDs directly to the
        AcyclicGraph's node indices (only the input nodes are fixed)

    Raises:
        CycleDetectedError: if the graph contains a cycle
    """
    layers      = compute_layers(graph)
    input_count = graph.input_count
    num_nodes   = graph.total_node_count

    # Inputs stay at the head; everybody else is ordered by (layer, current index)
    others    = sorted(range(input_count, num_nodes), key=lambda idx: (layers[idx], idx))
    new_order = list(range(input_count)) + others

    new_idx_by_old = np.empty(num_nodes, dtype=np.int32)
    new_idx_by_old[new_order] = np.arange(num_nodes, dtype=np.int32)
    node_layers = layers[new_order]

    src = new_idx_by_old[graph.source_ids]
    tgt = new_idx_by_old[graph.target_ids]

    # Sorting by source index groups connections by source layer, since layers are contiguous
    order   = np.lexsort((tgt, src))
    src     = src[order]
    tgt     = tgt[order]
    weights = graph.weights[order]

    for s, t in zip(src, tgt):
        assert node_layers[s] < node_layers[t], "connection does not go forward in layer order"

    layer_count = int(node_layers.max()) + 1 if num_nodes else 0
    conn_layers = node_layers[src]
    layer_array = [LayerInfo(int(np.count_nonzero(node_layers <= k)),
                             int(np.count_nonzero(conn_layers <= k)))
                   for k in range(layer_count)]

    output_node_idx_array = new_idx_by_old[input_count:input_count + graph.output_count]

    renumbered = DirectedGraph(num_nodes, input_count, graph.output_count, src, tgt, weights)
    acyclic    = AcyclicGraph(renumbered, layer_array, output_node_idx_array, node_layers)

    acyclic_map = DictionaryNodeIdMap(input_count,
                                      {node_id: int(new_idx_by_old[idx])
                                       for node_id, idx in node_id_map.items() if node_id >= input_count})

    logger.debug("Built %r with %d layers", acyclic, acyclic.layer_count)
    return acyclic, acyclic_map
