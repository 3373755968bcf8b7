"""
Graph Visualization Module

Renders a decoded graph with Graphviz. Nodes are labelled with their original
genome IDs (recovered through the inverse of the node ID map) alongside their
dense index, which makes it possible to relate a network back to its genome.
"""

import graphviz  # type: ignore

from phenonet.activations           import ActivationFunction
from phenonet.graphs.acyclic        import AcyclicGraph
from phenonet.graphs.directed_graph import DirectedGraph
from phenonet.graphs.node_id_map    import NodeIdMap

# Node colors and shapes
_NODE_ATTRS = {
    'INPUT':  {'fillcolor': 'lightgrey', 'color': 'black', 'style': 'filled', 'shape': 'circle', 'penwidth': '0.5', 'fontsize': '7'},
    'HIDDEN': {'fillcolor': 'lightblue', 'color': 'black', 'style': 'filled', 'shape': 'circle', 'penwidth': '0.5', 'fontsize': '7'},
    'OUTPUT': {'fillcolor': 'white'    , 'color': 'black', 'style': 'filled', 'shape': 'circle', 'penwidth': '0.5', 'fontsize': '7'}
}

def _output_indices(graph: DirectedGraph) -> list[int]:
    if isinstance(graph, AcyclicGraph):
        return [int(idx) for idx in graph.output_node_idx_array]
    return list(range(graph.input_count, graph.input_count + graph.output_count))

def render_graph(graph      : DirectedGraph,
                 node_id_map: NodeIdMap,
                 activation : ActivationFunction | None = None,
                 view       : bool = False) -> graphviz.Digraph:
    """
    Render a graph using Graphviz.

    Acyclic graphs are drawn one layer per column; other graphs are drawn with
    inputs on the left and outputs on the right.

    Parameters:
        graph:       The graph to render
        node_id_map: The map from genome node IDs to the graph's node indices
        activation:  If given, its code is shown on every non-input node
        view:        If True, automatically open the rendering

    Returns:
        graphviz.Digraph object representing the graph
    """
    node_id_by_idx = node_id_map.create_inverse_map()
    output_indices = set(_output_indices(graph))

    def node_type(idx: int) -> str:
        if idx < graph.input_count:
            return 'INPUT'
        return 'OUTPUT' if idx in output_indices else 'HIDDEN'

    def add_node(container, idx: int) -> None:
        kind  = node_type(idx)
        attrs = _NODE_ATTRS[kind].copy()
        label = f"id={node_id_by_idx.map(idx)}\\nidx={idx}"
        if activation is not None and kind != 'INPUT':
            label += f"\\n{activation.code}"
        attrs['label'] = label
        container.node(str(idx), **attrs)

    dot = graphviz.Digraph()
    dot.attr(rankdir='LR')  # Left to right layout

    if isinstance(graph, AcyclicGraph):
        node_start = 0
        for layer_idx, layer in enumerate(graph.layer_array):
            with dot.subgraph(name=f'cluster_layer_{layer_idx}') as cluster:
                cluster.attr(rank='same', label=f'Layer {layer_idx}', style='dashed', fontsize='7')
                for idx in range(node_start, layer.end_node_idx):
                    add_node(cluster, idx)
            node_start = layer.end_node_idx
    else:
        with dot.subgraph(name='cluster_input') as cluster:
            cluster.attr(rank='source', label='Inputs', style='invisible')
            for idx in range(graph.input_count):
                add_node(cluster, idx)
        with dot.subgraph(name='cluster_output') as cluster:
            cluster.attr(rank='sink', label='Outputs', style='invisible')
            for idx in sorted(output_indices):
                add_node(cluster, idx)
        for idx in range(graph.input_count + graph.output_count, graph.total_node_count):
            add_node(dot, idx)

    for src, tgt, weight in graph.iter_connections():
        dot.edge(str(src), str(tgt),
                 label     = f"{weight:.2f}",
                 color     = 'blue' if weight > 0 else 'red',
                 fontsize  = '6',
                 penwidth  = str(min(abs(weight) * 2, 5)),
                 arrowsize = '0.5')

    if view:
        dot.view(cleanup=True)

    return dot
