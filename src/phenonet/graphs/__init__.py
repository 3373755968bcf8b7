"""
Graphs Package

Normalized graph representations that sit between a genome and the network
executing it: the translation of sparse node IDs into dense array indices, the
weighted directed graph over those indices, and the layered execution plan of
acyclic graphs.

Modules:
    node_id_map:    NodeIdMap interface and its dictionary/array implementations
    directed_graph: DirectedGraph class and its builder
    acyclic:        Longest-path layering and the AcyclicGraph execution plan
    visualize:      Graphviz rendering of decoded graphs

Exported Classes:
    NodeIdMap:           Abstract node ID translation
    DictionaryNodeIdMap: Identity range plus dictionary lookup
    ArrayNodeIdMap:      Array-backed node ID translation
    DirectedGraph:       Node count and weighted connections over dense indices
    AcyclicGraph:        DirectedGraph renumbered and grouped by layer
    LayerInfo:           Boundaries of one layer of an AcyclicGraph
"""

from phenonet.graphs.node_id_map    import NodeIdMap, DictionaryNodeIdMap, ArrayNodeIdMap
from phenonet.graphs.directed_graph import DirectedGraph, build_directed_graph
from phenonet.graphs.acyclic        import AcyclicGraph, LayerInfo, build_acyclic_graph, compute_layers
from phenonet.graphs.visualize      import render_graph

__all__ = ['NodeIdMap',
           'DictionaryNodeIdMap',
           'ArrayNodeIdMap',
           'DirectedGraph',
           'AcyclicGraph',
           'LayerInfo',
           'build_directed_graph',
           'build_acyclic_graph',
           'compute_layers',
           'render_graph']
