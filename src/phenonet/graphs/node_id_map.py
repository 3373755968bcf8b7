"""
Node ID Map Module

A genome identifies its nodes with arbitrary, non-contiguous integer IDs.
An executable network instead stores node values in flat arrays, addressed
by a dense index in [0, N). The classes in this module describe the
translation between the two spaces.

Input nodes are always numbered [0, num_inputs), so their IDs never need
translating. In cyclic networks the output nodes are also fixed, occupying
[num_inputs, num_inputs + num_outputs). In acyclic networks the outputs are
repositioned according to their layer, and are therefore stored in the table
together with the hidden nodes.

Classes:
    NodeIdMap:           Abstract interface for a node ID translation
    DictionaryNodeIdMap: Identity for a fixed range of IDs, dictionary lookup for the rest
    ArrayNodeIdMap:      Array-backed translation, index into the array to map
"""

from abc    import ABC, abstractmethod
from typing import Iterator, Mapping, Sequence

class NodeIdMap(ABC):
    """
    Maps node IDs from a source ID space into a target ID space.

    Public Properties:
        count: Number of mapped node IDs

    Public Methods:
        map(node_id):         Translate one node ID
        create_inverse_map(): Create the map going the other way
    """

    @property
    @abstractmethod
    def count(self) -> int:
        """Total number of mapped node IDs."""
        pass

    @abstractmethod
    def map(self, node_id: int) -> int:
        """
        Map a node ID from the source ID space to the target ID space.

        Parameters:
            node_id: A node ID in the source ID space

        Returns:
            The mapped node ID in the target ID space

        Raises:
            KeyError: if the ID is not part of the mapping
        """
        pass

    @abstractmethod
    def create_inverse_map(self) -> 'NodeIdMap':
        """Create a new NodeIdMap that reverses the current mapping."""
        pass

    @abstractmethod
    def items(self) -> Iterator[tuple[int, int]]:
        """Iterate over (source ID, target ID) pairs, ordered by source ID."""
        pass

    def __getitem__(self, node_id: int) -> int:
        return self.map(node_id)

    def __len__(self) -> int:
        return self.count

class DictionaryNodeIdMap(NodeIdMap):
    """
    A NodeIdMap made of an identity range plus a dictionary.

    IDs in [0, fixed_node_count) map onto themselves and are not stored; only
    IDs at or above 'fixed_node_count' live in the dictionary. Populating and
    querying the dictionary is comparatively expensive, and the fixed range is
    the common case (every input node, and every output node of a cyclic network).
    """

    def __init__(self, fixed_node_count: int, node_idx_by_id: Mapping[int, int]):
        """
        Parameters:
            fixed_node_count: Number of IDs, starting at zero, that map onto themselves
            node_idx_by_id:   Mappings for the IDs outside the fixed range
        """
        # The dictionary must not describe mappings for IDs in the fixed range.
        assert all(node_id >= fixed_node_count for node_id in node_idx_by_id), \
            "node_idx_by_id contains IDs inside the fixed range"

        self._fixed_node_count: int            = fixed_node_count
        self._node_idx_by_id  : dict[int, int] = dict(node_idx_by_id)

    @property
    def fixed_node_count(self) -> int:
        """Number of IDs in the identity-mapped range."""
        return self._fixed_node_count

    @property
    def count(self) -> int:
        return self._fixed_node_count + len(self._node_idx_by_id)

    def map(self, node_id: int) -> int:
        # Input node IDs (and output node IDs, in cyclic networks) are fixed
        if 0 <= node_id < self._fixed_node_count:
            return node_id
        return self._node_idx_by_id[node_id]

    def create_inverse_map(self) -> 'ArrayNodeIdMap':
        node_id_by_idx = [0] * self.count

        for idx in range(self._fixed_node_count):
            node_id_by_idx[idx] = idx

        # Each dictionary value is a dense index, so it addresses the array directly
        for node_id, idx in self._node_idx_by_id.items():
            node_id_by_idx[idx] = node_id

        return ArrayNodeIdMap(node_id_by_idx)

    def items(self) -> Iterator[tuple[int, int]]:
        for node_id in range(self._fixed_node_count):
            yield node_id, node_id
        for node_id in sorted(self._node_idx_by_id):
            yield node_id, self._node_idx_by_id[node_id]

    def __repr__(self):
        return (f"DictionaryNodeIdMap(fixed_node_count={self._fixed_node_count}, "
                f"mapped={len(self._node_idx_by_id)})")

class ArrayNodeIdMap(NodeIdMap):
    """
    A NodeIdMap backed by an array: source ID 'i' maps to 'array[i]'.

    This is the natural form of an inverse map, since its source space is the
    dense index space [0, N).
    """

    def __init__(self, node_id_by_idx: Sequence[int]):
        """
        Parameters:
            node_id_by_idx: Target ID for each source ID in [0, len(node_id_by_idx))
        """
        self._node_id_by_idx: tuple[int, ...] = tuple(int(x) for x in node_id_by_idx)

    @property
    def count(self) -> int:
        return len(self._node_id_by_idx)

    def map(self, node_id: int) -> int:
        if not 0 <= node_id < len(self._node_id_by_idx):
            raise KeyError(node_id)
        return self._node_id_by_idx[node_id]

    def create_inverse_map(self) -> DictionaryNodeIdMap:
        # The leading run of identity mappings becomes the fixed range of the inverse
        fixed_node_count = 0
        for idx, node_id in enumerate(self._node_id_by_idx):
            if idx != node_id:
                break
            fixed_node_count += 1

        node_idx_by_id = {node_id: idx for idx, node_id in enumerate(self._node_id_by_idx)
                          if idx >= fixed_node_count}
        return DictionaryNodeIdMap(fixed_node_count, node_idx_by_id)

    def items(self) -> Iterator[tuple[int, int]]:
        return iter(enumerate(self._node_id_by_idx))

    def __repr__(self):
        return f"ArrayNodeIdMap(count={self.count})"
