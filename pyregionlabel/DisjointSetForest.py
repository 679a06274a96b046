from typing import Iterable, List


class DisjointSetForest:
    """
    A Union-Find (Disjoint Set) data structure over a fixed universe of
    integer ids ``0..n-1``.

    Uses union by rank together with path compression, so any sequence of
    operations runs in amortised near-constant time per operation. Which
    member of a class is reported as its representative is an implementation
    detail: callers should only rely on two ids sharing a root or not.
    """

    def __init__(self, num_nodes: int):
        """
        Initialize the forest with ``num_nodes`` singleton classes.

        Parameters
        ----------
        num_nodes : int
            Size of the universe of ids.
        """

        if num_nodes < 0:
            raise ValueError("num_nodes must be ≥ 0")

        self.parent = list(range(num_nodes))
        self.rank = [0] * num_nodes  # Upper bound on tree height
        self.num_nodes = num_nodes
        self._num_classes = num_nodes

    def root(self, node: int) -> int:
        """
        Find the canonical representative of the class containing the node.

        Parameters
        ----------
        node : int
            The id whose class representative is to be found.

        Returns
        -------
        int
            The representative id.
        """

        if not 0 <= node < self.num_nodes:
            raise IndexError(f"node {node} outside forest of size {self.num_nodes}")

        parent = self.parent
        root = node
        while parent[root] != root:
            root = parent[root]
        # compress the path walked above
        while parent[node] != root:
            parent[node], node = root, parent[node]
        return root

    find = root

    def union(self, node1: int, node2: int) -> None:
        """
        Merge the classes containing node1 and node2.

        Parameters
        ----------
        node1 : int
            First id.
        node2 : int
            Second id.
        """

        root1 = self.root(node1)
        root2 = self.root(node2)

        if root1 == root2:
            return

        # Attach smaller rank tree under the larger rank tree
        if self.rank[root1] < self.rank[root2]:
            root1, root2 = root2, root1
        self.parent[root2] = root1
        if self.rank[root1] == self.rank[root2]:
            self.rank[root1] += 1
        self._num_classes -= 1

    def union_all(self, nodes: Iterable[int]) -> None:
        """
        Merge every given id into a single class.

        Parameters
        ----------
        nodes : Iterable[int]
            Ids to be merged. An empty iterable is a no-op.
        """

        it = iter(nodes)
        first = next(it, None)
        if first is None:
            return
        for node in it:
            self.union(first, node)

    def is_connected(self, node1: int, node2: int) -> bool:
        """
        Check whether two ids are in the same class.

        Returns
        -------
        bool
            True if node1 and node2 share a representative, False otherwise.
        """

        return self.root(node1) == self.root(node2)

    def all_connected(self, nodes: List[int]) -> bool:
        """
        Report whether the given ids form a subset of a single class.

        An empty list has no ids in different classes and so yields True.
        """

        roots = {self.root(node) for node in nodes}
        return len(roots) <= 1

    def __len__(self) -> int:
        """
        Return the number of classes currently in the forest.

        Returns
        -------
        int
            The number of disjoint classes.
        """

        return self._num_classes
