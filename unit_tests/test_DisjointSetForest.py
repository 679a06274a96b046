import pytest
from pyregionlabel.DisjointSetForest import DisjointSetForest


def test_initial_classes():
    forest = DisjointSetForest(5)
    assert len(forest) == 5
    assert forest.num_nodes == 5
    for i in range(5):
        assert forest.root(i) == i
        assert forest.is_connected(i, i)


def test_empty_forest():
    forest = DisjointSetForest(0)
    assert len(forest) == 0
    with pytest.raises(IndexError):
        forest.root(0)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        DisjointSetForest(-1)


def test_union_merges_classes():
    forest = DisjointSetForest(4)
    forest.union(0, 1)
    assert forest.is_connected(0, 1)
    assert not forest.is_connected(0, 2)
    assert len(forest) == 3
    assert forest.root(0) == forest.root(1)


def test_union_same_class_is_noop():
    forest = DisjointSetForest(3)
    forest.union(0, 1)
    forest.union(1, 0)
    forest.union(2, 2)
    assert len(forest) == 2


def test_find_is_root():
    forest = DisjointSetForest(3)
    forest.union(2, 0)
    assert forest.find(0) == forest.root(0) == forest.root(2)


def test_union_is_transitive():
    forest = DisjointSetForest(6)
    forest.union(0, 1)
    forest.union(2, 3)
    forest.union(1, 3)
    assert forest.all_connected([0, 1, 2, 3])
    assert not forest.is_connected(0, 4)
    assert len(forest) == 3


def test_union_all():
    forest = DisjointSetForest(6)
    forest.union_all([1, 2, 3])
    assert forest.all_connected([1, 2, 3])
    assert len(forest) == 4
    forest.union_all([])
    assert len(forest) == 4


def test_all_connected_true_and_false():
    forest = DisjointSetForest(4)
    forest.union(0, 1)
    assert forest.all_connected([0, 1]) is True
    assert forest.all_connected([0, 2]) is False
    assert forest.all_connected([]) is True


def test_out_of_range_node():
    forest = DisjointSetForest(3)
    with pytest.raises(IndexError):
        forest.union(0, 3)
    with pytest.raises(IndexError):
        forest.root(-1)


def test_path_compression_flattens_chain():
    n = 1000
    forest = DisjointSetForest(n)
    for i in range(n - 1):
        forest.union(i, i + 1)
    root = forest.root(0)
    assert len(forest) == 1
    assert all(forest.root(i) == root for i in range(n))
    # every node now points directly at the root
    assert all(forest.parent[i] == root for i in range(n))


def test_rank_bounds_tree_height():
    n = 1 << 10
    forest = DisjointSetForest(n)
    size = 1
    while size < n:
        for start in range(0, n, 2 * size):
            forest.union(start, start + size)
        size *= 2
    assert len(forest) == 1
    assert max(forest.rank) <= 10
