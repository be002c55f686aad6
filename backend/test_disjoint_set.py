"""
Tests for the disjoint-set used to track interchangeable controllers.
"""

from ucca.ir import Controller, DisjointSet, InterchangeableControllers


class TestDisjointSet:

    def test_find_on_unknown_item_returns_item_without_adding(self):
        ds = DisjointSet()
        assert ds.find("a") == "a"
        assert not ds.has("a")
        assert len(ds) == 0

    def test_add_is_idempotent(self):
        ds = DisjointSet()
        ds.add("a")
        ds.add("a")
        assert len(ds) == 1
        assert ds.roots() == ["a"]

    def test_union_adds_missing_items(self):
        ds = DisjointSet()
        root = ds.union("a", "b")
        assert ds.has("a") and ds.has("b")
        assert root in ("a", "b")
        assert ds.find("a") == ds.find("b") == root

    def test_union_of_joined_items_is_noop(self):
        ds = DisjointSet(["a", "b"])
        first = ds.union("a", "b")
        second = ds.union("b", "a")
        assert first == second
        assert len(ds.roots()) == 1

    def test_union_is_transitive(self):
        ds = DisjointSet()
        ds.union("a", "b")
        ds.union("c", "d")
        assert not ds.connected("a", "c")
        ds.union("b", "d")
        assert ds.connected("a", "c")
        assert len({ds.find(x) for x in "abcd"}) == 1

    def test_merge_is_union(self):
        ds = DisjointSet()
        ds.merge("x", "y")
        assert ds.connected("x", "y")

    def test_path_compression_points_at_root(self):
        ds = DisjointSet()
        for a, b in [("a", "b"), ("c", "d"), ("a", "c"), ("e", "f"), ("a", "e")]:
            ds.union(a, b)
        root = ds.find("f")
        for item in "abcdef":
            ds.find(item)
            assert ds._parent[item] == root

    def test_groups_follow_insertion_order(self):
        ds = DisjointSet(["a", "b", "c", "d"])
        ds.union("d", "b")
        assert ds.groups() == [["a"], ["b", "d"], ["c"]]

    def test_roots_one_per_set(self):
        ds = DisjointSet(["a", "b", "c"])
        ds.union("a", "c")
        roots = ds.roots()
        assert len(roots) == 2
        assert "b" in roots

    def test_interchangeable_controllers_alias(self):
        interchangeable = InterchangeableControllers()
        interchangeable.union(Controller("pilot"), Controller("copilot"))
        assert interchangeable.connected(Controller("pilot"), Controller("copilot"))
        assert Controller("pilot") in interchangeable
