"""Tests for the partial isomorphism checker."""
from itertools import permutations

from eftools.core.graph import make_symmetric_graph
from eftools.game.partial_iso import is_partial_iso


def _homework():
    g1 = make_symmetric_graph({1: [2, 3], 2: [3, 4, 5], 3: [4, 5], 4: [5]})
    g2 = make_symmetric_graph({"a": ["b", "c"], "b": ["c", "d", "e"], "c": [], "d": ["e"]})
    return g1, g2


def _paths():
    # a - b - c   and   x - y - z
    g1 = make_symmetric_graph({"a": ["b"], "b": ["c"]})
    g2 = make_symmetric_graph({"x": ["y"], "y": ["z"]})
    return g1, g2


def test_no_moves_is_trivially_true():
    g1 = make_symmetric_graph({"a": ["b", "c"]})
    assert is_partial_iso(g1, make_symmetric_graph({}), []) is True


def test_single_move_is_trivially_true():
    g1 = make_symmetric_graph({"a": ["b", "c"]})
    g2 = make_symmetric_graph({1: [2]})
    assert is_partial_iso(g1, g2, [("a", 1)]) is True


def test_matching_paths():
    g1, g2 = _paths()
    assert is_partial_iso(g1, g2, [("a", "x"), ("b", "y"), ("c", "z")]) is True


def test_order_of_moves_does_not_matter():
    g1, g2 = _paths()
    moves = [("a", "x"), ("b", "y"), ("c", "z")]
    for perm in permutations(moves):
        assert is_partial_iso(g1, g2, list(perm)) is True

    bad = [("a", "y"), ("b", "x"), ("c", "z")]
    for perm in permutations(bad):
        assert is_partial_iso(g1, g2, list(perm)) is False


def test_broken_adjacency():
    g1 = make_symmetric_graph({"a": ["b"], "b": ["c"], "c": []})
    g2 = make_symmetric_graph({"x": ["y", "z"], "y": ["z"], "z": []})
    assert is_partial_iso(g1, g2, [("a", "x"), ("b", "y"), ("c", "z")]) is False


def test_partial_mapping_of_larger_graph():
    g1 = make_symmetric_graph({"a": ["b"], "b": ["c"], "c": ["d"]})
    g2 = make_symmetric_graph({"x": ["y"], "y": ["z"], "z": ["w"]})
    assert is_partial_iso(g1, g2, [("a", "x"), ("c", "z")]) is True


def test_only_covered_vertices_are_checked():
    # g1: two components, g2: a path; a and c are non-adjacent on both sides
    g1 = make_symmetric_graph({"a": ["b"], "c": ["d"]})
    g2 = make_symmetric_graph({"x": ["y"], "y": ["z"]})
    assert is_partial_iso(g1, g2, [("a", "x"), ("c", "z")]) is True


def test_edge_only_on_right_side_is_caught():
    g1 = {"a": [], "b": []}
    g2 = make_symmetric_graph({"x": ["y"]})
    assert is_partial_iso(g1, g2, [("a", "x"), ("b", "y")]) is False


def test_missing_vertices_read_as_isolated():
    g1 = make_symmetric_graph({"a": ["b"]})
    g2 = make_symmetric_graph({"x": ["y"]})
    assert is_partial_iso(g1, g2, [("p", "q"), ("r", "s")]) is True


def test_homework_moves():
    g1, g2 = _homework()
    assert is_partial_iso(g1, g2, [(3, "c"), (1, "e")]) is False


def test_homework_moves_flipped():
    g1, g2 = _homework()
    assert is_partial_iso(g2, g1, [("c", 3), ("e", 1)]) is False


def test_numeric_and_text_ids_agree():
    g1, g2 = _homework()
    assert is_partial_iso(g1, g2, [(1, "a"), (2, "b")]) == is_partial_iso(
        g1, g2, [("1", "a"), ("2", "b")]
    )


def test_direction_invariance():
    g1, g2 = _homework()
    left = [1, 2, 3, 4, 5]
    right = ["a", "b", "c", "d", "e"]
    for x1, y1 in [(1, "a"), (3, "c"), (4, "d")]:
        for x2 in left:
            for y2 in right:
                if x2 == x1 or y2 == y1:
                    continue
                moves = [(x1, y1), (x2, y2)]
                flipped = [(y, x) for x, y in moves]
                assert is_partial_iso(g1, g2, moves) == is_partial_iso(g2, g1, flipped)


def test_extensions_of_fixed_move():
    g1, g2 = _homework()
    adj1 = {u.key: {v.key for v in ns} for u, ns in g1.items()}
    adj2 = {u.key: {v.key for v in ns} for u, ns in g2.items()}
    for x in ["2", "3", "4", "5"]:
        for y in ["a", "b", "d", "e"]:
            expected = ("1" in adj1[x]) == ("c" in adj2[y])
            assert is_partial_iso(g1, g2, [(1, "c"), (x, y)]) is expected
            assert is_partial_iso(g1, g2, [(x, y), (1, "c")]) is expected
            assert is_partial_iso(g2, g1, [("c", 1), (y, x)]) is expected
