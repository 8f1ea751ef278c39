import pytest

from wiki_pathfinder.search import Frontier, path_depth

pytestmark = pytest.mark.unit


def test_pops_shallowest_first():
    frontier = Frontier()
    frontier.push(("A", "B", "C"))
    frontier.push(("A",))
    frontier.push(("A", "D"))

    assert [path_depth(frontier.pop()) for _ in range(3)] == [0, 1, 2]
    assert frontier.pop() is None


def test_equal_depth_keeps_insertion_order():
    frontier = Frontier()
    for last in ["X", "Y", "Z"]:
        frontier.push(("A", last))

    assert [frontier.pop()[-1] for _ in range(3)] == ["X", "Y", "Z"]


def test_explicit_cost_overrides_depth():
    frontier = Frontier()
    frontier.push(("A", "B"), cost=5)
    frontier.push(("A", "B", "C", "D"), cost=1)

    assert frontier.pop() == ("A", "B", "C", "D")
    assert len(frontier) == 1
    assert frontier


def test_empty_frontier_is_falsy():
    assert not Frontier()
