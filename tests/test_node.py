import pytest

from dockstate.indices import TabIndex
from dockstate.node import Node, NodeKind
from dockstate.split import Split
from dockstate.window_state import Pos2, Rect, Vec2


def test_leaf_with_holds_tabs():
    node = Node.leaf_with([1, 2, 3, 4, 5, 6])
    assert 4 in list(node.iter_tabs())
    assert node.is_leaf()
    assert node.active == TabIndex(0)
    assert node.get_rect() == Rect.NOTHING


def test_modify_tabs_in_place():
    node = Node.leaf_with([1, 2, 3, 4, 5, 6])
    node.tabs[0] = 7
    node.tabs[5] = 8
    assert node.tabs == [7, 2, 3, 4, 5, 8]


def test_append_tab_increases_count_and_activates():
    node = Node.leaf_with(["a tab"])
    assert node.tabs_count() == 1
    node.append_tab("another tab")
    assert node.tabs_count() == 2
    assert node.tabs[node.active.value] == "another tab"


def test_append_to_non_leaf_raises():
    with pytest.raises(ValueError):
        Node.empty().append_tab("x")


def test_empty_node_properties():
    node = Node.empty()
    assert node.is_empty()
    assert not node.is_leaf()
    assert not node.is_parent()
    assert node.get_rect() is None
    assert node.tabs_count() == 0
    assert list(node.iter_tabs()) == []
    assert node.remove_tab(TabIndex(0)) is None


@pytest.mark.parametrize(
    "split,kind",
    [
        (Split.LEFT, NodeKind.HORIZONTAL),
        (Split.RIGHT, NodeKind.HORIZONTAL),
        (Split.ABOVE, NodeKind.VERTICAL),
        (Split.BELOW, NodeKind.VERTICAL),
    ],
)
def test_split_turns_node_into_parent(split, kind):
    node = Node.leaf_with(["a", "b"])
    old = node.split(split, 0.25)
    assert node.kind is kind
    assert node.is_parent()
    assert node.fraction == 0.25
    assert old.is_leaf()
    assert old.tabs == ["a", "b"]
    assert node.tabs_count() == 0


@pytest.mark.parametrize("fraction", [-0.1, 1.5])
def test_split_rejects_bad_fraction(fraction):
    node = Node.leaf("a")
    with pytest.raises(ValueError):
        node.split(Split.LEFT, fraction)
    assert node.is_leaf()


def test_insert_tab_sets_active():
    node = Node.leaf_with(["a", "c"])
    node.insert_tab(TabIndex(1), "b")
    assert node.tabs == ["a", "b", "c"]
    assert node.active == TabIndex(1)


def test_insert_tab_out_of_range():
    node = Node.leaf_with(["a"])
    with pytest.raises(IndexError):
        node.insert_tab(TabIndex(5), "z")


def test_remove_tab_before_active_shifts_active():
    node = Node.leaf_with(["a", "b", "c"])
    node.append_tab("d")
    active_tab = node.tabs[node.active.value]
    removed = node.remove_tab(TabIndex(0))
    assert removed == "a"
    assert node.tabs[node.active.value] == active_tab


def test_remove_only_tab_keeps_active_zero():
    node = Node.leaf("a")
    assert node.remove_tab(TabIndex(0)) == "a"
    assert node.active == TabIndex(0)
    assert node.tabs_count() == 0


def test_remove_tab_out_of_range():
    node = Node.leaf("a")
    with pytest.raises(IndexError):
        node.remove_tab(TabIndex(3))


def test_set_rect():
    rect = Rect.from_min_size(Pos2(1.0, 2.0), Vec2(3.0, 4.0))
    node = Node.leaf("a")
    node.set_rect(rect)
    assert node.get_rect() == rect
    empty = Node.empty()
    empty.set_rect(rect)
    assert empty.get_rect() is None


def test_filter_map_tabs_drops_and_maps():
    node = Node.leaf_with([1, 2, 3])
    mapped = node.filter_map_tabs(lambda t: str(t) if t % 2 == 1 else None)
    assert mapped.tabs == ["1", "3"]
    assert node.tabs == [1, 2, 3]


def test_filter_map_to_nothing_gives_empty():
    node = Node.leaf_with([1, 2])
    assert node.filter_map_tabs(lambda t: None).is_empty()


def test_map_tabs_on_parent_keeps_fraction():
    node = Node.leaf("a")
    node.split(Split.BELOW, 0.5)
    mapped = node.map_tabs(str.upper)
    assert mapped.is_vertical()
    assert mapped.fraction == 0.5


def test_filter_tabs():
    node = Node.leaf_with(["tab1", "tab2", "outlier"])
    assert node.filter_tabs(lambda t: t.startswith("tab")).tabs == ["tab1", "tab2"]


def test_retain_tabs():
    node = Node.leaf_with(["tab1", "outlier"])
    node.retain_tabs(lambda t: t.startswith("tab"))
    assert node.tabs == ["tab1"]
    node.retain_tabs(lambda t: False)
    assert node.is_empty()