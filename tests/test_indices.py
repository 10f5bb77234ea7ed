import pytest

from dockstate.indices import NodeIndex, SurfaceIndex, TabIndex


def test_root_is_zero_and_has_no_parent():
    root = NodeIndex.root()
    assert root.value == 0
    assert root.parent() is None


@pytest.mark.parametrize("n", [0, 1, 2, 5, 13, 100])
def test_children_point_back_to_parent(n):
    node = NodeIndex(n)
    assert node.left().parent() == node
    assert node.right().parent() == node
    assert node.left().is_left()
    assert node.right().is_right()
    assert not node.left().is_right()
    assert not node.right().is_left()


@pytest.mark.parametrize("n", [0, 1, 2, 6, 20])
def test_children_are_one_level_deeper(n):
    node = NodeIndex(n)
    assert node.left().level() == node.level() + 1
    assert node.right().level() == node.level() + 1


def test_root_level_counts_itself():
    assert NodeIndex.root().level() == 1


@pytest.mark.parametrize("n", [0, 3, 4])
def test_children_at_zero_is_self(n):
    assert list(NodeIndex(n).children_at(0)) == [n]


@pytest.mark.parametrize("n", [0, 1, 2, 7])
def test_children_at_one_are_direct_children(n):
    node = NodeIndex(n)
    assert list(node.children_at(1)) == [node.left().value, node.right().value]


@pytest.mark.parametrize("n", [0, 1, 2, 5])
@pytest.mark.parametrize("level", [1, 2, 3, 4])
def test_left_and_right_halves_make_the_whole(n, level):
    node = NodeIndex(n)
    whole = list(node.children_at(level))
    assert list(node.children_left(level)) + list(node.children_right(level)) == whole
    assert len(whole) == 2 ** level


@pytest.mark.parametrize("level", [1, 2, 3])
def test_children_left_descend_from_left_child(level):
    node = NodeIndex(2)
    assert list(node.children_left(level)) == list(node.left().children_at(level - 1))
    assert list(node.children_right(level)) == list(node.right().children_at(level - 1))


def test_indices_usable_as_list_positions():
    items = ["a", "b", "c"]
    assert items[NodeIndex(2)] == "c"
    assert items[TabIndex(1)] == "b"


def test_negative_index_rejected():
    with pytest.raises(ValueError):
        NodeIndex(-1)
    with pytest.raises(ValueError):
        TabIndex(-3)


def test_non_int_rejected():
    with pytest.raises(TypeError):
        SurfaceIndex(1.5)


def test_tab_index_ordering():
    assert TabIndex(1) < TabIndex(2)
    assert TabIndex(2) <= TabIndex(2)
    assert sorted([TabIndex(3), TabIndex(0)]) == [TabIndex(0), TabIndex(3)]


def test_surface_main():
    assert SurfaceIndex.main() == SurfaceIndex(0)
    assert SurfaceIndex.main().is_main()
    assert not SurfaceIndex(1).is_main()


def test_indices_hashable_and_distinct_types():
    assert {NodeIndex(1), NodeIndex(1)} == {NodeIndex(1)}
    assert NodeIndex(1) != TabIndex(1)