import pytest

from marytree.tree import LockingTree

NAMES = ["World", "Asia", "Africa", "China", "India", "SouthAfrica", "Egypt"]


@pytest.fixture
def tree():
    return LockingTree(NAMES, 2)


def test_structure(tree):
    assert len(tree) == len(NAMES)
    assert tree["World"].parent is None
    assert [c.name for c in tree["World"].children] == ["Asia", "Africa"]
    assert [c.name for c in tree["Asia"].children] == ["China", "India"]
    assert [c.name for c in tree["Africa"].children] == ["SouthAfrica", "Egypt"]


def test_ancestors(tree):
    assert [a.name for a in tree["China"].ancestors()] == ["Asia", "World"]
    assert list(tree["World"].ancestors()) == []


def test_contains(tree):
    assert "Egypt" in tree
    assert "Mars" not in tree


def test_unknown_name_raises(tree):
    with pytest.raises(KeyError):
        tree.lock("Mars", 1)


def test_invalid_arity():
    with pytest.raises(ValueError):
        LockingTree(["a", "b"], 0)


def test_duplicate_names():
    with pytest.raises(ValueError):
        LockingTree(["a", "b", "a"], 2)


def test_lock_updates_ancestor_counts(tree):
    assert tree.lock("China", 9)
    assert tree["China"].locked_by == 9
    assert tree["Asia"].locked_descendants == 1
    assert tree["World"].locked_descendants == 1
    assert tree["Africa"].locked_descendants == 0


def test_lock_twice_fails(tree):
    assert tree.lock("China", 9)
    assert not tree.lock("China", 9)


def test_lock_blocked_by_ancestor(tree):
    assert tree.lock("Asia", 1)
    assert not tree.lock("China", 2)
    assert not tree["China"].is_locked


def test_lock_blocked_by_descendant(tree):
    assert tree.lock("India", 1)
    assert not tree.lock("World", 1)
    assert not tree["World"].is_locked


def test_unlock(tree):
    assert tree.lock("Egypt", 3)
    assert not tree.unlock("Egypt", 4)
    assert tree.unlock("Egypt", 3)
    assert not tree["Egypt"].is_locked
    assert tree["Africa"].locked_descendants == 0
    assert tree["World"].locked_descendants == 0


def test_unlock_not_locked(tree):
    assert not tree.unlock("Egypt", 3)


def test_upgrade_worked_example(tree):
    assert tree.lock("China", 9)
    assert tree.lock("India", 9)
    assert tree.upgrade("Asia", 9)
    assert tree["Asia"].locked_by == 9
    assert not tree["China"].is_locked
    assert not tree["India"].is_locked
    assert not tree.unlock("India", 9)
    assert tree["World"].locked_descendants == 1
    assert tree["Asia"].locked_descendants == 0


def test_upgrade_other_user_fails(tree):
    assert tree.lock("China", 9)
    assert tree.lock("India", 8)
    assert not tree.upgrade("Asia", 9)
    assert tree["China"].locked_by == 9
    assert tree["India"].locked_by == 8
    assert not tree["Asia"].is_locked


def test_upgrade_without_locked_descendants(tree):
    assert not tree.upgrade("Asia", 1)


def test_upgrade_locked_node_fails(tree):
    assert tree.lock("Asia", 1)
    assert not tree.upgrade("Asia", 1)


def test_upgrade_deep(tree):
    assert tree.lock("China", 5)
    assert tree.lock("SouthAfrica", 5)
    assert tree.upgrade("World", 5)
    assert tree["World"].locked_by == 5
    assert all(not tree[n].is_locked for n in NAMES[1:])
    assert all(tree[n].locked_descendants == 0 for n in NAMES)