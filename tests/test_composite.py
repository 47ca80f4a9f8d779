import pytest

from patterngallery.composite import Component, Composite, Leaf, invoke


@pytest.fixture
def tree():
    root = Composite("root")
    node1 = Composite("treeNode1")
    node2 = Composite("treeNode2")
    node3 = Composite("treeNode3")
    node4 = Composite("treeNode4")
    leaf1 = Leaf("leaf1")
    leaf2 = Leaf("leaf2")
    root.add(node1)
    node1.add(node2)
    node2.add(leaf1)
    root.add(node3)
    node3.add(node4)
    node4.add(leaf2)
    return {"root": root, "node3": node3, "leaf2": leaf2, "node1": node1}


def test_root_processes_whole_tree_in_preorder(tree):
    assert invoke(tree["root"]) == [
        "root",
        "treeNode1",
        "treeNode2",
        "leaf1",
        "treeNode3",
        "treeNode4",
        "leaf2",
    ]


def test_leaf_processes_itself(tree):
    assert invoke(tree["leaf2"]) == ["leaf2"]


def test_subtree(tree):
    assert invoke(tree["node3"]) == ["treeNode3", "treeNode4", "leaf2"]


def test_remove_subtree(tree):
    tree["root"].remove(tree["node1"])
    assert invoke(tree["root"]) == ["root", "treeNode3", "treeNode4", "leaf2"]


def test_remove_drops_every_occurrence():
    node = Composite("n")
    leaf = Leaf("x")
    node.add(leaf)
    node.add(leaf)
    node.remove(leaf)
    assert node.process() == ["n"]


def test_remove_absent_is_ignored():
    node = Composite("n")
    node.add(Leaf("x"))
    node.remove(Leaf("x"))
    assert node.process() == ["n", "x"]


def test_component_is_abstract():
    with pytest.raises(TypeError):
        Component()