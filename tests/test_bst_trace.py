import pytest

from structkit.bst_trace import TracingBST, main

VALUES = [50, 30, 20, 40, 70, 60, 80]


@pytest.fixture
def tree():
    bst = TracingBST()
    for value in VALUES:
        bst.insert(value)
    bst.trace.clear()
    return bst


def test_insert_into_empty_tree_trace():
    bst = TracingBST()
    bst.insert(50)
    assert bst.trace == [
        "Entering insert with data: 50\n",
        "Inserting 50 at a new node\n",
    ]


def test_insert_left_and_right_trace():
    bst = TracingBST()
    bst.insert(50)
    bst.trace.clear()
    bst.insert(30)
    assert bst.trace == [
        "Entering insert with data: 30\n",
        "Going left of 50\n",
        "Entering insert with data: 30\n",
        "Inserting 30 at a new node\n",
        "Exiting insert with data: 30\n",
    ]
    bst.trace.clear()
    bst.insert(70)
    assert "Going right of 50\n" in bst.trace


def test_duplicate_insert_changes_nothing():
    bst = TracingBST()
    bst.insert(50)
    bst.insert(50)
    assert bst.inorder() == [50]
    assert bst.root.left is None and bst.root.right is None


def test_inorder_sorted(tree):
    assert tree.inorder() == sorted(VALUES)


def test_preorder_starts_with_root(tree):
    values = tree.preorder()
    assert values[0] == VALUES[0]
    assert sorted(values) == sorted(VALUES)


def test_postorder_ends_with_root(tree):
    values = tree.postorder()
    assert values[-1] == VALUES[0]
    assert sorted(values) == sorted(VALUES)


def test_single_node_inorder_trace():
    bst = TracingBST()
    bst.insert(5)
    bst.trace.clear()
    assert bst.inorder() == [5]
    assert bst.trace == [
        "Entering inorder with node data: 5\n",
        "5 ",
        "Exiting inorder with node data: 5\n",
    ]


def test_trace_entries_balance(tree):
    tree.preorder()
    entering = [t for t in tree.trace if t.startswith("Entering preorder")]
    exiting = [t for t in tree.trace if t.startswith("Exiting preorder")]
    assert len(entering) == len(exiting) == len(VALUES)


def test_empty_traversals():
    bst = TracingBST()
    assert bst.inorder() == []
    assert bst.trace == []


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Entering insert with data: 50\n")
    assert "Inorder traversal: Entering inorder with node data: 50\n" in out
    assert "Postorder traversal: " in out
    assert "Preorder traversal: " in out