import pytest

from astrelis.file import File, FileError
from astrelis.filetree import FileTree, Node


@pytest.fixture
def tree_dir(tmp_path):
    (tmp_path / "a.txt").write_text("a")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "b.txt").write_text("b")
    deep = sub / "deep"
    deep.mkdir()
    (deep / "c.txt").write_text("c")
    return tmp_path


def test_root_children(tree_dir):
    tree = FileTree(tree_dir)
    assert tree.root.file == File(tree_dir)
    assert [n.file.filename() for n in tree.root.nodes] == ["a.txt", "sub"]


def test_files_lists_every_regular_file(tree_dir):
    names = sorted(f.filename() for f in FileTree(tree_dir).files())
    assert names == ["a.txt", "b.txt", "c.txt"]


def test_walk_covers_all_entries(tree_dir):
    nodes = list(FileTree(tree_dir).root.walk())
    assert len(nodes) == 6
    assert nodes[0].file == File(tree_dir)


def test_find(tree_dir):
    tree = FileTree(tree_dir)
    found = tree.find(tree_dir / "sub" / "deep" / "c.txt")
    assert found.file.filename() == "c.txt"
    assert found.nodes == []
    assert tree.find(tree_dir / "nope") is None


def test_node_equality_by_file():
    assert Node(File("x")) == Node(File("x"), [Node(File("x/y"))])
    assert Node(File("x")) != Node(File("y"))


def test_root_must_be_directory(tmp_path):
    target = tmp_path / "f"
    target.write_text("")
    with pytest.raises(FileError):
        FileTree(target)


def test_empty_directory(tmp_path):
    tree = FileTree(tmp_path)
    assert tree.root.nodes == []
    assert list(tree.files()) == []