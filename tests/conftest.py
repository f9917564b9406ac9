from operator import methodcaller
from pathlib import Path
from typing import Any, Mapping, Optional

import pytest

from fstree import Directory


class Tree:
    root: Directory
    chdir: bool

    def __init__(
        self, children: "Optional[Mapping[str, Any]]" = None, *, chdir: bool = False
    ) -> None:
        self.root = Directory(children if children is not None else ())
        self.chdir = chdir

    @classmethod
    def from_marker(cls, marker: pytest.Mark) -> "Tree":
        __tracebackhide__ = methodcaller("errisinstance", TypeError)
        return cls(*marker.args, **marker.kwargs)

    def setup(self, path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        if self.chdir:
            monkeypatch.chdir(path)
        for name in self.root:
            self.root[name].create(path / name)


@pytest.fixture(name="tree_path")
def tree_path_fixture(
    tmp_path_factory: pytest.TempPathFactory,
    request: pytest.FixtureRequest,
    monkeypatch: pytest.MonkeyPatch,
) -> Path:
    tree_path = tmp_path_factory.mktemp("tree")

    marker = request.node.get_closest_marker("tree")
    tree = Tree.from_marker(marker)
    tree.setup(tree_path, monkeypatch)

    return tree_path
