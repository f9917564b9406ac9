import logging
import os
import sys
from collections.abc import Mapping
from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    Iterator,
    MutableMapping,
    Protocol,
    Tuple,
    Union,
    runtime_checkable,
)

if sys.version_info >= (3, 10):
    from typing import TypeAlias
else:
    from typing_extensions import TypeAlias

from ._types import StrPath, check_name, name_key

log = logging.getLogger(__name__)


@runtime_checkable
class Entry(Protocol):
    """Anything that can be materialized at a filesystem path.

    :class:`File` and :class:`Directory` are the two built-in entries, but
    any object with a matching :meth:`create` method can be placed in a
    :class:`Directory`.
    """

    def create(self, path: StrPath) -> None:
        """Create this entry at *path*, which must not exist yet.

        :raises FileExistsError: If *path* already exists.
        :raises OSError: Any other error reported by the filesystem.
        """
        ...


class File:
    """A file containing the textual rendering of *value*.

    :param value: Any object. Its rendering is computed when the file is
        created, not when the :class:`File` is constructed.
    :param render: Function used to turn *value* into text.
    :param encoding: Encoding used when writing the text.

    .. doctest::

        >>> File("Hello World!").contents
        'Hello World!'
        >>> File(3.5, render="{:.2f}".format).contents
        '3.50'
    """

    value: object
    render: "Callable[[Any], str]"
    encoding: str

    def __init__(
        self,
        value: object = "",
        *,
        render: "Callable[[Any], str]" = str,
        encoding: str = "utf-8",
    ) -> None:
        self.value = value
        self.render = render
        self.encoding = encoding

    @property
    def contents(self) -> str:
        """The text written by :meth:`create`."""
        return self.render(self.value)

    def create(self, path: StrPath) -> None:
        """Write :attr:`contents` to a new file at *path*.

        The text is rendered and encoded before the file is opened, so a
        failing *render* or an unencodable character creates nothing.

        :raises TypeError: If *render* does not return a :class:`str`.
        """
        contents: object = self.contents
        if not isinstance(contents, str):
            raise TypeError(
                f"render must return str, not {type(contents).__name__}"
            )
        data = contents.encode(self.encoding)
        # "x" fails if the file exists
        with open(path, "xb") as f:
            f.write(data)
        log.debug("created file %s (%d characters)", os.fspath(path), len(contents))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, File):
            return NotImplemented
        return (self.value, self.render, self.encoding) == (
            other.value,
            other.render,
            other.encoding,
        )

    def __repr__(self) -> str:
        cls = type(self)
        parts = [repr(self.value)]
        if self.render is not str:
            parts.append(f"render={self.render!r}")
        if self.encoding != "utf-8":
            parts.append(f"encoding={self.encoding!r}")
        return f"{cls.__name__}({', '.join(parts)})"


EntryT: TypeAlias = Union[Entry, str, Mapping[str, Any]]


def coerce_entry(v: object) -> Entry:
    if isinstance(v, str):
        return File(v)

    # Directory is itself a Mapping, so check Entry first
    if isinstance(v, Entry):
        return v

    if isinstance(v, Mapping):
        return Directory(v)

    raise TypeError(
        f"Expected an Entry, str or mapping, got {type(v).__name__} "
        "(wrap other values in File)"
    )


class Directory(MutableMapping[str, EntryT]):
    """A :class:`~collections.abc.MutableMapping` of names to entries.

    Accepts the same arguments as :class:`dict`. Values are coerced on
    insertion: strings become :class:`File` objects and plain mappings
    become nested :class:`Directory` objects. Names must be a single path
    segment, otherwise :exc:`InvalidNameError` is raised.

    .. doctest::

        >>> d = Directory({"src": {"main.py": "print('hi')"}}, README="hi")
        >>> d["README"]
        File('hi')
        >>> type(d["src"]).__name__
        'Directory'
    """

    _children: Dict[str, Entry]

    def __init__(
        self,
        children: "Union[Mapping[str, EntryT], Iterable[Tuple[str, EntryT]]]" = (),
        **kwargs: EntryT,
    ) -> None:
        self._children = {}
        self.update(children, **kwargs)

    def __getitem__(self, name: StrPath) -> Entry:
        return self._children[name_key(name)]

    def __setitem__(self, name: StrPath, value: EntryT) -> None:
        self._children[check_name(name)] = coerce_entry(value)

    def __delitem__(self, name: StrPath) -> None:
        del self._children[name_key(name)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._children)

    def __len__(self) -> int:
        return len(self._children)

    def create(self, path: StrPath) -> None:
        """Create a directory at *path*, then each child beneath it.

        The first error raised by a child propagates and the remaining
        children are skipped. Nothing already created is removed.
        """
        os.mkdir(path)
        log.debug("created directory %s", os.fspath(path))
        for name, child in self._children.items():
            child.create(os.path.join(path, name))

    def __repr__(self) -> str:
        cls = type(self)
        return f"{cls.__name__}({self._children!r})"


def create(entry: EntryT, path: StrPath) -> None:
    """Materialize *entry* at *path*.

    *entry* is coerced like a :class:`Directory` value, so a plain
    :class:`dict` or :class:`str` may be passed. *path* must not exist and
    its parent must. Nothing is rolled back if creation fails part way
    through.

    .. doctest::

        >>> import os, tempfile
        >>> root = tempfile.mkdtemp()
        >>> create({"a": "a", "b": {}}, os.path.join(root, "tree"))
        >>> sorted(os.listdir(os.path.join(root, "tree")))
        ['a', 'b']
    """
    coerce_entry(entry).create(path)
