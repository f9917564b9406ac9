import os
import sys
from typing import Optional, Tuple, Union

if sys.version_info >= (3, 10):
    from typing import TypeAlias
else:
    from typing_extensions import TypeAlias

StrPath: TypeAlias = Union[str, "os.PathLike[str]"]


def _display(s: str) -> str:
    return os.fsencode(s).decode(sys.getfilesystemencoding(), "replace")


class InvalidNameError(ValueError):
    """Raised when a :class:`Directory` key is not a single path segment.

    :param reason: Why the name was rejected.
    :param name: The rejected name.
    """

    def __init__(self, reason: Optional[str] = None, *, name: str) -> None:
        if reason is None:
            super().__init__()
        else:
            super().__init__(reason)
        self.name = name

    def __reduce__(self) -> Tuple[object, ...]:
        cls = type(self)
        return cls.__new__, (cls, *self.args), self.__dict__

    def __str__(self) -> str:
        msg = f"invalid entry name {_display(self.name)!r}"
        if self.args:
            msg = f"{msg}: {self.args[0]}"
        return msg


def name_key(name: StrPath) -> str:
    if isinstance(name, os.PathLike):
        return os.fspath(name)
    return name


def check_name(name: object) -> str:
    if isinstance(name, os.PathLike):
        name = os.fspath(name)

    if not isinstance(name, str):
        raise TypeError(
            "name must be a str object or an os.PathLike object returning "
            f"str, not {type(name)}"
        )

    if name in ("", os.curdir, os.pardir):
        raise InvalidNameError("not a file or directory name", name=name)
    if "\0" in name:
        raise InvalidNameError("embedded null character", name=name)
    for sep in (os.sep, os.altsep):
        if sep is not None and sep in name:
            raise InvalidNameError(f"contains path separator {sep!r}", name=name)
    if os.path.splitdrive(name)[0]:
        raise InvalidNameError("has a drive prefix", name=name)

    return name
