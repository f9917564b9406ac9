from ._tree import Directory, Entry, File, create
from ._types import InvalidNameError, StrPath

Directory.__module__ = __name__
Entry.__module__ = __name__
File.__module__ = __name__
InvalidNameError.__module__ = __name__
create.__module__ = __name__

__all__ = (
    "Directory",
    "Entry",
    "File",
    "InvalidNameError",
    "StrPath",
    "create",
)
