import os
from typing import Final

SEPARATORS: Final[str] = "/\\"


def level_name(path: str | os.PathLike[str]) -> str:
    """
    Derive a level name from the path of its source image.

    Everything up to and including the last ``/`` or ``\\`` is dropped, as is the
    extension. A name without any ``.`` yields an empty string; a ``.`` that only
    occurs in the directory part leaves the file name untouched.

    >>> level_name("levels/forest.tga")
    'forest'
    >>> level_name("abcname")
    ''
    """
    name = os.fspath(path)
    start = max(name.rfind(separator) for separator in SEPARATORS) + 1
    end = name.rfind(".")
    if end == -1:
        return ""
    if end < start:
        return name[start:]
    return name[start:end]
