"""Companion file name matching.

Classifies C/C++ files as headers or sources and builds the glob pattern that
matches the companion file in the opposite class.
"""

from enum import Enum
from pathlib import Path
from typing import Callable, Final, NamedTuple, Sequence, TypeVar

from switcher.errors import NotAProjectFileError

HEADER_EXTENSIONS: Final[list[str]] = ["h", "hpp", "hh", "hxx"]
SOURCE_EXTENSIONS: Final[list[str]] = ["c", "cpp", "cc", "cxx"]

T = TypeVar("T")


class ExtensionClass(Enum):
    """Kind of C/C++ file, with the extensions belonging to it."""

    HEADER = "header"
    SOURCE = "source"

    @property
    def extensions(self) -> list[str]:
        return HEADER_EXTENSIONS if self is ExtensionClass.HEADER else SOURCE_EXTENSIONS

    @property
    def opposite(self) -> "ExtensionClass":
        return ExtensionClass.SOURCE if self is ExtensionClass.HEADER else ExtensionClass.HEADER


class CompanionPattern(NamedTuple):
    """Glob pattern for a file's companion."""
    pattern: str
    is_header: bool


def extension_class(file: str | Path) -> ExtensionClass | None:
    """Classify a file by its (case-sensitive) extension, or None if it is neither."""
    extension = Path(file).suffix[1:]
    if extension in HEADER_EXTENSIONS:
        return ExtensionClass.HEADER
    if extension in SOURCE_EXTENSIONS:
        return ExtensionClass.SOURCE
    return None


def base_name(file: str | Path) -> str:
    """File name with only its last extension removed."""
    name = Path(file).name
    return name.rsplit(".", 1)[0] if "." in name else name


def pattern_for(file: str | Path) -> CompanionPattern:
    """
    Build the companion glob pattern for a file.

    ``src/foo.cpp`` yields ``foo.{h,hpp,hh,hxx}``.

    Raises:
        NotAProjectFileError: If the file is neither a header nor a source file
    """
    kind = extension_class(file)
    if kind is None:
        raise NotAProjectFileError(str(file))
    alternatives = ",".join(kind.opposite.extensions)
    return CompanionPattern(
        pattern=f"{base_name(file)}.{{{alternatives}}}",
        is_header=kind is ExtensionClass.HEADER,
    )


def common_prefix_len(first: str, second: str) -> int:
    """Length of the common leading character run of two strings."""
    limit = min(len(first), len(second))
    for index in range(limit):
        if first[index] != second[index]:
            return index
    return limit


def rank_matches(matches: Sequence[T], reference: str, key: Callable[[T], str] = str) -> list[T]:
    """
    Order glob matches by common-prefix length against ``reference``, smallest first.

    This is a weak heuristic: the first entry is simply the candidate sharing
    the shortest leading run with the reference. The sort is stable, so ties
    keep the glob enumeration order.
    """
    return sorted(matches, key=lambda match: common_prefix_len(key(match), reference))
