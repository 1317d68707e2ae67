"""Artifact kinds recorded in the metadata annotation."""

from enum import Enum


class HeaderKind(Enum):
    """What a compiled class file represents.

    Values are the integer codes stored in the annotation's kind field.
    """
    UNKNOWN = 0
    CLASS = 1
    FILE_FACADE = 2
    SYNTHETIC_CLASS = 3
    MULTIFILE_CLASS = 4  # multifile class facade
    MULTIFILE_CLASS_PART = 5

    @classmethod
    def from_id(cls, code: int) -> "HeaderKind":
        """Resolve a stored kind code, falling back to UNKNOWN for unrecognized codes."""
        try:
            return cls(code)
        except ValueError:
            return cls.UNKNOWN

    @property
    def requires_data(self) -> bool:
        """Kinds whose header is meaningless without a data payload."""
        return self in _KINDS_WITH_DATA


_KINDS_WITH_DATA = frozenset({
    HeaderKind.CLASS,
    HeaderKind.FILE_FACADE,
    HeaderKind.MULTIFILE_CLASS_PART,
})
