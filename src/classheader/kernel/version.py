"""Binary versions with an explicit compatibility policy.

A version is an ordered sequence of integers. Only the first three
components (major, minor, patch) take part in compatibility decisions;
any further components are kept in `rest` for display and equality.

Missing components are represented by UNKNOWN (-1), so an empty
version is a valid value rather than None. Each concrete version type
exposes that empty value as INVALID_VERSION; it is never compatible.
"""

from dataclasses import dataclass
from typing import ClassVar, Iterable, Tuple

UNKNOWN = -1


@dataclass(frozen=True)
class BinaryVersion:
    """An ordered tuple of version numbers."""
    numbers: Tuple[int, ...] = ()

    @classmethod
    def of(cls, *numbers: int) -> "BinaryVersion":
        return cls(tuple(numbers))

    @classmethod
    def from_array(cls, numbers: Iterable[int]) -> "BinaryVersion":
        """Build a version from an int array as stored in the annotation."""
        return cls(tuple(numbers))

    def _component(self, index: int) -> int:
        return self.numbers[index] if index < len(self.numbers) else UNKNOWN

    @property
    def major(self) -> int:
        return self._component(0)

    @property
    def minor(self) -> int:
        return self._component(1)

    @property
    def patch(self) -> int:
        return self._component(2)

    @property
    def rest(self) -> Tuple[int, ...]:
        return self.numbers[3:]

    def is_compatible_to(self, ours: "BinaryVersion") -> bool:
        """Check this (found) version against the version we support.

        Pre-release majors (0) only match the exact same minor. Otherwise
        majors must be equal and the found minor must not be newer.
        """
        if self.major == 0:
            return ours.major == 0 and self.minor == ours.minor
        return self.major == ours.major and self.minor <= ours.minor

    def to_list(self) -> list:
        return list(self.numbers)

    def __str__(self) -> str:
        if self.major == UNKNOWN:
            return "unknown"
        return ".".join(str(n) for n in self.numbers)


class JvmMetadataVersion(BinaryVersion):
    """Version of the metadata annotation's own encoding."""
    INSTANCE: ClassVar["JvmMetadataVersion"]
    INVALID_VERSION: ClassVar["JvmMetadataVersion"]

    def is_compatible(self) -> bool:
        return self.is_compatible_to(JvmMetadataVersion.INSTANCE)


class JvmBytecodeBinaryVersion(BinaryVersion):
    """Version of the bytecode conventions the class was compiled with."""
    INSTANCE: ClassVar["JvmBytecodeBinaryVersion"]
    INVALID_VERSION: ClassVar["JvmBytecodeBinaryVersion"]

    def is_compatible(self) -> bool:
        return self.is_compatible_to(JvmBytecodeBinaryVersion.INSTANCE)


JvmMetadataVersion.INSTANCE = JvmMetadataVersion.of(1, 1, 0)
JvmMetadataVersion.INVALID_VERSION = JvmMetadataVersion()

JvmBytecodeBinaryVersion.INSTANCE = JvmBytecodeBinaryVersion.of(1, 0, 1)
JvmBytecodeBinaryVersion.INVALID_VERSION = JvmBytecodeBinaryVersion()
