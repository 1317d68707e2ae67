"""The header value synthesized from a class's metadata annotation."""

from dataclasses import dataclass
from typing import Optional, Tuple

from .kind import HeaderKind
from .version import JvmBytecodeBinaryVersion, JvmMetadataVersion


@dataclass(frozen=True)
class ClassHeader:
    """Metadata header of one compiled class file.

    Array fields are None when the annotation never supplied them. At most
    one of `data` / `incompatible_data` is set: an incompatible metadata
    version moves the payload to `incompatible_data`, which is kept for
    diagnostics only and must not be deserialized. `compatible` records the
    extractor's version decision, so it stays False for an incompatible
    header even when there was no payload to move.
    """
    kind: HeaderKind
    metadata_version: JvmMetadataVersion = JvmMetadataVersion.INVALID_VERSION
    bytecode_version: JvmBytecodeBinaryVersion = JvmBytecodeBinaryVersion.INVALID_VERSION
    data: Optional[Tuple[str, ...]] = None
    incompatible_data: Optional[Tuple[str, ...]] = None
    strings: Optional[Tuple[str, ...]] = None
    extra_string: str = ""
    extra_int: int = 0
    package_name: Optional[str] = None
    # Whether the metadata version passed the check this header was extracted under
    compatible: bool = True

    @property
    def multifile_class_name(self) -> Optional[str]:
        """Internal name of the facade a multifile class part belongs to."""
        if self.kind is HeaderKind.MULTIFILE_CLASS_PART:
            return self.extra_string or None
        return None

    def __str__(self) -> str:
        return f"{self.kind.name} version={self.metadata_version}"
