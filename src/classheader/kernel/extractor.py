"""Header extraction from the fields of a metadata annotation.

The extractor is fed field events by an annotation scanner, in any
order, then finalized exactly once:

- accept_scalar_field(name, value) for scalar and int-array arguments
- begin_array_field(name) for string-array arguments; the returned
  collector is fed element by element and finished independently
- finalize() to obtain a ClassHeader, or None when there is no usable header

Malformed input never raises. Unrecognized names and values of the wrong
type are ignored field by field, so newer annotation layouts keep working
with this reader. The only hard errors are protocol misuse (events after
finalize, finalizing twice).
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from classheader.codes import METADATA_FQ_NAME, FieldName
from classheader.config import ExtractionSettings
from .header import ClassHeader
from .kind import HeaderKind
from .version import JvmBytecodeBinaryVersion, JvmMetadataVersion

logger = logging.getLogger(__name__)


class ExtractorStateError(RuntimeError):
    """Raised when events are delivered out of protocol order."""
    pass


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_int_array(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and all(_is_int(v) for v in value)


def _is_str(value: Any) -> bool:
    return isinstance(value, str)


class StringArrayCollector:
    """Collects the string elements of one array argument.

    Non-string elements are skipped. finish() hands the collected tuple to
    the owner; it can also be used as a context manager, finishing on a
    clean exit.
    """

    def __init__(self, on_finish: Callable[[Tuple[str, ...]], None]):
        self._on_finish = on_finish
        self._strings: List[str] = []
        self._finished = False

    def add(self, value: Any) -> None:
        if self._finished:
            raise ExtractorStateError("Array collector already finished")
        if isinstance(value, str):
            self._strings.append(value)

    def add_enum(self, enum_class: str, entry: str) -> None:
        """Enum elements never belong to a string array."""

    def finish(self) -> Tuple[str, ...]:
        if self._finished:
            raise ExtractorStateError("Array collector already finished")
        self._finished = True
        result = tuple(self._strings)
        self._on_finish(result)
        return result

    def __enter__(self) -> "StringArrayCollector":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None and not self._finished:
            self.finish()


# name -> (value check, accumulator slot, conversion)
_SCALAR_FIELDS: Dict[FieldName, Tuple[Callable[[Any], bool], str, Callable[[Any], Any]]] = {
    FieldName.KIND: (_is_int, "kind", HeaderKind.from_id),
    FieldName.METADATA_VERSION: (_is_int_array, "metadata_version", JvmMetadataVersion.from_array),
    FieldName.BYTECODE_VERSION: (_is_int_array, "bytecode_version", JvmBytecodeBinaryVersion.from_array),
    FieldName.EXTRA_STRING: (_is_str, "extra_string", str),
    FieldName.EXTRA_INT: (_is_int, "extra_int", int),
    FieldName.PACKAGE_NAME: (_is_str, "package_name", str),
}

_ARRAY_FIELDS: Dict[FieldName, str] = {
    FieldName.DATA: "data",
    FieldName.STRINGS: "strings",
}


def _field_name(name: Any) -> Optional[FieldName]:
    if name is None:
        return None
    try:
        return FieldName(name)
    except ValueError:
        return None


class HeaderExtractor:
    """Accumulates metadata annotation fields for a single class file.

    One instance per extraction attempt; instances share no state.
    """

    def __init__(self, settings: Optional[ExtractionSettings] = None):
        self.settings = settings if settings is not None else ExtractionSettings.from_env()
        self._fields: Dict[str, Any] = {}
        self._finalized = False

    @staticmethod
    def accepts_annotation(fq_name: str) -> bool:
        """Whether an annotation with this name carries the header."""
        return fq_name == METADATA_FQ_NAME

    def _check_open(self) -> None:
        if self._finalized:
            raise ExtractorStateError("Extractor already finalized")

    def accept_scalar_field(self, name: Any, value: Any) -> None:
        """Record a scalar or int-array argument."""
        self._check_open()
        field = _field_name(name)
        if field is None or field not in _SCALAR_FIELDS:
            logger.debug("Ignoring unrecognized field %r", name)
            return
        check, slot, convert = _SCALAR_FIELDS[field]
        if not check(value):
            logger.debug("Ignoring field %r with unexpected value type %s", name, type(value).__name__)
            return
        self._fields[slot] = convert(value)

    def begin_array_field(self, name: Any) -> Optional[StringArrayCollector]:
        """Return a collector for a recognized string array, else None (skip it)."""
        self._check_open()
        field = _field_name(name)
        slot = _ARRAY_FIELDS.get(field) if field is not None else None
        if slot is None:
            logger.debug("Skipping unrecognized array field %r", name)
            return None
        return StringArrayCollector(lambda values: self._store_array(slot, values))

    def accept_enum_field(self, name: Any, enum_class: str, entry: str) -> None:
        """The metadata annotation has no enum arguments."""
        self._check_open()

    def begin_annotation_field(self, name: Any, class_name: str) -> None:
        """The metadata annotation has no nested annotations; always skip."""
        self._check_open()
        return None

    def _store_array(self, slot: str, values: Tuple[str, ...]) -> None:
        self._check_open()
        self._fields[slot] = values

    def finalize(self) -> Optional[ClassHeader]:
        """Synthesize the header, or None when there is no usable header."""
        self._check_open()
        self._finalized = True

        kind: Optional[HeaderKind] = self._fields.get("kind")
        if kind is None:
            logger.debug("No kind field; no header")
            return None

        metadata_version = self._fields.get("metadata_version", JvmMetadataVersion.INVALID_VERSION)
        bytecode_version = self._fields.get("bytecode_version", JvmBytecodeBinaryVersion.INVALID_VERSION)
        data = self._fields.get("data")
        incompatible_data = None

        compatible = self.settings.is_metadata_version_compatible(metadata_version)
        if not compatible:
            logger.debug("Incompatible metadata version %s for %s", metadata_version, kind.name)
            incompatible_data = data
            data = None
        elif kind.requires_data and not data:
            # Compatible but the mandatory payload is missing or empty: same as no annotation at all
            logger.debug("Compatible %s header without data; no header", kind.name)
            return None

        return ClassHeader(
            kind=kind,
            metadata_version=metadata_version,
            bytecode_version=bytecode_version,
            data=data,
            incompatible_data=incompatible_data,
            strings=self._fields.get("strings"),
            extra_string=self._fields.get("extra_string", ""),
            extra_int=self._fields.get("extra_int", 0),
            package_name=self._fields.get("package_name"),
            compatible=compatible,
        )
