"""classheader: metadata header extraction for compiled class files."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("classheader")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from classheader.api import read_header, read_class_header, describe_header, replay
from classheader.codes import FieldName, OutcomeCode, METADATA_FQ_NAME
from classheader.config import ExtractionSettings
from classheader.contracts import HeaderReport
from classheader.kernel.extractor import HeaderExtractor, StringArrayCollector, ExtractorStateError
from classheader.kernel.header import ClassHeader
from classheader.kernel.kind import HeaderKind
from classheader.kernel.version import BinaryVersion, JvmMetadataVersion, JvmBytecodeBinaryVersion

__all__ = [
    "__version__",
    "read_header",
    "read_class_header",
    "describe_header",
    "replay",
    "FieldName",
    "OutcomeCode",
    "METADATA_FQ_NAME",
    "ExtractionSettings",
    "HeaderReport",
    "HeaderExtractor",
    "StringArrayCollector",
    "ExtractorStateError",
    "ClassHeader",
    "HeaderKind",
    "BinaryVersion",
    "JvmMetadataVersion",
    "JvmBytecodeBinaryVersion",
]
