"""Public API for classheader package.

High-level functions over the header extractor. Callers that already
scan annotations should drive HeaderExtractor directly; these helpers
replay fields that were decoded up front.
"""

from collections.abc import Mapping
from typing import Any, Iterable, Optional, Tuple, Union

from classheader.codes import METADATA_FQ_NAME, OutcomeCode
from classheader.config import ExtractionSettings
from classheader.contracts import HeaderReport
from classheader.kernel.extractor import HeaderExtractor
from classheader.kernel.header import ClassHeader
from classheader.kernel.version import JvmMetadataVersion

FieldEvents = Union[Mapping, Iterable[Tuple[str, Any]]]


def _iter_events(fields: FieldEvents) -> Iterable[Tuple[str, Any]]:
    if isinstance(fields, Mapping):
        return fields.items()
    return fields


def replay(extractor: HeaderExtractor, fields: FieldEvents) -> None:
    """Deliver decoded (name, value) pairs to an extractor, in order.

    Lists and tuples are offered as string arrays first; when the extractor
    has no collector for the name they are delivered as scalars (int arrays
    such as version fields take this path).
    """
    for name, value in _iter_events(fields):
        if isinstance(value, (list, tuple)):
            collector = extractor.begin_array_field(name)
            if collector is not None:
                with collector:
                    for element in value:
                        collector.add(element)
                continue
        extractor.accept_scalar_field(name, value)


def read_header(
    fields: FieldEvents,
    settings: Optional[ExtractionSettings] = None,
) -> Optional[ClassHeader]:
    """Extract a header from the decoded fields of one metadata annotation."""
    extractor = HeaderExtractor(settings)
    replay(extractor, fields)
    return extractor.finalize()


def read_class_header(
    annotations: Mapping,
    settings: Optional[ExtractionSettings] = None,
) -> Optional[ClassHeader]:
    """Extract a header from all decoded annotations of a class.

    Args:
        annotations: annotation FQ name -> decoded fields of that annotation

    Returns:
        ClassHeader, or None when the metadata annotation is absent or unusable
    """
    for fq_name, fields in annotations.items():
        if HeaderExtractor.accepts_annotation(fq_name):
            return read_header(fields, settings)
    return None


def describe_header(
    header: Optional[ClassHeader],
    class_name: Optional[str] = None,
) -> HeaderReport:
    """Classify an extraction result for reporting.

    The outcome comes from the header alone: it is INCOMPATIBLE exactly when
    the extractor rejected the metadata version.
    """
    expected = JvmMetadataVersion.INSTANCE.to_list()
    subject = f"Class '{class_name}'" if class_name else "Class"

    if header is None:
        return HeaderReport(
            outcome=OutcomeCode.ABSENT,
            class_name=class_name,
            expected_metadata_version=expected,
            message=f"{subject} has no usable {METADATA_FQ_NAME} annotation",
        )

    common = dict(
        class_name=class_name,
        kind=header.kind.name,
        metadata_version=header.metadata_version.to_list(),
        bytecode_version=header.bytecode_version.to_list(),
        expected_metadata_version=expected,
        data_size=len(header.data or ()),
        incompatible_data_size=len(header.incompatible_data or ()),
        strings_size=len(header.strings or ()),
        package_name=header.package_name,
    )

    if not header.compatible:
        return HeaderReport(
            outcome=OutcomeCode.INCOMPATIBLE,
            message=(
                f"{subject} was compiled with an incompatible version of Kotlin. "
                f"The binary version of its metadata is {header.metadata_version}, "
                f"expected version is {JvmMetadataVersion.INSTANCE}"
            ),
            **common,
        )

    return HeaderReport(
        outcome=OutcomeCode.USABLE,
        message=f"{subject} has a {header.kind.name} header, metadata version {header.metadata_version}",
        **common,
    )
