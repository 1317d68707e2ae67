"""Code constants for classheader.

These constants prevent stringly-typed field names and outcome codes
and ensure client code uses the names the metadata annotation defines.
"""

from enum import Enum


# Fully qualified name of the annotation carrying the header
METADATA_FQ_NAME = "kotlin.Metadata"


class FieldName(str, Enum):
    """Argument names of the metadata annotation."""

    # Scalars
    KIND = "k"
    METADATA_VERSION = "mv"
    BYTECODE_VERSION = "bv"
    EXTRA_STRING = "xs"
    EXTRA_INT = "xi"
    PACKAGE_NAME = "pn"

    # String arrays
    DATA = "d1"
    STRINGS = "d2"


class OutcomeCode(str, Enum):
    """Externally visible extraction outcomes."""

    ABSENT = "ABSENT"
    INCOMPATIBLE = "INCOMPATIBLE"
    USABLE = "USABLE"
