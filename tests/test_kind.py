"""Tests for kind.py."""

import pytest
from classheader.kernel.kind import HeaderKind


@pytest.mark.parametrize("code,kind", [
    (0, HeaderKind.UNKNOWN),
    (1, HeaderKind.CLASS),
    (2, HeaderKind.FILE_FACADE),
    (3, HeaderKind.SYNTHETIC_CLASS),
    (4, HeaderKind.MULTIFILE_CLASS),
    (5, HeaderKind.MULTIFILE_CLASS_PART),
])
def test_from_id_known_codes(code, kind):
    """Stored codes resolve to their kind."""
    assert HeaderKind.from_id(code) is kind


@pytest.mark.parametrize("code", [-1, 6, 42, 10**9])
def test_from_id_unknown_code_falls_back(code):
    """Unrecognized codes resolve to UNKNOWN instead of raising."""
    assert HeaderKind.from_id(code) is HeaderKind.UNKNOWN


def test_requires_data():
    """Only class, file facade and multifile part need a data payload."""
    required = {k for k in HeaderKind if k.requires_data}
    assert required == {
        HeaderKind.CLASS,
        HeaderKind.FILE_FACADE,
        HeaderKind.MULTIFILE_CLASS_PART,
    }
