"""Extraction settings.

Settings are plain values. Extractors built without explicit settings
resolve them through ExtractionSettings.from_env().
"""

import os
from typing import Optional

from pydantic import BaseModel, ConfigDict

from classheader.kernel.version import JvmMetadataVersion

SKIP_METADATA_VERSION_CHECK_ENV = "CLASSHEADER_SKIP_METADATA_VERSION_CHECK"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _flag_from_env(var_name: str, default: bool) -> bool:
    raw = os.getenv(var_name)
    if not raw:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


class ExtractionSettings(BaseModel):
    """Knobs for header extraction."""
    # Treat every metadata version as compatible, the invalid sentinel included
    skip_metadata_version_check: bool = False

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def from_env(cls) -> "ExtractionSettings":
        return cls(
            skip_metadata_version_check=_flag_from_env(SKIP_METADATA_VERSION_CHECK_ENV, False),
        )

    def is_metadata_version_compatible(self, version: Optional[JvmMetadataVersion]) -> bool:
        if self.skip_metadata_version_check:
            return True
        if version is None:
            version = JvmMetadataVersion.INVALID_VERSION
        return version.is_compatible()

