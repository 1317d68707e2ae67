"""Public outcome models for classheader package."""

from typing import List, Optional
from pydantic import BaseModel

from classheader.codes import OutcomeCode


class HeaderReport(BaseModel):
    """Consumer-facing summary of one extraction outcome."""
    outcome: OutcomeCode
    class_name: Optional[str] = None
    kind: Optional[str] = None  # HeaderKind name, None when ABSENT
    metadata_version: List[int] = []
    bytecode_version: List[int] = []
    expected_metadata_version: List[int] = []
    data_size: int = 0
    incompatible_data_size: int = 0
    strings_size: int = 0
    package_name: Optional[str] = None
    message: str
