from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class MergeOptions:
    common_namespace: Optional[str] = None
    leave_holes: bool = False


@dataclass
class MergeResult:
    success: bool
    output: Optional[Path] = None
    class_count: int = 0
    method_count: int = 0
    field_count: int = 0
