from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from meshmerge.config import MergeSettings
from meshmerge.models import RecordKind


@dataclass
class MergeContext:
    """
    Shared pipeline context.
    This object is passed between orchestration layers.
    """

    settings: MergeSettings
    logger: Any
    kind: RecordKind

    inputs: List[str] = field(default_factory=list)
    output_path: Optional[str] = None

    stats: Dict[str, Any] = field(default_factory=dict)
