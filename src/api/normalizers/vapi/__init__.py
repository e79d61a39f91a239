"""Normalizer Vapi: formatos de payload do vendor para CallEvent."""

from .extractor import (
    PayloadShape,
    WorkingRecord,
    classify_payload,
    extract_working_record,
    reconstruct_transcript,
)
from .normalizer import (
    DEFAULT_COMPLETION_THRESHOLD_SECONDS,
    SKIP_AWAITING_COMPLETION,
    SKIP_NO_TRANSCRIPT,
    SkippedDelivery,
    is_call_complete,
    normalize,
)

__all__ = [
    "DEFAULT_COMPLETION_THRESHOLD_SECONDS",
    "SKIP_AWAITING_COMPLETION",
    "SKIP_NO_TRANSCRIPT",
    "PayloadShape",
    "SkippedDelivery",
    "WorkingRecord",
    "classify_payload",
    "extract_working_record",
    "is_call_complete",
    "normalize",
    "reconstruct_transcript",
]
