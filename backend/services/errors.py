"""Failure reporting for the resume scanning flow.

A single exception type carries an explicit ``ScanErrorKind`` so callers
can tell "nothing submitted" apart from "submission failed" without
checking subclasses.
"""

from enum import Enum


class ScanErrorKind(str, Enum):
    INPUT_NOT_SUBMITTED = "input_not_submitted"
    UNSUPPORTED_INPUT = "unsupported_input"
    SCAN_FAILED = "scan_failed"


SCAN_FAILED_MESSAGE = "Failed to analyze resume"


class ScanError(Exception):
    """Raised when a resume cannot be scanned."""

    def __init__(self, kind: ScanErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @classmethod
    def not_submitted(cls) -> "ScanError":
        return cls(ScanErrorKind.INPUT_NOT_SUBMITTED, "No file selected")

    @classmethod
    def unsupported(cls, message: str) -> "ScanError":
        return cls(ScanErrorKind.UNSUPPORTED_INPUT, message)

    @classmethod
    def failed(cls) -> "ScanError":
        return cls(ScanErrorKind.SCAN_FAILED, SCAN_FAILED_MESSAGE)
