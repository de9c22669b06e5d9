"""
Status values for download jobs as stored by the persistence layer.
"""

from enum import Enum


class DownloadStatus(Enum):
    """Lifecycle of a background download job."""

    PENDING = "pending"
    DOWNLOADING = "downloading"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"

    @classmethod
    def from_wire(cls, value: str | None) -> "DownloadStatus":
        """Parses a stored status string. Unrecognised values map to PENDING."""
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.PENDING

    def to_wire(self) -> str:
        return self.value
