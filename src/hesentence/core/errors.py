"""Exceptions raised by the segmenter."""


class MarkerError(ValueError):
    """Base class for boundary marker problems."""
    pass


class InvalidMarkerError(MarkerError):
    """Raised when a marker is not a non-empty string."""
    pass


class MarkerCollisionError(MarkerError):
    """Raised when the boundary marker already occurs in the input text."""

    def __init__(self, marker: str, position: int):
        self.marker = marker
        self.position = position
        super().__init__(
            f"Boundary marker {marker!r} found in input at offset {position}; "
            f"choose a marker that does not occur in the text"
        )
