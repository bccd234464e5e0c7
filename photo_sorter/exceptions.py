"""
Custom exception hierarchy for the photo sorter.

Only SetupError is meant to stop a run. Everything raised while placing a
single file derives from PlacementError and is recorded against that file.
"""
from pathlib import Path


class PhotoSorterError(Exception):
    """Base exception for all photo sorter errors."""
    pass


class SetupError(PhotoSorterError):
    """Raised when the source or target directory is unusable."""
    pass


class MetadataExtractionError(PhotoSorterError):
    """Raised when metadata cannot be extracted from a file."""
    pass


class PlacementError(PhotoSorterError):
    """Raised when a file cannot be placed in the target tree."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


class DirectoryCreationError(PlacementError):
    """Raised when a destination directory cannot be created."""
    pass


class CopyError(PlacementError):
    """Raised when the byte copy into the target tree fails."""
    pass


class CollisionLimitError(PlacementError):
    """Raised when every suffix up to the attempt cap is already taken."""
    pass


class DestinationExistsError(PlacementError):
    """Raised when an unclassified file's mirrored path is already occupied."""
    pass
