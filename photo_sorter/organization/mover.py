import shutil
import logging
from pathlib import Path

from .. import config
from ..exceptions import CopyError, DestinationExistsError, DirectoryCreationError
from ..models import DestinationPlan
from .naming import reserve_name


class FilePlacer:
    """
    Copies one source file into the target tree according to its plan.

    The source is only ever read. A destination name is claimed before any
    bytes are written, so an existing file is never overwritten.
    """

    def __init__(self, max_attempts: int = config.MAX_COLLISION_ATTEMPTS):
        self.max_attempts = max_attempts

    def place(self, src: Path, plan: DestinationPlan) -> Path:
        self._ensure_directory(plan.directory)

        try:
            if plan.resolve_collisions:
                dest = reserve_name(plan.base_name, plan.directory,
                                    plan.extension, self.max_attempts)
            else:
                dest = self._reserve_exact(plan.directory / plan.filename)
        except OSError as e:
            raise CopyError(f"Cannot create {plan.directory / plan.filename}: {e}",
                            plan.directory / plan.filename) from e

        try:
            shutil.copy2(str(src), str(dest))
        except OSError as e:
            # Release the placeholder so a rerun can use the name
            dest.unlink(missing_ok=True)
            raise CopyError(f"Failed to copy {src} -> {dest}: {e}", dest) from e

        logging.debug(f"Copied {src} -> {dest}")
        return dest

    def _ensure_directory(self, folder: Path):
        try:
            folder.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryCreationError(f"Cannot create directory {folder}: {e}", folder) from e

    def _reserve_exact(self, dest: Path) -> Path:
        try:
            with dest.open('xb'):
                pass
        except FileExistsError:
            raise DestinationExistsError(f"Destination already exists: {dest}", dest) from None
        return dest
