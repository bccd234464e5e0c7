import os
from pathlib import Path
from typing import Optional

from .. import config
from ..models import CapturedTimestamp, DestinationPlan


class DestinationPlanner:
    """
    Pure path computation: no filesystem access happens here.
    """

    def __init__(self, src_root: Path, dest_root: Path):
        self.src_root = src_root
        self.dest_root = dest_root

    def plan(self, path: Path, timestamp: Optional[CapturedTimestamp]) -> DestinationPlan:
        folder = self.resolve_directory(path, timestamp)

        if timestamp is None:
            # Unclassified files keep their original name
            return DestinationPlan(folder, path.stem, path.suffix,
                                   resolve_collisions=False)

        return DestinationPlan(folder, timestamp.base_name, path.suffix,
                               resolve_collisions=True)

    def resolve_directory(self, path: Path, timestamp: Optional[CapturedTimestamp]) -> Path:
        if timestamp is not None:
            return (self.dest_root / str(timestamp.year) /
                    str(timestamp.month) / str(timestamp.day))

        relative = self._relative_parent(path)
        folder = self.dest_root / config.UNCLASSIFIED_DIR
        return folder / relative if relative else folder

    def _relative_parent(self, path: Path) -> str:
        parent = path.parent
        try:
            relative = str(parent.relative_to(self.src_root))
        except ValueError:
            # Not lexically under the root, drop the root prefix textually
            relative = str(parent).replace(str(self.src_root), '', 1)

        if relative == '.':
            return ''
        if relative.startswith(os.sep):
            relative = relative[1:]
        if relative.endswith(os.sep):
            relative = relative[:-1]
        return relative
