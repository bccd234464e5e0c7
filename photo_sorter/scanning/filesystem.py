import os
import logging
from pathlib import Path
from typing import Iterator, Set, Optional, FrozenSet, Tuple

DirId = Tuple[int, int]


class DiskScanner:
    """
    Walks a source tree following symbolic links.

    A directory is identified by (st_dev, st_ino). Entering a directory that
    is one of its own ancestors would loop forever, so such links are skipped.
    Links to anywhere else are walked like ordinary directories.
    """

    def iter_files(self, root: Path, skip_dirs: Optional[Set[Path]] = None) -> Iterator[Path]:
        """Depth-first walker using os.scandir. Yields regular files only."""
        skip_dirs = skip_dirs or set()
        stack: list[Tuple[Path, FrozenSet[DirId]]] = [(root, frozenset())]

        while stack:
            current, ancestors = stack.pop()
            if skip_dirs and any(sd == current or sd in current.parents for sd in skip_dirs):
                logging.debug(f"Skipping {current}")
                continue

            try:
                st = current.stat()
            except OSError as e:
                logging.warning(f"Cannot stat {current}: {e}")
                continue

            identity = (st.st_dev, st.st_ino)
            if identity in ancestors:
                logging.warning(f"Symlink loop detected at {current}, skipping")
                continue
            ancestors = ancestors | {identity}

            try:
                with os.scandir(current) as it:
                    entries = list(it)
            except OSError as e:
                logging.warning(f"Cannot read directory {current}: {e}")
                continue

            # Sort for stable traversal order
            entries.sort(key=lambda e: e.name.lower())

            dirs = []
            files = []
            for e in entries:
                # is_dir/is_file follow symlinks; broken links are neither
                try:
                    if e.is_dir():
                        dirs.append(Path(e.path))
                    elif e.is_file():
                        files.append(Path(e.path))
                except OSError as err:
                    logging.warning(f"Cannot inspect {e.path}: {err}")

            # Push dirs to stack (reversed so we process A before Z)
            for d in reversed(dirs):
                stack.append((d, ancestors))

            for f in files:
                yield f
