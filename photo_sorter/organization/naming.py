import logging
from pathlib import Path

from .. import config
from ..exceptions import CollisionLimitError


def candidate_name(base_name: str, extension: str, attempt: int) -> str:
    """base.ext, base1.ext, base2.ext, ... (no separator before the counter)."""
    if attempt == 0:
        return f"{base_name}{extension}"
    return f"{base_name}{attempt}{extension}"


def resolve_name(base_name: str,
                 folder: Path,
                 extension: str,
                 max_attempts: int = config.MAX_COLLISION_ATTEMPTS) -> str:
    """
    Returns the first candidate name not present in folder.

    Read-only form of the probe sequence that reserve_name walks. It never
    creates anything, so two callers racing on the same folder can get the
    same answer; anything that writes must go through reserve_name instead.
    """
    for attempt in range(max_attempts):
        candidate = candidate_name(base_name, extension, attempt)
        if not (folder / candidate).exists():
            return candidate

    raise CollisionLimitError(
        f"No free name for {base_name}{extension} after {max_attempts} attempts",
        folder / f"{base_name}{extension}",
    )


def reserve_name(base_name: str,
                 folder: Path,
                 extension: str,
                 max_attempts: int = config.MAX_COLLISION_ATTEMPTS) -> Path:
    """
    Claims the first free candidate by creating it exclusively.

    Follows the same probe sequence as resolve_name, but the existence check
    and the creation are one atomic step, so concurrent workers always end
    up with distinct paths. The returned file is an empty placeholder.
    """
    for attempt in range(max_attempts):
        candidate = folder / candidate_name(base_name, extension, attempt)
        try:
            with candidate.open('xb'):
                pass
        except FileExistsError:
            continue

        if attempt:
            logging.debug(f"Name collision in {folder}, using {candidate.name}")
        return candidate

    raise CollisionLimitError(
        f"No free name for {base_name}{extension} after {max_attempts} attempts",
        folder / f"{base_name}{extension}",
    )
