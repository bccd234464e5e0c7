from pathlib import Path
from typing import Optional

import piexif
import pytest
from PIL import Image


def write_photo(path: Path, date_time_original: Optional[str] = None, color: str = 'red') -> Path:
    """Writes a small JPEG, with DateTimeOriginal when given."""
    path.parent.mkdir(parents=True, exist_ok=True)
    img = Image.new('RGB', (16, 16), color=color)

    if date_time_original is None:
        img.save(path, "JPEG")
        return path

    exif_dict = {
        "0th": {
            piexif.ImageIFD.Make: b"TestCamera",
            piexif.ImageIFD.Model: b"TestModel",
        },
        "Exif": {
            piexif.ExifIFD.DateTimeOriginal: date_time_original.encode('ascii'),
        },
    }
    img.save(path, "JPEG", exif=piexif.dump(exif_dict))
    return path


@pytest.fixture
def make_photo():
    return write_photo


@pytest.fixture
def src(tmp_path):
    root = tmp_path / "src"
    root.mkdir()
    return root


@pytest.fixture
def dest(tmp_path):
    return tmp_path / "dest"


def snapshot(root: Path) -> dict:
    """Relative path -> bytes for every file under root."""
    return {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in sorted(root.rglob("*")) if p.is_file()
    }
