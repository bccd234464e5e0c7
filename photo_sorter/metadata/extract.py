import logging
from pathlib import Path
from typing import Optional

import exifread

from .. import config
from ..exceptions import MetadataExtractionError
from ..models import CapturedTimestamp


class MetadataExtractor:
    """
    Reads the original capture time from a file's EXIF block.

    A missing, corrupt or malformed timestamp is not an error: it is the
    signal that the file belongs in the unclassified bucket.
    """

    def get_capture_timestamp(self, path: Path) -> Optional[CapturedTimestamp]:
        try:
            tags = self._read_tags(path)
        except MetadataExtractionError as e:
            # Unreadable files are routed like files without metadata
            logging.warning(str(e))
            return None

        tag = tags.get(config.CAPTURE_TIME_TAG)
        if tag is None:
            return None
        return self.parse_exif_datetime(self._tag_text(tag))

    def _read_tags(self, path: Path) -> dict:
        try:
            f = path.open('rb')
        except OSError as e:
            raise MetadataExtractionError(f"Cannot open {path} for metadata: {e}") from e

        with f:
            try:
                # details=False skips makernotes and thumbnails
                return exifread.process_file(f, details=False)
            except Exception as e:
                logging.debug(f"ExifRead failed for {path}: {e}")
                return {}

    def _tag_text(self, tag) -> str:
        values = getattr(tag, 'values', tag)
        if isinstance(values, (list, tuple)):
            values = values[0] if values else ''
        if isinstance(values, bytes):
            values = values.decode('ascii', errors='replace')
        return str(values)

    @staticmethod
    def parse_exif_datetime(value: str) -> Optional[CapturedTimestamp]:
        """
        Parses "YYYY:MM:DD HH:MM:SS". Blank or malformed values give None.
        """
        if not value:
            return None
        text = value.rstrip('\x00 ')
        match = config.EXIF_DATETIME_PATTERN.match(text)
        if not match:
            return None
        return CapturedTimestamp(*(int(part) for part in match.groups()))
