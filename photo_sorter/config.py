"""
Configuration constants for the photo sorter.
"""
import os
import re

# --- Metadata Parsing ---
# Only the original capture time is trusted for classification.
CAPTURE_TIME_TAG = 'EXIF DateTimeOriginal'

# EXIF format is "YYYY:MM:DD HH:MM:SS" with a single space between date and time,
# anything after the seconds is ignored
EXIF_DATETIME_PATTERN = re.compile(
    r'^(\d{4}):(\d{2}):(\d{2}) (\d{2}):(\d{2}):(\d{2})'
)

# --- Organization ---
# Files without a usable capture time are mirrored under this folder
UNCLASSIFIED_DIR = "other"

# Upper bound on the numeric suffix probe for a single name
MAX_COLLISION_ATTEMPTS = 10_000

# --- Performance ---
DEFAULT_WORKERS = os.cpu_count() or 1
