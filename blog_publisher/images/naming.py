"""Filename rules for staged and published images."""

from pathlib import Path

ALLOWED_SOURCE_EXTENSIONS = frozenset({'.heic', '.webp', '.avif', '.jpg', '.jpeg', '.png'})

CAMERA_PREFIX = "IMG_"
CAMERA_PREFIX_REPLACEMENT = "i"
COVER_PREFIX = "cover."


def is_allowed_source(filename: str) -> bool:
    """Check whether a staged file has a supported image extension."""
    return Path(filename).suffix.lower() in ALLOWED_SOURCE_EXTENSIONS


def normalize_image_name(filename: str) -> str:
    """Compute the published filename for a staged image.

    ``IMG_Photo.HEIC`` becomes ``iphoto.jpg``, ``Cover.PNG`` becomes
    ``cover.png`` and ``sunset.JPEG`` becomes ``sunset.jpg``. PNG is the
    only format that keeps its extension.

    Args:
        filename: Base name of the staged source file

    Returns:
        Lower-cased destination filename
    """
    suffix = Path(filename).suffix
    name = filename
    if name.startswith(CAMERA_PREFIX):
        name = CAMERA_PREFIX_REPLACEMENT + name[len(CAMERA_PREFIX):]
    if suffix.lower() != '.png':
        name = name[:len(name) - len(suffix)] + '.jpg'
    return name.lower()


def is_cover(filename: str) -> bool:
    """Cover images are never pruned as unused."""
    return filename.startswith(COVER_PREFIX)
