"""Image transcoders used to normalize staged images.

A transcoder resizes one source image to fit a bounding box, keeping its
aspect ratio, and writes it in the format implied by the destination
extension. Failures are reported as TranscodeError.
"""

import logging
import subprocess
from pathlib import Path
from typing import Protocol, Sequence, Tuple

import pillow_heif
from PIL import Image, ImageOps, UnidentifiedImageError

from blog_publisher.errors import TranscodeError

logger = logging.getLogger(__name__)

# HEIC/HEIF (camera uploads) are not readable by stock Pillow
pillow_heif.register_heif_opener()

BoundingBox = Tuple[int, int]


class Transcoder(Protocol):
    def resize(self, source: Path, dest: Path, bounding_box: BoundingBox) -> None:
        ...


class PillowTranscoder:
    """Resize images in-process with Pillow.

    Images are scaled up or down to fit the box, like ImageMagick's
    ``-resize WxH``. EXIF orientation is applied before scaling.
    """

    def __init__(self, jpeg_quality: int = 85):
        self.jpeg_quality = jpeg_quality

    def resize(self, source: Path, dest: Path, bounding_box: BoundingBox) -> None:
        try:
            with Image.open(source) as img:
                img = ImageOps.exif_transpose(img)
                img = ImageOps.contain(img, bounding_box, Image.LANCZOS)
                if Path(dest).suffix.lower() == '.png':
                    img.save(dest, "PNG")
                else:
                    img.convert("RGB").save(dest, "JPEG", quality=self.jpeg_quality)
        except (OSError, UnidentifiedImageError, ValueError) as e:
            raise TranscodeError(Path(source), str(e)) from e


class MagickTranscoder:
    """Resize images by running ImageMagick's ``convert`` command."""

    def __init__(self, command: Sequence[str] = ("convert",)):
        self.command = list(command)

    def resize(self, source: Path, dest: Path, bounding_box: BoundingBox) -> None:
        width, height = bounding_box
        args = [*self.command, str(source), "-resize", f"{width}x{height}", str(dest)]
        logger.debug("Running %s", " ".join(args))
        try:
            subprocess.run(args, check=True, capture_output=True)
        except FileNotFoundError as e:
            raise TranscodeError(Path(source), f"{self.command[0]} not found") from e
        except subprocess.CalledProcessError as e:
            stderr = e.stderr.decode('utf-8', 'replace').strip() if e.stderr else ""
            raise TranscodeError(Path(source), stderr or str(e)) from e


def create_transcoder(name: str) -> Transcoder:
    """Build the transcoder selected in configuration ("pillow" or "magick")."""
    if name == "magick":
        return MagickTranscoder()
    return PillowTranscoder()
