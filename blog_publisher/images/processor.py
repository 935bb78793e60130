"""Normalization of staged images into a post's published image directory."""

import logging
from pathlib import Path
from typing import List, Optional

from blog_publisher.core.models import Post
from blog_publisher.images.naming import is_allowed_source, normalize_image_name
from blog_publisher.images.transcoder import BoundingBox, PillowTranscoder, Transcoder
from blog_publisher.transforms.links import image_reference

logger = logging.getLogger(__name__)

DEFAULT_BOUNDING_BOX: BoundingBox = (1024, 1024)


class ImageProcessor:
    """Moves staged images from ``img_src`` into ``img``.

    Each supported file is resized through the transcoder, written under
    its normalized name, removed from staging, and referenced at the end
    of the post's content file.
    """

    def __init__(
        self,
        transcoder: Optional[Transcoder] = None,
        bounding_box: BoundingBox = DEFAULT_BOUNDING_BOX,
    ):
        """Initialize ImageProcessor.

        Args:
            transcoder: Resizing backend (default: Pillow)
            bounding_box: Maximum (width, height) of published images
        """
        self.transcoder = transcoder or PillowTranscoder()
        self.bounding_box = bounding_box

    def process_images(self, post: Post) -> List[str]:
        """Transcode every staged image of a post.

        Staged files are handled in sorted filename order. A transcoder
        failure stops processing: images done so far stay in ``img``, the
        failing one and everything after it stay in ``img_src``, and no
        references are appended.

        Args:
            post: Post whose staging directory should be processed

        Returns:
            Published filenames, in the order their references were appended

        Raises:
            TranscodeError: If the transcoder fails on any image
            OSError: On filesystem failures
        """
        processed = []
        for source in self._staged_images(post.img_src_dir):
            dest_name = normalize_image_name(source.name)
            dest = post.img_dir / dest_name
            self.transcoder.resize(source, dest, self.bounding_box)
            logger.info("Converted %s -> %s", source.name, dest_name)
            processed.append(dest_name)
            source.unlink()

        self._append_references(post, processed)
        return processed

    def _staged_images(self, img_src_dir: Path) -> List[Path]:
        return [
            entry
            for entry in sorted(img_src_dir.iterdir(), key=lambda p: p.name)
            if entry.is_file() and is_allowed_source(entry.name)
        ]

    def _append_references(self, post: Post, names: List[str]) -> None:
        if not names:
            return

        with open(post.index_path, 'a', encoding='utf-8') as f:
            for name in names:
                f.write(image_reference(name))
        logger.info("Appended %d image reference(s) to %s", len(names), post.index_path)
