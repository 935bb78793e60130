"""Data models for Blog Publisher."""

import datetime
from dataclasses import dataclass
from pathlib import Path

from blog_publisher.core.codec import encode_path


IMG_DIR_NAME = "img"
IMG_SRC_DIR_NAME = "img_src"
INDEX_FILE_NAME = "index.md"


@dataclass(frozen=True)
class Post:
    """Immutable snapshot of one dated post.

    The relative path is derived from (date, sequence_number) and is
    never stored on its own. A sequence number of 0 means the post is
    the only one for its date.
    """
    date: datetime.date
    sequence_number: int = 0
    root: Path = Path(".")

    def __post_init__(self):
        if self.sequence_number < 0:
            raise ValueError(f"Sequence number must be >= 0, got {self.sequence_number}")

    @property
    def relative_path(self) -> str:
        return encode_path(self.date, self.sequence_number)

    @property
    def path(self) -> Path:
        """Absolute location of the post directory."""
        return Path(self.root) / self.relative_path

    @property
    def img_dir(self) -> Path:
        """Published image directory; doubles as the unpublished marker."""
        return self.path / IMG_DIR_NAME

    @property
    def img_src_dir(self) -> Path:
        return self.path / IMG_SRC_DIR_NAME

    @property
    def index_path(self) -> Path:
        return self.path / INDEX_FILE_NAME

    @property
    def slug(self) -> str:
        """Compact date, followed by the sequence number when non-zero."""
        slug = self.date.strftime("%Y%m%d")
        if self.sequence_number > 0:
            slug += str(self.sequence_number)
        return slug

    def is_published(self) -> bool:
        return not self.img_dir.is_dir()
