"""Post discovery module for finding unpublished posts."""

import datetime
import logging
import os
from pathlib import Path
from typing import List

from blog_publisher.core.codec import decode_path
from blog_publisher.core.models import IMG_DIR_NAME, Post

logger = logging.getLogger(__name__)


class PostDiscovery:
    """Finds posts under a storage root that still carry a marker directory.

    A post directory is only visible here while its ``img`` subdirectory
    exists. Publishing removes that directory, so published posts drop
    out of every later scan.
    """

    def __init__(self, post_dir: Path, marker_name: str = IMG_DIR_NAME):
        """Initialize PostDiscovery.

        Args:
            post_dir: Storage root holding ``YYYY/MM/DD[_N]`` directories
            marker_name: Directory name that marks an unpublished post
        """
        self.post_dir = Path(post_dir)
        self.marker_name = marker_name

    def scan(self, year: int = 0) -> List[Post]:
        """Find all unpublished posts for a year.

        Args:
            year: Year to scan; 0 means the current year

        Returns:
            Posts in lexical directory order (empty if none are found)

        Raises:
            OSError: If the year directory is missing or unreadable
            MalformedPathError: If a marker sits under a directory that
                does not decode to a post
        """
        if year == 0:
            year = datetime.date.today().year

        year_dir = self.post_dir / f"{year:04d}"
        if not year_dir.is_dir():
            raise FileNotFoundError(f"Year directory not found: {year_dir}")

        posts = []
        for dirpath, dirnames, _ in os.walk(year_dir, onerror=_raise):
            dirnames.sort()
            if Path(dirpath).name != self.marker_name:
                continue

            # Marker contents are images, nothing more to find below
            dirnames.clear()
            relative = Path(dirpath).parent.relative_to(self.post_dir)
            date, number = decode_path(relative.as_posix())
            post = Post(date=date, sequence_number=number, root=self.post_dir)
            logger.debug("Found unpublished post %s", post.relative_path)
            posts.append(post)

        return posts


def _raise(error: OSError):
    raise error
