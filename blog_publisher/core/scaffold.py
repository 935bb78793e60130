"""Scaffolding for new posts."""

import logging
from typing import Optional

from blog_publisher.core.models import Post
from blog_publisher.transforms.frontmatter import DEFAULT_CATEGORY, render_index

logger = logging.getLogger(__name__)


class PostScaffolder:
    """Creates a post's directories and its initial content file.

    Scaffolding only ever adds: existing directories are reused and an
    existing content file is left byte-for-byte untouched.
    """

    def __init__(self, category: str = DEFAULT_CATEGORY):
        self.category = category

    def scaffold(self, post: Post, title: Optional[str] = None) -> bool:
        """Create the post directory skeleton and content file.

        Args:
            post: Post to scaffold
            title: Optional title for a newly created content file

        Returns:
            True if the content file was created, False if it already existed

        Raises:
            OSError: On any filesystem failure; directories created before
                the failure are left in place
        """
        post.path.mkdir(parents=True, exist_ok=True)
        for directory in (post.img_src_dir, post.img_dir):
            directory.mkdir(parents=True, exist_ok=True)
            logger.info("Directory ready: %s", directory)

        return self._create_index(post, title)

    def _create_index(self, post: Post, title: Optional[str]) -> bool:
        content = render_index(post, title=title, category=self.category)
        try:
            # Exclusive create: never truncates an existing file
            with open(post.index_path, 'x', encoding='utf-8') as f:
                f.write(content)
        except FileExistsError:
            logger.debug("Content file already exists: %s", post.index_path)
            return False

        logger.info("Content file created: %s", post.index_path)
        return True
