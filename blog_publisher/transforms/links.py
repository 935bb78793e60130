"""Link transform factories for post content files."""

import re
from typing import Sequence

from blog_publisher.core.models import Post
from blog_publisher.transforms.frontmatter import ContentTransform

# Markdown link targets inside the local image directory: ](img/name.jpg)
LOCAL_IMAGE_LINK_PATTERN = re.compile(r'\]\((img/[^)]+)\)')


def image_reference(filename: str) -> str:
    """Markdown reference appended to the content file for a new image."""
    return f"![](img/{filename})\n\n"


def remote_image_links(remote_img_base: str, query: str = "d=300x300") -> ContentTransform:
    """Create a transform that rewrites local image links to remote URLs.

    ``](img/a.jpg)`` becomes ``](<base>/<relative path>/img/a.jpg?<query>)``.

    Args:
        remote_img_base: Base URL of the remote image store
        query: Query string appended to every rewritten URL

    Returns:
        A transform function (content, post) -> content
    """
    base = remote_img_base.rstrip('/')

    def transform(content: str, post: Post) -> str:
        remote_dir = f"{base}/{post.relative_path}/"
        return LOCAL_IMAGE_LINK_PATTERN.sub(
            lambda m: f"]({remote_dir}{m.group(1)}?{query})", content
        )
    return transform


def compose(*transforms: ContentTransform) -> ContentTransform:
    """Create a transform that applies several transforms in order."""
    steps: Sequence[ContentTransform] = transforms

    def transform(content: str, post: Post) -> str:
        for step in steps:
            content = step(content, post)
        return content
    return transform
