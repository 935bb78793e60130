"""Frontmatter handling for post content files.

The frontmatter is treated as text: it is written from a fixed template
and later adjusted with regular expressions, never parsed as YAML.
"""

import re
from pathlib import Path
from typing import Callable, Optional

import titlecase as tc

from blog_publisher.core.models import IMG_DIR_NAME, Post

ContentTransform = Callable[[str, Post], str]

DEFAULT_COVER = f"{IMG_DIR_NAME}/cover.jpg"
DEFAULT_CATEGORY = "テスト"
BODY_PLACEHOLDER = "## きっかけ"

INDEX_TEMPLATE = """---
title: {title}
slug: {slug}
date: {date}
image: {cover}
categories:
- {category}
tags:
---

{body}

"""

COVER_LINE_PATTERN = re.compile(r'image: img/cover\..{3}')
COVER_LINE_WITH_NEWLINE_PATTERN = re.compile(r'^image: img/cover\..{3}\n?', re.MULTILINE)
COVER_REF_PATTERN = re.compile(r'image: (img/cover\..{3})')


def render_index(
    post: Post,
    title: Optional[str] = None,
    category: str = DEFAULT_CATEGORY,
) -> str:
    """Render the initial content of a post's index file.

    Args:
        post: Post the file belongs to
        title: Optional title, converted to title case
        category: Placeholder category entry

    Returns:
        Frontmatter block followed by the body placeholder
    """
    # Semicolons in titles break YAML parsing, replace with colons
    rendered_title = tc.titlecase(title).replace(';', ':') if title else ""
    return INDEX_TEMPLATE.format(
        title=rendered_title,
        slug=post.slug,
        date=post.date.isoformat(),
        cover=DEFAULT_COVER,
        category=category,
        body=BODY_PLACEHOLDER,
    )


def remote_cover(remote_img_base: str, query: str = "d=300x300") -> ContentTransform:
    """Create a transform that points the ``image:`` field at the remote copy.

    The cover is resolved against the post's image directory, so this must
    run before that directory is removed:

    - ``img/cover.jpg`` exists: the field is kept as is
    - only ``img/cover.png`` exists: the field's extension becomes ``.png``
    - neither exists: the ``image:`` line is dropped

    Whatever cover reference is left is then rewritten to
    ``<remote_img_base>/<relative path>/img/cover.<ext>?<query>``.

    Args:
        remote_img_base: Base URL of the remote image store
        query: Query string appended to the remote URL

    Returns:
        A transform function (content, post) -> content
    """
    base = remote_img_base.rstrip('/')

    def transform(content: str, post: Post) -> str:
        img_dir = Path(post.img_dir)
        if not (img_dir / "cover.jpg").exists():
            if (img_dir / "cover.png").exists():
                content = COVER_LINE_PATTERN.sub("image: img/cover.png", content)
            else:
                content = COVER_LINE_WITH_NEWLINE_PATTERN.sub("", content)

        remote_dir = f"{base}/{post.relative_path}/"
        return COVER_REF_PATTERN.sub(
            lambda m: f"image: {remote_dir}{m.group(1)}?{query}", content
        )
    return transform
