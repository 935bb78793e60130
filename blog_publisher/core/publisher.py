"""Publishing of posts: push images to remote storage and point links at them."""

import logging
import shutil
from pathlib import Path
from typing import List, Optional

from blog_publisher.config import BlogConfig
from blog_publisher.core.discovery import PostDiscovery
from blog_publisher.core.models import IMG_DIR_NAME, Post
from blog_publisher.images.naming import is_cover
from blog_publisher.storage.s3 import ObjectStore, S3ObjectStore
from blog_publisher.transforms.frontmatter import ContentTransform, remote_cover
from blog_publisher.transforms.links import compose, remote_image_links

logger = logging.getLogger(__name__)


class Publisher:
    """Publishes a single post.

    Publishing runs four steps in a fixed order, each applied for good
    before the next starts:

    1. prune images in ``img`` that the content file does not mention
    2. upload the remaining images
    3. rewrite image links in the content file to their remote URLs
    4. delete ``img`` and ``img_src``

    Nothing is rolled back when a step fails. Once step 4 has run the post
    no longer has a marker directory and later scans skip it.
    """

    def __init__(
        self,
        store: ObjectStore,
        bucket: str,
        key_prefix: str,
        remote_img_base: str,
        link_transform: Optional[ContentTransform] = None,
    ):
        """Initialize Publisher.

        Args:
            store: Remote object store client
            bucket: Bucket receiving the images
            key_prefix: Prefix for every object key
            remote_img_base: Base URL that serves the uploaded images
            link_transform: Transform applied to the content file in step 3
                (default: image links followed by the cover field)
        """
        self.store = store
        self.bucket = bucket
        self.key_prefix = key_prefix.strip('/')
        self.remote_img_base = remote_img_base.rstrip('/')
        self.link_transform = link_transform or compose(
            remote_image_links(self.remote_img_base),
            remote_cover(self.remote_img_base),
        )

    def publish(self, post: Post) -> bool:
        """Publish a post.

        Args:
            post: Post to publish

        Returns:
            True if the post was published, False if it had no image
            directory (already published, nothing to do)

        Raises:
            UploadError: If an upload fails
            OSError: On filesystem failures
        """
        if post.is_published():
            logger.debug("Skipping %s: no %s directory", post.relative_path, IMG_DIR_NAME)
            return False

        self.prune_unused_images(post)
        self.upload_images(post)
        self.rewrite_links(post)
        self.remove_image_directories(post)
        logger.info("Published %s", post.relative_path)
        return True

    def prune_unused_images(self, post: Post) -> List[Path]:
        """Delete published images the content file never mentions.

        An image counts as used if its filename appears anywhere in the
        content file. Cover images are always kept.

        Returns:
            Paths of the removed images
        """
        content = post.index_path.read_text(encoding='utf-8')

        removed = []
        for image in self._image_files(post):
            if is_cover(image.name) or image.name in content:
                continue
            image.unlink()
            logger.info("Removed unused image: %s", image.name)
            removed.append(image)
        return removed

    def upload_images(self, post: Post) -> List[str]:
        """Upload every file in the post's image directory.

        Returns:
            Object keys written, in upload order

        Raises:
            UploadError: On the first failed upload; earlier uploads stay
        """
        keys = []
        for image in self._image_files(post):
            key = self.object_key(post, image.name)
            self.store.put(self.bucket, key, image.read_bytes())
            logger.info("Uploaded %s to %s", image.name, key)
            keys.append(key)
        return keys

    def rewrite_links(self, post: Post) -> None:
        """Point image references in the content file at the remote copies."""
        content = post.index_path.read_text(encoding='utf-8')
        rewritten = self.link_transform(content, post)
        post.index_path.write_text(rewritten, encoding='utf-8')
        logger.info("Replaced image links in: %s", post.index_path)

    def remove_image_directories(self, post: Post) -> None:
        for directory in (post.img_dir, post.img_src_dir):
            if directory.exists():
                shutil.rmtree(directory)
        logger.info("Removed directories: %s, %s", post.img_dir, post.img_src_dir)

    def object_key(self, post: Post, filename: str) -> str:
        """Remote key for an image: ``<prefix>/<YYYY/MM/DD[_N]>/img/<filename>``."""
        parts = [self.key_prefix, post.relative_path, IMG_DIR_NAME, filename]
        return "/".join(p for p in parts if p)

    def _image_files(self, post: Post) -> List[Path]:
        return sorted(
            (entry for entry in post.img_dir.iterdir() if entry.is_file()),
            key=lambda p: p.name,
        )


class YearBatch:
    """Publishes every unpublished post of a year, one after another.

    The first failing post stops the batch; posts after it are left
    untouched.
    """

    def __init__(self, discovery: PostDiscovery, publisher: Publisher):
        self.discovery = discovery
        self.publisher = publisher

    def publish_year(self, year: int = 0) -> List[Post]:
        """Publish all posts discovered for ``year`` (0 = current year).

        Returns:
            Posts that were published, in scan order
        """
        posts = self.discovery.scan(year)
        logger.info("Found %d unpublished post(s)", len(posts))

        published = []
        for post in posts:
            if self.publisher.publish(post):
                published.append(post)
        return published


def create_publisher_from_config(
    config: BlogConfig,
    store: Optional[ObjectStore] = None,
) -> Publisher:
    """Build a Publisher from configuration.

    Args:
        config: Validated configuration
        store: Object store to use instead of S3

    Returns:
        Configured Publisher
    """
    config.validate_for_publish()
    if store is None:
        store = S3ObjectStore(
            region=config.aws_region,
            endpoint_url=config.s3_endpoint_url or None,
        )
    return Publisher(
        store=store,
        bucket=config.s3_bucket,
        key_prefix=config.s3_key_prefix,
        remote_img_base=config.remote_img_base_url,
    )


def create_year_batch_from_config(
    config: BlogConfig,
    store: Optional[ObjectStore] = None,
) -> YearBatch:
    """Build a YearBatch scanning ``config.post_dir``."""
    publisher = create_publisher_from_config(config, store=store)
    return YearBatch(PostDiscovery(config.post_dir), publisher)
