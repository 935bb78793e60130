"""Creation of posts: scaffold, then normalize any staged images."""

from typing import List, Optional

from blog_publisher.config import BlogConfig
from blog_publisher.core.models import Post
from blog_publisher.core.scaffold import PostScaffolder
from blog_publisher.images.processor import ImageProcessor
from blog_publisher.images.transcoder import Transcoder, create_transcoder


class PostCreator:
    """Creates a post, or runs another drafting round on an existing one.

    Running it again for the same post leaves the directories and content
    file alone and only processes images staged since the last run.
    """

    def __init__(self, scaffolder: PostScaffolder, image_processor: ImageProcessor):
        self.scaffolder = scaffolder
        self.image_processor = image_processor

    def create(self, post: Post, title: Optional[str] = None) -> List[str]:
        """Scaffold ``post`` and process its staged images.

        Returns:
            Filenames of the images published into ``img``
        """
        self.scaffolder.scaffold(post, title=title)
        return self.image_processor.process_images(post)


def create_post_creator_from_config(
    config: BlogConfig,
    transcoder: Optional[Transcoder] = None,
) -> PostCreator:
    """Build a PostCreator from configuration."""
    config.validate()
    processor = ImageProcessor(
        transcoder=transcoder or create_transcoder(config.transcoder),
        bounding_box=config.bounding_box,
    )
    return PostCreator(PostScaffolder(), processor)
