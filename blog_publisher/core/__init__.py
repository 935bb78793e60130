"""Core components for Blog Publisher."""

from blog_publisher.core.models import Post
from blog_publisher.core.codec import decode_path, encode_path
from blog_publisher.core.discovery import PostDiscovery
from blog_publisher.core.scaffold import PostScaffolder
from blog_publisher.core.creator import PostCreator, create_post_creator_from_config
from blog_publisher.core.publisher import (
    Publisher,
    YearBatch,
    create_publisher_from_config,
    create_year_batch_from_config,
)

__all__ = [
    "Post",
    "decode_path",
    "encode_path",
    "PostDiscovery",
    "PostScaffolder",
    "PostCreator",
    "create_post_creator_from_config",
    "Publisher",
    "YearBatch",
    "create_publisher_from_config",
    "create_year_batch_from_config",
]
