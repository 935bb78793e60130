"""
Blog Publisher - Manage date-keyed post folders for a static blog

A small library and command line tool for:
- Scaffolding a post directory and content file for a date
- Normalizing staged images into web-ready assets
- Publishing images to remote object storage and rewriting links
- Publishing every unpublished post of a year in one batch
"""

from blog_publisher.config import BlogConfig
from blog_publisher.errors import (
    BlogPublisherError,
    MalformedPathError,
    TranscodeError,
    UploadError,
    ValidationError,
)
from blog_publisher.core.models import Post
from blog_publisher.core.codec import decode_path, encode_path
from blog_publisher.core.discovery import PostDiscovery
from blog_publisher.core.scaffold import PostScaffolder
from blog_publisher.core.creator import PostCreator
from blog_publisher.core.publisher import Publisher, YearBatch
from blog_publisher.images.processor import ImageProcessor

__version__ = "0.1.0"

__all__ = [
    "BlogConfig",
    "BlogPublisherError",
    "MalformedPathError",
    "TranscodeError",
    "UploadError",
    "ValidationError",
    "Post",
    "decode_path",
    "encode_path",
    "PostDiscovery",
    "PostScaffolder",
    "PostCreator",
    "Publisher",
    "YearBatch",
    "ImageProcessor",
]
