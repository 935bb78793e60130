"""Exceptions raised by Blog Publisher.

Filesystem failures are not wrapped; they surface as the built-in OSError.
"""

from pathlib import Path


class BlogPublisherError(Exception):
    """Base class for all errors raised by Blog Publisher."""


class MalformedPathError(BlogPublisherError, ValueError):
    """A relative path that does not decode to a post identity."""


class ValidationError(BlogPublisherError, ValueError):
    """Missing or invalid configuration."""


class TranscodeError(BlogPublisherError):
    """The image transcoder failed on a staged source image."""

    def __init__(self, source: Path, message: str):
        super().__init__(f"Failed to transcode {source}: {message}")
        self.source = source


class UploadError(BlogPublisherError):
    """The remote object store rejected an upload."""

    def __init__(self, key: str, message: str):
        super().__init__(f"Failed to upload {key}: {message}")
        self.key = key
