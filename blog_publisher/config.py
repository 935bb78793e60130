"""Configuration for Blog Publisher.

Configuration is read once at startup, either from the environment (a
``.env`` file in the working directory is honoured by the CLI) or from a
YAML file, and then passed to every component as an immutable value.
"""

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from blog_publisher.errors import ValidationError

TRANSCODERS = ("pillow", "magick")

STRING_FIELDS = (
    "s3_bucket",
    "s3_key_prefix",
    "s3_endpoint_url",
    "remote_img_base_url",
    "aws_region",
    "transcoder",
)

# Environment variable for each configuration field
ENV_VARS = {
    "post_dir": "POST_DIR",
    "s3_bucket": "S3_BUCKET_NAME",
    "s3_key_prefix": "S3_KEY_PREFIX",
    "s3_endpoint_url": "S3_ENDPOINT_URL",
    "remote_img_base_url": "REMOTE_IMG_BASE_URL",
    "aws_region": "AWS_REGION",
    "transcoder": "BLOG_TRANSCODER",
    "max_image_size": "BLOG_MAX_IMAGE_SIZE",
}


@dataclass(frozen=True)
class BlogConfig:
    """Immutable settings shared by all components."""
    post_dir: Optional[Path] = None
    s3_bucket: str = ""
    s3_key_prefix: str = ""
    s3_endpoint_url: str = ""
    remote_img_base_url: str = ""
    aws_region: str = "ap-northeast-1"
    transcoder: str = "pillow"
    max_image_size: int = 1024

    @property
    def bounding_box(self):
        return (self.max_image_size, self.max_image_size)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "BlogConfig":
        """Build configuration from environment variables.

        Args:
            environ: Mapping to read from (default: os.environ)

        Returns:
            BlogConfig (not yet validated)
        """
        environ = os.environ if environ is None else environ
        values = {
            name: environ[var] for name, var in ENV_VARS.items() if var in environ
        }
        return cls._from_values(values)

    @classmethod
    def from_yaml(
        cls,
        config_path: Path,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "BlogConfig":
        """Build configuration from a YAML file.

        Keys missing from the file fall back to the environment.

        Args:
            config_path: Path to a YAML mapping of field names to values
            environ: Mapping used for fallback values (default: os.environ)

        Returns:
            BlogConfig (not yet validated)

        Raises:
            ValidationError: If the file is not a mapping or has unknown keys
        """
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValidationError(f"Config file {config_path} must contain a mapping")

        unknown = set(data) - {f.name for f in fields(cls)}
        if unknown:
            raise ValidationError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        base = cls.from_env(environ)
        overrides = {k: v for k, v in data.items() if v is not None}
        return cls._from_values({**base._as_values(), **overrides})

    @classmethod
    def _from_values(cls, values: Dict[str, Any]) -> "BlogConfig":
        values = dict(values)
        post_dir = values.get("post_dir")
        values["post_dir"] = Path(post_dir) if post_dir else None
        if "max_image_size" in values:
            try:
                values["max_image_size"] = int(values["max_image_size"])
            except (TypeError, ValueError):
                raise ValidationError(
                    f"max_image_size must be an integer, got {values['max_image_size']!r}"
                ) from None
        for key in STRING_FIELDS:
            if key in values:
                values[key] = str(values[key])
        return cls(**values)

    def _as_values(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def with_post_dir(self, post_dir: Path) -> "BlogConfig":
        return replace(self, post_dir=Path(post_dir))

    def validate(self) -> "BlogConfig":
        """Check the settings every command needs.

        Returns:
            self, so calls can be chained

        Raises:
            ValidationError: On a missing storage root or bad transcoder settings
        """
        if self.post_dir is None:
            raise ValidationError(f"{ENV_VARS['post_dir']} is not set")
        if self.transcoder not in TRANSCODERS:
            choices = ', '.join(TRANSCODERS)
            raise ValidationError(f"Unknown transcoder {self.transcoder!r} (expected one of: {choices})")
        if self.max_image_size <= 0:
            raise ValidationError(f"max_image_size must be positive, got {self.max_image_size}")
        return self

    def validate_for_publish(self) -> "BlogConfig":
        """Check the settings needed to upload and rewrite links.

        Raises:
            ValidationError: If the bucket or remote image base URL is missing
        """
        self.validate()
        missing = [
            ENV_VARS[name]
            for name in ("s3_bucket", "remote_img_base_url")
            if not getattr(self, name)
        ]
        if missing:
            raise ValidationError(f"Missing required settings for publish: {', '.join(missing)}")
        return self
