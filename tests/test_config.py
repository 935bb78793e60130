"""Tests for BlogConfig."""

from pathlib import Path

import pytest

from blog_publisher.config import BlogConfig
from blog_publisher.errors import ValidationError

ENV = {
    "POST_DIR": "/srv/blog/content/post",
    "S3_BUCKET_NAME": "images",
    "S3_KEY_PREFIX": "blog",
    "REMOTE_IMG_BASE_URL": "https://cdn.example.com/blog",
}


class TestFromEnv:
    """Tests for BlogConfig.from_env."""

    def test_reads_variables(self):
        config = BlogConfig.from_env(ENV)

        assert config.post_dir == Path("/srv/blog/content/post")
        assert config.s3_bucket == "images"
        assert config.s3_key_prefix == "blog"
        assert config.remote_img_base_url == "https://cdn.example.com/blog"

    def test_defaults(self):
        config = BlogConfig.from_env({})

        assert config.post_dir is None
        assert config.aws_region == "ap-northeast-1"
        assert config.transcoder == "pillow"
        assert config.bounding_box == (1024, 1024)

    def test_numeric_size(self):
        config = BlogConfig.from_env({"BLOG_MAX_IMAGE_SIZE": "800"})
        assert config.bounding_box == (800, 800)

    def test_bad_size(self):
        with pytest.raises(ValidationError):
            BlogConfig.from_env({"BLOG_MAX_IMAGE_SIZE": "big"})

    def test_is_immutable(self):
        config = BlogConfig.from_env(ENV)
        with pytest.raises(AttributeError):
            config.s3_bucket = "other"


class TestFromYaml:
    """Tests for BlogConfig.from_yaml."""

    def test_file_overrides_environment(self, tmp_path):
        path = tmp_path / "blog.yaml"
        path.write_text("post_dir: content/post\ns3_bucket: from-file\nmax_image_size: 512\n")

        config = BlogConfig.from_yaml(path, environ=ENV)

        assert config.post_dir == Path("content/post")
        assert config.s3_bucket == "from-file"
        assert config.s3_key_prefix == "blog"
        assert config.max_image_size == 512

    def test_empty_file_uses_environment(self, tmp_path):
        path = tmp_path / "blog.yaml"
        path.write_text("")

        assert BlogConfig.from_yaml(path, environ=ENV) == BlogConfig.from_env(ENV)

    def test_unknown_keys(self, tmp_path):
        path = tmp_path / "blog.yaml"
        path.write_text("bucket: images\n")

        with pytest.raises(ValidationError, match="bucket"):
            BlogConfig.from_yaml(path, environ={})

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "blog.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ValidationError):
            BlogConfig.from_yaml(path, environ={})

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            BlogConfig.from_yaml(tmp_path / "missing.yaml", environ={})


class TestValidate:
    """Tests for validate and validate_for_publish."""

    def test_valid(self):
        config = BlogConfig.from_env(ENV)
        assert config.validate_for_publish() is config

    def test_missing_post_dir(self):
        with pytest.raises(ValidationError, match="POST_DIR"):
            BlogConfig().validate()

    def test_unknown_transcoder(self):
        with pytest.raises(ValidationError):
            BlogConfig(post_dir=Path("posts"), transcoder="gimp").validate()

    def test_non_positive_size(self):
        with pytest.raises(ValidationError):
            BlogConfig(post_dir=Path("posts"), max_image_size=0).validate()

    def test_publish_requires_bucket_and_base_url(self):
        config = BlogConfig(post_dir=Path("posts"))

        config.validate()
        with pytest.raises(ValidationError) as exc_info:
            config.validate_for_publish()

        assert "S3_BUCKET_NAME" in str(exc_info.value)
        assert "REMOTE_IMG_BASE_URL" in str(exc_info.value)

    def test_with_post_dir(self):
        config = BlogConfig.from_env(ENV).with_post_dir("elsewhere")
        assert config.post_dir == Path("elsewhere")
        assert config.s3_bucket == "images"
