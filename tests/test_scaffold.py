"""Tests for PostScaffolder class."""

import datetime

import yaml

from blog_publisher.core.models import Post
from blog_publisher.core.scaffold import PostScaffolder


class TestPostScaffolder:
    """Tests for PostScaffolder class."""

    def _post(self, root, number=0):
        return Post(date=datetime.date(2024, 5, 10), sequence_number=number, root=root)

    def test_creates_directories(self, post_dir):
        post = self._post(post_dir)

        PostScaffolder().scaffold(post)

        assert post.path.is_dir()
        assert post.img_dir.is_dir()
        assert post.img_src_dir.is_dir()

    def test_creates_index_from_template(self, post_dir):
        post = self._post(post_dir)

        created = PostScaffolder().scaffold(post)

        assert created is True
        assert post.index_path.read_text(encoding='utf-8') == (
            "---\n"
            "title: \n"
            "slug: 20240510\n"
            "date: 2024-05-10\n"
            "image: img/cover.jpg\n"
            "categories:\n"
            "- テスト\n"
            "tags:\n"
            "---\n"
            "\n"
            "## きっかけ\n"
            "\n"
        )

    def test_frontmatter_is_valid_yaml(self, post_dir):
        post = self._post(post_dir, number=2)
        PostScaffolder().scaffold(post)

        text = post.index_path.read_text(encoding='utf-8')
        frontmatter = yaml.safe_load(text.split('---\n', 2)[1])

        assert frontmatter["slug"] == 202405102
        assert frontmatter["date"] == datetime.date(2024, 5, 10)
        assert frontmatter["image"] == "img/cover.jpg"
        assert frontmatter["categories"] == ["テスト"]
        assert frontmatter["tags"] is None

    def test_title_is_title_cased(self, post_dir):
        post = self._post(post_dir)

        PostScaffolder().scaffold(post, title="a walk in the park")

        assert "title: A Walk in the Park\n" in post.index_path.read_text(encoding='utf-8')

    def test_custom_category(self, post_dir):
        post = self._post(post_dir)

        PostScaffolder(category="travel").scaffold(post)

        assert "categories:\n- travel\n" in post.index_path.read_text(encoding='utf-8')

    def test_second_scaffold_leaves_index_untouched(self, post_dir):
        post = self._post(post_dir)
        scaffolder = PostScaffolder()
        scaffolder.scaffold(post)
        post.index_path.write_text("edited by hand\n", encoding='utf-8')
        before = post.index_path.read_bytes()

        created = scaffolder.scaffold(post, title="New Title")

        assert created is False
        assert post.index_path.read_bytes() == before

    def test_scaffold_twice_is_byte_identical(self, post_dir):
        post = self._post(post_dir)
        scaffolder = PostScaffolder()
        scaffolder.scaffold(post)
        first = post.index_path.read_bytes()

        scaffolder.scaffold(post)

        assert post.index_path.read_bytes() == first

    def test_existing_staged_images_are_kept(self, post_dir):
        post = self._post(post_dir)
        post.img_src_dir.mkdir(parents=True)
        (post.img_src_dir / "IMG_1.JPG").write_bytes(b"jpeg")

        PostScaffolder().scaffold(post)

        assert (post.img_src_dir / "IMG_1.JPG").read_bytes() == b"jpeg"
