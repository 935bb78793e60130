"""Shared fixtures for Blog Publisher tests."""

import datetime
import shutil
from pathlib import Path

import pytest

from blog_publisher.core.models import Post
from blog_publisher.core.scaffold import PostScaffolder
from blog_publisher.errors import TranscodeError, UploadError


class FakeTranscoder:
    """Records resize calls and copies the source bytes to the destination."""

    def __init__(self, fail_on=None):
        self.calls = []
        self.fail_on = set(fail_on or [])

    def resize(self, source, dest, bounding_box):
        self.calls.append((Path(source).name, Path(dest).name, bounding_box))
        if Path(source).name in self.fail_on:
            raise TranscodeError(Path(source), "simulated failure")
        shutil.copyfile(source, dest)


class FakeStore:
    """In-memory object store."""

    def __init__(self, fail_on=None):
        self.objects = {}
        self.puts = []
        self.fail_on = set(fail_on or [])

    def put(self, bucket, key, body):
        if key.rsplit('/', 1)[-1] in self.fail_on:
            raise UploadError(key, "simulated failure")
        self.puts.append((bucket, key))
        self.objects[(bucket, key)] = body


@pytest.fixture
def post_dir(tmp_path):
    root = tmp_path / "posts"
    root.mkdir()
    return root


@pytest.fixture
def make_post(post_dir):
    def _make(year=2024, month=5, day=10, number=0, scaffold=True):
        post = Post(
            date=datetime.date(year, month, day),
            sequence_number=number,
            root=post_dir,
        )
        if scaffold:
            PostScaffolder().scaffold(post)
        return post
    return _make


@pytest.fixture
def transcoder():
    return FakeTranscoder()


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def failing_transcoder():
    def _make(*names):
        return FakeTranscoder(fail_on=names)
    return _make


@pytest.fixture
def failing_store():
    def _make(*names):
        return FakeStore(fail_on=names)
    return _make
