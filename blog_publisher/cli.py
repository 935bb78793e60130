"""Command line interface for Blog Publisher.

Create (or continue drafting) a post::

    blog-publisher -d 2024/05/10 [-n 1] [-t "Title"]

Publish every unpublished post of a year::

    blog-publisher -p [-y 2024]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import dotenv

from blog_publisher.config import BlogConfig
from blog_publisher.core.creator import create_post_creator_from_config
from blog_publisher.core.models import Post
from blog_publisher.core.publisher import create_year_batch_from_config
from blog_publisher.dates import resolve_post_date
from blog_publisher.errors import BlogPublisherError


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="blog-publisher",
        description="Create date-keyed blog posts and publish their images.",
    )
    parser.add_argument("-d", "--date", default="", help="Post date, e.g. 2024/05/10 or 05/10 (default: today).")
    parser.add_argument("-n", "--number", type=int, default=0, help="Sequence number for extra posts on the same day.")
    parser.add_argument("-t", "--title", default=None, help="Title written into a newly created post.")
    parser.add_argument("-p", "--publish", action="store_true", help="Publish all unpublished posts of a year.")
    parser.add_argument("-y", "--year", type=int, default=0, help="Year to publish (default: current year).")
    parser.add_argument("-c", "--config", type=Path, default=None, help="YAML config file (default: environment).")
    parser.add_argument("--post-dir", type=Path, default=None, help="Override the storage root (POST_DIR).")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    if args.number < 0:
        parser.error("--number must be >= 0")
    if args.year < 0:
        parser.error("--year must be >= 0")
    return args


def load_config(args: argparse.Namespace) -> BlogConfig:
    dotenv.load_dotenv(Path.cwd() / ".env")
    if args.config:
        config = BlogConfig.from_yaml(args.config)
    else:
        config = BlogConfig.from_env()
    if args.post_dir:
        config = config.with_post_dir(args.post_dir)
    return config


def run_create(config: BlogConfig, args: argparse.Namespace) -> None:
    creator = create_post_creator_from_config(config)
    date = resolve_post_date(args.date)
    post = Post(date=date, sequence_number=args.number, root=config.post_dir)
    images = creator.create(post, title=args.title)
    print(f"Post ready: {post.path} ({len(images)} image(s) processed)")


def run_publish(config: BlogConfig, args: argparse.Namespace) -> None:
    batch = create_year_batch_from_config(config)
    published = batch.publish_year(args.year)
    for post in published:
        print(f"Published: {post.relative_path}")
    print(f"{len(published)} post(s) published")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args)
        if args.publish:
            run_publish(config, args)
        else:
            run_create(config, args)
    except (BlogPublisherError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
