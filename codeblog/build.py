"""
Build the post index for the static export.

Loads every post, fails the build on any content error, and writes a JSON
manifest (ordered slugs plus post summaries) that the page generator reads.

Usage:
    python -m codeblog.build                  # load, validate, write manifest
    python -m codeblog.build --check          # validate only
    python -m codeblog.build --collect-errors # report every bad file at once
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from codeblog.errors import ContentBuildError, ContentError
from codeblog.services.content_index import ContentIndex
from codeblog.settings import Settings, settings

logger = logging.getLogger(__name__)


def build_manifest(index: ContentIndex, base_path: str) -> dict:
    return {
        "basePath": base_path,
        "slugs": index.list_slugs(),
        "posts": [post.model_dump(mode="json") for post in index.list_posts()],
    }


def write_manifest(manifest: dict, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(manifest, indent=2, ensure_ascii=False), encoding="utf-8")
    return path


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build the blog's post index.")
    parser.add_argument("--content-dir", help="Directory holding the post files")
    parser.add_argument("--output-dir", help="Directory the manifest is written to")
    parser.add_argument("--base-path", help="Prefix for root-relative image paths")
    parser.add_argument(
        "--collect-errors",
        action="store_true",
        help="Report every invalid file instead of stopping at the first",
    )
    parser.add_argument(
        "--check", action="store_true", help="Validate content without writing output"
    )
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace, base: Settings) -> Settings:
    overrides = {}
    if args.content_dir:
        overrides["CONTENT_DIR"] = args.content_dir
    if args.output_dir:
        overrides["OUTPUT_DIR"] = args.output_dir
    if args.base_path is not None:
        overrides["BASE_PATH"] = args.base_path
    if args.collect_errors:
        overrides["COLLECT_ERRORS"] = True
    return base.model_copy(update=overrides)


def run(current: Settings, check_only: bool = False) -> int:
    index = ContentIndex.from_settings(current)
    try:
        index.load_all()
    except ContentBuildError as e:
        for error in e.errors:
            logger.error(f"Content error: {error}")
        logger.error(f"Build failed with {len(e.errors)} content error(s)")
        return 1
    except ContentError as e:
        logger.error(f"Build failed: {e}")
        return 1

    if check_only:
        logger.info(f"Content check passed: {len(index)} posts")
        return 0

    manifest = build_manifest(index, current.BASE_PATH)
    path = write_manifest(manifest, current.manifest_path)
    logger.info(f"Wrote {len(manifest['slugs'])} posts -> {path}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    args = parse_args(argv)
    return run(resolve_settings(args, settings), check_only=args.check)


if __name__ == "__main__":
    sys.exit(main())
