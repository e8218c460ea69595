from __future__ import annotations

import argparse
import logging
from pathlib import Path

from ..config import settings
from ..utils.logging_utils import configure_logging
from .builder import OutputDirError, build_site
from .content import ContentError, load_content

logger = logging.getLogger("portfolio.site")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="portfolio-build", description="Build the portfolio site")
    sub = p.add_subparsers(dest="command", required=True)
    b = sub.add_parser("build", help="render content into the output directory")
    b.add_argument("--content", default=None, help="YAML content file (default: settings.content_path)")
    b.add_argument("--out", default=None, help="output directory (default: settings.dist_dir)")
    args = p.parse_args(argv)

    configure_logging(settings.log_level)

    content_path = Path(args.content).resolve() if args.content else settings.content_file
    out_dir = Path(args.out).resolve() if args.out else settings.dist_path
    try:
        content = load_content(content_path)
    except ContentError as e:
        logger.error("content error: %s", e)
        return 1
    try:
        written = build_site(content, out_dir, protect=[content_path])
    except OutputDirError as e:
        logger.error("output error: %s", e)
        return 1
    print(f"Built {len(written)} file(s) into {out_dir}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
