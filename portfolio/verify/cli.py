from __future__ import annotations

import argparse
import json
import logging
import shlex
from datetime import datetime, timezone
from pathlib import Path

from ..config import settings
from ..utils.logging_utils import configure_logging
from .errors import BuildError
from .runner import SiteReport, verify_site

logger = logging.getLogger("portfolio.verify")


def write_evidence(report: SiteReport, evidence_dir: Path) -> Path:
    out_dir = evidence_dir / 'verify'
    out_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now(timezone.utc).strftime('%Y%m%d_%H%M%S_%f')
    out_path = out_dir / f'verify_site_{stamp}.json'
    out_path.write_text(json.dumps(report.to_dict(), indent=2, ensure_ascii=False), encoding='utf-8')
    return out_path


def print_report(report: SiteReport) -> None:
    print(f"verify_site passed={report.passed} dist={report.dist_dir}")
    for page in report.pages:
        for item in page.checks:
            tag = 'OK' if item.ok else ('MISSING' if not page.found else 'ERR')
            print(f'[{tag}] {page.path} {item.name}: {item.detail}')


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog='portfolio-verify', description='Build the site and verify the generated pages')
    ap.add_argument('--dist', default=None, help='output directory to check (default: settings.dist_dir)')
    ap.add_argument('--skip-build', action='store_true', help='check existing output without building')
    ap.add_argument('--build-cmd', default=None, help='build command (default: settings.build_command)')
    ap.add_argument('--timeout', type=int, default=None, help='build timeout in seconds')
    ap.add_argument('--workers', type=int, default=None, help='verify pages concurrently')
    ap.add_argument('--json', action='store_true')
    ap.add_argument('--no-evidence', action='store_true', help='do not write the JSON evidence report')
    args = ap.parse_args(argv)

    configure_logging(settings.log_level)
    dist = Path(args.dist).resolve() if args.dist else settings.dist_path
    command = shlex.split(args.build_cmd) if args.build_cmd else None
    try:
        report = verify_site(dist, build=not args.skip_build, build_command=command, workers=args.workers,
                             timeout=args.timeout)
    except BuildError as e:
        logger.error("build failed: %s", e)
        if e.output:
            logger.error("build output:\n%s", e.output)
        return 2

    payload = report.to_dict()
    if not args.no_evidence:
        out_path = write_evidence(report, settings.evidence_path)
        payload['evidence'] = str(out_path)

    if args.json:
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        print_report(report)
        if payload.get('evidence'):
            print(f"evidence={payload['evidence']}")

    return 0 if report.passed else 1


if __name__ == '__main__':  # pragma: no cover
    raise SystemExit(main())
