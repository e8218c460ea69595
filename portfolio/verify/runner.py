"""
Page verifier: run the build, read the generated pages, check each one.

The build is treated as an opaque external command. A failed build raises
``BuildError`` and nothing else is checked. Every expectation on every page
is evaluated on its own, so one missing marker never hides another.
"""
from __future__ import annotations

import logging
import os
import shlex
import subprocess
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

from ..config import ROOT, settings
from ..utils.logging_utils import structured_log
from .errors import BuildError, PageNotFound
from .expectations import CheckResult, Expectation
from .pages import PAGE_EXPECTATIONS

logger = logging.getLogger("portfolio.verify")

OUTPUT_TAIL = 4000


@dataclass
class BuildResult:
    command: str
    returncode: int
    output: str
    elapsed_s: float


@dataclass
class PageResult:
    path: str
    found: bool
    checks: list[CheckResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.found and all(c.ok for c in self.checks)

    @property
    def failures(self) -> list[CheckResult]:
        return [c for c in self.checks if not c.ok]


@dataclass
class SiteReport:
    timestamp: str
    dist_dir: str
    pages: list[PageResult]
    build: Optional[BuildResult] = None

    @property
    def passed(self) -> bool:
        return all(p.ok for p in self.pages)

    def page(self, path: str) -> PageResult:
        for p in self.pages:
            if p.path == path:
                return p
        raise KeyError(path)

    def to_dict(self) -> dict[str, Any]:
        checks = [c for p in self.pages for c in p.checks]
        return {
            'timestamp': self.timestamp,
            'dist_dir': self.dist_dir,
            'passed': self.passed,
            'build': asdict(self.build) if self.build else None,
            'summary': {
                'pages_total': len(self.pages),
                'pages_missing': len([p for p in self.pages if not p.found]),
                'checks_total': len(checks),
                'checks_failed': len([c for c in checks if not c.ok]),
            },
            'pages': [
                {'path': p.path, 'found': p.found, 'ok': p.ok, 'checks': [asdict(c) for c in p.checks]}
                for p in self.pages
            ],
        }


def utc_now() -> str:
    return datetime.now(timezone.utc).strftime('%Y-%m-%dT%H:%M:%SZ')


def _tail(text: str) -> str:
    text = (text or '').strip()
    return text[-OUTPUT_TAIL:] if len(text) > OUTPUT_TAIL else text


def run_build(command: Sequence[str] | None = None, cwd: Path | str | None = None,
              timeout: int | None = None, env: Mapping[str, str] | None = None) -> BuildResult:
    cmd = list(command or settings.build_argv)
    shown = ' '.join(shlex.quote(x) for x in cmd)
    limit = timeout if timeout is not None else settings.build_timeout_s
    structured_log(logger, logging.INFO, 'build_started', command=shown, timeout_s=limit)
    t0 = time.monotonic()
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd or ROOT),
            env=dict(env) if env is not None else None,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            timeout=limit,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        out = e.output.decode('utf-8', 'replace') if isinstance(e.output, bytes) else (e.output or '')
        raise BuildError(f'build timed out after {limit}s: {shown}', cmd, None, _tail(out)) from e
    except OSError as e:
        raise BuildError(f'build could not start: {shown}: {e}', cmd) from e

    result = BuildResult(command=shown, returncode=proc.returncode, output=_tail(proc.stdout),
                         elapsed_s=round(time.monotonic() - t0, 3))
    if proc.returncode != 0:
        structured_log(logger, logging.ERROR, 'build_failed', command=shown, returncode=proc.returncode)
        raise BuildError(f'build exited with status {proc.returncode}: {shown}', cmd, proc.returncode, result.output)
    structured_log(logger, logging.INFO, 'build_finished', command=shown, elapsed_s=result.elapsed_s)
    return result


def load_page(path: str, dist_dir: Path | str | None = None) -> str:
    base = Path(dist_dir) if dist_dir is not None else settings.dist_path
    target = base / path
    if not target.is_file():
        raise PageNotFound(path, str(base))
    # Undecodable bytes become U+FFFD so a bad page still gets checked.
    return target.read_text(encoding='utf-8', errors='replace')


def verify(path: str, html: str, expectations: Sequence[Expectation]) -> list[CheckResult]:
    results = [exp.evaluate(html) for exp in expectations]
    for r in results:
        if not r.ok:
            structured_log(logger, logging.WARNING, 'check_failed', page=path, check=r.name, detail=r.detail)
    return results


def verify_page(path: str, expectations: Sequence[Expectation], dist_dir: Path | str | None = None) -> PageResult:
    try:
        html = load_page(path, dist_dir)
    except PageNotFound as e:
        structured_log(logger, logging.WARNING, 'page_not_found', page=path, location=e.location)
        return PageResult(path=path, found=False, checks=[
            CheckResult(name='page_not_found', ok=False, detail=str(e)),
        ])
    except OSError as e:
        structured_log(logger, logging.WARNING, 'page_unreadable', page=path, error=str(e))
        return PageResult(path=path, found=True, checks=[
            CheckResult(name='page_unreadable', ok=False, detail=f'{path}: {e}'),
        ])
    checks = verify(path, html, expectations)
    page = PageResult(path=path, found=True, checks=checks)
    structured_log(logger, logging.INFO, 'page_verified', page=path, ok=page.ok,
                   checks=len(checks), failed=len(page.failures))
    return page


def verify_site(dist_dir: Path | str | None = None,
                expectations: Mapping[str, Sequence[Expectation]] | None = None,
                build: bool = True,
                build_command: Sequence[str] | None = None,
                workers: int | None = None,
                timeout: int | None = None) -> SiteReport:
    base = Path(dist_dir) if dist_dir is not None else settings.dist_path
    table = expectations if expectations is not None else PAGE_EXPECTATIONS
    build_result = None
    if build:
        # The build learns the expected output dir the same way settings do.
        env = {**os.environ, "PORTFOLIO_DIST_DIR": str(base)}
        build_result = run_build(build_command, timeout=timeout, env=env)

    n = max(1, int(workers if workers is not None else settings.verify_workers))
    items = list(table.items())
    if n > 1 and len(items) > 1:
        with ThreadPoolExecutor(max_workers=n) as ex:
            pages = list(ex.map(lambda kv: verify_page(kv[0], kv[1], base), items))
    else:
        pages = [verify_page(path, exps, base) for path, exps in items]

    return SiteReport(timestamp=utc_now(), dist_dir=str(base), pages=pages, build=build_result)
