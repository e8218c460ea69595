from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Iterable

from ..config import ROOT
from ..utils.logging_utils import structured_log
from .content import SiteContent
from .render import STYLESHEET, render_pages

logger = logging.getLogger("portfolio.site")

# Written into every output dir; only dirs carrying it are ever wiped.
BUILD_MARKER = ".portfolio-build"


class OutputDirError(Exception):
    """The output directory is not safe to clean."""


def check_out_dir(out: Path, protect: Iterable[Path] = ()) -> None:
    target = out.resolve()
    for p in [ROOT, Path.cwd(), *protect]:
        p = Path(p).resolve()
        if p == target or target in p.parents:
            raise OutputDirError(f"refusing to clean {out}: it contains {p}")
    if not target.exists():
        return
    if not target.is_dir():
        raise OutputDirError(f"refusing to clean {out}: not a directory")
    if any(target.iterdir()) and not (target / BUILD_MARKER).is_file():
        raise OutputDirError(f"refusing to clean {out}: not empty and not a previous build (no {BUILD_MARKER})")


def build_site(content: SiteContent, out_dir: Path | str, protect: Iterable[Path] = ()) -> list[Path]:
    """Write every page plus the stylesheet into ``out_dir``.

    A previous build in ``out_dir`` is removed first so a rebuild never keeps
    stale pages around, and nothing time-dependent is rendered: two builds
    of the same content are byte-identical. Directories that hold anything
    other than a previous build, or that contain the project root, the
    working directory or a path in ``protect``, raise ``OutputDirError``.
    """
    out = Path(out_dir)
    check_out_dir(out, protect)
    if out.exists():
        shutil.rmtree(out)
    out.mkdir(parents=True)
    (out / BUILD_MARKER).write_text("portfolio build output\n", encoding="utf-8")

    files = dict(render_pages(content))
    files["assets/site.css"] = STYLESHEET

    written: list[Path] = []
    for rel, text in files.items():
        dest = out / rel
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(text, encoding="utf-8")
        written.append(dest)
        logger.debug("wrote %s", rel)

    structured_log(logger, logging.INFO, "site_built", out_dir=str(out), files=len(written),
                   timeline_items=len(content.timeline), projects=len(content.projects))
    return written
