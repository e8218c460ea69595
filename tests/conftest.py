from __future__ import annotations

import sys
from pathlib import Path

import pytest

from portfolio.config import ROOT, settings
from portfolio.site import build_site, load_content
from portfolio.verify import run_build


@pytest.fixture(autouse=True)
def restore_settings():
    tracked = {
        'log_level': settings.log_level,
        'content_path': settings.content_path,
        'dist_dir': settings.dist_dir,
        'evidence_dir': settings.evidence_dir,
        'build_command': settings.build_command,
        'build_timeout_s': settings.build_timeout_s,
        'verify_workers': settings.verify_workers,
    }
    yield settings
    for key, value in tracked.items():
        setattr(settings, key, value)


@pytest.fixture(scope='session')
def built_dist(tmp_path_factory) -> Path:
    """Run the real build command once, the way a CI job would."""
    out = tmp_path_factory.mktemp('site') / 'dist'
    run_build([sys.executable, '-m', 'portfolio.site', 'build', '--out', str(out)], cwd=ROOT)
    return out


@pytest.fixture
def site_content():
    return load_content(ROOT / 'content' / 'site.yaml')


@pytest.fixture
def make_dist(tmp_path, site_content):
    def _build(**changes) -> Path:
        content = site_content.model_copy(update=changes) if changes else site_content
        out = tmp_path / 'dist'
        build_site(content, out)
        return out
    return _build
