from __future__ import annotations

import json
import shlex
import sys

from portfolio.verify.cli import main


def test_cli_passes_on_good_site(make_dist, capsys):
    dist = make_dist()
    assert main(['--skip-build', '--dist', str(dist), '--no-evidence']) == 0
    out = capsys.readouterr().out
    assert 'verify_site passed=True' in out
    assert '[OK] career/index.html timeline_items: ok' in out


def test_cli_fails_on_missing_timeline_item(make_dist, site_content, capsys):
    dist = make_dist(timeline=site_content.timeline[:2])
    assert main(['--skip-build', '--dist', str(dist), '--no-evidence']) == 1
    assert '[ERR] career/index.html timeline_items' in capsys.readouterr().out


def test_cli_build_failure_exits_2(tmp_path):
    cmd = f'{shlex.quote(sys.executable)} -c "raise SystemExit(5)"'
    assert main(['--dist', str(tmp_path / 'dist'), '--build-cmd', cmd, '--no-evidence']) == 2


def test_cli_writes_evidence_and_json(make_dist, tmp_path, restore_settings, capsys):
    dist = make_dist()
    (dist / 'projects' / 'index.html').unlink()
    restore_settings.evidence_dir = str(tmp_path / 'evidence')
    assert main(['--skip-build', '--dist', str(dist), '--json']) == 1
    payload = json.loads(capsys.readouterr().out)
    assert payload['passed'] is False
    assert payload['summary']['pages_missing'] == 1
    files = list((tmp_path / 'evidence' / 'verify').glob('verify_site_*.json'))
    assert len(files) == 1
    saved = json.loads(files[0].read_text(encoding='utf-8'))
    assert saved['pages'][2]['checks'][0]['name'] == 'page_not_found'


def test_cli_build_does_not_wipe_existing_dir(tmp_path):
    target = tmp_path / 'mine'
    target.mkdir()
    (target / 'notes.txt').write_text('keep', encoding='utf-8')
    cmd = f'{shlex.quote(sys.executable)} -m portfolio.site build'
    assert main(['--dist', str(target), '--build-cmd', cmd, '--no-evidence']) == 2
    assert sorted(p.name for p in target.iterdir()) == ['notes.txt']


def test_cli_timeout_flag_does_not_touch_settings(tmp_path, restore_settings):
    restore_settings.build_timeout_s = 300
    cmd = f'{shlex.quote(sys.executable)} -c "import time; time.sleep(10)"'
    assert main(['--dist', str(tmp_path / 'dist'), '--build-cmd', cmd, '--timeout', '1', '--no-evidence']) == 2
    assert restore_settings.build_timeout_s == 300


def test_cli_workers_flag(make_dist, capsys):
    dist = make_dist()
    assert main(['--skip-build', '--dist', str(dist), '--workers', '4', '--no-evidence']) == 0
    lines = [ln for ln in capsys.readouterr().out.splitlines() if ln.startswith('[')]
    assert len(lines) == 13
    assert lines[0].startswith('[OK] index.html ')
    assert lines[-1].startswith('[OK] contact/index.html ')


def test_evidence_reports_do_not_overwrite(make_dist, tmp_path, restore_settings):
    dist = make_dist()
    restore_settings.evidence_dir = str(tmp_path / 'evidence')
    for _ in range(3):
        assert main(['--skip-build', '--dist', str(dist)]) == 0
    assert len(list((tmp_path / 'evidence' / 'verify').glob('verify_site_*.json'))) == 3
