from __future__ import annotations

import json
import logging

from portfolio.utils.logging_utils import configure_logging, structured_log


def test_structured_log_emits_json_event(caplog):
    logger = logging.getLogger('portfolio.test')
    with caplog.at_level(logging.INFO, logger='portfolio'):
        structured_log(logger, logging.INFO, 'page_verified', page='index.html', ok=True)
    payload = json.loads(caplog.records[-1].getMessage())
    assert payload == {'event': 'page_verified', 'ok': True, 'page': 'index.html'}


def test_configure_logging_is_idempotent():
    configure_logging('DEBUG')
    configure_logging('WARNING')
    root = logging.getLogger('portfolio')
    assert root.level == logging.WARNING
    assert len([h for h in root.handlers if type(h).__name__ == '_StderrHandler']) == 1
