from __future__ import annotations

import logging

from retirecalc.app import create_app
from retirecalc.core.logging import StructuredStreamHandler, setup_logging


def _ours(root: logging.Logger) -> list:
    return [h for h in root.handlers if isinstance(h, StructuredStreamHandler)]


def test_setup_logging_keeps_host_handlers_and_installs_one_of_ours():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    host = logging.NullHandler()
    root.addHandler(host)
    try:
        setup_logging("INFO")
        setup_logging("DEBUG")

        assert host in root.handlers
        assert len(_ours(root)) == 1
        assert root.level == logging.DEBUG
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def test_create_app_leaves_configured_logging_alone(settings):
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    host = logging.NullHandler()
    root.addHandler(host)
    try:
        before = list(root.handlers)
        create_app(settings)
        create_app(settings)

        assert root.handlers == before
        assert _ours(root) == [h for h in before if isinstance(h, StructuredStreamHandler)]
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def test_create_app_configures_bare_root_logger(settings):
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    root.handlers = []
    try:
        create_app(settings)

        assert len(_ours(root)) == 1
        assert root.level == logging.WARNING
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)
