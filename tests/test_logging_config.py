import logging
from contextlib import contextmanager

from record_store_api.app.core.logging_config import setup_logging


@contextmanager
def bare_root_logger():
    """Temporarily strip the root logger so ``setup_logging`` configures it."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    try:
        yield root
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def test_setup_logging_adds_console_and_file_handlers(tmp_path):
    logfile = tmp_path / "records.log"
    with bare_root_logger() as root:
        setup_logging("debug", str(logfile))

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2

        logging.getLogger("record_store_api.test").info("Created record %s", 1)
        for handler in root.handlers:
            handler.flush()
    content = logfile.read_text(encoding="utf-8")
    assert "[INFO] record_store_api.test: Created record 1" in content


def test_setup_logging_runs_once():
    with bare_root_logger() as root:
        setup_logging("INFO")
        setup_logging("DEBUG")
        assert len(root.handlers) == 1
        assert root.level == logging.INFO


def test_unknown_level_falls_back_to_info():
    with bare_root_logger() as root:
        setup_logging("chatty")
        assert root.level == logging.INFO


def test_store_level_applies_to_package_logger_only():
    store_logger = logging.getLogger("record_store_api")
    try:
        with bare_root_logger() as root:
            setup_logging("WARNING", store_level="debug")
            assert root.level == logging.WARNING
            assert store_logger.level == logging.DEBUG
            child = logging.getLogger("record_store_api.app.services.record_service")
            assert child.isEnabledFor(logging.DEBUG)
            assert not logging.getLogger("uvicorn.access").isEnabledFor(logging.INFO)
    finally:
        store_logger.setLevel(logging.NOTSET)


def test_store_level_reset_when_not_given():
    store_logger = logging.getLogger("record_store_api")
    store_logger.setLevel(logging.ERROR)
    setup_logging("INFO")
    assert store_logger.level == logging.NOTSET
