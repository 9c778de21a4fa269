import datetime

from gamehub.utils import logger as logger_module
from gamehub.utils.logger import cleanup_old_logs, list_log_files, setup_logger


def test_setup_logger_writes_to_run_log_file():
    log = setup_logger("tests.logger")
    log.info("hello from the test suite")
    for handler in log.handlers:
        handler.flush()

    files = list_log_files()

    assert logger_module._GLOBAL_LOG_FILE in files
    assert "hello from the test suite" in logger_module._GLOBAL_LOG_FILE.read_text(
        encoding="utf-8"
    )


def test_setup_logger_is_idempotent():
    first = setup_logger("tests.logger.idempotent")
    second = setup_logger("tests.logger.idempotent")

    assert first is second
    assert len(second.handlers) == 2


def test_cleanup_removes_only_expired_day_directories():
    old_day = datetime.date.today() - datetime.timedelta(days=30)
    old_dir = logger_module.LOG_DIR / old_day.strftime("%Y-%m-%d")
    old_dir.mkdir(exist_ok=True)
    (old_dir / "gamehub_old.log").write_text("stale", encoding="utf-8")
    unrelated = logger_module.LOG_DIR / "keep-me"
    unrelated.mkdir(exist_ok=True)

    deleted = cleanup_old_logs(keep_days=7)

    assert deleted == 1
    assert not old_dir.exists()
    assert unrelated.exists()
    assert logger_module._GLOBAL_LOG_FILE.exists()
