"""Tests for the redis-stat entry point."""

import logging

import pytest

from redis_stat.main import main, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers, level = root_logger.handlers[:], root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


class TestSetupLogging:
    def test_default_level(self):
        setup_logging()
        assert logging.getLogger().level == logging.INFO

    def test_verbose_level(self):
        handler = setup_logging(verbose=True)
        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger().handlers == [handler]


class TestMain:
    def test_resolves_and_logs_summary(self, capsys):
        assert main(["myhost:6380", "1", "5", "--csv"]) == 0
        err = capsys.readouterr().err
        assert "monitoring redis://myhost:6380" in err
        assert "samples: 5" in err
        assert "CSV output: stdout" in err

    def test_password_is_not_logged(self, capsys):
        main(["-v", "redis://:topsecret@h:6379", "--auth=alsosecret"])
        assert "secret" not in capsys.readouterr().err

    def test_error_exits_one(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--style=xml"])
        assert exc_info.value.code == 1
        assert "Invalid style: xml" in capsys.readouterr().out
