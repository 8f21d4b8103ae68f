"""Test log level filtering in the file sink."""

import pytest

from buildchat.core.log import (
    ConsoleSink,
    FileSink,
    LogfireSink,
    level_name,
    setup_logger,
)


def file_logger(tmp_path, level):
    log_file = tmp_path / f"{level}.log"
    logger = setup_logger(
        log_root=tmp_path,
        service_name="test",
        console=ConsoleSink(enabled=False),
        file=FileSink(enabled=True, level=level, path=str(log_file)),
        logfire=LogfireSink(enabled=False),
    )
    return logger, log_file


def test_spew_level_includes_all(tmp_path):
    logger, log_file = file_logger(tmp_path, "spew")

    logger.spew("SPEW message")
    logger.trace("TRACE message")
    logger.debug("DEBUG message")
    logger.info("INFO message")
    logger.close()

    content = log_file.read_text()
    for name in ("SPEW", "TRACE", "DEBUG", "INFO"):
        assert f"{name} message" in content


def test_info_level_filters_debug(tmp_path):
    logger, log_file = file_logger(tmp_path, "info")

    logger.debug("DEBUG message")
    logger.info("INFO message")
    logger.error("ERROR message")
    logger.close()

    content = log_file.read_text()
    assert "DEBUG message" not in content
    assert "INFO message" in content
    assert "ERROR message" in content


def test_file_lines_carry_level_and_attributes(tmp_path):
    logger, log_file = file_logger(tmp_path, "info")

    logger.warn("Room unreachable", room="ops")
    logger.close()

    content = log_file.read_text()
    assert "[warn] Room unreachable" in content
    assert "room='ops'" in content


@pytest.mark.parametrize(
    "num,name",
    [(1, "spew"), (5, "debug"), (9, "info"), (13, "warn"), (21, "fatal")],
)
def test_level_name(num, name):
    assert level_name(num) == name
