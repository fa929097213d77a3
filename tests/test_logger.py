import inspect

import pytest

import errchain
from errchain import settings as settings_module
from errchain.logging import fmt, logger
from errchain.logging.ansi import FG_YELLOW
from tests.fixtures import *


def test_error_prints_every_frame_of_a_chain(three_layers, capsys):
    logger.error("Failed to load", three_layers)

    assert capsys.readouterr().err.splitlines() == [
        "[×] Failed to load",
        "    source.py:3 | load() | [code=3] top",
        "      source.py:2 | read_file() | middle",
        "        source.py:1 | read_block() | bottom",
    ]


def test_error_prints_foreign_exception(capsys):
    logger.error("Failed to load", ValueError("bad value"))

    err = capsys.readouterr().err
    assert "    ValueError: bad value" in err


def test_info_and_warn(capsys):
    logger.info("loading")
    logger.warn("slow")

    assert capsys.readouterr().err.splitlines() == ["[*] loading", "[!] slow"]


def test_fatal_exits(capsys):
    with pytest.raises(SystemExit) as info:
        logger.fatal("giving up")

    assert info.value.code == 1
    assert "giving up" in capsys.readouterr().err


def test_frame_matches_plain_format_without_color(three_layers):
    for frame in three_layers.frames():
        assert fmt.frame(frame) == format_frame(frame)


def test_frame_is_colored_when_enabled(clean_settings, three_layers):
    clean_settings.use_color()
    settings_module.commit()

    rendered = fmt.frame(three_layers.current())

    assert f"{FG_YELLOW}[code=3]" in rendered
    assert rendered != format_frame(three_layers.current())


def test_logger_works_after_importing_package(capsys):
    assert inspect.ismodule(errchain.settings)

    errchain.logging.logger.info("loading")

    assert capsys.readouterr().err == "[*] loading\n"


def test_debug_prints_plain_message(capsys):
    logger.debug("frame count: 3")

    assert capsys.readouterr().err == "frame count: 3\n"
