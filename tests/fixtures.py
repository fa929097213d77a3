from typing import Iterator

import pytest

from errchain import settings as settings_module
from errchain.chain import ErrorSlot, make, wrap
from errchain.error import ChainedError
from errchain.frame import Frame, format_frame
from errchain.location import Location


@pytest.fixture(autouse=True)
def clean_settings() -> Iterator[settings_module.SettingsBuilder]:
    settings_module._settings_builder = settings_module.SettingsBuilder()
    settings_module._settings_builder.use_color(False)
    settings_module.commit()

    yield settings_module._settings_builder

    settings_module._settings_builder = settings_module.SettingsBuilder()
    settings_module._settings = None


def at(line: int, function: str = "layer", file: str = "source.py") -> Location:
    return Location(file, line, function)


@pytest.fixture(scope="function")
def open_failed() -> ChainedError:
    return make("open failed", location=at(10, "open_file"))


@pytest.fixture(scope="function")
def three_layers() -> ChainedError:
    bottom = make("bottom", location=at(1, "read_block"))
    middle = wrap("middle", bottom, location=at(2, "read_file"))
    return wrap("top", middle, code=3, location=at(3, "load"))
