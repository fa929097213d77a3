from errchain import settings
from errchain.frame import Frame

from .ansi import *


def paint(content: str, start: str, end: str) -> str:
    if not settings.settings().color():
        return content
    return f"{start}{content}{end}"


def location(file: str, line: int, function: str) -> str:
    return paint(f"{file}:{line} | {function}()", FG_BRIGHT_BLACK, FG_RESET)


def code(value: int) -> str:
    return paint(f"[code={value}]", FG_YELLOW, FG_RESET)


def message(content: str) -> str:
    return paint(content, FG_CYAN_BOLD, RESET)


def frame(frm: Frame) -> str:
    """
    Render a frame the way `format_frame` does, with each part colored.
    """
    text = f"{location(frm.file, frm.line, frm.function)} | "
    if frm.code != 0:
        text += f"{code(frm.code)} "
    return text + message(frm.message)
