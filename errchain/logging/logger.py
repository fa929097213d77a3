import sys
import traceback

from errchain.error import ChainedError

from . import fmt
from .ansi import *


def info(msg):
    print(f"[{fmt.paint('*', FG_GREEN, FG_RESET)}] {msg}", file=sys.stderr)


def warn(msg):
    print(f"[{fmt.paint('!', FG_YELLOW, FG_RESET)}] {msg}", file=sys.stderr)


def error(msg, exception: BaseException):
    print(f"{fmt.paint('[×]', BG_RED, BG_RESET)} {msg}", file=sys.stderr)

    if isinstance(exception, ChainedError):
        for depth, frame in enumerate(exception.frames()):
            indent = "  " * depth
            print(f"    {indent}{fmt.frame(frame)}", file=sys.stderr)
    else:
        print(f"    {type(exception).__name__}: {exception}", file=sys.stderr)
        for line in traceback.format_exception(exception):
            for sub_line in line.splitlines():
                print(f"      {sub_line}", file=sys.stderr)


def debug(msg):
    print(msg, file=sys.stderr)


def fatal(msg):
    print(f"[{fmt.paint('E', BG_RED, BG_RESET)}] {msg}", file=sys.stderr)
    print(f"[{fmt.paint('E', BG_RED, BG_RESET)}] Exiting...", file=sys.stderr)
    sys.exit(1)
