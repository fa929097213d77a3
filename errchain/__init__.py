from errchain.location import Location
from errchain.frame import Frame, format_frame
from errchain.error import ChainedError, ChainAware, Foreign, Cause, classify
from errchain.chain import ErrorSlot, make, safe_chain, wrap
from errchain.settings import setup, commit

__all__ = [
    "Location",
    "Frame",
    "format_frame",
    "ChainedError",
    "ChainAware",
    "Foreign",
    "Cause",
    "classify",
    "ErrorSlot",
    "make",
    "safe_chain",
    "wrap",
    "setup",
    "commit",
]
