from . import fmt, logger
