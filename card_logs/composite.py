from card_logs.base import Logger


class CompositeLogger(Logger):
    """Fans every event out to its members. With no members it is silent.

    A `min_level` given here overrides the members' own thresholds, so one
    LOG_LEVEL setting governs every sink behind the composite.
    """

    def __init__(self, *loggers: Logger, min_level=None):
        self.loggers = loggers
        if min_level is not None:
            self.min_level = min_level
            for member in loggers:
                member.min_level = min_level

    def _emit(self, method, level, msg, data):
        if not self._enabled(level):
            return
        for member in self.loggers:
            getattr(member, method)(msg, **data)

    def info(self, msg, **data):
        self._emit("info", "INFO", msg, data)

    def debug(self, msg, **data):
        self._emit("debug", "DEBUG", msg, data)

    def warning(self, msg, **data):
        self._emit("warning", "WARN", msg, data)

    def error(self, msg, **data):
        self._emit("error", "ERROR", msg, data)
