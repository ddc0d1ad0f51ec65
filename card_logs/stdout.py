from card_logs.base import Logger
from datetime import datetime, timezone


class StdoutLogger(Logger):

    def __init__(self, log_type="deck", min_level="DEBUG"):
        self.log_type = log_type
        self.min_level = min_level

    def _log(self, level, msg, data):
        if not self._enabled(level):
            return
        ts = datetime.now(timezone.utc).isoformat()
        print(f"[{ts}] [{self.log_type}] {level} {msg} {data}")

    def info(self, msg, **data):
        self._log("INFO", msg, data)

    def debug(self, msg, **data):
        self._log("DEBUG", msg, data)

    def warning(self, msg, **data):
        self._log("WARN", msg, data)

    def error(self, msg, **data):
        self._log("ERROR", msg, data)
