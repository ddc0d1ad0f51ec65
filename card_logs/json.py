from card_logs.base import Logger
from datetime import datetime, timezone
import json
import sys


class JSONLogger(Logger):
    # stderr keeps the event stream out of the interactive prompts
    def __init__(self, log_type="deck", min_level="DEBUG", stream=None):
        self.log_type = log_type
        self.min_level = min_level
        self.stream = stream

    def _log(self, level, msg, data):
        if not self._enabled(level):
            return
        print(json.dumps({
            "ts": datetime.now(timezone.utc).isoformat(),
            "log_type": self.log_type,
            "level": level,
            "event": msg,
            "data": data
        }, default=str), file=self.stream or sys.stderr)

    def info(self, msg, **data):
        self._log("INFO", msg, data)

    def debug(self, msg, **data):
        self._log("DEBUG", msg, data)

    def warning(self, msg, **data):
        self._log("WARN", msg, data)

    def error(self, msg, **data):
        self._log("ERROR", msg, data)
