from card_logs.stdout import StdoutLogger
from card_logs.file import FileLogger
from card_logs.json import JSONLogger
from card_logs.composite import CompositeLogger


def get_logger(mode="cli", log_type="deck", min_level="INFO", log_dir="logs"):
    if mode == "dev":
        return StdoutLogger(log_type=log_type, min_level=min_level)
    if mode == "prod":
        return CompositeLogger(
            FileLogger(log_type=log_type, base_path=log_dir),
            JSONLogger(log_type=log_type),
            min_level=min_level
        )
    if mode == "test":
        return CompositeLogger()
    # the terminal belongs to the menu, so the CLI only logs to file
    return FileLogger(log_type=log_type, base_path=log_dir, min_level=min_level)
