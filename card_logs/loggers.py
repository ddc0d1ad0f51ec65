from card_logs.chooseLogType import get_logger
import os

env = os.getenv("ENV", "cli")
log_dir = os.getenv("LOG_DIR", "logs")
log_level = os.getenv("LOG_LEVEL", "INFO")

deck_logger = get_logger(mode=env, log_type="deck", min_level=log_level, log_dir=log_dir)
builder_logger = get_logger(mode=env, log_type="builder", min_level=log_level, log_dir=log_dir)
