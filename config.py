import logging
import os

# -----------------------------
# Budget defaults
# -----------------------------
DEFAULT_DAILY_LIMIT = float(os.getenv("BUDGET_DEFAULT_DAILY_LIMIT", "300"))
# 0 = Sunday ... 6 = Saturday
WEEK_STARTS_ON = int(os.getenv("BUDGET_WEEK_STARTS_ON", "1"))

# -----------------------------
# Logging
# -----------------------------
LOG_FILE = os.getenv("BUDGET_LOG_FILE", "budget_progress.log")
LOG_LEVEL = os.getenv("BUDGET_LOG_LEVEL", "INFO").upper()


def configure_logging():
    logging.basicConfig(
        filename=LOG_FILE,
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s"
    )
