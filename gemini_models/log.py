import json
import logging
from typing import Any, Dict

# ---------------------------
# Structured logging (stderr, one JSON object per line)
# ---------------------------
logger = logging.getLogger("gemini_models")
logger.setLevel(logging.INFO)
_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter("%(message)s"))
if not logger.handlers:
    logger.addHandler(_handler)


def log_event(event: Dict[str, Any]) -> None:
    logger.info(json.dumps(event, ensure_ascii=False))
