# ============================================================================
# FILE: audioryx/core/logging.py
# ============================================================================
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

def setup_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process"""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # uvicorn access logs already carry method/path/status
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
