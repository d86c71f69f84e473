"""Logging configuration for the game store backend."""
import logging
import sys
from typing import Optional


def setup_logging(level: Optional[str] = None, echo_sql: bool = False) -> None:
    """
    Configure logging for the API process.
    
    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Unknown or missing names fall back to INFO.
        echo_sql: Keep SQLAlchemy engine statements at INFO instead of
                  silencing them below WARNING.
    """
    log_level = logging.getLevelName(level.upper()) if level else logging.INFO
    if not isinstance(log_level, int):
        log_level = logging.INFO
    
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    
    logging.getLogger("uvicorn").setLevel(log_level)
    logging.getLogger("uvicorn.access").setLevel(log_level)
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    if echo_sql:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
