"""Utility module for markasset."""

from markasset.utils.concurrency import Fulfilled, Outcome, Rejected, settle_all
from markasset.utils.logging import get_logger, setup_logging

__all__ = [
    # Concurrency
    "Fulfilled",
    "Outcome",
    "Rejected",
    "settle_all",
    # Logging
    "get_logger",
    "setup_logging",
]
