"""Shared helpers for vemi modules."""

from vemi.utils.logger import ROOT_LOGGER_NAME, get_logger

__all__ = [
    "ROOT_LOGGER_NAME",
    "get_logger",
]
