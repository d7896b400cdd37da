"""Shared utilities for the update status service."""

from utils.config import AppConfig
from utils.update_status import (
    STATUS_OPTIONS,
    StatusFilter,
    status_categories,
    status_label,
)

__all__ = [
    "AppConfig",
    "STATUS_OPTIONS",
    "StatusFilter",
    "status_categories",
    "status_label",
]
