"""Shared dependencies for API routes."""

from config import settings


def get_page_height_px() -> int:
    return settings.ats_page_height_px
