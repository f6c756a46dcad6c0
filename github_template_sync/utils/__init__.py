"""Utility modules for shared functionality."""

from .constants import (
    DEFAULT_BRANCH_NAME,
    DEFAULT_CLONES_DIR,
    DEFAULT_CONFIG_PATH,
    DEFAULT_GITHUB_API_URL,
    DEFAULT_GITHUB_URL,
    DEFAULT_PR_BODY_TEMPLATE,
    NOREPLY_EMAIL_DOMAIN,
)

__all__ = [
    "DEFAULT_BRANCH_NAME",
    "DEFAULT_CLONES_DIR",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_GITHUB_API_URL",
    "DEFAULT_GITHUB_URL",
    "DEFAULT_PR_BODY_TEMPLATE",
    "NOREPLY_EMAIL_DOMAIN",
]
