"""Shared constants used across the application."""

# GitHub Settings
# ---------------

DEFAULT_GITHUB_API_URL = "https://api.github.com"
"""Default GitHub REST API URL. Override for GitHub Enterprise Server."""

DEFAULT_GITHUB_URL = "https://github.com"
"""Default GitHub web URL used to build clone URLs and links."""

NOREPLY_EMAIL_DOMAIN = "users.noreply.github.com"
"""Domain of the synthesized no-reply email used as the commit author email."""

PROJECT_URL = "https://github.com/github-template-sync/github-template-sync"
"""Fallback origin link for pull request bodies when no source repository is configured."""

# Sync Settings
# -------------

DEFAULT_CONFIG_PATH = "config.yml"
"""Default path to the sync configuration file."""

DEFAULT_CLONES_DIR = "clones"
"""Default directory that holds one clone per target repository."""

DEFAULT_BRANCH_NAME = "chore/sync-with-template"
"""Default name of the branch that carries template changes."""

DEFAULT_PR_BODY_TEMPLATE = "Automatically created by {{ source_url }}"
"""Default Jinja2 template for the body of created pull requests."""

HASH_CHUNK_SIZE = 1024 * 1024
"""Number of bytes read at a time when hashing file content."""
