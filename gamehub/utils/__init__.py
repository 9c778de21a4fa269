"""
Common utilities package for the GameHub backend: authentication helpers
and logging setup.
"""

from gamehub.utils.auth import (
    TokenService,
    get_password_hash,
    get_token_service,
    verify_password,
)
from gamehub.utils.logger import setup_logger

__all__ = [
    # Authentication utilities
    "TokenService",
    "get_password_hash",
    "get_token_service",
    "verify_password",
    # Logging utilities
    "setup_logger",
]
