from gamehub.dependencies.auth import get_current_user_id, get_optional_claims

__all__ = [
    "get_current_user_id",
    "get_optional_claims",
]
