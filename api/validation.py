"""Client-side preconditions checked before a request is sent."""

from __future__ import annotations

from typing import Optional

from api.errors import ClientValidationError
from infrastructure.constants import MAX_UPLOAD_BYTES, MIN_PASSWORD_LENGTH


def validate_password(password: str) -> str:
    if len(password or '') < MIN_PASSWORD_LENGTH:
        raise ClientValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
            key='validation.password_too_short',
        )
    return password


def validate_password_change(new_password: str, confirm_password: str) -> str:
    """Confirmation must match before the length rule is applied."""
    if new_password != confirm_password:
        raise ClientValidationError(
            "New passwords do not match",
            key='validation.password_mismatch',
        )
    return validate_password(new_password)


def validate_upload(size: int, content_type: Optional[str]) -> None:
    if not content_type or not content_type.startswith('image/'):
        raise ClientValidationError(
            "Only image files can be uploaded",
            key='validation.upload_not_image',
        )
    if size > MAX_UPLOAD_BYTES:
        raise ClientValidationError(
            f"File must be smaller than {MAX_UPLOAD_BYTES // (1024 * 1024)} MB",
            key='validation.upload_too_large',
        )


__all__ = ['validate_password', 'validate_password_change', 'validate_upload']
