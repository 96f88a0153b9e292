"""
Caller identity from request headers.

Session handling lives in front of this service; it forwards the
authenticated user as `X-User-Id` / `X-User-Role`.
"""

from enum import StrEnum
from typing import Optional

import attrs
from fastapi import Depends, Header
from opentelemetry import trace

from src.platform.exception.exceptions import AuthenticationError, ForbiddenError


class UserRole(StrEnum):
    USER = 'user'
    ADMIN = 'admin'


@attrs.frozen
class CurrentUser:
    id: int
    role: UserRole = UserRole.USER

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


async def get_current_user(
    x_user_id: Optional[str] = Header(default=None),
    x_user_role: str = Header(default=UserRole.USER.value),
) -> CurrentUser:
    if not x_user_id or not x_user_id.strip().isdigit():
        raise AuthenticationError('Missing or invalid X-User-Id header')
    try:
        role = UserRole(x_user_role.strip().lower())
    except ValueError:
        raise AuthenticationError(f'Unknown role: {x_user_role}') from None
    return CurrentUser(id=int(x_user_id), role=role)


async def require_admin(current_user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
    tracer = trace.get_tracer(__name__)
    with tracer.start_as_current_span(
        'auth.require_admin',
        attributes={'user.id': current_user.id, 'user.role': current_user.role.value},
    ):
        if not current_user.is_admin:
            raise ForbiddenError('Only admins can perform this action')
        return current_user
