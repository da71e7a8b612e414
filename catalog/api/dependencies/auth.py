from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.api.dependencies.database import get_db
from catalog.core.exceptions import UnauthorizedError
from catalog.core.security import verify_access_token
from catalog.models.orm.user import User
from catalog.repositories import user_repo

security = HTTPBearer(auto_error=False)


async def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> User:
    if not credentials:
        raise UnauthorizedError("Authentication required")

    payload = verify_access_token(credentials.credentials)
    if not payload:
        raise UnauthorizedError("Invalid token")

    try:
        user_id = UUID(payload["sub"])
    except (KeyError, ValueError):
        raise UnauthorizedError("Invalid token") from None

    user = await user_repo.get_by_id(db, user_id)
    if not user or not user.is_active:
        raise UnauthorizedError("User not found")

    request.state.user = user
    return user
