"""Tests for the bearer-token authentication dependency."""
import uuid
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.security import HTTPAuthorizationCredentials

from catalog.api.dependencies.auth import get_current_user
from catalog.core.exceptions import UnauthorizedError
from catalog.core.security import create_access_token
from tests.factories import make_user


def _creds(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


@pytest.fixture
def request_stub():
    req = MagicMock()
    req.state = MagicMock()
    return req


class TestGetCurrentUser:
    @pytest.mark.asyncio
    async def test_missing_credentials(self, request_stub, mock_db):
        with pytest.raises(UnauthorizedError) as exc_info:
            await get_current_user(request_stub, None, mock_db)
        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Authentication required"

    @pytest.mark.asyncio
    async def test_invalid_token(self, request_stub, mock_db):
        with pytest.raises(UnauthorizedError) as exc_info:
            await get_current_user(request_stub, _creds("bogus"), mock_db)
        assert exc_info.value.detail == "Invalid token"

    @pytest.mark.asyncio
    async def test_non_uuid_subject(self, request_stub, mock_db):
        token = create_access_token("not-a-uuid", "jane", "user")
        with pytest.raises(UnauthorizedError) as exc_info:
            await get_current_user(request_stub, _creds(token), mock_db)
        assert exc_info.value.detail == "Invalid token"

    @pytest.mark.asyncio
    @patch("catalog.api.dependencies.auth.user_repo.get_by_id", new_callable=AsyncMock)
    async def test_unknown_user(self, mock_get, request_stub, mock_db):
        mock_get.return_value = None
        token = create_access_token(str(uuid.uuid4()), "ghost", "user")

        with pytest.raises(UnauthorizedError) as exc_info:
            await get_current_user(request_stub, _creds(token), mock_db)
        assert exc_info.value.detail == "User not found"

    @pytest.mark.asyncio
    @patch("catalog.api.dependencies.auth.user_repo.get_by_id", new_callable=AsyncMock)
    async def test_inactive_user(self, mock_get, request_stub, mock_db):
        user = make_user(is_active=False)
        mock_get.return_value = user
        token = create_access_token(str(user.id), user.username, user.role)

        with pytest.raises(UnauthorizedError):
            await get_current_user(request_stub, _creds(token), mock_db)

    @pytest.mark.asyncio
    @patch("catalog.api.dependencies.auth.user_repo.get_by_id", new_callable=AsyncMock)
    async def test_valid_token_sets_request_user(self, mock_get, request_stub, mock_db):
        user = make_user(username="jane")
        mock_get.return_value = user
        token = create_access_token(str(user.id), user.username, user.role)

        result = await get_current_user(request_stub, _creds(token), mock_db)

        assert result is user
        assert request_stub.state.user is user
        mock_get.assert_awaited_once_with(mock_db, user.id)
