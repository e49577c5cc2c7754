"""Exchange a refresh token for a new token pair."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from dinely.application.commands.auth.token_pair import issue_tokens
from dinely.application.dtos import TokenPairDTO
from dinely.domain.user import UserRepository
from dinely_auth import InvalidRefreshTokenError, InvalidTokenError

if TYPE_CHECKING:
    from dinely_auth import JWTService

logger = logging.getLogger(__name__)


class RefreshTokenCommand:
    """
    Verify a refresh token, reload its user and issue a fresh pair.

    Every rejection surfaces as the same InvalidRefreshTokenError; the
    actual reason is only logged.
    """

    def __init__(self, user_repo: UserRepository, jwt_service: JWTService):
        self._user_repo = user_repo
        self._jwt_service = jwt_service

    async def execute(self, refresh_token: str) -> TokenPairDTO:
        try:
            claims = self._jwt_service.verify_refresh_token(refresh_token)
            user_id = UUID(claims.sub)
        except (InvalidTokenError, ValueError) as e:
            logger.warning("Refresh rejected: %s", e)
            raise InvalidRefreshTokenError from e

        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            logger.warning("Refresh rejected: user %s not found", user_id)
            raise InvalidRefreshTokenError

        if not user.is_active:
            logger.warning("Refresh rejected: user %s is inactive", user_id)
            raise InvalidRefreshTokenError

        tokens = issue_tokens(self._jwt_service, user)
        logger.debug("Tokens refreshed for user: %s", user_id)
        return tokens
