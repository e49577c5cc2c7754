"""Issue a password reset token for an email address."""

from __future__ import annotations

import asyncio
import logging
import smtplib
from typing import TYPE_CHECKING, Optional

from dinely.domain.user import Email, InvalidEmailError, UserRepository

if TYPE_CHECKING:
    from dinely.infrastructure.email import EmailService
    from dinely_auth import JWTService

logger = logging.getLogger(__name__)


class RequestPasswordResetCommand:
    """
    Issue a reset token for an active user and send it as a reset link.

    Unknown, malformed and inactive emails all return None so the outcome
    reveals nothing about which accounts exist. Without an email service
    the token is only returned to the caller.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        jwt_service: JWTService,
        email_service: Optional[EmailService] = None,
        frontend_base_url: str = "",
    ):
        self._user_repo = user_repo
        self._jwt_service = jwt_service
        self._email_service = email_service
        self._frontend_base_url = frontend_base_url.rstrip("/")

    async def execute(self, email: str) -> Optional[str]:
        try:
            normalized_email = Email(email)
        except InvalidEmailError:
            return None

        user = await self._user_repo.find_by_email(normalized_email)
        if user is None or not user.is_active:
            logger.info("Password reset requested for unknown or inactive account")
            return None

        token = self._jwt_service.issue_password_reset_token(user.id)
        logger.info("Password reset token issued for user: %s", user.id)

        if self._email_service is not None:
            await self._send_reset_link(user.email, token)

        return token

    def reset_link(self, token: str) -> str:
        return f"{self._frontend_base_url}/reset-password?token={token}"

    async def _send_reset_link(self, to_email: str, token: str) -> None:
        try:
            await asyncio.to_thread(
                self._email_service.send_password_reset_email,
                to_email=to_email,
                reset_link=self.reset_link(token),
            )
        except (smtplib.SMTPException, OSError) as e:
            # Same response either way; the user can ask again
            logger.error("Failed to send password reset email: %s", e)
