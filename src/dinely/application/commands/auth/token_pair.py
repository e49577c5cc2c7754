"""Token pair issuance shared by login and refresh."""

from dinely.application.dtos import TokenPairDTO
from dinely.domain.user import User
from dinely_auth import JWTService


def issue_tokens(jwt_service: JWTService, user: User) -> TokenPairDTO:
    pair = jwt_service.issue_token_pair(user.id, user.email, user.name)
    return TokenPairDTO(
        access_token=pair.access_token,
        refresh_token=pair.refresh_token,
        expires_in=int(jwt_service.access_token_lifetime.total_seconds()),
    )
