from datetime import timedelta
from uuid import UUID

from account_service.api.utils.jwt import generate_jwt
from account_service.app.services.token_issuer import TokenIssuer


class JwtTokenIssuer(TokenIssuer):
    """Issues HS256 JSON Web Tokens"""

    def __init__(self, secret: str, lifetime: timedelta):
        self.secret = secret
        self.lifetime = lifetime

    def mint(self, user_id: UUID, role: str) -> str:
        return generate_jwt(user_id, role, self.secret, self.lifetime)
