from dataclasses import dataclass
from datetime import timedelta
from functools import lru_cache
from uuid import UUID

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from account_service.adapter.services.error_reporter import (
    LoggingErrorReporter,
    SentryErrorReporter,
)
from account_service.adapter.services.notification_service import LoggingNotificationService
from account_service.adapter.services.revocation_registry import (
    InMemoryRevocationRegistry,
    RedisRevocationRegistry,
)
from account_service.adapter.services.token_issuer import JwtTokenIssuer
from account_service.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from account_service.api.error import ClientError
from account_service.api.utils.jwt import verify_jwt
from account_service.app.services.error_classifier import ErrorClassifier
from account_service.app.services.error_reporter import ErrorReporter
from account_service.app.services.notification_service import NotificationService
from account_service.app.services.revocation_registry import RevocationRegistry
from account_service.app.services.token_issuer import TokenIssuer
from account_service.libs.result import Error

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()


@dataclass(frozen=True)
class AuthenticatedSession:
    """Claims of the verified bearer token, plus the raw token itself"""

    user_id: UUID
    role: str
    token: str


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


@lru_cache
def get_revocation_registry() -> RevocationRegistry:
    """One registry per process"""
    if ApplicationConfig.REVOCATION_BACKEND == "redis":
        return RedisRevocationRegistry.from_url(
            ApplicationConfig.REDIS_URL, ApplicationConfig.JWT_EXPIRES_MINUTES * 60
        )
    return InMemoryRevocationRegistry()


def get_token_issuer() -> TokenIssuer:
    return JwtTokenIssuer(
        ApplicationConfig.JWT_SECRET,
        timedelta(minutes=ApplicationConfig.JWT_EXPIRES_MINUTES),
    )


def get_notification_service() -> NotificationService:
    return LoggingNotificationService(ApplicationConfig.APP_URL)


def get_error_reporter() -> ErrorReporter:
    if ApplicationConfig.ENABLE_SENTRY:
        return SentryErrorReporter()
    return LoggingErrorReporter()


def get_error_classifier(
    reporter: ErrorReporter = Depends(get_error_reporter),
) -> ErrorClassifier:
    return ErrorClassifier(reporter)


async def get_current_session(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    revocation_registry: RevocationRegistry = Depends(get_revocation_registry),
) -> AuthenticatedSession:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header
        revocation_registry: Registry of signed-out tokens

    Returns:
        AuthenticatedSession with user_id, role and the raw token

    Raises:
        ClientError: 401 if token is invalid, expired or revoked
    """
    token = credentials.credentials
    payload = verify_jwt(token)

    if payload is None or "user_id" not in payload:
        raise ClientError(
            Error("UNAUTHORIZED", "Invalid or expired token"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    if await revocation_registry.is_revoked(token):
        raise ClientError(
            Error("UNAUTHORIZED", "Token has been revoked"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return AuthenticatedSession(
        user_id=UUID(payload["user_id"]), role=payload.get("role", ""), token=token
    )
