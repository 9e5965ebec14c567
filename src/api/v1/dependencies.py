"""Dependency injection factories for API v1."""

from functools import lru_cache
from typing import Callable

from core.config import settings
from domain.services.profile_service import ProfileService
from domain.services.quiz_service import QuizGenerator
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
from infrastructure.llm.openrouter_client import OpenRouterClient


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_profile_service() -> ProfileService:
    """Get Profile service instance."""
    return ProfileService(get_uow_factory())


@lru_cache
def get_openrouter_client() -> OpenRouterClient:
    """Get the shared OpenRouter client."""
    return OpenRouterClient()


def get_quiz_generator() -> QuizGenerator:
    """A fresh generator per request; its status belongs to that request."""
    return QuizGenerator(
        get_openrouter_client(),
        model=settings.quiz_model,
        default_prompt=settings.quiz_default_prompt,
    )
