"""Unit tests for database engine configuration."""

import pytest

from infrastructure.database.session import engine_connect_args


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        (
            "postgresql+asyncpg://u:p@aws-0-eu.pooler.supabase.com:6543/postgres",
            {"statement_cache_size": 0},
        ),
        ("postgresql+asyncpg://localhost:5432/profiles", {}),
        ("sqlite+aiosqlite:///:memory:", {}),
    ],
)
def test_engine_connect_args(url: str, expected: dict):
    assert engine_connect_args(url) == expected
