"""Persistence: async engine, ORM models, repositories, Alembic migrations."""
