"""Integration tests.

Alembic migrations, the SQL-backed directory and bootstrap wiring against
real, file-backed SQLite databases created per test.
"""
