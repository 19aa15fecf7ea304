"""Alembic migration scripts for PRONOS (see `pronos.config.build_alembic_config`)."""
