"""Database wiring for PRONOS: engine factory, metadata, schema and migrations."""
