"""Adapters (infrastructure) for PRONOS.

Provide concrete implementations of the ports in `pronos.interfaces`: user
directories (in-memory and SQL), ambient authentication sources and ID
generators, plus database wiring (engine, metadata, schema, migrations).

Dependency rule: may import `pronos.domain` and `pronos.interfaces`; the domain
must not import this package.
"""
