"""Domain layer for PRONOS.

Contains business rules: the identity value object and pure validation rules.
This package is deliberately technology-agnostic.

Dependency rule: do not import from `pronos.adapters` or `pronos.entrypoints`.
"""
