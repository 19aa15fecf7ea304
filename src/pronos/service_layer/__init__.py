"""Service layer for PRONOS.

Implements application use-cases, currently resolution of the current user.
Calls domain objects and the ports defined in `pronos.interfaces`.

Dependency rule: may import `pronos.domain` and `pronos.interfaces`, but not
`pronos.adapters` or `pronos.entrypoints`.
"""
