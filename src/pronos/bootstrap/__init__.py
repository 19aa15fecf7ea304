"""Bootstrap (composition root) for PRONOS.

Assembles the application at runtime: wires a concrete user directory and
authentication source into the `UserResolver` and reads configuration.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `pronos.adapters`, `pronos.service_layer`,
  `pronos.interfaces`, `pronos.domain`, and `pronos.config`.
- Inner layers must not import `pronos.bootstrap`.
"""

from .bootstrap import (
    SECURITY_CONTEXT,
    AppContainer,
    bootstrap,
    build_authentication_source,
    build_user_directory,
)

__all__ = [
    "SECURITY_CONTEXT",
    "AppContainer",
    "bootstrap",
    "build_authentication_source",
    "build_user_directory",
]
