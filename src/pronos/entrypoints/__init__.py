"""Entrypoints (inbound adapters) for PRONOS.

Expose the application to the outside world, currently through the CLI.
Parse and validate inputs, call service-layer use-cases, and present results.

Dependency rule: obtain wired components from `pronos.bootstrap`; avoid
importing `pronos.adapters` directly.
"""
