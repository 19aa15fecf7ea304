"""Unit tests.

Validators, the resolver, authentication sources, id generators and CLI
helpers, each in isolation. The resolver is driven through recording fakes;
the only database used is an in-memory SQLite engine.
"""
