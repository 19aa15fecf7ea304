"""PRONOS tests.

Each top-level folder is also a pytest mark (applied in ``conftest.py``):

    unit/         one module at a time, fakes at the ports
    contract/     one suite run against every UserDirectory implementation
    integration/  SQLAlchemy and Alembic against real SQLite files
    functional/   CLI commands as a user would type them
    e2e/          the top-level ``pronos`` options (logging, flight recorder)

``fixtures/`` holds pytest plugins and no tests. Hypothesis tests sit next to
the code they exercise and carry the ``property`` mark.
"""
