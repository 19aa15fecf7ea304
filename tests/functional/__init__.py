"""Functional tests.

Drive the ``pronos`` CLI with Click's ``CliRunner`` the way a league
administrator would, asserting on output and exit codes only.
"""
