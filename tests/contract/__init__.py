"""Contract tests.

The UserDirectory behavior every backend must share (case-insensitive
lookup, duplicate rejection, optional email), run against each
implementation through a parametrized fixture.
"""
