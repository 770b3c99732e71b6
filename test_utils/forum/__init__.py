"""
Minimal stand-in for a host forum, used by the tests.
"""
