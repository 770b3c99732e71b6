"""
Discussion prefixes Django application.
"""
