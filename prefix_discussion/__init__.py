"""
Prefix Discussion: labelled prefixes for forum discussion titles.
"""
__version__ = "1.4.0"
