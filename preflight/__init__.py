"""
content-preflight

Checks articles, books and chapters against publishing rules and
reports each problem as a critical or advisory finding.
"""

__version__ = "1.0.0"
