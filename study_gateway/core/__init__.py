"""
Core domain layer.

Exception hierarchy, text utilities and prompt builders. No I/O.
"""
