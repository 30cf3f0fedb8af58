"""
ihexkit Command-Line Interface
==============================

This package provides the ``ihex`` command-line tool, a Click-based
application for inspecting, validating and converting Intel HEX files.
"""

__all__ = ["ihex"]
