"""
Run Package

This package holds the configuration used to build and evaluate networks.

Exported Classes:
    Config: Network size and evaluation settings, parsed from an INI file
"""

from neatgraph.run.config import Config

__all__ = ['Config']
