"""
Forge Output
=============

Console output formatters for generated secrets and analysis results.
"""

from forge.output.console import ForgeConsoleOutput

__all__ = ["ForgeConsoleOutput"]
