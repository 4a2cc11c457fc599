"""
SecretForge Shared Module
=========================

Configuration, structured logging, console presentation and entropy /
statistics helpers shared by the ``forge`` package.
"""

from shared.config import ForgeConfig, get_config

__all__ = ["ForgeConfig", "get_config"]
