"""
Application layer for native dependency handling.

Orchestrates domain rules over injected infrastructure adapters.
"""

from nativehelper.application.scanner import NativeDependencyScanner

__all__ = [
    "NativeDependencyScanner",
]
