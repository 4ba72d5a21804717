"""
Agent Pipeline Interfaces
"""

from .module_interfaces import IModuleDefinition

__all__ = [
    "IModuleDefinition",
]
