"""
Template registry subsystem.
"""

from .registry import TemplateRegistry, template_registry

__all__ = ["TemplateRegistry", "template_registry"]
