"""
Domain models — Pydantic types for node configuration.

All models are re-exported here for convenient access:

    from pubnode.core.models import ResolvedConfig, Project, Structure
"""

from pubnode.core.models.node import ResolvedConfig
from pubnode.core.models.project import ChannelOptions, Namespace, Project, Structure

__all__ = [
    # project.py
    "ChannelOptions",
    "Namespace",
    "Project",
    # node.py
    "ResolvedConfig",
    "Structure",
]
