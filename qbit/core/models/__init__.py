"""
Domain models — Pydantic types for qbit configuration.

All models are re-exported here for convenient access:

    from qbit.core.models import ProjectConfig, InstallSpec
"""

from qbit.core.models.project import InstallSpec, ProjectConfig

__all__ = [
    "InstallSpec",
    "ProjectConfig",
]
