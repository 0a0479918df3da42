"""
L5 Orchestration — ``__init__.py`` re-exports top-level coordinators.

These are the entry points that external code calls.
"""

from qbit.core.services.install.orchestration.orchestrator import (  # noqa: F401
    install,
    plan_install,
)
