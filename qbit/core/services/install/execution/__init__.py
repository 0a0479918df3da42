"""
L4 Execution — ``__init__.py`` re-exports all execution functions.

These functions WRITE to the system: they spawn installer processes.
"""

from qbit.core.services.install.execution.runner import (  # noqa: F401
    Echo,
    Executor,
    execute_or_dry_run,
    run_inherited,
)
