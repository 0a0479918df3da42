"""
L3 Detection — ``__init__.py`` re-exports all detection functions.

These functions READ system state but never WRITE.
Subprocess probes and env var reads — all read-only.
"""

from qbit.core.services.install.detection.host import (  # noqa: F401
    OVERRIDE_ENV_VAR,
    CommandProbe,
    HostContext,
    command_exists,
    current_platform,
)
