"""
L2 Resolver — ``__init__.py`` re-exports all resolver functions.

These functions turn host state, backends and config entries into
the concrete inputs of an install plan.
"""

from qbit.core.services.install.resolver.identifier import (  # noqa: F401
    DEFAULT_IDENTIFIER_KEY,
    ResolvedTarget,
    resolve_identifier,
    resolve_target,
)
from qbit.core.services.install.resolver.selection import (  # noqa: F401
    MANAGER_ALIASES,
    PLATFORM_CANDIDATES,
    SUPPORTED_MANAGERS,
    detection_candidates,
    manager_from_name,
    manager_status,
    select_manager,
)
