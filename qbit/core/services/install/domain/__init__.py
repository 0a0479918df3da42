"""
L1 Domain — ``__init__.py`` re-exports all pure domain functions.

These functions have NO subprocess calls, NO filesystem access,
NO network calls. Pure input→output.
"""

from qbit.core.services.install.domain.command import (  # noqa: F401
    InstallCommand,
    quote_for_display,
)
from qbit.core.services.install.domain.plan import InstallPlan  # noqa: F401
from qbit.core.services.install.domain.target import (  # noqa: F401
    TargetSpec,
    parse_target_spec,
)
from qbit.core.services.install.domain.validation import (  # noqa: F401
    derive_brew_formula,
    validate_identifier,
    validate_version,
)
