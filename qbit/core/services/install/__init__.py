"""
Install service — package re-exports.

This ``__init__.py`` re-exports every public symbol so callers can do::

    from qbit.core.services.install import install, HostContext

Each symbol lives in its single-responsibility module inside the
appropriate onion layer (domain → backends → resolver → detection →
execution → orchestration).
"""

# ── Errors ──
from qbit.core.services.install.errors import (  # noqa: F401
    InstallError,
    InstallerFailed,
    InvalidInput,
    ManagerUnavailable,
    NoManagerFound,
    SpawnFailed,
    UnknownManager,
    UnsupportedOperation,
)

# ── L1: Domain ──
from qbit.core.services.install.domain import (  # noqa: F401
    InstallCommand,
    InstallPlan,
    TargetSpec,
    parse_target_spec,
)

# ── L2: Backends + Resolver ──
from qbit.core.services.install.managers import (  # noqa: F401
    ALL_MANAGERS,
    PackageManager,
)
from qbit.core.services.install.resolver import (  # noqa: F401
    ResolvedTarget,
    manager_status,
    resolve_target,
    select_manager,
)

# ── L3: Detection ──
from qbit.core.services.install.detection import (  # noqa: F401
    HostContext,
    command_exists,
)

# ── L4: Execution ──
from qbit.core.services.install.execution import (  # noqa: F401
    execute_or_dry_run,
)

# ── L5: Orchestration ──
from qbit.core.services.install.orchestration import (  # noqa: F401
    install,
    plan_install,
)
