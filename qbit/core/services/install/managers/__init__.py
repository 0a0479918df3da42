"""
L2 Backends — ``__init__.py`` exposes the closed set of managers.

``ALL_MANAGERS`` is the dispatch table: canonical order, one class per
supported tool.
"""

from qbit.core.services.install.managers.base import (  # noqa: F401
    ELEVATION_HELPER,
    ManagerDescriptor,
    PackageManager,
)
from qbit.core.services.install.managers.linux import (  # noqa: F401
    AptGet,
    Dnf,
    Pacman,
    Zypper,
)
from qbit.core.services.install.managers.macos import Brew  # noqa: F401
from qbit.core.services.install.managers.windows import (  # noqa: F401
    Chocolatey,
    Scoop,
    Winget,
)

ALL_MANAGERS: tuple[type[PackageManager], ...] = (
    AptGet,
    Dnf,
    Pacman,
    Zypper,
    Brew,
    Winget,
    Chocolatey,
    Scoop,
)
