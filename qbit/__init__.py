"""
qbit — dependency-installation orchestrator.

Picks the host's package manager, resolves the manager-specific package
identifier from project configuration and builds (or runs) the exact
install command.
"""

__version__ = "0.1.0"
