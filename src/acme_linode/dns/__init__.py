"""DNS solver lookup: resolve a solver name to a concrete implementation."""

from __future__ import annotations

from acme_linode.dns.base import DnsSolver
from acme_linode.dns.solver import SOLVER_NAME, LinodeDnsSolver


def get_solver(name: str) -> DnsSolver:
    """Instantiate a DNS solver by the name the issuer refers to it with.

    Args:
        name: Solver name from the issuer's webhook configuration (e.g. "linode").

    Returns:
        An uninitialized DnsSolver instance.
    """
    if name.lower() == SOLVER_NAME:
        return LinodeDnsSolver()

    raise ValueError(f"Unknown DNS solver: '{name}'")
