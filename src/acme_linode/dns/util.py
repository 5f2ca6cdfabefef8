"""DNS utility functions."""

from __future__ import annotations


def domain_entry(fqdn: str, zone: str) -> tuple[str, str]:
    """Split a resolved FQDN into (entry, domain) as the Linode API expects them.

    The entry is the FQDN with the zone suffix and a trailing dot removed; the
    domain is the zone without its trailing dot. For the zone apex the entry is "".

    Args:
        fqdn: Resolved record name (e.g. "_acme-challenge.example.com.").
        zone: Resolved zone (e.g. "example.com.").

    Returns:
        Tuple of (entry, domain), e.g. ("_acme-challenge", "example.com").
    """
    entry = fqdn.removesuffix(zone).removesuffix(".")
    domain = zone.removesuffix(".")
    return entry, domain
