"""Data classes for challenge requests, secret references and Linode DNS objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SecretKeyRef:
    """Reference to a single key inside a Kubernetes Secret."""

    name: str = ""
    key: str = ""

    def is_valid(self) -> bool:
        return bool(self.name) and bool(self.key)

    @classmethod
    def from_dict(cls, data: dict | None) -> SecretKeyRef:
        data = data or {}
        return cls(name=data.get("name") or "", key=data.get("key") or "")


@dataclass(frozen=True)
class ChallengeRequest:
    """A DNS-01 challenge handed to the solver by the host.

    ``config`` is the raw solver configuration from the issuer: ``None``,
    a JSON string or bytes, or an already decoded mapping.
    """

    resolved_fqdn: str
    resolved_zone: str
    key: str
    resource_namespace: str
    config: dict[str, Any] | str | bytes | None = None
    uid: str = ""
    action: str = ""
    type: str = "dns-01"
    dns_name: str = ""
    allow_ambient_credentials: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> ChallengeRequest:
        return cls(
            resolved_fqdn=data["resolvedFQDN"],
            resolved_zone=data["resolvedZone"],
            key=data["key"],
            resource_namespace=data.get("resourceNamespace", ""),
            config=data.get("config"),
            uid=data.get("uid", ""),
            action=data.get("action", ""),
            type=data.get("type", "dns-01"),
            dns_name=data.get("dnsName", ""),
            allow_ambient_credentials=bool(data.get("allowAmbientCredentials", False)),
        )


@dataclass(frozen=True)
class Zone:
    """A Linode DNS domain."""

    id: int
    domain: str

    @classmethod
    def from_dict(cls, data: dict) -> Zone:
        return cls(id=int(data["id"]), domain=data["domain"])


@dataclass(frozen=True)
class Record:
    """A record inside a Linode DNS domain."""

    id: int
    name: str
    type: str
    target: str
    ttl_sec: int = 0

    @classmethod
    def from_dict(cls, data: dict) -> Record:
        return cls(
            id=int(data["id"]),
            name=data.get("name", ""),
            type=data.get("type", ""),
            target=data.get("target", ""),
            ttl_sec=int(data.get("ttl_sec") or 0),
        )
