"""Solver configuration decoding and environment-driven defaults."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from acme_linode.errors import ConfigError
from acme_linode.models import SecretKeyRef

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_SECRET_NAME = "linode-credentials"
DEFAULT_TOKEN_SECRET_KEY = "token"

_SERVICE_ACCOUNT_NAMESPACE = Path("/var/run/secrets/kubernetes.io/serviceaccount/namespace")


@dataclass(frozen=True)
class SolverConfig:
    """Per-issuer configuration decoded from the challenge request."""

    api_key_secret_ref: SecretKeyRef = field(default_factory=SecretKeyRef)


def load_solver_config(data: dict | str | bytes | None) -> SolverConfig:
    """Decode the issuer's solver configuration.

    Expects ``{"apiKeySecretRef": {"name": ..., "key": ...}}``. No configuration
    at all is valid and yields an empty secret reference.
    """
    if data is None:
        return SolverConfig()

    if isinstance(data, (str, bytes)):
        try:
            data = json.loads(data)
        except ValueError as exc:
            raise ConfigError(f"error decoding solver config: {exc}") from exc

    if data is None:
        return SolverConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"error decoding solver config: expected an object, got {type(data).__name__}")

    ref = data.get("apiKeySecretRef")
    if ref is not None and not isinstance(ref, dict):
        raise ConfigError("error decoding solver config: apiKeySecretRef must be an object")
    for field_name in ("name", "key"):
        value = (ref or {}).get(field_name)
        if value is not None and not isinstance(value, str):
            raise ConfigError(f"error decoding solver config: apiKeySecretRef.{field_name} must be a string")
    return SolverConfig(api_key_secret_ref=SecretKeyRef.from_dict(ref))


def default_secret_ref() -> SecretKeyRef:
    """Return the webhook-namespace token reference, honouring env overrides."""
    name = os.environ.get("LINODE_TOKEN_SECRET_NAME", "").strip() or DEFAULT_TOKEN_SECRET_NAME
    key = os.environ.get("LINODE_TOKEN_SECRET_KEY", "").strip() or DEFAULT_TOKEN_SECRET_KEY
    return SecretKeyRef(name=name, key=key)


def read_pod_namespace(namespace_file: Path = _SERVICE_ACCOUNT_NAMESPACE) -> str:
    """Return the namespace the webhook pod runs in, or "" if it cannot be determined.

    ``POD_NAMESPACE`` wins; otherwise the mounted service account namespace file is read.
    """
    namespace = os.environ.get("POD_NAMESPACE", "")
    if not namespace.strip():
        try:
            namespace = namespace_file.read_text()
        except OSError as exc:
            logger.error("Failed to read pod namespace from %s: %s", namespace_file, exc)
            namespace = ""
    return namespace.strip()
