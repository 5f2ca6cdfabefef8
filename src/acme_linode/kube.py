"""Kubernetes access: build the core API client and read token Secrets."""

from __future__ import annotations

import base64
import binascii
import logging

from kubernetes import client, config
from kubernetes.client.exceptions import ApiException
from kubernetes.config.config_exception import ConfigException

from acme_linode.errors import InitializationError, InvalidSecretReference, SecretLookupError
from acme_linode.models import SecretKeyRef

logger = logging.getLogger(__name__)


def build_core_api(configuration: client.Configuration | None = None) -> client.CoreV1Api:
    """Return a CoreV1Api for the cluster the webhook runs in.

    An explicit ``configuration`` is used as is. Otherwise the in-cluster service
    account is tried first and the local kubeconfig second.
    """
    if configuration is None:
        try:
            config.load_incluster_config()
        except ConfigException:
            logger.info("Not running in a cluster, loading local kubeconfig")
            try:
                config.load_kube_config()
            except (ConfigException, OSError) as exc:
                raise InitializationError(f"failed to create kube client: {exc}") from exc
        return client.CoreV1Api()
    return client.CoreV1Api(client.ApiClient(configuration))


def read_secret_value(core_api: client.CoreV1Api, ref: SecretKeyRef, namespace: str) -> str:
    """Return the decoded value stored under ``ref.key`` in Secret ``ref.name``.

    The reference is validated before any API call is made.
    """
    if not ref.is_valid():
        raise InvalidSecretReference()

    try:
        secret = core_api.read_namespaced_secret(name=ref.name, namespace=namespace)
    except ApiException as exc:
        raise SecretLookupError(
            f"failed to get secret '{ref.name}' in namespace '{namespace}': {exc.status} {exc.reason}"
        ) from exc

    data = secret.data or {}
    if ref.key not in data:
        raise SecretLookupError(f"key '{ref.key}' not found in secret {namespace}/{ref.name}")

    try:
        value = base64.b64decode(data[ref.key], validate=True).decode()
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise SecretLookupError(f"key '{ref.key}' in secret {namespace}/{ref.name} is not valid base64 text") from exc
    return value.strip()
