"""Linode DNS-01 solver: present and clean up challenge TXT records in Linode DNS."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from kubernetes import client

from acme_linode.config import default_secret_ref, load_solver_config, read_pod_namespace
from acme_linode.dns.base import DnsSolver
from acme_linode.dns.util import domain_entry
from acme_linode.errors import InvalidSecretReference, NoRecordError, SecretLookupError
from acme_linode.kube import build_core_api, read_secret_value
from acme_linode.linode import LinodeClient
from acme_linode.models import ChallengeRequest, SecretKeyRef

logger = logging.getLogger(__name__)

SOLVER_NAME = "linode"
_FALLBACK_NAMESPACE = "default"


class LinodeDnsSolver(DnsSolver):
    """Solves DNS-01 challenges by managing TXT records in a Linode DNS zone.

    The Linode API token is read from a Secret in the certificate's namespace,
    falling back to a Secret in the webhook's own namespace.
    """

    def __init__(
        self,
        _core_api: client.CoreV1Api | None = None,
        _linode_factory: Callable[..., LinodeClient] = LinodeClient,
    ) -> None:
        self._core_api = _core_api
        self._linode_factory = _linode_factory
        self._stop_event: threading.Event | None = None
        self._namespace: str | None = None
        self._secret_key_ref: SecretKeyRef | None = None

    def name(self) -> str:
        return SOLVER_NAME

    def initialize(
        self,
        kube_client_config: client.Configuration | None = None,
        stop_event: threading.Event | None = None,
    ) -> None:
        logger.info("Initializing Linode DNS solver")
        self._core_api = build_core_api(kube_client_config)
        self._stop_event = stop_event

    def present(self, ch: ChallengeRequest) -> None:
        logger.info("Presenting challenge for fqdn=%s zone=%s", ch.resolved_fqdn, ch.resolved_zone)
        entry, domain = domain_entry(ch.resolved_fqdn, ch.resolved_zone)

        with self.linode_client(ch) as linode:
            try:
                zone = linode.find_zone(domain)
            except Exception as exc:
                logger.error("Failed to find zone '%s' in Linode account: %s", domain, exc)
                raise

            try:
                record = linode.find_record(zone.id, entry)
            except NoRecordError:
                record = None
            except Exception as exc:
                logger.error("Failed to find record '%s' in Linode zone '%s': %s", entry, domain, exc)
                raise

            if record is None:
                linode.create_record(zone.id, entry, ch.key)
            else:
                # An existing record is overwritten so repeated calls converge on one value.
                linode.update_record(zone.id, record.id, record.name, ch.key)

    def clean_up(self, ch: ChallengeRequest) -> None:
        """Delete the challenge TXT record.

        Only the name and type are matched, not the value: two challenges for the
        same entry in flight at once share one record.
        """
        logger.info("Cleaning up challenge for fqdn=%s zone=%s", ch.resolved_fqdn, ch.resolved_zone)
        entry, domain = domain_entry(ch.resolved_fqdn, ch.resolved_zone)

        with self.linode_client(ch) as linode:
            try:
                zone = linode.find_zone(domain)
            except Exception as exc:
                logger.warning("Failed to find zone '%s' in Linode account: %s", domain, exc)
                raise

            try:
                record = linode.find_record(zone.id, entry)
            except NoRecordError:
                logger.info("TXT record %s not found in zone '%s', nothing to clean up", entry, domain)
                return
            except Exception as exc:
                logger.warning("Failed to find record '%s' in Linode zone '%s': %s", entry, domain, exc)
                raise

            linode.delete_record(zone.id, record.id)

    def linode_client(self, ch: ChallengeRequest) -> LinodeClient:
        """Build a Linode client using the API token configured for this challenge."""
        try:
            cfg = load_solver_config(ch.config)
            api_key = self.get_api_key(cfg.api_key_secret_ref, ch.resource_namespace)
        except Exception as exc:
            logger.error("Failed to create Linode client: %s", exc)
            raise
        return self._linode_factory(api_token=api_key)

    def get_api_key(self, secret_ref: SecretKeyRef, namespace: str) -> str:
        """Return the Linode API token, trying the certificate namespace before the webhook's."""
        try:
            return self.get_secret(secret_ref, namespace)
        except Exception as exc:
            logger.warning("Failed to find Linode API token secret in certificate namespace: %s", exc)

        logger.info("Falling back to webhook namespace for Linode API token secret")
        return self.get_secret(self.secret_key_ref, self.pod_namespace)

    def get_secret(self, secret_ref: SecretKeyRef, namespace: str) -> str:
        if not secret_ref.is_valid():
            raise InvalidSecretReference()
        if self._core_api is None:
            raise SecretLookupError("kube client is not initialized")
        return read_secret_value(self._core_api, secret_ref, namespace)

    @property
    def pod_namespace(self) -> str:
        """Namespace the webhook runs in, resolved once and cached."""
        if self._namespace is None:
            namespace = read_pod_namespace()
            if not namespace:
                logger.error("Invalid webhook pod namespace, using '%s'", _FALLBACK_NAMESPACE)
                return _FALLBACK_NAMESPACE
            self._namespace = namespace
        return self._namespace

    @property
    def secret_key_ref(self) -> SecretKeyRef:
        """Default token secret reference for the webhook namespace, resolved once and cached."""
        if self._secret_key_ref is None:
            self._secret_key_ref = default_secret_ref()
        return self._secret_key_ref
