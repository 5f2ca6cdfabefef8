"""Abstract base class for DNS-01 challenge solvers."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod

from kubernetes import client

from acme_linode.models import ChallengeRequest


class DnsSolver(ABC):
    """Interface a DNS-01 solver exposes to the certificate issuing host."""

    @abstractmethod
    def name(self) -> str:
        """Name of this solver, unique within a webhook deployment (e.g. "linode")."""

    @abstractmethod
    def present(self, ch: ChallengeRequest) -> None:
        """Publish the challenge TXT record.

        Must tolerate being called several times with the same request.
        """

    @abstractmethod
    def clean_up(self, ch: ChallengeRequest) -> None:
        """Remove the challenge TXT record. A record that is already gone is not an error."""

    def initialize(
        self,
        kube_client_config: client.Configuration | None = None,
        stop_event: threading.Event | None = None,
    ) -> None:
        """Called once when the webhook starts. Override to build clients or warm caches."""
