"""Linode DNS client: find zones and create/update/delete TXT records via the Linode API v4."""

from __future__ import annotations

import logging
from typing import Self

import httpx

from acme_linode import __version__
from acme_linode.errors import NoRecordError, ZoneNotFoundError
from acme_linode.models import Record, Zone

logger = logging.getLogger(__name__)

API_BASE = "https://api.linode.com/v4"
DEFAULT_TIMEOUT = 90
USER_AGENT = f"acme-linode/{__version__} httpx/{httpx.__version__}"

_PAGE_SIZE = 500
_CHALLENGE_TTL = 180
_WEIGHT = 1
_PRIORITY = 0
_PORT = 0


class LinodeClient:
    """Wraps the Linode REST API with the DNS operations used by the solver."""

    def __init__(
        self,
        api_token: str,
        _http_client: httpx.Client | None = None,
    ) -> None:
        self._client = _http_client or httpx.Client(
            base_url=API_BASE,
            headers={
                "Authorization": f"Bearer {api_token}",
                "User-Agent": USER_AGENT,
            },
            timeout=DEFAULT_TIMEOUT,
        )

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def _list_all(self, path: str) -> list[dict]:
        """Fetch every page of a paginated Linode list endpoint."""
        results: list[dict] = []
        page = 1
        while True:
            try:
                resp = self._client.get(path, params={"page": page, "page_size": _PAGE_SIZE})
                resp.raise_for_status()
                body = resp.json()
            except (httpx.HTTPError, ValueError) as exc:
                logger.error("Failed to list %s (page %d) from Linode: %s", path, page, exc)
                raise
            results.extend(body.get("data", []))
            if page >= body.get("pages", 1):
                return results
            page += 1

    def find_zone(self, domain: str) -> Zone:
        """Return the Linode domain whose name is exactly ``domain``."""
        for data in self._list_all("/domains"):
            if data["domain"] == domain:
                return Zone.from_dict(data)
        raise ZoneNotFoundError(f"no zone found for domain '{domain}'")

    def find_record(self, zone_id: int, entry: str) -> Record:
        """Return the first TXT record named ``entry`` in the zone.

        Raises:
            NoRecordError: no TXT record with that name exists. Callers branch on
                this to choose between creating and updating.
        """
        for data in self._list_all(f"/domains/{zone_id}/records"):
            if data.get("name") == entry and data.get("type") == "TXT":
                return Record.from_dict(data)
        raise NoRecordError(zone_id, entry)

    @staticmethod
    def _txt_body(entry: str, value: str) -> dict:
        return {
            "type": "TXT",
            "name": entry,
            "target": value,
            "priority": _PRIORITY,
            "weight": _WEIGHT,
            "port": _PORT,
            "ttl_sec": _CHALLENGE_TTL,
        }

    def create_record(self, zone_id: int, entry: str, value: str) -> Record:
        logger.info("Creating TXT record %s in zone ID %d", entry, zone_id)
        try:
            resp = self._client.post(f"/domains/{zone_id}/records", json=self._txt_body(entry, value))
            resp.raise_for_status()
            data = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Failed to create TXT record '%s' in Linode zone ID %d: %s", entry, zone_id, exc)
            raise
        return Record.from_dict(data)

    def update_record(self, zone_id: int, record_id: int, entry: str, value: str) -> Record:
        logger.info("Updating TXT record %s (ID %d) in zone ID %d", entry, record_id, zone_id)
        try:
            resp = self._client.put(
                f"/domains/{zone_id}/records/{record_id}",
                json=self._txt_body(entry, value),
            )
            resp.raise_for_status()
            data = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error(
                "Failed to update TXT record '%s' (ID %d) in Linode zone ID %d: %s",
                entry,
                record_id,
                zone_id,
                exc,
            )
            raise
        return Record.from_dict(data)

    def delete_record(self, zone_id: int, record_id: int) -> None:
        logger.info("Deleting TXT record ID %d in zone ID %d", record_id, zone_id)
        try:
            self._client.delete(f"/domains/{zone_id}/records/{record_id}").raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("Failed to delete TXT record ID %d in Linode zone ID %d: %s", record_id, zone_id, exc)
            raise
