"""Records API client.

A thin wrapper around the HTTP surface of the Records API using the
``requests`` library.  Resources are addressed by name (``"books"``,
``"movie"``, ``"Transport"``...); paths and key parameters come from
the same registry the server uses, so the client cannot drift from
the routes.

Every method returns a tuple ``(data, error)``.  On success ``data``
holds the parsed JSON body and ``error`` is ``None``.  On failure
``data`` is ``None`` and ``error`` is a dict with ``status_code``,
``type`` and ``message``.  A missing record is reported with
``type == "EntityNotFoundException"``.

The client supports authentication via a bearer token passed as
``api_key``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests

from records_api.app.resources import ResourceType, get_resource


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class RecordsAPI:
    """Client for the Records API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Server root, e.g. ``http://localhost:8000``.  The
                ``/api`` prefix is added by the client.
            api_key: Optional bearer token sent in the ``Authorization``
                header.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each request.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Dict[str, Any] | None = None,
        json_body: Any | None = None,
    ) -> Result:
        url = f"{self.base_url}/api{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            return None, self._describe_http_error(exc)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "type": type(exc).__name__, "message": str(exc)}

    @staticmethod
    def _describe_http_error(exc: requests.HTTPError) -> Dict[str, Any]:
        response = exc.response
        status = response.status_code if response is not None else None
        error_type = "HTTPError"
        message = ""
        if response is not None:
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict):
                error_type = body.get("type") or error_type
                detail = body.get("message") or body.get("detail")
                message = detail if isinstance(detail, str) else str(detail or body)
            else:
                message = response.text
        if not message:
            message = str(exc)
        logger.error("API request failed (%s): %s", status, message)
        return {"status_code": status, "type": error_type, "message": message}

    @staticmethod
    def _resource(resource: str | ResourceType) -> ResourceType:
        if isinstance(resource, ResourceType):
            return resource
        return get_resource(resource)

    # ------------------------------------------------------------------
    # Record operations
    # ------------------------------------------------------------------
    def list(self, resource: str | ResourceType) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve every record of a resource.

        Returns an empty list together with the error on failure.
        """
        rt = self._resource(resource)
        data, error = self._request("GET", f"{rt.prefix}/all")
        return (data or []), error

    def get(self, resource: str | ResourceType, key: Any) -> Result:
        rt = self._resource(resource)
        return self._request("GET", rt.prefix, params={rt.key_field: key})

    def create(self, resource: str | ResourceType, **fields: Any) -> Result:
        """Create a record; for transport items pass ``name`` among the fields."""
        rt = self._resource(resource)
        return self._request("POST", f"{rt.prefix}/post", params=fields)

    def update(self, resource: str | ResourceType, key: Any, **fields: Any) -> Result:
        """Replace every non‑key field of the record under ``key``."""
        rt = self._resource(resource)
        return self._request("PUT", rt.prefix, params={rt.key_field: key}, json_body=fields)

    def delete(self, resource: str | ResourceType, key: Any) -> Result:
        rt = self._resource(resource)
        return self._request("DELETE", rt.prefix, params={rt.key_field: key})
