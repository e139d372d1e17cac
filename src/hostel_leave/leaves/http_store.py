"""HTTP client for the remote leave store.

Keeps outbound HTTP details (retries, timeouts, headers) in one place. The
timeout policy for remote calls lives here, not in the registry.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..core.constants import DEFAULT_CONNECT_TIMEOUT, DEFAULT_READ_TIMEOUT
from ..core.enums import Decision
from ..core.exceptions import RemoteStoreError, ValidationError
from ..identity.model import Actor
from .model import LeaveRequest, NewLeaveRequest
from .store import LeaveStore

logger = logging.getLogger(__name__)


def _session() -> requests.Session:
    s = requests.Session()
    # POST is left out so a retried create can never add a second request.
    retry = Retry(
        total=2,
        connect=2,
        read=2,
        backoff_factor=0.5,
        status_forcelist=(502, 503, 504),
        allowed_methods=frozenset(["GET", "PUT"]),
        raise_on_status=False,
    )
    s.mount("http://", HTTPAdapter(max_retries=retry))
    s.mount("https://", HTTPAdapter(max_retries=retry))
    s.headers.update({"Content-Type": "application/json", "Accept": "application/json"})
    return s


class HttpLeaveStore(LeaveStore):
    def __init__(
        self,
        base_url: str,
        *,
        token: Optional[str] = None,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        read_timeout: float = DEFAULT_READ_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._timeout = (float(connect_timeout), float(read_timeout))
        self._session = session or _session()

    def _headers(self, actor: Actor) -> dict:
        headers = actor.to_headers()
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def _request(self, method: str, path: str, actor: Actor, *, json: Any = None) -> Any:
        url = f"{self._base_url}{path}"
        try:
            response = self._session.request(
                method,
                url,
                json=json,
                headers=self._headers(actor),
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            logger.warning("Leave store %s %s failed: %s", method, path, exc)
            raise RemoteStoreError(f"Could not reach leave store: {exc}") from exc

        if response.status_code >= 400:
            try:
                body = response.json()
                detail = body.get("error", body) if isinstance(body, dict) else body
            except ValueError:
                detail = response.text
            logger.warning("Leave store %s %s returned %s: %s", method, path, response.status_code, detail)
            raise RemoteStoreError(
                f"{method} {path} returned {response.status_code}: {detail}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise RemoteStoreError(f"{method} {path} returned a non-JSON body") from exc

    @staticmethod
    def _to_record(payload: Any) -> LeaveRequest:
        try:
            return LeaveRequest.from_dict(payload)
        except ValidationError as exc:
            raise RemoteStoreError(f"Leave store returned an invalid record: {exc}") from exc

    def create(self, actor: Actor, new_request: NewLeaveRequest) -> LeaveRequest:
        return self._to_record(self._request("POST", "/leave", actor, json=new_request.to_payload()))

    def list(self, actor: Actor) -> List[LeaveRequest]:
        payload = self._request("GET", "/leave", actor)
        if not isinstance(payload, list):
            raise RemoteStoreError("GET /leave did not return a list")
        return [self._to_record(item) for item in payload]

    def get(self, actor: Actor, leave_id: str) -> LeaveRequest:
        return self._to_record(self._request("GET", f"/leave/{leave_id}", actor))

    def update_status(self, actor: Actor, leave_id: str, decision: Decision) -> LeaveRequest:
        payload = self._request("PUT", f"/leave/{leave_id}", actor, json={"status": decision.value})
        return self._to_record(payload)
