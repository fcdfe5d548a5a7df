"""HTTP client for the reminder backend."""
from __future__ import annotations

from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from reminder_client.config import BACKEND_BASE_URL, REQUEST_TIMEOUT


class APIClient:
    def __init__(
        self,
        base_url: str = BACKEND_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: int = REQUEST_TIMEOUT,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.token: Optional[str] = None

    # -------------------- Auth --------------------
    def signup(self, username: str, password: str) -> Dict[str, Any]:
        res = self._request("POST", "/signup", json={"username": username, "password": password})
        self.token = res.get("token")
        return res

    def login(self, username: str, password: str) -> Dict[str, Any]:
        res = self._request("POST", "/login", json={"username": username, "password": password})
        self.token = res.get("token")
        return res

    # -------------------- Events --------------------
    def create_event(self, name: str, date: str, message: str) -> Dict[str, Any]:
        payload = {"name": name, "date": date, "message": message}
        return self._request("POST", "/api/v1/event", json=payload)

    def get_event(self, name: str) -> Dict[str, Any]:
        return self._request("GET", self._event_path(name))

    def update_event(
        self,
        name: str,
        new_name: str | None = None,
        date: str | None = None,
        message: str | None = None,
    ) -> Dict[str, Any]:
        patch = {"name": new_name, "date": date, "message": message}
        return self._request("PUT", self._event_path(name), json={k: v for k, v in patch.items() if v})

    def delete_event(self, name: str) -> Dict[str, Any]:
        return self._request("DELETE", self._event_path(name))

    # -------------------- Internal helpers --------------------
    @staticmethod
    def _event_path(name: str) -> str:
        return f"/api/v1/event/{quote(name, safe='')}"

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _request(self, method: str, path: str, json: Dict[str, Any] | None = None) -> Dict[str, Any]:
        res = self.session.request(
            method,
            f"{self.base_url}{path}",
            json=json,
            headers=self._headers(),
            timeout=self.timeout,
        )
        try:
            res.raise_for_status()
        except requests.HTTPError as exc:
            detail = f"{method} {path} -> {res.status_code} {res.reason}; body={res.text}"
            raise requests.HTTPError(detail, response=res) from exc
        return res.json() if res.text else {}


def get_client(base_url: str | None = None) -> APIClient:
    return APIClient(base_url=base_url or BACKEND_BASE_URL)
