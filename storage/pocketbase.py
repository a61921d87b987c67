from __future__ import annotations
import logging
import requests
from typing import List, Dict, Any, Optional
from core.exceptions import PBError

logger = logging.getLogger(__name__)


class PocketBaseClient:
    def __init__(self, base_url: str, token: Optional[str] = None, collection: str = "tasks",
                 timeout: float = 10):
        self.base_url = base_url.rstrip("/")
        self.collection = collection
        self.timeout = timeout
        self.session = requests.Session()
        if token:
            self.session.headers.update({"Authorization": f"Bearer {token}"})

    @property
    def records_url(self) -> str:
        return f"{self.base_url}/api/collections/{self.collection}/records"

    def _request(self, method: str, url: str, **kwargs) -> requests.Response:
        try:
            r = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise PBError(f"{method} {url} failed: {e}") from e
        if not r.ok:
            raise PBError(f"{method} {url} failed: {r.status_code} {r.text}", status=r.status_code)
        return r

    def _json(self, r: requests.Response) -> Dict[str, Any]:
        """Body as a JSON object; anything else (proxy pages, lists, null) is a PBError."""
        try:
            data = r.json()
        except ValueError as e:
            raise PBError(f"Invalid JSON from PocketBase: {r.text[:200]!r}", status=r.status_code) from e
        if not isinstance(data, dict):
            raise PBError(f"Unexpected payload from PocketBase: {type(data).__name__}", status=r.status_code)
        return data

    def _record(self, r: requests.Response) -> Dict[str, Any]:
        data = self._json(r)
        if not data.get("id"):
            raise PBError("PocketBase record without id", status=r.status_code)
        return data

    # ---------- tasks ----------
    def list_tasks(self) -> List[Dict[str, Any]]:
        """All tasks, newest created first (a single page, no pagination)."""
        page_size = 500
        r = self._request("GET", self.records_url, params={"sort": "-created", "perPage": page_size})
        data = self._json(r)
        items = data.get("items") or []
        if not isinstance(items, list) or not all(isinstance(t, dict) and t.get("id") for t in items):
            raise PBError("Unexpected items in PocketBase list response", status=r.status_code)
        total = data.get("totalItems")
        if isinstance(total, int) and total > len(items):
            logger.warning("list_tasks: showing %d of %d tasks (perPage=%d)", len(items), total, page_size)
        logger.debug("list_tasks -> %d items", len(items))
        return items

    def create_task(self, *, title: str, description: str, priority: str) -> Dict[str, Any]:
        payload = {
            "title": title,
            "description": description,
            "priority": priority,
        }
        r = self._request("POST", self.records_url, json=payload)
        return self._record(r)

    def patch_task(self, task_id: str, **fields) -> Dict[str, Any]:
        r = self._request("PATCH", f"{self.records_url}/{task_id}", json=fields)
        return self._record(r)

    def delete_task(self, task_id: str) -> None:
        # PocketBase responde 204 sin cuerpo
        self._request("DELETE", f"{self.records_url}/{task_id}")
