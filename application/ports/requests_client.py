# application/ports/requests_client.py
from __future__ import annotations

import requests
from typing import Any, Dict, Optional

from application.ports.http_client import HttpClientPort, HttpResponse


class RequestsHttpClient(HttpClientPort):
    def __init__(self, base_headers: Optional[Dict[str, str]] = None, timeout_sec: Optional[float] = None):
        self._session = requests.Session()
        self._base_headers = base_headers or {}
        # None = requests 側でタイムアウトしない（生成呼び出しはタイムアウトで包まない）
        self._timeout = timeout_sec

    def post_json(
        self,
        url: str,
        body: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None,
    ) -> HttpResponse:
        merged = {"Content-Type": "application/json"}
        merged.update(self._base_headers)
        if headers:
            merged.update(headers)

        resp = self._session.post(
            url,
            json=body,
            headers=merged,
            timeout=self._timeout,
        )

        return HttpResponse(
            status=resp.status_code,
            url=str(resp.url),
            text=resp.text,
            headers=dict(resp.headers),
            reason=resp.reason or "",
        )
