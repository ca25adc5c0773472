import json
from dataclasses import dataclass
from typing import Any, Dict

import requests

from ..errors import TransportError


@dataclass(frozen=True)
class ApiReply:
    """Status flag + decoded JSON body of one upstream call."""

    ok: bool
    status_code: int
    payload: Any

    def message(self) -> str:
        """Upstream ``message`` field, or the whole body serialized when absent."""
        if isinstance(self.payload, dict) and self.payload.get("message"):
            return str(self.payload["message"])
        return json.dumps(self.payload, separators=(",", ":"))


def get_json(url: str, params: Dict[str, Any], postal_code: str) -> ApiReply:
    """GET ``url`` and decode the body; network or JSON trouble → TransportError."""
    try:
        resp = requests.get(url, params=params)
        payload = resp.json()
    except (requests.RequestException, requests.JSONDecodeError) as exc:
        raise TransportError(str(exc), postal_code) from exc
    return ApiReply(ok=resp.ok, status_code=resp.status_code, payload=payload)
