from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Mapping, Optional

import requests

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpConfig:
    timeout_sec: float
    delay_sec: float
    user_agent: str


class HttpClient:
    """
    Thin HTTP client wrapper:
    - Timeout
    - Rate limiting (fixed delay + small jitter)
    - Logs meaningful failures

    No retries: a failed request is handed straight back to the caller.
    """

    def __init__(self, config: HttpConfig, session: Optional[requests.Session] = None):
        self._cfg = config
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "User-Agent": self._cfg.user_agent,
                "Accept-Language": "en-US,en;q=0.9",
            }
        )

    def get_text(self, url: str, params: Optional[Mapping[str, object]] = None) -> str:
        """
        GET an URL and return response body as text.

        Raises:
            requests.HTTPError: non-2xx responses
            requests.RequestException: network errors
        """
        self._rate_limit()

        try:
            resp = self._session.get(url, params=params, timeout=self._cfg.timeout_sec)
            resp.raise_for_status()
        except requests.RequestException as e:
            logger.error("HTTP GET failed: url=%s params=%s err=%s", url, params, e)
            raise

        resp.encoding = "utf-8"
        return resp.text

    def _rate_limit(self) -> None:
        if self._cfg.delay_sec <= 0:
            return
        # Fixed delay + jitter (avoid bursty patterns)
        jitter = random.uniform(0.0, 0.25)
        time.sleep(self._cfg.delay_sec + jitter)
