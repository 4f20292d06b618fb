# boundary for catalog i/o, either a local db.json or a json-server style http endpoint
# all file/http/retry handling lives here, so the service layer stays pure and testable
# one thread-local session per ThreadPoolExecutor worker

from __future__ import annotations
import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, List
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry
from dotenv import load_dotenv

load_dotenv()  # local .env for development, real deployments inject the environment

logger = logging.getLogger(__name__)

class CatalogError(RuntimeError):
    # single error type used to propagate clear messages from this layer
    pass

class CatalogClient:
    DEFAULT_TIMEOUT = 10.0
    RESOURCE = "laptops"
    RETRY_STATUSES = (429, 500, 502, 503, 504)

    def __init__(
        self,
        path: str | os.PathLike | None = None,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = 3,
        backoff_factor: float = 0.5,
        user_agent: str = "numeric-aggregator/0.1",
    ):
        path = path or os.getenv("NUMAGG_CATALOG_PATH")
        self.path = Path(path) if path else None
        self.base_url = (base_url or os.getenv("NUMAGG_CATALOG_URL") or "").rstrip("/") or None
        if self.path is None and self.base_url is None:
            raise CatalogError("neither NUMAGG_CATALOG_PATH nor NUMAGG_CATALOG_URL is set")

        self.timeout = timeout
        self.user_agent = user_agent
        self._local = threading.local()

        # retried on transient server or rate-limit statuses, GET only
        self._adapter = HTTPAdapter(max_retries=Retry(
            total=max_retries, backoff_factor=backoff_factor,
            status_forcelist=self.RETRY_STATUSES, allowed_methods=("GET",), raise_on_status=False,
        ))

    def _session(self) -> requests.Session:
        # built lazily, once per worker thread; the adapter is shared
        session = getattr(self._local, "session", None)
        if session is not None:
            return session
        session = requests.Session()
        session.headers["User-Agent"] = self.user_agent
        session.headers["Accept"] = "application/json"
        for prefix in ("http://", "https://"):
            session.mount(prefix, self._adapter)
        self._local.session = session
        return session

    def get_laptops(self) -> List[Dict[str, Any]]:
        # a local file wins over a url when both are configured
        if self.path is not None:
            return self._read_file()
        return self._fetch()

    def _read_file(self) -> List[Dict[str, Any]]:
        logger.debug("reading catalog from %s", self.path)
        try:
            raw = self.path.read_bytes()
        except OSError as exc:
            raise CatalogError(f"Cannot read catalog {str(self.path)!r}: {exc}") from exc

        # json.loads decodes bytes itself, a bad encoding surfaces as UnicodeDecodeError (a ValueError)
        try:
            data = json.loads(raw)
        except ValueError as exc:
            raise CatalogError(f"Invalid JSON in {str(self.path)!r}: {exc}") from exc

        try:
            laptops = data[self.RESOURCE]
        except (KeyError, TypeError) as exc:
            raise CatalogError(f"Unexpected catalog shape: missing {self.RESOURCE!r}") from exc
        if not isinstance(laptops, list):
            raise CatalogError(f"Unexpected catalog shape: {self.RESOURCE!r} is not a list")
        return laptops

    def _fetch(self) -> List[Dict[str, Any]]:
        url = f"{self.base_url}/{self.RESOURCE}"
        logger.debug("fetching catalog from %s", url)
        try:
            resp = self._session().get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise CatalogError(f"Request error for {url!r}: {exc}") from exc

        if resp.status_code >= 400:
            # short body snippet to speed up triage
            snippet = (resp.text or "")[:300]
            raise CatalogError(f"HTTP {resp.status_code} for {url!r}. Body: {snippet}")

        try:
            data = resp.json()
        except ValueError as exc:
            raise CatalogError(f"Invalid JSON from {url!r}: {exc}") from exc

        if not isinstance(data, list):
            raise CatalogError(f"Unexpected API shape from {url!r}: expected a list")
        logger.info("fetched %d catalog records from %s", len(data), url)
        return data
