"""HTTP client for the cookpit publication service.

Two endpoints are used, both plain GETs returning JSON:

    /facilities   -> {"facility-array": [...]}
    /weeklyrotas  -> {"weekly-rota-array": [...]}

Failures are never retried: a network error or bad status becomes a
TransportError, an unparseable or unexpected body a DeserializationError.
"""

from collections.abc import Callable
from datetime import date
from typing import Any
from urllib.parse import urlencode

import requests
from pydantic import BaseModel, ValidationError

from mensar.config import MensarConfig
from mensar.errors import DeserializationError, TransportError
from mensar.logging import get_logger
from mensar.models import Facility, FacilityCatalog, WeeklyRota, WeeklyRotaCollection

logger = get_logger(__name__)

FetchJson = Callable[[str], Any]


class CookpitClient:
    """Fetches the facility catalog and weekly rotas.

    ``fetch_json`` can be injected to replace the HTTP transport (it receives
    the full URL and returns the decoded JSON document).
    """

    def __init__(self, config: MensarConfig, fetch_json: FetchJson | None = None) -> None:
        self.config = config
        self._session: requests.Session | None = None
        self._fetch_json = fetch_json or self._http_get_json

    def _query(self, lang: str, **extra: str) -> str:
        params = {
            "client-id": self.config.client_id,
            "lang": lang,
            "rs-first": 0,
            "rs-size": self.config.page_size,
            **extra,
        }
        return urlencode(params)

    def facilities_url(self, lang: str) -> str:
        return f"{self.config.base_url}/facilities?{self._query(lang)}"

    def weekly_rotas_url(self, lang: str, valid_after: date) -> str:
        query = self._query(lang, **{"valid-after": valid_after.isoformat()})
        return f"{self.config.base_url}/weeklyrotas?{query}"

    def _http_get_json(self, url: str) -> Any:
        """Default transport: GET ``url`` and decode the JSON body."""
        if self._session is None:
            self._session = requests.Session()
        try:
            resp = self._session.get(url, timeout=self.config.request_timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            logger.warning("request_failed", url=url, error=str(e))
            raise TransportError(f"request to {url} failed: {e}") from e

        try:
            return resp.json()
        except ValueError as e:
            raise DeserializationError(f"response from {url} is not JSON") from e

    def _get(self, url: str, model: type[BaseModel]) -> Any:
        logger.debug("fetching", url=url)
        payload = self._fetch_json(url)
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            logger.warning("schema_mismatch", url=url, errors=e.error_count())
            raise DeserializationError(
                f"unexpected response from {url}: {e.error_count()} invalid field(s)"
            ) from e

    def fetch_facilities(self, lang: str) -> list[Facility]:
        """Fetch the facility catalog in service order."""
        catalog = self._get(self.facilities_url(lang), FacilityCatalog)
        logger.info("facilities_fetched", count=len(catalog.facility_array))
        return catalog.facility_array

    def fetch_weekly_rotas(self, lang: str, valid_after: date) -> list[WeeklyRota]:
        """Fetch the weekly rotas of all facilities still valid after ``valid_after``."""
        collection = self._get(self.weekly_rotas_url(lang, valid_after), WeeklyRotaCollection)
        logger.info("weekly_rotas_fetched", count=len(collection.weekly_rota_array))
        return collection.weekly_rota_array

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None
