"""zutool.jp and Otenki ASP API client with retry and rate limit handling."""

import json
import logging
import time

import httpx

from zutool.config.schema import ApiConfig
from zutool.ingest.embedded_error import classify_embedded_error, raise_for_embedded_error
from zutool.ingest.errors import DecodeError, NotFoundError, TransportError
from zutool.ingest.otenki_decoder import decode_otenki_forecast
from zutool.ingest.status_decoder import decode_pain_status, decode_weather_status
from zutool.ingest.weather_point_decoder import decode_weather_points
from zutool.models.forecast import OtenkiForecast, PainStatus, WeatherPoint, WeatherStatus

logger = logging.getLogger(__name__)

OTENKI_CONTENTS = (
    "day_tenki--day_pre--hight_temp--low_temp--day_wind_v"
    "--day_wind_d--zutu_level_day--low_humidity"
)
OTENKI_DURATION_DAYS = 7


class ZutoolClient:
    def __init__(self, config: ApiConfig | None = None):
        config = config or ApiConfig()
        self.base_url = config.base_url.rstrip("/")
        self.otenki_base_url = config.otenki_base_url.rstrip("/")
        self.user_agent = config.user_agent
        self.timeout = config.timeout_seconds
        self.max_retries = config.max_retries
        self.retry_base_delay = config.retry_base_delay

    def fetch(self, url: str, params: dict | None = None) -> bytes:
        """GET a URL and return the body of a 200 response.

        Retries on 503/429 and connection errors with exponential backoff.
        Other non-200 statuses raise TransportError (NotFoundError for 404)
        carrying the upstream error_message when the body has one.
        """
        headers = {"User-Agent": self.user_agent}

        for attempt in range(self.max_retries + 1):
            try:
                resp = httpx.get(url, params=params, headers=headers, timeout=self.timeout)
            except httpx.RequestError as e:
                if attempt < self.max_retries:
                    delay = self.retry_base_delay * (2**attempt)
                    logger.warning("Request error for %s, retrying in %.1fs: %s", url, delay, e)
                    time.sleep(delay)
                    continue
                raise TransportError(None, message=f"request failed: {e}") from e

            if resp.status_code in (503, 429) and attempt < self.max_retries:
                delay = self.retry_base_delay * (2**attempt)
                logger.warning(
                    "%s returned %d, retrying in %.1fs (attempt %d/%d)",
                    url, resp.status_code, delay, attempt + 1, self.max_retries,
                )
                time.sleep(delay)
                continue
            if resp.status_code != 200:
                _, message = classify_embedded_error(resp.content)
                error_cls = NotFoundError if resp.status_code == 404 else TransportError
                raise error_cls(resp.status_code, resp.text, message)
            return resp.content

        raise AssertionError("unreachable")

    def _get(self, path: str, param: str) -> bytes:
        """Fetch from the zutool API, rejecting 200 responses with an error body."""
        body = self.fetch(f"{self.base_url}{path}/{param}")
        raise_for_embedded_error(body)
        return body

    def set_weather_point(self, point_code: str) -> None:
        try:
            body = self.fetch(f"{self.base_url}/setweatherpoint/{point_code}")
        except NotFoundError as e:
            raise NotFoundError(
                404, e.body, f"weather point code '{point_code}' not found"
            ) from e
        try:
            response = json.loads(body).get("response")
        except (ValueError, AttributeError) as e:
            raise DecodeError(
                f"failed to decode /setweatherpoint response: {e}",
                body=body.decode("utf-8", errors="replace"),
            ) from e
        if response != "ok":
            raise DecodeError(f"/setweatherpoint response was {response!r}, not 'ok'")

    def get_pain_status(
        self, area_code: str, set_weather_point: str | None = None
    ) -> PainStatus:
        if set_weather_point:
            self.set_weather_point(set_weather_point)
        return decode_pain_status(self._get("/getpainstatus", area_code))

    def get_weather_point(self, keyword: str) -> list[WeatherPoint]:
        return decode_weather_points(self._get("/getweatherpoint", keyword))

    def get_weather_status(self, city_code: str) -> WeatherStatus:
        return decode_weather_status(self._get("/getweatherstatus", city_code))

    def get_otenki_forecast(self, city_code: str) -> OtenkiForecast:
        params = {
            "csid": "mmcm",
            "contents_id": OTENKI_CONTENTS,
            "duration_yohoushi": str(OTENKI_DURATION_DAYS),
            "where": f"CHITEN_{city_code}",
            "json": "on",
        }
        body = self.fetch(f"{self.otenki_base_url}/getElements", params=params)
        return decode_otenki_forecast(body)
