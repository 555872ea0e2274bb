import logging

import requests
from pydantic import ValidationError

from app.models.forecast import ForecastResult

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.open-meteo.com/v1/"
DEFAULT_TIMEOUT_SECONDS = 10.0


class OpenMeteoClient:
    """Current-weather lookups against Open-Meteo.

    ``get_current_weather`` never raises: timeouts, transport errors, non-2xx
    answers and unparseable bodies all come back as ``None`` so callers only
    have to handle "weather unavailable".
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url or DEFAULT_BASE_URL
        self.timeout = timeout
        self._session = session or requests.Session()

    def close(self):
        self._session.close()

    def forecast_url(self) -> str:
        return self.base_url.rstrip("/") + "/forecast"

    def get_current_weather(
        self, latitude: float, longitude: float, timeout: float | None = None
    ) -> ForecastResult | None:
        """Fetch current weather for a coordinate pair.

        ``timeout`` is the caller's deadline in seconds and is handed straight
        to the socket layer, so it bounds the connect and each read rather
        than the whole exchange. It defaults to the client-wide timeout.
        """
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current_weather": "true",
        }
        try:
            response = self._session.get(
                self.forecast_url(),
                params=params,
                timeout=timeout if timeout is not None else self.timeout,
            )
            # read once; the same bytes feed both the status check and the parser
            body = response.content
            if not 200 <= response.status_code < 300:
                logger.warning(
                    "Weather API returned %s for (%s, %s)", response.status_code, latitude, longitude
                )
                return None
            logger.debug("Weather API answered %s bytes for (%s, %s)", len(body), latitude, longitude)
            return ForecastResult.model_validate_json(body)
        except requests.Timeout:
            logger.info("Weather API request timed out or was cancelled for (%s, %s)", latitude, longitude)
            return None
        except requests.RequestException as exc:
            logger.warning("Network or connection error calling weather API: %s", exc)
            return None
        except ValidationError as exc:
            logger.warning("Weather API payload could not be parsed: %s", exc.errors(include_input=False))
            return None
        except Exception:
            logger.exception("Unexpected error fetching weather for (%s, %s)", latitude, longitude)
            return None
