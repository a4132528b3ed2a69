import json
import logging
from dataclasses import dataclass
import requests

logger = logging.getLogger(__name__)

OPENWEATHERMAP_URL = 'https://api.openweathermap.org/data/2.5/weather'

# Returned by fetch_raw() in place of a body when the request never completed
FAILED_RESPONSE = 'failed to get response'


class WeatherParseError(ValueError):
    pass


@dataclass(frozen=True)
class WeatherApiSettings:
    api_key: str
    city: str = 'seoul'
    base_url: str = OPENWEATHERMAP_URL
    timeout: float = 10

    @classmethod
    def from_config(cls, config):
        return cls(
            api_key=config.get('OPENWEATHERMAP_API_KEY'),
            city=config.get('WEATHER_CITY', 'seoul'),
            base_url=config.get('WEATHER_API_URL', OPENWEATHERMAP_URL),
            timeout=config.get('WEATHER_API_TIMEOUT', 10),
        )


@dataclass(frozen=True)
class WeatherResponse:
    """Any HTTP response from the provider, error statuses included."""
    status_code: int
    body: str

    @property
    def ok(self):
        return self.status_code == 200


@dataclass(frozen=True)
class TransportError:
    """The request never produced an HTTP response (DNS, timeout, refused...)."""
    reason: str


class OpenWeatherMapClient:
    def __init__(self, settings):
        self.settings = settings

    def fetch(self):
        """Fetch current weather for the configured city.

        Returns a WeatherResponse for every HTTP answer and a TransportError
        when no answer arrived. Never raises on network failure.
        """
        params = {'q': self.settings.city, 'appid': self.settings.api_key}
        try:
            resp = requests.get(self.settings.base_url, params=params, timeout=self.settings.timeout)
        except requests.RequestException as e:
            logger.warning(f"Weather fetch failed for {self.settings.city}: {e}")
            return TransportError(reason=str(e))

        if resp.status_code != 200:
            logger.warning(f"Weather API returned {resp.status_code} for {self.settings.city}")
        return WeatherResponse(status_code=resp.status_code, body=resp.text)

    def fetch_raw(self):
        """Body text of the response, or FAILED_RESPONSE on transport failure."""
        result = self.fetch()
        if isinstance(result, TransportError):
            return FAILED_RESPONSE
        return result.body


def parse_weather(raw):
    """Extract {'temp', 'main', 'icon'} from an OpenWeatherMap current-weather payload.

    Raises WeatherParseError for invalid JSON or a payload missing any of
    main.temp, weather[0].main, weather[0].icon, or whose condition or icon
    is not a non-empty string.
    """
    try:
        payload = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise WeatherParseError(f"Weather payload is not valid JSON: {e}") from e

    try:
        main_data = payload['main']
        weather_data = payload['weather'][0]
        parsed = {
            'temp': main_data['temp'],
            'main': weather_data['main'],
            'icon': weather_data['icon'],
        }
    except (KeyError, IndexError, TypeError) as e:
        raise WeatherParseError(f"Unexpected weather payload structure: missing {e}") from e

    for field in ('main', 'icon'):
        value = parsed[field]
        if not isinstance(value, str) or not value.strip():
            raise WeatherParseError(f"Invalid weather {field}: {value!r}")
    return parsed
