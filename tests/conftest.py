import json
import pytest
from datetime import date
from unittest.mock import MagicMock

from weather_diary import create_app
from weather_diary.extensions import db as _db
from weather_diary.integrations.weather import WeatherResponse
from weather_diary.models.weather import DateWeather
from config import TestConfig

CLOUDS_PAYLOAD = json.dumps({
    'coord': {'lon': 126.9778, 'lat': 37.5683},
    'weather': [{'id': 802, 'main': 'Clouds', 'description': 'scattered clouds', 'icon': '03d'}],
    'main': {'temp': 15.2, 'feels_like': 14.1, 'humidity': 60},
    'name': 'Seoul',
})


class FakeWeatherClient:
    """Stands in for OpenWeatherMapClient and counts outbound fetches."""

    def __init__(self, result=None):
        self.result = result or WeatherResponse(status_code=200, body=CLOUDS_PAYLOAD)
        self.calls = 0

    def fetch(self):
        self.calls += 1
        return self.result


@pytest.fixture(scope='session')
def app():
    """Create app with test config."""
    app = create_app(TestConfig)
    return app


@pytest.fixture(autouse=True)
def setup_db(app):
    """Create tables before each test, drop after."""
    with app.app_context():
        _db.create_all()
        yield
        _db.session.rollback()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db_session(app):
    with app.app_context():
        yield _db.session


@pytest.fixture
def fake_weather():
    return FakeWeatherClient()


@pytest.fixture
def make_weather_client():
    return FakeWeatherClient


@pytest.fixture
def cached_weather(db_session):
    """Two snapshots for the same date; the first inserted must win."""
    snapshots = [
        DateWeather(date=date(2026, 3, 1), weather='Rain', icon='10d', temperature=279.4),
        DateWeather(date=date(2026, 3, 1), weather='Clear', icon='01d', temperature=283.0),
    ]
    for s in snapshots:
        db_session.add(s)
    db_session.commit()
    return snapshots


@pytest.fixture
def mock_response():
    def _make(status_code=200, text=CLOUDS_PAYLOAD):
        resp = MagicMock()
        resp.status_code = status_code
        resp.text = text
        return resp
    return _make
