import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-change-me')
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', 'sqlite:///weather_diary.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {'pool_pre_ping': True}

    # OpenWeatherMap
    OPENWEATHERMAP_API_KEY = os.getenv('OPENWEATHERMAP_API_KEY')
    WEATHER_API_URL = os.getenv('WEATHER_API_URL', 'https://api.openweathermap.org/data/2.5/weather')
    WEATHER_CITY = os.getenv('WEATHER_CITY', 'seoul')
    WEATHER_API_TIMEOUT = float(os.getenv('WEATHER_API_TIMEOUT', '10'))

    # Scheduler
    SCHEDULER_ENABLED = os.getenv('SCHEDULER_ENABLED', 'true').lower() == 'true'
    SCHEDULER_API_ENABLED = False
    WEATHER_REFRESH_HOUR = int(os.getenv('WEATHER_REFRESH_HOUR', '1'))
    WEATHER_REFRESH_MINUTE = int(os.getenv('WEATHER_REFRESH_MINUTE', '0'))
    WEATHER_REFRESH_TIMEZONE = os.getenv('WEATHER_REFRESH_TIMEZONE') or None

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}  # SQLite doesn't support pool options
    SCHEDULER_ENABLED = False
    OPENWEATHERMAP_API_KEY = 'test-key'
    WEATHER_CITY = 'seoul'
