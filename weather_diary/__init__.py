import logging
from flask import Flask
from config import Config


def create_app(config_class=None):
    app = Flask(__name__)
    app.config.from_object(config_class or Config)

    # Heroku/Railway style DATABASE_URL (postgres:// -> postgresql://)
    db_uri = app.config.get('SQLALCHEMY_DATABASE_URI', '')
    if db_uri.startswith('postgres://'):
        app.config['SQLALCHEMY_DATABASE_URI'] = db_uri.replace('postgres://', 'postgresql://', 1)

    # Logging
    logging.basicConfig(
        level=getattr(logging, app.config.get('LOG_LEVEL', 'INFO')),
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    )

    # Extensions
    from weather_diary.extensions import db, migrate, scheduler
    from weather_diary import models  # noqa: F401
    db.init_app(app)
    migrate.init_app(app, db)

    # Weather client, built once from the immutable settings
    from weather_diary.integrations.weather import OpenWeatherMapClient, WeatherApiSettings
    settings = WeatherApiSettings.from_config(app.config)
    if not settings.api_key:
        logging.getLogger(__name__).warning("OPENWEATHERMAP_API_KEY is not set; weather fetches will fail")
    app.extensions['weather_client'] = OpenWeatherMapClient(settings)

    # Register blueprints
    from weather_diary.routes import register_blueprints
    register_blueprints(app)

    # Scheduler
    if app.config.get('SCHEDULER_ENABLED') and not app.config.get('TESTING'):
        scheduler.init_app(app)
        with app.app_context():
            from weather_diary.jobs.scheduled import register_jobs
            register_jobs(scheduler, app)
        scheduler.start()

    return app
