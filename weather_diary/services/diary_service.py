import logging
from datetime import date
from flask import current_app
from weather_diary.extensions import db
from weather_diary.integrations.weather import TransportError, WeatherParseError, parse_weather
from weather_diary.models.diary import Diary
from weather_diary.models.weather import DateWeather

logger = logging.getLogger(__name__)

UNAVAILABLE_CONDITION = 'unavailable'


class DiaryNotFoundError(LookupError):
    pass


class WeatherUnavailableError(RuntimeError):
    pass


class DiaryService:
    def __init__(self, weather_client=None):
        self._weather_client = weather_client

    @property
    def weather_client(self):
        return self._weather_client or current_app.extensions['weather_client']

    # -- weather -----------------------------------------------------------

    def fetch_weather_snapshot(self):
        """Fetch, parse and build an unsaved snapshot stamped with today's date."""
        result = self.weather_client.fetch()
        if isinstance(result, TransportError):
            raise WeatherUnavailableError(result.reason)
        return _build_snapshot(parse_weather(result.body))

    def get_date_weather(self, target_date):
        """Cached snapshot for the date, else a live (unsaved) one."""
        cached = DateWeather.first_by_date(target_date)
        if cached:
            logger.debug(f"Using cached weather #{cached.id} for {target_date}")
            return cached

        logger.info(f"No cached weather for {target_date}, fetching current weather")
        try:
            return self.fetch_weather_snapshot()
        except WeatherUnavailableError as e:
            logger.warning(f"Weather unavailable for {target_date}, using placeholder: {e}")
            return DateWeather(date=date.today(), weather=UNAVAILABLE_CONDITION, icon=None, temperature=None)

    def save_weather_date(self):
        """Store today's weather in the cache. Duplicates for a date are allowed."""
        try:
            snapshot = self.fetch_weather_snapshot()
        except WeatherUnavailableError as e:
            logger.warning(f"Skipping weather snapshot: {e}")
            return None

        db.session.add(snapshot)
        db.session.commit()
        logger.info(f"Stored weather for {snapshot.date}: {snapshot.weather} {snapshot.temperature}")
        return snapshot

    # -- diary -------------------------------------------------------------

    def create_diary(self, target_date, text):
        logger.info(f"Creating diary for {target_date}")
        _begin_serializable()
        try:
            snapshot = self.get_date_weather(target_date)

            diary = Diary(date=target_date, text=text)
            diary.apply_weather(snapshot)
            db.session.add(diary)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

        logger.info(f"Created diary #{diary.id} for {target_date}")
        return diary

    def read_diary(self, target_date):
        return Diary.find_all_by_date(target_date)

    def read_diaries(self, start_date, end_date):
        return Diary.find_all_between(start_date, end_date)

    def update_diary(self, target_date, text):
        """Replace the text of the first entry for the date; weather is kept."""
        diary = Diary.first_by_date(target_date)
        if not diary:
            raise DiaryNotFoundError(f"No diary for {target_date.isoformat()}")

        diary.text = text
        db.session.commit()
        return diary

    def delete_diary(self, target_date):
        deleted = Diary.delete_all_by_date(target_date)
        db.session.commit()
        logger.info(f"Deleted {deleted} diaries for {target_date}")
        return deleted


def _build_snapshot(parsed):
    try:
        temperature = float(parsed['temp'])
    except (TypeError, ValueError) as e:
        raise WeatherParseError(f"Invalid temperature: {parsed['temp']!r}") from e

    return DateWeather(
        date=date.today(),
        weather=parsed['main'],
        icon=parsed['icon'],
        temperature=temperature,
    )


def _begin_serializable():
    # Isolation can only be chosen before the transaction starts, so end any
    # transaction left open by earlier reads or writes on this session.
    if db.session().in_transaction():
        logger.debug("Closing active session transaction before create")
        db.session.commit()
    db.session.connection(execution_options={'isolation_level': 'SERIALIZABLE'})
