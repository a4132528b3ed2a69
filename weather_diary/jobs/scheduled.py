import logging
from weather_diary.extensions import db

logger = logging.getLogger(__name__)


def _weather_refresh_job(app):
    with app.app_context():
        logger.info("[Job] Weather snapshot")
        from weather_diary.services.diary_service import DiaryService
        try:
            snapshot = DiaryService().save_weather_date()
        except Exception as e:
            db.session.rollback()
            logger.error(f"[Job] Weather snapshot failed: {e}")
            return None

        if snapshot is None:
            logger.info("[Job] Weather snapshot skipped")
        else:
            logger.info(f"[Job] Weather snapshot stored for {snapshot.date}")
        return snapshot


def _upsert_job(scheduler, **kwargs):
    scheduler.add_job(replace_existing=True, **kwargs)


def register_jobs(scheduler, app):
    """Register all scheduled jobs."""
    trigger_args = {
        'hour': app.config.get('WEATHER_REFRESH_HOUR', 1),
        'minute': app.config.get('WEATHER_REFRESH_MINUTE', 0),
    }
    if app.config.get('WEATHER_REFRESH_TIMEZONE'):
        trigger_args['timezone'] = app.config['WEATHER_REFRESH_TIMEZONE']

    _upsert_job(
        scheduler,
        id='weather_refresh',
        func=_weather_refresh_job,
        trigger='cron',
        args=[app],
        misfire_grace_time=3600,
        coalesce=True,
        max_instances=1,
        **trigger_args,
    )
    logger.info(
        "Weather snapshot scheduled daily at %02d:%02d",
        trigger_args['hour'],
        trigger_args['minute'],
    )
