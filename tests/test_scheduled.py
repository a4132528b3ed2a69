from datetime import date
from unittest.mock import MagicMock, patch
import requests
from weather_diary.jobs.scheduled import _weather_refresh_job, register_jobs
from weather_diary.models.weather import DateWeather


class TestRegisterJobs:
    def test_weather_refresh_runs_daily_at_one(self, app):
        scheduler = MagicMock()
        register_jobs(scheduler, app)

        scheduler.add_job.assert_called_once()
        kwargs = scheduler.add_job.call_args.kwargs
        assert kwargs['id'] == 'weather_refresh'
        assert kwargs['func'] is _weather_refresh_job
        assert kwargs['trigger'] == 'cron'
        assert kwargs['hour'] == 1
        assert kwargs['minute'] == 0
        assert kwargs['replace_existing'] is True
        assert kwargs['args'] == [app]
        assert 'timezone' not in kwargs


class TestWeatherRefreshJob:
    def test_stores_snapshot(self, app, mock_response):
        with patch('weather_diary.integrations.weather.requests.get', return_value=mock_response()):
            snapshot = _weather_refresh_job(app)

        assert snapshot is not None
        rows = DateWeather.find_all_by_date(date.today())
        assert [r.weather for r in rows] == ['Clouds']

    def test_transport_failure_is_skipped(self, app):
        with patch('weather_diary.integrations.weather.requests.get',
                   side_effect=requests.ConnectionError('down')):
            assert _weather_refresh_job(app) is None
        assert DateWeather.query.count() == 0

    def test_parse_failure_does_not_raise(self, app, mock_response):
        with patch('weather_diary.integrations.weather.requests.get',
                   return_value=mock_response(status_code=500, text='<html>oops</html>')):
            assert _weather_refresh_job(app) is None
        assert DateWeather.query.count() == 0
