from weather_diary.models.weather import DateWeather
from weather_diary.models.diary import Diary

__all__ = ['DateWeather', 'Diary']
