from weather_diary.extensions import db
from sqlalchemy import func


class DateWeather(db.Model):
    """Daily weather snapshot. Several rows may share a date; lowest id wins."""
    __tablename__ = 'date_weather'

    id = db.Column(db.Integer, primary_key=True)
    date = db.Column(db.Date, nullable=False, index=True)
    weather = db.Column(db.String(64), nullable=False)
    icon = db.Column(db.String(16), nullable=True)
    temperature = db.Column(db.Float, nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())

    @classmethod
    def find_all_by_date(cls, target_date):
        return cls.query.filter_by(date=target_date).order_by(cls.id.asc()).all()

    @classmethod
    def first_by_date(cls, target_date):
        return cls.query.filter_by(date=target_date).order_by(cls.id.asc()).first()

    def to_dict(self):
        return {
            'date': self.date.isoformat(),
            'weather': self.weather,
            'icon': self.icon,
            'temperature': self.temperature,
        }
