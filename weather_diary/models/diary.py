from weather_diary.extensions import db
from sqlalchemy import func


class Diary(db.Model):
    __tablename__ = 'diary'

    id = db.Column(db.Integer, primary_key=True)
    date = db.Column(db.Date, nullable=False, index=True)
    text = db.Column(db.Text, nullable=False, default='')

    # Weather snapshot, copied by value so live fetches never touch date_weather
    weather_date = db.Column(db.Date, nullable=False)
    weather = db.Column(db.String(64), nullable=False)
    icon = db.Column(db.String(16), nullable=True)
    temperature = db.Column(db.Float, nullable=True)

    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())
    updated_at = db.Column(db.DateTime(timezone=True), onupdate=func.now())

    @classmethod
    def find_all_by_date(cls, target_date):
        return cls.query.filter_by(date=target_date).order_by(cls.id.asc()).all()

    @classmethod
    def find_all_between(cls, start_date, end_date):
        return cls.query.filter(
            cls.date >= start_date,
            cls.date <= end_date,
        ).order_by(cls.date.asc(), cls.id.asc()).all()

    @classmethod
    def first_by_date(cls, target_date):
        return cls.query.filter_by(date=target_date).order_by(cls.id.asc()).first()

    @classmethod
    def delete_all_by_date(cls, target_date):
        return cls.query.filter_by(date=target_date).delete()

    def apply_weather(self, snapshot):
        self.weather_date = snapshot.date
        self.weather = snapshot.weather
        self.icon = snapshot.icon
        self.temperature = snapshot.temperature

    def weather_snapshot(self):
        return {
            'date': self.weather_date.isoformat() if self.weather_date else None,
            'weather': self.weather,
            'icon': self.icon,
            'temperature': self.temperature,
        }

    def to_dict(self):
        return {
            'id': self.id,
            'date': self.date.isoformat(),
            'text': self.text,
            'weather': self.weather_snapshot(),
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }
