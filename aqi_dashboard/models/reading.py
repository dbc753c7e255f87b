"""
AQI Reading Model
"""

from aqi_dashboard.extensions import db


class AQIReading(db.Model):
    """One AQI observation for a city, with its pollutant breakdown"""
    __tablename__ = 'aqi_readings'

    id = db.Column(db.Integer, primary_key=True)
    city_id = db.Column(db.Integer, db.ForeignKey('cities.id'), nullable=False, index=True)
    station_name = db.Column(db.String(120))
    aqi_value = db.Column(db.Integer, nullable=False)
    pm25 = db.Column(db.Float)
    pm10 = db.Column(db.Float)
    no2 = db.Column(db.Float)
    so2 = db.Column(db.Float)
    co = db.Column(db.Float)
    o3 = db.Column(db.Float)
    nh3 = db.Column(db.Float)
    quality_category = db.Column(db.String(20), nullable=False)
    recorded_at = db.Column(db.DateTime, nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=db.func.current_timestamp())

    def to_dict(self):
        return {
            'id': self.id,
            'city_id': self.city_id,
            'station_name': self.station_name,
            'aqi_value': self.aqi_value,
            'pm25': self.pm25,
            'pm10': self.pm10,
            'no2': self.no2,
            'so2': self.so2,
            'co': self.co,
            'o3': self.o3,
            'nh3': self.nh3,
            'quality_category': self.quality_category,
            'recorded_at': self.recorded_at.isoformat() if self.recorded_at else None,
        }

    def __repr__(self):
        return f'<AQIReading City:{self.city_id} AQI:{self.aqi_value}>'
