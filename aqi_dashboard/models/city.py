"""
City Model
"""

from aqi_dashboard.extensions import db


class City(db.Model):
    """A monitored city, town or village"""
    __tablename__ = 'cities'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False, index=True)
    state = db.Column(db.String(100), nullable=False, index=True)
    latitude = db.Column(db.Float)
    longitude = db.Column(db.Float)
    category = db.Column(db.String(20))
    district = db.Column(db.String(100))
    population = db.Column(db.Integer)
    created_at = db.Column(db.DateTime, default=db.func.current_timestamp())

    # Relationships
    readings = db.relationship('AQIReading', backref='city', lazy=True)
    forecasts = db.relationship('AQIForecast', backref='city', lazy=True)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'state': self.state,
            'latitude': self.latitude,
            'longitude': self.longitude,
            'category': self.category,
            'district': self.district,
            'population': self.population,
        }

    def __repr__(self):
        return f'<City {self.name}, {self.state}>'
