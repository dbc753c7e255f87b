"""
AQI Forecast Model
"""

from aqi_dashboard.extensions import db


class AQIForecast(db.Model):
    """Predicted AQI for one city on one date; at most one row per (city, date)"""
    __tablename__ = 'aqi_forecasts'
    __table_args__ = (
        db.UniqueConstraint('city_id', 'forecast_date', name='uq_forecast_city_date'),
    )

    id = db.Column(db.Integer, primary_key=True)
    city_id = db.Column(db.Integer, db.ForeignKey('cities.id'), nullable=False)
    forecast_date = db.Column(db.Date, nullable=False)
    predicted_aqi = db.Column(db.Integer, nullable=False)
    predicted_pm25 = db.Column(db.Float)
    confidence_score = db.Column(db.Float)
    weather_factor = db.Column(db.JSON)
    model_version = db.Column(db.String(20))
    created_at = db.Column(db.DateTime, default=db.func.current_timestamp())

    def to_dict(self):
        return {
            'id': self.id,
            'city_id': self.city_id,
            'forecast_date': self.forecast_date.isoformat(),
            'predicted_aqi': self.predicted_aqi,
            'predicted_pm25': self.predicted_pm25,
            'confidence_score': self.confidence_score,
            'weather_factor': self.weather_factor,
            'model_version': self.model_version,
        }

    def __repr__(self):
        return f'<AQIForecast City:{self.city_id} {self.forecast_date} AQI:{self.predicted_aqi}>'
