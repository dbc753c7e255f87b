"""
Health Advisory Model
"""

from aqi_dashboard.extensions import db


class HealthAdvisory(db.Model):
    """Advice for an AQI range; aqi_max of None means no upper bound"""
    __tablename__ = 'health_advisories'

    id = db.Column(db.Integer, primary_key=True)
    aqi_min = db.Column(db.Integer, nullable=False)
    aqi_max = db.Column(db.Integer)
    category = db.Column(db.String(20), nullable=False)
    general_advice = db.Column(db.Text, nullable=False)
    sensitive_groups_advice = db.Column(db.Text)
    outdoor_activities = db.Column(db.Text)
    mask_recommendation = db.Column(db.Boolean, default=False)
    air_purifier_recommendation = db.Column(db.Boolean, default=False)

    def to_dict(self):
        return {
            'aqi_min': self.aqi_min,
            'aqi_max': self.aqi_max,
            'category': self.category,
            'general_advice': self.general_advice,
            'sensitive_groups_advice': self.sensitive_groups_advice,
            'outdoor_activities': self.outdoor_activities,
            'mask_recommendation': bool(self.mask_recommendation),
            'air_purifier_recommendation': bool(self.air_purifier_recommendation),
        }

    def __repr__(self):
        return f'<HealthAdvisory {self.category} {self.aqi_min}-{self.aqi_max}>'
