"""
Health Advisory Services

Static advice per AQI category. Ranges come from CATEGORY_BANDS so the
advisory lookup and the classifier always agree.
"""

import logging

from aqi_dashboard.services.aqi import category_ranges, classify, risk_level

logger = logging.getLogger(__name__)


ADVICE = {
    'Good': {
        'general_advice': 'Air quality is good. Enjoy outdoor activities.',
        'sensitive_groups_advice': 'No precautions needed.',
        'outdoor_activities': 'All outdoor activities are safe.',
        'mask_recommendation': False,
        'air_purifier_recommendation': False,
        'specific_recommendations': {
            'indoor': ['Open windows to ventilate your home'],
            'outdoor': ['Ideal conditions for running, cycling and sports'],
            'health': ['No health precautions required'],
            'equipment': [],
        },
    },
    'Satisfactory': {
        'general_advice': 'Air quality is acceptable. Unusually sensitive people may feel minor discomfort.',
        'sensitive_groups_advice': 'People with asthma should keep reliever medication handy.',
        'outdoor_activities': 'Outdoor activities are fine for most people.',
        'mask_recommendation': False,
        'air_purifier_recommendation': False,
        'specific_recommendations': {
            'indoor': ['Ventilate during the cleaner parts of the day'],
            'outdoor': ['Sensitive individuals should avoid prolonged heavy exertion'],
            'health': ['Watch for coughing or shortness of breath'],
            'equipment': [],
        },
    },
    'Moderate': {
        'general_advice': 'Breathing discomfort is possible for people with lung or heart disease, children and older adults.',
        'sensitive_groups_advice': 'Sensitive groups should reduce prolonged outdoor exertion.',
        'outdoor_activities': 'Limit long or intense outdoor activities.',
        'mask_recommendation': False,
        'air_purifier_recommendation': True,
        'specific_recommendations': {
            'indoor': ['Keep windows closed during peak traffic hours', 'Use an air purifier if available'],
            'outdoor': ['Shorten outdoor workouts', 'Avoid busy roads'],
            'health': ['Carry prescribed inhalers', 'Stay hydrated'],
            'equipment': ['HEPA air purifier'],
        },
    },
    'Poor': {
        'general_advice': 'Breathing discomfort is likely for most people on prolonged exposure.',
        'sensitive_groups_advice': 'Children, older adults and people with respiratory conditions should stay indoors.',
        'outdoor_activities': 'Avoid prolonged outdoor activities.',
        'mask_recommendation': True,
        'air_purifier_recommendation': True,
        'specific_recommendations': {
            'indoor': ['Keep windows and doors closed', 'Run air purifiers continuously'],
            'outdoor': ['Avoid outdoor exercise', 'Wear an N95 mask outside'],
            'health': ['Consult a doctor if you experience chest tightness', 'Monitor symptoms of vulnerable family members'],
            'equipment': ['N95 mask', 'HEPA air purifier'],
        },
    },
    'Very Poor': {
        'general_advice': 'Respiratory illness is possible on prolonged exposure. Stay indoors as much as possible.',
        'sensitive_groups_advice': 'Sensitive groups should avoid all outdoor exposure.',
        'outdoor_activities': 'Avoid all outdoor physical activity.',
        'mask_recommendation': True,
        'air_purifier_recommendation': True,
        'specific_recommendations': {
            'indoor': ['Seal gaps around windows and doors', 'Avoid burning candles, incense or wood indoors'],
            'outdoor': ['Go outside only when necessary', 'Wear an N95 or N99 mask outdoors'],
            'health': ['Seek medical help for breathing difficulty', 'Keep medication within reach'],
            'equipment': ['N95/N99 mask', 'HEPA air purifier', 'Indoor air quality monitor'],
        },
    },
    'Severe': {
        'general_advice': 'Health alert: air quality affects healthy people and seriously impacts those with existing diseases.',
        'sensitive_groups_advice': 'Sensitive groups must remain indoors and keep activity levels low.',
        'outdoor_activities': 'Everyone should avoid outdoor activity.',
        'mask_recommendation': True,
        'air_purifier_recommendation': True,
        'specific_recommendations': {
            'indoor': ['Stay indoors with purifiers running', 'Create a clean-air room'],
            'outdoor': ['Postpone all outdoor plans', 'Wear an N99 mask if you must go out'],
            'health': ['Seek immediate medical attention for symptoms', 'Follow public health emergency guidance'],
            'equipment': ['N99 mask', 'HEPA air purifier', 'Indoor air quality monitor'],
        },
    },
}

ADVISORY_FIELDS = (
    'general_advice',
    'sensitive_groups_advice',
    'outdoor_activities',
    'mask_recommendation',
    'air_purifier_recommendation',
)


def static_advisories():
    """Return the advisory table as range-keyed records, partitioning [0, inf)."""
    records = []
    for aqi_min, aqi_max, category in category_ranges():
        record = {'aqi_min': aqi_min, 'aqi_max': aqi_max, 'category': category}
        for field in ADVISORY_FIELDS:
            record[field] = ADVICE[category][field]
        records.append(record)
    return records


def build_advisory(aqi, record=None):
    """Build the advisory payload for an AQI value.

    Category, colour and risk level always come from the classifier. Advice
    text comes from `record` (a stored advisory dict) when given, otherwise
    from the static table.
    """
    category, color = classify(aqi)
    advice = ADVICE[category]

    if record is not None and record.get('category') != category:
        logger.warning('Stored advisory for AQI %s says %r, classifier says %r; using %r',
                       aqi, record.get('category'), category, category)
        record = None

    source = record if record is not None else advice
    payload = {
        'aqi': aqi,
        'category': category,
        'color_code': color,
        'risk_level': risk_level(category),
        'specific_recommendations': {
            key: list(values) for key, values in advice['specific_recommendations'].items()
        },
    }
    for field in ADVISORY_FIELDS:
        value = source.get(field)
        payload[field] = advice[field] if value is None else value
    payload['mask_recommendation'] = bool(payload['mask_recommendation'])
    payload['air_purifier_recommendation'] = bool(payload['air_purifier_recommendation'])
    return payload
