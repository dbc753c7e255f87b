"""
AQI Classification Services

Indian National AQI bands. CATEGORY_BANDS is the only place the band
boundaries and colours are defined; the advisory table derives its ranges
from it.
"""

from collections import namedtuple

AQICategory = namedtuple('AQICategory', ['category', 'color'])

# (upper bound inclusive, category, colour); the last band is open-ended
CATEGORY_BANDS = (
    (50, 'Good', '#00E400'),
    (100, 'Satisfactory', '#FFFF00'),
    (200, 'Moderate', '#FF7E00'),
    (300, 'Poor', '#FF0000'),
    (400, 'Very Poor', '#8F3F97'),
    (None, 'Severe', '#7E0023'),
)

CATEGORIES = tuple(band[1] for band in CATEGORY_BANDS)

RISK_LEVELS = {
    'Good': 'Low',
    'Satisfactory': 'Low',
    'Moderate': 'Moderate',
    'Poor': 'High',
    'Very Poor': 'High',
    'Severe': 'Severe',
}


def classify(aqi):
    """Map an AQI value to its category and display colour."""
    for upper, category, color in CATEGORY_BANDS:
        if upper is None or aqi <= upper:
            return AQICategory(category, color)


def quality_category(aqi):
    return classify(aqi).category


def risk_level(category):
    return RISK_LEVELS[category]


def category_ranges():
    """Yield (aqi_min, aqi_max, category) for every band, aqi_max None when unbounded."""
    lower = 0
    for upper, category, _ in CATEGORY_BANDS:
        yield lower, upper, category
        if upper is not None:
            lower = upper + 1
