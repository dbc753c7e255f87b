"""
Baseline AQI Estimation

Representative AQI per city, used as the centre of simulated readings and
mock forecasts. Lookup chain: city name -> city id -> state -> DEFAULT_BASELINE.
"""

from types import MappingProxyType

from aqi_dashboard.services.catalog import CITIES

DEFAULT_BASELINE = 120

CITY_NAME_BASELINES = MappingProxyType({
    # Major cities
    'Delhi': 180,
    'Mumbai': 120,
    'Kolkata': 130,
    'Chennai': 110,
    'Bangalore': 100,
    'Hyderabad': 120,
    'Pune': 110,
    'Ahmedabad': 140,
    'Jaipur': 160,
    'Lucknow': 170,

    # Punjab (stubble burning)
    'Bathinda': 165,
    'Moga': 160,
    'Fazilka': 155,
    'Barnala': 158,
    'Kapurthala': 150,

    # Haryana (NCR)
    'Panipat': 165,
    'Karnal': 160,
    'Rohtak': 155,
    'Hisar': 150,
    'Sirsa': 145,

    # Uttar Pradesh (industrial)
    'Moradabad': 160,
    'Firozabad': 165,
    'Bareilly': 155,
    'Aligarh': 158,
    'Mathura': 162,
    'Meerut': 168,
    'Saharanpur': 155,

    # Bihar (agricultural burning)
    'Muzaffarpur': 135,
    'Darbhanga': 130,
    'Begusarai': 140,
    'Katihar': 125,
    'Purnia': 128,

    # Madhya Pradesh
    'Gwalior': 130,
    'Ujjain': 125,
    'Dewas': 128,
    'Ratlam': 122,
    'Singrauli': 175,  # coal mining

    # Rajasthan (dust storms)
    'Jodhpur': 145,
    'Bikaner': 150,
    'Ajmer': 140,
    'Bharatpur': 148,
    'Alwar': 145,

    # Odisha (industrial)
    'Rourkela': 150,
    'Sambalpur': 135,
    'Balasore': 130,
    'Berhampur': 125,

    # Chhattisgarh (mining)
    'Raipur': 145,
    'Bhilai': 155,
    'Korba': 165,
    'Durg': 150,

    # Jharkhand (mining/industrial)
    'Jamshedpur': 160,
    'Dhanbad': 170,
    'Bokaro': 155,
    'Ranchi': 140,

    # Assam
    'Guwahati': 95,
    'Dibrugarh': 85,
    'Silchar': 90,
    'Jorhat': 88,

    # Himachal Pradesh (hill stations)
    'Shimla': 75,
    'Dharamshala': 70,
    'Kullu': 65,
    'Mandi': 80,

    # Uttarakhand
    'Dehradun': 85,
    'Haridwar': 95,
    'Rishikesh': 75,
    'Roorkee': 90,

    # Kerala (coastal)
    'Kochi': 90,
    'Kozhikode': 85,
    'Thrissur': 88,
    'Kollam': 92,

    # Andhra Pradesh
    'Visakhapatnam': 105,
    'Vijayawada': 115,
    'Guntur': 110,
    'Nellore': 100,

    # Karnataka
    'Mysore': 95,
    'Hubli': 105,
    'Mangalore': 85,
    'Belgaum': 100,

    # Tamil Nadu
    'Coimbatore': 105,
    'Madurai': 110,
    'Salem': 108,
    'Tirupur': 115,
    'Vellore': 112,
})

CITY_ID_BASELINES = MappingProxyType({
    city['id']: CITY_NAME_BASELINES[city['name']] for city in CITIES
})

STATE_BASELINES = MappingProxyType({
    'Punjab': 160,
    'Haryana': 155,
    'Uttar Pradesh': 150,
    'Bihar': 130,
    'Madhya Pradesh': 125,
    'Rajasthan': 145,
    'Odisha': 135,
    'Chhattisgarh': 150,
    'Jharkhand': 155,
    'Assam': 90,
    'Himachal Pradesh': 75,
    'Uttarakhand': 85,
    'Kerala': 90,
    'Andhra Pradesh': 105,
    'Karnataka': 100,
    'Tamil Nadu': 110,
})


def baseline_for(city, region=None):
    """Return the baseline AQI for a city id or city name.

    Args:
        city: integer city id or city name
        region: optional state name, consulted when the city itself is unknown

    Returns:
        Integer baseline; DEFAULT_BASELINE when nothing matches.
    """
    if isinstance(city, str):
        if city in CITY_NAME_BASELINES:
            return CITY_NAME_BASELINES[city]
    elif city in CITY_ID_BASELINES:
        return CITY_ID_BASELINES[city]

    return STATE_BASELINES.get(region or '', DEFAULT_BASELINE)
