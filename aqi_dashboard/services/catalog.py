"""
City Catalogue

Reference list of monitored locations, used to seed the store and served
directly when the store is unavailable. Ids are stable: the baseline id table
is keyed by them.
"""

from types import MappingProxyType

# (id, name, state, latitude, longitude, category)
_CITY_ROWS = (
    (1, 'Delhi', 'Delhi', 28.6139, 77.2090, 'major_city'),
    (2, 'Mumbai', 'Maharashtra', 19.0760, 72.8777, 'major_city'),
    (3, 'Bangalore', 'Karnataka', 12.9716, 77.5946, 'major_city'),
    (4, 'Chennai', 'Tamil Nadu', 13.0827, 80.2707, 'major_city'),
    (5, 'Kolkata', 'West Bengal', 22.5726, 88.3639, 'major_city'),
    (6, 'Hyderabad', 'Telangana', 17.3850, 78.4867, 'major_city'),
    (7, 'Pune', 'Maharashtra', 18.5204, 73.8567, 'major_city'),
    (8, 'Ahmedabad', 'Gujarat', 23.0225, 72.5714, 'major_city'),
    (9, 'Jaipur', 'Rajasthan', 26.9124, 75.7873, 'major_city'),
    (10, 'Lucknow', 'Uttar Pradesh', 26.8467, 80.9462, 'major_city'),
    # Punjab
    (11, 'Bathinda', 'Punjab', 30.2110, 74.9455, 'small_city'),
    (12, 'Moga', 'Punjab', 30.8165, 75.1717, 'town'),
    (13, 'Fazilka', 'Punjab', 30.4036, 74.0280, 'town'),
    (14, 'Barnala', 'Punjab', 30.3819, 75.5468, 'town'),
    (15, 'Kapurthala', 'Punjab', 31.3800, 75.3800, 'town'),
    # Haryana
    (16, 'Panipat', 'Haryana', 29.3909, 76.9635, 'small_city'),
    (17, 'Karnal', 'Haryana', 29.6857, 76.9905, 'small_city'),
    (18, 'Rohtak', 'Haryana', 28.8955, 76.6066, 'small_city'),
    (19, 'Hisar', 'Haryana', 29.1492, 75.7217, 'small_city'),
    (20, 'Sirsa', 'Haryana', 29.5349, 75.0280, 'town'),
    # Uttar Pradesh
    (21, 'Moradabad', 'Uttar Pradesh', 28.8386, 78.7733, 'small_city'),
    (22, 'Firozabad', 'Uttar Pradesh', 27.1592, 78.3957, 'small_city'),
    (23, 'Bareilly', 'Uttar Pradesh', 28.3670, 79.4304, 'small_city'),
    (24, 'Aligarh', 'Uttar Pradesh', 27.8974, 78.0880, 'small_city'),
    (25, 'Mathura', 'Uttar Pradesh', 27.4924, 77.6737, 'small_city'),
    (26, 'Meerut', 'Uttar Pradesh', 28.9845, 77.7064, 'small_city'),
    (27, 'Saharanpur', 'Uttar Pradesh', 29.9680, 77.5552, 'small_city'),
    # Bihar
    (28, 'Muzaffarpur', 'Bihar', 26.1209, 85.3647, 'small_city'),
    (29, 'Darbhanga', 'Bihar', 26.1542, 85.8918, 'town'),
    (30, 'Begusarai', 'Bihar', 25.4182, 86.1272, 'town'),
    (31, 'Katihar', 'Bihar', 25.5394, 87.5710, 'town'),
    (32, 'Purnia', 'Bihar', 25.7771, 87.4753, 'town'),
    # Madhya Pradesh
    (33, 'Gwalior', 'Madhya Pradesh', 26.2183, 78.1828, 'small_city'),
    (34, 'Ujjain', 'Madhya Pradesh', 23.1765, 75.7885, 'small_city'),
    (35, 'Dewas', 'Madhya Pradesh', 22.9676, 76.0534, 'town'),
    (36, 'Ratlam', 'Madhya Pradesh', 23.3315, 75.0367, 'town'),
    (37, 'Singrauli', 'Madhya Pradesh', 24.1992, 82.6645, 'town'),
    # Rajasthan
    (38, 'Jodhpur', 'Rajasthan', 26.2389, 73.0243, 'small_city'),
    (39, 'Bikaner', 'Rajasthan', 28.0229, 73.3119, 'small_city'),
    (40, 'Ajmer', 'Rajasthan', 26.4499, 74.6399, 'small_city'),
    (41, 'Bharatpur', 'Rajasthan', 27.2152, 77.4930, 'town'),
    (42, 'Alwar', 'Rajasthan', 27.5530, 76.6346, 'town'),
    # Odisha
    (43, 'Rourkela', 'Odisha', 22.2604, 84.8536, 'small_city'),
    (44, 'Sambalpur', 'Odisha', 21.4669, 83.9812, 'town'),
    (45, 'Balasore', 'Odisha', 21.4942, 86.9317, 'town'),
    (46, 'Berhampur', 'Odisha', 19.3150, 84.7941, 'town'),
    # Chhattisgarh
    (47, 'Raipur', 'Chhattisgarh', 21.2514, 81.6296, 'small_city'),
    (48, 'Bhilai', 'Chhattisgarh', 21.1938, 81.3509, 'small_city'),
    (49, 'Korba', 'Chhattisgarh', 22.3595, 82.7501, 'town'),
    (50, 'Durg', 'Chhattisgarh', 21.1904, 81.2849, 'town'),
    # Jharkhand
    (51, 'Jamshedpur', 'Jharkhand', 22.8046, 86.2029, 'small_city'),
    (52, 'Dhanbad', 'Jharkhand', 23.7957, 86.4304, 'small_city'),
    (53, 'Bokaro', 'Jharkhand', 23.6693, 86.1511, 'town'),
    (54, 'Ranchi', 'Jharkhand', 23.3441, 85.3096, 'small_city'),
    # Assam
    (55, 'Guwahati', 'Assam', 26.1445, 91.7362, 'small_city'),
    (56, 'Dibrugarh', 'Assam', 27.4728, 94.9120, 'town'),
    (57, 'Silchar', 'Assam', 24.8333, 92.7789, 'town'),
    (58, 'Jorhat', 'Assam', 26.7509, 94.2037, 'town'),
    # Himachal Pradesh
    (59, 'Shimla', 'Himachal Pradesh', 31.1048, 77.1734, 'town'),
    (60, 'Dharamshala', 'Himachal Pradesh', 32.2190, 76.3234, 'rural'),
    (61, 'Kullu', 'Himachal Pradesh', 31.9579, 77.1095, 'rural'),
    (62, 'Mandi', 'Himachal Pradesh', 31.7084, 76.9320, 'rural'),
    # Uttarakhand
    (63, 'Dehradun', 'Uttarakhand', 30.3165, 78.0322, 'small_city'),
    (64, 'Haridwar', 'Uttarakhand', 29.9457, 78.1642, 'town'),
    (65, 'Rishikesh', 'Uttarakhand', 30.0869, 78.2676, 'town'),
    (66, 'Roorkee', 'Uttarakhand', 29.8543, 77.8880, 'town'),
    # Kerala
    (67, 'Kochi', 'Kerala', 9.9312, 76.2673, 'small_city'),
    (68, 'Kozhikode', 'Kerala', 11.2588, 75.7804, 'small_city'),
    (69, 'Thrissur', 'Kerala', 10.5276, 76.2144, 'town'),
    (70, 'Kollam', 'Kerala', 8.8932, 76.6141, 'town'),
    # Andhra Pradesh
    (71, 'Visakhapatnam', 'Andhra Pradesh', 17.6868, 83.2185, 'small_city'),
    (72, 'Vijayawada', 'Andhra Pradesh', 16.5062, 80.6480, 'small_city'),
    (73, 'Guntur', 'Andhra Pradesh', 16.3067, 80.4365, 'small_city'),
    (74, 'Nellore', 'Andhra Pradesh', 14.4426, 79.9865, 'town'),
    # Karnataka
    (75, 'Mysore', 'Karnataka', 12.2958, 76.6394, 'small_city'),
    (76, 'Hubli', 'Karnataka', 15.3647, 75.1240, 'small_city'),
    (77, 'Mangalore', 'Karnataka', 12.9141, 74.8560, 'small_city'),
    (78, 'Belgaum', 'Karnataka', 15.8497, 74.4977, 'small_city'),
    # Tamil Nadu
    (79, 'Coimbatore', 'Tamil Nadu', 11.0168, 76.9558, 'small_city'),
    (80, 'Madurai', 'Tamil Nadu', 9.9252, 78.1198, 'small_city'),
    (81, 'Salem', 'Tamil Nadu', 11.6643, 78.1460, 'small_city'),
    (82, 'Tirupur', 'Tamil Nadu', 11.1085, 77.3411, 'town'),
    (83, 'Vellore', 'Tamil Nadu', 12.9165, 79.1325, 'town'),
)

CITIES = tuple(
    MappingProxyType({
        'id': city_id,
        'name': name,
        'state': state,
        'latitude': lat,
        'longitude': lon,
        'category': category,
        'district': None,
        'population': None,
    })
    for city_id, name, state, lat, lon, category in _CITY_ROWS
)

CITIES_BY_ID = MappingProxyType({city['id']: city for city in CITIES})

CATEGORY_DISPLAY = {
    'rural': 'Village',
    'town': 'Town',
    'small_city': 'Small City',
    'major_city': 'Major City',
}

# Used only for cities that carry no category of their own
MAJOR_CITIES = frozenset(['Delhi', 'Mumbai', 'Bangalore', 'Chennai', 'Kolkata', 'Hyderabad', 'Pune', 'Nagpur'])
INDUSTRIAL_TOWNS = frozenset([
    'Singrauli', 'Korba', 'Dhanbad', 'Bokaro', 'Jamshedpur', 'Bhilai', 'Rourkela', 'Bhiwandi', 'Ichalkaranji',
])
HILL_STATIONS = frozenset(['Shimla', 'Dharamshala', 'Kullu', 'Mandi', 'Rishikesh', 'Dehradun'])
COASTAL_CITIES = frozenset([
    'Kochi', 'Kozhikode', 'Mangalore', 'Visakhapatnam', 'Chennai', 'Mumbai', 'Chiplun', 'Ratnagiri',
])
AGRICULTURAL_STATES = frozenset(['Punjab', 'Haryana'])


def city_type(city):
    """Return the display type of a city dict ('Major City', 'Town', 'Hill Station', ...)."""
    category = city.get('category')
    if category:
        return CATEGORY_DISPLAY.get(category, 'City')

    name = city.get('name')
    population = city.get('population')
    if name in MAJOR_CITIES:
        return 'Major City'
    if name in INDUSTRIAL_TOWNS:
        return 'Industrial Town'
    if name in HILL_STATIONS:
        return 'Hill Station'
    if name in COASTAL_CITIES:
        return 'Coastal City'
    if city.get('state') in AGRICULTURAL_STATES:
        return 'Agricultural'
    if population and population < 50000:
        return 'Village'
    if population and population < 200000:
        return 'Town'
    return 'City'


def filter_cities(cities, state=None, type_name=None, search=None):
    """Filter city dicts by exact state, display type and a name/state/district substring."""
    needle = search.strip().lower() if search else None
    result = []
    for city in cities:
        if state and city['state'] != state:
            continue
        if type_name and city_type(city) != type_name:
            continue
        if needle:
            haystacks = [city['name'], city['state'], city.get('district') or '']
            if not any(needle in h.lower() for h in haystacks):
                continue
        result.append(city)
    return result
