"""Country and region lookups used to place recipes on the map."""
from __future__ import annotations

from typing import NamedTuple

UNKNOWN_CONTINENT = "Unknown"
UNKNOWN_COUNTRY_CODE = "XX"
UNKNOWN_REGION = "Unknown Region"


class CountryInfo(NamedTuple):
    code: str
    name: str
    continent: str
    lat: float
    lng: float


class Coordinates(NamedTuple):
    lat: float
    lng: float


# Keyed by lower-cased country name; aliases map to the same entry.
COUNTRIES: dict[str, CountryInfo] = {
    # Africa
    "algeria": CountryInfo("DZ", "Algeria", "Africa", 28.0339, 1.6596),
    "angola": CountryInfo("AO", "Angola", "Africa", -11.2027, 17.8739),
    "benin": CountryInfo("BJ", "Benin", "Africa", 9.3077, 2.3158),
    "botswana": CountryInfo("BW", "Botswana", "Africa", -22.3285, 24.6849),
    "burkina faso": CountryInfo("BF", "Burkina Faso", "Africa", 12.2383, -1.5616),
    "burundi": CountryInfo("BI", "Burundi", "Africa", -3.3731, 29.9189),
    "cameroon": CountryInfo("CM", "Cameroon", "Africa", 7.3697, 12.3547),
    "central african republic": CountryInfo("CF", "Central African Republic", "Africa", 6.6111, 20.9394),
    "chad": CountryInfo("TD", "Chad", "Africa", 15.4542, 18.7322),
    "congo": CountryInfo("CG", "Congo", "Africa", -0.228, 15.8277),
    "democratic republic of the congo": CountryInfo("CD", "Democratic Republic of the Congo", "Africa", -4.0383, 21.7587),
    "drc": CountryInfo("CD", "Democratic Republic of the Congo", "Africa", -4.0383, 21.7587),
    "djibouti": CountryInfo("DJ", "Djibouti", "Africa", 11.8251, 42.5903),
    "egypt": CountryInfo("EG", "Egypt", "Africa", 26.8206, 30.8025),
    "equatorial guinea": CountryInfo("GQ", "Equatorial Guinea", "Africa", 1.6508, 10.2679),
    "eritrea": CountryInfo("ER", "Eritrea", "Africa", 15.1794, 39.7823),
    "eswatini": CountryInfo("SZ", "Eswatini", "Africa", -26.5225, 31.4659),
    "ethiopia": CountryInfo("ET", "Ethiopia", "Africa", 9.145, 40.4897),
    "gabon": CountryInfo("GA", "Gabon", "Africa", -0.8037, 11.6094),
    "gambia": CountryInfo("GM", "Gambia", "Africa", 13.4432, -15.3101),
    "ghana": CountryInfo("GH", "Ghana", "Africa", 7.9465, -1.0232),
    "guinea": CountryInfo("GN", "Guinea", "Africa", 9.9456, -9.6966),
    "guinea-bissau": CountryInfo("GW", "Guinea-Bissau", "Africa", 11.8037, -15.1804),
    "ivory coast": CountryInfo("CI", "Ivory Coast", "Africa", 7.54, -5.5471),
    "côte d'ivoire": CountryInfo("CI", "Côte d'Ivoire", "Africa", 7.54, -5.5471),
    "kenya": CountryInfo("KE", "Kenya", "Africa", -0.0236, 37.9062),
    "lesotho": CountryInfo("LS", "Lesotho", "Africa", -29.61, 28.2336),
    "liberia": CountryInfo("LR", "Liberia", "Africa", 6.4281, -9.4295),
    "libya": CountryInfo("LY", "Libya", "Africa", 26.3351, 17.2283),
    "madagascar": CountryInfo("MG", "Madagascar", "Africa", -18.7669, 46.8691),
    "malawi": CountryInfo("MW", "Malawi", "Africa", -13.2543, 34.3015),
    "mali": CountryInfo("ML", "Mali", "Africa", 17.5707, -3.9962),
    "mauritania": CountryInfo("MR", "Mauritania", "Africa", 21.0079, -10.9408),
    "mauritius": CountryInfo("MU", "Mauritius", "Africa", -20.3484, 57.5522),
    "morocco": CountryInfo("MA", "Morocco", "Africa", 31.7917, -7.0926),
    "mozambique": CountryInfo("MZ", "Mozambique", "Africa", -18.6657, 35.5296),
    "namibia": CountryInfo("NA", "Namibia", "Africa", -22.9576, 18.4904),
    "niger": CountryInfo("NE", "Niger", "Africa", 17.6078, 8.0817),
    "nigeria": CountryInfo("NG", "Nigeria", "Africa", 9.082, 8.6753),
    "rwanda": CountryInfo("RW", "Rwanda", "Africa", -1.9403, 29.8739),
    "senegal": CountryInfo("SN", "Senegal", "Africa", 14.4974, -14.4524),
    "sierra leone": CountryInfo("SL", "Sierra Leone", "Africa", 8.4606, -11.7799),
    "somalia": CountryInfo("SO", "Somalia", "Africa", 5.1521, 46.1996),
    "south africa": CountryInfo("ZA", "South Africa", "Africa", -30.5595, 22.9375),
    "south sudan": CountryInfo("SS", "South Sudan", "Africa", 6.877, 31.307),
    "sudan": CountryInfo("SD", "Sudan", "Africa", 12.8628, 30.2176),
    "tanzania": CountryInfo("TZ", "Tanzania", "Africa", -6.369, 34.8888),
    "togo": CountryInfo("TG", "Togo", "Africa", 8.6195, 0.8248),
    "tunisia": CountryInfo("TN", "Tunisia", "Africa", 33.8869, 9.5375),
    "uganda": CountryInfo("UG", "Uganda", "Africa", 1.3733, 32.2903),
    "zambia": CountryInfo("ZM", "Zambia", "Africa", -13.1339, 27.8493),
    "zimbabwe": CountryInfo("ZW", "Zimbabwe", "Africa", -19.0154, 29.1549),

    # Asia
    "afghanistan": CountryInfo("AF", "Afghanistan", "Asia", 33.9391, 67.71),
    "armenia": CountryInfo("AM", "Armenia", "Asia", 40.0691, 45.0382),
    "azerbaijan": CountryInfo("AZ", "Azerbaijan", "Asia", 40.1431, 47.5769),
    "bahrain": CountryInfo("BH", "Bahrain", "Asia", 25.9304, 50.6378),
    "bangladesh": CountryInfo("BD", "Bangladesh", "Asia", 23.685, 90.3563),
    "bhutan": CountryInfo("BT", "Bhutan", "Asia", 27.5142, 90.4336),
    "brunei": CountryInfo("BN", "Brunei", "Asia", 4.5353, 114.7277),
    "cambodia": CountryInfo("KH", "Cambodia", "Asia", 12.5657, 104.991),
    "china": CountryInfo("CN", "China", "Asia", 35.8617, 104.1954),
    "georgia": CountryInfo("GE", "Georgia", "Asia", 42.3154, 43.3569),
    "india": CountryInfo("IN", "India", "Asia", 20.5937, 78.9629),
    "indonesia": CountryInfo("ID", "Indonesia", "Asia", -0.7893, 113.9213),
    "iran": CountryInfo("IR", "Iran", "Asia", 32.4279, 53.688),
    "iraq": CountryInfo("IQ", "Iraq", "Asia", 33.2232, 43.6793),
    "israel": CountryInfo("IL", "Israel", "Asia", 31.0461, 34.8516),
    "japan": CountryInfo("JP", "Japan", "Asia", 36.2048, 138.2529),
    "jordan": CountryInfo("JO", "Jordan", "Asia", 30.5852, 36.2384),
    "kazakhstan": CountryInfo("KZ", "Kazakhstan", "Asia", 48.0196, 66.9237),
    "kuwait": CountryInfo("KW", "Kuwait", "Asia", 29.3117, 47.4818),
    "kyrgyzstan": CountryInfo("KG", "Kyrgyzstan", "Asia", 41.2044, 74.7661),
    "laos": CountryInfo("LA", "Laos", "Asia", 19.8563, 102.4955),
    "lebanon": CountryInfo("LB", "Lebanon", "Asia", 33.8547, 35.8623),
    "malaysia": CountryInfo("MY", "Malaysia", "Asia", 4.2105, 101.9758),
    "maldives": CountryInfo("MV", "Maldives", "Asia", 3.2028, 73.2207),
    "mongolia": CountryInfo("MN", "Mongolia", "Asia", 46.8625, 103.8467),
    "myanmar": CountryInfo("MM", "Myanmar", "Asia", 21.9162, 95.956),
    "nepal": CountryInfo("NP", "Nepal", "Asia", 28.3949, 84.124),
    "north korea": CountryInfo("KP", "North Korea", "Asia", 40.3399, 127.5101),
    "oman": CountryInfo("OM", "Oman", "Asia", 21.4735, 55.9754),
    "pakistan": CountryInfo("PK", "Pakistan", "Asia", 30.3753, 69.3451),
    "palestine": CountryInfo("PS", "Palestine", "Asia", 31.9522, 35.2332),
    "philippines": CountryInfo("PH", "Philippines", "Asia", 12.8797, 121.774),
    "qatar": CountryInfo("QA", "Qatar", "Asia", 25.3548, 51.1839),
    "saudi arabia": CountryInfo("SA", "Saudi Arabia", "Asia", 23.8859, 45.0792),
    "singapore": CountryInfo("SG", "Singapore", "Asia", 1.3521, 103.8198),
    "south korea": CountryInfo("KR", "South Korea", "Asia", 35.9078, 127.7669),
    "korea": CountryInfo("KR", "South Korea", "Asia", 35.9078, 127.7669),
    "sri lanka": CountryInfo("LK", "Sri Lanka", "Asia", 7.8731, 80.7718),
    "syria": CountryInfo("SY", "Syria", "Asia", 34.8021, 38.9968),
    "taiwan": CountryInfo("TW", "Taiwan", "Asia", 23.6978, 120.9605),
    "tajikistan": CountryInfo("TJ", "Tajikistan", "Asia", 38.861, 71.2761),
    "thailand": CountryInfo("TH", "Thailand", "Asia", 15.87, 100.9925),
    "timor-leste": CountryInfo("TL", "Timor-Leste", "Asia", -8.8742, 125.7275),
    "turkey": CountryInfo("TR", "Turkey", "Asia", 38.9637, 35.2433),
    "turkmenistan": CountryInfo("TM", "Turkmenistan", "Asia", 38.9697, 59.5563),
    "united arab emirates": CountryInfo("AE", "United Arab Emirates", "Asia", 23.4241, 53.8478),
    "uae": CountryInfo("AE", "United Arab Emirates", "Asia", 23.4241, 53.8478),
    "uzbekistan": CountryInfo("UZ", "Uzbekistan", "Asia", 41.3775, 64.5853),
    "vietnam": CountryInfo("VN", "Vietnam", "Asia", 14.0583, 108.2772),
    "yemen": CountryInfo("YE", "Yemen", "Asia", 15.5527, 48.5164),

    # Europe
    "albania": CountryInfo("AL", "Albania", "Europe", 41.1533, 20.1683),
    "andorra": CountryInfo("AD", "Andorra", "Europe", 42.5063, 1.5218),
    "austria": CountryInfo("AT", "Austria", "Europe", 47.5162, 14.5501),
    "belarus": CountryInfo("BY", "Belarus", "Europe", 53.7098, 27.9534),
    "belgium": CountryInfo("BE", "Belgium", "Europe", 50.5039, 4.4699),
    "bosnia and herzegovina": CountryInfo("BA", "Bosnia and Herzegovina", "Europe", 43.9159, 17.6791),
    "bulgaria": CountryInfo("BG", "Bulgaria", "Europe", 42.7339, 25.4858),
    "croatia": CountryInfo("HR", "Croatia", "Europe", 45.1, 15.2),
    "cyprus": CountryInfo("CY", "Cyprus", "Europe", 35.1264, 33.4299),
    "czech republic": CountryInfo("CZ", "Czech Republic", "Europe", 49.8175, 15.473),
    "czechia": CountryInfo("CZ", "Czechia", "Europe", 49.8175, 15.473),
    "denmark": CountryInfo("DK", "Denmark", "Europe", 56.2639, 9.5018),
    "estonia": CountryInfo("EE", "Estonia", "Europe", 58.5953, 25.0136),
    "finland": CountryInfo("FI", "Finland", "Europe", 61.9241, 25.7482),
    "france": CountryInfo("FR", "France", "Europe", 46.2276, 2.2137),
    "germany": CountryInfo("DE", "Germany", "Europe", 51.1657, 10.4515),
    "greece": CountryInfo("GR", "Greece", "Europe", 39.0742, 21.8243),
    "hungary": CountryInfo("HU", "Hungary", "Europe", 47.1625, 19.5033),
    "iceland": CountryInfo("IS", "Iceland", "Europe", 64.9631, -19.0208),
    "ireland": CountryInfo("IE", "Ireland", "Europe", 53.1424, -7.6921),
    "italy": CountryInfo("IT", "Italy", "Europe", 41.8719, 12.5674),
    "kosovo": CountryInfo("XK", "Kosovo", "Europe", 42.6026, 20.903),
    "latvia": CountryInfo("LV", "Latvia", "Europe", 56.8796, 24.6032),
    "liechtenstein": CountryInfo("LI", "Liechtenstein", "Europe", 47.166, 9.5554),
    "lithuania": CountryInfo("LT", "Lithuania", "Europe", 55.1694, 23.8813),
    "luxembourg": CountryInfo("LU", "Luxembourg", "Europe", 49.8153, 6.1296),
    "malta": CountryInfo("MT", "Malta", "Europe", 35.9375, 14.3754),
    "moldova": CountryInfo("MD", "Moldova", "Europe", 47.4116, 28.3699),
    "monaco": CountryInfo("MC", "Monaco", "Europe", 43.7384, 7.4246),
    "montenegro": CountryInfo("ME", "Montenegro", "Europe", 42.7087, 19.3744),
    "netherlands": CountryInfo("NL", "Netherlands", "Europe", 52.1326, 5.2913),
    "north macedonia": CountryInfo("MK", "North Macedonia", "Europe", 41.5124, 21.7453),
    "norway": CountryInfo("NO", "Norway", "Europe", 60.472, 8.4689),
    "poland": CountryInfo("PL", "Poland", "Europe", 51.9194, 19.1451),
    "portugal": CountryInfo("PT", "Portugal", "Europe", 39.3999, -8.2245),
    "romania": CountryInfo("RO", "Romania", "Europe", 45.9432, 24.9668),
    "russia": CountryInfo("RU", "Russia", "Europe", 61.524, 105.3188),
    "san marino": CountryInfo("SM", "San Marino", "Europe", 43.9424, 12.4578),
    "serbia": CountryInfo("RS", "Serbia", "Europe", 44.0165, 21.0059),
    "slovakia": CountryInfo("SK", "Slovakia", "Europe", 48.669, 19.699),
    "slovenia": CountryInfo("SI", "Slovenia", "Europe", 46.1512, 14.9955),
    "spain": CountryInfo("ES", "Spain", "Europe", 40.4637, -3.7492),
    "sweden": CountryInfo("SE", "Sweden", "Europe", 60.1282, 18.6435),
    "switzerland": CountryInfo("CH", "Switzerland", "Europe", 46.8182, 8.2275),
    "ukraine": CountryInfo("UA", "Ukraine", "Europe", 48.3794, 31.1656),
    "united kingdom": CountryInfo("GB", "United Kingdom", "Europe", 55.3781, -3.436),
    "uk": CountryInfo("GB", "United Kingdom", "Europe", 55.3781, -3.436),
    "vatican city": CountryInfo("VA", "Vatican City", "Europe", 41.9029, 12.4534),

    # North America
    "antigua and barbuda": CountryInfo("AG", "Antigua and Barbuda", "North America", 17.0608, -61.7964),
    "bahamas": CountryInfo("BS", "Bahamas", "North America", 25.0343, -77.3963),
    "barbados": CountryInfo("BB", "Barbados", "North America", 13.1939, -59.5432),
    "belize": CountryInfo("BZ", "Belize", "North America", 17.1899, -88.4976),
    "canada": CountryInfo("CA", "Canada", "North America", 56.1304, -106.3468),
    "costa rica": CountryInfo("CR", "Costa Rica", "North America", 9.7489, -83.7534),
    "cuba": CountryInfo("CU", "Cuba", "North America", 21.5218, -77.7812),
    "dominica": CountryInfo("DM", "Dominica", "North America", 15.415, -61.371),
    "dominican republic": CountryInfo("DO", "Dominican Republic", "North America", 18.7357, -70.1627),
    "el salvador": CountryInfo("SV", "El Salvador", "North America", 13.7942, -88.8965),
    "grenada": CountryInfo("GD", "Grenada", "North America", 12.2628, -61.6043),
    "guatemala": CountryInfo("GT", "Guatemala", "North America", 15.7835, -90.2308),
    "haiti": CountryInfo("HT", "Haiti", "North America", 18.9712, -72.2852),
    "honduras": CountryInfo("HN", "Honduras", "North America", 15.2, -86.2419),
    "jamaica": CountryInfo("JM", "Jamaica", "North America", 18.1096, -77.2975),
    "mexico": CountryInfo("MX", "Mexico", "North America", 23.6345, -102.5528),
    "nicaragua": CountryInfo("NI", "Nicaragua", "North America", 12.8654, -85.2072),
    "panama": CountryInfo("PA", "Panama", "North America", 8.538, -80.7821),
    "puerto rico": CountryInfo("PR", "Puerto Rico", "North America", 18.2208, -66.5901),
    "saint kitts and nevis": CountryInfo("KN", "Saint Kitts and Nevis", "North America", 17.3578, -62.783),
    "saint lucia": CountryInfo("LC", "Saint Lucia", "North America", 13.9094, -60.9789),
    "saint vincent and the grenadines": CountryInfo("VC", "Saint Vincent and the Grenadines", "North America", 12.9843, -61.2872),
    "trinidad and tobago": CountryInfo("TT", "Trinidad and Tobago", "North America", 10.6918, -61.2225),
    "united states": CountryInfo("US", "United States", "North America", 37.0902, -95.7129),
    "usa": CountryInfo("US", "United States", "North America", 37.0902, -95.7129),
    "us": CountryInfo("US", "United States", "North America", 37.0902, -95.7129),
    "america": CountryInfo("US", "United States", "North America", 37.0902, -95.7129),

    # South America
    "argentina": CountryInfo("AR", "Argentina", "South America", -38.4161, -63.6167),
    "bolivia": CountryInfo("BO", "Bolivia", "South America", -16.2902, -63.5887),
    "brazil": CountryInfo("BR", "Brazil", "South America", -14.235, -51.9253),
    "chile": CountryInfo("CL", "Chile", "South America", -35.6751, -71.543),
    "colombia": CountryInfo("CO", "Colombia", "South America", 4.5709, -74.2973),
    "ecuador": CountryInfo("EC", "Ecuador", "South America", -1.8312, -78.1834),
    "guyana": CountryInfo("GY", "Guyana", "South America", 4.8604, -58.9302),
    "paraguay": CountryInfo("PY", "Paraguay", "South America", -23.4425, -58.4438),
    "peru": CountryInfo("PE", "Peru", "South America", -9.19, -75.0152),
    "suriname": CountryInfo("SR", "Suriname", "South America", 3.9193, -56.0278),
    "uruguay": CountryInfo("UY", "Uruguay", "South America", -32.5228, -55.7658),
    "venezuela": CountryInfo("VE", "Venezuela", "South America", 6.4238, -66.5897),

    # Oceania
    "australia": CountryInfo("AU", "Australia", "Oceania", -25.2744, 133.7751),
    "fiji": CountryInfo("FJ", "Fiji", "Oceania", -17.7134, 178.065),
    "kiribati": CountryInfo("KI", "Kiribati", "Oceania", -3.3704, -168.734),
    "marshall islands": CountryInfo("MH", "Marshall Islands", "Oceania", 7.1315, 171.1845),
    "micronesia": CountryInfo("FM", "Micronesia", "Oceania", 7.4256, 150.5508),
    "nauru": CountryInfo("NR", "Nauru", "Oceania", -0.5228, 166.9315),
    "new zealand": CountryInfo("NZ", "New Zealand", "Oceania", -40.9006, 174.886),
    "palau": CountryInfo("PW", "Palau", "Oceania", 7.515, 134.5825),
    "papua new guinea": CountryInfo("PG", "Papua New Guinea", "Oceania", -6.315, 143.9555),
    "samoa": CountryInfo("WS", "Samoa", "Oceania", -13.759, -172.1046),
    "solomon islands": CountryInfo("SB", "Solomon Islands", "Oceania", -9.6457, 160.1562),
    "tonga": CountryInfo("TO", "Tonga", "Oceania", -21.179, -175.1982),
    "tuvalu": CountryInfo("TV", "Tuvalu", "Oceania", -7.1095, 177.6493),
    "vanuatu": CountryInfo("VU", "Vanuatu", "Oceania", -15.3767, 166.9592),
}

# Countries broken out of their continent for finer summaries.
SUB_REGIONS: dict[str, tuple[str, ...]] = {
    "Middle East": (
        "Turkey", "Iran", "Iraq", "Saudi Arabia", "Yemen", "Syria", "Jordan",
        "United Arab Emirates", "Israel", "Lebanon", "Oman", "Kuwait", "Qatar",
        "Bahrain", "Cyprus", "Palestine",
    ),
    "South Asia": (
        "India", "Pakistan", "Bangladesh", "Sri Lanka", "Nepal", "Bhutan",
        "Maldives", "Afghanistan",
    ),
    "East Asia": (
        "China", "Japan", "South Korea", "North Korea", "Taiwan", "Mongolia",
    ),
    "Southeast Asia": (
        "Thailand", "Vietnam", "Indonesia", "Philippines", "Malaysia", "Singapore",
        "Myanmar", "Cambodia", "Laos", "Brunei", "Timor-Leste",
    ),
    "Central Asia": (
        "Kazakhstan", "Uzbekistan", "Turkmenistan", "Kyrgyzstan", "Tajikistan",
    ),
    "Pacific Islands": (
        "Fiji", "Papua New Guinea", "Solomon Islands", "Vanuatu", "New Caledonia",
        "Samoa", "Tonga", "Micronesia", "Marshall Islands", "Palau", "Kiribati",
    ),
}

# Approximate centres of states and regions, keyed by country code.
STATE_CENTRES: dict[str, dict[str, Coordinates]] = {
    "US": {
        "alabama": Coordinates(32.3182, -86.9023),
        "alaska": Coordinates(64.2008, -152.4937),
        "arizona": Coordinates(34.0489, -111.0937),
        "arkansas": Coordinates(34.7465, -92.2896),
        "california": Coordinates(36.7783, -119.4179),
        "colorado": Coordinates(39.5501, -105.7821),
        "connecticut": Coordinates(41.6032, -73.0877),
        "delaware": Coordinates(38.9108, -75.5277),
        "florida": Coordinates(27.6648, -81.5158),
        "georgia": Coordinates(32.1574, -82.9071),
        "hawaii": Coordinates(19.8968, -155.5828),
        "idaho": Coordinates(44.0682, -114.742),
        "illinois": Coordinates(40.6331, -89.3985),
        "indiana": Coordinates(40.2672, -86.1349),
        "iowa": Coordinates(41.878, -93.0977),
        "kansas": Coordinates(39.0119, -98.4842),
        "kentucky": Coordinates(37.8393, -84.27),
        "louisiana": Coordinates(31.2448, -92.1450),
        "maine": Coordinates(45.2538, -69.4455),
        "maryland": Coordinates(39.0458, -76.6413),
        "massachusetts": Coordinates(42.4072, -71.3824),
        "michigan": Coordinates(44.3148, -85.6024),
        "minnesota": Coordinates(46.7296, -94.6859),
        "mississippi": Coordinates(32.3547, -89.3985),
        "missouri": Coordinates(37.9643, -91.8318),
        "montana": Coordinates(46.8797, -110.3626),
        "nebraska": Coordinates(41.4925, -99.9018),
        "nevada": Coordinates(38.8026, -116.4194),
        "new hampshire": Coordinates(43.1939, -71.5724),
        "new jersey": Coordinates(40.0583, -74.4057),
        "new mexico": Coordinates(34.5199, -105.8701),
        "new york": Coordinates(43.2994, -74.2179),
        "north carolina": Coordinates(35.7596, -79.0193),
        "north dakota": Coordinates(47.5515, -101.002),
        "ohio": Coordinates(40.4173, -82.9071),
        "oklahoma": Coordinates(35.0078, -97.0929),
        "oregon": Coordinates(43.8041, -120.5542),
        "pennsylvania": Coordinates(41.2033, -77.1945),
        "rhode island": Coordinates(41.5801, -71.4774),
        "south carolina": Coordinates(33.8361, -81.1637),
        "south dakota": Coordinates(43.9695, -99.9018),
        "tennessee": Coordinates(35.5175, -86.5804),
        "texas": Coordinates(31.9686, -99.9018),
        "utah": Coordinates(39.3209, -111.0937),
        "vermont": Coordinates(44.5588, -72.5778),
        "virginia": Coordinates(37.4316, -78.6569),
        "washington": Coordinates(47.7511, -120.7401),
        "west virginia": Coordinates(38.5976, -80.4549),
        "wisconsin": Coordinates(43.7844, -88.7879),
        "wyoming": Coordinates(43.0759, -107.2903),
    },
    "IT": {
        "lombardy": Coordinates(45.4791, 9.8452),
        "lazio": Coordinates(41.8967, 12.4822),
        "tuscany": Coordinates(43.4148, 11.2194),
        "veneto": Coordinates(45.4414, 12.3155),
        "piedmont": Coordinates(45.0703, 7.6869),
        "emilia-romagna": Coordinates(44.4938, 11.3426),
        "campania": Coordinates(40.8518, 14.2681),
        "sicily": Coordinates(37.5999, 14.0154),
        "sardinia": Coordinates(40.1209, 9.0129),
        "calabria": Coordinates(38.9060, 16.5943),
        "puglia": Coordinates(41.1257, 16.8667),
    },
    "IN": {
        "delhi": Coordinates(28.7041, 77.1025),
        "maharashtra": Coordinates(19.7515, 75.7139),
        "karnataka": Coordinates(15.3173, 75.7139),
        "tamil nadu": Coordinates(11.1271, 78.6569),
        "kerala": Coordinates(10.8505, 76.2711),
        "west bengal": Coordinates(22.9868, 87.8550),
        "uttar pradesh": Coordinates(26.8467, 80.9462),
        "rajasthan": Coordinates(27.0238, 74.2179),
        "gujarat": Coordinates(22.2587, 71.1924),
        "punjab": Coordinates(31.1471, 75.3412),
    },
    "MX": {
        "mexico city": Coordinates(19.4326, -99.1332),
        "jalisco": Coordinates(20.6595, -103.3494),
        "nuevo león": Coordinates(25.5922, -99.9962),
        "yucatán": Coordinates(20.7099, -89.0943),
        "oaxaca": Coordinates(17.0732, -96.7266),
        "puebla": Coordinates(19.0414, -98.2063),
        "veracruz": Coordinates(19.1738, -96.1342),
        "guanajuato": Coordinates(21.0190, -101.2574),
    },
    "FR": {
        "île-de-france": Coordinates(48.8499, 2.6370),
        "provence": Coordinates(43.9352, 6.0679),
        "normandy": Coordinates(49.1829, -0.3707),
        "brittany": Coordinates(48.2020, -2.9326),
        "bordeaux": Coordinates(44.8378, -0.5792),
        "lyon": Coordinates(45.7640, 4.8357),
    },
}


def country_info(name: str) -> CountryInfo | None:
    return COUNTRIES.get(name.strip().lower())


def country_info_with_fallback(name: str) -> CountryInfo:
    """Look up ``name``; unknown countries keep their name and sit at 0,0."""
    info = country_info(name)
    if info is not None:
        return info
    return CountryInfo(UNKNOWN_COUNTRY_CODE, name, UNKNOWN_CONTINENT, 0.0, 0.0)


def sub_region_of(country_name: str) -> str | None:
    for region, countries in SUB_REGIONS.items():
        if country_name in countries:
            return region
    return None


def state_centre(country_code: str, state_name: str) -> Coordinates | None:
    return STATE_CENTRES.get(country_code.upper(), {}).get(state_name.strip().lower())


def country_by_code(code: str) -> CountryInfo | None:
    wanted = code.strip().upper()
    return next((info for info in COUNTRIES.values() if info.code == wanted), None)


def resolve_country(value: str) -> CountryInfo:
    """Accept a country name or a two-letter code."""
    info = country_info(value)
    if info is None and len(value.strip()) == 2:
        info = country_by_code(value)
    return info if info is not None else country_info_with_fallback(value)
