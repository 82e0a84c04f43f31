"""Static country -> city catalog used by the country/city location mode."""
from typing import Dict, List, Optional

# Country name -> ISO 3166-1 alpha-2 region code (drives the flag emoji)
COUNTRY_CODES: Dict[str, str] = {
    "Australia": "AU", "New Zealand": "NZ", "USA": "US", "UK": "GB", "Canada": "CA",
    "Germany": "DE", "France": "FR", "Japan": "JP", "Spain": "ES", "Italy": "IT",
    "Netherlands": "NL", "Switzerland": "CH", "Norway": "NO", "Sweden": "SE", "Denmark": "DK",
    "Ireland": "IE", "South Korea": "KR", "China": "CN", "Singapore": "SG", "Thailand": "TH",
    "India": "IN", "UAE": "AE", "South Africa": "ZA", "Brazil": "BR", "Argentina": "AR",
    "Mexico": "MX", "Austria": "AT", "Belgium": "BE", "Poland": "PL", "Czech Republic": "CZ",
    "Portugal": "PT", "Greece": "GR", "Turkey": "TR", "Russia": "RU", "Finland": "FI",
    "Iceland": "IS", "Croatia": "HR", "Hungary": "HU", "Romania": "RO", "Israel": "IL",
    "Egypt": "EG", "Morocco": "MA", "Kenya": "KE", "Nigeria": "NG", "Vietnam": "VN",
    "Indonesia": "ID", "Malaysia": "MY", "Philippines": "PH", "Taiwan": "TW", "Chile": "CL",
    "Peru": "PE", "Colombia": "CO", "Costa Rica": "CR", "Panama": "PA", "Qatar": "QA",
    "Saudi Arabia": "SA", "Pakistan": "PK", "Bangladesh": "BD", "Sri Lanka": "LK",
    "Algeria": "DZ", "Tunisia": "TN", "Libya": "LY", "Ethiopia": "ET", "Tanzania": "TZ",
    "Uganda": "UG", "Ghana": "GH", "Senegal": "SN", "Ivory Coast": "CI", "Zimbabwe": "ZW",
    "Zambia": "ZM", "Botswana": "BW", "Namibia": "NA", "Mozambique": "MZ", "Madagascar": "MG",
    "Mauritius": "MU", "Seychelles": "SC", "Réunion": "RE", "Antarctica": "AQ",
    "Greenland": "GL", "Svalbard": "SJ", "Faroe Islands": "FO", "Jordan": "JO",
    "Lebanon": "LB", "Oman": "OM", "Kuwait": "KW", "Bahrain": "BH", "Azerbaijan": "AZ",
    "Kazakhstan": "KZ", "Uzbekistan": "UZ", "Mongolia": "MN", "Nepal": "NP", "Bhutan": "BT",
    "Myanmar": "MM", "Cambodia": "KH", "Laos": "LA", "Fiji": "FJ", "Papua New Guinea": "PG",
    "New Caledonia": "NC", "French Polynesia": "PF", "Guam": "GU", "Samoa": "WS",
    "Tonga": "TO", "Maldives": "MV", "Jamaica": "JM", "Barbados": "BB",
    "Trinidad and Tobago": "TT", "Bahamas": "BS", "Cayman Islands": "KY", "Bermuda": "BM",
    "Aruba": "AW", "Curaçao": "CW", "Ecuador": "EC", "Bolivia": "BO", "Paraguay": "PY",
    "Uruguay": "UY", "Venezuela": "VE", "Guyana": "GY", "Suriname": "SR",
    "French Guiana": "GF",
}

CITY_LIST: Dict[str, List[str]] = {
    "Australia": ["Adelaide", "Melbourne", "Sydney", "Perth", "Brisbane", "Hobart", "Darwin", "Canberra", "Gold Coast", "Newcastle", "Wollongong", "Cairns", "Townsville", "Geelong", "Launceston", "Albury", "Ballarat", "Bendigo", "Mackay", "Rockhampton"],
    "New Zealand": ["Auckland", "Wellington", "Christchurch", "Hamilton", "Tauranga", "Dunedin", "Queenstown", "Rotorua", "Napier", "Nelson", "Palmerston North", "Invercargill"],
    "USA": ["New York", "Los Angeles", "Chicago", "San Francisco", "Seattle", "Miami", "Houston", "Dallas", "Boston", "Denver", "Atlanta", "Phoenix", "Philadelphia", "Portland", "Austin", "Las Vegas", "San Diego", "San Jose", "Detroit", "Minneapolis", "Tampa", "Orlando", "Charlotte", "Nashville", "Salt Lake City", "Honolulu", "Anchorage"],
    "UK": ["London", "Manchester", "Liverpool", "Birmingham", "Edinburgh", "Glasgow", "Bristol", "Leeds", "Sheffield", "Cardiff", "Belfast", "Newcastle", "Nottingham", "Southampton", "Leicester", "Brighton", "Aberdeen", "Cambridge", "Oxford", "York", "Norwich"],
    "Canada": ["Toronto", "Vancouver", "Montreal", "Calgary", "Ottawa", "Edmonton", "Winnipeg", "Quebec City", "Halifax", "Victoria", "Saskatoon", "Regina", "Kelowna", "Thunder Bay", "Whitehorse", "Yellowknife"],
    "Germany": ["Berlin", "Hamburg", "Munich", "Frankfurt", "Cologne", "Stuttgart", "Düsseldorf", "Dortmund", "Leipzig", "Dresden", "Nuremberg", "Hanover", "Bremen", "Heidelberg", "Freiburg"],
    "France": ["Paris", "Lyon", "Marseille", "Nice", "Bordeaux", "Toulouse", "Strasbourg", "Nantes", "Lille", "Rennes", "Grenoble", "Montpellier", "Cannes", "Biarritz", "Chamonix"],
    "Japan": ["Tokyo", "Osaka", "Kyoto", "Nagoya", "Sapporo", "Fukuoka", "Yokohama", "Kobe", "Hiroshima", "Sendai", "Nara", "Okinawa", "Kamakura", "Takayama"],
    "Spain": ["Madrid", "Barcelona", "Valencia", "Seville", "Bilbao", "Málaga", "Granada", "Alicante", "Zaragoza", "Palma", "San Sebastian", "Córdoba", "Toledo", "Salamanca"],
    "Italy": ["Rome", "Milan", "Naples", "Turin", "Florence", "Venice", "Bologna", "Palermo", "Genoa", "Verona", "Pisa", "Siena", "Como", "Rimini", "Sorrento"],
    "Netherlands": ["Amsterdam", "Rotterdam", "The Hague", "Utrecht", "Eindhoven", "Groningen", "Maastricht", "Haarlem", "Leiden", "Delft"],
    "Switzerland": ["Zurich", "Geneva", "Basel", "Bern", "Lausanne", "Lucerne", "Interlaken", "Zermatt", "St. Moritz", "Lugano"],
    "Norway": ["Oslo", "Bergen", "Trondheim", "Stavanger", "Tromsø", "Kristiansand", "Ålesund", "Bodø", "Drammen"],
    "Sweden": ["Stockholm", "Gothenburg", "Malmö", "Uppsala", "Västerås", "Örebro", "Lund", "Umeå", "Helsingborg"],
    "Denmark": ["Copenhagen", "Aarhus", "Odense", "Aalborg", "Esbjerg", "Roskilde", "Kolding"],
    "Ireland": ["Dublin", "Cork", "Galway", "Limerick", "Waterford", "Killarney", "Kilkenny", "Derry"],
    "South Korea": ["Seoul", "Busan", "Incheon", "Daegu", "Daejeon", "Gwangju", "Ulsan", "Jeju", "Suwon"],
    "China": ["Beijing", "Shanghai", "Guangzhou", "Shenzhen", "Chengdu", "Hong Kong", "Hangzhou", "Xi'an", "Wuhan", "Chongqing", "Tianjin", "Nanjing", "Suzhou", "Macau"],
    "Singapore": ["Singapore"],
    "Thailand": ["Bangkok", "Chiang Mai", "Phuket", "Pattaya", "Krabi", "Koh Samui", "Hua Hin", "Ayutthaya"],
    "India": ["Mumbai", "Delhi", "Bangalore", "Hyderabad", "Chennai", "Kolkata", "Pune", "Ahmedabad", "Jaipur", "Goa", "Kochi", "Chandigarh"],
    "UAE": ["Dubai", "Abu Dhabi", "Sharjah", "Ajman", "Ras Al Khaimah", "Fujairah"],
    "South Africa": ["Cape Town", "Johannesburg", "Durban", "Pretoria", "Port Elizabeth", "Bloemfontein", "Kimberley", "Knysna"],
    "Brazil": ["São Paulo", "Rio de Janeiro", "Brasília", "Salvador", "Fortaleza", "Belo Horizonte", "Manaus", "Curitiba", "Porto Alegre", "Recife"],
    "Argentina": ["Buenos Aires", "Córdoba", "Rosario", "Mendoza", "Mar del Plata", "Salta", "Bariloche", "Ushuaia"],
    "Mexico": ["Mexico City", "Guadalajara", "Monterrey", "Cancún", "Tijuana", "Puebla", "Playa del Carmen", "Puerto Vallarta", "Oaxaca", "Mérida"],
    "Austria": ["Vienna", "Salzburg", "Innsbruck", "Graz", "Linz", "Hallstatt"],
    "Belgium": ["Brussels", "Antwerp", "Bruges", "Ghent", "Leuven", "Liège"],
    "Poland": ["Warsaw", "Kraków", "Gdańsk", "Wrocław", "Poznań", "Łódź"],
    "Czech Republic": ["Prague", "Brno", "Ostrava", "Plzeň", "Karlovy Vary"],
    "Portugal": ["Lisbon", "Porto", "Faro", "Coimbra", "Madeira", "Azores"],
    "Greece": ["Athens", "Thessaloniki", "Santorini", "Mykonos", "Crete", "Rhodes"],
    "Turkey": ["Istanbul", "Ankara", "Izmir", "Antalya", "Bodrum", "Cappadocia"],
    "Russia": ["Moscow", "St. Petersburg", "Vladivostok", "Sochi", "Yekaterinburg", "Kazan"],
    "Finland": ["Helsinki", "Tampere", "Turku", "Oulu", "Rovaniemi", "Espoo"],
    "Iceland": ["Reykjavik", "Akureyri", "Keflavik", "Vik"],
    "Croatia": ["Zagreb", "Split", "Dubrovnik", "Pula", "Zadar"],
    "Hungary": ["Budapest", "Debrecen", "Szeged", "Pécs"],
    "Romania": ["Bucharest", "Cluj-Napoca", "Timișoara", "Brașov"],
    "Israel": ["Tel Aviv", "Jerusalem", "Haifa", "Eilat"],
    "Egypt": ["Cairo", "Alexandria", "Luxor", "Aswan", "Sharm el-Sheikh"],
    "Morocco": ["Marrakech", "Casablanca", "Fez", "Rabat", "Tangier"],
    "Kenya": ["Nairobi", "Mombasa", "Kisumu", "Nakuru"],
    "Nigeria": ["Lagos", "Abuja", "Kano", "Ibadan", "Port Harcourt"],
    "Vietnam": ["Hanoi", "Ho Chi Minh City", "Da Nang", "Hoi An", "Nha Trang"],
    "Indonesia": ["Jakarta", "Bali", "Surabaya", "Bandung", "Yogyakarta"],
    "Malaysia": ["Kuala Lumpur", "Penang", "Johor Bahru", "Malacca", "Langkawi"],
    "Philippines": ["Manila", "Cebu", "Davao", "Boracay", "Palawan"],
    "Taiwan": ["Taipei", "Kaohsiung", "Taichung", "Tainan", "Hualien"],
    "Chile": ["Santiago", "Valparaíso", "Viña del Mar", "Punta Arenas", "Atacama"],
    "Peru": ["Lima", "Cusco", "Arequipa", "Machu Picchu"],
    "Colombia": ["Bogotá", "Medellín", "Cartagena", "Cali", "Barranquilla"],
    "Costa Rica": ["San José", "Tamarindo", "Monteverde", "Puerto Viejo"],
    "Panama": ["Panama City", "Bocas del Toro", "Boquete"],
    "Qatar": ["Doha", "Al Wakrah"],
    "Saudi Arabia": ["Riyadh", "Jeddah", "Mecca", "Medina"],
    "Pakistan": ["Karachi", "Lahore", "Islamabad", "Peshawar"],
    "Bangladesh": ["Dhaka", "Chittagong", "Sylhet"],
    "Sri Lanka": ["Colombo", "Kandy", "Galle", "Jaffna"],
    "Algeria": ["Algiers", "Oran", "Constantine", "Annaba"],
    "Tunisia": ["Tunis", "Sfax", "Sousse", "Bizerte"],
    "Libya": ["Tripoli", "Benghazi", "Misrata"],
    "Ethiopia": ["Addis Ababa", "Dire Dawa", "Mekelle", "Bahir Dar"],
    "Tanzania": ["Dar es Salaam", "Dodoma", "Arusha", "Mwanza", "Zanzibar"],
    "Uganda": ["Kampala", "Entebbe", "Jinja", "Mbarara"],
    "Ghana": ["Accra", "Kumasi", "Tamale", "Cape Coast"],
    "Senegal": ["Dakar", "Thiès", "Saint-Louis", "Touba"],
    "Ivory Coast": ["Abidjan", "Yamoussoukro", "Bouaké", "San-Pédro"],
    "Zimbabwe": ["Harare", "Bulawayo", "Mutare", "Gweru"],
    "Zambia": ["Lusaka", "Kitwe", "Ndola", "Livingstone"],
    "Botswana": ["Gaborone", "Francistown", "Maun", "Kasane"],
    "Namibia": ["Windhoek", "Swakopmund", "Walvis Bay", "Oshakati"],
    "Mozambique": ["Maputo", "Beira", "Nampula", "Matola"],
    "Madagascar": ["Antananarivo", "Toamasina", "Antsirabe", "Mahajanga"],
    "Mauritius": ["Port Louis", "Curepipe", "Quatre Bornes", "Flic en Flac"],
    "Seychelles": ["Victoria", "Anse Royale", "Beau Vallon"],
    "Réunion": ["Saint-Denis", "Saint-Paul", "Saint-Pierre", "Le Tampon"],
    "Antarctica": ["McMurdo Station", "Palmer Station", "Rothera Station", "Casey Station", "Davis Station", "Mawson Station", "Scott Base", "Vostok Station"],
    "Greenland": ["Nuuk", "Ilulissat", "Sisimiut", "Qaqortoq", "Kangerlussuaq"],
    "Svalbard": ["Longyearbyen", "Ny-Ålesund", "Barentsburg"],
    "Faroe Islands": ["Tórshavn", "Klaksvík", "Runavík"],
    "Jordan": ["Amman", "Petra", "Aqaba", "Jerash", "Dead Sea"],
    "Lebanon": ["Beirut", "Tripoli", "Sidon", "Byblos"],
    "Oman": ["Muscat", "Salalah", "Sohar", "Nizwa"],
    "Kuwait": ["Kuwait City", "Hawally", "Salmiya", "Jahra"],
    "Bahrain": ["Manama", "Muharraq", "Riffa", "Hamad Town"],
    "Azerbaijan": ["Baku", "Ganja", "Sumqayit", "Lankaran"],
    "Kazakhstan": ["Almaty", "Nur-Sultan", "Shymkent", "Karaganda"],
    "Uzbekistan": ["Tashkent", "Samarkand", "Bukhara", "Khiva"],
    "Mongolia": ["Ulaanbaatar", "Erdenet", "Darkhan", "Choir"],
    "Nepal": ["Kathmandu", "Pokhara", "Lalitpur", "Bhaktapur"],
    "Bhutan": ["Thimphu", "Paro", "Punakha", "Phuentsholing"],
    "Myanmar": ["Yangon", "Mandalay", "Naypyidaw", "Bagan"],
    "Cambodia": ["Phnom Penh", "Siem Reap", "Battambang", "Sihanoukville"],
    "Laos": ["Vientiane", "Luang Prabang", "Pakse", "Savannakhet"],
    "Fiji": ["Suva", "Nadi", "Lautoka", "Labasa"],
    "Papua New Guinea": ["Port Moresby", "Lae", "Madang", "Mount Hagen"],
    "New Caledonia": ["Nouméa", "Mont-Dore", "Dumbéa"],
    "French Polynesia": ["Papeete", "Bora Bora", "Moorea", "Tahiti"],
    "Guam": ["Hagåtña", "Dededo", "Tamuning", "Mangilao"],
    "Samoa": ["Apia", "Vaitele", "Faleula"],
    "Tonga": ["Nuku'alofa", "Neiafu", "Haveluloto"],
    "Maldives": ["Malé", "Addu City", "Fuvahmulah"],
    "Jamaica": ["Kingston", "Montego Bay", "Spanish Town", "Ocho Rios"],
    "Barbados": ["Bridgetown", "Speightstown", "Oistins"],
    "Trinidad and Tobago": ["Port of Spain", "San Fernando", "Chaguanas", "Arima"],
    "Bahamas": ["Nassau", "Freeport", "Marsh Harbour"],
    "Cayman Islands": ["George Town", "West Bay", "Bodden Town"],
    "Bermuda": ["Hamilton", "St. George's", "Somerset"],
    "Aruba": ["Oranjestad", "San Nicolaas", "Santa Cruz"],
    "Curaçao": ["Willemstad", "Punda", "Otrobanda"],
    "Ecuador": ["Quito", "Guayaquil", "Cuenca", "Galápagos"],
    "Bolivia": ["La Paz", "Santa Cruz", "Cochabamba", "Sucre"],
    "Paraguay": ["Asunción", "Ciudad del Este", "Encarnación"],
    "Uruguay": ["Montevideo", "Punta del Este", "Colonia", "Salto"],
    "Venezuela": ["Caracas", "Maracaibo", "Valencia", "Barquisimeto"],
    "Guyana": ["Georgetown", "Linden", "New Amsterdam"],
    "Suriname": ["Paramaribo", "Lelydorp", "Nieuw Nickerie"],
    "French Guiana": ["Cayenne", "Saint-Laurent-du-Maroni", "Kourou"],
}

# Regional indicator symbol for "A"
_REGIONAL_INDICATOR_A = 0x1F1E6


def countries() -> List[str]:
    return sorted(CITY_LIST)


def cities_for(country: str) -> List[str]:
    return list(CITY_LIST.get(country, []))


def default_city(country: str) -> Optional[str]:
    """First listed city, selected automatically when the country changes."""
    cities = CITY_LIST.get(country)
    return cities[0] if cities else None


def flag_emoji(country: str) -> str:
    """Flag emoji for a catalog country, or "" when unknown."""
    code = COUNTRY_CODES.get(country)
    if not code:
        return ""
    return "".join(chr(_REGIONAL_INDICATOR_A + ord(c) - ord("A")) for c in code)
