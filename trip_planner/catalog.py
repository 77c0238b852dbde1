"""Static lookup tables backing the template itineraries and nearby recommendations.

Every table is read-only. Lookups that miss fall back to a named default entry:
``"culture"`` for interest tables and ``"new york"`` for city tables.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

DEFAULT_INTEREST = "culture"
DEFAULT_CITY = "new york"
DEFAULT_TRAVEL_STYLE = "cultural"


# ---------------------------------------------------------------------------
# Interest-keyed itinerary templates
# ---------------------------------------------------------------------------

INTEREST_THEMES: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "nature": ("Nature Exploration", "Wildlife & Parks", "Scenic Beauty", "Eco Adventures"),
        "adventure": ("Adventure Day", "Thrill Seeking", "Outdoor Sports", "Extreme Activities"),
        "culture": ("Cultural Immersion", "Heritage Walk", "Local Traditions", "Art & History"),
        "food": ("Food Journey", "Culinary Tour", "Local Cuisine", "Street Food Safari"),
        "nightlife": ("Nightlife Experience", "Evening Entertainment", "City Lights", "Social Scene"),
        "relaxation": ("Relaxation Day", "Wellness & Spa", "Peaceful Retreat", "Leisure Time"),
        "shopping": ("Shopping Tour", "Local Markets", "Souvenir Hunt", "Retail Therapy"),
        "photography": ("Photography Day", "Scenic Shots", "Local Life", "Instagram Spots"),
    }
)

INTEREST_ACTIVITIES: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "nature": ("Morning nature walk", "Visit botanical garden", "Wildlife sanctuary tour", "Sunset photography"),
        "adventure": ("Hiking adventure", "Water sports activities", "Rock climbing", "Zip-lining experience"),
        "culture": ("Museum visit", "Historical site tour", "Cultural performance", "Art gallery exploration"),
        "food": ("Food market tour", "Cooking class", "Local restaurant hopping", "Street food tasting"),
        "nightlife": ("Rooftop bar visit", "Live music venue", "Night market exploration", "Club experience"),
        "relaxation": ("Spa treatment", "Beach relaxation", "Meditation session", "Sunset yoga"),
        "shopping": ("Local market shopping", "Souvenir hunting", "Mall exploration", "Boutique visits"),
        "photography": ("Golden hour shoot", "Street photography", "Architecture tour", "Portrait session"),
    }
)

INTEREST_ATTRACTIONS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "nature": ("National Park", "Nature Reserve", "Botanical Garden", "Scenic Viewpoint"),
        "adventure": ("Adventure Park", "Mountain Peak", "Waterfall", "Adventure Center"),
        "culture": ("Historical Monument", "Museum", "Cultural Center", "Heritage Site"),
        "food": ("Food Market", "Local Restaurant", "Cooking School", "Winery"),
        "nightlife": ("Popular Bar", "Night Club", "Entertainment District", "Live Music Venue"),
        "relaxation": ("Spa Center", "Beach Resort", "Wellness Retreat", "Peaceful Garden"),
        "shopping": ("Shopping Mall", "Local Market", "Boutique District", "Craft Market"),
        "photography": ("Scenic Overlook", "Historic District", "Art Installation", "City Skyline"),
    }
)

DAY_TRAVEL_TIPS: Tuple[str, ...] = (
    "Start early to avoid crowds",
    "Carry water and stay hydrated",
    "Wear comfortable walking shoes",
    "Keep some local currency handy",
)

GENERAL_TIPS: Tuple[str, ...] = (
    "Book accommodations in advance for better rates",
    "Try local street food for authentic and budget-friendly meals",
    "Use public transportation to save on travel costs",
    "Carry a water bottle to stay hydrated",
    "Learn a few basic phrases in the local language",
)

TRAVEL_STYLE_THEMES: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "adventure": ("Adventure Exploration", "Thrill Seeking", "Outdoor Discovery"),
        "cultural": ("Cultural Immersion", "Heritage Discovery", "Local Experience"),
        "relaxation": ("Relaxation & Wellness", "Peaceful Journey", "Serene Exploration"),
        "food": ("Culinary Journey", "Food Discovery", "Gastronomic Adventure"),
    }
)


# ---------------------------------------------------------------------------
# City-keyed tables (matched by substring of the lowercased destination)
# ---------------------------------------------------------------------------

CITY_COORDINATES: Mapping[str, Tuple[float, float]] = MappingProxyType(
    {
        "paris": (48.8566, 2.3522),
        "tokyo": (35.6762, 139.6503),
        "new york": (40.7128, -74.0060),
        "london": (51.5074, -0.1278),
        "dubai": (25.2048, 55.2708),
        "singapore": (1.3521, 103.8198),
        "sydney": (-33.8688, 151.2093),
        "rome": (41.9028, 12.4964),
        "barcelona": (41.3851, 2.1734),
        "amsterdam": (52.3676, 4.9041),
    }
)

# (name, category, price per night INR, rating out of 5, distance km)
CITY_HOTELS: Mapping[str, Tuple[Tuple[str, str, int, float, float], ...]] = MappingProxyType(
    {
        "paris": (
            ("Four Seasons Hotel George V", "luxury", 35000, 4.9, 0.3),
            ("The Peninsula Paris", "luxury", 32000, 4.8, 0.5),
            ("Le Bristol Paris", "luxury", 30000, 4.9, 0.4),
            ("Hotel Le Meurice", "luxury", 28000, 4.8, 0.3),
            ("Hotel Plaza Athénée", "luxury", 26000, 4.8, 0.5),
            ("Shangri-La Hotel Paris", "luxury", 25000, 4.7, 0.6),
            ("Mandarin Oriental Paris", "luxury", 24000, 4.8, 0.7),
            ("Hotel de Crillon", "luxury", 23000, 4.8, 0.4),
            ("The Westin Paris - Vendôme", "mid_range", 12000, 4.3, 0.8),
            ("Pullman Paris Tour Eiffel", "mid_range", 10000, 4.2, 1.0),
            ("Novotel Paris Centre Tour Eiffel", "mid_range", 9000, 4.1, 1.2),
            ("Hotel Mercure Paris Centre Tour Eiffel", "mid_range", 8500, 4.0, 1.4),
            ("Ibis Paris Tour Eiffel", "budget", 4500, 3.8, 1.8),
            ("Hotel Adèle & Jules", "budget", 4000, 4.1, 2.0),
            ("Hotel Le Marais", "budget", 3800, 3.9, 2.5),
            ("Generator Paris", "budget", 3200, 4.0, 2.2),
        ),
        "tokyo": (
            ("Aman Tokyo", "luxury", 45000, 4.9, 0.4),
            ("The Ritz-Carlton Tokyo", "luxury", 42000, 4.9, 0.4),
            ("Mandarin Oriental Tokyo", "luxury", 40000, 4.8, 0.6),
            ("Four Seasons Hotel Tokyo at Otemachi", "luxury", 38000, 4.8, 0.5),
            ("Imperial Hotel Tokyo", "luxury", 35000, 4.7, 0.7),
            ("Park Hyatt Tokyo", "luxury", 32000, 4.8, 0.8),
            ("Hotel Gracery Shinjuku", "mid_range", 9000, 4.2, 1.2),
            ("Shibuya Excel Hotel Tokyu", "mid_range", 8500, 4.1, 1.0),
            ("APA Hotel Shinjuku Kabukicho", "mid_range", 7000, 4.0, 1.8),
            ("Hotel Sunroute Plaza Shinjuku", "mid_range", 6500, 3.8, 2.2),
            ("Khaosan Tokyo Kabuki", "budget", 3500, 3.7, 2.8),
            ("Capsule Hotel Anshin Oyado Shinjuku", "budget", 2800, 3.6, 2.5),
            ("Sakura Hotel Jimbocho", "budget", 2500, 3.8, 3.0),
        ),
        "new york": (
            ("The St. Regis New York", "luxury", 45000, 4.9, 0.4),
            ("The Plaza Hotel", "luxury", 42000, 4.8, 0.2),
            ("Four Seasons Hotel New York Downtown", "luxury", 40000, 4.8, 0.6),
            ("Mandarin Oriental New York", "luxury", 38000, 4.9, 0.5),
            ("The Peninsula New York", "luxury", 35000, 4.8, 0.3),
            ("The Carlyle", "luxury", 32000, 4.7, 0.7),
            ("Waldorf Astoria New York", "luxury", 30000, 4.6, 0.8),
            ("Park Hyatt New York", "luxury", 28000, 4.8, 0.9),
            ("Hyatt Centric Times Square", "mid_range", 12000, 4.3, 0.8),
            ("New York Marriott Marquis", "mid_range", 11000, 4.2, 0.6),
            ("Hotel Pennsylvania", "mid_range", 8500, 4.1, 1.2),
            ("Row NYC", "mid_range", 7500, 4.0, 1.0),
            ("Pod Times Square", "budget", 4500, 3.9, 1.8),
            ("The Jane Hotel", "budget", 3200, 3.6, 2.5),
            ("HI New York City Hostel", "budget", 2800, 4.0, 3.0),
        ),
        "london": (
            ("The Savoy", "luxury", 40000, 4.9, 0.3),
            ("Claridge's", "luxury", 38000, 4.8, 0.5),
            ("The Ritz London", "luxury", 35000, 4.9, 0.3),
            ("The Langham London", "luxury", 32000, 4.7, 0.6),
            ("Four Seasons Hotel London at Park Lane", "luxury", 30000, 4.8, 0.4),
            ("Mandarin Oriental Hyde Park", "luxury", 28000, 4.8, 0.7),
            ("The Connaught", "luxury", 26000, 4.8, 0.5),
            ("Hotel Café Royal", "luxury", 24000, 4.6, 0.4),
            ("The Hoxton Holborn", "mid_range", 10000, 4.2, 1.0),
            ("CitizenM Bankside", "mid_range", 9000, 4.1, 1.4),
            ("The Z Hotel Piccadilly", "mid_range", 8500, 4.0, 0.8),
            ("Premier Inn London County Hall", "mid_range", 7500, 4.0, 2.0),
            ("Travelodge London Central", "budget", 4500, 3.7, 2.6),
            ("Ibis London Euston", "budget", 3800, 3.8, 2.2),
            ("Generator London", "budget", 3200, 4.0, 2.8),
        ),
        "dubai": (
            ("Burj Al Arab", "luxury", 60000, 4.9, 0.5),
            ("Atlantis The Palm", "luxury", 45000, 4.8, 0.8),
            ("Four Seasons Resort Dubai at Jumeirah Beach", "luxury", 40000, 4.8, 1.0),
            ("Mandarin Oriental Jumeira", "luxury", 38000, 4.7, 1.2),
            ("The Address Downtown", "luxury", 35000, 4.6, 0.6),
            ("Palazzo Versace Dubai", "luxury", 32000, 4.7, 1.5),
            ("JW Marriott Marquis Dubai", "mid_range", 12000, 4.3, 1.2),
            ("Hyatt Regency Dubai", "mid_range", 10000, 4.2, 1.6),
            ("Dubai Marriott Harbour Hotel", "mid_range", 9000, 4.1, 2.0),
            ("Rove Downtown Dubai", "mid_range", 7500, 3.9, 2.8),
            ("Ibis Dubai Al Barsha", "budget", 4500, 3.8, 2.2),
            ("Holiday Inn Express Dubai Airport", "budget", 3800, 3.9, 3.5),
            ("Rove City Centre", "budget", 3200, 3.7, 2.5),
        ),
        "singapore": (
            ("Marina Bay Sands", "luxury", 35000, 4.8, 0.3),
            ("Raffles Hotel Singapore", "luxury", 32000, 4.9, 0.5),
            ("The Fullerton Hotel Singapore", "luxury", 28000, 4.7, 0.6),
            ("Four Seasons Hotel Singapore", "luxury", 26000, 4.8, 0.7),
            ("Mandarin Oriental Singapore", "luxury", 24000, 4.7, 0.8),
            ("Pan Pacific Singapore", "mid_range", 10000, 4.2, 1.0),
            ("Swissôtel The Stamford", "mid_range", 9000, 4.1, 1.2),
            ("Holiday Inn Singapore Orchard City Centre", "mid_range", 8500, 4.0, 0.8),
            ("Ibis Singapore on Bencoolen", "budget", 4500, 3.8, 1.5),
            ("Fragrance Hotel - Pearl", "budget", 3800, 3.7, 2.0),
            ("Budget Hostel @ Jalan Besar", "budget", 2800, 3.6, 2.5),
        ),
        "rome": (
            ("Hotel de Russie", "luxury", 30000, 4.8, 0.3),
            ("The St. Regis Rome", "luxury", 28000, 4.7, 0.5),
            ("Hotel Hassler", "luxury", 26000, 4.8, 0.4),
            ("Rome Cavalieri Waldorf Astoria", "luxury", 24000, 4.6, 1.0),
            ("J.K. Place Roma", "luxury", 22000, 4.7, 0.6),
            ("Grand Hotel de la Minerve", "mid_range", 10000, 4.2, 0.8),
            ("Hotel Artemide", "mid_range", 8500, 4.1, 1.2),
            ("NH Collection Roma Palazzo Cinquecento", "mid_range", 7500, 4.0, 1.0),
            ("Hotel Sonya", "budget", 4500, 3.8, 1.5),
            ("Hotel Giorgina", "budget", 3800, 3.7, 2.0),
            ("The RomeHello Hostel", "budget", 2800, 4.0, 2.5),
        ),
        "barcelona": (
            ("Hotel Arts Barcelona", "luxury", 28000, 4.8, 0.3),
            ("Mandarin Oriental Barcelona", "luxury", 25000, 4.7, 0.5),
            ("W Barcelona", "luxury", 22000, 4.6, 0.4),
            ("Hotel Casa Fuster", "luxury", 20000, 4.7, 0.8),
            ("Eurostars Grand Marina", "luxury", 18000, 4.5, 0.6),
            ("Catalonia Park Güell", "mid_range", 9000, 4.2, 1.2),
            ("Hotel Barcelona Center", "mid_range", 8000, 4.1, 1.0),
            ("NH Collection Barcelona Podium", "mid_range", 7500, 4.0, 0.8),
            ("Hostel One Sants", "budget", 3500, 4.0, 1.8),
            ("Sant Jordi Hostel Sagrada Familia", "budget", 2800, 3.8, 2.2),
            ("Generator Barcelona", "budget", 2500, 3.9, 2.5),
        ),
        "amsterdam": (
            ("Waldorf Astoria Amsterdam", "luxury", 30000, 4.8, 0.4),
            ("The Dylan Amsterdam", "luxury", 28000, 4.7, 0.5),
            ("Hotel Okura Amsterdam", "luxury", 25000, 4.6, 0.6),
            ("Conservatorium Hotel", "luxury", 22000, 4.7, 0.7),
            ("Pulitzer Amsterdam", "luxury", 20000, 4.5, 0.8),
            ("Mövenpick Hotel Amsterdam City Centre", "mid_range", 10000, 4.2, 1.0),
            ("NH Collection Barbizon Palace", "mid_range", 9000, 4.1, 0.8),
            ("Van der Valk Hotel Amsterdam-Amstel", "mid_range", 8500, 4.0, 1.5),
            ("ClinkNOORD Hostel", "budget", 4000, 4.0, 2.0),
            ("Hostel The Globe", "budget", 3200, 3.8, 2.5),
            ("Flying Pig Downtown Hostel", "budget", 2800, 3.7, 1.8),
        ),
    }
)

# (name, type, description, price range)
CITY_SHOPPING: Mapping[str, Tuple[Tuple[str, str, str, str], ...]] = MappingProxyType(
    {
        "paris": (
            ("Champs-Élysées", "luxury_shopping", "Famous avenue with high-end boutiques", "€€€€"),
            ("Galeries Lafayette", "department_store", "Iconic French department store", "€€€"),
            ("Le Marais", "boutique_district", "Trendy boutiques and vintage shops", "€€"),
            ("Saint-Germain-des-Prés", "luxury_boutiques", "Designer stores and art galleries", "€€€€"),
            ("Rue Cler", "market_street", "Charming street with local shops", "€"),
        ),
        "tokyo": (
            ("Ginza", "luxury_shopping", "Upscale shopping district", "¥¥¥¥"),
            ("Shibuya", "fashion_district", "Trendy fashion and electronics", "¥¥¥"),
            ("Harajuku", "street_fashion", "Youth fashion and unique boutiques", "¥¥"),
            ("Akihabara", "electronics", "Electronics and anime goods", "¥¥"),
            ("Tsukiji Outer Market", "market", "Food and traditional crafts", "¥"),
        ),
        "new york": (
            ("Fifth Avenue", "luxury_shopping", "World-famous shopping street", "$$$$"),
            ("Times Square", "entertainment_shopping", "Stores and entertainment complex", "$$$"),
            ("SoHo", "boutique_district", "Art galleries and designer boutiques", "$$$"),
            ("Brooklyn Flea Market", "market", "Vintage and artisan goods", "$$"),
            ("Chelsea Market", "food_market", "Gourmet food and specialty shops", "$$"),
        ),
        "london": (
            ("Oxford Street", "main_shopping", "Major shopping street with flagship stores", "£££"),
            ("Regent Street", "luxury_shopping", "High-end brands and historic architecture", "££££"),
            ("Camden Market", "alternative_market", "Alternative fashion and crafts", "££"),
            ("Portobello Road Market", "vintage_market", "Antiques and vintage goods", "££"),
            ("Covent Garden", "boutique_shopping", "Unique shops and street performers", "£££"),
        ),
        "dubai": (
            ("Dubai Mall", "luxury_mall", "World's largest shopping mall", "AED AED AED AED"),
            ("Mall of the Emirates", "premium_mall", "Ski Dubai and luxury brands", "AED AED AED"),
            ("Gold Souk", "traditional_market", "Traditional gold and spice market", "AED AED"),
            ("Global Village", "international_market", "International pavilions and shopping", "AED"),
            ("City Walk", "lifestyle_shopping", "Outdoor shopping and dining", "AED AED AED"),
        ),
    }
)

# slot -> (name, type, cuisine, average price INR)
CITY_FOOD: Mapping[str, Mapping[str, Tuple[Tuple[str, str, str, int], ...]]] = MappingProxyType(
    {
        "paris": MappingProxyType(
            {
                "morning": (
                    ("Café de Flore", "cafe", "French Café", 400),
                    ("Le Comptoir du Relais", "bistro", "Traditional French", 350),
                ),
                "afternoon": (
                    ("L'As du Fallafel", "street_food", "Middle Eastern", 200),
                    ("Breizh Café", "crêperie", "French Crêpes", 450),
                ),
                "evening": (
                    ("Le Jules Verne", "fine_dining", "French Gastronomy", 3000),
                    ("Bouillon Chartier", "traditional", "Classic French", 600),
                ),
            }
        ),
        "tokyo": MappingProxyType(
            {
                "morning": (
                    ("Tsukiji Sushi Dai", "sushi", "Japanese Sushi", 500),
                    ("Kagura", "cafe", "Japanese Breakfast", 350),
                ),
                "afternoon": (
                    ("Ichiran Ramen", "ramen", "Japanese Ramen", 250),
                    ("Gonpachi", "izakaya", "Japanese Pub Food", 450),
                ),
                "evening": (
                    ("Narisawa", "fine_dining", "Innovative Japanese", 2500),
                    ("Omoide Yokocho", "street_food", "Yakitori & Sake", 400),
                ),
            }
        ),
        "new york": MappingProxyType(
            {
                "morning": (
                    ("Ess-a-Bagel", "bagel_shop", "New York Bagels", 300),
                    ("Balthazar", "brasserie", "French-American", 500),
                ),
                "afternoon": (
                    ("Katz's Delicatessen", "deli", "Jewish Deli", 450),
                    ("Joe's Pizza", "pizza", "New York Pizza", 250),
                ),
                "evening": (
                    ("Le Bernardin", "fine_dining", "French Seafood", 2800),
                    ("Shake Shack", "fast_casual", "American Burgers", 350),
                ),
            }
        ),
        "london": MappingProxyType(
            {
                "morning": (
                    ("The Breakfast Club", "cafe", "British Breakfast", 350),
                    ("Pret A Manger", "cafe", "British Café", 250),
                ),
                "afternoon": (
                    ("Borough Market", "market_food", "International Street Food", 300),
                    ("Dishoom", "indian", "Indian-British", 450),
                ),
                "evening": (
                    ("Restaurant Gordon Ramsay", "fine_dining", "Modern British", 2500),
                    ("Ye Olde Cheshire Cheese", "pub", "British Pub Food", 400),
                ),
            }
        ),
        "dubai": MappingProxyType(
            {
                "morning": (
                    ("Arabian Tea House", "cafe", "Emirati Breakfast", 400),
                    ("Tom & Serg", "cafe", "Australian-Emirati", 350),
                ),
                "afternoon": (
                    ("Al Mallah", "street_food", "Middle Eastern", 200),
                    ("Bu Qtair", "seafood", "Emirati Seafood", 350),
                ),
                "evening": (
                    ("Zuma", "fine_dining", "Japanese Contemporary", 2200),
                    ("Ravi Restaurant", "pakistani", "Pakistani-Emirati", 250),
                ),
            }
        ),
    }
)

# (name, type, description)
CITY_OPTIONAL_PLACES: Mapping[str, Tuple[Tuple[str, str, str], ...]] = MappingProxyType(
    {
        "paris": (
            ("Montmartre Hill", "viewpoint", "Artistic neighborhood with Sacré-Cœur"),
            ("Sainte-Chapelle", "historical", "Stunning stained glass chapel"),
            ("Luxembourg Gardens", "park", "Beautiful formal gardens"),
            ("Musée Rodin", "museum", "Sculpture museum with The Thinker"),
        ),
        "tokyo": (
            ("Senso-ji Temple", "temple", "Tokyo's oldest temple"),
            ("Meiji Shrine", "shrine", "Peaceful Shinto shrine"),
            ("Ueno Park", "park", "Large park with museums"),
            ("Tokyo Skytree", "observation", "Tallest structure in Japan"),
        ),
        "new york": (
            ("Brooklyn Bridge", "landmark", "Iconic suspension bridge"),
            ("Central Park", "park", "Famous urban park"),
            ("High Line", "park", "Elevated linear park"),
            ("9/11 Memorial", "memorial", "Memorial and museum"),
        ),
        "london": (
            ("Hyde Park", "park", "Royal park with Serpentine Lake"),
            ("Tower Bridge", "landmark", "Iconic Victorian bridge"),
            ("British Museum", "museum", "World history and artifacts"),
            ("Camden Lock", "market", "Alternative market and canal"),
        ),
        "dubai": (
            ("Dubai Marina Walk", "waterfront", "Scenic waterfront promenade"),
            ("Jumeirah Beach", "beach", "Public beach with Burj Al Arab view"),
            ("Dubai Frame", "landmark", "Picture frame-shaped structure"),
            ("Al Fahidi Historical District", "historical", "Traditional Emirati architecture"),
        ),
    }
)

COUNTRY_TIPS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "paris": (
            'Greet with "Bonjour" when entering shops',
            "Tipping 10% is standard at restaurants",
            "Museums are often closed on Mondays",
            "Metro day passes are cost-effective",
        ),
        "tokyo": (
            "Bow when greeting locals",
            "Remove shoes before entering homes",
            "Cash is preferred over cards",
            "Train etiquette is very important",
        ),
        "new york": (
            "Tipping 15-20% is expected",
            "Walking is the best way to explore",
            "Subway is fastest for long distances",
            "Street food is safe and delicious",
        ),
        "london": (
            "Stand on the right on escalators",
            "Tipping 10-12% is standard",
            "Oyster card saves money on transport",
            "Many museums are free entry",
        ),
    }
)

GENERIC_COUNTRY_TIPS: Tuple[str, ...] = (
    "Research local customs before visiting",
    "Keep emergency contacts handy",
    "Learn basic local phrases",
    "Respect local dress codes",
    "Be aware of local laws and regulations",
)
