# providers/seed.py
from __future__ import annotations

from typing import Any, Dict, List

from providers.base import build_events, event_from_seed
from schemas import Event

KEY = "seed"
NAME = "Embedded seed data"

SEED_EVENTS: List[Dict[str, Any]] = [
    {
        "id": "gnaoua-2025",
        "name": "Festival Gnaoua et Musiques du Monde",
        "event_type": "festival",
        "start_date": "2025-06-26",
        "end_date": "2025-06-29",
        "city": "Essaouira",
        "region": "Marrakech-Safi",
        "venue": "Place Moulay Hassan",
        "genres": ["Gnawa", "World Music", "Jazz"],
        "artists": ["Maalem Hamid El Kasri", "Hindi Zahra", "Oum"],
        "organizer": "Association Yerma Gnaoua",
        "official_website": "https://festival-gnaoua.net",
        "ticket_url": "https://festival-gnaoua.net/billetterie",
        "status": "confirmed",
        "is_verified": True,
        "is_pinned": True,
        "cultural_significance": 10,
        "description": "Annual celebration of Gnawa music and culture, bringing together Gnawa masters (Maalems) and international artists in the coastal town of Essaouira.",
        "image_url": None,
    },
    {
        "id": "mawazine-2025",
        "name": "Mawazine Rhythms of the World",
        "event_type": "festival",
        "start_date": "2025-06-20",
        "end_date": "2025-06-28",
        "city": "Rabat",
        "region": "Rabat-Salé-Kénitra",
        "venue": "OLM Souissi",
        "genres": ["Pop", "World Music", "Hip Hop", "R&B"],
        "artists": [],
        "organizer": "Maroc Cultures",
        "official_website": "https://mawazine.ma",
        "ticket_url": None,
        "status": "announced",
        "is_verified": True,
        "is_pinned": True,
        "cultural_significance": 9,
        "description": "One of the world's largest music festivals, attracting millions of attendees and featuring major international headliners alongside Moroccan artists.",
        "image_url": None,
    },
    {
        "id": "timitar-2025",
        "name": "Festival Timitar",
        "event_type": "festival",
        "start_date": "2025-07-10",
        "end_date": "2025-07-13",
        "city": "Agadir",
        "region": "Souss-Massa",
        "venue": None,
        "genres": ["Amazigh", "World Music", "Folk"],
        "artists": [],
        "organizer": "Association Timitar",
        "official_website": "https://festivaltimitar.ma",
        "ticket_url": None,
        "status": "announced",
        "is_verified": True,
        "is_pinned": False,
        "cultural_significance": 8,
        "description": "Festival celebrating Amazigh (Berber) music and culture, showcasing traditional and contemporary artists from Morocco and beyond.",
        "image_url": None,
    },
    {
        "id": "jazzablanca-2025",
        "name": "Jazzablanca",
        "event_type": "festival",
        "start_date": "2025-07-03",
        "end_date": "2025-07-05",
        "city": "Casablanca",
        "region": "Casablanca-Settat",
        "venue": "Anfa Park",
        "genres": ["Jazz", "Soul", "Blues", "Electronic"],
        "artists": [],
        "organizer": "7MO",
        "official_website": "https://jazzablanca.com",
        "ticket_url": None,
        "status": "announced",
        "is_verified": True,
        "is_pinned": False,
        "cultural_significance": 7,
        "description": "Casablanca's premier jazz festival bringing international jazz, soul, and blues artists to Morocco's economic capital.",
        "image_url": None,
    },
    {
        "id": "visa-for-music-2025",
        "name": "Visa For Music",
        "event_type": "conference",
        "start_date": "2025-11-19",
        "end_date": "2025-11-22",
        "city": "Rabat",
        "region": "Rabat-Salé-Kénitra",
        "venue": "Various venues",
        "genres": ["World Music", "African", "Electronic"],
        "artists": [],
        "organizer": "Visa For Music",
        "official_website": "https://visaformusic.com",
        "ticket_url": None,
        "status": "announced",
        "is_verified": True,
        "is_pinned": False,
        "cultural_significance": 7,
        "description": "Africa and Middle East's leading music market and showcase festival, connecting artists with industry professionals.",
        "image_url": None,
    },
    {
        "id": "tanjazz-2025",
        "name": "Tanjazz Festival",
        "event_type": "festival",
        "start_date": "2025-09-18",
        "end_date": "2025-09-21",
        "city": "Tangier",
        "region": "Tanger-Tétouan-Al Hoceïma",
        "venue": "Palais des Institutions Italiennes",
        "genres": ["Jazz", "Blues", "Soul"],
        "artists": [],
        "organizer": "Tanjazz Association",
        "official_website": "https://tanjazz.org",
        "ticket_url": None,
        "status": "announced",
        "is_verified": True,
        "is_pinned": False,
        "cultural_significance": 6,
        "description": "Tangier's international jazz festival featuring performances in historic venues across the city.",
        "image_url": None,
    },
    {
        "id": "fes-sacred-music-2025",
        "name": "Fes Festival of World Sacred Music",
        "event_type": "festival",
        "start_date": "2025-06-06",
        "end_date": "2025-06-14",
        "city": "Fes",
        "region": "Fès-Meknès",
        "venue": "Bab Al Makina",
        "genres": ["Sufi", "Classical", "World Music", "Sacred"],
        "artists": [],
        "organizer": "Fes Festival Foundation",
        "official_website": "https://fesfestival.com",
        "ticket_url": None,
        "status": "announced",
        "is_verified": True,
        "is_pinned": True,
        "cultural_significance": 9,
        "description": "Celebrating sacred music traditions from around the world in the spiritual heart of Morocco's oldest imperial city.",
        "image_url": None,
    },
    {
        "id": "oasis-festival-2025",
        "name": "Oasis Festival",
        "event_type": "festival",
        "start_date": "2025-09-12",
        "end_date": "2025-09-14",
        "city": "Marrakech",
        "region": "Marrakech-Safi",
        "venue": "The Source",
        "genres": ["Electronic", "House", "Techno"],
        "artists": [],
        "organizer": "Oasis Festival",
        "official_website": "https://theoasisfest.com",
        "ticket_url": None,
        "status": "announced",
        "is_verified": True,
        "is_pinned": False,
        "cultural_significance": 6,
        "description": "Boutique electronic music festival set in the foothills of the Atlas Mountains outside Marrakech.",
        "image_url": None,
    },
    {
        "id": "atlas-electronic-2025",
        "name": "Atlas Electronic",
        "event_type": "festival",
        "start_date": "2025-03-28",
        "end_date": "2025-03-30",
        "city": "Marrakech",
        "region": "Marrakech-Safi",
        "venue": "Fellah Hotel",
        "genres": ["Electronic", "Ambient", "Experimental"],
        "artists": [],
        "organizer": "Atlas Electronic",
        "official_website": "https://atlaselectronic.ma",
        "ticket_url": None,
        "status": "confirmed",
        "is_verified": True,
        "is_pinned": False,
        "cultural_significance": 5,
        "description": "Electronic music gathering focused on experimental and ambient sounds in the Moroccan countryside.",
        "image_url": None,
    },
    {
        "id": "l-boulevard-2025",
        "name": "L'Boulevard Festival",
        "event_type": "festival",
        "start_date": "2025-09-26",
        "end_date": "2025-09-28",
        "city": "Casablanca",
        "region": "Casablanca-Settat",
        "venue": "Ancienne Médina",
        "genres": ["Hip Hop", "Rock", "Electronic", "Urban"],
        "artists": [],
        "organizer": "EAC L'Boulvard",
        "official_website": "https://boulevard.ma",
        "ticket_url": None,
        "status": "announced",
        "is_verified": True,
        "is_pinned": False,
        "cultural_significance": 7,
        "description": "Casablanca's urban music festival and platform for emerging Moroccan artists in hip hop, rock, and electronic music.",
        "image_url": None,
    },
    {
        "id": "jardin-des-arts-2025",
        "name": "Festival du Jardin des Arts",
        "event_type": "festival",
        "start_date": "2025-05-15",
        "end_date": "2025-05-18",
        "city": "Tétouan",
        "region": "Tanger-Tétouan-Al Hoceïma",
        "venue": "Jardin Moulay Rachid",
        "genres": ["Andalusian", "Classical", "Folk"],
        "artists": [],
        "organizer": None,
        "official_website": None,
        "ticket_url": None,
        "status": "announced",
        "is_verified": False,
        "is_pinned": False,
        "cultural_significance": 5,
        "description": "Arts festival in Tétouan's gardens featuring Andalusian music traditions.",
        "image_url": None,
    },
    {
        "id": "alegria-festival-2025",
        "name": "Alegria Festival",
        "event_type": "festival",
        "start_date": "2025-04-25",
        "end_date": "2025-04-27",
        "city": "El Jadida",
        "region": "Casablanca-Settat",
        "venue": "Mazagan Beach Resort",
        "genres": ["Electronic", "House", "Disco"],
        "artists": [],
        "organizer": "Alegria Events",
        "official_website": "https://alegriafestival.com",
        "ticket_url": None,
        "status": "announced",
        "is_verified": False,
        "is_pinned": False,
        "cultural_significance": 4,
        "description": "Beach electronic music festival on Morocco's Atlantic coast.",
        "image_url": None,
    },
    {
        "id": "merzouga-music-2025",
        "name": "Merzouga Music Festival",
        "event_type": "festival",
        "start_date": "2025-10-17",
        "end_date": "2025-10-19",
        "city": "Merzouga",
        "region": "Drâa-Tafilalet",
        "venue": "Erg Chebbi Dunes",
        "genres": ["World Music", "Gnawa", "Desert Blues"],
        "artists": [],
        "organizer": None,
        "official_website": None,
        "ticket_url": None,
        "status": "announced",
        "is_verified": False,
        "is_pinned": False,
        "cultural_significance": 5,
        "description": "Music performances in the Sahara desert dunes near Merzouga.",
        "image_url": None,
    },
    {
        "id": "chefchaouen-jazz-2025",
        "name": "Jazz au Chefchaouen",
        "event_type": "festival",
        "start_date": "2025-08-07",
        "end_date": "2025-08-09",
        "city": "Chefchaouen",
        "region": "Tanger-Tétouan-Al Hoceïma",
        "venue": "Place Outa El Hammam",
        "genres": ["Jazz", "Fusion"],
        "artists": [],
        "organizer": None,
        "official_website": None,
        "ticket_url": None,
        "status": "announced",
        "is_verified": False,
        "is_pinned": False,
        "cultural_significance": 4,
        "description": "Jazz festival in the blue-painted mountain town of Chefchaouen.",
        "image_url": None,
    },
    {
        "id": "awaln-art-2025",
        "name": "Awaln'Art Festival",
        "event_type": "festival",
        "start_date": "2025-06-12",
        "end_date": "2025-06-15",
        "city": "Marrakech",
        "region": "Marrakech-Safi",
        "venue": "Various venues",
        "genres": ["World Music", "Gnawa", "Electronic"],
        "artists": [],
        "organizer": "Awaln'Art Association",
        "official_website": None,
        "ticket_url": None,
        "status": "announced",
        "is_verified": False,
        "is_pinned": False,
        "cultural_significance": 5,
        "description": "Contemporary arts and music festival in Marrakech's medina and gardens.",
        "image_url": None,
    },
]


def load_events() -> List[Event]:
    return build_events(SEED_EVENTS, event_from_seed)
