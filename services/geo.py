"""
Coordinates for the map view, keyed by the same slugs the store derives
from display names.
"""
from __future__ import annotations

from typing import Dict, Optional, Tuple

LatLon = Tuple[float, float]

# City centre [latitude, longitude]
CITY_COORDINATES: Dict[str, LatLon] = {
    "marrakech": (31.6295, -7.9811),
    "essaouira": (31.5085, -9.7595),
    "casablanca": (33.5731, -7.5898),
    "rabat": (34.0209, -6.8416),
    "fes": (34.0181, -5.0078),
    "agadir": (30.4278, -9.5981),
    "tangier": (35.7595, -5.8340),
    "tetouan": (35.5784, -5.3684),
    "chefchaouen": (35.1688, -5.2636),
    "el-jadida": (33.2316, -8.5007),
    "moulay-idriss-zerhoun": (34.0553, -5.5242),
    "tan-tan": (28.4380, -11.1031),
    "merzouga": (31.0801, -4.0134),
    "imilchil": (32.1528, -5.6292),
}

# Region label placement [latitude, longitude]
REGION_CENTERS: Dict[str, LatLon] = {
    "tanger-tetouan-al-hoceima": (35.2, -5.5),
    "oriental": (34.3, -2.5),
    "fes-meknes": (34.0, -5.0),
    "rabat-sale-kenitra": (34.0, -6.8),
    "beni-mellal-khenifra": (32.5, -6.5),
    "casablanca-settat": (33.2, -7.8),
    "marrakech-safi": (31.8, -8.5),
    "draa-tafilalet": (31.5, -5.5),
    "souss-massa": (30.0, -9.0),
    "guelmim-oued-noun": (28.5, -10.0),
    "laayoune-sakia-el-hamra": (26.5, -13.0),
    "dakhla-oued-ed-dahab": (23.5, -15.5),
}


def city_coordinates(city_slug: str) -> Optional[LatLon]:
    return CITY_COORDINATES.get(city_slug)


def region_center(region_slug: str) -> Optional[LatLon]:
    return REGION_CENTERS.get(region_slug)
