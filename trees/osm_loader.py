import time
from typing import List, Tuple

import requests

from Nodes.Point import Point
from trees.logger import logger

# Descarga POIs desde Overpass (OpenStreetMap) y los devuelve como Point(lon, lat)
# listos para indexar en el KDTree; id y tags quedan en Point.data.
# bbox = (south, west, north, east)

DEFAULT_OVERPASS_ENDPOINTS = [
    'https://overpass-api.de/api/interpreter',
    'https://overpass.openstreetmap.fr/api/interpreter',
    'https://lz4.overpass-api.de/api/interpreter'
]

BACKOFF_BASE = 1.0


def _build_query(bbox: Tuple[float, float, float, float], amenity: str, limit: int, timeout: int) -> str:
    south, west, north, east = bbox
    return f"""
    [out:json][timeout:{timeout}];
    (
      node["amenity"="{amenity}"]({south},{west},{north},{east});
      way["amenity"="{amenity}"]({south},{west},{north},{east});
      relation["amenity"="{amenity}"]({south},{west},{north},{east});
    );
    out center {limit};
    """


def parse_elements(elements) -> List[Point]:
    """Convierte elementos Overpass en puntos; ways/relations usan su 'center'."""
    points = []
    for elem in elements:
        if elem.get('type') == 'node':
            lat, lon = elem.get('lat'), elem.get('lon')
        else:
            center = elem.get('center') or {}
            lat, lon = center.get('lat'), center.get('lon')
        if lat is None or lon is None:
            continue
        points.append(Point(lon, lat, data={'id': elem.get('id'), 'tags': elem.get('tags', {})}))
    return points


def fetch_points_by_bbox(bbox: Tuple[float, float, float, float], amenity: str = 'restaurant', limit: int = 500,
                         timeout: int = 25, endpoints: List[str] = None, max_retries: int = 3) -> List[Point]:
    """Descarga POIs probando varios endpoints, con reintentos y backoff exponencial.

    Parámetros:
    - bbox: (south, west, north, east)
    - amenity: categoría OSM
    - limit: máximo de resultados solicitados a Overpass
    - timeout: tiempo de espera por petición
    - endpoints: endpoints Overpass (si None, DEFAULT_OVERPASS_ENDPOINTS)
    - max_retries: intentos por endpoint

    Lanza RuntimeError si ningún endpoint devolvió una respuesta válida.
    """
    if endpoints is None:
        endpoints = DEFAULT_OVERPASS_ENDPOINTS

    query = _build_query(bbox, amenity, limit, timeout)

    last_error = None
    for ep in endpoints:
        for attempt in range(1, max_retries + 1):
            try:
                r = requests.post(ep, data={'data': query}, timeout=timeout + 5)
                r.raise_for_status()
                points = parse_elements(r.json().get('elements', []))
                logger.info("Overpass %s: %d puntos '%s'", ep, len(points), amenity)
                return points
            except (requests.RequestException, ValueError) as e:
                last_error = e
                logger.warning("Overpass %s falló (intento %d/%d): %s", ep, attempt, max_retries, e)
                if attempt < max_retries:
                    time.sleep(BACKOFF_BASE * (2 ** (attempt - 1)))

    raise RuntimeError(f"Error fetching OSM data (tried {len(endpoints)} endpoints): {last_error}") from last_error
