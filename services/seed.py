# services/seed.py
# Literal demo dataset loaded into a fresh store at boot.
from typing import Any, Dict, List

# revenue is display text only; currencies and magnitudes are not normalized
MANUFACTURERS: List[Dict[str, Any]] = [
    {"id": 1, "name": "Ferrari", "revenue": "€3,767 billion"},
    {"id": 2, "name": "Lamborghini", "revenue": "€586 million"},
    {"id": 3, "name": "BMW", "revenue": "€104.210 billion"},
    {"id": 4, "name": "Mitsubishi Motors", "revenue": "¥2.514 trillion"},
    {"id": 5, "name": "TVR", "revenue": "€3,767 Billion"},
    {"id": 6, "name": "Nissan", "revenue": "€3,767 Trillion"},
]

VEHICLES: List[Dict[str, Any]] = [
    {"id": 1, "name": "TVR Tuscan Speed Six", "manufacturer_id": 5},
    {"id": 2, "name": "3.0 CS Alpina", "manufacturer_id": 3},
    {"id": 3, "name": "Evolution VII", "manufacturer_id": 4},
    {"id": 4, "name": "Murcielago LP-670 Super Veloce", "manufacturer_id": 2},
    {"id": 5, "name": "R34 Skyline GTR Spec-V", "manufacturer_id": 6},
    {"id": 6, "name": "E36 M3", "manufacturer_id": 3},
    {"id": 7, "name": "E38 750i", "manufacturer_id": 3},
    {"id": 8, "name": "L200", "manufacturer_id": 4},
    {"id": 9, "name": "550 Maranello", "manufacturer_id": 1},
    {"id": 10, "name": "3000GT", "manufacturer_id": 4},
]
