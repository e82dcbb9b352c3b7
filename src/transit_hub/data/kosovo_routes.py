"""Built-in route catalog for Kosovo intercity lines and Pristina city lines.

Records use the same shape as a JSON catalog file (see ``route_catalog``).
Coordinates are ``[lat, lon]``.
"""

INTERCITY_ROUTES: list[dict] = [
    {
        "id": "bus-1",
        "name": "Pristina - Prizren",
        "kind": "intercity",
        "stops": [
            {"name": "Pristina Bus Station", "coordinates": [42.6629, 21.1655], "time_offset": 0},
            {"name": "Lipjan", "coordinates": [42.5241, 21.1259], "time_offset": 15},
            {"name": "Shtime", "coordinates": [42.4331, 21.0394], "time_offset": 25},
            {"name": "Suhareka", "coordinates": [42.3592, 20.8254], "time_offset": 40},
            {"name": "Prizren Bus Station", "coordinates": [42.2139, 20.7397], "time_offset": 60},
        ],
        "schedule": [
            {"departure_time": "06:00", "frequency": "Every 30 mins until 22:00"},
            {"departure_time": "06:30", "frequency": "Every 30 mins until 22:30"},
        ],
        "duration": 60,
        "price": 3.5,
        "vehicle_number": "101",
        "capacity": 45,
    },
    {
        "id": "bus-2",
        "name": "Pristina - Peja",
        "kind": "intercity",
        "stops": [
            {"name": "Pristina Bus Station", "coordinates": [42.6629, 21.1655], "time_offset": 0},
            {"name": "Drenas", "coordinates": [42.6283, 20.8987], "time_offset": 20},
            {"name": "Klina", "coordinates": [42.6217, 20.5730], "time_offset": 50},
            {"name": "Peja Bus Station", "coordinates": [42.6598, 20.2888], "time_offset": 75},
        ],
        "schedule": [
            {"departure_time": "07:00", "frequency": "Every 60 mins until 21:00"},
            {"departure_time": "08:00", "frequency": "Every 60 mins until 22:00"},
        ],
        "duration": 75,
        "price": 4.0,
        "vehicle_number": "102",
        "capacity": 45,
    },
    {
        "id": "bus-3",
        "name": "Pristina - Mitrovica",
        "kind": "intercity",
        "stops": [
            {"name": "Pristina Bus Station", "coordinates": [42.6629, 21.1655], "time_offset": 0},
            {"name": "Vushtrri", "coordinates": [42.8273, 20.9675], "time_offset": 20},
            {"name": "Mitrovica Bus Station", "coordinates": [42.8914, 20.8660], "time_offset": 40},
        ],
        "schedule": [
            {"departure_time": "06:15", "frequency": "Every 30 mins until 22:15"},
            {"departure_time": "06:45", "frequency": "Every 30 mins until 22:45"},
        ],
        "duration": 40,
        "price": 2.5,
        "vehicle_number": "103",
        "capacity": 45,
    },
    {
        "id": "bus-4",
        "name": "Pristina - Gjilan",
        "kind": "intercity",
        "stops": [
            {"name": "Pristina Bus Station", "coordinates": [42.6629, 21.1655], "time_offset": 0},
            {"name": "Gjilan Bus Station", "coordinates": [42.4631, 21.4691], "time_offset": 45},
        ],
        "schedule": [
            {"departure_time": "06:30", "frequency": "Every 30 mins until 22:30"},
            {"departure_time": "07:00", "frequency": "Every 30 mins until 23:00"},
        ],
        "duration": 45,
        "price": 3.0,
        "vehicle_number": "104",
        "capacity": 45,
    },
    {
        "id": "bus-5",
        "name": "Pristina - Ferizaj",
        "kind": "intercity",
        "stops": [
            {"name": "Pristina Bus Station", "coordinates": [42.6629, 21.1655], "time_offset": 0},
            {"name": "Ferizaj Bus Station", "coordinates": [42.3706, 21.1553], "time_offset": 30},
        ],
        "schedule": [
            {"departure_time": "06:00", "frequency": "Every 20 mins until 23:00"},
            {"departure_time": "06:20", "frequency": "Every 20 mins until 23:20"},
            {"departure_time": "06:40", "frequency": "Every 20 mins until 23:40"},
        ],
        "duration": 30,
        "price": 2.0,
        "vehicle_number": "105",
        "capacity": 45,
    },
]

CITY_ROUTES: list[dict] = [
    {
        "id": "city-bus-1",
        "name": "Line 1: City Center - Sunny Hill",
        "kind": "city",
        "stops": [
            {"name": "Main Bus Station", "coordinates": [42.6607, 21.1568], "time_offset": 0},
            {"name": "City Center", "coordinates": [42.6629, 21.1655], "time_offset": 5},
            {"name": "Newborn Monument", "coordinates": [42.6583, 21.1608], "time_offset": 8},
            {"name": "University of Pristina", "coordinates": [42.6477, 21.1673], "time_offset": 12},
            {"name": "Sunny Hill", "coordinates": [42.6547, 21.1845], "time_offset": 20},
        ],
        "schedule": [
            {"departure_time": "05:30", "frequency": "Every 10 mins until 23:30"},
        ],
        "duration": 20,
        "price": 0.5,
        "vehicle_number": "1",
        "capacity": 30,
    },
    {
        "id": "city-bus-2",
        "name": "Line 2: City Center - Veternik",
        "kind": "city",
        "stops": [
            {"name": "Main Bus Station", "coordinates": [42.6607, 21.1568], "time_offset": 0},
            {"name": "City Center", "coordinates": [42.6629, 21.1655], "time_offset": 5},
            {"name": "Grand Hotel", "coordinates": [42.6600, 21.1597], "time_offset": 7},
            {"name": "Veternik", "coordinates": [42.6433, 21.1367], "time_offset": 15},
        ],
        "schedule": [
            {"departure_time": "05:35", "frequency": "Every 10 mins until 23:35"},
        ],
        "duration": 15,
        "price": 0.5,
        "vehicle_number": "2",
        "capacity": 30,
    },
    {
        "id": "city-bus-3",
        "name": "Line 3: City Center - Dardania",
        "kind": "city",
        "stops": [
            {"name": "Main Bus Station", "coordinates": [42.6607, 21.1568], "time_offset": 0},
            {"name": "City Center", "coordinates": [42.6629, 21.1655], "time_offset": 5},
            {"name": "Cathedral of Saint Mother Teresa", "coordinates": [42.6604, 21.1559], "time_offset": 7},
            {"name": "Dardania", "coordinates": [42.6477, 21.1513], "time_offset": 15},
        ],
        "schedule": [
            {"departure_time": "05:40", "frequency": "Every 10 mins until 23:40"},
        ],
        "duration": 15,
        "price": 0.5,
        "vehicle_number": "3",
        "capacity": 30,
    },
]

KIND_COLORS = {
    "city": "#10B981",
    "intercity": "#1E3A8A",
}
