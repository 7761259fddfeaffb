"""CSV loaders for customers and rooms

Both loaders skip the header row and fall back to a built-in dataset when the
file is missing, unreadable, malformed or yields nothing.
"""
import csv
import logging
from pathlib import Path
from typing import List, Union

from pydantic import ValidationError

from domain.entities import Customer, Room, SuiteRoom

logger = logging.getLogger(__name__)


def default_customers() -> List[Customer]:
    return [
        Customer(customer_id="C001", name="María Victoria",
                 email="maria.victoria@email.com", phone="3001234567"),
        Customer(customer_id="C002", name="Carlos Arturo Barón",
                 email="carlos.baron@email.com", phone="3002345678"),
        Customer(customer_id="C003", name="Carlos Augusto Aranzazu",
                 email="carlos.aranzazu@email.com", phone="3003456789"),
    ]


def default_rooms(standard_price: float = 50000, suite_price: float = 150000) -> List[Room]:
    return [
        Room(number="101", price_per_night=standard_price, capacity=2),
        Room(number="102", price_per_night=standard_price, capacity=2),
        SuiteRoom(number="201", price_per_night=suite_price, capacity=4, has_jacuzzi=True, has_bar=True),
        SuiteRoom(number="202", price_per_night=suite_price, capacity=4, has_jacuzzi=True, has_bar=False),
    ]


def _read_rows(path: Union[str, Path]) -> List[List[str]]:
    with open(path, newline="", encoding="utf-8") as handle:
        rows = list(csv.reader(handle))
    # first row is the header
    return [[field.strip() for field in row] for row in rows[1:]]


def load_customers(path: Union[str, Path]) -> List[Customer]:
    """Load customers from an ``id,name,email,phone`` CSV file"""
    try:
        rows = _read_rows(path)
    except (OSError, ValueError, csv.Error) as e:
        logger.warning("Error loading customers from %s: %s, using defaults", path, e)
        return default_customers()

    customers = [
        Customer(customer_id=row[0], name=row[1], email=row[2], phone=row[3])
        for row in rows if len(row) >= 4
    ]
    if not customers:
        logger.warning("No customers found in %s, using defaults", path)
        return default_customers()

    logger.info("Customers loaded from %s: %d", path, len(customers))
    return customers


def _parse_bool(value: str) -> bool:
    return value.lower() == "true"


def load_rooms(
    path: Union[str, Path],
    standard_price: float = 50000,
    suite_price: float = 150000
) -> List[Room]:
    """Load rooms from a ``number,type,price,capacity[,hasJacuzzi,hasBar]`` CSV file

    Suites need all six columns, any other row becomes a standard room. The
    prices are only used by the fallback dataset.
    """
    try:
        rows = _read_rows(path)
        rooms: List[Room] = []
        for row in rows:
            if len(row) < 4:
                continue
            number, room_type = row[0], row[1]
            price = float(row[2])
            capacity = int(row[3])
            if room_type.lower() == "suite" and len(row) >= 6:
                rooms.append(SuiteRoom(
                    number=number,
                    price_per_night=price,
                    capacity=capacity,
                    has_jacuzzi=_parse_bool(row[4]),
                    has_bar=_parse_bool(row[5])
                ))
            else:
                rooms.append(Room(number=number, price_per_night=price, capacity=capacity))
    except (OSError, ValueError, csv.Error, ValidationError) as e:
        logger.warning("Error loading rooms from %s: %s, using defaults", path, e)
        return default_rooms(standard_price, suite_price)

    if not rooms:
        logger.warning("No rooms found in %s, using defaults", path)
        return default_rooms(standard_price, suite_price)

    logger.info("Rooms loaded from %s: %d", path, len(rooms))
    return rooms
