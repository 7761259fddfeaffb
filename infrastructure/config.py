"""Configuration - properties file with built-in defaults"""
import logging
import os
from pathlib import Path
from typing import Dict, Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

logger = logging.getLogger(__name__)

CONFIG_FILE = os.getenv("HOTEL_CONFIG_FILE", "config/application.properties")

DEFAULT_PROPERTIES: Dict[str, str] = {
    "hotel.name": "Hotel Grand Palace",
    "room.standard.price": "50000",
    "room.suite.price": "150000",
    "reservation.vip.discount": "0.15",
    "data.customers.file": "config/customers.csv",
    "data.rooms.file": "config/rooms.csv",
}


class PropertiesConfig:
    """Key/value configuration read from a Java-style .properties file

    Built-in defaults are always present; values from the file override them.
    A missing or unreadable file leaves only the defaults.
    """

    def __init__(self, path: Union[str, Path, None] = None):
        self.path = Path(path or CONFIG_FILE)
        self._properties: Dict[str, str] = dict(DEFAULT_PROPERTIES)
        self.loaded_from_file = self._load()

    def _load(self) -> bool:
        try:
            # .properties files are ISO-8859-1; every byte decodes
            with open(self.path, encoding="latin-1") as handle:
                for line in handle:
                    line = line.strip()
                    if not line or line[0] in "#!":
                        continue
                    key, sep, value = line.partition("=")
                    if not sep:
                        key, sep, value = line.partition(":")
                    self._properties[key.strip()] = value.strip()
        except FileNotFoundError:
            logger.warning("Could not find %s, using default values", self.path)
            return False
        except OSError as e:
            logger.error("Error loading configuration: %s", e)
            return False

        logger.info("Configuration loaded from %s", self.path)
        return True

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._properties.get(key, default)

    def get_int(self, key: str, default: int) -> int:
        value = self._properties.get(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    def get_float(self, key: str, default: float) -> float:
        value = self._properties.get(key)
        if value is None:
            return default
        try:
            return float(value)
        except ValueError:
            return default


class HotelSettings(BaseModel):
    """Typed view of the hotel configuration"""

    hotel_name: str = "Hotel Grand Palace"
    standard_price: float = Field(default=50000, ge=0)
    suite_price: float = Field(default=150000, ge=0)
    vip_discount: float = Field(default=0.15, ge=0, lt=1)
    customers_file: str = "config/customers.csv"
    rooms_file: str = "config/rooms.csv"

    @staticmethod
    def from_config(config: PropertiesConfig) -> "HotelSettings":
        return HotelSettings(
            hotel_name=config.get("hotel.name", "Hotel Grand Palace"),
            standard_price=config.get_float("room.standard.price", 50000),
            suite_price=config.get_float("room.suite.price", 150000),
            vip_discount=config.get_float("reservation.vip.discount", 0.15),
            customers_file=config.get("data.customers.file", "config/customers.csv"),
            rooms_file=config.get("data.rooms.file", "config/rooms.csv"),
        )
