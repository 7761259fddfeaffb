"""Domain Enums"""
from enum import Enum


class RoomType(str, Enum):
    STANDARD = "STANDARD"
    SUITE = "SUITE"


class ReservationType(str, Enum):
    STANDARD = "STANDARD"
    VIP = "VIP"
