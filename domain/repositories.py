"""Domain Repository Interfaces"""
from abc import ABC, abstractmethod
from typing import Optional, List

from domain.entities import Customer, Room, Reservation


class CustomerRepository(ABC):
    """Repository interface for Customer Entity"""

    @abstractmethod
    def save(self, customer: Customer) -> Customer:
        """Save customer"""
        pass

    @abstractmethod
    def find_by_id(self, customer_id: str) -> Optional[Customer]:
        """Find customer by ID"""
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[Customer]:
        """Find first customer with the given email"""
        pass

    @abstractmethod
    def find_all(self) -> List[Customer]:
        """Find all customers in insertion order"""
        pass

    @abstractmethod
    def count(self) -> int:
        pass


class RoomRepository(ABC):
    """Repository interface for Room Entity"""

    @abstractmethod
    def save(self, room: Room) -> Room:
        """Save room"""
        pass

    @abstractmethod
    def find_by_number(self, number: str) -> Optional[Room]:
        """Find room by number"""
        pass

    @abstractmethod
    def find_all(self) -> List[Room]:
        """Find all rooms in insertion order"""
        pass

    @abstractmethod
    def count(self) -> int:
        pass


class ReservationRepository(ABC):
    """Repository interface for Reservation Aggregate"""

    @abstractmethod
    def save(self, reservation: Reservation) -> Reservation:
        """Save reservation"""
        pass

    @abstractmethod
    def find_by_id(self, reservation_id: str) -> Optional[Reservation]:
        """Find reservation by ID"""
        pass

    @abstractmethod
    def find_by_customer_id(self, customer_id: str) -> List[Reservation]:
        """Find reservations by customer ID"""
        pass

    @abstractmethod
    def find_all(self) -> List[Reservation]:
        """Find all reservations"""
        pass

    @abstractmethod
    def delete(self, reservation_id: str) -> bool:
        """Delete reservation"""
        pass

    @abstractmethod
    def count(self) -> int:
        pass
