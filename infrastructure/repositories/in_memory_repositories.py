"""In-Memory Repository Implementations

Dicts keep insertion order, so find_all returns entities in the order they
were saved.
"""
from typing import Optional, List, Dict

from domain.repositories import CustomerRepository, RoomRepository, ReservationRepository
from domain.entities import Customer, Room, Reservation


class InMemoryCustomerRepository(CustomerRepository):
    """In-memory implementation of CustomerRepository"""

    def __init__(self):
        self._storage: Dict[str, Customer] = {}

    def save(self, customer: Customer) -> Customer:
        """Save customer to memory"""
        self._storage[customer.customer_id] = customer
        return customer

    def find_by_id(self, customer_id: str) -> Optional[Customer]:
        """Find customer by ID"""
        return self._storage.get(customer_id)

    def find_by_email(self, email: str) -> Optional[Customer]:
        """Find first customer with the given email"""
        for customer in self._storage.values():
            if customer.email == email:
                return customer
        return None

    def find_all(self) -> List[Customer]:
        """Find all customers"""
        return list(self._storage.values())

    def count(self) -> int:
        return len(self._storage)


class InMemoryRoomRepository(RoomRepository):
    """In-memory implementation of RoomRepository"""

    def __init__(self):
        self._storage: Dict[str, Room] = {}

    def save(self, room: Room) -> Room:
        """Save room to memory"""
        self._storage[room.number] = room
        return room

    def find_by_number(self, number: str) -> Optional[Room]:
        """Find room by number"""
        return self._storage.get(number)

    def find_all(self) -> List[Room]:
        """Find all rooms"""
        return list(self._storage.values())

    def count(self) -> int:
        return len(self._storage)


class InMemoryReservationRepository(ReservationRepository):
    """In-memory implementation of ReservationRepository"""

    def __init__(self):
        self._storage: Dict[str, Reservation] = {}

    def save(self, reservation: Reservation) -> Reservation:
        """Save reservation to memory"""
        self._storage[reservation.reservation_id] = reservation
        return reservation

    def find_by_id(self, reservation_id: str) -> Optional[Reservation]:
        """Find reservation by ID"""
        return self._storage.get(reservation_id)

    def find_by_customer_id(self, customer_id: str) -> List[Reservation]:
        """Find reservations by customer ID"""
        return [r for r in self._storage.values() if r.customer.customer_id == customer_id]

    def find_all(self) -> List[Reservation]:
        """Find all reservations"""
        return list(self._storage.values())

    def delete(self, reservation_id: str) -> bool:
        """Delete reservation"""
        if reservation_id in self._storage:
            del self._storage[reservation_id]
            return True
        return False

    def count(self) -> int:
        return len(self._storage)
