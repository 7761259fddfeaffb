"""Application Services - Registries for customers, rooms and reservations

Every mutating operation reports its outcome as a bool and leaves state
untouched when it returns False.
"""
import logging
from typing import List, Optional

from domain.repositories import CustomerRepository, RoomRepository, ReservationRepository
from domain.entities import Customer, Room, Reservation
from domain.enums import RoomType

logger = logging.getLogger(__name__)


class CustomerRegistry:
    """Registry of hotel customers, unique by customer id"""

    def __init__(self, repository: CustomerRepository):
        self.repository = repository

    def add(self, customer: Optional[Customer]) -> bool:
        """Register a customer; rejects duplicates"""
        if customer is None:
            return False

        if self.repository.find_by_id(customer.customer_id) is not None:
            logger.warning("A customer with ID %s already exists", customer.customer_id)
            return False

        self.repository.save(customer)
        logger.info("Customer registered: %s", customer.name)
        return True

    def find_by_id(self, customer_id: str) -> Optional[Customer]:
        return self.repository.find_by_id(customer_id)

    def find_by_email(self, email: str) -> Optional[Customer]:
        return self.repository.find_by_email(email)

    def list_all(self) -> List[Customer]:
        return self.repository.find_all()

    def count(self) -> int:
        return self.repository.count()


class RoomRegistry:
    """Room inventory, unique by room number"""

    def __init__(self, repository: RoomRepository):
        self.repository = repository

    def add(self, room: Optional[Room]) -> bool:
        """Add a room to the inventory; rejects duplicate numbers"""
        if room is None:
            return False

        if self.repository.find_by_number(room.number) is not None:
            logger.warning("A room with number %s already exists", room.number)
            return False

        self.repository.save(room)
        logger.info("Room added: %s", room.number)
        return True

    def find_by_number(self, number: str) -> Optional[Room]:
        return self.repository.find_by_number(number)

    def list_available(self) -> List[Room]:
        """Rooms not held by any reservation"""
        return [room for room in self.repository.find_all() if room.is_available()]

    def list_by_type(self, room_type: RoomType) -> List[Room]:
        return [room for room in self.repository.find_all() if room.room_type == room_type]

    def list_all(self) -> List[Room]:
        return self.repository.find_all()

    def count(self) -> int:
        return self.repository.count()


class ReservationRegistry:
    """Reservation lifecycle: commit and cancel

    Commit is the authoritative availability check. Reservation.add_room only
    looks at the flag when the room is added, so two drafts may hold the same
    room; the second one to be created is rejected as a whole.
    """

    def __init__(self, repository: ReservationRepository):
        self.repository = repository

    def create(self, reservation: Optional[Reservation]) -> bool:
        """Commit a reservation, taking all its rooms or none of them"""
        if reservation is None:
            return False

        if self.repository.find_by_id(reservation.reservation_id) is not None:
            logger.warning("Reservation %s already exists", reservation.reservation_id)
            return False

        rooms = reservation.get_rooms()
        for room in rooms:
            if not room.is_available():
                logger.warning("Room %s is not available", room.number)
                return False

        for room in rooms:
            room.reserve()

        self.repository.save(reservation)
        logger.info("Reservation created: %s", reservation.reservation_id)
        return True

    def cancel(self, reservation_id: str) -> bool:
        """Cancel a reservation and release its rooms"""
        reservation = self.repository.find_by_id(reservation_id)
        if reservation is None:
            logger.warning("Reservation %s not found", reservation_id)
            return False

        for room in reservation.get_rooms():
            room.release()

        self.repository.delete(reservation_id)
        logger.info("Reservation cancelled: %s", reservation_id)
        return True

    def find_by_id(self, reservation_id: str) -> Optional[Reservation]:
        return self.repository.find_by_id(reservation_id)

    def list_by_customer(self, customer_id: str) -> List[Reservation]:
        return self.repository.find_by_customer_id(customer_id)

    def list_all(self) -> List[Reservation]:
        return self.repository.find_all()

    def count(self) -> int:
        return self.repository.count()
