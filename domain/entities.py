"""Domain Entities - Aggregates"""
import logging
from pydantic import BaseModel, Field, model_validator
from uuid import uuid4
from datetime import date
from typing import Optional, List

from domain.enums import RoomType, ReservationType
from domain.payment_methods import PaymentMethod

logger = logging.getLogger(__name__)

VIP_DISCOUNT = 0.15


def _new_reservation_id() -> str:
    return f"R-{uuid4().hex[:8].upper()}"


class Customer(BaseModel):
    """Customer Entity"""

    customer_id: str = Field(frozen=True)
    name: str
    email: str
    phone: str

    class Config:
        from_attributes = True


class Room(BaseModel):
    """Room Entity - unit of inventory"""

    number: str
    price_per_night: float = Field(ge=0)
    capacity: int = Field(gt=0)
    available: bool = True
    room_type: RoomType = RoomType.STANDARD

    class Config:
        from_attributes = True

    def price_for_nights(self, nights: int) -> float:
        """Price of this room for the given number of nights"""
        if nights < 0:
            raise ValueError("Number of nights cannot be negative")
        return self.price_per_night * nights

    def is_available(self) -> bool:
        return self.available

    # Availability is only toggled by the reservation lifecycle
    def reserve(self) -> None:
        self.available = False

    def release(self) -> None:
        self.available = True


class SuiteRoom(Room):
    """Suite with extra amenities"""

    room_type: RoomType = RoomType.SUITE
    has_jacuzzi: bool = False
    has_bar: bool = False


class Reservation(BaseModel):
    """Reservation Aggregate Root Entity

    Customer, rooms and payment method are shared references; the
    reservation never copies them. ``base_total`` is derived from the rooms
    and the date range and is recomputed on every change to either.
    """

    # Identity
    reservation_id: str = Field(default_factory=_new_reservation_id, frozen=True)

    # References
    customer: Customer
    rooms: List[Room] = []
    payment_method: Optional[PaymentMethod] = None

    # Stay
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    # Pricing & payment
    base_total: float = 0.0
    discount_rate: float = Field(default=0.0, ge=0, lt=1)
    paid: bool = False
    reservation_type: ReservationType = ReservationType.STANDARD

    class Config:
        from_attributes = True

    @model_validator(mode="after")
    def check_dates_and_price(self) -> "Reservation":
        if self.start_date and self.end_date and self.start_date > self.end_date:
            raise ValueError("Start date must not be after end date")
        self._recalculate_total()
        return self

    # ==================== FACTORY METHOD ====================
    @classmethod
    def create(
        cls,
        customer: Customer,
        start_date: date,
        end_date: date,
        payment_method: Optional[PaymentMethod] = None,
        reservation_id: Optional[str] = None,
        **kwargs
    ) -> "Reservation":
        """Create a new draft reservation without rooms"""
        if reservation_id is not None:
            kwargs["reservation_id"] = reservation_id
        return cls(
            customer=customer,
            start_date=start_date,
            end_date=end_date,
            payment_method=payment_method,
            **kwargs
        )

    # ==================== MODIFICATION METHODS ====================
    def add_room(self, room: Optional[Room]) -> None:
        """Add a room if it is currently available, otherwise ignore it"""
        if room is None or not room.is_available():
            return

        self.rooms.append(room)
        self._recalculate_total()

    def change_dates(self, new_start: Optional[date], new_end: Optional[date]) -> bool:
        """Move the stay to a new date range"""
        if new_start is None or new_end is None:
            return False

        if new_start > new_end:
            return False

        self.start_date = new_start
        self.end_date = new_end
        self._recalculate_total()
        return True

    def set_payment_method(self, payment_method: Optional[PaymentMethod]) -> None:
        self.payment_method = payment_method

    # ==================== STATE TRANSITION METHODS ====================
    def process_payment(self) -> bool:
        """Charge the configured payment method once"""
        if self.paid:
            logger.warning("Reservation %s has already been paid", self.reservation_id)
            return False

        if self.payment_method is None:
            logger.warning("Reservation %s has no payment method configured", self.reservation_id)
            return False

        success = self.payment_method.attempt_payment(self.get_total_price())
        if success:
            self.paid = True
            logger.info("Payment for reservation %s processed successfully", self.reservation_id)

        return success

    # ==================== QUERY METHODS ====================
    def get_total_price(self) -> float:
        """Total due, after any discount"""
        return self.base_total * (1 - self.discount_rate)

    def get_nights(self) -> int:
        """Get number of nights"""
        if self.start_date is None or self.end_date is None:
            return 0
        return (self.end_date - self.start_date).days

    def get_rooms(self) -> List[Room]:
        return list(self.rooms)

    def is_paid(self) -> bool:
        return self.paid

    # ==================== PRIVATE METHODS ====================
    def _recalculate_total(self) -> None:
        if not self.rooms or self.start_date is None or self.end_date is None:
            self.base_total = 0.0
            return

        nights = self.get_nights()
        self.base_total = sum(room.price_for_nights(nights) for room in self.rooms)


class VipReservation(Reservation):
    """VIP Reservation

    Same contract as Reservation: the discount only ever lowers the total, and
    payment keeps the same success/failure semantics with extra reporting.
    """

    discount_rate: float = Field(default=VIP_DISCOUNT, ge=0, lt=1)
    reservation_type: ReservationType = ReservationType.VIP
    includes_breakfast: bool = True
    vip_lounge_access: bool = True

    def process_payment(self) -> bool:
        success = super().process_payment()
        if success:
            logger.info(
                "VIP benefits activated for %s: breakfast=%s, lounge=%s, discount=%.0f%%",
                self.reservation_id,
                self.includes_breakfast,
                self.vip_lounge_access,
                self.discount_rate * 100
            )
        return success
