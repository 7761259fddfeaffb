"""Hotel booking demonstration

Bootstraps the registries from the configured CSV files and walks through
the booking lifecycle: reservations, VIP pricing, payment and date changes.
"""
import logging
from datetime import date, timedelta
from typing import Optional

from application.services import CustomerRegistry, RoomRegistry, ReservationRegistry
from domain.entities import Reservation, VipReservation
from domain.payment_methods import CardPayment, BankTransferPayment, CryptoPayment
from infrastructure.config import PropertiesConfig, HotelSettings
from infrastructure.loaders import load_customers, load_rooms
from infrastructure.logging_config import setup_logger
from infrastructure.repositories.in_memory_repositories import (
    InMemoryCustomerRepository, InMemoryRoomRepository, InMemoryReservationRepository
)

logger = logging.getLogger(__name__)


def build_registries(settings: HotelSettings):
    """Create the three registries and fill customers and rooms from the data files"""
    customers = CustomerRegistry(InMemoryCustomerRepository())
    rooms = RoomRegistry(InMemoryRoomRepository())
    reservations = ReservationRegistry(InMemoryReservationRepository())

    for customer in load_customers(settings.customers_file):
        customers.add(customer)
    for room in load_rooms(settings.rooms_file, settings.standard_price, settings.suite_price):
        rooms.add(room)

    return customers, rooms, reservations


def describe_reservation(reservation: Reservation) -> str:
    """Works for any Reservation, VIP included"""
    lines = [
        f"Reservation: {reservation.reservation_id}",
        f"Customer: {reservation.customer.name}",
        f"Total price: ${reservation.get_total_price():,.2f}",
    ]
    if reservation.payment_method is not None:
        lines.append(f"Payment method: {reservation.payment_method.display_name()}")

    if isinstance(reservation, VipReservation):
        lines.append("Type: VIP reservation")
        lines.append(f"Breakfast included: {reservation.includes_breakfast}")
        lines.append(f"VIP lounge access: {reservation.vip_lounge_access}")
    else:
        lines.append("Type: Standard reservation")
    return "\n".join(lines)


def run_demo(settings: Optional[HotelSettings] = None, today: Optional[date] = None) -> dict:
    """Run the booking walkthrough and return a summary of the final state"""
    settings = settings or HotelSettings.from_config(PropertiesConfig())
    today = today or date.today()

    customers, rooms, reservations = build_registries(settings)
    print(f"=== {settings.hotel_name.upper()} - RESERVATION SYSTEM ===\n")

    card = CardPayment(card_number="1234567890123456", holder_name="María Victoria")
    transfer = BankTransferPayment(account_number="987654321", bank_name="Banco Nacional")
    crypto = CryptoPayment(currency_code="BTC", wallet_address="1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa")

    print("Available payment methods:")
    for method in (card, transfer, crypto):
        print(f"- {method.display_name()}")
    print()

    start = today + timedelta(days=7)
    end = today + timedelta(days=10)

    plan = [
        (Reservation, "R001", "C001", card, ["101"]),
        (Reservation, "R002", "C002", transfer, ["102", "201"]),
        (VipReservation, "R003", "C003", crypto, ["202"]),
    ]
    booked = []
    for reservation_cls, reservation_id, customer_id, method, room_numbers in plan:
        customer = customers.find_by_id(customer_id)
        if customer is None:
            logger.warning("Customer %s not found, skipping reservation %s", customer_id, reservation_id)
            continue

        extra = {"discount_rate": settings.vip_discount} if reservation_cls is VipReservation else {}
        reservation = reservation_cls.create(
            customer, start, end, method, reservation_id=reservation_id, **extra
        )
        for number in room_numbers:
            reservation.add_room(rooms.find_by_number(number))
        if reservations.create(reservation):
            booked.append(reservation)

    for reservation in booked:
        print(f"{reservation.reservation_id} total: ${reservation.get_total_price():,.2f}")
        print(f"{reservation.reservation_id} paid: {reservation.process_payment()}")
    print()

    first = reservations.find_by_id("R001")
    if first is not None and first.change_dates(today + timedelta(days=14), today + timedelta(days=17)):
        print(f"R001 moved to {first.start_date} - {first.end_date}, "
              f"new total: ${first.get_total_price():,.2f}\n")

    vip = reservations.find_by_id("R003")
    if vip is not None:
        print(describe_reservation(vip))
        print()

    summary = {
        "customers": customers.count(),
        "rooms": rooms.count(),
        "reservations": reservations.count(),
        "available_rooms": len(rooms.list_available()),
    }
    print("--- Summary ---")
    for key, value in summary.items():
        print(f"{key.replace('_', ' ').capitalize()}: {value}")
    return summary


def main():
    setup_logger(level=logging.INFO)
    run_demo()


if __name__ == "__main__":
    main()
