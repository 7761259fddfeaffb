"""Domain Payment Methods

Payment is simulated: every method gates on its availability flag and then
succeeds unconditionally. New methods are added by subclassing PaymentMethod.
"""
import logging
from abc import ABC, abstractmethod

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class PaymentMethod(BaseModel, ABC):
    """Abstract payment capability used by Reservation"""

    available: bool = True

    @abstractmethod
    def display_name(self) -> str:
        """Human readable name of the method"""

    @abstractmethod
    def _charge(self, amount: float) -> None:
        """Simulate the transfer of funds"""

    def is_available(self) -> bool:
        return self.available

    def set_available(self, available: bool) -> None:
        self.available = available

    def attempt_payment(self, amount: float) -> bool:
        """Attempt a payment; fails only when the method is unavailable"""
        if not self.is_available():
            logger.warning("%s is not available", self.display_name())
            return False

        self._charge(amount)
        return True


class CardPayment(PaymentMethod):
    """Credit card payment"""

    card_number: str
    holder_name: str

    def display_name(self) -> str:
        return "Credit Card"

    @property
    def masked_number(self) -> str:
        return f"****{self.card_number[-4:]}"

    def _charge(self, amount: float) -> None:
        logger.info(
            "Processing payment of %s with credit card %s (holder: %s)",
            amount, self.masked_number, self.holder_name
        )


class BankTransferPayment(PaymentMethod):
    """Bank transfer payment"""

    account_number: str
    bank_name: str

    def display_name(self) -> str:
        return "Bank Transfer"

    def _charge(self, amount: float) -> None:
        logger.info(
            "Processing bank transfer of %s (bank: %s, account: %s)",
            amount, self.bank_name, self.account_number
        )


class CryptoPayment(PaymentMethod):
    """Cryptocurrency payment"""

    currency_code: str  # BTC, ETH, ...
    wallet_address: str

    def display_name(self) -> str:
        return f"Cryptocurrency ({self.currency_code})"

    def _charge(self, amount: float) -> None:
        logger.info(
            "Processing payment of %s with %s (wallet: %s)",
            amount, self.currency_code, self.wallet_address
        )
