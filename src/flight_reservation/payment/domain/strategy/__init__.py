from .credit_card import CreditCard
from .payment_strategy import PaymentStrategy
from .wallet import Wallet

__all__ = ["PaymentStrategy", "CreditCard", "Wallet"]
