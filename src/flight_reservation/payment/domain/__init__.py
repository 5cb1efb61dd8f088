from .strategy import CreditCard, PaymentStrategy, Wallet
from .value_object import WalletRegistry

__all__ = ["PaymentStrategy", "CreditCard", "Wallet", "WalletRegistry"]
