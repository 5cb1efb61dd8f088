from .wallet_registry import WalletRegistry

__all__ = ["WalletRegistry"]
