from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from flight_reservation.shared.config import ReservationSettings


@dataclass(frozen=True)
class WalletRegistry:
    """ウォレットの認証情報（パスワード -> メールアドレス）

    プロセス起動時に一度だけ生成し、以降は読み取り専用。
    """

    accounts: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "accounts", MappingProxyType(dict(self.accounts)))

    def verify(self, email: str, password: str) -> bool:
        """パスワードが登録済みで、対応するメールアドレスが完全一致するか"""
        return password in self.accounts and self.accounts[password] == email

    @classmethod
    def from_settings(cls, settings: ReservationSettings) -> WalletRegistry:
        return cls(accounts=settings.wallet_accounts)
