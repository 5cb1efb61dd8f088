from decimal import Decimal
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from flight_reservation.shared.utils.validators import to_decimal


class ReservationSettings(BaseSettings):
    """予約システム全体の設定

    環境変数（FLIGHT_RESERVATION_ プレフィックス）で上書きできる。
    リスト・辞書は JSON 文字列で指定する。
    例: FLIGHT_RESERVATION_NO_FLY_LIST='["Peter", "Johannes"]'
    """

    model_config = SettingsConfigDict(
        env_prefix="FLIGHT_RESERVATION_",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    service_name: str = "flight-reservation"
    log_level: str = "INFO"

    # 搭乗禁止リスト（顧客名・乗客名の両方に適用）
    no_fly_list: frozenset[str] = Field(
        default=frozenset({"Peter", "Johannes"}),
    )

    # ウォレットの認証情報（パスワード -> メールアドレス）
    wallet_accounts: dict[str, str] = Field(
        default_factory=lambda: {
            "amanda1985": "amanda@ya.com",
            "qwerty": "john@amazon.eu",
        },
    )

    card_initial_balance: Decimal = Decimal("100000")
    invalid_cvv: str = "000"

    @field_validator("card_initial_balance", mode="before")
    @classmethod
    def convert_balance_to_decimal(cls, v):
        return to_decimal(v)

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache(maxsize=1)
def get_settings() -> ReservationSettings:
    """プロセス全体で共有する設定を返す（初回呼び出し時に一度だけ読み込む）"""
    return ReservationSettings()
