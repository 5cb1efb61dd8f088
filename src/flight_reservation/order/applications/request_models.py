from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from flight_reservation.shared.utils.validators import to_decimal


class CreateFlightOrderRequest(BaseModel):
    """フライト注文作成リクエストモデル"""

    customer_email: str = Field(..., min_length=1, description="顧客のメールアドレス")
    passenger_names: list[str] = Field(
        ...,
        min_length=1,
        description="乗客名の一覧",
        examples=[["Alice", "Bob"]],
    )
    flight_numbers: list[str] = Field(
        ...,
        min_length=1,
        description="フライト番号の一覧（搭乗順）",
        examples=[["NH001", "NH002"]],
    )
    price: Decimal = Field(..., ge=0, description="注文金額（0以上）")

    @field_validator("passenger_names")
    @classmethod
    def reject_blank_names(cls, v: list[str]) -> list[str]:
        if any(not name.strip() for name in v):
            raise ValueError("Passenger name cannot be blank")
        return v

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        return to_decimal(v)


class CreditCardPaymentRequest(BaseModel):
    """クレジットカード決済リクエストモデル"""

    number: str = Field(..., description="カード番号")
    expiration_date: datetime = Field(..., description="有効期限")
    cvv: str = Field(..., min_length=3, max_length=4, description="セキュリティコード")


class WalletPaymentRequest(BaseModel):
    """ウォレット決済リクエストモデル"""

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
