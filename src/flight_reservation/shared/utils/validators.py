from decimal import Decimal, InvalidOperation


def to_decimal(v: object) -> Decimal:
    """任意の値を有限の Decimal に変換する

    Money の生成時や Pydantic の field_validator (mode="before") から呼び出す。
    str 経由で変換し、NaN・Infinity は金額として扱えないため ValueError とする。
    """
    if isinstance(v, bool):
        raise ValueError(f"Invalid amount: {v!r}")
    if isinstance(v, Decimal):
        amount = v
    else:
        try:
            amount = Decimal(str(v))
        except InvalidOperation as e:
            raise ValueError(f"Invalid amount: {v!r}") from e
    if not amount.is_finite():
        raise ValueError(f"Amount must be finite: {v!r}")
    return amount
