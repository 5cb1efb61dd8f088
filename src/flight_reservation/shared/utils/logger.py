from aws_lambda_powertools import Logger

from flight_reservation.shared.config import get_settings


def get_logger(service_name: str | None = None) -> Logger:
    """サービス名とログレベルを設定から解決した Logger を返す"""
    settings = get_settings()
    return Logger(
        service=service_name or settings.service_name,
        level=settings.log_level,
    )
