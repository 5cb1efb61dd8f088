from abc import abstractmethod

from flight_reservation.customer.domain.entity import Customer
from flight_reservation.shared.domain import Repository


class CustomerRepository(Repository[Customer, str]):
    """顧客リポジトリのインターフェース（ID はメールアドレス）"""

    @abstractmethod
    def save(self, customer: Customer) -> None:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, email: str) -> Customer | None:
        """メールアドレスで検索する"""
        raise NotImplementedError
