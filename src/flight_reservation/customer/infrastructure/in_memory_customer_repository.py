from flight_reservation.customer.domain.entity import Customer
from flight_reservation.customer.domain.repository import CustomerRepository


class InMemoryCustomerRepository(CustomerRepository):
    """プロセス内の辞書を使用した CustomerRepository の具象実装"""

    def __init__(self) -> None:
        self._customers: dict[str, Customer] = {}

    def save(self, customer: Customer) -> None:
        self._customers[customer.email] = customer

    def find_by_id(self, email: str) -> Customer | None:
        return self._customers.get(email)
