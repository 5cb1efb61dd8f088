from flight_reservation.order.domain.enum import OrderRule
from flight_reservation.shared.domain.exception import BusinessRuleViolationException


class InvalidOrder(BusinessRuleViolationException):
    """注文が搭乗禁止・座席数のルールに違反した場合

    rule: 違反したルール
    subject: 違反の対象（顧客名・乗客名、またはフライト番号）
    """

    def __init__(self, rule: OrderRule, subject: str) -> None:
        self.rule = rule
        self.subject = subject
        super().__init__(f"Order violates {rule.value} rule: {subject}")


class PaymentFailed(BusinessRuleViolationException):
    """決済手段が支払いを拒否した場合（注文は OPEN のまま）"""

    def __init__(self, order_id: object) -> None:
        self.order_id = order_id
        super().__init__(f"Payment failed for order {order_id}")
