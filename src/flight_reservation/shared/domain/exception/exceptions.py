class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ResourceNotFoundException(DomainException):
    """顧客・フライト・注文などが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """予約・決済のビジネスルールに違反した場合"""

    pass
