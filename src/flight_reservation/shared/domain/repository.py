from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """Repository 基底クラス

    - 集約の保管を抽象化する
    - カタログ（フライト・顧客）も注文も同じインターフェースで扱う
    """

    @abstractmethod
    def save(self, aggregate: T) -> None:
        """集約を保存する（同じ ID なら上書き）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        """IDで集約を検索する"""
        raise NotImplementedError
