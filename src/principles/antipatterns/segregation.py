"""インターフェース分離の原則に違反した設計（対比用）。

顧客の操作と保守の操作を 1 つの広いインターフェース ``ATMInterface`` に
まとめている。顧客用の ``UserATM`` は保守の操作を実行できないにもかかわらず
宣言させられ、呼び出されると ``UnsupportedOperationError`` を送出する。

この失敗は許容される振る舞いではなく、**欠陥** として示している。
正しい設計は ``principles.segregation`` を参照。
"""

import logging
from abc import abstractmethod

from observability.tracing import trace_capability_operation
from principles.capability import Capability
from principles.errors import UnsupportedOperationError

logger = logging.getLogger(__name__)


class ATMInterface(Capability):
    """すべてのロールの操作を 1 つにまとめた広すぎる能力集合。"""

    @abstractmethod
    def withdraw(self) -> str: ...

    @abstractmethod
    def deposit(self) -> str: ...

    @abstractmethod
    def check_balance(self) -> str: ...

    @abstractmethod
    def refill_cash(self) -> str: ...

    @abstractmethod
    def repair(self) -> str: ...


class UserATM(ATMInterface):
    @trace_capability_operation("ATMInterface")
    def withdraw(self) -> str:
        return "Withdrawing cash"

    @trace_capability_operation("ATMInterface")
    def deposit(self) -> str:
        return "Depositing cash"

    @trace_capability_operation("ATMInterface")
    def check_balance(self) -> str:
        return "Checking balance"

    # 欠陥: 宣言した操作を実行できない
    @trace_capability_operation("ATMInterface")
    def refill_cash(self) -> str:
        logger.warning("UserATM.refill_cash は実装できない操作")
        raise UnsupportedOperationError("UserATM", "refill_cash")

    @trace_capability_operation("ATMInterface")
    def repair(self) -> str:
        logger.warning("UserATM.repair は実装できない操作")
        raise UnsupportedOperationError("UserATM", "repair")
