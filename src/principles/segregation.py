"""インターフェース分離の原則（正しい設計）。

ATM の操作を、利用者ロールごとに 2 つの能力集合へ分割する:

- ``CustomerOperations``: 顧客が使う操作（引き出し・預け入れ・残高照会）
- ``MaintenanceOperations``: 保守担当者が使う操作（現金補充・修理）

顧客用端末は顧客向けの操作だけを、保守コンソールは保守の操作だけを宣言する。
両方を本当に実行できる ATM 本体だけが両方の能力集合を宣言する。
どのエンティティも、宣言した操作の呼び出しで失敗しない。

対比用の誤った設計は ``principles.antipatterns.segregation`` を参照。
"""

from abc import abstractmethod

from observability.tracing import trace_capability_operation
from principles.capability import Capability

# ---------------------------------------------------------------------------
# 能力インターフェース
# ---------------------------------------------------------------------------


class CustomerOperations(Capability):
    """顧客ロール向けの能力集合。"""

    @abstractmethod
    def withdraw(self) -> str: ...

    @abstractmethod
    def deposit(self) -> str: ...

    @abstractmethod
    def check_balance(self) -> str: ...


class MaintenanceOperations(Capability):
    """保守担当者ロール向けの能力集合。"""

    @abstractmethod
    def refill_cash(self) -> str: ...

    @abstractmethod
    def repair(self) -> str: ...


# ---------------------------------------------------------------------------
# ロールエンティティ
# ---------------------------------------------------------------------------


class CustomerTerminal(CustomerOperations):
    """顧客が操作する端末。保守の操作は宣言しない。"""

    @trace_capability_operation("CustomerOperations")
    def withdraw(self) -> str:
        return "Withdrawing cash"

    @trace_capability_operation("CustomerOperations")
    def deposit(self) -> str:
        return "Depositing cash"

    @trace_capability_operation("CustomerOperations")
    def check_balance(self) -> str:
        return "Checking balance"


class TechnicianConsole(MaintenanceOperations):
    """保守担当者が操作するコンソール。顧客の操作は宣言しない。"""

    @trace_capability_operation("MaintenanceOperations")
    def refill_cash(self) -> str:
        return "Refilling cash"

    @trace_capability_operation("MaintenanceOperations")
    def repair(self) -> str:
        return "Repairing machine"


class ATMMachine(CustomerTerminal, TechnicianConsole):
    """ATM 本体。両方のロールの操作を実際に提供できるため、両方を宣言する。"""
