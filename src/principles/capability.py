"""能力集合（Capability Set）の定義と検査。

能力インターフェースは ``Capability`` を直接の基底クラスに持つ抽象クラスで、
1 つの利用者ロールに必要な操作だけを宣言する。ロールエンティティは
自分が本当に実行できる能力インターフェースだけを継承して宣言する。

不変条件 (Invariant):
    - 能力インターフェースの操作は、それを宣言するどのエンティティでも
      意味のある実装が可能であること（失敗するだけのプレースホルダは不可）
    - ロールエンティティは宣言した能力集合の操作を 100% 実装すること。
      ``abc`` により、抽象操作を 1 つでも実装し忘れたクラスは
      インスタンス化できない（``TypeError``）

``declared_capabilities`` による型の検査はデモと検証のためだけに使い、
操作のディスパッチには使わない。
"""

import inspect
import logging
from abc import ABC
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


class Capability(ABC):
    """すべての能力インターフェースの基底クラス。

    ``Capability`` を直接継承したクラスが 1 つの能力集合を表す。
    """


# ---------------------------------------------------------------------------
# データクラス: 能力集合
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CapabilitySet:
    """名前付きの、変更不可能な操作名の並び。

    不変条件 (Invariant):
        - ``name`` は空文字列ではないこと
        - ``operations`` は 1 つ以上の操作を含むこと
        - ``operations`` に重複がないこと

    Attributes:
        name: 能力集合の名前（能力インターフェースのクラス名）。
        operations: 操作名。宣言順。

    Raises:
        AssertionError: 不変条件に違反した場合。
    """

    name: str
    operations: tuple[str, ...]

    def __post_init__(self) -> None:
        assert self.name, "name must not be empty"
        assert self.operations, f"{self.name} must declare at least one operation"
        assert len(set(self.operations)) == len(
            self.operations
        ), f"{self.name} declares duplicate operations: {self.operations}"


# ---------------------------------------------------------------------------
# 検査
# ---------------------------------------------------------------------------


def is_capability_interface(cls: object) -> bool:
    """``cls`` が能力インターフェース（``Capability`` の直接のサブクラス）か判定する。"""
    return inspect.isclass(cls) and Capability in cls.__bases__


def capability_set(interface: type[Capability]) -> CapabilitySet:
    """能力インターフェースから能力集合を導出する。

    インターフェース本体で定義された公開メソッドを、宣言順に操作として集める。

    事前条件 (Precondition):
        - ``interface`` は能力インターフェースであること

    Args:
        interface: 能力インターフェース。

    Returns:
        導出した ``CapabilitySet``。

    Example::

        capability_set(CustomerOperations)
        # -> CapabilitySet(name="CustomerOperations",
        #                  operations=("withdraw", "deposit", "check_balance"))
    """
    assert is_capability_interface(
        interface
    ), f"{interface!r} is not a capability interface"

    operations = tuple(
        name
        for name, member in vars(interface).items()
        if not name.startswith("_") and inspect.isfunction(member)
    )
    return CapabilitySet(name=interface.__name__, operations=operations)


def declared_capabilities(entity: object) -> tuple[type[Capability], ...]:
    """エンティティ（インスタンスまたはクラス）が宣言する能力インターフェースを返す。

    クラス階層を MRO 順にたどり、能力インターフェースだけを取り出す。
    """
    cls = entity if inspect.isclass(entity) else type(entity)
    return tuple(base for base in cls.__mro__ if is_capability_interface(base))


def perform_all(entity: Capability, interface: type[Capability], *args: Any) -> list[str]:
    """能力集合のすべての操作をエンティティに対して呼び出し、確認メッセージを集める。

    ``args`` はすべての操作にそのまま渡される。引数を持たない能力集合では省略する。

    事前条件 (Precondition):
        - ``entity`` は ``interface`` を宣言していること

    事後条件 (Postcondition):
        - 各操作の確認メッセージは空でない文字列であること

    Args:
        entity: 操作を実行するロールエンティティ。
        interface: 呼び出す能力集合の能力インターフェース。
        *args: 各操作に渡す引数。

    Returns:
        各操作が返した確認メッセージ（操作の宣言順）。

    Raises:
        AssertionError: 事前条件または事後条件に違反した場合。
    """
    assert interface in declared_capabilities(
        entity
    ), f"{type(entity).__name__} does not declare {interface.__name__}"

    operations = capability_set(interface).operations
    messages = []
    for operation in operations:
        logger.debug("%s.%s on %s", interface.__name__, operation, type(entity).__name__)
        messages.append(getattr(entity, operation)(*args))

    assert all(
        isinstance(message, str) and message for message in messages
    ), f"postcondition failed: {messages}"
    return messages
