"""依存の組み立て（Assembler）。

利用者の外側で、抽象に対する具体的なプロバイダを選び、利用者の生成時に
束縛する。利用者のコードはプロバイダの型を知らないため、プロバイダの
差し替えは ``Assembler`` への指示（プロバイダ名）だけで完結する。

使用方法::

    assembler = default_assembler()
    phone = assembler.assemble(Phone, Charger, "wireless")
    phone.charge_battery()  # -> "Charging wirelessly"
"""

import logging
from collections.abc import Callable
from typing import TypeVar

from opentelemetry import trace

from observability.tracing import trace_assembly
from principles.capability import Capability, is_capability_interface
from principles.errors import ProviderContractError, ProviderNotFoundError
from principles.inversion import (
    Charger,
    EmailSender,
    MessageSender,
    SmsSender,
    WiredCharger,
    WirelessCharger,
)

logger = logging.getLogger(__name__)

A = TypeVar("A", bound=Capability)
C = TypeVar("C")


class Assembler:
    """抽象ごとに、名前付きのプロバイダファクトリを保持する組み立て役。"""

    def __init__(self) -> None:
        self._factories: dict[type[Capability], dict[str, Callable[[], Capability]]] = {}

    def register(
        self,
        abstraction: type[A],
        name: str,
        factory: Callable[[], A],
    ) -> None:
        """プロバイダファクトリを名前付きで登録する。

        事前条件 (Precondition):
            - ``abstraction`` は能力インターフェースであること
            - ``name`` は空文字列ではないこと

        Raises:
            AssertionError: 事前条件に違反した場合。
            ProviderContractError: 同じ抽象に同じ名前が既に登録されている場合。
        """
        assert is_capability_interface(
            abstraction
        ), f"{abstraction!r} is not a capability interface"
        assert name, "name must not be empty"

        bindings = self._factories.setdefault(abstraction, {})
        if name in bindings:
            raise ProviderContractError(
                f"provider '{name}' is already registered for {abstraction.__name__}"
            )
        bindings[name] = factory
        logger.info("プロバイダ登録: %s -> %s", abstraction.__name__, name)

    def providers(self, abstraction: type[Capability]) -> tuple[str, ...]:
        """抽象に登録されたプロバイダ名を登録順に返す。"""
        return tuple(self._factories.get(abstraction, {}))

    def provide(self, abstraction: type[A], name: str) -> A:
        """名前で指定したプロバイダを生成する。

        Raises:
            ProviderNotFoundError: プロバイダが登録されていない場合。
            ProviderContractError: 生成物が抽象を実装していない場合。
        """
        try:
            factory = self._factories[abstraction][name]
        except KeyError:
            raise ProviderNotFoundError(abstraction.__name__, name) from None

        provider = factory()
        if not isinstance(provider, abstraction):
            raise ProviderContractError(
                f"provider '{name}' built {type(provider).__name__}, "
                f"which does not implement {abstraction.__name__}"
            )
        return provider

    @trace_assembly("assembler.assemble")
    def assemble(
        self,
        consumer_factory: Callable[[A], C],
        abstraction: type[A],
        name: str,
    ) -> C:
        """プロバイダを選んで束縛し、利用者を生成する。

        Args:
            consumer_factory: 抽象を 1 つ受け取って利用者を生成する呼び出し可能オブジェクト。
            abstraction: 利用者が依存する抽象。
            name: 束縛するプロバイダの登録名。

        Returns:
            プロバイダを束縛した利用者。
        """
        provider = self.provide(abstraction, name)
        trace.get_current_span().set_attributes(
            {
                "assembly.abstraction": abstraction.__name__,
                "assembly.provider": type(provider).__name__,
            }
        )
        consumer = consumer_factory(provider)
        logger.info(
            "組み立て完了: %s <- %s (%s)",
            type(consumer).__name__,
            type(provider).__name__,
            abstraction.__name__,
        )
        return consumer


def default_assembler() -> Assembler:
    """サンプルの全プロバイダを登録済みの ``Assembler`` を返す。"""
    assembler = Assembler()
    assembler.register(Charger, "wired", WiredCharger)
    assembler.register(Charger, "wireless", WirelessCharger)
    assembler.register(MessageSender, "email", EmailSender)
    assembler.register(MessageSender, "sms", SmsSender)
    return assembler
