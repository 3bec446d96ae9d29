"""依存性逆転の原則（正しい設計）。

利用者（``Phone`` / ``Notification``）は抽象（``Charger`` / ``MessageSender``）
だけを参照し、具体的なプロバイダを生成時に外部から受け取る。利用者の
コードは具体的なプロバイダの型を一切名指ししない。どのプロバイダを束縛するかは
``principles.assembly.Assembler`` が決める。

プロバイダを差し替えても変わるのは出力メッセージの内容だけで、
利用者のロジックは変更しない。

対比用の誤った設計は ``principles.antipatterns.inversion`` を参照。
"""

import logging
from abc import abstractmethod

from observability.tracing import trace_capability_operation
from principles.capability import Capability

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# 抽象
# ---------------------------------------------------------------------------


class Charger(Capability):
    """充電の能力。"""

    @abstractmethod
    def charge(self) -> str: ...


class MessageSender(Capability):
    """メッセージ送信の能力。"""

    @abstractmethod
    def send(self, message: str) -> str: ...


# ---------------------------------------------------------------------------
# プロバイダ
# ---------------------------------------------------------------------------


class WiredCharger(Charger):
    @trace_capability_operation("Charger")
    def charge(self) -> str:
        return "Charging with a cable"


class WirelessCharger(Charger):
    @trace_capability_operation("Charger")
    def charge(self) -> str:
        return "Charging wirelessly"


class EmailSender(MessageSender):
    @trace_capability_operation("MessageSender")
    def send(self, message: str) -> str:
        return f"Sending email: {message}"


class SmsSender(MessageSender):
    @trace_capability_operation("MessageSender")
    def send(self, message: str) -> str:
        return f"Sending SMS: {message}"


# ---------------------------------------------------------------------------
# 利用者
# ---------------------------------------------------------------------------


class Phone:
    """充電器の抽象に依存する電話。

    Attributes:
        charger: 生成時に外部から束縛された充電器。
    """

    def __init__(self, charger: Charger) -> None:
        self.charger = charger

    def charge_battery(self) -> str:
        message = self.charger.charge()
        logger.debug("Phone: %s", message)
        return message


class Notification:
    """送信手段の抽象に依存する通知。

    Attributes:
        sender: 生成時に外部から束縛された送信手段。
    """

    def __init__(self, sender: MessageSender) -> None:
        self.sender = sender

    def notify(self, message: str) -> str:
        """メッセージを送信する。

        事前条件 (Precondition):
            - ``message`` は空文字列ではないこと
        """
        assert message, "message must not be empty"
        return self.sender.send(message)
