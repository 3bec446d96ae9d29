"""3 つの設計原則のサンプルを決まった順序で呼び出すデモ。

使い方:
    python -m principles.demo
"""

import logging

from observability.tracing import init_tracer, tracer_configured
from principles.antipatterns import inversion as flawed_inversion
from principles.antipatterns import segregation as flawed_segregation
from principles.antipatterns import substitution as flawed_substitution
from principles.assembly import default_assembler
from principles.capability import capability_set, declared_capabilities, perform_all
from principles.errors import UnsupportedOperationError
from principles.inversion import Charger, MessageSender, Notification, Phone
from principles.segregation import ATMMachine, CustomerTerminal, TechnicianConsole
from principles.substitution import Eagle, Ostrich, Penguin, Sparrow, feed, take_flight

logger = logging.getLogger(__name__)

NOTIFICATION_MESSAGE = "Your order has shipped"


def run_demo() -> list[str]:
    """正しい設計の全操作を呼び出し、出力行を返す。

    事後条件 (Postcondition):
        - 例外を送出しないこと（正しい設計にはエラー経路がない）
    """
    lines: list[str] = []

    # インターフェース分離: 各エンティティが宣言した能力集合の全操作
    for entity in (CustomerTerminal(), TechnicianConsole(), ATMMachine()):
        for interface in declared_capabilities(entity):
            for message in perform_all(entity, interface):
                lines.append(f"{type(entity).__name__}: {message}")

    # 置換: 基底カテゴリのルーチンはすべての鳥に、飛行は Flyer にだけ
    for bird in (Sparrow(), Eagle(), Penguin(), Ostrich()):
        lines.append(f"{type(bird).__name__}: {feed(bird)}")
    for flyer in (Sparrow(), Eagle()):
        lines.append(f"{type(flyer).__name__}: {take_flight(flyer)}")

    # 依存性逆転: 同じ利用者に各プロバイダを束縛する
    assembler = default_assembler()
    for name in assembler.providers(Charger):
        phone = assembler.assemble(Phone, Charger, name)
        lines.append(f"Phone[{name}]: {phone.charge_battery()}")
    for name in assembler.providers(MessageSender):
        notification = assembler.assemble(Notification, MessageSender, name)
        lines.append(f"Notification[{name}]: {notification.notify(NOTIFICATION_MESSAGE)}")

    logger.info("デモ完了: %d 行", len(lines))
    return lines


def run_antipattern_demo() -> list[str]:
    """誤った設計を呼び出し、発生した欠陥を出力行として返す。

    ``UnsupportedOperationError`` は表示のためだけに捕捉する。
    """
    lines: list[str] = []

    atm = flawed_segregation.UserATM()
    for operation in capability_set(flawed_segregation.ATMInterface).operations:
        try:
            lines.append(f"UserATM: {getattr(atm, operation)()}")
        except UnsupportedOperationError as exc:
            lines.append(f"UserATM: DEFECT {exc}")

    for bird in (flawed_substitution.Sparrow(), flawed_substitution.Penguin()):
        try:
            lines.append(f"{type(bird).__name__}: {flawed_substitution.make_it_fly(bird)}")
        except UnsupportedOperationError as exc:
            lines.append(f"{type(bird).__name__}: DEFECT {exc}")

    phone = flawed_inversion.Phone()
    lines.append(f"Phone[hard-wired]: {phone.charge_battery()}")
    return lines


def main() -> int:
    """デモを実行して出力する。"""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # TracerProvider はプロセス内で一度だけ登録できる
    if not tracer_configured():
        init_tracer()

    print("[corrected]")
    for line in run_demo():
        print(f"  {line}")

    print("[flawed]")
    for line in run_antipattern_demo():
        print(f"  {line}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
