"""リスコフの置換原則（正しい設計）。

基底カテゴリ ``Bird`` は、すべての鳥が実際に実行できる操作（``eat``）だけを
約束する。飛行は独立した拡張能力 ``Flyer`` として分離し、本当に飛べる鳥だけが
宣言する。

- ``feed`` は ``Bird`` だけを参照するため、どの鳥を渡しても同じ出力になる
- ``take_flight`` は ``Flyer`` を要求する。``Penguin`` には ``fly`` 属性が
  そもそも存在せず、型検査でも実行時でも飛行を呼び出せない

対比用の誤った設計は ``principles.antipatterns.substitution`` を参照。
"""

from abc import abstractmethod

from observability.tracing import trace_capability_operation
from principles.capability import Capability


class Bird(Capability):
    """鳥の基底カテゴリ。拡張能力（飛行）は約束しない。"""

    @trace_capability_operation("Bird")
    def eat(self) -> str:
        return "I can eat"


class Flyer(Capability):
    """飛行の拡張能力。飛べるエンティティだけが宣言する。"""

    @abstractmethod
    def fly(self) -> str: ...


class Sparrow(Bird, Flyer):
    @trace_capability_operation("Flyer")
    def fly(self) -> str:
        return "I can fly"


class Eagle(Bird, Flyer):
    @trace_capability_operation("Flyer")
    def fly(self) -> str:
        return "I can soar"


class Penguin(Bird):
    """飛べない鳥。``Flyer`` を宣言しない。"""


class Ostrich(Bird):
    pass


# ---------------------------------------------------------------------------
# 利用者ルーチン
# ---------------------------------------------------------------------------


def feed(bird: Bird) -> str:
    """基底カテゴリの操作だけを使うルーチン。

    事後条件 (Postcondition):
        - 戻り値は渡された鳥の具体型に依存しないこと
    """
    return bird.eat()


def take_flight(flyer: Flyer) -> str:
    """拡張能力を要求するルーチン。``Flyer`` を宣言したエンティティだけを受け付ける。"""
    return flyer.fly()
