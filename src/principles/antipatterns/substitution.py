"""リスコフの置換原則に違反した設計（対比用）。

基底カテゴリ ``Bird`` が飛行（``fly``）まで約束しているため、飛べない
``Penguin`` は基底カテゴリの操作を失敗させるしかない。``Bird`` に対して
書かれた ``make_it_fly`` に ``Penguin`` を渡すと、置換によって新しい
失敗モードが生まれる。

正しい設計は ``principles.substitution`` を参照。
"""

import logging

from observability.tracing import trace_capability_operation
from principles.capability import Capability
from principles.errors import UnsupportedOperationError

logger = logging.getLogger(__name__)


class Bird(Capability):
    @trace_capability_operation("Bird")
    def eat(self) -> str:
        return "I can eat"

    @trace_capability_operation("Bird")
    def fly(self) -> str:
        return "I can fly"


class Sparrow(Bird):
    pass


class Penguin(Bird):
    # 欠陥: 基底カテゴリの約束を破る
    @trace_capability_operation("Bird")
    def fly(self) -> str:
        logger.warning("Penguin.fly は実装できない操作")
        raise UnsupportedOperationError("Penguin", "fly")


def make_it_fly(bird: Bird) -> str:
    return bird.fly()
