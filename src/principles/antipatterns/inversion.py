"""依存性逆転の原則に違反した設計（対比用）。

``Phone`` が具体的な ``WiredCharger`` を自分の内部で生成している。
充電方式を変えるには ``Phone`` のコード自体を書き換えるしかない。

正しい設計は ``principles.inversion`` を参照。
"""

from principles.inversion import WiredCharger


class Phone:
    def __init__(self) -> None:
        # 欠陥: 具体的なプロバイダへの直接依存
        self.charger = WiredCharger()

    def charge_battery(self) -> str:
        return self.charger.charge()
