"""設計原則サンプルで使用する例外の定義。

正しい設計（``principles.segregation`` / ``substitution`` / ``inversion``）は
エラー経路を持たない。ここで定義する例外は次の 2 箇所でのみ送出される:

- ``UnsupportedOperationError``: 誤った設計（``principles.antipatterns``）が
  実装できない操作を呼び出されたとき。これは対比用の **欠陥** である。
- ``ProviderNotFoundError`` / ``ProviderContractError``: 組み立て
  （``principles.assembly``）時の登録・解決の失敗。
"""


class PrinciplesError(Exception):
    """本プロジェクトのすべての例外の基底クラス。"""


class UnsupportedOperationError(PrinciplesError, NotImplementedError):
    """エンティティが宣言した操作を実際には実行できないことを示す。

    広すぎるインターフェースや誤った継承により、実装不可能な操作を
    宣言させられたエンティティが呼び出し時に送出する。

    Attributes:
        entity: 操作を呼び出されたエンティティのクラス名。
        operation: 呼び出された操作名。
    """

    def __init__(self, entity: str, operation: str) -> None:
        self.entity = entity
        self.operation = operation
        super().__init__(f"{entity} does not support '{operation}'")


class ProviderNotFoundError(PrinciplesError, LookupError):
    """指定された名前のプロバイダが登録されていない。"""

    def __init__(self, abstraction: str, name: str) -> None:
        self.abstraction = abstraction
        self.name = name
        super().__init__(f"no provider '{name}' registered for {abstraction}")


class ProviderContractError(PrinciplesError, TypeError):
    """プロバイダの登録または生成が抽象の契約に違反した。"""
