"""OpenTelemetry による操作トレースの計装モジュール。

ロールエンティティの操作呼び出しと、依存の組み立て（プロバイダの束縛）を
スパンとして記録する。スパンは「どのエンティティが、どの能力集合の、
どの操作を実行し、成功したか」を観測可能にする。

TracerProvider を初期化しない場合、OpenTelemetry API は no-op の
トレーサーを返すため、デコレータは既存コードの動作に影響を与えない。

デコレータ:
    trace_capability_operation: 能力集合の操作呼び出しのトレース
    trace_assembly:             依存の組み立てのトレース
"""

import functools
import logging
from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# 型変数（ParamSpec + TypeVar で mypy strict / Pylance 互換）
# ---------------------------------------------------------------------------

P = ParamSpec("P")
R = TypeVar("R")

# ---------------------------------------------------------------------------
# 設定
# ---------------------------------------------------------------------------

SERVICE_NAME = "role-scoped-capabilities"
TRACER_NAME = "principles.observability"


# ---------------------------------------------------------------------------
# TracerProvider 初期化
# ---------------------------------------------------------------------------


def init_tracer(
    service_name: str = SERVICE_NAME,
    *,
    enable_console_export: bool = False,
) -> TracerProvider:
    """TracerProvider を初期化し、グローバルに登録する。

    グローバルな TracerProvider はプロセス内で一度しか設定できない。
    既に設定済みの場合、OpenTelemetry が警告を出し、既存のものが使われ続ける。

    Args:
        service_name: サービス名（リソース属性に設定）。
        enable_console_export: True の場合、コンソールへもスパンを出力する。

    Returns:
        生成した TracerProvider。
    """
    resource = Resource.create({"service.name": service_name})
    provider = TracerProvider(resource=resource)

    if enable_console_export:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)
    logger.info("TracerProvider 初期化完了: service=%s", service_name)
    return provider


def tracer_configured() -> bool:
    """グローバルな TracerProvider が既に登録済みか判定する。

    未登録の間、OpenTelemetry API はプロキシの TracerProvider を返す。
    """
    return not isinstance(trace.get_tracer_provider(), trace.ProxyTracerProvider)


def get_tracer() -> trace.Tracer:
    """トレーサーのインスタンスを取得する。

    TracerProvider 未設定時はプロキシトレーサーが返り、
    後から設定された TracerProvider に処理が委譲される。
    """
    return trace.get_tracer(TRACER_NAME)


# ---------------------------------------------------------------------------
# デコレータ: 能力集合の操作
# ---------------------------------------------------------------------------


def _entity_type(args: tuple[Any, ...]) -> str:
    # メソッドとして呼ばれた場合、先頭引数がエンティティ
    if not args:
        return "unknown"
    return type(args[0]).__name__


def trace_capability_operation(
    capability: str,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """能力集合の操作呼び出しをトレースするデコレータ。

    スパン名は ``"<capability>.<操作名>"`` となる。
    例外発生時は ``capability.status=error`` を記録し、例外を再送出する。

    記録する属性:
        - capability.name: 能力集合名
        - capability.operation: 操作名
        - entity.type: 操作を実行したエンティティのクラス名
        - capability.status: 実行結果（"success" / "error"）

    Args:
        capability: 操作が属する能力集合の名前。

    Returns:
        デコレートされた関数。

    使用方法::

        class CustomerTerminal(CustomerOperations):
            @trace_capability_operation("CustomerOperations")
            def withdraw(self) -> str:
                ...
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        tracer = get_tracer()
        span_name = f"{capability}.{func.__name__}"

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            with tracer.start_as_current_span(
                span_name,
                attributes={
                    "capability.name": capability,
                    "capability.operation": func.__name__,
                    "entity.type": _entity_type(args),
                },
            ) as span:
                try:
                    result = func(*args, **kwargs)
                    span.set_attribute("capability.status", "success")
                    return result
                except Exception as exc:
                    span.set_attribute("capability.status", "error")
                    span.record_exception(exc)
                    raise

        return wrapper

    return decorator


# ---------------------------------------------------------------------------
# デコレータ: 依存の組み立て
# ---------------------------------------------------------------------------


def trace_assembly(
    operation_name: str | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """依存の組み立てをトレースするデコレータ。

    束縛した抽象・プロバイダ名は、ラップされた関数の側で
    ``trace.get_current_span()`` に ``assembly.abstraction`` /
    ``assembly.provider`` として設定する。

    Args:
        operation_name: スパン名。省略時は関数の修飾名を使用する。

    Returns:
        デコレートされた関数。
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        tracer = get_tracer()

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            name = operation_name or func.__qualname__
            with tracer.start_as_current_span(
                name,
                attributes={
                    "assembly.operation": name,
                    "assembly.service": SERVICE_NAME,
                },
            ) as span:
                try:
                    result = func(*args, **kwargs)
                    span.set_attribute("assembly.status", "success")
                    return result
                except Exception as exc:
                    span.set_attribute("assembly.status", "error")
                    span.record_exception(exc)
                    raise

        return wrapper

    return decorator
