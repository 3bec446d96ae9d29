"""テスト共通のフィクスチャ。

スパンを検証できるよう、テストモジュールの import より前に
インメモリのエクスポータを持つ TracerProvider をグローバルに登録する。
"""

import pytest
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import (
    InMemorySpanExporter,
)

_EXPORTER = InMemorySpanExporter()
_PROVIDER = TracerProvider()
_PROVIDER.add_span_processor(SimpleSpanProcessor(_EXPORTER))
trace.set_tracer_provider(_PROVIDER)


@pytest.fixture
def span_exporter() -> InMemorySpanExporter:
    """空の状態のインメモリエクスポータを返す。"""
    _EXPORTER.clear()
    yield _EXPORTER
    _EXPORTER.clear()
