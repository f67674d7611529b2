"""
Tests for the StyleNormalizer.

Verifies:
1. Successful formatting selects the dialect parser and passes the style through.
2. Engine rejections yield a repaired candidate and suggestions (never raise).
3. Acquisition failure on every source yields the stable unavailable error, within the timeout.
4. Acquisition happens once per instance, even under concurrent first calls.
5. Formatting canonical text is a fixed point.
"""

import asyncio
import time

from ui_splice.config import StyleConfig
from ui_splice.core.formatter import ENGINE_UNAVAILABLE_MESSAGE, EngineUnavailableError, StyleNormalizer
from ui_splice.enums import Dialect


def test_format_success_uses_dialect_parser(fake_engine, make_source):
  normalizer = StyleNormalizer(sources=[make_source(engine=fake_engine)])
  style = StyleConfig(tabWidth=4)

  res = asyncio.run(normalizer.format("const a = 1;   \n", "src/Card.tsx", style))

  assert res.success
  assert res.formatted_text == "const a = 1;\n"
  assert res.dialect == Dialect.SCRIPT
  assert res.parser == "typescript"
  assert res.engine == "fake"

  text, parser, file_name, used_style = fake_engine.calls[0]
  assert parser == "typescript"
  assert file_name == "src/Card.tsx"
  assert used_style.tab_width == 4


def test_format_without_hint_uses_fallback_file_name(fake_engine, make_source):
  normalizer = StyleNormalizer(sources=[make_source(engine=fake_engine)])
  res = asyncio.run(normalizer.format("<div />"))

  assert res.success
  assert res.parser == "babel"
  assert fake_engine.calls[0][2] == "component.jsx"


def test_format_style_dialect(fake_engine, make_source):
  normalizer = StyleNormalizer(sources=[make_source(engine=fake_engine)])
  res = asyncio.run(normalizer.format("a{color:red}", "theme.scss"))

  assert res.dialect == Dialect.STYLE
  assert res.parser == "scss"
  assert fake_engine.calls[0][2] == "theme.scss"


def test_format_failure_repairs_odd_double_quotes(make_engine, make_source):
  """
  Scenario: the engine rejects text with an unterminated string.
  Expectation: success False, candidate ends with an appended closing quote.
  """
  engine = make_engine(fail_with="SyntaxError: Unterminated string constant. (1:11)")
  normalizer = StyleNormalizer(sources=[make_source(engine=engine)])

  res = asyncio.run(normalizer.format('const a = "hello;', "a.js"))

  assert not res.success
  assert res.formatted_text == 'const a = "hello;"'
  assert res.formatted_text.endswith('"')
  assert "Unterminated" in res.error
  assert any("unterminated" in s.lower() for s in res.suggestions)
  assert res.engine == "fake"


def test_format_failure_appends_missing_closers(make_engine, make_source):
  engine = make_engine(fail_with="SyntaxError: Unexpected token (3:1)")
  normalizer = StyleNormalizer(sources=[make_source(engine=engine)])

  res = asyncio.run(normalizer.format("function f() { return [1, (2", "a.js"))

  assert not res.success
  assert res.formatted_text == "function f() { return [1, (2)]}"
  assert len(res.suggestions) == 1


def test_format_failure_unknown_message_gets_generic_suggestion(make_engine, make_source):
  engine = make_engine(fail_with="boom")
  normalizer = StyleNormalizer(sources=[make_source(engine=engine)])

  res = asyncio.run(normalizer.format("ok", "a.js"))

  assert not res.success
  assert res.error == "boom"
  assert len(res.suggestions) == 1
  assert res.formatted_text == "ok"


def test_engine_unavailable_when_all_sources_fail(make_source):
  """
  Scenario: the local source is missing and the remote source hangs.
  Expectation: a structured failure within the configured timeout.
  """
  local = make_source(error=EngineUnavailableError("no prettier"), name="local")
  remote = make_source(engine=object(), delay=30.0, timeout=0.05, name="remote")
  normalizer = StyleNormalizer(sources=[local, remote])

  start = time.monotonic()
  res = asyncio.run(normalizer.format("const a = 1", "a.js"))
  elapsed = time.monotonic() - start

  assert not res.success
  assert res.error == ENGINE_UNAVAILABLE_MESSAGE
  assert res.formatted_text is None
  assert res.suggestions == []
  assert elapsed < 5.0


def test_unexpected_source_exception_falls_through(fake_engine, make_source):
  broken = make_source(error=ValueError("corrupt cache"), name="local")
  working = make_source(engine=fake_engine, name="remote")
  normalizer = StyleNormalizer(sources=[broken, working])

  res = asyncio.run(normalizer.format("x", "a.js"))

  assert res.success
  assert broken.attempts == 1
  assert working.attempts == 1


def test_first_source_wins(make_engine, make_source):
  first = make_source(engine=make_engine(name="local"), name="local")
  second = make_source(engine=make_engine(name="remote"), name="remote")
  normalizer = StyleNormalizer(sources=[first, second])

  res = asyncio.run(normalizer.format("x", "a.js"))

  assert res.engine == "local"
  assert second.attempts == 0


def test_engine_is_acquired_once_across_calls(fake_engine, make_source):
  source = make_source(engine=fake_engine)
  normalizer = StyleNormalizer(sources=[source])

  async def run():
    await normalizer.format("a", "a.js")
    await normalizer.format("b", "a.js")

  asyncio.run(run())
  assert source.attempts == 1
  assert len(fake_engine.calls) == 2


def test_concurrent_first_calls_share_one_acquisition(fake_engine, make_source):
  source = make_source(engine=fake_engine, delay=0.05)
  normalizer = StyleNormalizer(sources=[source])

  async def run():
    return await asyncio.gather(*(normalizer.format(f"v{i}", "a.js") for i in range(5)))

  results = asyncio.run(run())

  assert all(r.success for r in results)
  assert source.attempts == 1


def test_failed_acquisition_is_cached(make_source):
  source = make_source(error=EngineUnavailableError("missing"))
  normalizer = StyleNormalizer(sources=[source])

  async def run():
    first = await normalizer.format("a", "a.js")
    second = await normalizer.format("b", "a.js")
    return first, second

  first, second = asyncio.run(run())

  assert not first.success and not second.success
  assert source.attempts == 1


def test_fresh_instance_retries(make_source):
  source = make_source(error=EngineUnavailableError("missing"))
  asyncio.run(StyleNormalizer(sources=[source]).format("a"))
  asyncio.run(StyleNormalizer(sources=[source]).format("a"))
  assert source.attempts == 2


def test_no_sources_means_unavailable():
  normalizer = StyleNormalizer(sources=[])
  res = asyncio.run(normalizer.format("a", "a.js"))
  assert res.error == ENGINE_UNAVAILABLE_MESSAGE
  assert normalizer.acquisition_timeout == 0


def test_acquisition_timeout_is_sum_of_sources(make_source):
  normalizer = StyleNormalizer(sources=[make_source(timeout=2.0), make_source(timeout=3.5)])
  assert normalizer.acquisition_timeout == 5.5


def test_format_is_fixed_point(fake_engine, make_source):
  normalizer = StyleNormalizer(sources=[make_source(engine=fake_engine)])

  async def run():
    once = await normalizer.format("const a = 1;  \n\n\n", "a.tsx")
    twice = await normalizer.format(once.formatted_text, "a.tsx")
    return once, twice

  once, twice = asyncio.run(run())
  assert twice.formatted_text == once.formatted_text
