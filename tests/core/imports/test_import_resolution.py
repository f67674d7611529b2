"""
Tests for classification, merging, ordering, pruning, inference and rendering.
"""

import pytest

from ui_splice.config import StyleConfig
from ui_splice.core.imports import ImportDeclaration, ImportEngine
from ui_splice.enums import OriginClass

D = ImportDeclaration.create


@pytest.fixture
def engine():
  return ImportEngine()


@pytest.mark.parametrize(
  "module_id, origin",
  [
    ("react", OriginClass.FRAMEWORK),
    ("react-dom", OriginClass.FRAMEWORK),
    ("react/jsx-runtime", OriginClass.FRAMEWORK),
    ("@react-spring/web", OriginClass.FRAMEWORK),
    ("reactive", OriginClass.THIRD_PARTY),
    ("clsx", OriginClass.THIRD_PARTY),
    ("@tanstack/react-query", OriginClass.THIRD_PARTY),
    ("./Card", OriginClass.LOCAL),
    ("../utils", OriginClass.LOCAL),
    ("/abs/path", OriginClass.LOCAL),
    ("./Card.module.css", OriginClass.STYLE),
    ("tailwindcss/tailwind.css", OriginClass.STYLE),
    ("./theme.scss", OriginClass.STYLE),
  ],
)
def test_classify(engine, module_id, origin):
  assert engine.classify(module_id) == origin


def test_sort_and_group_order():
  engine = ImportEngine(framework_package="ui-framework")
  decls = [D("theme.css", raw="import 'theme.css';"), D("./utils", named=["cn"]), D("utility-lib", default="u"), D("ui-framework", default="UI")]

  ordered = engine.sort_and_group(decls)

  assert [d.module_id for d in ordered] == ["ui-framework", "utility-lib", "./utils", "theme.css"]


def test_sort_within_bucket_is_lexical(engine):
  ordered = engine.sort_and_group([D("zod", default="z"), D("axios", default="axios"), D("clsx", default="clsx")])
  assert [d.module_id for d in ordered] == ["axios", "clsx", "zod"]


def test_merge_with_empty_equals_sort(engine):
  decls = [D("./a", default="A"), D("react", default="React"), D("lib", named=["x"])]
  assert engine.merge(decls, []) == engine.sort_and_group(decls)
  assert engine.merge([], decls) == engine.sort_and_group(decls)


def test_merge_existing_default_wins(engine):
  existing = [D("react", default="React")]
  incoming = [D("react", default="R", named=["useState"])]

  (merged,) = engine.merge(existing, incoming)
  assert merged.default_binding == "React"
  assert merged.named_bindings == frozenset({"useState"})

  (reverse,) = engine.merge(incoming, existing)
  assert reverse.default_binding == "R"
  assert reverse.named_bindings == frozenset({"useState"})


def test_merge_takes_incoming_default_when_existing_has_none(engine):
  (merged,) = engine.merge([D("m", named=["a"])], [D("m", default="M", named=["b"])])
  assert merged.default_binding == "M"
  assert merged.named_bindings == frozenset({"a", "b"})


def test_merge_unique_module_ids(engine):
  merged = engine.merge([D("a", default="A"), D("b", default="B")], [D("b", named=["c"]), D("d", default="Dd")])
  ids = [d.module_id for d in merged]
  assert len(ids) == len(set(ids)) == 3


def test_merge_drops_raw_literal_once_bound(engine):
  (merged,) = engine.merge([D("m", raw="import 'm';")], [D("m", default="M")])
  assert merged.raw_literal is None
  assert merged.default_binding == "M"


def test_merge_keeps_raw_literal_for_side_effects(engine):
  (merged,) = engine.merge([D("./a.css", raw="import './a.css';")], [D("./a.css", raw='import "./a.css"')])
  assert merged.raw_literal == "import './a.css';"


def test_prune_unused_named(engine):
  decls = [D("ui-framework", default="Framework", named=["stateHook", "effectHook"])]
  body = "export const C = () => { const [v] = stateHook(0); return v; };"

  (pruned,) = engine.prune_unused(decls, body)

  assert pruned.default_binding is None
  assert pruned.named_bindings == frozenset({"stateHook"})


def test_prune_drops_fully_unused_and_keeps_side_effects(engine):
  decls = [D("lodash", default="_"), D("./theme.css", raw="import './theme.css';")]
  pruned = engine.prune_unused(decls, "const a = 1;")
  assert [d.module_id for d in pruned] == ["./theme.css"]


def test_prune_checks_alias_local_name(engine):
  decls = [D("./ui", named=["Button as Btn", "Card"])]
  (pruned,) = engine.prune_unused(decls, "<Btn>Go</Btn>")
  assert pruned.named_bindings == frozenset({"Button as Btn"})


def test_prune_ignores_usage_inside_import_lines(engine):
  decls = [D("m", default="M")]
  assert engine.prune_unused(decls, "import M from 'm';\nconst x = 1;") == []


def test_prune_whole_word_matching(engine):
  decls = [D("m", named=["use", "$el"])]
  (pruned,) = engine.prune_unused(decls, "useThing(); $el.focus();")
  assert pruned.named_bindings == frozenset({"$el"})


def test_infer_primitives(engine):
  decl = engine.infer_framework_needs("const [a, setA] = useState(0); useEffect(() => {}, []);")
  assert decl == D("react", default="React", named=["useState", "useEffect"])


def test_infer_markup_only(engine):
  assert engine.infer_framework_needs("return <div />;") == D("react", default="React")


def test_infer_nothing(engine):
  assert engine.infer_framework_needs("export const add = (a, b) => a + b;") is None


def test_infer_custom_framework():
  engine = ImportEngine(framework_package="preact", framework_default="h", primitives=("useSignal",))
  assert engine.infer_framework_needs("useSignal(1)") == D("preact", default="h", named=["useSignal"])


def test_infer_default_member_reference(engine):
  assert engine.infer_framework_needs("export default React.memo(Card);") == D("react", default="React")


def test_infer_bare_memo_helper():
  engine = ImportEngine(framework_package="preact/compat", framework_default="React", memo_wrapper="memo")
  assert engine.memo_wrapper == "memo"
  assert engine.infer_framework_needs("export default memo(Card);") == D("preact/compat", default="React", named=["memo"])


def test_default_memo_wrapper_follows_framework_default():
  assert ImportEngine(framework_default="h").memo_wrapper == "h.memo"


def test_analyze_import_needs(engine):
  code = "const [a] = useState(0); const cls = clsx('a'); axios.get('/x'); _.map(a, f);"
  assert engine.analyze_import_needs(code) == ["useState", "clsx", "axios", "lodash"]


def test_render_default_style(engine):
  decls = [D("react", default="React", named=["useState", "useEffect"]), D("./a.css", raw='import "./a.css"')]
  assert engine.render(decls) == "import React, { useEffect, useState } from 'react';\nimport \"./a.css\""


def test_render_respects_style(engine):
  style = StyleConfig(singleQuote=False, semi=False, bracketSpacing=False)
  assert engine.render([D("m", named=["b", "a"])], style) == 'import {a, b} from "m"'
  assert engine.render([D("./x.css")], style) == 'import "./x.css"'


def test_render_empty(engine):
  assert engine.render([]) == ""
