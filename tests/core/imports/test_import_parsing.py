"""
Tests for import parsing.

Verifies:
1. The four recognized line shapes.
2. Only the leading import section is scanned.
3. Unrecognized shapes are skipped (ParseGap), not repaired.
4. Lines for the same module are folded together.
"""

import pytest

from ui_splice.core.imports import ImportDeclaration, ImportEngine


@pytest.fixture
def engine():
  return ImportEngine()


def test_parse_default(engine):
  decls = engine.parse("import React from 'react';")
  assert decls == [ImportDeclaration.create("react", default="React")]


def test_parse_named(engine):
  decls = engine.parse('import { useState, useEffect } from "react"')
  assert decls == [ImportDeclaration.create("react", named=["useState", "useEffect"])]


def test_parse_combined(engine):
  (decl,) = engine.parse("import React, { useState } from 'react';")
  assert decl.default_binding == "React"
  assert decl.named_bindings == frozenset({"useState"})


def test_parse_aliased_named_binding(engine):
  (decl,) = engine.parse("import { Button as Btn } from './ui';")
  assert decl.named_bindings == frozenset({"Button as Btn"})
  assert decl.bound_names == frozenset({"Btn"})


def test_parse_side_effect_keeps_raw_literal(engine):
  (decl,) = engine.parse("import './theme.css';")
  assert decl.module_id == "./theme.css"
  assert decl.is_side_effect
  assert decl.raw_literal == "import './theme.css';"


def test_parse_stops_at_first_code_line(engine):
  code = "\n".join(
    [
      "// generated",
      "import React from 'react';",
      "",
      "/* helpers */",
      "import clsx from 'clsx';",
      "const x = 1;",
      "import later from 'later';",
    ]
  )
  assert [d.module_id for d in engine.parse(code)] == ["react", "clsx"]


@pytest.mark.parametrize(
  "line",
  [
    "import * as utils from './utils';",
    "import type { Props } from './types';",
  ],
)
def test_parse_gap_shapes_are_skipped(engine, line):
  code = f"{line}\nimport React from 'react';"
  assert engine.parse(code) == [ImportDeclaration.create("react", default="React")]


def test_parse_wrapped_statement(engine):
  code = "import {\n  useState,\n  useEffect,\n} from 'react';\nimport clsx from 'clsx';"
  assert engine.parse(code) == [
    ImportDeclaration.create("react", named=["useState", "useEffect"]),
    ImportDeclaration.create("clsx", default="clsx"),
  ]


def test_parse_wrapped_gap_shape_is_skipped_whole(engine):
  code = "import type {\n  Props,\n  State,\n} from './types';\nimport React from 'react';"
  assert engine.parse(code) == [ImportDeclaration.create("react", default="React")]
  assert engine.split_body(code + "\n\nexport const A = 1;") == "export const A = 1;"


def test_unterminated_import_takes_one_line(engine):
  code = "import {\n\nexport const A = 1;"
  assert engine.parse(code) == []
  assert engine.split_body(code) == "export const A = 1;"


def test_directive_ends_section(engine):
  code = "'use client';\nimport React from 'react';"
  assert engine.parse(code) == []


def test_duplicate_modules_are_folded(engine):
  code = "import { a } from 'm';\nimport D from 'm';\nimport { b } from 'm';"
  (decl,) = engine.parse(code)
  assert decl.default_binding == "D"
  assert decl.named_bindings == frozenset({"a", "b"})


def test_trailing_comma_in_named_block(engine):
  (decl,) = engine.parse("import { a, b, } from 'm'")
  assert decl.named_bindings == frozenset({"a", "b"})


def test_split_body_removes_only_leading_imports(engine):
  code = "import React from 'react';\n// note\n\nexport const A = () => <div />;\nimport x from 'x';"
  body = engine.split_body(code)
  assert body == "// note\n\nexport const A = () => <div />;\nimport x from 'x';"


def test_split_body_without_imports(engine):
  assert engine.split_body("\n\nconst a = 1;") == "const a = 1;"


def test_split_body_removes_wrapped_statement(engine):
  code = "import {\n  useState,\n  useEffect,\n} from 'react';\n// keep\n\nexport const C = () => null;\n"
  assert engine.split_body(code) == "// keep\n\nexport const C = () => null;\n"
