"""
Tests for style configuration resolution.

Verifies:
1. StyleConfig defaults, aliases and engine flag rendering.
2. Overrides ignore unknown keys and drop invalid values.
3. Destination inference, settings stores and layering order.
4. pyproject.toml discovery and CLI key=value parsing.
"""

from ui_splice.config import (
  MappingSettingsStore,
  StyleConfig,
  TomlSettingsStore,
  infer_style,
  parse_cli_key_values,
  read_store,
  resolve_style,
)


def test_defaults():
  style = StyleConfig()
  assert style.tab_width == 2
  assert style.use_tabs is False
  assert style.single_quote is True
  assert style.semi is True
  assert style.trailing_comma == "es5"
  assert style.bracket_spacing is True
  assert style.print_width == 80
  assert style.end_of_line == "lf"
  assert style.quote == "'"


def test_engine_args():
  args = StyleConfig(useTabs=True, semi=False, bracketSpacing=False, trailingComma="all").to_engine_args()
  assert args[:4] == ["--tab-width=2", "--print-width=80", "--trailing-comma=all", "--end-of-line=lf"]
  assert "--use-tabs" in args
  assert "--single-quote" in args
  assert "--no-semi" in args
  assert "--no-bracket-spacing" in args


def test_overrides_accept_both_spellings():
  style = StyleConfig().with_overrides({"tabWidth": 4, "print_width": 100})
  assert style.tab_width == 4
  assert style.print_width == 100


def test_overrides_ignore_unknown_and_invalid(recorded_console):
  style = StyleConfig().with_overrides({"colour": "red", "tabWidth": 0, "trailingComma": "sometimes", "semi": False})

  assert style.tab_width == 2
  assert style.trailing_comma == "es5"
  assert style.semi is False
  assert "Ignoring invalid style value tabWidth=0" in recorded_console.export_text()


def test_infer_style_spaces_and_quotes():
  text = 'import a from "a";\n\nfunction f() {\n    return "x";\n}\n'
  inferred = infer_style(text)
  assert inferred == {"useTabs": False, "tabWidth": 4, "singleQuote": False, "semi": True}


def test_infer_style_tabs():
  inferred = infer_style("function f() {\n\treturn 'x'\n}\n")
  assert inferred["useTabs"] is True
  assert inferred["singleQuote"] is True
  assert inferred["semi"] is False


def test_infer_style_blank():
  assert infer_style("   \n") == {}


def test_read_store_skips_missing_keys():
  assert read_store(MappingSettingsStore({"semi": False, "other": 1})) == {"semi": False}
  assert read_store(None) == {}


def test_read_store_treats_broken_store_as_absent():
  class BrokenStore:
    def get(self, key):
      raise OSError("settings database locked")

  assert read_store(BrokenStore()) == {}
  assert resolve_style(None, BrokenStore()) == StyleConfig()


def test_resolve_layering():
  destination = "const a = 'x'\n"
  store = MappingSettingsStore({"semi": True, "printWidth": 120})

  style = resolve_style(destination, store, {"printWidth": 100})

  assert style.single_quote is True
  assert style.semi is True
  assert style.print_width == 100


def test_toml_settings_store(tmp_path):
  (tmp_path / "pyproject.toml").write_text(
    '[tool.ui_splice.style]\nsingleQuote = false\ntabWidth = 4\n', encoding="utf-8"
  )
  nested = tmp_path / "web" / "src"
  nested.mkdir(parents=True)

  store = TomlSettingsStore(nested)

  assert store.get("singleQuote") is False
  assert store.get("tabWidth") == 4
  assert store.get("semi") is None


def test_toml_settings_store_invalid_file(tmp_path):
  (tmp_path / "pyproject.toml").write_text("[tool.ui_splice\n", encoding="utf-8")
  assert TomlSettingsStore(tmp_path).get("semi") is None


def test_parse_cli_key_values():
  parsed = parse_cli_key_values(["tabWidth=4", "semi=false", "endOfLine=crlf", "ratio=1.5", "broken"])
  assert parsed == {"tabWidth": 4, "semi": False, "endOfLine": "crlf", "ratio": 1.5}
  assert parse_cli_key_values(None) == {}
