import pytest

from declsynth.core import build_export_all, build_named_export
from declsynth.render import (
    TemplateEngine,
    TemplateError,
    TypeScriptPrinter,
    create_template_engine,
    load_config,
)


def test_builtin_templates_exist():
    engine = TemplateEngine()

    for name in [
        "export_all.ts.j2",
        "named_export.ts.j2",
        "named_import.ts.j2",
        "const_declaration.ts.j2",
        "doc_comment.ts.j2",
    ]:
        assert engine.template_exists(name)
    assert not engine.template_exists("missing.ts.j2")


def test_clause_and_comment_filters():
    engine = TemplateEngine()

    assert engine.render_string("{{ items | clause }}", {"items": []}) == "{}"
    assert engine.render_string("{{ items | clause }}", {"items": ["a", "b"]}) == "{ a, b }"
    assert engine.render_string('{{ text | comment("//") }}', {"text": "a\n\nb"}) == (
        "// a\n//\n// b"
    )


def test_missing_variable_raises():
    engine = TemplateEngine()

    with pytest.raises(TemplateError):
        engine.render_template("export_all.ts.j2", {})


def test_add_template_overrides_builtin():
    engine = TemplateEngine()
    engine.add_template("export_all.ts.j2", "export * from {{ module }} // re-export")

    assert engine.render_template("export_all.ts.j2", {"module": "'./a'"}) == (
        "export * from './a' // re-export"
    )
    # Other engines keep the built-in template
    assert TemplateEngine().render_template(
        "export_all.ts.j2", {"module": "'./a'", "terminator": ";"}
    ) == "export * from './a';"


def test_template_dir_overrides(tmp_path):
    (tmp_path / "export_all.ts.j2").write_text(
        "export * from {{ module }}{{ terminator }} // {{ config.custom.tag }}",
        encoding="utf-8",
    )

    config = load_config(custom_config={"template_dir": str(tmp_path), "tag": "generated"})
    printer = TypeScriptPrinter(config)

    assert printer.print_node(build_export_all("./a")) == (
        'export * from "./a"; // generated'
    )
    # Templates missing from the directory fall back to the built-ins
    assert printer.print_node(build_named_export("a", "./a")) == (
        'export { a } from "./a";'
    )


def test_create_template_engine_returns_fresh_engines():
    assert create_template_engine() is not create_template_engine()


def test_template_override_stays_with_its_printer():
    first = TypeScriptPrinter()
    second = TypeScriptPrinter()

    first.template_engine.add_template("export_all.ts.j2", "REPLACED {{ module }}")

    assert first.print_node(build_export_all("./a")) == 'REPLACED "./a"'
    assert second.print_node(build_export_all("./a")) == 'export * from "./a";'
    assert TypeScriptPrinter().print_node(build_export_all("./a")) == (
        'export * from "./a";'
    )
