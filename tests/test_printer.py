import pytest

from declsynth import quick_render
from declsynth.core import (
    BindingElement,
    NumericLiteral,
    ObjectBindingPattern,
    attach_leading_comment,
    build_call,
    build_const_declaration,
    build_export_all,
    build_named_export,
    build_named_import,
    factory,
)
from declsynth.core.nodes import ConstDeclaration
from declsynth.render import (
    RenderError,
    TypeScriptPrinter,
    load_config,
    render_statements,
)


@pytest.fixture
def printer():
    return TypeScriptPrinter()


@pytest.mark.parametrize("module", ["./y", "@hey-api/client-fetch", "../a/b.js"])
def test_export_all(printer, module):
    assert printer.print_node(build_export_all(module)) == f'export * from "{module}";'


def test_named_export_forms(printer):
    node = build_named_export(
        ["a", {"name": "b", "alias": "c"}, {"name": "D", "as_type": True}], "./m"
    )
    assert printer.print_node(node) == 'export { a, b as c, type D } from "./m";'

    node = build_named_export(
        [{"name": "A", "as_type": True}, {"name": "B", "alias": "C", "as_type": True}],
        "./m",
    )
    assert printer.print_node(node) == 'export type { A, B as C } from "./m";'

    assert printer.print_node(build_named_export([], "./m")) == 'export type {} from "./m";'


def test_named_import_forms(printer):
    node = build_named_import(["client", {"name": "Options", "asType": True}], "./c")
    assert printer.print_node(node) == 'import { client, type Options } from "./c";'

    node = build_named_import({"name": "Pet", "asType": True}, "./types")
    assert printer.print_node(node) == 'import type { Pet } from "./types";'


def test_call_expression(printer):
    node = build_call("foo", ["a", factory.literal("b")])
    assert printer.print_node(node) == 'foo(a, "b")'

    node = build_call(
        factory.member_access("client", "get"),
        [factory.literal({"url": "/pets"})],
        [factory.type_reference("Pet")],
    )
    assert printer.print_node(node) == 'client.get<Pet>({ url: "/pets" })'


def test_const_declaration_forms(printer):
    node = build_const_declaration(
        "x",
        factory.literal({"a": 1, "b-c": [True, None]}),
        const_assertion=True,
        exported=True,
        type_annotation="Config",
    )
    assert (
        printer.print_node(node)
        == 'export const x: Config = { a: 1, "b-c": [true, null] } as const;'
    )

    node = build_const_declaration("client", build_call("createClient"), destructure=True)
    assert printer.print_node(node) == "const { client } = createClient();"


def test_binding_element_with_rename_and_default(printer):
    node = ConstDeclaration(
        name=ObjectBindingPattern(
            (BindingElement("port", property_name="p", initializer=NumericLiteral(80)),)
        ),
        initializer=factory.identifier("settings"),
    )
    assert printer.print_node(node) == "const { p: port = 80 } = settings;"


def test_doc_comment(printer):
    node = build_const_declaration(
        "x", factory.literal(1), comment=["Line one", "closes */ early"]
    )
    assert printer.print_node(node) == (
        "/**\n * Line one\n * closes *\\/ early\n */\nconst x = 1;"
    )


def test_doc_comment_blank_line(printer):
    node = attach_leading_comment(build_export_all("./a"), "Title\n\nBody")
    assert printer.print_node(node) == '/**\n * Title\n *\n * Body\n */\nexport * from "./a";'


def test_string_escaping(printer):
    assert printer.print_node(factory.string('say "hi"\n')) == '"say \\"hi\\"\\n"'


def test_numbers(printer):
    assert printer.print_node(factory.literal(1.0)) == "1"
    assert printer.print_node(factory.literal(0.5)) == "0.5"
    assert printer.print_node(factory.literal(-3)) == "-3"
    assert printer.print_node(factory.literal(float("inf"))) == "Infinity"
    assert printer.print_node(factory.literal(-0.0)) == "-0"
    assert printer.print_node(factory.literal(0.0)) == "0"


def test_member_access_with_non_identifier_name(printer):
    node = factory.member_access("headers", "content-type")
    assert printer.print_node(node) == 'headers["content-type"]'


def test_as_expression_callee_is_parenthesized(printer):
    inner = build_const_declaration("x", factory.literal([1]), const_assertion=True)
    node = factory.member_access(inner.initializer, "length")
    assert printer.print_node(node) == "([1] as const).length"


def test_single_quotes_without_semicolons():
    printer = TypeScriptPrinter(load_config("standard"))

    assert printer.print_node(build_export_all("./y")) == "export * from './y'"
    assert printer.print_node(factory.string("it's")) == "'it\\'s'"


def test_print_file(printer):
    statements = [
        build_named_import("a", "./a"),
        build_export_all("./b"),
    ]
    assert printer.print_file(statements) == (
        'import { a } from "./a";\nexport * from "./b";\n'
    )
    assert printer.print_file([]) == ""


def test_print_file_rejects_expressions(printer):
    with pytest.raises(RenderError):
        printer.print_file([factory.identifier("x")])


def test_print_node_rejects_non_nodes(printer):
    with pytest.raises(RenderError):
        printer.print_node("x")


def test_reserved_identifier_warns(printer):
    statements = [build_const_declaration("default", factory.identifier("value"))]
    printer.print_file(statements)

    assert printer.warnings == ["'default' is a reserved word"]


def test_reserved_identifier_strict():
    printer = TypeScriptPrinter(load_config(custom_config={"strict_identifiers": True}))

    with pytest.raises(RenderError):
        printer.print_node(build_const_declaration("class", factory.literal(1)))

    # Re-exporting a reserved name is legal
    assert (
        printer.print_node(build_named_export("default", "./a"))
        == 'export { default } from "./a";'
    )


def test_import_checks_local_binding(printer):
    printer.print_file([build_named_import({"name": "default", "alias": "api"}, "./a")])
    assert printer.warnings == []

    printer.print_file([build_named_import("default", "./a")])
    assert printer.warnings == ["'default' is a reserved word"]


def test_render_statements_result():
    result = render_statements(
        [
            build_named_import("a", "./a"),
            build_const_declaration("b", factory.identifier("a"), exported=True),
        ]
    )

    assert result.success
    assert result.code == 'import { a } from "./a";\nexport const b = a;\n'
    assert result.metadata["statement_count"] == 2
    assert result.metadata["exports"] == 1
    assert result.metadata["imports"] == 1


def test_render_statements_error():
    result = render_statements(
        [build_const_declaration("if", factory.literal(1))],
        {"strict_identifiers": True},
    )

    assert not result.success
    assert isinstance(result.exception, RenderError)
    assert "reserved word" in result.error_message


def test_line_endings():
    result = render_statements(
        [build_export_all("./a"), build_export_all("./b")], {"line_ending": "\r\n"}
    )
    assert result.code == 'export * from "./a";\r\nexport * from "./b";\r\n'


def test_quick_render():
    assert quick_render(build_export_all("./y")) == 'export * from "./y";\n'
    assert quick_render(build_export_all("./y"), quote_style="single") == (
        "export * from './y';\n"
    )

    with pytest.raises(RuntimeError):
        quick_render(build_const_declaration("if", factory.literal(1)), strict_identifiers=True)
