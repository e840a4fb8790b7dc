from ivigen.config import TransformOptions
from ivigen.formatter import format_source, identity
from ivigen.transform import html_to_ivi


def test_empty_input_yields_empty_string() -> None:
    assert html_to_ivi("") == ""
    assert html_to_ivi("  \n ") == ""
    assert html_to_ivi("just text, no elements") == ""


def test_wraps_first_root_in_named_function() -> None:
    options = TransformOptions(component_name="Card")
    result = html_to_ivi('<div class="card"></div><p>ignored</p>', options, formatter=identity)
    assert result == 'function Card() { return h.div("card"); }'


def test_default_component_name() -> None:
    assert html_to_ivi("<br>", formatter=identity) == "function Component() { return h.br(); }"


def test_leading_text_before_root_is_ignored() -> None:
    assert html_to_ivi("\n  <span>x</span>\n", formatter=identity) == (
        'function Component() { return h.span().children("x",); }'
    )


def test_formatter_receives_raw_source() -> None:
    seen = []

    def record(source: str) -> str:
        seen.append(source)
        return "formatted"

    assert html_to_ivi("<b></b>", formatter=record) == "formatted"
    assert seen == ["function Component() { return h.b(); }"]


def test_formatted_output_is_deterministic() -> None:
    html = '<form accept-charset="utf-8"><label for="n">Name</label><input id="n" type="text"></form>'
    options = TransformOptions(componentName="Form", trim=True)
    first = html_to_ivi(html, options)
    second = html_to_ivi(html, options)
    assert first == second
    assert first.startswith("function Form() {")
    assert first.endswith("}\n")
    assert '"acceptCharset": "utf-8"' in first or '"acceptCharset":"utf-8"' in first


def test_format_source_indents_function_body() -> None:
    formatted = format_source('function A() { return h.div("x"); }')
    lines = formatted.splitlines()
    assert lines[0] == "function A() {"
    assert lines[1] == '  return h.div("x");'
    assert lines[-1] == "}"
