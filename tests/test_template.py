from errata.core.template import find_template_variables, render_template


def test_render_template_substitutes_known_variables() -> None:
    assert render_template("Hi {{name}}, you have {{count}} items", {"name": "Sam", "count": "3"}) == (
        "Hi Sam, you have 3 items"
    )


def test_render_template_leaves_missing_placeholder_verbatim() -> None:
    assert render_template("{{missing}}", {}) == "{{missing}}"
    assert render_template("Hi {{name}} {{other}}", {"name": "Sam"}) == "Hi Sam {{other}}"


def test_render_template_is_not_recursive() -> None:
    rendered = render_template("{{a}}", {"a": "{{b}}", "b": "deep"})

    assert rendered == "{{b}}"


def test_render_template_is_idempotent_without_placeholder_values() -> None:
    variables = {"name": "Sam", "code": "E42"}
    template = "{{name}} hit {{code}} ({{unknown}})"

    once = render_template(template, variables)

    assert render_template(once, variables) == once


def test_render_template_ignores_non_word_placeholders() -> None:
    template = "{{ name }} {{first-name}} {name} {{}}"

    assert render_template(template, {"name": "x", "first-name": "y"}) == template


def test_render_template_replaces_every_occurrence() -> None:
    assert render_template("{{x}}-{{x}}", {"x": "1"}) == "1-1"


def test_render_template_allows_empty_string_value() -> None:
    assert render_template("[{{x}}]", {"x": ""}) == "[]"


def test_find_template_variables_returns_names_in_order() -> None:
    assert find_template_variables("{{b}} and {{a}} and {{b}}") == ["b", "a", "b"]
    assert find_template_variables("") == []
