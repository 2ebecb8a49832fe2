import pytest

from sdkgen.codegen.core.naming import to_pascal_case, to_snake_case
from sdkgen.codegen.core.templates import TemplateEngine, TemplateError


@pytest.mark.parametrize(
    "name, snake, pascal",
    [
        ("getBalance", "get_balance", "GetBalance"),
        ("user-name", "user_name", "UserName"),
        ("HTTPResponse", "http_response", "HttpResponse"),
        ("rate_limited", "rate_limited", "RateLimited"),
    ],
)
def test_case_conversion(name, snake, pascal):
    assert to_snake_case(name) == snake
    assert to_pascal_case(name) == pascal


def test_snake_case_filter():
    engine = TemplateEngine()
    engine.add_template("module", "from {{ package | snake_case }} import Client")
    assert engine.render_template("module", {"package": "wallet-sdk"}) == (
        "from wallet_sdk import Client"
    )


def test_template_output_is_not_html_escaped():
    engine = TemplateEngine()
    engine.add_template("type", "{{ t }}")
    assert engine.render_template("type", {"t": "Promise<'x'>"}) == "Promise<'x'>"


def test_undefined_variables_fail():
    engine = TemplateEngine()
    engine.add_template("broken", "{{ missing }}")
    with pytest.raises(TemplateError, match="broken"):
        engine.render_template("broken", {})


def test_missing_template_fails():
    with pytest.raises(TemplateError, match="nope"):
        TemplateEngine().render_template("nope", {})
