import pytest

from sdkgen.codegen.core.plan import (
    CATEGORY_LABELS,
    DesignPlan,
    ErrorSpec,
    MethodSpec,
    PlanConfiguration,
    TypeSpec,
    categorize_error,
    category_label,
    plan_from_dict,
)


def test_snake_case_plan(plan):
    assert plan.client_name == "WalletClient"
    assert plan.configuration.credential == ("apiKey", "string", "API_KEY")
    assert [p.optional for p in plan.methods[1].parameters] == [False, False, True]
    assert plan.methods[1].http_method == "post"
    assert plan.types[1].enum_values == [("Mainnet", "mainnet"), ("Testnet", "testnet")]
    assert plan.errors[1].status_code == 401


def test_camel_case_plan():
    plan = plan_from_dict(
        {
            "client": {"className": "ShopClient", "baseUrl": "https://shop.test"},
            "product": {"name": "shop", "version": "2.0.0"},
            "auth": {"type": "bearer"},
            "methods": [
                {
                    "name": "listOrders",
                    "parameters": [
                        {"name": "limit", "parameterType": "number", "required": False}
                    ],
                    "returns": {"type": "Promise<Order[]>", "isAsync": True},
                    "requiresAuth": True,
                    "generationHints": {"deprecated": True},
                }
            ],
            "errors": [
                {
                    "errorCode": "RATE_LIMITED",
                    "errorType": "rate_limit",
                    "solution": "Wait",
                }
            ],
        }
    )
    assert plan.client_name == "ShopClient"
    assert plan.product_name == "shop"
    assert plan.configuration.auth_method == "api-key"
    assert plan.configuration.auth_required
    assert plan.configuration.base_url == "https://shop.test"

    method = plan.methods[0]
    assert method.return_type == "Promise<Order[]>"
    assert method.is_async and method.requires_auth and method.deprecated
    assert method.parameters[0].optional
    assert plan.errors[0].remedy == "Wait"
    assert plan.errors[0].type_name == "rate_limit"


def test_missing_fields_are_kept_as_none():
    plan = plan_from_dict({"methods": [{"parameters": [{"name": "x"}]}]})
    assert plan.client_name is None
    assert plan.methods[0].name is None
    assert plan.methods[0].parameters[0].type is None


def test_credential_requires_auth():
    assert PlanConfiguration(auth_method="api-key").credential is None
    assert PlanConfiguration(auth_required=True, auth_method="none").credential is None
    oauth = PlanConfiguration(auth_required=True, auth_method="oauth")
    assert oauth.credential[0] == "accessToken"


@pytest.mark.parametrize(
    "type_name, expected",
    [
        ("auth_expired", "authentication"),
        ("Forbidden", "authentication"),
        ("validation_failed", "validation"),
        ("INVALID_INPUT", "validation"),
        ("connection_reset", "network"),
        ("timeout", "network"),
        ("throttled", "rate_limit"),
        ("too_many_requests", "rate_limit"),
        ("internal", "server"),
        ("service_unavailable", "server"),
        ("insufficient_funds", "other"),
        (None, "other"),
    ],
)
def test_categorize_error(type_name, expected):
    assert categorize_error(type_name) == expected


def test_first_matching_category_wins():
    # "auth" is checked before "invalid"
    assert categorize_error("invalid_auth_token") == "authentication"


def test_category_labels():
    assert category_label("validation") == "Validation Errors"
    assert category_label("authentication") == "Authentication & Authorization"
    assert list(CATEGORY_LABELS)[-1] == "other"


def test_validate_reports_structural_issues():
    plan = DesignPlan(
        client_name="C",
        methods=[MethodSpec("a", return_type="void"), MethodSpec("a")],
        types=[TypeSpec("Empty"), TypeSpec("Kind", kind="enum")],
        errors=[ErrorSpec("E"), ErrorSpec("E")],
        configuration=PlanConfiguration(auth_method="magic"),
    )
    assert plan.validate() == [
        "Duplicate method name: a",
        "Method a has no return type",
        "Duplicate error code: E",
        "Type 'Empty' has no fields",
        "Enum 'Kind' has no values",
        "Unknown auth method: magic",
    ]
