import pytest

from sdkgen.codegen.core.ast import (
    ClassDeclaration,
    EnumDeclaration,
    InterfaceDeclaration,
)
from sdkgen.codegen.core.declarations import (
    BASE_ERROR_CLASS,
    CLIENT_MEMBERS,
    assign_error_class_names,
    build_client_class,
    build_error_types,
    build_method,
    build_program,
    build_type_definition,
    error_class_name,
)
from sdkgen.codegen.core.generator import ConstructionError
from sdkgen.codegen.core.plan import ErrorSpec, MethodParameter, MethodSpec, TypeSpec


def test_error_class_names():
    assert error_class_name("rate_limited") == "RateLimitedError"
    assert error_class_name("ValidationError") == "ValidationError"
    assert error_class_name("AUTH_EXPIRED") == "AuthExpiredError"


def test_method_parameters_are_verbatim(plan):
    method = build_method(plan.methods[1], plan.client_name)
    assert [(p.name, p.type, p.optional) for p in method.parameters] == [
        ("to", "string", False),
        ("amount", "number", False),
        ("memo", "string", True),
    ]
    assert method.return_type == "Promise<Receipt>"
    assert method.is_async


def test_method_without_auth_has_no_guard(plan):
    method = build_method(plan.methods[1], plan.client_name, "none")
    assert [node.kind for node in method.body] == ["ReturnStatement"]


def test_method_missing_parameter_type_raises():
    method = MethodSpec(
        name="find", parameters=[MethodParameter(name="query", type=None)]
    )
    with pytest.raises(ConstructionError) as exc_info:
        build_method(method, "Client")
    assert exc_info.value.entity == "method 'find' parameter 'query'"
    assert exc_info.value.field == "type"


def test_client_class_members(plan):
    cls = build_client_class(plan)
    assert isinstance(cls, ClassDeclaration)
    assert cls.exported
    assert [m.name for m in cls.methods] == [
        "validateConfig",
        "request",
        "getBalance",
        "transfer",
    ]
    assert [p.name for p in cls.properties] == ["config"]


def test_client_method_without_name_names_its_index(plan):
    plan.methods.append(MethodSpec(name=None))
    with pytest.raises(ConstructionError) as exc_info:
        build_client_class(plan)
    assert exc_info.value.entity == "methods[2]"
    assert exc_info.value.field == "name"


def test_client_requires_name(plan):
    plan.client_name = None
    with pytest.raises(ConstructionError, match="client_name"):
        build_client_class(plan)


def test_error_types_order(plan):
    names = [node.name for node in build_error_types(plan)]
    assert names[:4] == [
        "ErrorCategory",
        BASE_ERROR_CLASS,
        "ConfigError",
        "NetworkError",
    ]
    assert names[4:] == [
        "ValidationFailedError",
        "AuthExpiredError",
        "InsufficientFundsError",
    ]


def test_colliding_error_classes_are_renamed_and_reported(plan):
    plan.errors.append(ErrorSpec(code="network_error", description="Gateway down"))
    plan.errors.append(ErrorSpec(code="validation-failed"))
    warnings = []

    declarations = build_error_types(plan, warnings)

    names = [node.name for node in declarations]
    assert names[-2:] == ["NetworkApiError", "ValidationFailedApiError"]
    assert len(names) == len(set(names))
    assert warnings == [
        "Error 'network_error': class NetworkError is already declared, "
        "generated as NetworkApiError",
        "Error 'validation-failed': class ValidationFailedError is already declared, "
        "generated as ValidationFailedApiError",
    ]
    renamed = declarations[-2]
    assert renamed.constructor.body[0].expression.arguments[1].value == "network_error"
    assert "already declared" in renamed.documentation


def test_repeated_collisions_get_a_counter():
    errors = [
        ErrorSpec(code="network_api"),
        ErrorSpec(code="network"),
        ErrorSpec(code="NETWORK"),
    ]
    names, warnings = assign_error_class_names(errors)
    assert names == ["NetworkApiError", "NetworkApiError2", "NetworkApiError3"]
    assert len(warnings) == 2


def test_error_without_code_has_no_class_name():
    names, warnings = assign_error_class_names([ErrorSpec(code=None)])
    assert names == [None]
    assert warnings == []


@pytest.mark.parametrize("name", CLIENT_MEMBERS)
def test_plan_method_cannot_reuse_client_member(plan, name):
    plan.methods.append(MethodSpec(name=name, return_type="string"))
    with pytest.raises(ConstructionError) as exc_info:
        build_client_class(plan)
    assert exc_info.value.entity == "methods[2]"
    assert exc_info.value.field == "name"
    assert "collides with generated client member" in str(exc_info.value)


def test_type_definitions(plan):
    receipt = build_type_definition(plan.types[0])
    assert isinstance(receipt, InterfaceDeclaration)
    assert [(p.name, p.readonly, p.optional) for p in receipt.properties] == [
        ("id", True, False),
        ("note", False, True),
    ]
    network = build_type_definition(plan.types[1])
    assert isinstance(network, EnumDeclaration)
    assert [(m.name, m.value) for m in network.members] == [
        ("Mainnet", "mainnet"),
        ("Testnet", "testnet"),
    ]


def test_unsupported_type_kind_raises():
    with pytest.raises(ConstructionError) as exc_info:
        build_type_definition(TypeSpec(name="Shape", kind="union"), "types[0]")
    assert exc_info.value.field == "kind"
    assert "union" in str(exc_info.value)


def test_program_order(plan):
    names = [node.name for node in build_program(plan).body]
    assert names[:3] == ["Transport", "ClientConfig", "createDefaultConfig"]
    assert names[3] == "ErrorCategory"
    assert names[-3:] == ["Receipt", "Network", "WalletClient"]
