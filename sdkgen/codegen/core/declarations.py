"""
Declaration builders: project design-plan fragments onto AST nodes.

Every builder here is a plain function of its inputs. Names that come
from the plan (methods, parameters, fields) are used verbatim; a plan
fragment missing a required field raises ConstructionError naming the
plan entity, it is never skipped.
"""

from typing import List, Optional, Tuple

from ...logging_config import get_logger
from .ast import (
    BinaryExpression,
    CallExpression,
    CatchClause,
    ClassDeclaration,
    Constructor,
    DocComment,
    DocParam,
    DocReturn,
    EnumDeclaration,
    EnumMember,
    ExpressionStatement,
    FunctionDeclaration,
    Identifier,
    IfStatement,
    InterfaceDeclaration,
    Literal,
    MemberExpression,
    MethodDeclaration,
    Node,
    ObjectExpression,
    ObjectProperty,
    Parameter,
    Program,
    PropertyDeclaration,
    ReturnStatement,
    ThrowStatement,
    TryCatchStatement,
    UnaryExpression,
    VariableDeclaration,
)
from .generator import ConstructionError
from .naming import to_pascal_case
from .plan import (
    CATEGORY_LABELS,
    CREDENTIALS,
    DesignPlan,
    ErrorSpec,
    MethodSpec,
    TypeSpec,
    categorize_error,
)

logger = get_logger(__name__)


BASE_ERROR_CLASS = "SDKError"
CONFIG_ERROR_CLASS = "ConfigError"
NETWORK_ERROR_CLASS = "NetworkError"
CATEGORY_ENUM = "ErrorCategory"
CONFIG_INTERFACE = "ClientConfig"
TRANSPORT_INTERFACE = "Transport"

DEFAULT_BASE_URL = "https://api.example.com"

# Members the client class declares itself; plan methods may not reuse them
CLIENT_MEMBERS = ("constructor", "config", "validateConfig", "request")

# Error classes declared before any plan error
BUILTIN_ERROR_CLASSES = (BASE_ERROR_CLASS, CONFIG_ERROR_CLASS, NETWORK_ERROR_CLASS)


def credential_for(auth_method: str) -> Optional[tuple]:
    """(property, type, env var) of the stored credential, or None without auth."""
    return CREDENTIALS.get(auth_method)


def error_class_name(code: str) -> str:
    """Class name for an error code: ``rate_limited`` -> ``RateLimitedError``."""
    name = to_pascal_case(code) or "Unknown"
    if not name.endswith("Error"):
        name = f"{name}Error"
    return name


def assign_error_class_names(
    errors: List[ErrorSpec],
) -> Tuple[List[Optional[str]], List[str]]:
    """
    Pick a distinct class name for every plan error.

    A derived name that is already declared (a built-in error class or an
    earlier plan error) gets an ``ApiError`` suffix, then a counter, and
    the rename is reported as a warning.

    Returns:
        (class name per plan error, ``None`` for errors without a code;
        warning messages)
    """
    taken = set(BUILTIN_ERROR_CLASSES)
    names: List[Optional[str]] = []
    warnings: List[str] = []

    for error in errors:
        if not error.code:
            names.append(None)
            continue

        derived = error_class_name(error.code)
        name = derived
        if name in taken:
            stem = derived[: -len("Error")]
            name = f"{stem}ApiError"
            counter = 2
            while name in taken:
                name = f"{stem}ApiError{counter}"
                counter += 1
            warnings.append(
                f"Error '{error.code}': class {derived} is already declared, "
                f"generated as {name}"
            )

        taken.add(name)
        names.append(name)

    return names, warnings


def category_member(key: str) -> str:
    """ErrorCategory enum member for a category key."""
    return to_pascal_case(key)


def _this(prop: str) -> MemberExpression:
    return MemberExpression(Identifier("this"), prop)


def _assign_this(prop: str, value: str) -> ExpressionStatement:
    return ExpressionStatement(BinaryExpression(_this(prop), "=", Identifier(value)))


def _throw_new(class_name: str, message: str) -> ThrowStatement:
    return ThrowStatement(CallExpression(f"new {class_name}", [Literal.of(message)]))


# ---------------------------------------------------------------------------
# Method builder
# ---------------------------------------------------------------------------


def build_method(
    method: MethodSpec, client_name: str, auth_method: str = "none"
) -> MethodDeclaration:
    """
    Build the client method for one plan method.

    The parameter list mirrors the plan verbatim (name, type, optionality,
    order) and the return type is used exactly as declared.

    Args:
        method: Plan method
        client_name: Name of the owning client class (used in the example)
        auth_method: Plan auth method, selects the credential the guard checks

    Raises:
        ConstructionError: If the method or one of its parameters lacks a name
            or type
    """
    if not method.name:
        raise ConstructionError("method", "name")

    parameters = []
    for index, param in enumerate(method.parameters):
        entity = f"method '{method.name}' parameter {index}"
        if not param.name:
            raise ConstructionError(entity, "name")
        if not param.type:
            raise ConstructionError(
                f"method '{method.name}' parameter '{param.name}'", "type"
            )
        parameters.append(
            Parameter(
                name=param.name,
                type=param.type,
                optional=param.optional,
                default=param.default,
            )
        )

    body: List[Node] = []

    credential = credential_for(auth_method)
    if method.requires_auth and credential is not None:
        stored = MemberExpression(_this("config"), credential[0])
        body.append(
            IfStatement(
                condition=UnaryExpression("!", stored),
                consequent=[
                    _throw_new(
                        CONFIG_ERROR_CLASS,
                        "Authentication is required but not configured",
                    )
                ],
            )
        )

    payload = ObjectExpression(
        [ObjectProperty(p.name, Identifier(p.name)) for p in parameters]
    )
    call = CallExpression(
        MemberExpression(Identifier("this"), "request"),
        [
            Literal.of((method.http_method or "GET").upper()),
            Literal.of(method.endpoint or f"/{method.name}"),
            payload,
        ],
    )
    body.append(ReturnStatement(call))

    return MethodDeclaration(
        name=method.name,
        parameters=parameters,
        return_type=method.return_type,
        body=body,
        is_async=method.is_async,
        documentation=_method_doc(method, client_name),
    )


def _method_doc(method: MethodSpec, client_name: str) -> DocComment:
    last_required = 0
    for index, param in enumerate(method.parameters):
        if not param.optional:
            last_required = index + 1
    args = ", ".join(p.name for p in method.parameters[:last_required])

    prefix = "await " if method.is_async else ""
    example = "\n".join(
        [
            f"const client = new {client_name}(config);",
            f"const result = {prefix}client.{method.name}({args});",
        ]
    )

    return DocComment(
        description=method.description or f"Call {method.name}",
        params=[DocParam(p.name, p.type, p.description) for p in method.parameters],
        returns=DocReturn(method.return_type) if method.return_type else None,
        throws=list(method.throws),
        deprecated=method.deprecated,
        example=example,
    )


# ---------------------------------------------------------------------------
# Client class builder
# ---------------------------------------------------------------------------


def build_client_class(plan: DesignPlan) -> ClassDeclaration:
    """
    Build the SDK entry-point client class.

    The class stores its configuration, validates the configured
    credential when the plan requires authentication, and exposes one
    method per plan method.

    Raises:
        ConstructionError: If the client has no name, or a plan method is
            unnamed or reuses one of ``CLIENT_MEMBERS``
    """
    if not plan.client_name:
        raise ConstructionError("client", "client_name")

    configuration = plan.configuration
    auth_method = configuration.auth_method if configuration.uses_auth else "none"
    credential = configuration.credential

    validate_body: List[Node] = []
    if credential is not None:
        stored = MemberExpression(Identifier("config"), credential[0])
        validate_body.append(
            IfStatement(
                condition=UnaryExpression("!", stored),
                consequent=[
                    _throw_new(
                        CONFIG_ERROR_CLASS,
                        f"Missing required {credential[0]} configuration",
                    )
                ],
            )
        )
    validate_body.append(ReturnStatement(Identifier("config")))

    validate_config = MethodDeclaration(
        name="validateConfig",
        parameters=[Parameter("config", CONFIG_INTERFACE)],
        return_type=CONFIG_INTERFACE,
        body=validate_body,
        private=True,
    )

    transport = MemberExpression(_this("config"), "transport")
    request = MethodDeclaration(
        name="request",
        parameters=[
            Parameter("method", "string"),
            Parameter("path", "string"),
            Parameter("params", "Record<string, unknown>"),
        ],
        return_type="Promise<any>",
        is_async=True,
        private=True,
        body=[
            IfStatement(
                condition=UnaryExpression("!", transport),
                consequent=[_throw_new(CONFIG_ERROR_CLASS, "No transport configured")],
            ),
            VariableDeclaration(
                name="url",
                type="string",
                initializer=BinaryExpression(
                    MemberExpression(_this("config"), "baseUrl"),
                    "+",
                    Identifier("path"),
                ),
            ),
            TryCatchStatement(
                try_block=[
                    ReturnStatement(
                        UnaryExpression(
                            "await",
                            CallExpression(
                                MemberExpression(transport, "request"),
                                ["method", "url", "params"],
                            ),
                        )
                    )
                ],
                catch_clause=CatchClause(
                    param="error",
                    body=[
                        IfStatement(
                            condition=BinaryExpression(
                                "error", "instanceof", BASE_ERROR_CLASS
                            ),
                            consequent=[ThrowStatement(Identifier("error"))],
                        ),
                        ThrowStatement(
                            CallExpression(
                                f"new {NETWORK_ERROR_CLASS}",
                                [CallExpression("String", ["error"])],
                            )
                        ),
                    ],
                ),
            ),
        ],
    )

    methods = [validate_config, request]
    for index, method in enumerate(plan.methods):
        if not method.name:
            raise ConstructionError(f"methods[{index}]", "name")
        if method.name in CLIENT_MEMBERS:
            raise ConstructionError(
                f"methods[{index}]",
                "name",
                detail=f"'{method.name}' collides with generated client member",
            )
        methods.append(build_method(method, plan.client_name, auth_method))

    logger.debug(
        "Built client class %s with %d methods", plan.client_name, len(plan.methods)
    )

    return ClassDeclaration(
        name=plan.client_name,
        exported=True,
        documentation=(
            f"Main SDK client for {plan.product_name or plan.client_name}.\n\n"
            "Initialize with configuration and use methods to interact with the API."
        ),
        properties=[PropertyDeclaration("config", CONFIG_INTERFACE, private=True)],
        constructor=Constructor(
            parameters=[Parameter("config", CONFIG_INTERFACE)],
            body=[
                ExpressionStatement(
                    BinaryExpression(
                        _this("config"),
                        "=",
                        CallExpression(_this("validateConfig"), ["config"]),
                    )
                )
            ],
        ),
        methods=methods,
    )


# ---------------------------------------------------------------------------
# Error type builder
# ---------------------------------------------------------------------------


def _category_enum() -> EnumDeclaration:
    return EnumDeclaration(
        name=CATEGORY_ENUM,
        exported=True,
        documentation="Categories shared by every SDK error",
        members=[EnumMember(category_member(key), key) for key in CATEGORY_LABELS],
    )


def _base_error_class() -> ClassDeclaration:
    return ClassDeclaration(
        name=BASE_ERROR_CLASS,
        superclass="Error",
        exported=True,
        documentation="Base error for all SDK errors",
        properties=[
            PropertyDeclaration("code", "string", readonly=True),
            PropertyDeclaration("category", CATEGORY_ENUM, readonly=True),
            PropertyDeclaration("statusCode", "number", optional=True, readonly=True),
        ],
        constructor=Constructor(
            parameters=[
                Parameter("message", "string"),
                Parameter("code", "string"),
                Parameter("category", CATEGORY_ENUM, default=f"{CATEGORY_ENUM}.Other"),
                Parameter("statusCode", "number", optional=True),
            ],
            body=[
                ExpressionStatement(CallExpression("super", ["message"])),
                ExpressionStatement(
                    CallExpression(
                        "Object.setPrototypeOf", ["this", "new.target.prototype"]
                    )
                ),
                _assign_this("name", "new.target.name"),
                _assign_this("code", "code"),
                _assign_this("category", "category"),
                _assign_this("statusCode", "statusCode"),
            ],
        ),
    )


def _subclass(
    name: str,
    code: str,
    category_key: str,
    default_message: str,
    documentation: str,
    status_code: Optional[int] = None,
) -> ClassDeclaration:
    args = [
        "message",
        Literal.of(code),
        f"{CATEGORY_ENUM}.{category_member(category_key)}",
    ]
    if status_code is not None:
        args.append(Literal.of(status_code))

    return ClassDeclaration(
        name=name,
        superclass=BASE_ERROR_CLASS,
        exported=True,
        documentation=documentation,
        constructor=Constructor(
            parameters=[
                Parameter(
                    "message", "string", default=Literal.of(default_message).raw
                )
            ],
            body=[ExpressionStatement(CallExpression("super", args))],
        ),
    )


def build_error_class(
    error: ErrorSpec, entity: str = "error", class_name: Optional[str] = None
) -> ClassDeclaration:
    """Build the error subclass for one plan error."""
    if not error.code:
        raise ConstructionError(entity, "code")

    derived = error_class_name(error.code)
    name = class_name or derived

    doc_lines = [error.description or f"Error {error.code}"]
    if error.remedy:
        doc_lines.extend(["", f"Remedy: {error.remedy}"])
    if name != derived:
        doc_lines.extend(["", f"Generated as {name}: {derived} is already declared."])

    return _subclass(
        name=name,
        code=error.code,
        category_key=categorize_error(error.type_name),
        default_message=error.description or error.code,
        documentation="\n".join(doc_lines),
        status_code=error.status_code,
    )


def build_error_types(
    plan: DesignPlan, warnings: Optional[List[str]] = None
) -> List[Node]:
    """
    Build the error hierarchy: the category enum, the base error, the
    configuration and network errors the client throws, and one subclass
    per plan error.

    Plan errors whose class name is already declared are generated under
    a renamed class (see ``assign_error_class_names``); each rename is
    appended to ``warnings``.
    """
    declarations: List[Node] = [
        _category_enum(),
        _base_error_class(),
        _subclass(
            CONFIG_ERROR_CLASS,
            "CONFIG_ERROR",
            "validation",
            "Invalid client configuration",
            "Error thrown when configuration is invalid",
        ),
        _subclass(
            NETWORK_ERROR_CLASS,
            "NETWORK_ERROR",
            "network",
            "Network request failed",
            "Error thrown when network request fails",
        ),
    ]

    class_names, renames = assign_error_class_names(plan.errors)
    for index, error in enumerate(plan.errors):
        declarations.append(
            build_error_class(error, f"errors[{index}]", class_name=class_names[index])
        )

    for message in renames:
        logger.warning(message)
    if warnings is not None:
        warnings.extend(renames)

    return declarations


# ---------------------------------------------------------------------------
# Configuration builder
# ---------------------------------------------------------------------------


def build_configuration(plan: DesignPlan) -> List[Node]:
    """Build the transport and configuration interfaces plus the defaults factory."""
    configuration = plan.configuration
    credential = configuration.credential

    transport = InterfaceDeclaration(
        name=TRANSPORT_INTERFACE,
        exported=True,
        documentation="Performs the HTTP exchange for the client",
        properties=[
            PropertyDeclaration(
                "request",
                "(method: string, url: string, params: Record<string, unknown>)"
                " => Promise<unknown>",
            )
        ],
    )

    properties = [
        PropertyDeclaration("baseUrl", "string"),
        PropertyDeclaration("timeout", "number"),
        PropertyDeclaration("maxRetries", "number"),
    ]
    if credential is not None:
        properties.append(
            PropertyDeclaration(credential[0], credential[1], optional=True)
        )
    properties.append(
        PropertyDeclaration("transport", TRANSPORT_INTERFACE, optional=True)
    )

    config_interface = InterfaceDeclaration(
        name=CONFIG_INTERFACE,
        exported=True,
        documentation="Configuration for SDK client",
        properties=properties,
    )

    factory_params = []
    entries = [
        ObjectProperty(
            "baseUrl", Literal.of(configuration.base_url or DEFAULT_BASE_URL)
        ),
        ObjectProperty("timeout", Literal.of(configuration.timeout_ms)),
        ObjectProperty("maxRetries", Literal.of(configuration.max_retries)),
    ]
    if credential is not None:
        factory_params.append(Parameter(credential[0], credential[1]))
        entries.append(ObjectProperty(credential[0], Identifier(credential[0])))

    factory = FunctionDeclaration(
        name="createDefaultConfig",
        parameters=factory_params,
        return_type=CONFIG_INTERFACE,
        exported=True,
        documentation=DocComment(
            description="Create a configuration object with sensible defaults"
        ),
        body=[ReturnStatement(ObjectExpression(entries))],
    )

    return [transport, config_interface, factory]


# ---------------------------------------------------------------------------
# Type definition builder
# ---------------------------------------------------------------------------


def build_type_definition(type_spec: TypeSpec, entity: str = "type") -> Node:
    """
    Build an interface (one property per field) or an enum for a plan type.

    Raises:
        ConstructionError: If the type, a field, or an enum value lacks a
            required field, or the type kind is not interface or enum
    """
    if not type_spec.name:
        raise ConstructionError(entity, "name")

    if type_spec.kind == "interface":
        properties = []
        for index, type_field in enumerate(type_spec.fields):
            if not type_field.name:
                raise ConstructionError(
                    f"type '{type_spec.name}' field {index}", "name"
                )
            if not type_field.type:
                raise ConstructionError(
                    f"type '{type_spec.name}' field '{type_field.name}'", "type"
                )
            properties.append(
                PropertyDeclaration(
                    name=type_field.name,
                    type=type_field.type,
                    optional=type_field.optional,
                    readonly=type_field.readonly,
                )
            )
        return InterfaceDeclaration(
            name=type_spec.name,
            properties=properties,
            exported=type_spec.exported,
            documentation=type_spec.description,
        )

    if type_spec.kind == "enum":
        members = []
        for index, (name, value) in enumerate(type_spec.enum_values):
            if not name:
                raise ConstructionError(
                    f"enum '{type_spec.name}' value {index}", "name"
                )
            members.append(EnumMember(name, value))
        return EnumDeclaration(
            name=type_spec.name,
            members=members,
            exported=type_spec.exported,
            documentation=type_spec.description,
        )

    raise ConstructionError(
        f"type '{type_spec.name}'",
        "kind",
        detail=f"unsupported type kind {type_spec.kind!r}",
    )


# ---------------------------------------------------------------------------
# Whole program
# ---------------------------------------------------------------------------


def build_program(plan: DesignPlan, warnings: Optional[List[str]] = None) -> Program:
    """
    Assemble the complete SDK program for a plan.

    Order: configuration, error types, plan types, then the client class.
    Non-fatal construction warnings are appended to ``warnings``.
    """
    body: List[Node] = []
    body.extend(build_configuration(plan))
    body.extend(build_error_types(plan, warnings))
    for index, type_spec in enumerate(plan.types):
        body.append(build_type_definition(type_spec, f"types[{index}]"))
    body.append(build_client_class(plan))

    logger.debug("Built program with %d top-level declarations", len(body))
    return Program(body)
