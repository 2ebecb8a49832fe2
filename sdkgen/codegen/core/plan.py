"""
Design plan representation for SDK generation.

A design plan is the language-neutral description of an SDK surface.
It is produced upstream (from OpenAPI, ABI, ...) and consumed here by
both the declaration builders and the documentation builders, so
generated code and documentation always describe the same entities.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from ...logging_config import get_logger

logger = get_logger(__name__)


AUTH_METHODS = ("none", "api-key", "oauth", "wallet")
AUDIENCES = ("beginner", "intermediate", "advanced")

# Credential the client stores per auth method: (property, type, environment variable)
CREDENTIALS: Dict[str, Tuple[str, str, str]] = {
    "api-key": ("apiKey", "string", "API_KEY"),
    "oauth": ("accessToken", "string", "ACCESS_TOKEN"),
    "wallet": ("signer", "unknown", "WALLET_PRIVATE_KEY"),
}


@dataclass
class MethodParameter:
    """A single method parameter."""

    name: Optional[str]
    type: Optional[str]
    optional: bool = False
    description: Optional[str] = None
    default: Optional[str] = None


@dataclass
class MethodSpec:
    """One operation the SDK client exposes."""

    name: Optional[str]
    description: Optional[str] = None
    parameters: List[MethodParameter] = field(default_factory=list)
    return_type: Optional[str] = None
    is_async: bool = False
    http_method: Optional[str] = None
    endpoint: Optional[str] = None
    requires_auth: bool = False
    throws: List[str] = field(default_factory=list)
    deprecated: bool = False
    category: Optional[str] = None


@dataclass
class TypeField:
    """A field of a named type."""

    name: Optional[str]
    type: Optional[str]
    optional: bool = False
    readonly: bool = False
    description: Optional[str] = None


@dataclass
class TypeSpec:
    """A named type (interface or enum) the SDK declares."""

    name: Optional[str]
    fields: List[TypeField] = field(default_factory=list)
    description: Optional[str] = None
    kind: str = "interface"  # interface, enum
    enum_values: List[Tuple[str, Union[str, int]]] = field(default_factory=list)
    exported: bool = True


@dataclass
class ErrorSpec:
    """A named error the SDK can raise."""

    code: Optional[str]
    category: Optional[str] = None
    description: str = ""
    cause: str = ""
    remedy: str = ""
    example: Optional[str] = None
    status_code: Optional[int] = None
    recoverable: bool = True

    @property
    def type_name(self) -> str:
        """The string used to infer the error's category."""
        return self.category or self.code or ""


@dataclass
class PlanConfiguration:
    """Configuration facts about the SDK."""

    auth_required: bool = False
    auth_method: str = "none"  # none, api-key, oauth, wallet
    target_language: str = "typescript"
    audience: str = "intermediate"
    base_url: Optional[str] = None
    timeout_ms: int = 30000
    max_retries: int = 3

    @property
    def uses_auth(self) -> bool:
        return self.auth_required and self.auth_method != "none"

    @property
    def credential(self) -> Optional[Tuple[str, str, str]]:
        """Stored credential (property, type, env var), or None without auth."""
        if not self.uses_auth:
            return None
        return CREDENTIALS.get(self.auth_method)


@dataclass
class DesignPlan:
    """Complete description of an SDK surface."""

    client_name: Optional[str]
    product_name: str = ""
    version: str = "0.1.0"
    description: str = ""
    methods: List[MethodSpec] = field(default_factory=list)
    types: List[TypeSpec] = field(default_factory=list)
    errors: List[ErrorSpec] = field(default_factory=list)
    configuration: PlanConfiguration = field(default_factory=PlanConfiguration)

    def validate(self) -> List[str]:
        """
        Check the plan for structural issues that do not stop generation.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        seen_methods = set()
        for method in self.methods:
            if method.name in seen_methods:
                warnings.append(f"Duplicate method name: {method.name}")
            seen_methods.add(method.name)
            if method.name and not method.return_type:
                warnings.append(f"Method {method.name} has no return type")

        seen_codes = set()
        for error in self.errors:
            if error.code in seen_codes:
                warnings.append(f"Duplicate error code: {error.code}")
            seen_codes.add(error.code)

        for type_spec in self.types:
            if type_spec.kind == "interface" and not type_spec.fields:
                warnings.append(f"Type '{type_spec.name}' has no fields")
            elif type_spec.kind == "enum" and not type_spec.enum_values:
                warnings.append(f"Enum '{type_spec.name}' has no values")

        if self.configuration.auth_method not in AUTH_METHODS:
            warnings.append(f"Unknown auth method: {self.configuration.auth_method}")

        return warnings


# ---------------------------------------------------------------------------
# Error categories shared by code and documentation generation
# ---------------------------------------------------------------------------

# Checked in order; the first matching keyword wins
ERROR_CATEGORIES: List[Tuple[str, str, Tuple[str, ...]]] = [
    (
        "authentication",
        "Authentication & Authorization",
        ("auth", "permission", "forbidden", "unauthorized"),
    ),
    ("validation", "Validation Errors", ("validation", "invalid")),
    ("network", "Network Errors", ("network", "connection", "timeout")),
    (
        "rate_limit",
        "Rate Limiting",
        ("rate_limit", "rate-limit", "ratelimit", "throttl", "too_many"),
    ),
    ("server", "Server Errors", ("server", "internal", "unavailable")),
]

OTHER_CATEGORY = ("other", "Other Errors")

CATEGORY_LABELS: Dict[str, str] = {key: label for key, label, _ in ERROR_CATEGORIES}
CATEGORY_LABELS[OTHER_CATEGORY[0]] = OTHER_CATEGORY[1]


def categorize_error(type_name: Optional[str]) -> str:
    """
    Infer the category key for an error type name by substring match.

    Returns:
        One of the keys of ``CATEGORY_LABELS``
    """
    lowered = (type_name or "").lower()
    if lowered in CATEGORY_LABELS:
        return lowered
    for key, _label, keywords in ERROR_CATEGORIES:
        if any(keyword in lowered for keyword in keywords):
            return key
    return OTHER_CATEGORY[0]


def category_label(key: str) -> str:
    return CATEGORY_LABELS.get(key, OTHER_CATEGORY[1])


# ---------------------------------------------------------------------------
# Loading from dicts
# ---------------------------------------------------------------------------


def _get(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first present key, so snake_case and camelCase both work."""
    for key in keys:
        if key in data:
            return data[key]
    return default


def _optional_flag(data: Dict[str, Any]) -> bool:
    if "optional" in data:
        return bool(data["optional"])
    if "required" in data:
        return not data["required"]
    return False


def _convert_parameter(data: Dict[str, Any]) -> MethodParameter:
    return MethodParameter(
        name=data.get("name"),
        type=_get(data, "type", "parameterType"),
        optional=_optional_flag(data),
        description=data.get("description"),
        default=_get(data, "default", "defaultValue"),
    )


def _convert_method(data: Dict[str, Any]) -> MethodSpec:
    returns = _get(data, "return_type", "returnType", "returns")
    is_async = bool(_get(data, "is_async", "isAsync", default=False))
    if isinstance(returns, dict):
        is_async = bool(returns.get("isAsync", is_async))
        returns = returns.get("type")

    hints = data.get("generationHints") or {}

    return MethodSpec(
        name=data.get("name"),
        description=data.get("description"),
        parameters=[_convert_parameter(p) for p in data.get("parameters", [])],
        return_type=returns,
        is_async=is_async,
        http_method=_get(data, "http_method", "httpMethod"),
        endpoint=data.get("endpoint"),
        requires_auth=bool(_get(data, "requires_auth", "requiresAuth", default=False)),
        throws=list(data.get("throws", [])),
        deprecated=bool(data.get("deprecated", hints.get("deprecated", False))),
        category=data.get("category"),
    )


def _convert_type(data: Dict[str, Any]) -> TypeSpec:
    enum_values = []
    for value in _get(data, "enum_values", "enumValues", default=[]):
        if isinstance(value, dict):
            enum_values.append((value.get("name"), value.get("value")))
        else:
            enum_values.append(tuple(value))

    return TypeSpec(
        name=data.get("name"),
        fields=[
            TypeField(
                name=f.get("name"),
                type=f.get("type"),
                optional=_optional_flag(f),
                readonly=bool(f.get("readonly", False)),
                description=f.get("description"),
            )
            for f in data.get("fields", [])
        ],
        description=data.get("description"),
        kind=data.get("kind", "interface"),
        enum_values=enum_values,
        exported=bool(_get(data, "exported", "isExported", default=True)),
    )


def _convert_error(data: Dict[str, Any]) -> ErrorSpec:
    return ErrorSpec(
        code=_get(data, "code", "errorCode", "name"),
        category=_get(data, "category", "errorType"),
        description=data.get("description") or data.get("message") or "",
        cause=data.get("cause", ""),
        remedy=_get(data, "remedy", "solution", default=""),
        example=data.get("example"),
        status_code=_get(data, "status_code", "statusCode"),
        recoverable=bool(data.get("recoverable", True)),
    )


def plan_from_dict(data: Dict[str, Any]) -> DesignPlan:
    """
    Convert a JSON-compatible dict into a DesignPlan.

    Missing required sub-fields (a method without a name, ...) are kept as
    ``None`` so that the builders can report them with the entity attached.

    Args:
        data: Plan dict using snake_case or camelCase keys

    Returns:
        DesignPlan
    """
    client = data.get("client") or {}
    product = data.get("product") or {}
    config_data = data.get("configuration") or {}
    auth = data.get("auth") or {}

    auth_method = _get(
        config_data, "auth_method", "authMethod", default=auth.get("type")
    )
    if auth_method == "bearer":
        auth_method = "api-key"
    elif auth_method == "oauth2":
        auth_method = "oauth"

    auth_required = _get(config_data, "auth_required", "authRequired")
    if auth_required is None:
        auth_required = auth_method not in (None, "none")

    configuration = PlanConfiguration(
        auth_required=bool(auth_required),
        auth_method=auth_method or "none",
        target_language=_get(
            config_data,
            "target_language",
            "targetLanguage",
            default=(data.get("target") or {}).get("language", "typescript"),
        ),
        audience=config_data.get("audience", "intermediate"),
        base_url=_get(
            config_data, "base_url", "baseUrl", default=client.get("baseUrl")
        ),
        timeout_ms=_get(
            config_data, "timeout_ms", "timeout", default=client.get("timeout", 30000)
        ),
        max_retries=_get(
            config_data,
            "max_retries",
            "maxRetries",
            default=(client.get("retryPolicy") or {}).get("maxRetries", 3),
        ),
    )

    plan = DesignPlan(
        client_name=_get(
            data, "client_name", "clientName", default=client.get("className")
        ),
        product_name=_get(
            data, "product_name", "productName", default=product.get("name", "")
        ),
        version=data.get("version", product.get("version", "0.1.0")),
        description=data.get("description", product.get("description", "")),
        methods=[_convert_method(m) for m in data.get("methods", [])],
        types=[_convert_type(t) for t in data.get("types", [])],
        errors=[_convert_error(e) for e in data.get("errors", [])],
        configuration=configuration,
    )

    logger.debug(
        "Loaded plan %s: %d methods, %d types, %d errors",
        plan.client_name,
        len(plan.methods),
        len(plan.types),
        len(plan.errors),
    )
    return plan
