"""Shared fixtures: a small wallet API plan and helpers around it."""

import copy
import json

import pytest

from sdkgen.codegen.core.plan import plan_from_dict
from sdkgen.codegen.languages.typescript import TypeScriptEmitter
from sdkgen.docs import CodeExample, DocumentationConfig, build_context

WALLET_PLAN = {
    "client_name": "WalletClient",
    "product_name": "wallet-sdk",
    "version": "1.2.0",
    "description": "Client for the wallet API",
    "configuration": {
        "auth_required": True,
        "auth_method": "api-key",
        "target_language": "typescript",
        "base_url": "https://api.wallet.test",
    },
    "methods": [
        {
            "name": "getBalance",
            "description": "Get the balance of an address",
            "parameters": [
                {"name": "address", "type": "string", "description": "Wallet address"}
            ],
            "return_type": "number",
        },
        {
            "name": "transfer",
            "description": "Send funds to another address",
            "parameters": [
                {"name": "to", "type": "string"},
                {"name": "amount", "type": "number"},
                {"name": "memo", "type": "string", "optional": True},
            ],
            "return_type": "Promise<Receipt>",
            "is_async": True,
            "http_method": "post",
            "endpoint": "/transfers",
            "requires_auth": True,
            "throws": ["InsufficientFundsError"],
        },
    ],
    "types": [
        {
            "name": "Receipt",
            "description": "Result of a transfer",
            "fields": [
                {"name": "id", "type": "string", "readonly": True},
                {"name": "note", "type": "string", "optional": True},
            ],
        },
        {
            "name": "Network",
            "kind": "enum",
            "enum_values": [["Mainnet", "mainnet"], ["Testnet", "testnet"]],
        },
    ],
    "errors": [
        {
            "code": "validation_failed",
            "description": "Input failed validation",
            "remedy": "Check the parameters",
        },
        {
            "code": "auth_expired",
            "description": "The API key has expired",
            "status_code": 401,
            "recoverable": False,
        },
        {"code": "insufficient_funds", "description": "Balance too low"},
    ],
}


@pytest.fixture
def plan_data():
    return copy.deepcopy(WALLET_PLAN)


@pytest.fixture
def plan(plan_data):
    return plan_from_dict(plan_data)


@pytest.fixture
def open_plan(plan_data):
    """The wallet plan without authentication."""
    plan_data["configuration"] = {"auth_required": False, "auth_method": "none"}
    for method in plan_data["methods"]:
        method.pop("requires_auth", None)
    return plan_from_dict(plan_data)


@pytest.fixture
def emitter():
    return TypeScriptEmitter()


@pytest.fixture
def examples():
    return [
        CodeExample(
            title="Check a balance",
            code="const balance = client.getBalance(address);",
            difficulty="beginner",
        ),
        CodeExample(
            title="Batch transfers",
            code="await Promise.all(targets.map((t) => client.transfer(t, 1)));",
            difficulty="advanced",
            output="[Receipt, Receipt]",
        ),
    ]


@pytest.fixture
def make_context(plan):
    """Build a documentation context for ``plan`` with config overrides."""

    def factory(target_plan=None, examples=None, **overrides):
        target_plan = target_plan or plan
        config = DocumentationConfig.from_plan(target_plan, **overrides)
        return build_context(config, target_plan, examples=examples)

    return factory


@pytest.fixture
def plan_file(tmp_path, plan_data):
    path = tmp_path / "plan.json"
    path.write_text(json.dumps(plan_data), encoding="utf-8")
    return path
