"""
Authentication guide builder.

Branches on the configured auth method. Without required authentication
a short no-setup page is rendered instead of the full guide.
"""

from .context import DocumentationContext
from .markdown import bullets, code_block, join_sections, numbered
from .snippets import SnippetRenderer


class AuthenticationBuilder:
    """Builds AUTHENTICATION.md."""

    def __init__(self, context: DocumentationContext):
        self.context = context
        self.config = context.config
        self.snippets = SnippetRenderer(context)

    def build(self) -> str:
        if not self.config.uses_auth:
            return self.build_no_auth_required()

        return join_sections(
            [
                self.build_title(),
                self.build_auth_method(),
                self.build_setup_guide(),
                self.build_best_practices(),
                self.build_troubleshooting(),
            ]
        )

    def _client_snippet(self) -> str:
        if not self.snippets.supported:
            return ""
        code = "\n".join(
            [self.snippets.import_statement(), "", self.snippets.client_construction()]
        )
        return code_block(code, self.snippets.fence)

    def build_title(self) -> str:
        return "\n".join(
            [
                "# Authentication",
                "",
                f"{self.config.sdk_name} requires authentication "
                "for protected operations.",
            ]
        )

    def build_auth_method(self) -> str:
        method = self.config.auth_method
        if method == "api-key":
            return self.build_api_key_auth()
        if method == "oauth":
            return self.build_oauth_auth()
        if method == "wallet":
            return self.build_wallet_auth()
        return "\n".join(
            [
                "## Credentials",
                "",
                f"Configure the `{method}` credentials required by the API "
                "before creating a client.",
            ]
        )

    def build_api_key_auth(self) -> str:
        lines = [
            "## API Key Authentication",
            "",
            "### Get Your API Key",
            "",
            numbered(
                [
                    "Sign in to your provider dashboard",
                    "Navigate to **Settings > API Keys**",
                    "Click **Generate New Key**",
                    "Copy your key and store it securely",
                ]
            ),
        ]
        snippet = self._client_snippet()
        if snippet:
            lines.extend(["", "### Using Your API Key", "", snippet])
        lines.extend(
            [
                "",
                "### Environment Variables",
                "",
                code_block('echo "API_KEY=your-api-key-here" > .env', "bash"),
            ]
        )
        return "\n".join(lines)

    def build_oauth_auth(self) -> str:
        lines = [
            "## OAuth 2.0 Authentication",
            "",
            "### Authorization Flow",
            "",
            numbered(
                [
                    "Redirect the user to the authorization endpoint",
                    "The user grants permission",
                    "Receive an authorization code",
                    "Exchange the code for an access token",
                ]
            ),
        ]
        snippet = self._client_snippet()
        if snippet:
            lines.extend(["", "### Using the Access Token", "", snippet])
        return "\n".join(lines)

    def build_wallet_auth(self) -> str:
        lines = [
            "## Wallet Authentication",
            "",
            "### Supported Wallets",
            "",
            bullets(["MetaMask", "WalletConnect", "Coinbase Wallet", "Phantom"]),
        ]
        snippet = self._client_snippet()
        if snippet:
            lines.extend(["", "### Connect Wallet", "", snippet])
        return "\n".join(lines)

    def build_setup_guide(self) -> str:
        return "\n".join(
            [
                "## Setup Guide",
                "",
                "### Development Environment",
                "",
                numbered(
                    [
                        "Create a `.env.local` file",
                        "Add your credentials",
                        "Load it in your application",
                    ]
                ),
                "",
                "### Production Environment",
                "",
                bullets(
                    [
                        "Store secrets in environment variables",
                        "Use a secrets manager",
                        "Never commit credentials to version control",
                    ]
                ),
            ]
        )

    def build_best_practices(self) -> str:
        return "## Security Best Practices\n\n" + bullets(
            [
                "Never hardcode credentials",
                "Rotate credentials regularly",
                "Restrict credential permissions",
                "Monitor credential usage",
                "Revoke compromised credentials immediately",
            ]
        )

    def build_troubleshooting(self) -> str:
        return "\n".join(
            [
                "## Troubleshooting",
                "",
                "### Invalid Credentials",
                "",
                bullets(
                    [
                        "Ensure the credential is copied correctly",
                        "Check the environment variable name",
                        "Generate a new credential in the dashboard",
                    ]
                ),
                "",
                "### Authentication Fails",
                "",
                bullets(
                    [
                        "Verify credentials in the environment",
                        "Check network connectivity",
                        "Review the error message for details",
                    ]
                ),
            ]
        )

    def build_no_auth_required(self) -> str:
        lines = [
            "# Authentication",
            "",
            f"{self.config.sdk_name} requires no authentication.",
        ]
        snippet = self._client_snippet()
        if snippet:
            lines.extend(["", "Simply import and use the SDK:", "", snippet])
        return "\n".join(lines)
