"""
Error-handling guide builder.

Errors are grouped with the same categorizer the error-type builder uses
for the generated ErrorCategory enum, so the guide and the code agree on
where each error belongs.
"""

from typing import Dict, List

from ..codegen.core.declarations import BASE_ERROR_CLASS
from ..codegen.core.plan import (
    ERROR_CATEGORIES,
    OTHER_CATEGORY,
    categorize_error,
    category_label,
)
from .context import DocumentationContext, ErrorDocumentation
from .markdown import bullets, code_block, join_sections
from .snippets import SnippetRenderer

GENERIC_TAXONOMY = [
    (
        "Network Errors",
        ["Connection timeouts", "DNS resolution failures", "Rate limiting"],
    ),
    (
        "Authentication Errors",
        ["Invalid credentials", "Expired tokens", "Insufficient permissions"],
    ),
    (
        "Validation Errors",
        ["Invalid parameters", "Missing required fields", "Type mismatches"],
    ),
    ("Server Errors", ["5xx server errors", "Service unavailable", "Internal errors"]),
]

TS_RETRY_SIGNATURE = "withRetry<T>(fn: () => Promise<T>, maxRetries = 3): Promise<T>"

RETRY_SNIPPETS: Dict[str, str] = {
    "typescript": f"async function {TS_RETRY_SIGNATURE} "
    + """{
  for (let attempt = 0; ; attempt++) {
    try {
      return await fn();
    } catch (error) {
      if (attempt >= maxRetries - 1) throw error;
      await new Promise((resolve) => setTimeout(resolve, 1000 * 2 ** attempt));
    }
  }
}""",
    "python": """import time


def with_retry(fn, max_retries=3):
    for attempt in range(max_retries):
        try:
            return fn()
        except Exception:
            if attempt == max_retries - 1:
                raise
            time.sleep(2 ** attempt)""",
    "go": """func withRetry[T any](fn func() (T, error), maxRetries int) (T, error) {
\tvar result T
\tvar err error
\tfor attempt := 0; attempt < maxRetries; attempt++ {
\t\tif result, err = fn(); err == nil {
\t\t\treturn result, nil
\t\t}
\t\ttime.Sleep(time.Duration(1<<attempt) * time.Second)
\t}
\treturn result, err
}""",
}
RETRY_SNIPPETS["javascript"] = RETRY_SNIPPETS["typescript"].replace(
    TS_RETRY_SIGNATURE, "withRetry(fn, maxRetries = 3)"
)


class ErrorHandlingBuilder:
    """Builds ERROR_HANDLING.md."""

    def __init__(self, context: DocumentationContext):
        self.context = context
        self.snippets = SnippetRenderer(context)

    def build(self) -> str:
        return join_sections(
            [
                self.build_title(),
                self.build_error_types(),
                self.build_recovery_strategies(),
                self.build_best_practices(),
            ]
        )

    def build_title(self) -> str:
        return "# Error Handling\n\nUnderstanding and handling errors from the SDK."

    def group_by_category(self) -> Dict[str, List[ErrorDocumentation]]:
        """Errors keyed by category label in taxonomy order, skipping empty ones."""
        keys = [key for key, _label, _keywords in ERROR_CATEGORIES]
        keys.append(OTHER_CATEGORY[0])
        buckets: Dict[str, List[ErrorDocumentation]] = {key: [] for key in keys}
        for error in self.context.errors.values():
            buckets[categorize_error(error.error_type)].append(error)
        return {
            category_label(key): errors for key, errors in buckets.items() if errors
        }

    def build_error_types(self) -> str:
        if not self.context.errors:
            return self.build_generic_errors()

        lines = ["## Error Types"]
        for label, errors in self.group_by_category().items():
            lines.extend(["", f"### {label}"])
            for error in errors:
                lines.extend(["", self.build_error_entry(error)])
        return "\n".join(lines)

    def build_error_entry(self, error: ErrorDocumentation) -> str:
        lines = [f"#### {error.error_code}"]
        if error.description:
            lines.extend(["", f"**Description:** {error.description}"])
        if error.cause:
            lines.extend(["", f"**Cause:** {error.cause}"])
        if error.solution:
            lines.extend(["", f"**Solution:** {error.solution}"])
        lines.extend(["", f"**Recoverable:** {'yes' if error.recoverable else 'no'}"])
        if error.example:
            example = code_block(error.example, self.snippets.fence)
            lines.extend(["", "**Example:**", "", example])
        return "\n".join(lines)

    def build_generic_errors(self) -> str:
        lines = ["## Common Error Types"]
        for title, items in GENERIC_TAXONOMY:
            lines.extend(["", f"### {title}", "", bullets(items)])
        return "\n".join(lines)

    def build_recovery_strategies(self) -> str:
        language = self.snippets.language
        if language not in RETRY_SNIPPETS:
            language = "typescript"
        lines = [
            "## Recovery Strategies",
            "",
            "### Retry with Exponential Backoff",
            "",
            code_block(RETRY_SNIPPETS[language], language),
        ]

        detection = self.build_error_detection()
        if detection:
            lines.extend(["", "### Error Detection", "", detection])
        return "\n".join(lines)

    def build_error_detection(self) -> str:
        """Catch the generated error classes; JavaScript-family targets only."""
        method = self.context.first_method
        if self.snippets.language not in ("typescript", "javascript") or method is None:
            return ""

        checks = []
        for error in list(self.context.errors.values())[:2]:
            checks.append(
                (
                    f"error instanceof {error.class_name}",
                    f"// {error.solution or 'Handle ' + error.error_code}",
                )
            )
        checks.append(
            (
                f"error instanceof {BASE_ERROR_CLASS}",
                "console.error(error.code, error.message);",
            )
        )

        call = self.snippets.method_call(method).split("\n")[0]
        body = ["try {", f"  {call}", "} catch (error) {"]
        for index, (condition, action) in enumerate(checks):
            keyword = "if" if index == 0 else "} else if"
            body.extend([f"  {keyword} ({condition}) {{", f"    {action}"])
        body.extend(["  } else {", "    throw error;", "  }", "}"])
        return code_block("\n".join(body), self.snippets.fence)

    def build_best_practices(self) -> str:
        return "## Best Practices\n\n" + bullets(
            [
                "Always wrap API calls in error handling",
                "Check error codes to determine the recovery strategy",
                "Implement exponential backoff for retries",
                "Log errors with full context",
                "Don't expose internal errors to end users",
                "Provide helpful error messages",
            ]
        )
