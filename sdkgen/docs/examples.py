"""Usage examples builder, grouped by difficulty tier."""

from typing import Dict, List

from ..logging_config import get_logger
from .context import DIFFICULTY_TIERS, CodeExample, DocumentationContext
from .markdown import code_block, join_sections

logger = get_logger(__name__)

TIER_INTROS: Dict[str, str] = {
    "beginner": "Great for learning the basics.",
    "intermediate": "Build on the basics with more complex scenarios.",
    "advanced": "Powerful patterns for complex use cases.",
}


class ExamplesBuilder:
    """Builds EXAMPLES.md; empty when the context carries no examples."""

    def __init__(self, context: DocumentationContext):
        self.context = context

    def group_by_tier(self) -> Dict[str, List[CodeExample]]:
        groups: Dict[str, List[CodeExample]] = {tier: [] for tier in DIFFICULTY_TIERS}
        for example in self.context.examples:
            if example.difficulty not in groups:
                logger.warning(
                    "Example %r has unknown difficulty %r; not rendered",
                    example.title,
                    example.difficulty,
                )
                continue
            groups[example.difficulty].append(example)
        return groups

    def build(self) -> str:
        groups = self.group_by_tier()
        tiers = [self.build_tier(tier, groups[tier]) for tier in DIFFICULTY_TIERS]
        if not any(tiers):
            return ""
        return join_sections([self.build_title()] + tiers)

    def build_title(self) -> str:
        return "# Usage Examples\n\nComplete code examples for common tasks."

    def build_tier(self, tier: str, examples: List[CodeExample]) -> str:
        if not examples:
            return ""
        sections = [f"## {tier.capitalize()} Examples\n\n{TIER_INTROS[tier]}"]
        sections.extend(self.build_example(example) for example in examples)
        return join_sections(sections)

    def build_example(self, example: CodeExample) -> str:
        lines = [f"### {example.title}"]
        if example.description:
            lines.extend(["", example.description])
        lines.extend(["", code_block(example.code, example.language)])
        if example.output:
            lines.extend(["", "**Output:**", "", code_block(example.output)])
        if example.explanation:
            lines.extend(["", "**Explanation:**", "", example.explanation])
        return "\n".join(lines)
