"""
sdkgen: client SDK and documentation generation from a design plan.
"""

__version__ = "0.1.0"

from .codegen import generate_for_plan, quick_generate
from .codegen.core.plan import DesignPlan, plan_from_dict
from .docs import DocumentationConfig, DocumentationGenerator, build_context
from .utils import PlanLoaderError, load_design_plan

__all__ = [
    "__version__",
    "DesignPlan",
    "plan_from_dict",
    "load_design_plan",
    "PlanLoaderError",
    "generate_for_plan",
    "quick_generate",
    "DocumentationConfig",
    "DocumentationGenerator",
    "build_context",
]
