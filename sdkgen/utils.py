"""Utility functions for loading design plans.

This module reads plan files from disk with proper error handling and
hands the parsed data to the plan loader.
"""

import json
from pathlib import Path
from typing import Union

from .codegen.core.plan import DesignPlan, plan_from_dict
from .logging_config import get_logger

logger = get_logger(__name__)


class PlanLoaderError(Exception):
    """Custom exception for plan loading errors."""

    pass


def load_design_plan(file_path: Union[str, Path]) -> DesignPlan:
    """Load a design plan from a JSON file.

    Args:
        file_path: Path to the plan file.

    Returns:
        The parsed DesignPlan.

    Raises:
        PlanLoaderError: If the file is missing, unreadable, not valid JSON,
            or not a JSON object.
    """
    file_path = Path(file_path)
    logger.debug("Attempting to load design plan from file: %s", file_path)

    if not file_path.exists():
        logger.error("File not found: %s", file_path)
        raise PlanLoaderError(f"File not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        logger.warning("File does not have .json extension: %s", file_path)

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in file %s: %s", file_path, e)
        raise PlanLoaderError(f"Invalid JSON in file {file_path}: {e}") from e
    except OSError as e:
        logger.error("Error reading file %s: %s", file_path, e)
        raise PlanLoaderError(f"Error reading file {file_path}: {e}") from e

    if not isinstance(data, dict):
        raise PlanLoaderError(
            f"Design plan in {file_path} must be a JSON object, "
            f"got {type(data).__name__}"
        )

    plan = plan_from_dict(data)
    logger.info(
        "Loaded design plan %r from %s (%d methods)",
        plan.client_name,
        file_path,
        len(plan.methods),
    )
    return plan
