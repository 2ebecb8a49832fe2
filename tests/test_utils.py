import json

import pytest

from sdkgen.utils import PlanLoaderError, load_design_plan


def test_load_design_plan(plan_file):
    plan = load_design_plan(plan_file)
    assert plan.client_name == "WalletClient"
    assert len(plan.methods) == 2


def test_missing_file(tmp_path):
    with pytest.raises(PlanLoaderError, match="not found"):
        load_design_plan(tmp_path / "absent.json")


def test_invalid_json_is_chained(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(PlanLoaderError) as exc_info:
        load_design_plan(path)
    assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)


def test_top_level_must_be_object(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(PlanLoaderError, match="JSON object"):
        load_design_plan(path)
