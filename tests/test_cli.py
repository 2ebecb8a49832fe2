import json

from sdkgen.cli import create_parser, main


def test_parser_defaults():
    args = create_parser().parse_args(["plan.json"])
    assert args.plan == "plan.json"
    assert args.language is None
    assert args.docs is None
    assert not args.verbose


def test_list_languages():
    assert main(["--list-languages"]) == 0


def test_plan_is_required_for_generation():
    assert main([]) == 1


def test_generate_to_file(plan_file, tmp_path):
    output = tmp_path / "src" / "client.ts"
    assert main([str(plan_file), "--output", str(output)]) == 0
    assert "export class WalletClient {" in output.read_text(encoding="utf-8")


def test_generate_with_docs(plan_file, tmp_path):
    docs = tmp_path / "sdk"
    output = str(tmp_path / "client.ts")
    assert main([str(plan_file), "-o", output, "--docs", str(docs)]) == 0

    assert (docs / "README.md").read_text(encoding="utf-8").startswith("# wallet-sdk")
    assert (docs / "docs" / "API_REFERENCE.md").exists()
    assert not (docs / "docs" / "EXAMPLES.md").exists()


def test_generation_to_stdout(plan_file, capsys):
    assert main([str(plan_file), "--verbose"]) == 0
    assert "WalletClient" in capsys.readouterr().out


def test_missing_plan_file(tmp_path):
    assert main([str(tmp_path / "absent.json")]) == 1


def test_unknown_language(plan_file):
    assert main([str(plan_file), "--language", "cobol"]) == 1


def test_construction_failure_exits_nonzero(tmp_path, plan_data):
    plan_data["methods"].append({"parameters": []})
    path = tmp_path / "broken_plan.json"
    path.write_text(json.dumps(plan_data), encoding="utf-8")
    assert main([str(path)]) == 1


def test_bad_config_file(plan_file, tmp_path):
    config = tmp_path / "emit.json"
    config.write_text('{"indent_size": 0}', encoding="utf-8")
    assert main([str(plan_file), "--config", str(config)]) == 1
