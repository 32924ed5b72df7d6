from __future__ import annotations

import json

from typer.testing import CliRunner

from bem_checker.cli import app


def test_rules_json_lists_rules_in_evaluation_order() -> None:
    runner = CliRunner()
    res = runner.invoke(app, ["rules", "--format", "json"])
    assert res.exit_code == 0
    rows = json.loads(res.output)
    assert [r["rule_id"] for r in rows] == [
        "R4_NO_ELEMENT_NESTING",
        "R1_CHECK_BLOCK",
        "R2_CHECK_ELEMENT",
        "R3_CHECK_MODIFIER",
        "R5_MODIFIER_FORMAT",
    ]
    assert all(r["title"] and r["description"] for r in rows)


def test_rules_terminal_renders_table() -> None:
    runner = CliRunner()
    res = runner.invoke(app, ["rules"])
    assert res.exit_code == 0
    assert "bem-checker rules" in res.output


def test_rules_rejects_unknown_format() -> None:
    runner = CliRunner()
    res = runner.invoke(app, ["rules", "--format", "sarif"])
    assert res.exit_code != 0
