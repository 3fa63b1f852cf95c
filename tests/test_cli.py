import json

import pytest
from click.testing import CliRunner

from warden import __version__
from warden.cli import cli

SECRET = "Zebra!Quokka77"


@pytest.fixture
def runner():
    return CliRunner()


def invoke_json(runner, *args):
    result = runner.invoke(cli, ["-q", "-o", "json", *args], obj={})
    assert result.exit_code == 0, result.output
    return json.loads(result.stdout)


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_analyze_json_never_echoes_password(runner):
    result = runner.invoke(cli, ["-q", "-o", "json", "analyze", SECRET], obj={})
    assert result.exit_code == 0
    assert SECRET not in result.output

    report = json.loads(result.stdout)
    assert report["report_metadata"]["target"] == "[password]"
    assert report["metadata"]["analysis"]["password_masked"] == "Z************7"
    assert report["summary"]["total_findings"] >= 1


def test_analyze_reads_hidden_prompt(runner):
    result = runner.invoke(cli, ["-q", "-o", "json", "analyze"], input=f"{SECRET}\n", obj={})
    assert result.exit_code == 0
    assert '"analysis"' in result.output
    assert SECRET not in result.output


def test_analyze_accepts_surrogate_escaped_argument(runner):
    report = invoke_json(runner, "analyze", "ab\udcff")
    analysis = report["metadata"]["analysis"]
    assert analysis["length"] == 3
    assert analysis["password_masked"] == "a*\ufffd"


def test_crack_time_selected_profiles(runner):
    report = invoke_json(runner, "crack-time", "-p", "gpu", "-p", "farm", SECRET)
    keys = [p["profile"]["key"] for p in report["metadata"]["projections"]]
    assert keys == ["gpu", "farm"]


def test_crack_time_rejects_unknown_profile(runner):
    result = runner.invoke(cli, ["crack-time", "-p", "quantum", SECRET], obj={})
    assert result.exit_code == 2


def test_risk_json(runner):
    report = invoke_json(runner, "risk", "xkqv")
    assert report["metadata"]["risk"]["tier"] == "high"
    assert report["risk"]["score"] == 100.0


def test_report_console(runner):
    result = runner.invoke(cli, ["report", SECRET], obj={})
    assert result.exit_code == 0
    assert "Security Report" in result.output
    assert "Executive Summary" in result.output


def test_analyze_console(runner):
    result = runner.invoke(cli, ["-q", "analyze", SECRET], obj={})
    assert result.exit_code == 0


def test_generate_json(runner):
    payload = invoke_json(runner, "generate", "--length", "20")
    assert payload["length"] == 20
    assert len(payload["password"]) == 20


def test_generate_reports_random_failure(runner, monkeypatch):
    def unavailable(_seq):
        raise OSError("no entropy")

    monkeypatch.setattr("secrets.choice", unavailable)
    result = runner.invoke(cli, ["-q", "generate"], obj={})
    assert result.exit_code == 2


def test_output_file(runner, tmp_path):
    out = tmp_path / "reports" / "risk.json"
    result = runner.invoke(cli, ["-q", "-o", "json", "-f", str(out), "risk", SECRET], obj={})
    assert result.exit_code == 0
    report = json.loads(out.read_text(encoding="utf-8"))
    assert "risk" in report["metadata"]


def test_config_file_selects_output_format(runner, tmp_path):
    config = tmp_path / "warden.toml"
    config.write_text('[analyzer]\noutput_format = "json"\n', encoding="utf-8")
    result = runner.invoke(cli, ["-c", str(config), "-q", "analyze", SECRET], obj={})
    assert result.exit_code == 0
    assert json.loads(result.stdout)["report_metadata"]["tool"] == "warden"


def test_invalid_output_format_in_config(runner, tmp_path):
    config = tmp_path / "warden.toml"
    config.write_text('[analyzer]\noutput_format = "xml"\n', encoding="utf-8")
    result = runner.invoke(cli, ["-c", str(config), "analyze", SECRET], obj={})
    assert result.exit_code == 2


def test_engine_error_exits_nonzero(runner, tmp_path):
    config = tmp_path / "warden.toml"
    config.write_text(
        '[global]\nlog_level = "CRITICAL"\n\n[analyzer]\ncrack_profiles = ["quantum"]\n',
        encoding="utf-8",
    )
    result = runner.invoke(cli, ["-c", str(config), "-q", "-o", "json", "crack-time", SECRET], obj={})
    assert result.exit_code == 1
    assert json.loads(result.stdout)["metadata"] == {}


def test_custom_corpus(runner, tmp_path):
    common = tmp_path / "common.txt"
    common.write_text("zebra!quokka77\n", encoding="utf-8")
    report = invoke_json(runner, "--corpus-common", str(common), "analyze", SECRET)
    assert "common_password" in [f["kind"] for f in report["metadata"]["analysis"]["findings"]]


def test_missing_corpus_file_is_usage_error(runner, tmp_path):
    result = runner.invoke(cli, ["--corpus-common", str(tmp_path / "nope.txt"), "analyze", "x"], obj={})
    assert result.exit_code == 2


def test_wrongly_typed_config_is_usage_error(runner, tmp_path):
    config = tmp_path / "warden.toml"
    config.write_text('[analyzer]\nmax_suggestions = "ten"\n', encoding="utf-8")
    result = runner.invoke(cli, ["-c", str(config), "analyze", SECRET], obj={})
    assert result.exit_code == 2
    assert not isinstance(result.exception, TypeError)
