from __future__ import annotations

import json

from cuidkit.cli import main


def test_generate_prints_requested_ids(capsys) -> None:
    assert main(["generate", "--count", "3", "--length", "10"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 3
    assert all(len(line) == 10 for line in lines)
    assert len(set(lines)) == 3


def test_generate_json_output(capsys) -> None:
    assert main(["generate", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["ok"] is True
    assert len(payload["ids"]) == 1
    assert len(payload["ids"][0]) == 24


def test_generate_rejects_oversized_length(capsys) -> None:
    assert main(["generate", "--length", "99", "--json"]) == 2
    payload = json.loads(capsys.readouterr().out)
    assert payload["ok"] is False
    assert payload["errors"][0]["code"] == "LEN_001"


def test_generate_rejects_zero_length(capsys) -> None:
    assert main(["generate", "--length", "0"]) == 2
    out = capsys.readouterr().out
    assert "LEN_002" in out


def test_check_command_exit_codes(capsys) -> None:
    assert main(["check", "abc123"]) == 0
    assert "valid: True" in capsys.readouterr().out
    assert main(["check", "9abc", "--json"]) == 1
    assert json.loads(capsys.readouterr().out)["valid"] is False


def test_verbose_flag_is_accepted(capsys) -> None:
    assert main(["--verbose", "generate", "--length", "5"]) == 0
    assert len(capsys.readouterr().out.strip()) == 5
