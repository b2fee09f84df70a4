"""
Test end-to-end del CLI.

I listing vanno su stdout, la diagnostica su stderr; ogni errore
fatale termina con exit code 1.
"""

import os

import pytest

from log_anonymizer.cli import build_parser, main

from conftest import ENGINE_CONFIG, FIXED_TS


@pytest.fixture
def engine_config(write_config):
    return str(write_config(ENGINE_CONFIG))


@pytest.fixture
def multi_config_path(write_config, multi_config):
    return str(write_config(multi_config))


def test_list_naming_patterns(engine_config, capsys):
    assert main(["--config", engine_config, "listNamingPatterns"]) == 0

    out = capsys.readouterr().out
    assert out == "1   engine          ^engine-\\d+\\.log$\n"


def test_list_regex_patterns_alias(engine_config, capsys):
    assert main(["-c", engine_config, "lr"]) == 0

    assert capsys.readouterr().out == "1   engine          user=(\\w+)\n"


def test_list_kinds(multi_config_path, capsys):
    assert main(["--config", multi_config_path, "listKinds"]) == 0

    assert capsys.readouterr().out.splitlines() == ["1   engine", "2   access", "3   empty"]


def test_list_with_version_and_kind(multi_config_path, capsys):
    assert main(["--config", multi_config_path, "-x", "2.0", "-k", "engine", "ln"]) == 0

    assert capsys.readouterr().out == "1   engine          ^engine.*$\n"


def test_list_unknown_kind_fails(engine_config, capsys):
    assert main(["--config", engine_config, "--kind", "nope", "listRegexPatterns"]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "no regexes found for kind nope under default" in captured.err


def test_missing_config_fails(tmp_path, capsys):
    assert main(["--config", str(tmp_path / "missing.yaml"), "listKinds"]) == 1

    assert "❌" in capsys.readouterr().err


def test_unknown_version_fails(engine_config, capsys):
    assert main(["--config", engine_config, "--axcVersion", "9", "listKinds"]) == 1

    err = capsys.readouterr().err
    assert "no config found for version 9" in err
    assert "available=default" in err


def test_run_end_to_end(engine_config, log_root, capsys, monkeypatch):
    monkeypatch.setattr("log_anonymizer.cli.Scheduler", _fixed_clock_scheduler())
    (log_root / "engine-7.log").write_text("user=alice\n", encoding="utf-8")
    (log_root / "readme.txt").write_text("user=alice\n", encoding="utf-8")

    assert main(["--config", engine_config, "-s", "XX", "run", "--path", str(log_root)]) == 0

    captured = capsys.readouterr()
    assert (log_root / f"engine-7.log.anonymized.{FIXED_TS}").read_text(encoding="utf-8") == "user=XX\n"
    assert "1 file anonimizzati" in captured.out
    assert "not able to detect log type: readme.txt" in captured.err


def test_run_worker_count_after_subcommand(engine_config, log_root, capsys):
    (log_root / "engine-7.log").write_text("user=alice\n", encoding="utf-8")

    assert main(["--config", engine_config, "run", "--path", str(log_root), "--workerCount", "0"]) == 1
    assert "worker count must be a positive integer" in capsys.readouterr().err

    assert main(["--config", engine_config, "-t", "0", "run", "--path", str(log_root)]) == 1
    assert main(["--config", engine_config, "-t", "0", "run", "--path", str(log_root),
                 "--workerCount", "3"]) == 0


def test_run_missing_path_fails(engine_config, tmp_path, capsys):
    assert main(["--config", engine_config, "run", "--path", str(tmp_path / "nowhere")]) == 1

    assert "❌" in capsys.readouterr().err


def test_cleanup_alias(engine_config, log_root, capsys):
    output = log_root / "engine-7.log.anonymized.20240101-000000"
    output.write_text("x\n", encoding="utf-8")
    (log_root / "engine-7.log").write_text("user=alice\n", encoding="utf-8")

    assert main(["--config", engine_config, "cu", "--path", str(log_root)]) == 0

    assert not output.exists()
    assert os.listdir(log_root) == ["engine-7.log"]
    assert "1 file cancellati" in capsys.readouterr().out


def test_debug_enables_diagnostics(engine_config, capsys):
    assert main(["--config", engine_config, "--debug", "listKinds"]) == 0

    assert "axcVersion: default" in capsys.readouterr().err


def test_parser_defaults():
    args = build_parser().parse_args(["run", "--path", "."])

    assert args.config == "config.yaml"
    assert args.axc_version == "default"
    assert args.kind == "*"
    assert args.obfuscation == "[*CONFIDENTIAL*]"
    assert args.worker_count == 2
    assert args.debug is False


def test_subcommand_is_required(capsys):
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def _fixed_clock_scheduler():
    from log_anonymizer.application.services.scheduler import Scheduler
    from conftest import FIXED_NOW

    def factory(config_store, settings=None):
        return Scheduler(config_store, settings, clock=lambda: FIXED_NOW)

    return factory


def test_structured_logs(engine_config, capsys):
    assert main(["--config", engine_config, "--debug", "--structuredLogs", "listKinds"]) == 0

    err_lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]
    assert err_lines
    assert all(line.startswith('{"timestamp": ') for line in err_lines)
