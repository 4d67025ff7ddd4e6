"""End-to-end tests for the command-line interface."""

import json
import logging

import pytest
import structlog

from solid_principles.cli.main import main, parse_args


@pytest.fixture(autouse=True)
def restore_logging():
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)
    structlog.reset_defaults()


def run_cli(capsys, *argv):
    exit_code = main(list(argv))
    captured = capsys.readouterr()
    return exit_code, captured


def run_json(capsys, *argv):
    exit_code, captured = run_cli(capsys, *argv)
    assert exit_code == 0, captured.err
    return json.loads(captured.out)


class TestCLICommands:
    def test_greet_default_locale(self, capsys):
        assert run_json(capsys, "greet") == {"locale": "en", "greeting": "Hello"}

    def test_greet_french(self, capsys):
        assert run_json(capsys, "greet", "--locale", "fr")["greeting"] == "Bonjour"

    def test_greet_unsupported_locale_fails(self, capsys):
        exit_code, captured = run_cli(capsys, "greet", "--locale", "xx")

        assert exit_code == 1
        assert "Unsupported locale: xx" in captured.err

    def test_checkout_reports_action_amount(self, capsys):
        result = run_json(capsys, "checkout", "--amount", "15", "--store-amount", "99",
                          "--payment", "paypal")

        assert result == {"payment": "paypal", "amount": 15.0}

    def test_checkout_uses_configured_defaults(self, capsys):
        assert run_json(capsys, "checkout") == {"payment": "googlepay", "amount": 20.0}

    def test_terminate_active_employee(self, capsys):
        result = run_json(capsys, "terminate", "7")

        assert result == {"employee_id": 7, "result": "Employee 7 terminated successfully!"}

    def test_terminate_retired_employee(self, capsys):
        result = run_json(capsys, "terminate", "7", "--retired")

        assert result["result"] == "Employee 7 is retired and cannot be terminated!"

    def test_terminate_employee_on_leave(self, capsys):
        assert run_json(capsys, "terminate", "7", "--medical-leave", "--retired")["result"] == "done"

    def test_area_square(self, capsys):
        assert run_json(capsys, "area", "square", "10") == {"shape": "square", "area": 100.0}

    def test_area_rectangle(self, capsys):
        assert run_json(capsys, "area", "rectangle", "3", "4")["area"] == 7.0

    def test_area_without_shape_fails(self, capsys):
        exit_code, _ = run_cli(capsys, "area")

        assert exit_code == 1

    def test_stats(self, capsys):
        result = run_json(capsys, "stats", "10", "20", "30")

        assert result == {"count": 3, "total": 60.0, "average": 20.0}

    def test_demo(self, capsys):
        result = run_json(capsys, "demo")

        assert result == {"square_area": 100, "greeting": "Hello", "checkout_amount": 20.0}

    def test_table_format(self, capsys):
        exit_code, captured = run_cli(capsys, "--format", "table", "greet", "--locale", "fr")

        assert exit_code == 0
        assert "greeting" in captured.out
        assert "Bonjour" in captured.out


class TestCLIErrors:
    def test_no_command(self, capsys):
        exit_code, captured = run_cli(capsys)

        assert exit_code == 1
        assert "No command specified" in captured.out

    def test_bad_config_file(self, capsys, tmp_path):
        exit_code, captured = run_cli(capsys, "--config", str(tmp_path / "missing.json"), "demo")

        assert exit_code == 1
        assert "Failed to load configuration" in captured.err

    @pytest.mark.parametrize(
        "content",
        ["[]", '{"GREETING_CONFIG": null}', '{"STORE_CONFIG": 5}'],
    )
    def test_malformed_config_file_exits_with_error(self, capsys, config_file, content):
        exit_code, captured = run_cli(capsys, "--config", config_file(content), "demo")

        assert exit_code == 1
        assert captured.err.startswith("Error:")
        assert captured.out == ""

    def test_config_file_changes_defaults(self, capsys, config_file):
        path = config_file('{"GREETING_CONFIG": {"default_locale": "fr"}}')

        assert run_json(capsys, "--config", path, "greet")["greeting"] == "Bonjour"

    def test_log_level_flag(self, capsys):
        run_json(capsys, "--log-level", "ERROR", "demo")

        assert logging.getLogger().level == logging.ERROR

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--version"])

        assert exc_info.value.code == 0
        assert "1.0.0" in capsys.readouterr().out
