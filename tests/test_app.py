import time

from typer.testing import CliRunner

from verbose.app import app
from verbose.core.messages import PREFIXES, MessageType
from verbose.core.version import read_local_version

runner = CliRunner()


def test_println_silent_by_default():
    result = runner.invoke(app, ["println", "info", "hello"])
    assert result.exit_code == 0
    assert result.output == ""


def test_println_with_verbose_flag():
    result = runner.invoke(app, ["-v", "println", "info", "hello", "world"])
    assert result.exit_code == 0
    assert PREFIXES[MessageType.INFO] + " hello world\n" in result.output


def test_verbose_from_environment():
    result = runner.invoke(app, ["println", "alert", "from env"], env={"VERBOSE_ON": "1"})
    assert result.exit_code == 0
    assert PREFIXES[MessageType.ALERT] + " from env" in result.output


def test_env_file_option(tmp_path):
    env_file = tmp_path / "diag.env"
    env_file.write_text("VERBOSE_ON=1\n")
    result = runner.invoke(app, ["--env-file", str(env_file), "println", "info", "loaded"])
    assert result.exit_code == 0
    assert "loaded" in result.output


def test_missing_env_file_warns():
    result = runner.invoke(app, ["--env-file", "nope.env", "println", "info", "x"])
    assert result.exit_code == 0
    assert "Env file not found" in result.output


def test_printf_converts_numeric_args():
    result = runner.invoke(app, ["-v", "printf", "warning", "took %d tries (%.1f%%)", "3", "42.5"])
    assert result.exit_code == 0
    assert PREFIXES[MessageType.WARNING] + " took 3 tries (42.5%)\n" in result.output


def test_string_placeholders_keep_arguments_verbatim():
    result = runner.invoke(app, ["-v", "printf", "info", "build %s code %s", "1.10", "007"])
    assert result.exit_code == 0
    assert PREFIXES[MessageType.INFO] + " build 1.10 code 007\n" in result.output


def test_numeric_placeholders_convert_only_their_arguments():
    result = runner.invoke(app, ["-v", "printf", "info", "zip %s count %03d", "02134", "7"])
    assert result.exit_code == 0
    assert "zip 02134 count 007" in result.output


def test_ensure_keeps_string_arguments_verbatim():
    result = runner.invoke(app, ["ensure", "false", "zip %s", "02134"])
    assert result.exit_code == 2
    assert "zip 02134" in result.output


def test_unknown_category_fails():
    result = runner.invoke(app, ["-v", "println", "fatal", "x"])
    assert result.exit_code == 1
    assert "Unknown message type" in result.output


def test_debug_only_needs_debug_flag():
    result = runner.invoke(app, ["-d", "debug", "state=%s", "idle"])
    assert result.exit_code == 0
    assert PREFIXES[MessageType.DEBUG] + " state=idle" in result.output

    result = runner.invoke(app, ["-v", "debug", "state=%s", "idle"])
    assert result.output == ""


def test_debug_category_shown_with_debug_flag():
    result = runner.invoke(app, ["-d", "println", "debug", "visible"])
    assert PREFIXES[MessageType.DEBUG] + " visible" in result.output

    result = runner.invoke(app, ["-d", "println", "info", "hidden"])
    assert result.output == ""


def test_ensure_failure_exits_with_message():
    result = runner.invoke(app, ["ensure", "false", "x=%d", "5"])
    assert result.exit_code == 2
    assert "x=5" in result.output


def test_ensure_success_is_silent():
    result = runner.invoke(app, ["ensure", "yes", "x=%d", "5"])
    assert result.exit_code == 0
    assert result.output == ""


def test_ensure_rejects_unknown_condition():
    result = runner.invoke(app, ["ensure", "perhaps", "x"])
    assert result.exit_code == 1
    assert "Invalid condition" in result.output


def test_track_prints_elapsed():
    start = str(time.time() - 2)
    result = runner.invoke(app, ["-v", "track", start, "build %s", "done"])
    assert result.exit_code == 0
    assert PREFIXES[MessageType.TRACK] + " build done << " in result.output


def test_categories_table():
    result = runner.invoke(app, ["categories"])
    assert result.exit_code == 0
    for name in ("info", "warning", "alert", "track", "debug"):
        assert name in result.output


def test_version_option():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.output.strip() == read_local_version()
