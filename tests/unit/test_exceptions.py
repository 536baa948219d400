"""Unit tests for the floki exception hierarchy."""

import pytest

from floki.core.exceptions import (
    CommandNotImplementedError,
    ConfigFileError,
    ConfigParseError,
    DispatchError,
    ExternalToolError,
    FlokiException,
    FlokiIOError,
    FlokiParseError,
    ToolSpawnError,
    describe_os_error,
)


class TestFormatting:
    def test_message_only(self) -> None:
        assert str(FlokiException("boom")) == "boom"

    def test_operation_prefix_and_context(self) -> None:
        err = ConfigFileError("No such file or directory", file_path="floki.toml")

        assert str(err) == "read config: No such file or directory (file_path='floki.toml')"

    def test_cause_is_chained(self) -> None:
        cause = PermissionError(13, "Permission denied")
        err = ConfigFileError("Permission denied", file_path="x.toml", cause=cause)

        assert err.__cause__ is cause


class TestTaxonomy:
    @pytest.mark.parametrize(
        ("error", "base"),
        [
            (ConfigFileError("x"), FlokiIOError),
            (ToolSpawnError("x"), FlokiIOError),
            (ConfigParseError("x"), FlokiParseError),
            (ConfigParseError("x"), ValueError),
            (CommandNotImplementedError("run"), NotImplementedError),
        ],
    )
    def test_kinds(self, error, base) -> None:
        assert isinstance(error, base)
        assert isinstance(error, FlokiException)

    def test_default_exit_code(self) -> None:
        assert ConfigFileError("x").exit_code == 1

    def test_external_tool_exit_code_follows_returncode(self) -> None:
        assert ExternalToolError("x", returncode=101).exit_code == 101

    @pytest.mark.parametrize("returncode", [-9, 0, 300, None])
    def test_external_tool_exit_code_falls_back_to_one(self, returncode) -> None:
        assert ExternalToolError("x", returncode=returncode).exit_code == 1

    def test_dispatch_error_summarizes_each_failure(self) -> None:
        err = DispatchError(
            [
                ExternalToolError("exited with status 1", project="app"),
                ToolSpawnError("No such file or directory", project="client"),
            ],
            operation="cargo build",
        )

        assert str(err) == (
            "cargo build: 2 projects failed: app (exited with status 1); "
            "client (No such file or directory)"
        )
        assert err.exit_code == 1

    def test_not_implemented_message(self) -> None:
        assert str(CommandNotImplementedError("run")) == "run: 'run' is not implemented yet"


class TestDescribeOsError:
    def test_uses_strerror(self) -> None:
        assert describe_os_error(FileNotFoundError(2, "No such file or directory", "x")) == (
            "No such file or directory"
        )

    def test_falls_back_to_str(self) -> None:
        assert describe_os_error(UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte"))
