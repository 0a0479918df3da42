"""
Tests for the install command model — construction, rendering, flag insertion.
"""

import pytest

from qbit.core.services.install.domain.command import InstallCommand, quote_for_display
from qbit.core.services.install.errors import InvalidInput


class TestQuoteForDisplay:
    @pytest.mark.parametrize(
        "token",
        ["apt-get", "python@3.12", "pkg=1.2", "Vendor.App", "/usr/bin/x", "a:b", "x_y"],
    )
    def test_safe_tokens_unchanged(self, token):
        assert quote_for_display(token) == token

    def test_empty_token(self):
        assert quote_for_display("") == '""'

    def test_space_is_quoted(self):
        assert quote_for_display("hello world") == '"hello world"'

    def test_quotes_and_backslashes_escaped(self):
        assert quote_for_display('a"b\\c') == '"a\\"b\\\\c"'

    def test_deterministic(self):
        token = "some thing"
        assert quote_for_display(token) == quote_for_display(token)


class TestInstallCommand:
    def test_render_joins_with_spaces(self):
        cmd = InstallCommand("apt-get", ["install", "pkg=1.2"])
        assert cmd.render() == "apt-get install pkg=1.2"

    def test_render_quotes_unsafe_args(self):
        cmd = InstallCommand("choco", ["install", "my app", ""])
        assert cmd.render() == 'choco install "my app" ""'

    def test_argv(self):
        cmd = InstallCommand("brew", ["install", "jq"])
        assert cmd.argv == ["brew", "install", "jq"]

    def test_args_stored_as_tuple(self):
        cmd = InstallCommand("brew", ["install", "jq"])
        assert cmd.args == ("install", "jq")

    def test_empty_program_rejected(self):
        with pytest.raises(InvalidInput):
            InstallCommand("", ["install"])

    def test_blank_program_rejected(self):
        with pytest.raises(InvalidInput):
            InstallCommand("   ", [])

    def test_str_is_render(self):
        cmd = InstallCommand("scoop", ["install", "git"])
        assert str(cmd) == "scoop install git"


class TestWithFlagAfter:
    def test_inserts_after_subcommand(self):
        cmd = InstallCommand("sudo", ["apt-get", "install", "git"])
        out = cmd.with_flag_after("install", "-y")
        assert out.args == ("apt-get", "install", "-y", "git")

    def test_original_untouched(self):
        cmd = InstallCommand("dnf", ["install", "git"])
        cmd.with_flag_after("install", "-y")
        assert cmd.args == ("install", "git")

    def test_appends_when_subcommand_missing(self):
        cmd = InstallCommand("tool", ["git"])
        assert cmd.with_flag_after("install", "-y").args == ("git", "-y")

    def test_idempotent(self):
        cmd = InstallCommand("dnf", ["install", "git"])
        once = cmd.with_flag_after("install", "-y")
        twice = once.with_flag_after("install", "-y")
        assert once.args == twice.args
