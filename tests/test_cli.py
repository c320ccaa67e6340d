import unittest
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

import commitz.cli as cli
from commitz.vcs.git_client import GitError


LOGIN_DIFF = (
    "diff --git a/src/auth/login.py b/src/auth/login.py\n"
    "new file mode 100644\n"
    "index 0000000..e69de29\n"
    "--- /dev/null\n"
    "+++ b/src/auth/login.py\n"
    "@@ -0,0 +1,2 @@\n"
    "+def login(user):\n"
    "+    return True\n"
)


class DummyGitClient:
    """Stand-in for GitClient that records commits instead of running git."""

    def __init__(self, root):
        self.root = root
        self.diff = LOGIN_DIFF
        self.diff_error = None
        self.branch = "feature/login-page"
        self.commit_error = None
        self.commit_called = []

    def get_staged_diff(self):
        if self.diff_error is not None:
            raise self.diff_error
        return self.diff

    def get_current_branch(self):
        return self.branch

    def commit(self, message):
        if self.commit_error is not None:
            raise self.commit_error
        self.commit_called.append(message)
        return "[feature/login-page abc1234] committed\n"


class CLITestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()
        self.dummy = DummyGitClient(Path("/repo"))
        patcher = patch.object(cli, "GitClient", return_value=self.dummy)
        self.git_client_cls = patcher.start()
        self.git_client_cls.find_repo_root.return_value = Path("/repo")
        self.addCleanup(patcher.stop)

    def invoke(self, args, user_input=None):
        return self.runner.invoke(cli.main, args, input=user_input)


class TestNonInteractive(CLITestCase):
    def test_commits_heuristic_message(self) -> None:
        result = self.invoke([])
        self.assertEqual(result.exit_code, cli.EXIT_SUCCESS, result.output)
        self.assertEqual(self.dummy.commit_called, ["feat(feature): add login functionality"])
        self.assertIn("Commit successful", result.output)

    def test_overrides_and_emoji(self) -> None:
        result = self.invoke(["--type", "docs", "--scope", "api", "--emoji"])
        self.assertEqual(result.exit_code, cli.EXIT_SUCCESS, result.output)
        self.assertEqual(self.dummy.commit_called, ["📝 docs(api): update documentation"])

    def test_branch_without_slash_has_no_scope(self) -> None:
        self.dummy.branch = "main"
        result = self.invoke(["-t", "refactor"])
        self.assertEqual(result.exit_code, cli.EXIT_SUCCESS, result.output)
        self.assertEqual(self.dummy.commit_called, ["refactor: refactor login"])

    def test_unknown_branch_has_no_scope(self) -> None:
        self.dummy.branch = ""
        result = self.invoke([])
        self.assertEqual(self.dummy.commit_called, ["feat: add login functionality"])

    def test_dry_run_does_not_commit(self) -> None:
        result = self.invoke(["--dry-run"])
        self.assertEqual(result.exit_code, cli.EXIT_SUCCESS, result.output)
        self.assertEqual(self.dummy.commit_called, [])
        self.assertIn("feat(feature): add login functionality", result.output)
        self.assertIn("[DRY RUN] Commit not created", result.output)

    def test_emoji_from_settings_file(self) -> None:
        with patch.object(cli, "load_config", return_value={"emoji": True}):
            result = self.invoke([])
        self.assertEqual(self.dummy.commit_called, ["✨ feat(feature): add login functionality"])

    def test_invalid_type_is_usage_error(self) -> None:
        result = self.invoke(["--type", "feature"])
        self.assertEqual(result.exit_code, 2)
        self.assertEqual(self.dummy.commit_called, [])


class TestFailures(CLITestCase):
    def test_nothing_staged(self) -> None:
        self.dummy.diff = ""
        result = self.invoke([])
        self.assertEqual(result.exit_code, cli.EXIT_SUCCESS)
        self.assertIn("No staged changes found.", result.output)
        self.assertEqual(self.dummy.commit_called, [])

    def test_not_a_repository(self) -> None:
        self.git_client_cls.find_repo_root.return_value = None
        result = self.invoke([])
        self.assertEqual(result.exit_code, cli.EXIT_FAILURE)
        self.assertIn("Not a git repository", result.output)

    def test_diff_failure(self) -> None:
        self.dummy.diff_error = GitError("unable to execute git")
        result = self.invoke([])
        self.assertEqual(result.exit_code, cli.EXIT_FAILURE)
        self.assertIn("Error getting git diff", result.output)

    def test_commit_failure(self) -> None:
        self.dummy.commit_error = GitError("pre-commit hook rejected the commit")
        result = self.invoke([])
        self.assertEqual(result.exit_code, cli.EXIT_FAILURE)
        self.assertIn("Commit failed: pre-commit hook rejected the commit", result.output)

    def test_config_error(self) -> None:
        with patch.object(cli, "load_config", side_effect=cli.ConfigError("bad settings")):
            result = self.invoke([])
        self.assertEqual(result.exit_code, cli.EXIT_FAILURE)
        self.assertIn("Configuration error: bad settings", result.output)

    def test_unexpected_error(self) -> None:
        self.dummy.diff_error = RuntimeError("boom")
        result = self.invoke([])
        self.assertEqual(result.exit_code, cli.EXIT_FAILURE)
        self.assertIn("Unexpected error: boom", result.output)


class TestInteractive(CLITestCase):
    def test_accept_defaults_with_edited_summary_and_body(self) -> None:
        user_input = "\n".join([
            "",                   # type: keep feat
            "",                   # scope: keep branch scope
            "",                   # emoji: default no
            "ab",                 # too short, re-prompted
            "add login form",
            "Explain the flow.",  # body
            "",                   # end of body
            "",                   # proceed: default yes
        ]) + "\n"
        result = self.invoke(["-i"], user_input)
        self.assertEqual(result.exit_code, cli.EXIT_SUCCESS, result.output)
        self.assertIn("at least 3 characters", result.output)
        self.assertEqual(
            self.dummy.commit_called,
            ["feat(feature): add login form\n\nExplain the flow."],
        )

    def test_change_type_and_custom_scope(self) -> None:
        user_input = "\n".join([
            "2",   # fix
            "4",   # (none), feature, src, (custom)
            "ui",
            "y",   # emoji
            "",    # keep suggested summary for the new type
            "",
            "",    # empty body
            "y",
        ]) + "\n"
        result = self.invoke(["--interactive"], user_input)
        self.assertEqual(result.exit_code, cli.EXIT_SUCCESS, result.output)
        self.assertEqual(self.dummy.commit_called, ["🐛 fix(ui): fix issue in login"])

    def test_no_scope_choice(self) -> None:
        user_input = "\n".join(["", "1", "", "", "", "", ""]) + "\n"
        result = self.invoke(["-i"], user_input)
        self.assertEqual(result.exit_code, cli.EXIT_SUCCESS, result.output)
        self.assertEqual(self.dummy.commit_called, ["feat: add login functionality"])

    def test_declined_confirmation(self) -> None:
        user_input = "\n".join(["", "", "", "", "", "", "n"]) + "\n"
        result = self.invoke(["-i"], user_input)
        self.assertEqual(result.exit_code, cli.EXIT_SUCCESS, result.output)
        self.assertIn("Commit cancelled.", result.output)
        self.assertEqual(self.dummy.commit_called, [])

    def test_end_of_input_cancels(self) -> None:
        result = self.invoke(["-i"], "\n")
        self.assertEqual(result.exit_code, cli.EXIT_SUCCESS, result.output)
        self.assertIn("Commit cancelled.", result.output)
        self.assertEqual(self.dummy.commit_called, [])

    def test_interactive_dry_run(self) -> None:
        user_input = "\n".join(["", "", "", "", "", ""]) + "\n"
        result = self.invoke(["-i", "-d"], user_input)
        self.assertEqual(result.exit_code, cli.EXIT_SUCCESS, result.output)
        self.assertIn("[DRY RUN]", result.output)
        self.assertIn("src/auth/login.py", result.output)
        self.assertEqual(self.dummy.commit_called, [])


class TestReviewMessage(unittest.TestCase):
    def test_default_prompter_keeps_suggestions(self) -> None:
        from commitz.analysis.change_classifier import analyze
        from commitz.config.settings import Settings
        from commitz.prompts.prompter import DefaultPrompter

        message = cli.review_message(
            analyze(LOGIN_DIFF), "auth", Settings(emoji=True), DefaultPrompter()
        )
        self.assertEqual(message.render(), "✨ feat(auth): add login functionality")


def test_version_option():
    result = CliRunner().invoke(cli.main, ["--version"])
    assert result.exit_code == 0
    assert "commitz" in result.output


if __name__ == "__main__":
    unittest.main()
