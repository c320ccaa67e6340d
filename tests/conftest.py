import logging

import pytest


@pytest.fixture(autouse=True)
def isolate_settings_dir(monkeypatch, tmp_path_factory):
    """Point the settings loader at an empty directory.

    Tests must not pick up a real ``~/.commitz/config.json`` from the
    developer's machine.
    """
    settings_dir = tmp_path_factory.mktemp("commitz_settings")
    monkeypatch.setenv("COMMITZ_CONFIG_DIR", str(settings_dir))
    yield settings_dir


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo ``logging.basicConfig(force=True)`` calls made by the CLI.

    The CLI binds a handler to the stream CliRunner provides, which is
    closed once the invocation ends.
    """
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
