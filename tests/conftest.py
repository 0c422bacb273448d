import os

import pytest

from zeus_ai.config import loader


@pytest.fixture(autouse=True)
def isolate_user_config(monkeypatch, tmp_path_factory):
    """Keep the developer's own ``~/.zeusrc`` and ``ZEUS_*`` variables out of tests.

    The home directory used by the config loader is pointed at an empty
    temporary directory and every ``ZEUS_*`` variable is removed for the
    duration of each test.
    """
    fake_home = tmp_path_factory.mktemp("home")
    monkeypatch.setattr(loader, "_get_home_directory", lambda: fake_home)
    for name in list(os.environ):
        if name.startswith(loader.ENV_PREFIX):
            monkeypatch.delenv(name, raising=False)
    yield fake_home
