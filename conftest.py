"""Global configuration for pytest"""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_log_level():
    """
    Called at start of each test, so that a test that changes the level of
    the shaderpack logger does not affect other tests.
    """
    logger = logging.getLogger("shaderpack")
    level = logger.level
    yield
    logger.setLevel(level)


@pytest.fixture
def shader_tree(tmp_path):
    """
    Factory to build a tree of source files in a temp dir. Takes a dict
    mapping relative paths to file contents (str or bytes) and returns the
    root directory.
    """

    def make_tree(files):
        root = tmp_path / "src"
        root.mkdir(exist_ok=True)
        for relpath, content in files.items():
            path = root / relpath
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_bytes(content.encode())
        return root

    return make_tree
