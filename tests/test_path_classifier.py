import pytest

from shipshape.core.path_classifier import is_network_path


@pytest.mark.parametrize("path", [
    "\\\\server\\share",
    "\\\\server\\share\\app",
    "\\\\?\\C:\\long\\path",
])
def test_unc_paths_are_network_paths(path):
    assert is_network_path(path) is True


@pytest.mark.parametrize("path", [
    "C:\\local\\app",
    "\\single\\leading",
    "//server/share",
    "relative\\\\path",
    "",
])
def test_other_paths_are_not_network_paths(path):
    assert is_network_path(path) is False


@pytest.mark.parametrize("value", [None, 42, b"\\\\server\\share", ["\\\\server"]])
def test_non_strings_are_never_network_paths(value):
    assert is_network_path(value) is False
