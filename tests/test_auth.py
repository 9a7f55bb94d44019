import base64

from arango_client.auth import AuthManager
from arango_client.logger import create_logger


def test_add_http_headers_sets_basic_credentials() -> None:
    manager = AuthManager("root", "secret", create_logger())
    headers = manager.add_http_headers({"Accept": "application/json"})
    expected = base64.b64encode(b"root:secret").decode("ascii")
    assert headers["Authorization"] == f"Basic {expected}"
    assert headers["Accept"] == "application/json"


def test_missing_password_skips_authorization() -> None:
    manager = AuthManager("root", "", create_logger())
    assert manager.has_credentials is False
    assert "Authorization" not in manager.add_http_headers()


def test_missing_username_skips_authorization() -> None:
    manager = AuthManager(None, "secret", create_logger())
    assert manager.authorization_value() is None


def test_headers_are_copied_not_mutated() -> None:
    manager = AuthManager("root", "secret", create_logger())
    original = {"X-Test": "1"}
    manager.add_http_headers(original)
    assert original == {"X-Test": "1"}
