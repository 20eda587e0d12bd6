"""
Smoke test - verifies test infrastructure is working.
Run: pytest tests/test_smoke.py -v
"""


def test_import_app():
    """Verify catalog_api package can be imported."""
    from catalog_api.core.config import get_settings

    settings = get_settings()
    assert settings is not None
    assert hasattr(settings, "mongo_uri")
    assert settings.bcrypt_rounds == 4


def test_application_routes_registered():
    from catalog_api.main import app

    paths = {route.path for route in app.routes}
    assert "/api/v1/auth/register" in paths
    assert "/api/v1/products" in paths
    assert "/api/v1/products/{product_id}" in paths


def test_pytest_runs():
    """Basic sanity check that pytest executes tests."""
    assert True
