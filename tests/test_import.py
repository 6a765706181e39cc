"""Test basic imports from the starr_client package."""

import pytest


def test_main_import():
    """Test that the main package imports successfully."""
    import starr_client
    assert starr_client.__version__ == "0.1.0"
    assert hasattr(starr_client, 'StarrClient')
    assert hasattr(starr_client, 'ClientConfig')


def test_runtime_import():
    """Test runtime module imports."""
    import starr_client.runtime as runtime
    assert hasattr(runtime, 'Context')
    assert hasattr(runtime, 'DISCARD')
    assert hasattr(runtime, 'StarrError')


def test_client_import():
    """Test request and pagination imports."""
    import starr_client.client as client
    assert hasattr(client, 'Request')
    assert hasattr(client, 'PageReq')
    assert hasattr(client, 'aggregate')


@pytest.mark.parametrize("module,cls,version", [
    ("lidarr", "Lidarr", "v1"),
    ("radarr", "Radarr", "v3"),
    ("readarr", "Readarr", "v1"),
    ("sonarr", "Sonarr", "v3"),
    ("prowlarr", "Prowlarr", "v1"),
])
def test_product_import(module, cls, version):
    """Each product package exposes its client, constructor and API version."""
    import importlib
    package = importlib.import_module(f"starr_client.{module}")
    product = getattr(package, cls)
    assert package.API_VERSION == version
    assert product.api_version == version

    client = package.new("http://localhost:1234/", api_key="key")
    assert isinstance(client, product)
    assert client.api.config.url == "http://localhost:1234"
    assert client.api.config.api_key == "key"
    client.close()


def test_error_hierarchy():
    """Test the error classes are importable from the top-level package."""
    from starr_client import (
        StarrError, NetworkError, TimeoutError, CancelledError, DeadlineExceededError,
        InvalidStatusError, MarshalError, UnmarshalError, BulkRequestError,
    )
    assert issubclass(TimeoutError, NetworkError)
    assert issubclass(DeadlineExceededError, CancelledError)
    for error in (NetworkError, CancelledError, InvalidStatusError, MarshalError, UnmarshalError,
                  BulkRequestError):
        assert issubclass(error, StarrError)


def test_products_share_transport():
    """Several product clients can use one transport."""
    from starr_client import Radarr, Sonarr, StarrClient
    api = StarrClient("http://localhost:7878", api_key="key")
    assert Radarr(api).api is Sonarr(api).api
    api.close()
