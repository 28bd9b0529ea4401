from __future__ import annotations

import scribd_api_client


def test_package_exports_clients_config_and_errors():
    expected = {
        "ScribdClient",
        "AsyncScribdClient",
        "ScribdClientConfig",
        "ScribdApiError",
        "ScribdProtocolError",
        "ScribdTransportError",
        "ScribdMalformedResponseError",
    }
    assert expected.issubset(set(scribd_api_client.__all__))
    for name in scribd_api_client.__all__:
        assert hasattr(scribd_api_client, name)


def test_package_does_not_export_internals():
    assert "RequestExecutor" not in scribd_api_client.__all__
    assert "sign_params" not in scribd_api_client.__all__
