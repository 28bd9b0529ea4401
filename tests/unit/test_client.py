from __future__ import annotations

import pytest

from scribd_api_client.client import ScribdClient
from scribd_api_client.config import ScribdClientConfig
from scribd_api_client.core.errors import (
    ScribdClientClosedError,
    ScribdMalformedResponseError,
    ScribdProtocolError,
    ScribdValidationError,
)
from scribd_api_client.core.signing import sign_params
from tests.shared.transport import (
    FAIL_INVALID_SESSION,
    LOGIN_OK,
    OK_EMPTY,
    StubTransport,
    build_config,
    ok_body,
)


def _client(steps) -> tuple[ScribdClient, StubTransport]:
    transport = StubTransport(steps)
    client = ScribdClient("KEY", "SECRET", config=build_config(), transport=transport)
    return client, transport


def test_client_url_embeds_api_key():
    client, _ = _client([])
    assert client.url == "https://api.example.test/api?api_key=KEY"


@pytest.mark.parametrize(("api_key", "secret"), [("", "s"), ("k", "")])
def test_client_requires_credentials(api_key, secret):
    with pytest.raises(ScribdValidationError):
        ScribdClient(api_key, secret, transport=StubTransport([]))


def test_client_rejects_invalid_config():
    with pytest.raises(ScribdValidationError):
        ScribdClient("KEY", "SECRET", config=ScribdClientConfig(file_param=""), transport=StubTransport([]))


def test_login_stores_session_and_returns_mapping():
    client, transport = _client([LOGIN_OK])
    result = client.login("alice", "pw")

    assert result == {"session_key": "abc", "user_id": "42"}
    assert client.session.session_key == "abc"
    assert client.session.user_id == "42"
    fields = transport.last_fields
    assert fields["method"] == "user.login"
    assert fields["username"] == "alice"
    assert "session_key" not in fields


def test_requests_after_login_carry_session():
    client, transport = _client([LOGIN_OK, ok_body("<resultset/>")])
    client.login("alice", "pw")
    client.get_list()

    fields = transport.last_fields
    assert fields["session_key"] == "abc"
    assert fields["my_user_id"] == "42"
    unsigned = {key: value for key, value in fields.items() if key != "api_sig"}
    assert fields["api_sig"] == sign_params(unsigned, "SECRET")


def test_logout_clears_session():
    client, transport = _client([LOGIN_OK, OK_EMPTY])
    client.login("alice", "pw")
    client.logout()
    client.delete(1)
    assert "session_key" not in transport.last_fields


def test_signup_stores_session():
    client, transport = _client([LOGIN_OK])
    client.signup("alice", "pw", "alice@example.com")
    assert client.session.session_key == "abc"
    assert "name" not in transport.last_fields
    assert transport.last_fields["email"] == "alice@example.com"


def test_failed_call_raises_and_keeps_code():
    client, _ = _client([FAIL_INVALID_SESSION])
    with pytest.raises(ScribdProtocolError) as exc_info:
        client.get_settings(10)
    assert exc_info.value.code == 123
    assert client.last_error_code == 123


def test_delete_returns_success_marker():
    client, transport = _client([OK_EMPTY])
    assert client.delete(5) == "1"
    assert transport.last_fields["doc_id"] == "5"


def test_change_settings_joins_ids_and_tags():
    client, transport = _client([OK_EMPTY])
    assert client.change_settings([1, 2], tags=["a", "b", "c"], parental_advisory="safe") == "1"
    fields = transport.last_fields
    assert fields["doc_ids"] == "1,2"
    assert fields["tags"] == "a,b,c"
    assert fields["parental_advisory"] == "safe"
    assert "title" not in fields


def test_upload_sends_file_reference_and_rev_id():
    client, transport = _client([ok_body("<doc_id>1</doc_id><access_key>k</access_key>")])
    result = client.upload("/tmp/doc.pdf", doc_type="pdf", rev_id=3)
    assert result == {"doc_id": "1", "access_key": "k"}
    fields = transport.last_fields
    assert fields["file"] == "@/tmp/doc.pdf"
    assert fields["rev_id"] == "3"
    assert "access" not in fields


def test_upload_from_url_escapes_at_sign_in_url():
    client, transport = _client([ok_body("<doc_id>1</doc_id>")])
    client.upload_from_url("@http://example.com/a.pdf")
    assert transport.last_fields["url"] == " @http://example.com/a.pdf"


def test_get_conversion_status_returns_member():
    client, _ = _client([ok_body("<conversion_status>DONE</conversion_status>")])
    assert client.get_conversion_status(3) == "DONE"


def test_get_list_returns_resultset_with_duplicates():
    client, _ = _client(
        [
            ok_body(
                "<resultset><result><doc_id>1</doc_id></result>"
                "<result><doc_id>2</doc_id></result></resultset>"
            )
        ]
    )
    assert client.get_list({"limit": 2}) == {
        "result": {"doc_id": "1"},
        "result 2": {"doc_id": "2"},
    }


def test_search_sends_defaults_and_returns_result_set():
    client, transport = _client([ok_body("<result_set><result>A</result></result_set>")])
    assert client.search("tale", num_results=5) == {"result": "A"}
    fields = transport.last_fields
    assert fields["simple"] == "1"
    assert fields["num_results"] == "5"
    assert "category_id" not in fields
    assert "language" not in fields


def test_missing_member_is_malformed_response():
    client, _ = _client([OK_EMPTY])
    with pytest.raises(ScribdMalformedResponseError):
        client.search("tale")


def test_client_context_manager_closes_transport():
    transport = StubTransport([])
    with ScribdClient("KEY", "SECRET", transport=transport) as client:
        assert client is not None
    assert transport.closed is True


def test_client_raises_when_used_after_close():
    client, _ = _client([OK_EMPTY])
    client.close()
    with pytest.raises(ScribdClientClosedError):
        client.delete(1)


def test_search_simple_false_is_sent_as_zero():
    client, transport = _client([ok_body("<result_set/>")])
    client.search("title:tale", simple=False)
    assert transport.last_fields["simple"] == "0"


def test_request_with_signature_param_is_validation_error():
    client, transport = _client([OK_EMPTY])
    with pytest.raises(ScribdValidationError):
        client.request("docs.delete", {"doc_id": 1, "api_sig": "forged"})
    assert transport.calls == []
