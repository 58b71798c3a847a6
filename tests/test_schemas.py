import json

import pytest
from pydantic import ValidationError

from sendgrid_key.schemas import APIKeyRequest, CreateAPIKeyResponse
from sendgrid_key.scopes import DEFINED_SCOPES


class TestAPIKeyRequest:
    def test_defaults_to_defined_scopes(self):
        request = APIKeyRequest(name="Staging mailer")
        assert request.scopes == list(DEFINED_SCOPES)

    def test_serializes_name_and_scopes(self):
        body = json.loads(APIKeyRequest(name="Staging mailer").model_dump_json())
        assert body == {"name": "Staging mailer", "scopes": list(DEFINED_SCOPES)}

    def test_accepts_empty_name(self):
        request = APIKeyRequest(name="")
        assert request.name == ""

    def test_accepts_unicode_name(self):
        body = json.loads(APIKeyRequest(name="Clé \"prod\"").model_dump_json())
        assert body["name"] == "Clé \"prod\""

    def test_default_scopes_are_not_shared(self):
        first = APIKeyRequest(name="a")
        first.scopes.append("extra.scope")
        second = APIKeyRequest(name="b")
        assert second.scopes == list(DEFINED_SCOPES)


class TestCreateAPIKeyResponse:
    def test_parses_full_response(self):
        result = CreateAPIKeyResponse.model_validate_json(
            '{"api_key": "SG.new", "name": "Staging mailer", "api_key_id": "abc123", "scopes": ["mail.send"]}'
        )
        assert result.api_key == "SG.new"
        assert result.name == "Staging mailer"
        assert result.api_key_id == "abc123"

    def test_missing_fields_default_to_empty(self):
        result = CreateAPIKeyResponse.model_validate_json('{"name": "Staging mailer"}')
        assert result.api_key == ""
        assert result.api_key_id == ""

    def test_rejects_malformed_json(self):
        with pytest.raises(ValidationError):
            CreateAPIKeyResponse.model_validate_json("not json")

    def test_rejects_non_object_body(self):
        with pytest.raises(ValidationError):
            CreateAPIKeyResponse.model_validate_json('["SG.new"]')
