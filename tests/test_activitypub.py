import json

import httpx
import pydantic
import pytest

from piefedbridge.activitypub import ActivityPub, Actor, PublicKey

ACTOR_DOC = {
    "inbox": "https://example.com/inbox",
    "published": "2024-01-01T00:00:00Z",
    "publicKey": {
        "id": "https://example.com/#main-key",
        "owner": "https://example.com/",
        "publicKeyPem": "placeholder",
    },
}


def _service(handler):
    return ActivityPub(client=httpx.Client(transport=httpx.MockTransport(handler)))


def test_fetch_actor_parses_document_and_sends_accept():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=ACTOR_DOC)

    actor = _service(handler).fetch_actor("https://example.com/")
    assert seen[0].headers["accept"] == "application/activity+json"
    assert str(seen[0].url) == "https://example.com/"
    assert actor.inbox == ACTOR_DOC["inbox"]
    assert actor.published == ACTOR_DOC["published"]
    assert actor.public_key.public_key_pem == "placeholder"
    assert actor.updated is None


def test_fetch_actor_invalid_json_raises():
    service = _service(lambda request: httpx.Response(200, content=b"not json"))
    with pytest.raises(pydantic.ValidationError):
        service.fetch_actor("https://example.com/")


def test_actor_round_trip_uses_wire_names():
    actor = Actor.model_validate(ACTOR_DOC)
    dumped = actor.model_dump(mode="json", by_alias=True)
    assert dumped == ACTOR_DOC
    assert Actor.model_validate_json(json.dumps(dumped)) == actor


def test_actor_defaults_when_fields_missing():
    actor = Actor.model_validate({})
    assert actor.inbox == ""
    assert actor.public_key == PublicKey()