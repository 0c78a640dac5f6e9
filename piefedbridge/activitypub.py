"""Fetching ActivityPub actors."""

from __future__ import annotations

from typing import ClassVar

import httpx
from pydantic import Field

from .piefed_models import _WireModel

ACTIVITY_JSON = "application/activity+json"


class PublicKey(_WireModel):
    id: str = ""
    owner: str = ""
    public_key_pem: str = Field(default="", alias="publicKeyPem")


class Actor(_WireModel):
    _omit_empty: ClassVar[frozenset[str]] = frozenset({"updated"})

    inbox: str = ""
    published: str = ""
    updated: str | None = None
    public_key: PublicKey = Field(default_factory=PublicKey, alias="publicKey")


class ActivityPub:
    """Client that loads actor documents by their id URL."""

    def __init__(self, client: httpx.Client | None = None) -> None:
        self._client = client or httpx.Client(follow_redirects=True)

    def fetch_actor(self, actor_id: str) -> Actor:
        response = self._client.get(actor_id, headers={"Accept": ACTIVITY_JSON})
        return Actor.model_validate_json(response.content)

    def close(self) -> None:
        self._client.close()