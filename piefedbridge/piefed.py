"""Client for the PieFed API."""

from __future__ import annotations

import json
from collections.abc import Mapping
from http import HTTPStatus
from typing import TypeVar

import httpx
from pydantic import BaseModel

from .errors import PiefedError
from .piefed_messages import (
    CreateCommentRequest,
    CreateCommentResponse,
    GetCommentRequest,
    GetCommentResponse,
    GetCommentsRequest,
    GetCommentsResponse,
    GetPostRequest,
    GetPostResponse,
    GetPostsRequest,
    GetPostsResponse,
    GetSiteResponse,
    GetUnreadCountResponse,
    LoginRequest,
    LoginResponse,
)
from .routing import HttpMethod
from .textutil import marshal_to_query_string
from .web import APPLICATION_JSON, to_json

ResponseT = TypeVar("ResponseT", bound=BaseModel)

# Content-Length is recomputed for the outgoing body; Host and Transfer-Encoding
# belong to the incoming connection, not to the forwarded request.
_DROPPED_HEADERS = frozenset({"content-length", "host", "transfer-encoding"})


def _error_from(response: httpx.Response) -> PiefedError:
    try:
        data = json.loads(response.content)
    except ValueError:
        data = None
    code = data.get("error") if isinstance(data, dict) else None
    return PiefedError(code if isinstance(code, str) else "", response.status_code)


class Piefed:
    """Forwards calls to one PieFed instance, passing the caller's headers on."""

    def __init__(self, instance: str, client: httpx.Client | None = None) -> None:
        self.instance = instance
        self._client = client or httpx.Client(follow_redirects=True)

    @property
    def url(self) -> str:
        return f"https://{self.instance}/api/alpha"

    def close(self) -> None:
        self._client.close()

    def _send(
        self,
        path: str,
        method: HttpMethod,
        payload: BaseModel | None,
        headers: Mapping[str, str],
    ) -> httpx.Response:
        content: bytes | None = None
        query = ""
        if payload is not None:
            if method is HttpMethod.GET:
                query = "?" + marshal_to_query_string(payload)
            else:
                content = to_json(payload)

        outgoing = {
            key: value
            for key, value in headers.items()
            if key.lower() not in _DROPPED_HEADERS
        }
        if content is not None:
            outgoing = {
                key: value
                for key, value in outgoing.items()
                if key.lower() != "content-type"
            }
            outgoing["Content-Type"] = APPLICATION_JSON

        return self._client.request(
            method.value, self.url + path + query, content=content, headers=outgoing
        )

    def _call(
        self,
        path: str,
        method: HttpMethod,
        payload: BaseModel | None,
        headers: Mapping[str, str],
        model: type[ResponseT],
    ) -> ResponseT:
        response = self._send(path, method, payload, headers)
        if response.status_code != HTTPStatus.OK:
            raise _error_from(response)
        return model.model_validate_json(response.content)

    def get_comments(
        self, request: GetCommentsRequest, headers: Mapping[str, str]
    ) -> GetCommentsResponse:
        return self._call(
            "/comment/list", HttpMethod.GET, request, headers, GetCommentsResponse
        )

    def get_comment(
        self, request: GetCommentRequest, headers: Mapping[str, str]
    ) -> GetCommentResponse:
        return self._call("/comment", HttpMethod.GET, request, headers, GetCommentResponse)

    def create_comment(
        self, request: CreateCommentRequest, headers: Mapping[str, str]
    ) -> CreateCommentResponse:
        return self._call(
            "/comment", HttpMethod.POST, request, headers, CreateCommentResponse
        )

    def get_posts(
        self, request: GetPostsRequest, headers: Mapping[str, str]
    ) -> GetPostsResponse:
        return self._call("/post/list", HttpMethod.GET, request, headers, GetPostsResponse)

    def get_post(
        self, request: GetPostRequest, headers: Mapping[str, str]
    ) -> GetPostResponse:
        return self._call("/post", HttpMethod.GET, request, headers, GetPostResponse)

    def site(self, headers: Mapping[str, str]) -> GetSiteResponse:
        return self._call("/site", HttpMethod.GET, None, headers, GetSiteResponse)

    def login(self, request: LoginRequest, headers: Mapping[str, str]) -> LoginResponse:
        return self._call("/user/login", HttpMethod.POST, request, headers, LoginResponse)

    def get_unread_count(self, headers: Mapping[str, str]) -> GetUnreadCountResponse:
        return self._call(
            "/user/unread_count", HttpMethod.GET, None, headers, GetUnreadCountResponse
        )