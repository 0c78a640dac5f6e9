import pytest
from pydantic import ValidationError

from piefedbridge.piefed_messages import (
    CreateCommentRequest,
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
from piefedbridge.piefed_models import CommentSortType, ListingType, SortType


def person_data():
    return {
        "actor_id": "https://pf.example.com/u/bob",
        "id": 9,
        "instance_id": 1,
        "published": "2024-02-01T00:00:00Z",
        "user_name": "bob",
    }


def community_data():
    return {"actor_id": "https://pf.example.com/c/tech", "id": 4, "name": "tech"}


def post_view_data(post_id):
    return {
        "post": {"id": post_id, "title": "Post", "ap_id": "https://pf.example.com/p"},
        "creator": person_data(),
        "community": community_data(),
        "counts": {"post_id": post_id},
        "subscribed": "Subscribed",
    }


def comment_view_data():
    return {
        "comment": {"id": 21, "body": "text", "ap_id": "https://pf.example.com/c/21"},
        "creator": person_data(),
        "post": {"id": 1, "title": "Post"},
        "community": community_data(),
        "counts": {"comment_id": 21, "score": 3},
        "subscribed": "NotSubscribed",
    }


def test_create_comment_request_omits_missing_ids():
    request = CreateCommentRequest(body="hello", post_id=12)
    assert request.model_dump(mode="json", by_alias=True) == {
        "body": "hello",
        "post_id": 12,
    }


def test_create_comment_request_keeps_given_ids():
    request = CreateCommentRequest(body="hello", post_id=12, parent_id=3, language_id=2)
    dumped = request.model_dump(mode="json", by_alias=True)
    assert dumped["parent_id"] == 3
    assert dumped["language_id"] == 2


def test_get_comment_request_requires_id():
    with pytest.raises(ValidationError):
        GetCommentRequest()


def test_get_comments_request_dumps_only_set_values():
    request = GetCommentsRequest(
        type_=ListingType.LOCAL, sort=CommentSortType.TOP, post_id=12
    )
    assert request.model_dump(mode="json", by_alias=True) == {
        "type_": "Local",
        "sort": "Top",
        "post_id": 12,
    }


def test_get_post_request_keeps_null_keys():
    dumped = GetPostRequest(id=5).model_dump(mode="json", by_alias=True)
    assert dumped == {"comment_id": None, "id": 5}


def test_get_posts_request_round_trip():
    request = GetPostsRequest(
        type_=ListingType.POPULAR,
        sort=SortType.SCALED,
        page=2,
        community_name="tech",
        liked_only=True,
    )
    dumped = request.model_dump(mode="json", by_alias=True)
    assert GetPostsRequest.model_validate(dumped) == request
    assert "limit" not in dumped


def test_login_request_dump():
    password = "password"
    request = LoginRequest(username="bob", password=password)
    assert request.model_dump(by_alias=True) == {
        "username": "bob",
        "password": password,
    }


def test_login_response_reads_jwt():
    assert LoginResponse.model_validate({"jwt": "token"}).jwt == "token"


def test_unread_count_response():
    counts = GetUnreadCountResponse.model_validate(
        {"replies": 1, "mentions": 2, "private_messages": 3, "other": 4}
    )
    assert (counts.replies, counts.mentions, counts.private_messages, counts.other) == (
        1,
        2,
        3,
        4,
    )


def test_get_posts_response_parses_posts_and_cursor():
    response = GetPostsResponse.model_validate(
        {"posts": [post_view_data(1), post_view_data(2)], "next_page": "abc"}
    )
    assert [view.post.id for view in response.posts] == [1, 2]
    assert response.next_page == "abc"


def test_get_posts_response_keeps_null_next_page():
    dumped = GetPostsResponse().model_dump(by_alias=True)
    assert dumped == {"posts": [], "next_page": None}


def test_get_post_response():
    response = GetPostResponse.model_validate(
        {
            "post_view": post_view_data(8),
            "community_view": {
                "community": community_data(),
                "subscribed": "Subscribed",
                "counts": {"community_id": 4},
            },
            "moderators": [{"community": community_data(), "moderator": person_data()}],
        }
    )
    assert response.post_view.post.id == 8
    assert response.moderators[0].moderator.username == "bob"
    assert response.cross_posts == []


def test_comment_responses():
    single = GetCommentResponse.model_validate({"comment_view": comment_view_data()})
    many = GetCommentsResponse.model_validate({"comments": [comment_view_data()]})
    assert single.comment_view.comment.id == 21
    assert many.comments[0] == single.comment_view


def test_get_site_response_without_user():
    response = GetSiteResponse.model_validate(
        {
            "site": {"actor_id": "https://pf.example.com/", "name": "PieFed"},
            "version": "1.0",
            "admins": [{"person": person_data(), "counts": {"person_id": 9}}],
        }
    )
    assert response.my_user is None
    assert response.admins[0].person.id == 9
    assert "my_user" not in response.model_dump(by_alias=True)


def test_get_site_response_requires_site():
    with pytest.raises(ValidationError):
        GetSiteResponse.model_validate({"version": "1.0"})