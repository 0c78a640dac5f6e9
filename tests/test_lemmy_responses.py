from piefedbridge.lemmy_content import (
    Comment,
    CommentAggregates,
    CommentView,
    Community,
    CommunityAggregates,
    CommunityView,
    ListingType,
    Person,
    Post,
    PostAggregates,
    PostView,
    SortType,
    SubscribedType,
)
from piefedbridge.lemmy_responses import (
    CreateCommentResponse,
    GetCommentResponse,
    GetCommentsResponse,
    GetPostResponse,
    GetPostsResponse,
    GetReportCountResponse,
    GetSiteResponse,
    GetUnreadCountResponse,
    LoginResponse,
    SuccessResponse,
)
from piefedbridge.lemmy_site import (
    LocalSite,
    PostListingMode,
    RegistrationMode,
    Site,
    SiteView,
)


def _dump(model):
    return model.model_dump(mode="json", by_alias=True)


def _comment_view(content="hi"):
    return CommentView(
        comment=Comment(content=content),
        community=Community(name="c"),
        counts=CommentAggregates(),
        creator=Person(name="p"),
        post=Post(name="t"),
        subscribed=SubscribedType.SUBSCRIBED,
    )


def _post_view(name="t"):
    return PostView(
        community=Community(),
        counts=PostAggregates(),
        creator=Person(),
        post=Post(name=name),
        subscribed=SubscribedType.NOT_SUBSCRIBED,
    )


def _site_view():
    return SiteView(
        local_site=LocalSite(
            default_post_listing_mode=PostListingMode.LIST,
            default_post_listing_type=ListingType.SUBSCRIBED,
            default_sort_type=SortType.HOT,
            registration_mode=RegistrationMode.CLOSED,
        ),
        site=Site(name="Home"),
    )


def test_create_comment_response_round_trip():
    response = CreateCommentResponse(comment_view=_comment_view(), recipient_ids=[])
    restored = CreateCommentResponse.model_validate_json(
        response.model_dump_json(by_alias=True)
    )
    assert restored == response
    assert _dump(response)["recipient_ids"] == []


def test_get_comment_response_carries_content():
    response = GetCommentResponse(comment_view=_comment_view("body text"))
    assert _dump(response)["comment_view"]["comment"]["content"] == "body text"


def test_get_comments_response_keeps_order():
    response = GetCommentsResponse(comments=[_comment_view("a"), _comment_view("b")])
    contents = [c["comment"]["content"] for c in _dump(response)["comments"]]
    assert contents == ["a", "b"]


def test_get_posts_response_next_page_is_optional():
    assert "next_page" not in _dump(GetPostsResponse(posts=[_post_view()]))
    assert _dump(GetPostsResponse(next_page="abc"))["next_page"] == "abc"


def test_get_post_response_round_trip():
    response = GetPostResponse(
        community_view=CommunityView(
            community=Community(),
            counts=CommunityAggregates(),
            subscribed=SubscribedType.PENDING,
        ),
        post_view=_post_view("main"),
        cross_posts=[_post_view("other")],
    )
    assert GetPostResponse.model_validate(_dump(response)) == response


def test_report_count_omits_null_counts():
    assert _dump(GetReportCountResponse()) == {"comment_reports": 0, "post_reports": 0}
    assert _dump(GetReportCountResponse(community_id=7))["community_id"] == 7


def test_site_response_omits_missing_user():
    response = GetSiteResponse(site_view=_site_view(), version="0.19.11")
    dumped = _dump(response)
    assert "my_user" not in dumped
    assert dumped["version"] == "0.19.11"
    assert dumped["taglines"] == []
    assert GetSiteResponse.model_validate(dumped) == response


def test_small_responses_serialize_all_keys():
    token = "token"
    assert _dump(LoginResponse(jwt=token)) == {
        "jwt": token,
        "registration_created": False,
        "verify_email_sent": False,
    }
    assert _dump(SuccessResponse(success=True)) == {"success": True}
    counts = GetUnreadCountResponse(mentions=1, private_messages=2, replies=3)
    assert GetUnreadCountResponse.model_validate(_dump(counts)) == counts