import pytest
from pydantic import ValidationError

from piefedbridge.lemmy_content import (
    Comment,
    CommentAggregates,
    CommentView,
    Community,
    CommunityView,
    CommunityVisibility,
    CommunityAggregates,
    Instance,
    ListingType,
    Person,
    PersonAggregates,
    PersonView,
    Post,
    PostAggregates,
    PostView,
    SubscribedType,
)


def _person(**extra):
    return Person(
        actor_id="https://example.com/u/alice",
        id=3,
        instance_id=1,
        name="alice",
        published="2024-01-01T00:00:00Z",
        **extra,
    )


def _community():
    return Community(
        actor_id="https://example.com/c/books",
        id=7,
        instance_id=1,
        name="books",
        title="Books",
        published="2024-01-02T00:00:00Z",
    )


def _post():
    return Post(
        activity_pub_id="https://example.com/post/9",
        community_id=7,
        creator_id=3,
        id=9,
        language_id=1,
        name="A title",
        published="2024-01-03T00:00:00Z",
        url="https://example.com/article",
    )


def _dump(model):
    return model.model_dump(mode="json", by_alias=True)


def test_person_pointer_false_is_kept_and_nulls_dropped():
    dumped = _dump(_person(bot_account=False))
    assert dumped["bot_account"] is False
    assert "avatar" not in dumped
    assert "updated" not in dumped
    assert dumped["display_name"] == ""


def test_person_without_bot_account_omits_key():
    assert "bot_account" not in _dump(_person())


def test_comment_uses_ap_id_alias():
    comment = Comment(activity_pub_id="https://example.com/comment/1", content="hi")
    dumped = _dump(comment)
    assert dumped["ap_id"] == "https://example.com/comment/1"
    assert "activity_pub_id" not in dumped
    parsed = Comment.model_validate({"ap_id": "https://example.com/comment/2"})
    assert parsed.activity_pub_id == "https://example.com/comment/2"


def test_comment_updated_omitted_only_when_none():
    assert "updated" not in _dump(Comment())
    assert _dump(Comment(updated="2024-02-01T00:00:00Z"))["updated"] == (
        "2024-02-01T00:00:00Z"
    )


def test_community_visibility_defaults_to_public():
    community = _community()
    assert community.visibility is CommunityVisibility.PUBLIC
    assert _dump(community)["visibility"] == "Public"


def test_comment_view_my_vote_zero_is_kept():
    view = CommentView(
        comment=Comment(id=1, post_id=9),
        community=_community(),
        counts=CommentAggregates(comment_id=1, score=-2),
        creator=_person(),
        post=_post(),
        subscribed=SubscribedType.PENDING,
        my_vote=0,
    )
    dumped = _dump(view)
    assert dumped["my_vote"] == 0
    assert dumped["subscribed"] == "Pending"
    assert dumped["counts"]["score"] == -2


def test_comment_view_requires_nested_objects():
    with pytest.raises(ValidationError) as info:
        CommentView.model_validate({})
    missing = {err["loc"][0] for err in info.value.errors() if err["type"] == "missing"}
    assert {"comment", "community", "counts", "creator", "post", "subscribed"} <= missing


def test_post_view_json_round_trip():
    view = PostView(
        community=_community(),
        counts=PostAggregates(post_id=9, comments=4, score=5, upvotes=5),
        creator=_person(bot_account=True),
        post=_post(),
        subscribed=SubscribedType.SUBSCRIBED,
        unread_comments=2,
    )
    restored = PostView.model_validate_json(view.model_dump_json(by_alias=True))
    assert restored == view
    assert "image_details" not in _dump(view)


def test_community_view_round_trip():
    view = CommunityView(
        community=_community(),
        counts=CommunityAggregates(community_id=7, subscribers=12),
        subscribed=SubscribedType.NOT_SUBSCRIBED,
    )
    assert CommunityView.model_validate(_dump(view)) == view


def test_person_view_round_trip():
    view = PersonView(
        counts=PersonAggregates(person_id=3, post_count=1), is_admin=True, person=_person()
    )
    assert PersonView.model_validate(_dump(view)) == view


def test_instance_optional_fields_omitted():
    dumped = _dump(Instance(domain="example.com", id=1, published="2024-01-01"))
    assert set(dumped) == {"domain", "id", "published"}


def test_negative_id_rejected():
    with pytest.raises(ValidationError):
        Post(id=-1)


def test_popular_is_not_a_lemmy_listing_type():
    with pytest.raises(ValueError):
        ListingType("Popular")


def test_unknown_keys_ignored():
    person = Person.model_validate({"name": "bob", "favourite_colour": "blue"})
    assert person.name == "bob"
    assert "favourite_colour" not in _dump(person)