"""Conversion of PieFed posts, comments, communities and people into Lemmy models."""

from __future__ import annotations

from . import lemmy_content as lemmy
from . import piefed_models as piefed


def convert_comment(comment: piefed.Comment) -> lemmy.Comment:
    return lemmy.Comment(
        activity_pub_id=comment.activity_pub_id,
        content=comment.body,
        creator_id=comment.creator_id,
        deleted=comment.deleted,
        distinguished=comment.distinguished,
        id=comment.id,
        language_id=comment.language_id,
        local=comment.local,
        path=comment.path,
        post_id=comment.post_id,
        published=comment.published,
        removed=comment.removed,
        updated=comment.updated,
    )


def convert_comment_aggregates(
    counts: piefed.CommentAggregates,
) -> lemmy.CommentAggregates:
    return lemmy.CommentAggregates(
        child_count=counts.child_count,
        comment_id=counts.comment_id,
        downvotes=counts.downvotes,
        published=counts.published,
        score=counts.score,
        upvotes=counts.upvotes,
    )


def convert_comment_sort_type(sort: piefed.CommentSortType) -> lemmy.CommentSortType:
    return lemmy.CommentSortType(sort.value)


def reverse_convert_comment_sort_type(
    sort: lemmy.CommentSortType,
) -> piefed.CommentSortType:
    """Map a Lemmy comment sort onto PieFed's; Controversial becomes Hot."""
    if sort is lemmy.CommentSortType.CONTROVERSIAL:
        return piefed.CommentSortType.HOT
    return piefed.CommentSortType(sort.value)


def convert_subscribed_type(subscribed: piefed.SubscribedType) -> lemmy.SubscribedType:
    return lemmy.SubscribedType(subscribed.value)


def convert_listing_type(listing_type: piefed.ListingType) -> lemmy.ListingType:
    """Map a PieFed listing type onto Lemmy's; Popular becomes All."""
    if listing_type is piefed.ListingType.POPULAR:
        return lemmy.ListingType.ALL
    return lemmy.ListingType(listing_type.value)


def reverse_convert_listing_type(listing_type: lemmy.ListingType) -> piefed.ListingType:
    return piefed.ListingType(listing_type.value)


def convert_sort_type(sort: piefed.SortType) -> lemmy.SortType:
    return lemmy.SortType(sort.value)


_SORT_REPLACEMENTS = {
    lemmy.SortType.CONTROVERSIAL: piefed.SortType.ACTIVE,
    lemmy.SortType.TOP_NINE_MONTHS: piefed.SortType.TOP_MONTH,
    lemmy.SortType.NEW_COMMENTS: piefed.SortType.NEW,
}


def reverse_convert_sort_type(sort: lemmy.SortType) -> piefed.SortType:
    """Map a Lemmy post sort onto PieFed's.

    Controversial becomes Active, TopNineMonths becomes TopMonth and
    NewComments becomes New; other sorts keep their name. A sort PieFed does
    not know under that name raises ValueError.
    """
    replacement = _SORT_REPLACEMENTS.get(sort)
    if replacement is not None:
        return replacement
    return piefed.SortType(sort.value)


def convert_community(community: piefed.Community) -> lemmy.Community:
    return lemmy.Community(
        actor_id=community.actor_id,
        banner=community.banner,
        deleted=community.deleted,
        description=community.description,
        hidden=community.hidden,
        icon=community.icon,
        id=community.id,
        instance_id=community.instance_id,
        local=community.local,
        name=community.name,
        nsfw=community.nsfw,
        posting_restricted_to_mods=community.restricted_to_mods,
        published=community.published,
        removed=community.removed,
        title=community.title,
        updated=community.updated,
        visibility=lemmy.CommunityVisibility.PUBLIC,
    )


def convert_community_aggregates(
    counts: piefed.CommunityAggregates,
) -> lemmy.CommunityAggregates:
    return lemmy.CommunityAggregates(
        comments=counts.post_reply_count,
        community_id=counts.community_id,
        posts=counts.post_count,
        published=counts.published,
        subscribers=counts.subscriptions_count,
        subscribers_local=0,
        users_active_day=0,
        users_active_half_year=0,
        users_active_month=0,
        users_active_week=0,
    )


def convert_person(person: piefed.Person) -> lemmy.Person:
    return lemmy.Person(
        actor_id=person.actor_id,
        avatar=person.avatar,
        ban_expires=None,
        banned=person.banned,
        banner=person.banner,
        bio=None,
        bot_account=person.bot,
        deleted=person.deleted,
        display_name=person.title if person.title is not None else "",
        id=person.id,
        instance_id=person.instance_id,
        local=person.local,
        matrix_user_id=None,
        name=person.username if person.username is not None else "",
        published=person.published,
        updated=None,
    )


def convert_person_aggregates(
    counts: piefed.PersonAggregates,
) -> lemmy.PersonAggregates:
    return lemmy.PersonAggregates(
        comment_count=counts.comment_count,
        person_id=counts.person_id,
        post_count=counts.post_count,
    )


def convert_person_block_view(view: piefed.PersonBlockView) -> lemmy.PersonBlockView:
    return lemmy.PersonBlockView(
        person=convert_person(view.person),
        target=convert_person(view.target),
    )


def convert_person_view(view: piefed.PersonView) -> lemmy.PersonView:
    return lemmy.PersonView(
        counts=convert_person_aggregates(view.counts),
        is_admin=view.is_admin,
        person=convert_person(view.person),
    )


def convert_community_block_view(
    view: piefed.CommunityBlockView,
) -> lemmy.CommunityBlockView:
    return lemmy.CommunityBlockView(
        community=convert_community(view.community),
        person=convert_person(view.person),
    )


def convert_community_follower_view(
    view: piefed.CommunityFollowerView,
) -> lemmy.CommunityFollowerView:
    return lemmy.CommunityFollowerView(
        community=convert_community(view.community),
        follower=convert_person(view.follower),
    )


def convert_community_moderator_view(
    view: piefed.CommunityModeratorView,
) -> lemmy.CommunityModeratorView:
    return lemmy.CommunityModeratorView(
        community=convert_community(view.community),
        moderator=convert_person(view.moderator),
    )


def convert_community_view(view: piefed.CommunityView) -> lemmy.CommunityView:
    return lemmy.CommunityView(
        banned_from_community=view.banned_from_community,
        blocked=view.blocked,
        community=convert_community(view.community),
        counts=convert_community_aggregates(view.counts),
        subscribed=convert_subscribed_type(view.subscribed),
    )


def convert_post(post: piefed.Post) -> lemmy.Post:
    return lemmy.Post(
        alt_text=post.alt_text,
        activity_pub_id=post.activity_pub_id,
        body=post.body,
        community_id=post.community_id,
        creator_id=post.creator_id,
        deleted=post.deleted,
        embed_description=None,
        embed_title=None,
        embed_video_url=None,
        featured_community=False,
        featured_local=False,
        id=post.id,
        language_id=post.language_id,
        local=post.local,
        locked=post.locked,
        name=post.title,
        nsfw=post.nsfw,
        published=post.published,
        removed=post.removed,
        thumbnail_url=post.thumbnail_url,
        updated=post.updated,
        url=post.url,
        url_content_type=None,
    )


def convert_post_aggregates(counts: piefed.PostAggregates) -> lemmy.PostAggregates:
    return lemmy.PostAggregates(
        comments=counts.comments,
        downvotes=counts.downvotes,
        newest_comment_time=counts.newest_comment_time,
        post_id=counts.post_id,
        published=counts.published,
        score=counts.score,
        upvotes=counts.upvotes,
    )


def convert_post_view(view: piefed.PostView) -> lemmy.PostView:
    return lemmy.PostView(
        banned_from_community=view.banned_from_community,
        community=convert_community(view.community),
        counts=convert_post_aggregates(view.counts),
        creator=convert_person(view.creator),
        creator_banned_from_community=view.creator_banned_from_community,
        creator_blocked=bool(view.creator_blocked),
        creator_is_admin=view.creator_is_admin,
        creator_is_moderator=view.creator_is_moderator,
        hidden=view.hidden,
        image_details=None,
        my_vote=view.my_vote,
        post=convert_post(view.post),
        read=view.read,
        saved=view.saved,
        subscribed=convert_subscribed_type(view.subscribed),
        unread_comments=view.unread_comments,
    )


def convert_comment_view(view: piefed.CommentView) -> lemmy.CommentView:
    return lemmy.CommentView(
        banned_from_community=view.banned_from_community,
        comment=convert_comment(view.comment),
        community=convert_community(view.community),
        counts=convert_comment_aggregates(view.counts),
        creator=convert_person(view.creator),
        creator_banned_from_community=view.creator_banned_from_community,
        creator_blocked=view.creator_blocked,
        creator_is_admin=view.creator_is_admin,
        creator_is_moderator=view.creator_is_moderator,
        my_vote=view.my_vote,
        post=convert_post(view.post),
        saved=view.saved,
        subscribed=convert_subscribed_type(view.subscribed),
    )