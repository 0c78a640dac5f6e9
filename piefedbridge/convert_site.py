"""Conversion of PieFed site, instance and user settings into Lemmy models."""

from __future__ import annotations

from datetime import datetime, timedelta

from . import lemmy_site
from . import piefed_models as piefed
from .activitypub import Actor
from .convert_content import (
    convert_community_block_view,
    convert_community_follower_view,
    convert_community_moderator_view,
    convert_listing_type,
    convert_person,
    convert_person_aggregates,
    convert_person_block_view,
    convert_sort_type,
)
from .lemmy_content import Instance, ListingType, SortType


def _now_rfc3339() -> str:
    now = datetime.now().astimezone().replace(microsecond=0)
    text = now.isoformat()
    if now.utcoffset() == timedelta(0):
        text = text[: -len("+00:00")] + "Z"
    return text


def convert_instance(instance: piefed.Instance) -> Instance:
    return Instance(
        domain=instance.domain,
        id=instance.id,
        published=instance.published,
        software=instance.software,
        updated=instance.updated,
        version=instance.version,
    )


def convert_language_view(language: piefed.LanguageView) -> lemmy_site.Language:
    return lemmy_site.Language(code=language.code, id=language.id, name=language.name)


def convert_registration_mode(
    mode: piefed.RegistrationMode,
) -> lemmy_site.RegistrationMode:
    return lemmy_site.RegistrationMode(mode.value)


def convert_site(site: piefed.Site | None, actor: Actor) -> lemmy_site.Site | None:
    """Build the Lemmy site from PieFed's and the site's ActivityPub actor."""
    if site is None:
        return None
    return lemmy_site.Site(
        actor_id=site.actor_id,
        banner=None,
        content_warning=None,
        description=site.description,
        icon=site.icon,
        id=0,
        inbox_url=actor.inbox,
        instance_id=0,
        last_refreshed_at="",
        name=site.name,
        public_key=actor.public_key.public_key_pem,
        published=actor.published,
        sidebar=site.sidebar,
        updated=actor.updated,
    )


def convert_site_to_view(site: piefed.Site, actor: Actor) -> lemmy_site.SiteView:
    """Build the Lemmy site view; the site must state its downvote and registration settings."""
    if site.enable_downvotes is None:
        raise ValueError("site does not state whether downvotes are enabled")
    if site.registration_mode is None:
        raise ValueError("site does not state its registration mode")
    converted = convert_site(site, actor)
    assert converted is not None
    return lemmy_site.SiteView(
        local_site=lemmy_site.LocalSite(
            actor_name_max_length=20,
            application_email_admins=False,
            application_question=None,
            captcha_difficulty="",
            captcha_enabled=False,
            community_creation_admin_only=False,
            default_post_listing_mode=lemmy_site.PostListingMode.LIST,
            default_post_listing_type=ListingType.SUBSCRIBED,
            default_sort_type=SortType.HOT,
            default_theme="browser",
            enable_downvotes=site.enable_downvotes,
            enable_nsfw=True,
            federation_enabled=True,
            federation_signed_fetch=False,
            hide_modlog_mod_names=False,
            id=0,
            legal_information=None,
            private_instance=False,
            published=actor.published,
            registration_mode=convert_registration_mode(site.registration_mode),
            reports_email_admins=False,
            reports_email_verification=False,
            site_id=0,
            site_setup=True,
            slur_filter_regex=None,
            updated=actor.updated,
        ),
        local_site_rate_limit=lemmy_site.LocalSiteRateLimit(published=actor.published),
        site=converted,
    )


def convert_instance_block_view(
    view: piefed.InstanceBlockView, site_actor: Actor
) -> lemmy_site.InstanceBlockView:
    return lemmy_site.InstanceBlockView(
        instance=convert_instance(view.instance),
        person=convert_person(view.person),
        site=convert_site(view.site, site_actor),
    )


def convert_local_user(
    local_user: piefed.LocalUser, person: piefed.Person
) -> lemmy_site.LocalUser:
    return lemmy_site.LocalUser(
        accepted_application=True,
        admin=False,
        auto_expand=False,
        blur_nsfw=False,
        collapse_bot_comments=False,
        default_listing_type=convert_listing_type(local_user.default_listing_type),
        default_sort_type=convert_sort_type(local_user.default_sort_type),
        email=None,
        email_verified=True,
        enable_animated_images=True,
        enable_keyboard_navigation=True,
        id=0,
        infinite_scroll_enabled=True,
        interface_language="en",
        last_donation_notification=_now_rfc3339(),
        open_links_in_new_tab=True,
        person_id=person.id,
        post_listing_mode=lemmy_site.PostListingMode.LIST,
        send_notifications_to_email=False,
        show_avatars=True,
        show_bot_accounts=local_user.show_bot_accounts,
        show_nsfw=local_user.show_nsfw,
        show_read_posts=local_user.show_read_posts,
        show_scores=local_user.show_scores,
        theme="browser",
        totp_enabled=False,
    )


def convert_local_user_view(view: piefed.LocalUserView) -> lemmy_site.LocalUserView:
    return lemmy_site.LocalUserView(
        counts=convert_person_aggregates(view.counts),
        local_user=convert_local_user(view.local_user, view.person),
        local_user_vote_display_mode=lemmy_site.LocalUserVoteDisplayMode(
            downvotes=True,
            local_user_id=0,
            score=True,
            upvote_percentage=True,
            upvotes=True,
        ),
        person=convert_person(view.person),
    )


def convert_my_user_info(
    info: piefed.MyUserInfo | None, site_actor: Actor
) -> lemmy_site.MyUserInfo | None:
    if info is None:
        return None
    return lemmy_site.MyUserInfo(
        community_blocks=[convert_community_block_view(v) for v in info.community_blocks],
        discussion_languages=[language.id for language in info.discussion_languages],
        follows=[convert_community_follower_view(v) for v in info.follows],
        instance_blocks=[
            convert_instance_block_view(v, site_actor) for v in info.instance_blocks
        ],
        local_user_view=convert_local_user_view(info.local_user_view),
        moderates=[convert_community_moderator_view(v) for v in info.moderates],
        person_blocks=[convert_person_block_view(v) for v in info.person_blocks],
    )