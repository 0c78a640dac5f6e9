"""Data models of the Lemmy API for the site, its settings and the logged-in user."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from pydantic import Field, NonNegativeInt

from .lemmy_content import (
    CommunityBlockView,
    CommunityFollowerView,
    CommunityModeratorView,
    Instance,
    ListingType,
    Person,
    PersonAggregates,
    PersonBlockView,
    SortType,
    _LemmyModel,
)


class PostListingMode(str, Enum):
    LIST = "List"
    CARD = "Card"
    SMALL_CARD = "SmallCard"


class RegistrationMode(str, Enum):
    CLOSED = "Closed"
    REQUIRE_APPLICATION = "RequireApplication"
    OPEN = "Open"


class CustomEmoji(_LemmyModel):
    _omit_none: ClassVar[frozenset[str]] = frozenset({"updated"})

    alt_text: str = ""
    category: str = ""
    id: NonNegativeInt = 0
    image_url: str = ""
    local_site_id: NonNegativeInt = 0
    published: str = ""
    shortcode: str = ""
    updated: str | None = None


class CustomEmojiKeyword(_LemmyModel):
    custom_emoji_id: NonNegativeInt = 0
    keyword: str = ""


class CustomEmojiView(_LemmyModel):
    custom_emoji: CustomEmoji
    keywords: list[CustomEmojiKeyword] = Field(default_factory=list)


class Language(_LemmyModel):
    code: str = ""
    id: NonNegativeInt = 0
    name: str = ""


class Site(_LemmyModel):
    _omit_none: ClassVar[frozenset[str]] = frozenset(
        {"banner", "content_warning", "description", "icon", "sidebar", "updated"}
    )

    actor_id: str = ""
    banner: str | None = None
    content_warning: str | None = None
    description: str | None = None
    icon: str | None = None
    id: NonNegativeInt = 0
    inbox_url: str = ""
    instance_id: NonNegativeInt = 0
    last_refreshed_at: str = ""
    name: str = ""
    public_key: str = ""
    published: str = ""
    sidebar: str | None = None
    updated: str | None = None


class InstanceBlockView(_LemmyModel):
    _omit_none: ClassVar[frozenset[str]] = frozenset({"site"})

    instance: Instance
    person: Person
    site: Site | None = None


class LocalSite(_LemmyModel):
    _omit_none: ClassVar[frozenset[str]] = frozenset(
        {"application_question", "legal_information", "slur_filter_regex", "updated"}
    )

    actor_name_max_length: NonNegativeInt = 0
    application_email_admins: bool = False
    application_question: str | None = None
    captcha_difficulty: str = ""
    captcha_enabled: bool = False
    community_creation_admin_only: bool = False
    default_post_listing_mode: PostListingMode
    default_post_listing_type: ListingType
    default_sort_type: SortType
    default_theme: str = ""
    enable_downvotes: bool = False
    enable_nsfw: bool = False
    federation_enabled: bool = False
    federation_signed_fetch: bool = False
    hide_modlog_mod_names: bool = False
    id: NonNegativeInt = 0
    legal_information: str | None = None
    private_instance: bool = False
    published: str = ""
    registration_mode: RegistrationMode
    reports_email_admins: bool = False
    reports_email_verification: bool = False
    site_id: NonNegativeInt = 0
    site_setup: bool = False
    slur_filter_regex: str | None = None
    updated: str | None = None


class LocalSiteRateLimit(_LemmyModel):
    _omit_none: ClassVar[frozenset[str]] = frozenset({"updated"})

    comment: NonNegativeInt = 0
    comment_per_second: NonNegativeInt = 0
    image: NonNegativeInt = 0
    image_per_second: NonNegativeInt = 0
    import_user_settings: NonNegativeInt = 0
    import_user_settings_per_second: NonNegativeInt = 0
    local_site_id: NonNegativeInt = 0
    message: NonNegativeInt = 0
    message_per_second: NonNegativeInt = 0
    post: NonNegativeInt = 0
    post_per_second: NonNegativeInt = 0
    published: str = ""
    register_: NonNegativeInt = Field(default=0, alias="register")
    register_per_second: NonNegativeInt = 0
    search: NonNegativeInt = 0
    search_per_second: NonNegativeInt = 0
    updated: str | None = None


class LocalSiteUrlBlocklist(_LemmyModel):
    _omit_none: ClassVar[frozenset[str]] = frozenset({"updated"})

    id: NonNegativeInt = 0
    published: str = ""
    updated: str | None = None
    url: str = ""


class LocalUser(_LemmyModel):
    _omit_none: ClassVar[frozenset[str]] = frozenset({"email"})

    accepted_application: bool = False
    admin: bool = False
    auto_expand: bool = False
    blur_nsfw: bool = False
    collapse_bot_comments: bool = False
    default_listing_type: ListingType
    default_sort_type: SortType
    email: str | None = None
    email_verified: bool = False
    enable_animated_images: bool = False
    enable_keyboard_navigation: bool = False
    id: NonNegativeInt = 0
    infinite_scroll_enabled: bool = False
    interface_language: str = ""
    last_donation_notification: str = ""
    open_links_in_new_tab: bool = False
    person_id: NonNegativeInt = 0
    post_listing_mode: PostListingMode
    send_notifications_to_email: bool = False
    show_avatars: bool = False
    show_bot_accounts: bool = False
    show_nsfw: bool = False
    show_read_posts: bool = False
    show_scores: bool = False
    theme: str = ""
    totp_enabled: bool = Field(default=False, alias="totp_2fa_enabled")


class LocalUserVoteDisplayMode(_LemmyModel):
    downvotes: bool = False
    local_user_id: NonNegativeInt = 0
    score: bool = False
    upvote_percentage: bool = False
    upvotes: bool = False


class LocalUserView(_LemmyModel):
    counts: PersonAggregates = Field(default_factory=PersonAggregates)
    local_user: LocalUser
    local_user_vote_display_mode: LocalUserVoteDisplayMode = Field(
        default_factory=LocalUserVoteDisplayMode
    )
    person: Person


class MyUserInfo(_LemmyModel):
    community_blocks: list[CommunityBlockView] = Field(default_factory=list)
    discussion_languages: list[NonNegativeInt] = Field(default_factory=list)
    follows: list[CommunityFollowerView] = Field(default_factory=list)
    instance_blocks: list[InstanceBlockView] = Field(default_factory=list)
    local_user_view: LocalUserView
    moderates: list[CommunityModeratorView] = Field(default_factory=list)
    person_blocks: list[PersonBlockView] = Field(default_factory=list)


class SiteAggregates(_LemmyModel):
    comments: NonNegativeInt = 0
    communities: NonNegativeInt = 0
    posts: NonNegativeInt = 0
    site_id: NonNegativeInt = 0
    users: NonNegativeInt = 0
    users_active_day: NonNegativeInt = 0
    users_active_half_year: NonNegativeInt = 0
    users_active_month: NonNegativeInt = 0
    users_active_week: NonNegativeInt = 0


class SiteView(_LemmyModel):
    counts: SiteAggregates = Field(default_factory=SiteAggregates)
    local_site: LocalSite
    local_site_rate_limit: LocalSiteRateLimit = Field(
        default_factory=LocalSiteRateLimit
    )
    site: Site


class Tagline(_LemmyModel):
    _omit_none: ClassVar[frozenset[str]] = frozenset({"updated"})

    content: str = ""
    id: NonNegativeInt = 0
    local_site_id: NonNegativeInt = 0
    published: str = ""
    updated: str | None = None