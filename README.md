# piefedbridge

piefedbridge holds the pieces for serving the Lemmy `/api/v3` client API on
top of a PieFed instance. It has models for both APIs, a client for PieFed's
`/api/alpha` API, converters that turn PieFed data into Lemmy's shape, a small
path router, and helpers that render responses as JSON.

## Installation

```
pip install .
```

## Modules

- `piefedbridge.piefed_models`: PieFed data models (`PostView`, `CommentView`,
  `Community`, `Person`, `Site`, `MyUserInfo`, ...) and enums (`SortType`,
  `ListingType`, `CommentSortType`, `SubscribedType`, `RegistrationMode`).
- `piefedbridge.piefed_messages`: PieFed request and response bodies, such as
  `GetPostsRequest`, `GetPostsResponse`, `LoginRequest` and `GetSiteResponse`.
- `piefedbridge.lemmy_content` and `piefedbridge.lemmy_site`: Lemmy data models.
- `piefedbridge.lemmy_responses`: Lemmy response bodies, such as
  `GetPostsResponse`, `GetSiteResponse` and `LoginResponse`.
- `piefedbridge.piefed`: the `Piefed` client. It has the methods `get_posts`,
  `get_post`, `get_comments`, `get_comment`, `create_comment`, `site`, `login`
  and `get_unread_count`. Each call goes to `https://<instance>/api/alpha` and
  passes the given headers on. GET payloads are sent as a query string, and
  other payloads as a JSON body. Any status other than 200 raises
  `piefedbridge.errors.PiefedError`.
- `piefedbridge.activitypub`: `ActivityPub.fetch_actor(actor_id)` loads an
  actor document (`Actor`, with its `PublicKey`).
- `piefedbridge.convert_content` and `piefedbridge.convert_site`: functions such
  as `convert_post_view`, `convert_comment_view`, `convert_site_to_view` and
  `convert_my_user_info`. They map PieFed models onto Lemmy ones. The reverse
  helpers `reverse_convert_sort_type`, `reverse_convert_listing_type` and
  `reverse_convert_comment_sort_type` map Lemmy query values onto PieFed's.
- `piefedbridge.errors`: `PiefedError`, `ValidationError`, the Lemmy
  `ErrorResponse` and `convert_piefed_error`. The `convert_piefed_error`
  function keeps `incorrect_login` and reports every other code as `unknown`
  with the message `Piefed error: <code>`.
- `piefedbridge.routing`: `HttpMethod`, `Route`, `Router`, `regexify_route` and
  `route_matches`. `route_matches` returns the `{name}` placeholders of the path
  as a dict, or `None` if the route does not match.
- `piefedbridge.web`: `Request`, `Response`, the ready-made error responses
  (`not_found_proxy_error`, `not_implemented_response`, ...), `to_json` and
  `render_response`. `render_response` returns the status, headers and body
  bytes for a response.
- `piefedbridge.textutil`: `to_snake_case`, `marshal_to_query_string` and
  `singularize`.

## Example

```python
from piefedbridge.convert_content import convert_post_view
from piefedbridge.lemmy_responses import GetPostsResponse
from piefedbridge.piefed import Piefed
from piefedbridge.piefed_messages import GetPostsRequest
from piefedbridge.piefed_models import SortType
from piefedbridge.web import Response, render_response

client = Piefed("piefed.example.com")
result = client.get_posts(
    GetPostsRequest(sort=SortType.HOT, limit=10),
    {"Authorization": "Bearer token"},
)
body = GetPostsResponse(
    next_page=result.next_page,
    posts=[convert_post_view(view) for view in result.posts],
)
status, headers, payload = render_response(Response(status_code=200, body=body))
```

## What it does not do

The package has no HTTP server and no command to start one. Nothing in it
parses or validates incoming Lemmy request bodies. Routes are not yet joined
to the `Piefed` client calls. To serve clients, you need to write that layer
yourself, using `Router`, the `Piefed` client, the converters and
`render_response`.