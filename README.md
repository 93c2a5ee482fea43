# chaosworkshop

The core of an HTTP backend for a mod workshop. It stores submissions, users
and login tokens in SQLite databases. It builds a zstd-compressed JSON listing
of all submissions, together with its SHA-256 hash. It can post embed
messages to a Discord-style webhook. A threaded HTTP server routes GET and
POST requests to registered handler functions.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Data layout

Files are resolved relative to the directory in the `DATA_ROOT` environment
variable. When it is unset, they are resolved relative to the working
directory.

- `data/options.json` holds the server configuration. It is required.
- `data/submissions.db`, `data/users.db` and `data/tokens.db` are the SQLite
  databases. Each one is created, with its table, when it is opened.
- `data/users/<id>/user.json` holds per-user attributes.
- `data/submissions/<id>/changelog.json` holds a submission's changelog.
- `cert.pem` and `key.pem` are needed when `use_tls` is enabled.

A minimal `data/options.json`:

```json
{
    "domain": "workshop.example.com",
    "port": 8080,
    "use_tls": false,
    "connection_timeout": 10,
    "webhook_url": "",
    "requestor_substitute_header": "",
    "user": {
        "min_name_length": 3,
        "max_name_length": 24,
        "max_password_length": 64,
        "max_submissions": 10,
        "max_active_tokens": 5,
        "time_between_registrations": 60
    },
    "submission": {
        "max_name_length": 48,
        "max_version_length": 16,
        "max_description_length": 512,
        "max_description_newlines": 8,
        "max_changelog_length": 512,
        "max_changelog_newlines": 8,
        "max_total_size": 10485760,
        "max_file_count": 100,
        "max_file_name_length": 128,
        "unpack_timeout": 10
    }
}
```

Every option must be present. Numbers must be non-negative integers, the
port must be at most 65535, and `use_tls` must be a boolean.
`chaosworkshop.options.load_options` raises `OptionsError` otherwise.

## Running

```
DATA_ROOT=/srv/workshop chaosworkshop
```

The command reads the options and listens on the configured port on all
interfaces. If `use_tls` is on, it serves over TLS with `cert.pem` and
`key.pem`. It logs each request with a timestamp, the method and path, the
client address, the headers, the parsed arguments, the query string and the
body. Arguments come from the query string and from urlencoded or multipart
form bodies. A request to a path with no registered handler gets a 404
response. A handler that raises an exception gets a 500 response.

If the options file is missing or incomplete, or if TLS is on and the
certificate or key file is missing, the command prints an error and exits
with status 1. Ctrl-C stops the server.

## Library use

```python
from chaosworkshop.endpoint import EndpointRegistry, Response
from chaosworkshop.json_response import formulate_success
from chaosworkshop.server import Request, dispatch
from chaosworkshop.submission import is_valid_submission_id

registry = EndpointRegistry()

@registry.get("/ping")
def ping(request):
    return Response(body=formulate_success().dumps(), content_type="application/json")

dispatch(registry, Request(method="GET", path="/ping")).body  # '{"success":true}'
is_valid_submission_id("abcdef0123456789")  # True
```

To serve a registry, pass it to `chaosworkshop.server.create_server` along
with `Options`. The command serves the shared registry
`chaosworkshop.endpoint.registry`.

The other building blocks:

- `chaosworkshop.cache.SubmissionsCache` builds the compressed listing from
  the submissions table, keeps it until `invalidate()` is called, and returns
  it as `CompressedSubmissions` with its `sha256`.
- `chaosworkshop.token.TokenStore` and `chaosworkshop.user.UserStore` look up
  and change tokens, users and user attribute files. The module-level
  `open_database` functions open the matching databases.
- `chaosworkshop.submission` checks submission ids and reads and writes
  changelog files.
- `chaosworkshop.webhook.send(url, options)` posts a `WebhookOptions` embed
  to a URL. An empty URL disables it.
- `chaosworkshop.html_template.render_html_file` reads an HTML file and
  replaces `$$domain$$` and any other placeholders you give it.
- `chaosworkshop.util` provides trimming, splitting, SHA-256 and SHA-512 hex
  digests, and 16-character random ids.

## What it does not do

No workshop endpoints are registered. The command serves the empty default
registry, so every request gets a 404 until handlers are added. The package
does not provide any of these:

- handlers for uploading, updating, removing or fetching submissions;
- user registration or login;
- unpacking or validating uploaded zip archives.

The `requestor_substitute_header` option is read but not used by the server.