# xaio

Tools for working with the x.com web client:

- **GraphQL operation discovery** (`xaio.operations`): fetches the x.com home
  page, finds the preloaded main client script and lists every GraphQL
  operation it declares, with the query ID, operation name, type, feature
  switches and field toggles.
- **Client transaction IDs** (`xaio.transaction`): derives the animation key
  from the home page and its on-demand script, then produces
  `x-client-transaction-id` values for requests.
- **A small request client** (`xaio.request_client`) that sends the same
  headers, user agent and cookies with every request.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Listing GraphQL operations

From the command line:

```
xaio-operations
```

The same command can be started with `python -m xaio.cli`. Each line shows
one operation:

```
Name: UserByScreenName                    | Type: query   | QueryID: ...
```

If the page or script cannot be fetched, or the main script is not found on
the home page, the error is printed to standard error and the command exits
with status 1.

From Python:

```python
from xaio.operations import get_operations

for op in get_operations():
    print(op.operation_name, op.operation_type, op.query_id)
    print("  features:", op.feature_switches)
    print("  toggles:", op.field_toggles)
```

Each result is an `Operation` dataclass. `get_operations()` is built from
smaller steps that can be used on their own:

- `get_main_page()` downloads the home page.
- `get_main_script_href(html)` returns the address of the preloaded
  `main.*.js` script, raising `ValueError("main script not found")` if there
  is none.
- `get_main_script(html)` downloads that script.
- `parse_operations(script)` parses script text with no network access.
- `parse_metadata(meta)`, `split_list(s)` and `extract_balanced_braces(data)`
  read an operation's metadata block.

Downloads go through `xaio.fetch.get_page_content(url, timeout=10.0)`, which
sends a desktop browser user agent and returns the body as text whatever the
status code.

## Generating transaction IDs

```python
import requests
from xaio.transaction import ClientTransaction

session = requests.Session()
transaction = ClientTransaction.from_session(session)
tid = transaction.generate_transaction_id("GET", "/i/api/graphql/abc/UserByScreenName")
```

`from_session` loads the home page through `xaio.migration.handle_x_migration`,
which follows the x.com migration meta refresh or migration form when one is
served. It then reads the verification key from the
`twitter-site-verification` meta tag, the row and key byte indices from the
on-demand script, and the loading animation frames, and raises `ValueError`
when any of them is missing.

Every call to `generate_transaction_id` uses the current time and a fresh
random byte, so two calls give different IDs.

The helpers behind the animation key live in `xaio.cubic` (`Cubic`,
`bezier`), `xaio.interpolate` (`interpolate`, `interpolate_num`),
`xaio.rotation` (`rotation_to_matrix`, `rotation_to_transform_matrix`) and
`xaio.jsmath` (`js_round`, `is_odd`, `js_float_to_hex`, which reproduce
JavaScript number behaviour).

## Request client

```python
from xaio.request_client import RequestClient

client = RequestClient("my-agent/1.0", {"Accept": "application/json"}, {"session": "placeholder"})
response = client.make_request("GET", "https://x.com")
print(response.status, len(response.payload))
```

Header names are case-insensitive; a non-empty user agent replaces any
`User-Agent` header given. Requests time out after 10 seconds and carry no
body. The result is a frozen `Response` with `payload` (the body as text) and
`status`.

## What this package does not do

It does not log in, call the GraphQL API or send the transaction IDs it
produces; it only discovers the operations and computes the header values.
The request client cannot send a request body.