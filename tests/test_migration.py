from urllib.parse import parse_qs, urlsplit

import requests
import responses

from xaio.migration import handle_x_migration

HOME = "https://x.com"
MIGRATE = "https://x.com/x/migrate"


def test_plain_home_page_is_returned():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, HOME, body="<html><title>home</title></html>")
        soup = handle_x_migration(requests.Session())
    assert soup.title.string == "home"


def test_meta_refresh_is_followed():
    page = (
        '<html><head><meta http-equiv="refresh" '
        'content="0; url=https://x.com/x/migrate?tok=abc123"></head></html>'
    )
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, HOME, body=page)
        rsps.add(responses.GET, MIGRATE, body="<html><title>migrated</title></html>")
        soup = handle_x_migration(requests.Session())
        followed = rsps.calls[1].request.url
    assert soup.title.string == "migrated"
    assert parse_qs(urlsplit(followed).query) == {"tok": ["abc123"]}


def test_meta_refresh_to_other_site_is_ignored():
    page = (
        '<html><head><title>home</title><meta http-equiv="refresh" '
        'content="0; url=https://example.com/elsewhere"></head></html>'
    )
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, HOME, body=page)
        soup = handle_x_migration(requests.Session())
        assert len(rsps.calls) == 1
    assert soup.title.string == "home"


def test_form_is_posted_by_default():
    page = (
        '<html><body><form name="f" action="https://x.com/x/migrate">'
        '<input name="tok" value="placeholder"><input name="nameonly">'
        "</form></body></html>"
    )
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, HOME, body=page)
        rsps.add(responses.POST, MIGRATE, body="<html><title>posted</title></html>")
        soup = handle_x_migration(requests.Session())
        body = rsps.calls[1].request.body
    assert soup.title.string == "posted"
    assert parse_qs(body) == {"tok": ["placeholder"]}


def test_form_without_action_posts_to_default_address():
    page = '<html><body><form name="f"><input name="a" value="1"></form></body></html>'
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, HOME, body=page)
        rsps.add(responses.POST, MIGRATE, body="<html><title>done</title></html>")
        soup = handle_x_migration(requests.Session())
        assert rsps.calls[1].request.method == "POST"
    assert soup.title.string == "done"


def test_form_with_get_method_sends_sorted_query():
    page = (
        '<html><body><form action="https://x.com/x/migrate" method=" get ">'
        '<input name="b" value="2"><input name="a" value="1"></form></body></html>'
    )
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, HOME, body=page)
        rsps.add(responses.GET, MIGRATE, body="<html><title>got</title></html>")
        soup = handle_x_migration(requests.Session())
        url = rsps.calls[1].request.url
    assert soup.title.string == "got"
    assert urlsplit(url).query == "a=1&b=2"