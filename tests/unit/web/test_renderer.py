"""Unit tests for the Jinja2 page renderer."""

import pytest

from kvshortener.web.renderer import render


def test_layout_wraps_content():
    html = render('index.html', base_url='https://sho.rt')

    assert html.startswith('<!DOCTYPE html>')
    assert '<title>URL Shortener</title>' in html
    assert '<a href="https://sho.rt/">URL Shortener</a>' in html
    assert 'action="https://sho.rt/create"' in html
    assert 'name="url"' in html


def test_custom_title():
    assert '<title>Created</title>' in render('created.html', title='Created', base_url='', short_url='https://sho.rt/abc123')


def test_created_page_shows_short_url():
    html = render('created.html', base_url='https://sho.rt', short_url='https://sho.rt/abc123')

    assert 'Created!' in html
    assert 'value="https://sho.rt/abc123"' in html
    assert 'readonly' in html


def test_error_page_links_home():
    html = render('error.html', base_url='https://sho.rt')

    assert 'Error!' in html
    assert 'Back to top' in html


def test_context_is_escaped():
    html = render('created.html', base_url='', short_url='"><script>alert(1)</script>')

    assert '<script>alert(1)</script>' not in html
    assert '&lt;script&gt;' in html


@pytest.mark.parametrize('template', ['index.html', 'created.html', 'error.html', 'not_found.html'])
def test_every_page_renders(template):
    assert '</html>' in render(template, base_url='https://sho.rt', short_url='https://sho.rt/abc123')
