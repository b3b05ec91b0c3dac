import pytest

from sitewalk.domain.base_url import BaseUrl
from sitewalk.services.url_resolver import UrlResolver


@pytest.fixture
def resolver():
    return UrlResolver(BaseUrl.parse("http://example.com/"))


def test_root_relative_href_inherits_scheme_and_host(resolver):
    assert resolver.resolve("/about") == "http://example.com/about"


def test_absolute_same_host_href_is_kept(resolver):
    assert resolver.resolve("http://example.com/a?x=1") == "http://example.com/a?x=1"


def test_cross_domain_href_is_rejected(resolver):
    assert resolver.resolve("http://other.com/x") is None


def test_subdomain_is_accepted(resolver):
    assert resolver.resolve("http://sub.example.com/x") == "http://sub.example.com/x"
    assert resolver.resolve("https://a.b.example.com/") == "https://a.b.example.com/"


def test_suffix_match_requires_dot_boundary(resolver):
    assert resolver.resolve("http://notexample.com/x") is None


def test_parent_domain_is_rejected():
    resolver = UrlResolver(BaseUrl.parse("http://sub.example.com"))
    assert resolver.resolve("http://example.com/") is None


@pytest.mark.parametrize("href", ["http://[bad", "http://example.com:notaport/"])
def test_malformed_href_is_absent(resolver, href):
    assert resolver.resolve(href) is None


def test_scheme_relative_href_inherits_scheme():
    resolver = UrlResolver(BaseUrl.parse("https://example.com/"))
    assert resolver.resolve("//cdn.example.com/lib.js") == "https://cdn.example.com/lib.js"


def test_path_relative_href_resolves_against_root(resolver):
    assert resolver.resolve("images/x.png") == "http://example.com/images/x.png"


def test_fragment_is_preserved(resolver):
    assert resolver.resolve("/page#section") == "http://example.com/page#section"
    assert resolver.resolve("#top") == "http://example.com#top"


def test_port_is_part_of_the_host():
    resolver = UrlResolver(BaseUrl.parse("http://localhost:8080/"))
    assert resolver.resolve("/x") == "http://localhost:8080/x"
    assert resolver.resolve("http://localhost:9090/x") is None


def test_is_same_domain(resolver):
    assert resolver.is_same_domain("example.com")
    assert resolver.is_same_domain("www.example.com")
    assert not resolver.is_same_domain("badexample.com")


@pytest.mark.parametrize("href", [
    "mailto:a@example.com",
    "http:foo",
    "javascript:void(0)",
    "tel:+123?x=1#y",
])
def test_scheme_without_host_keeps_opaque_form(resolver, href):
    assert resolver.resolve(href) == href


def test_scheme_with_absolute_path_but_no_host_gets_base_host(resolver):
    assert resolver.resolve("http:/docs") == "http://example.com/docs"
    assert resolver.resolve("https:") == "https://example.com"
