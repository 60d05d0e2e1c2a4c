from app.domains.catalog.services.uri_composer import UriComposer


def test_placeholder_host_is_replaced():
    composer = UriComposer("https://cdn.test/")
    assert (
        composer.compose_pic_uri("http://catalogbaseurltobereplaced/images/products/1.png")
        == "https://cdn.test/images/products/1.png"
    )


def test_relative_reference_is_joined_with_one_slash():
    composer = UriComposer("https://cdn.test")
    assert composer.compose_pic_uri("images/1.png") == "https://cdn.test/images/1.png"
    assert composer.compose_pic_uri("/images/1.png") == "https://cdn.test/images/1.png"


def test_absolute_reference_is_unchanged():
    composer = UriComposer("https://cdn.test")
    url = "https://other.example/pics/2.png"
    assert composer.compose_pic_uri(url) == url


def test_compose_is_idempotent():
    composer = UriComposer("https://cdn.test")
    once = composer.compose_pic_uri("images/1.png")
    assert composer.compose_pic_uri(once) == once


def test_empty_reference():
    composer = UriComposer("https://cdn.test")
    assert composer.compose_pic_uri(None) == ""
    assert composer.compose_pic_uri("") == ""
