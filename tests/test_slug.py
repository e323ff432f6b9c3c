import re

import pytest

from site_service.core.exceptions import InvalidInputError
from site_service.services.slug import SlugNormalizer

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")

SAMPLES = [
    "Hello World",
    "  Café Crème  ",
    "My___Site -- 2024!",
    "---Leading and trailing---",
    "ÀÉÎÕÜ ñ ç",
    "already-a-slug",
    "UPPER_snake_Case",
    "tabs\tand\nnewlines",
]


@pytest.fixture
def slugs() -> SlugNormalizer:
    return SlugNormalizer(clock=lambda: 1700000000000)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Hello World", "hello-world"),
        ("Test Site", "test-site"),
        ("  Café Crème  ", "cafe-creme"),
        ("My___Site -- 2024!", "my-site-2024"),
        ("---Leading and trailing---", "leading-and-trailing"),
        ("a - b", "a-b"),
        ("Ünïcödé", "unicode"),
    ],
)
def test_normalize(slugs, text, expected):
    assert slugs.normalize(text) == expected


@pytest.mark.parametrize("text", SAMPLES)
def test_normalize_output_shape(slugs, text):
    assert SLUG_PATTERN.match(slugs.normalize(text))


@pytest.mark.parametrize("text", SAMPLES)
def test_normalize_is_idempotent(slugs, text):
    once = slugs.normalize(text)
    assert slugs.normalize(once) == once


@pytest.mark.parametrize("text", ["!!!", "你好", "@#$%"])
def test_normalize_falls_back_to_timestamp(slugs, text):
    assert slugs.normalize(text) == "site-1700000000000"


@pytest.mark.parametrize("text", [None, "", "   "])
def test_normalize_rejects_blank(slugs, text):
    with pytest.raises(InvalidInputError, match="Slug cannot be null or blank"):
        slugs.normalize(text)


@pytest.mark.parametrize("text", [None, "", "\t"])
def test_generate_rejects_blank(slugs, text):
    with pytest.raises(InvalidInputError, match="Text cannot be null or blank"):
        slugs.generate(text)


def test_generate_from_name(slugs):
    assert slugs.generate("Maison Lumière") == "maison-lumiere"


def test_default_clock_is_wall_time():
    slug = SlugNormalizer().normalize("***")
    assert re.match(r"^site-\d{13}$", slug)
