"""Tests for image payload parsing."""

import pytest

from reimagine.domain.errors import InvalidImageError
from reimagine.domain.images import ImagePayload, detect_mime_type
from tests.fakes import PHOTO_B


def test_from_data_url_splits_mime_and_bytes() -> None:
    payload = ImagePayload.from_data_url(PHOTO_B)

    assert payload.mime_type == "image/png"
    assert payload.data.startswith(b"\x89PNG\r\n\x1a\n")
    assert payload.to_data_url() == PHOTO_B


def test_from_data_url_ignores_mime_parameters() -> None:
    payload = ImagePayload.from_data_url("data:image/jpeg;name=me.jpg;base64,AAAA")

    assert payload.mime_type == "image/jpeg"
    assert payload.extension == "jpg"


@pytest.mark.parametrize(
    "value",
    [
        "plain text",
        "data:image/png,rawbytes",
        "data:;base64,AAAA",
        "data:image/png;base64,***",
        "data:image/png;base64,",
    ],
)
def test_from_data_url_rejects_malformed_values(value: str) -> None:
    with pytest.raises(InvalidImageError):
        ImagePayload.from_data_url(value)


def test_from_bytes_sniffs_webp_and_defaults_to_jpeg() -> None:
    webp = b"RIFF\x00\x00\x00\x00WEBPVP8 "

    assert ImagePayload.from_bytes(webp).mime_type == "image/webp"
    assert detect_mime_type(b"unknown") == "image/jpeg"
    assert detect_mime_type(b"GIF89a....") == "image/gif"
