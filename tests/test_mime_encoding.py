"""Tests for sitepack.assets.mime and sitepack.assets.encoding."""

import base64

from sitepack.assets.encoding import to_data_uri
from sitepack.assets.mime import DEFAULT_MIME, extension_of, kind_for, mime_for
from sitepack.assets.types import MimeKind


class TestMimeFor:
    def test_known_extensions(self) -> None:
        assert mime_for("/img/logo.svg") == "image/svg+xml"
        assert mime_for("/img/photo.jpg") == "image/jpeg"
        assert mime_for("/img/photo.jpeg") == "image/jpeg"
        assert mime_for("/fonts/a.woff2") == "font/woff2"
        assert mime_for("/fonts/a.eot") == "application/vnd.ms-fontobject"
        assert mime_for("/chunks/app.js") == "application/javascript"
        assert mime_for("/chunks/app.mjs") == "application/javascript"
        assert mime_for("/css/app.css") == "text/css"

    def test_extension_is_case_insensitive(self) -> None:
        assert mime_for("/IMG/LOGO.PNG") == "image/png"

    def test_unknown_extension_falls_back(self) -> None:
        assert mime_for("/data/blob.bin") == DEFAULT_MIME

    def test_no_extension_falls_back(self) -> None:
        assert mime_for("/LICENSE") == DEFAULT_MIME

    def test_dot_in_directory_is_not_an_extension(self) -> None:
        assert extension_of("/v1.2/LICENSE") == ""


class TestKindFor:
    def test_kinds(self) -> None:
        assert kind_for("/a.woff2") is MimeKind.FONT
        assert kind_for("/a.eot") is MimeKind.FONT
        assert kind_for("/a.webp") is MimeKind.IMAGE
        assert kind_for("/a.css") is MimeKind.STYLE
        assert kind_for("/a.js") is MimeKind.SCRIPT
        assert kind_for("/a.bin") is MimeKind.BINARY


class TestToDataUri:
    def test_bytes_payload(self) -> None:
        assert to_data_uri(b"\x00\x01", "/img/a.png") == "data:image/png;base64,AAE="

    def test_text_payload_is_utf8(self) -> None:
        uri = to_data_uri("a{content:'é'}", "/css/app.css")
        prefix = "data:text/css;base64,"
        assert uri.startswith(prefix)
        assert base64.b64decode(uri[len(prefix) :]).decode("utf-8") == "a{content:'é'}"

    def test_unknown_type(self) -> None:
        assert to_data_uri(b"x", "/blob").startswith("data:application/octet-stream;base64,")
