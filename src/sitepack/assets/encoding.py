"""Data URI encoding."""

import base64

from sitepack.assets.mime import mime_for


def to_data_uri(payload: bytes | str, path: str) -> str:
    """Encode *payload* as ``data:<mime>;base64,<payload>``.

    Text payloads are UTF-8 encoded first. The mime type comes from the
    extension of *path*.
    """
    data = payload.encode("utf-8") if isinstance(payload, str) else bytes(payload)
    return f"data:{mime_for(path)};base64,{base64.b64encode(data).decode('ascii')}"
