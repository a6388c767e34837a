"""Test utilities for sitepack bundles.

Provides a simulated browsing context for the navigation runtime and
document assertions::

    from sitepack.testing import SimulatedBrowser, assert_no_external_refs
"""

from sitepack.testing.assertions import (
    assert_no_external_refs,
    assert_routes_embedded,
    decoded_text_payloads,
)
from sitepack.testing.browser import Render, SimulatedBrowser

__all__ = [
    "Render",
    "SimulatedBrowser",
    "assert_no_external_refs",
    "assert_routes_embedded",
    "decoded_text_payloads",
]
