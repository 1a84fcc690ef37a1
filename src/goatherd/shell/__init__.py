"""Shell - bootstrap page resolution."""

from goatherd.shell.bootstrap import (
    AttributionListener,
    BootstrapResolver,
    build_landing_url,
    campaign_to_query,
    fetch_bootstrap,
    tracking_identifiers,
)

__all__ = [
    "AttributionListener",
    "BootstrapResolver",
    "build_landing_url",
    "campaign_to_query",
    "fetch_bootstrap",
    "tracking_identifiers",
]
