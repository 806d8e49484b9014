import logging
from typing import Sequence

from tinystitch.spec import TinyHeader

log = logging.getLogger(__name__)


def merge_headers(
    header_a: TinyHeader, header_b: TinyHeader, namespaces: Sequence[str]
) -> TinyHeader:
    # A's version and properties win; B's are not reconciled.
    if (header_a.major_version, header_a.minor_version) != (
        header_b.major_version,
        header_b.minor_version,
    ):
        log.debug(
            f"Keeping version {header_a.major_version}.{header_a.minor_version} "
            f"of A over {header_b.major_version}.{header_b.minor_version} of B"
        )
    dropped = {
        key: value
        for key, value in header_b.properties.items()
        if header_a.properties.get(key, object()) != value
    }
    if dropped:
        log.debug(f"Ignoring properties of B that differ from A: {dropped}")

    return TinyHeader(
        namespaces=list(namespaces),
        major_version=header_a.major_version,
        minor_version=header_a.minor_version,
        properties=dict(header_a.properties),
    )
