import logging

from tinystitch.app.services import merge_headers
from tinystitch.spec import TinyHeader


def test_header_of_a_wins(caplog):
    header_a = TinyHeader(namespaces=["intermediary", "named"], properties={"sorted": None})
    header_b = TinyHeader(
        namespaces=["official", "intermediary"],
        minor_version=1,
        properties={"sorted": None, "author": "someone"},
    )

    with caplog.at_level(logging.DEBUG, logger="tinystitch.app.services.headers"):
        merged = merge_headers(header_a, header_b, ["intermediary", "named", "official"])

    assert merged == TinyHeader(
        namespaces=["intermediary", "named", "official"], properties={"sorted": None}
    )
    assert merged.properties is not header_a.properties
    assert "author" in caplog.text
    assert "2.0" in caplog.text
