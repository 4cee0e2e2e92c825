from compdeps.parsers.known_headers import KnownHeaders


def test_standard_and_configured_headers() -> None:
    known = KnownHeaders(extra=["gtest/gtest.h"], prefixes=["Qt"])

    assert "vector" in known
    assert "stdint.h" in known
    assert "sys/anything.h" in known
    assert "boost/filesystem.hpp" in known
    assert "gtest/gtest.h" in known
    assert "QtCore/QString" in known
    assert "project/header.h" not in known
    assert 42 not in known
