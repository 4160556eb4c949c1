import pytest

from xdenv.constants import XD_ADMIN_HOST, XD_CONTAINERS
from xdenv.errors import ConfigurationError
from xdenv.services.urls import UrlService


class RecordingLogger:
    def __init__(self):
        self.errors = []

    def error(self, message, *args, **_kwargs):
        self.errors.append(message % args)


def test_build_container_list_skips_malformed_entries():
    logger = RecordingLogger()
    service = UrlService(logger=logger)

    containers = service.build_container_list(
        {XD_CONTAINERS: "http://10.0.0.2:9393,not a url,http://10.0.0.3:9393"}
    )

    assert containers == ("http://10.0.0.2:9393", "http://10.0.0.3:9393")
    assert logger.errors == ["Container host is invalid ==> not a url"]


def test_build_container_list_removes_duplicates_and_blanks():
    service = UrlService(logger=RecordingLogger())

    containers = service.build_container_list(
        {XD_CONTAINERS: "http://10.0.0.2:9393, http://10.0.0.2:9393,,http://10.0.0.3:9393"}
    )

    assert containers == ("http://10.0.0.2:9393", "http://10.0.0.3:9393")


def test_build_container_list_reads_host_port_entries_as_http():
    logger = RecordingLogger()
    service = UrlService(logger=logger)

    containers = service.build_container_list(
        {XD_CONTAINERS: "10.0.0.2:9393, 10.0.0.3:9393,http://10.0.0.2:9393"}
    )

    assert containers == ("http://10.0.0.2:9393", "http://10.0.0.3:9393")
    assert logger.errors == []


def test_build_container_list_fails_when_every_entry_is_malformed():
    logger = RecordingLogger()
    service = UrlService(logger=logger)

    with pytest.raises(ConfigurationError, match="container hosts"):
        service.build_container_list({XD_CONTAINERS: "not a url,ftp://10.0.0.2:21"})

    assert len(logger.errors) == 2


def test_parse_admin_server_accepts_host_port():
    service = UrlService(logger=RecordingLogger())

    assert service.parse_admin_server({XD_ADMIN_HOST: "localhost:9393"}) == "http://localhost:9393"


def test_parse_admin_server_rejects_invalid_url():
    service = UrlService(logger=RecordingLogger())

    with pytest.raises(ConfigurationError, match="Admin server host is not a valid URL"):
        service.parse_admin_server({XD_ADMIN_HOST: "http://localhost:port"})


@pytest.mark.parametrize(
    "location, expected",
    [
        ("http://localhost:9393", True),
        ("https://xd.example.com", True),
        ("ftp://localhost:21", False),
        ("http://not a url", False),
        ("http://", False),
    ],
)
def test_is_url(location, expected):
    assert UrlService(logger=RecordingLogger()).is_url(location) is expected


@pytest.mark.parametrize(
    "location, expected",
    [
        ("localhost:9393", "http://localhost:9393"),
        (" https://xd.example.com ", "https://xd.example.com"),
        ("", ""),
    ],
)
def test_normalize(location, expected):
    assert UrlService(logger=RecordingLogger()).normalize(location) == expected
