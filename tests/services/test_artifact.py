from xdenv.constants import XD_ADMIN_HOST, XD_CONTAINERS, XD_HTTP_PORT, XD_JMX_PORT
from xdenv.services.artifact import ArtifactService


class DummyLogger:
    def debug(self, *_args, **_kwargs):
        return None


def _write_artifact(tmp_path, *lines):
    artifact = tmp_path / "ec2servers.csv"
    artifact.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return artifact


def test_artifact_service_reads_admin_and_containers(tmp_path):
    artifact = _write_artifact(
        tmp_path,
        "adminNode,10.0.0.1,9393,9000,15005",
        "containerNode,10.0.0.2,9393,9000,15005",
        "containerNode,10.0.0.3,9393,9000,15005",
    )

    props = ArtifactService(logger=DummyLogger()).parse(str(artifact))

    assert props[XD_ADMIN_HOST] == "http://10.0.0.1:9393"
    assert props[XD_CONTAINERS] == "http://10.0.0.2:9393,http://10.0.0.3:9393"
    assert props[XD_HTTP_PORT] == "9000"
    assert props[XD_JMX_PORT] == "15005"


def test_artifact_service_single_node_is_admin_and_only_container(tmp_path):
    artifact = _write_artifact(tmp_path, "singleNode,localhost,9393,9000,15005")

    props = ArtifactService(logger=DummyLogger()).parse(str(artifact))

    assert props[XD_ADMIN_HOST] == "http://localhost:9393"
    assert props[XD_CONTAINERS] == "http://localhost:9393"


def test_artifact_service_single_node_replaces_earlier_containers(tmp_path):
    artifact = _write_artifact(
        tmp_path,
        "containerNode,10.0.0.2,9393,9000,15005",
        "singleNode,10.0.0.9,9393,9000,15005",
    )

    props = ArtifactService(logger=DummyLogger()).parse(str(artifact))

    assert props[XD_CONTAINERS] == "http://10.0.0.9:9393"


def test_artifact_service_skips_short_lines_and_trims_hosts(tmp_path):
    artifact = _write_artifact(
        tmp_path,
        "adminNode,10.0.0.1",
        "",
        "adminNode, 10.0.0.5 ,9393,9000",
        "containerNode, 10.0.0.2 ,9393,9000,15005",
    )

    props = ArtifactService(logger=DummyLogger()).parse(str(artifact))

    assert props[XD_ADMIN_HOST] == "http://10.0.0.5:9393"
    assert props[XD_CONTAINERS] == "http://10.0.0.2:9393"
    assert XD_JMX_PORT not in props


def test_artifact_service_last_admin_line_wins(tmp_path):
    artifact = _write_artifact(
        tmp_path,
        "adminNode,10.0.0.1,9393,9000,15005",
        "adminNode,10.0.0.7,9494,9100,15006",
    )

    props = ArtifactService(logger=DummyLogger()).parse(str(artifact))

    assert props[XD_ADMIN_HOST] == "http://10.0.0.7:9494"
    assert props[XD_HTTP_PORT] == "9100"
    assert props[XD_JMX_PORT] == "15006"
    assert XD_CONTAINERS not in props


def test_artifact_service_returns_empty_mapping_for_missing_file(tmp_path):
    props = ArtifactService(logger=DummyLogger()).parse(str(tmp_path / "missing.csv"))

    assert props == {}


def test_artifact_service_ignores_undecodable_file(tmp_path):
    artifact = tmp_path / "ec2servers.csv"
    artifact.write_bytes(b"\xff\xfe\xfa adminNode")

    props = ArtifactService(logger=DummyLogger()).parse(str(artifact))

    assert props == {}


def test_artifact_service_stray_quote_only_affects_its_own_line(tmp_path):
    artifact = _write_artifact(
        tmp_path,
        'adminNode,"10.0.0.1,9393,9000,15005',
        "singleNode,10.0.0.4,9393,9000,15005",
    )

    props = ArtifactService(logger=DummyLogger()).parse(str(artifact))

    assert props[XD_ADMIN_HOST] == "http://10.0.0.4:9393"
    assert props[XD_CONTAINERS] == "http://10.0.0.4:9393"
