"""Tests for override merging."""
from compose_yml.config.merge import merge_override
from compose_yml.interpolation import raw, value
from compose_yml.models import File, Logging, Parsed, Service, Volume


class TestPrimitives:
    def test_scalars_take_the_override(self):
        assert merge_override(1, 2) == 2
        assert merge_override("a", "b") == "b"
        assert merge_override(True, False) is False

    def test_missing_sides(self):
        assert merge_override(None, 2) == 2
        assert merge_override(1, None) == 1
        assert merge_override(None, None) is None

    def test_lists_concatenate(self):
        assert merge_override([1, 2], [3]) == [1, 2, 3]

    def test_self_merge_duplicates_list_entries(self):
        assert merge_override([1], [1]) == [1, 1]
        assert merge_override(5, 5) == 5

    def test_dicts_merge_recursively(self):
        base = {"a": 1, "b": {"x": [1]}}
        ovr = {"b": {"x": [2]}, "c": 3}
        assert merge_override(base, ovr) == {"a": 1, "b": {"x": [1, 2]}, "c": 3}

    def test_inputs_are_not_mutated(self):
        base = {"a": [1]}
        ovr = {"a": [2]}
        merged = merge_override(base, ovr)
        merged["a"].append(3)
        assert base == {"a": [1]}
        assert ovr == {"a": [2]}

    def test_raw_or_is_opaque(self):
        assert merge_override(raw(str, "$A"), value("b")) == value("b")
        assert merge_override(value("b"), raw(str, "$A")) == raw(str, "$A")


class TestServices:
    def test_field_by_field(self):
        base = Service.from_node({
            "image": "app:1",
            "ports": ["80:80"],
            "environment": {"A": "1", "B": "1"},
            "command": ["run", "--fast"],
        })
        ovr = Service.from_node({
            "image": "app:2",
            "ports": ["443:443"],
            "environment": {"B": "2"},
            "command": ["debug"],
        })
        merged = base.merge_override(ovr)
        assert merged.to_node() == {
            "command": ["debug"],
            "environment": {"A": "1", "B": "2"},
            "image": "app:2",
            "ports": ["80:80", "443:443"],
        }
        assert isinstance(merged.command, Parsed)

    def test_missing_override_fields_keep_base(self):
        base = Service.from_node({"image": "app:1", "restart": "always"})
        merged = base.merge_override(Service.from_node({"tty": True}))
        assert merged.to_node() == {"image": "app:1", "restart": "always", "tty": True}

    def test_self_merge_keeps_scalars(self):
        service = Service.from_node({"image": "app:1", "hostname": "web"})
        assert service.merge_override(service) == service


class TestLoggingAndVolumes:
    def test_same_driver_merges_options(self):
        base = Logging.from_node({"driver": "d1", "options": {"opt1": "v1"}})
        ovr = Logging.from_node({"driver": "d1", "options": {"opt2": "v2"}})
        merged = base.merge_override(ovr)
        assert merged.to_node() == {"driver": "d1", "options": {"opt1": "v1", "opt2": "v2"}}

    def test_new_driver_replaces_options(self):
        base = Logging.from_node({"driver": "d1", "options": {"opt1": "v1"}})
        ovr = Logging.from_node({"driver": "d2", "options": {"opt2": "v2"}})
        merged = base.merge_override(ovr)
        assert merged.to_node() == {"driver": "d2", "options": {"opt2": "v2"}}

    def test_override_without_driver_merges_options(self):
        base = Logging.from_node({"driver": "d1", "options": {"opt1": "v1"}})
        ovr = Logging.from_node({"options": {"opt2": "v2"}})
        assert base.merge_override(ovr).to_node() == {
            "driver": "d1",
            "options": {"opt1": "v1", "opt2": "v2"},
        }

    def test_volume_driver_change_merges_driver_opts(self):
        base = Volume.from_node({"driver": "local", "driver_opts": {"type": "nfs"}, "labels": {"a": "1"}})
        ovr = Volume.from_node({"driver": "rexray", "driver_opts": {"size": "10"}})
        assert base.merge_override(ovr).to_node() == {
            "driver": "rexray",
            "driver_opts": {"type": "nfs", "size": "10"},
            "labels": {"a": "1"},
        }


def test_file_merge():
    base = File.parse("""\
version: "2"
services:
  web:
    image: app:1
    ports: ["80:80"]
volumes:
  data:
""")
    ovr = File.parse("""\
version: "2.1"
services:
  web:
    image: app:2
  worker:
    image: app:2
networks:
  front:
""")
    merged = base.merge_override(ovr)
    assert merged.version == "2.1"
    assert sorted(merged.services) == ["web", "worker"]
    assert merged.services["web"].to_node() == {"image": "app:2", "ports": ["80:80"]}
    assert sorted(merged.volumes) == ["data"]
    assert sorted(merged.networks) == ["front"]
    assert str(base.services["web"].image) == "app:1"
