"""Tests for hosts-line rendering."""

from zt_hosts.hostsfile.render import (
    format_member_table,
    render_fqdn_lines,
    render_host_lines,
    renderable,
)
from zt_hosts.members.client import MemberRecord, parse_members


class TestRenderable:
    def test_drops_null_ip_and_null_name(self, records):
        names = [r.name for r in renderable(records)]
        assert names == ["nas", "laptop", "DESKTOP-W10"]

    def test_exclusion_is_case_insensitive(self, records):
        names = [r.name for r in renderable(records, exclude=["desktop-w10", None])]
        assert "DESKTOP-W10" not in names
        assert "nas" in names


class TestHostLines:
    def test_bare_format_sorted(self, records):
        assert render_host_lines(records) == [
            "10.147.17.20  nas  #ZeroTier",
            "10.147.17.30  DESKTOP-W10  #ZeroTier",
            "10.147.17.5  laptop  #ZeroTier",
        ]

    def test_excludes_local_hostname(self, records):
        lines = render_host_lines(records, exclude=["nas"])
        assert not any(" nas " in line for line in lines)
        assert len(lines) == 2

    def test_custom_tag(self):
        recs = [MemberRecord("a", "1", "10.0.0.1")]
        assert render_host_lines(recs, tag="ZT") == ["10.0.0.1  a  #ZT"]

    def test_empty(self):
        assert render_host_lines([]) == []


class TestFqdnLines:
    def test_filter_list_example(self):
        recs = parse_members([
            {"name": "alice", "config": {"id": "1", "ipAssignments": ["10.0.0.2"]}},
            {"name": "bob", "config": {"id": "2", "ipAssignments": []}},
        ])
        assert render_fqdn_lines(recs, "example.lan") == [
            "10.0.0.2  alice.example.lan  alice  #ZeroTier",
        ]

    def test_domain_dots_trimmed(self):
        recs = [MemberRecord("a", "1", "10.0.0.1")]
        assert render_fqdn_lines(recs, ".lan.") == ["10.0.0.1  a.lan  a  #ZeroTier"]

    def test_no_domain_degrades_to_bare(self):
        recs = [MemberRecord("a", "1", "10.0.0.1")]
        assert render_fqdn_lines(recs, "") == render_host_lines(recs)

    def test_sort_is_case_sensitive(self):
        recs = [
            MemberRecord("b", "1", "10.0.0.1"),
            MemberRecord("B", "2", "10.0.0.1"),
        ]
        lines = render_fqdn_lines(recs, "lan")
        assert lines == ["10.0.0.1  B.lan  B  #ZeroTier", "10.0.0.1  b.lan  b  #ZeroTier"]


class TestMemberTable:
    def test_aligned_and_lists_nulls(self, records):
        table = format_member_table(records).splitlines()
        assert len(table) == 5
        assert table[0].startswith("DESKTOP-W10  c3d4e5f6a7  10.147.17.30")
        assert any(line.startswith("phone") and line.endswith("null") for line in table)
        assert any(line.startswith("null ") for line in table)
        # id column starts at the same offset on every row
        offsets = {line.index(rec_id) for line, rec_id in zip(
            sorted(table), ["c3d4e5f6a7", "b2c3d4e5f6", "a1b2c3d4e5", "e5f6a7b8c9", "d4e5f6a7b8"],
        )}
        assert len(offsets) == 1

    def test_empty(self):
        assert format_member_table([]) == ""
