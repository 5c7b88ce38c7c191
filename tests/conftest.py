"""Shared test fixtures for zt-hosts."""

import json
import shutil
from pathlib import Path
from unittest.mock import Mock

import pytest
import requests

from zt_hosts.config import Config
from zt_hosts.members.client import parse_members

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def members_payload():
    return json.loads((FIXTURES / "members.json").read_text())


@pytest.fixture
def records(members_payload):
    return parse_members(members_payload)


@pytest.fixture
def make_session():
    """Factory for a fake requests session returning a canned response."""
    def _make(payload=None, status=200, exc=None, json_exc=None):
        resp = Mock()
        resp.status_code = status
        if json_exc is not None:
            resp.json.side_effect = json_exc
        else:
            resp.json.return_value = payload
        if status >= 400:
            resp.raise_for_status.side_effect = requests.HTTPError(
                f"{status} Error", response=resp,
            )
        session = Mock()
        if exc is not None:
            session.get.side_effect = exc
        else:
            session.get.return_value = resp
        return session
    return _make


@pytest.fixture
def host_files(tmp_path):
    """Copies of a Linux and a Windows hosts file plus a Pi-hole list path."""
    linux = tmp_path / "hosts"
    windows = tmp_path / "windows-hosts"
    shutil.copy(FIXTURES / "hosts-linux", linux)
    shutil.copy(FIXTURES / "hosts-windows", windows)
    return {
        "linux": linux,
        "windows": windows,
        "pihole": tmp_path / "custom.list",
    }


@pytest.fixture
def config(host_files, tmp_path):
    return Config(
        api_key="0123456789abcdef0123456789abcdef",
        network="8056c2e21c000001",
        domain="zt.example.lan",
        linux_hostfile=str(host_files["linux"]),
        windows_hostfile=str(host_files["windows"]),
        pihole_custom_list=str(host_files["pihole"]),
        wsl_distroname="ubuntu.wsl",
        unit_dir=str(tmp_path / "systemd"),
    )
