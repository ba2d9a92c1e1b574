import asyncio

import pytest

from inkmcp.catalog.store import Catalog
from inkmcp.config import PACKAGE_DATA_DIR
from inkmcp.models import InkEntry, InkMetadata
from inkmcp.servers import ink as ink_server


def make_ink(ink_id, color, name=None):
    return InkEntry(id=ink_id, display_name=name or ink_id, color=color)


@pytest.fixture
def primary_inks():
    return [
        make_ink("red", (255, 0, 0)),
        make_ink("green", (0, 255, 0)),
        make_ink("blue", (0, 0, 255)),
        make_ink("yellow", (255, 255, 0)),
        make_ink("magenta", (255, 0, 255)),
    ]


@pytest.fixture
def packaged_catalog():
    return Catalog.from_directory(PACKAGE_DATA_DIR)


@pytest.fixture
def small_catalog():
    inks = [
        make_ink("a", (255, 0, 0), "Alpha Red"),
        make_ink("b", (0, 0, 255), "Beta Blue"),
        make_ink("a", (0, 255, 0), "Shadowed Duplicate"),
        make_ink("c", (10, 10, 10), "Gamma Black"),
    ]
    metadata = [
        InkMetadata(id="a", maker="Acme", short_name="Red", full_name="Alpha Red", scan_date="2023-01-01"),
        InkMetadata(id="b", maker="ACME", short_name="Blue", full_name="Beta Blue", scan_date="2023-01-02"),
        InkMetadata(id="orphan", maker="Acme", short_name="Ghost", full_name="Acme Ghost", scan_date="2023-01-03"),
    ]
    return Catalog(inks, metadata, site_url="https://example.test/")


@pytest.fixture
def served_catalog(packaged_catalog):
    ink_server.set_catalog(packaged_catalog)
    yield packaged_catalog
    ink_server.set_catalog(None)


@pytest.fixture
def call_tool(served_catalog):
    """Call an MCP tool in-memory and return its structured result"""
    from fastmcp import Client

    async def _call(name, arguments):
        async with Client(ink_server.mcp) as client:
            result = await client.call_tool(name, arguments)
            return result.structured_content

    def _run(name, **arguments):
        return asyncio.run(_call(name, arguments))

    return _run
