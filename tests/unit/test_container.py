"""Tests for the DI container."""

import asyncio

from app.container import Container, container
from cdn_client import CdnClient


class TestContainer:
    def test_singleton(self):
        assert Container() is container

    def test_one_cache_shared(self, conn, storage):
        container.init(conn=conn, storage=storage, cdn_client=CdnClient())
        try:
            assert container.geo._cache is container.cache
            assert container.geo_cdn._cache is container.cache
            assert container.geo_sync.status()["running"] is False
        finally:
            asyncio.run(container.dispose())

    def test_dispose_keeps_injected_connection(self, conn, storage):
        container.init(conn=conn, storage=storage, cdn_client=CdnClient())
        asyncio.run(container.dispose())
        assert conn.execute("SELECT 1").fetchone() == (1,)

    def test_init_twice_is_noop(self, conn, storage):
        container.init(conn=conn, storage=storage, cdn_client=CdnClient())
        geo = container.geo
        container.init(conn=conn, storage=storage, cdn_client=CdnClient())
        assert container.geo is geo
        asyncio.run(container.dispose())
