import pytest

from campsite_explorer.infrastructure.cluster_cache import ClusterCache


class TestClusterCache:
    def test_get_miss_returns_none(self):
        assert ClusterCache().get(10, 5) is None

    def test_set_and_get(self):
        cache = ClusterCache()
        cache.set(10, 5, "resultado")
        assert cache.get(10, 5) == "resultado"
        assert cache.get(11, 5) is None
        assert cache.get(10, 6) is None

    def test_default_capacity_is_fifty(self):
        cache = ClusterCache()
        for zoom in range(51):
            cache.set(zoom, 100, zoom)
        assert len(cache) == 50
        assert cache.get(0, 100) is None
        assert cache.get(1, 100) == 1
        assert cache.get(50, 100) == 50

    def test_eviction_is_by_insertion_not_access(self):
        cache = ClusterCache(max_size=2)
        cache.set(1, 10, "a")
        cache.set(2, 10, "b")
        assert cache.get(1, 10) == "a"  # leitura não renova
        cache.set(3, 10, "c")
        assert cache.get(1, 10) is None
        assert cache.get(2, 10) == "b"
        assert cache.get(3, 10) == "c"

    def test_overwrite_existing_key_does_not_evict(self):
        cache = ClusterCache(max_size=2)
        cache.set(1, 10, "a")
        cache.set(2, 10, "b")
        cache.set(2, 10, "b2")
        assert len(cache) == 2
        assert cache.get(1, 10) == "a"
        assert cache.get(2, 10) == "b2"

    def test_key_ignores_point_identity(self):
        # mesma quantidade de pontos → mesma entrada, ainda que o conjunto seja outro
        cache = ClusterCache()
        cache.set(12, 3, "conjunto antigo")
        assert cache.get(12, 3) == "conjunto antigo"

    def test_clear(self):
        cache = ClusterCache()
        cache.set(1, 1, "x")
        cache.clear()
        assert len(cache) == 0
        assert (1, 1) not in cache

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            ClusterCache(max_size=0)
