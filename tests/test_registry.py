from spaceinvaders.registry import PixmapRegistry, default_registry


def test_preload_runs_in_order():
    calls = []
    registry = PixmapRegistry()
    registry.add(lambda: calls.append("a"))
    registry.add(lambda: calls.append("b"))
    registry.preload_all()
    assert calls == ["a", "b"]


def test_preload_twice_runs_twice():
    calls = []
    registry = PixmapRegistry()
    registry.add(lambda: calls.append(1))
    registry.preload_all()
    registry.preload_all()
    assert calls == [1, 1]


def test_len_counts_added():
    registry = PixmapRegistry()
    registry.add(lambda: None)
    registry.add(lambda: None)
    assert len(registry) == 2


def test_default_registry_runs_added_loader():
    calls = []
    before = len(default_registry)
    default_registry.add(lambda: calls.append("marker"))
    assert len(default_registry) == before + 1
    default_registry.preload_all()
    assert calls == ["marker"]