from spaceinvaders.counters import FPSCounter, GameObjectCounter


def test_fps_text():
    counter = FPSCounter()
    counter.update_fps(60)
    assert counter.text == "FPS: 60"


def test_fps_style():
    counter = FPSCounter()
    assert counter.color == (255, 255, 255)
    assert counter.font == ("times", 12)


def test_object_count_updates_accumulate():
    counter = GameObjectCounter()
    counter.update_object_count(3)
    counter.update_object_count(-1)
    assert counter.object_count == 2
    assert counter.text == "Object count: 2"


def test_object_count_set_replaces():
    counter = GameObjectCounter()
    counter.update_object_count(5)
    counter.set_object_count(10)
    assert counter.object_count == 10
    assert counter.text == "Object count: 10"


def test_object_count_starts_at_zero():
    counter = GameObjectCounter()
    counter.update_object_count(0)
    assert counter.text == "Object count: 0"