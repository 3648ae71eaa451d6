from labyrinth.timing import make_fixed_clock, make_linear_clock, now_ms

def test_now_ms_is_epoch_millis():
    t = now_ms()
    assert isinstance(t, int)
    assert t > 1_600_000_000_000

def test_fixed_clock():
    c = make_fixed_clock(42)
    assert [c(), c(), c()] == [42, 42, 42]

def test_linear_clock():
    c = make_linear_clock(start=100, step=5)
    assert [c(), c(), c()] == [100, 105, 110]
