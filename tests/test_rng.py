import pytest

from labyrinth import config
from labyrinth.errors import InvalidRangeError, InvalidSeedError
from labyrinth.rng import (
    A, C, M, NORM, SeededEngine, hash_string_to_seed, lcg_next, lcg_next_float,
    resolve_seed, to_int32, validate_seed,
)
from labyrinth.timing import make_fixed_clock

def ref_hash(s):
    # h*31 + unit mod 2^32 at every step, read back as signed, then abs
    h = 0
    data = s.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        h = (h * 31 + int.from_bytes(data[i:i+2], "little")) % 2**32
    if h >= 2**31:
        h -= 2**32
    return abs(h)

def test_to_int32():
    assert to_int32(0x7FFFFFFF) == 2**31 - 1
    assert to_int32(0x80000000) == -2**31
    assert to_int32(0xFFFFFFFF) == -1
    assert to_int32(2**32 + 5) == 5

def test_hash_known_values():
    assert hash_string_to_seed("a") == 97
    assert hash_string_to_seed("abc") == 96354
    # surrogate pair D83D DE00
    assert hash_string_to_seed("\U0001F600") == 1772899

def test_hash_is_stable():
    first = hash_string_to_seed("tournament-42")
    for _ in range(5):
        assert hash_string_to_seed("tournament-42") == first
    assert first == ref_hash("tournament-42") == 1996644126

def test_hash_wraps_32_bits():
    for s in ["tournament-42", "a much longer tournament identifier 0001",
              "Labyrinth Legends: season 3 finals", "x" * 200, "éèà ümlaut"]:
        h = hash_string_to_seed(s)
        assert 0 <= h <= 2**31
        assert h == ref_hash(s)

def test_hash_empty_falls_back_to_clock():
    clock = make_fixed_clock(1_700_000_000_123)
    assert hash_string_to_seed("", clock) == 1_700_000_000_123
    assert hash_string_to_seed(None, clock) == 1_700_000_000_123

@pytest.mark.parametrize("bad", [42, 0, [], b"abc"])
def test_hash_rejects_non_strings(bad):
    clock = make_fixed_clock(7)
    with pytest.raises(InvalidSeedError):
        hash_string_to_seed(bad, clock)

def test_lcg_first_steps():
    assert lcg_next(0) == 12345
    assert lcg_next(1) == 1103515245 + 12345
    e = SeededEngine(96354, float_compat=False)
    states = []
    for _ in range(3):
        e.next()
        states.append(e.state)
    assert states == [1897549299, 686123696, 72367401]

def test_default_engine_follows_browser_client():
    e = SeededEngine(96354)
    assert e.float_compat is True
    e.next()
    e.next()
    assert e.state == 686123520

def test_next_uses_m_minus_1_normaliser():
    e = SeededEngine(0)
    assert e.next() == 12345 / (2**31 - 1)
    assert NORM == M - 1 == 2**31 - 1

def test_first_draw_for_abc():
    e = SeededEngine(hash_string_to_seed("abc"))
    assert e.next_int(0, 3) == 3

def test_next_range():
    e = SeededEngine(123456789)
    for _ in range(10000):
        v = e.next()
        assert 0.0 <= v <= 1.0

def test_next_int_range():
    e = SeededEngine(42)
    for lo, hi in [(0, 0), (0, 1), (0, 3), (-5, 5), (10, 20), (7, 7)]:
        for _ in range(2000):
            assert lo <= e.next_int(lo, hi) <= hi

def test_next_int_single_value_still_draws():
    e = SeededEngine(96354)
    assert e.next_int(4, 4) == 4
    assert e.state == 1897549299

def test_next_int_keeps_extreme_state_in_range():
    # predecessor of state m-1 under the exact recurrence
    seed = ((M - 1 - C) * pow(A, -1, M)) % M
    assert seed == 230538014
    e = SeededEngine(seed, float_compat=False)
    assert e.next_int(0, 3) == 3
    assert e.state == M - 1
    e = SeededEngine(seed, float_compat=False)
    assert e.next() == 1.0

def test_next_int_rejects_bad_range():
    e = SeededEngine(1)
    with pytest.raises(InvalidRangeError):
        e.next_int(3, 1)
    with pytest.raises(InvalidRangeError):
        e.next_int(0, 2.5)
    assert e.state == 1

@pytest.mark.parametrize("bad", [-1, 1.5, float("inf"), float("nan"), "7", None, True])
def test_engine_rejects_bad_seed(bad):
    with pytest.raises(InvalidSeedError):
        SeededEngine(bad)

def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        SeededEngine(-3)

def test_integral_float_seed_accepted():
    assert validate_seed(7.0) == 7
    assert SeededEngine(7.0).seed == 7

def test_independent_engines_do_not_interfere():
    a, b = SeededEngine(99), SeededEngine(99)
    seq_a = [a.next_int(0, 9) for _ in range(50)]
    c = SeededEngine(99)
    seq_b = []
    for _ in range(50):
        c.next()  # advance an unrelated engine in between
        seq_b.append(b.next_int(0, 9))
    assert seq_a == seq_b

def test_float_compat_matches_double_rounding():
    assert lcg_next_float(96354) == 1897549299
    assert lcg_next_float(1897549299) == 686123520
    assert lcg_next(1897549299) == 686123696

def test_float_compat_from_flags(monkeypatch):
    monkeypatch.setattr(config, "FLAGS", config.ModeFlags(js_float_lcg=False))
    e = SeededEngine(96354)
    assert e.float_compat is False
    e.next()
    e.next()
    assert e.state == 686123696
    assert SeededEngine(96354, float_compat=True).float_compat is True

def test_float_compat_state_stays_integral():
    e = SeededEngine(1_700_000_000_000, float_compat=True)
    for _ in range(1000):
        e.next()
        assert isinstance(e.state, int)
        assert 0 <= e.state < M

def test_resolve_seed():
    clock = make_fixed_clock(555)
    assert resolve_seed("abc", clock) == 96354
    assert resolve_seed(96354, clock) == 96354
    assert resolve_seed(None, clock) == 555
    assert resolve_seed("", clock) == 555
    with pytest.raises(InvalidSeedError):
        resolve_seed(-1, clock)

def test_resolve_seed_logs(caplog):
    caplog.set_level("DEBUG", logger="labyrinth.rng")
    resolve_seed("abc")
    assert "Maze seed set: 'abc' -> 96354" in caplog.text

def test_engine_keeps_construction_seed():
    e = SeededEngine(10)
    e.next()
    assert e.seed == 10
    assert e.state != 10
