from prism.linear import normalised_to_8bit, normalised_to_16bit
from prism.lut import (
    build_8bit_to_linear,
    build_16bit_to_linear,
    build_linear_to_8bit,
    build_linear_to_16bit,
)


def identity(v):
    return v


def square(v):
    return v * v


def test_linear_to_8bit_table_size_and_ends():
    table = build_linear_to_8bit(identity)
    assert len(table) == 512
    assert table[0] == 0
    assert table[-1] == 255


def test_linear_to_8bit_is_monotonic_for_monotonic_curve():
    table = build_linear_to_8bit(square)
    assert all(a <= b for a, b in zip(table, table[1:]))


def test_linear_to_8bit_samples_whole_unit_range():
    seen = []

    def record(v):
        seen.append(v)
        return v

    table = build_linear_to_8bit(record)
    assert len(table) == 512
    assert table[0] == 0
    assert table[511] == 255
    assert len(seen) == 512
    assert min(seen) == 0.0
    assert max(seen) == 1.0


def test_8bit_to_linear_table_size_and_ends():
    table = build_8bit_to_linear(identity)
    assert len(table) == 256
    assert table[0] == 0.0
    assert table[255] == 1.0


def test_8bit_identity_round_trip():
    table = build_8bit_to_linear(identity)
    assert [normalised_to_8bit(v) for v in table] == list(range(256))


def test_16bit_tables_round_trip_with_identity():
    to_linear = build_16bit_to_linear(identity)
    to_encoded = build_linear_to_16bit(identity)
    assert len(to_linear) == 65536
    assert len(to_encoded) == 65536
    assert to_encoded == list(range(65536))
    assert [normalised_to_16bit(v) for v in to_linear[::97]] == list(range(0, 65536, 97))


def test_16bit_to_linear_applies_curve():
    table = build_16bit_to_linear(square)
    assert table[0] == 0.0
    assert table[65535] == 1.0
    assert all(a <= b for a, b in zip(table, table[1:]))