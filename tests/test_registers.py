import pytest # type: ignore
import numpy as np # type: ignore
from cardinal.lib.registers import RegisterArray


@pytest.mark.quick
class TestRegisterArrayQuick:
    """Quick tests for RegisterArray."""

    def test_init(self):
        registers = RegisterArray(64)
        assert len(registers) == 64
        assert registers.is_empty()
        assert registers.count_zero_registers() == 64
        assert registers.harmonic_sum() == 64.0
        assert registers.nbytes() == 64

    def test_update_keeps_maximum(self):
        registers = RegisterArray(16)
        registers.update(3, 5)
        registers.update(3, 2)
        assert registers[3] == 5
        registers.update(3, 7)
        assert registers[3] == 7
        assert registers.count_zero_registers() == 15
        assert registers.max_value() == 7

    def test_update_many_with_repeated_indices(self):
        registers = RegisterArray(16)
        registers.update(1, 4)
        registers.update_many(np.array([1, 1, 2, 2, 2]), np.array([3, 6, 1, 9, 2]))
        assert registers[1] == 6
        assert registers[2] == 9
        assert registers.count_zero_registers() == 14

    def test_harmonic_sum(self):
        registers = RegisterArray(4)
        registers.update(0, 1)
        registers.update(1, 2)
        assert registers.harmonic_sum() == pytest.approx(0.5 + 0.25 + 1 + 1)

    def test_values_is_copy(self):
        registers = RegisterArray(8)
        values = registers.values()
        values[0] = 9
        assert registers[0] == 0
