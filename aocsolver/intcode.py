"""A three-register, eight-instruction computer."""

from __future__ import annotations

from typing import Iterable


def _trunc_shift(value: int, shift: int) -> int:
    """Divide by ``2**shift``, truncating toward zero."""
    quotient = abs(value) >> shift
    return quotient if value >= 0 else -quotient


def _trunc_mod8(value: int) -> int:
    remainder = abs(value) % 8
    return remainder if value >= 0 else -remainder


class IntCodeComputer:
    """Runs a program of opcode/operand pairs over registers A, B and C."""

    def __init__(self, program: Iterable[int], register: Iterable[int] = (0, 0, 0)):
        self.program = list(program)
        self.register = list(register)
        if len(self.register) != 3:
            raise ValueError("exactly three registers are required")
        self.pointer = 0
        self.output: list[int] = []

    def run(self) -> list[int]:
        """Execute until the pointer leaves the program; return the output."""
        handlers = {
            0: self._adv,
            1: self._bxl,
            2: self._bst,
            3: self._jnz,
            4: self._bxc,
            5: self._out,
            6: self._bdv,
            7: self._cdv,
        }
        while self.pointer < len(self.program):
            op = self.program[self.pointer]
            handler = handlers.get(op)
            if handler is None:
                raise ValueError(f"unknown opcode {op}")
            handler(self.program[self.pointer + 1])
        return self.output

    def _combo(self, operand: int) -> int:
        if operand <= 3:
            return operand
        if operand <= 6:
            return self.register[operand - 4]
        raise ValueError(f"invalid combo operand {operand}")

    def _adv(self, operand: int) -> None:
        self.register[0] = _trunc_shift(self.register[0], self._combo(operand))
        self.pointer += 2

    def _bxl(self, operand: int) -> None:
        self.register[1] ^= operand
        self.pointer += 2

    def _bst(self, operand: int) -> None:
        self.register[1] = _trunc_mod8(self._combo(operand))
        self.pointer += 2

    def _jnz(self, operand: int) -> None:
        if self.register[0] == 0:
            self.pointer += 2
        else:
            self.pointer = operand

    def _bxc(self, operand: int) -> None:
        self.register[1] ^= self.register[2]
        self.pointer += 2

    def _out(self, operand: int) -> None:
        self.output.append(_trunc_mod8(self._combo(operand)))
        self.pointer += 2

    def _bdv(self, operand: int) -> None:
        self.register[1] = _trunc_shift(self.register[0], self._combo(operand))
        self.pointer += 2

    def _cdv(self, operand: int) -> None:
        self.register[2] = _trunc_shift(self.register[0], self._combo(operand))
        self.pointer += 2