"""
A rank-1 constraint system over the BN254 scalar field.

Every constraint has the shape <a, w> * <b, w> = <c, w> where a, b and c are
linear combinations over the assignment vector w. Variable 0 is the constant
one. Linear combinations are plain dicts mapping a variable index to its
coefficient, so additions and multiplications by constants never produce
constraints; only products of two live variables do.

This is the arithmetization handed to the proving backend. It keeps the full
witness assignment so satisfiability can be checked before proving.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum

from py_ecc.utils import prime_field_inv

from .errors import ConstraintUnsatisfied
from .field import FIELD_MODULUS, NUM_BITS, Fr

logger = logging.getLogger(__name__)

P = FIELD_MODULUS
ONE = 0

LinearCombination = dict[int, int]


class AllocationMode(Enum):
    CONSTANT = "constant"
    INPUT = "input"
    WITNESS = "witness"


def _lc_add(a: LinearCombination, b: LinearCombination, scale: int = 1) -> LinearCombination:
    out = dict(a)
    for var, coeff in b.items():
        v = (out.get(var, 0) + scale * coeff) % P
        if v == 0:
            out.pop(var, None)
        else:
            out[var] = v
    return out


def _lc_scale(a: LinearCombination, scale: int) -> LinearCombination:
    scale %= P
    if scale == 0:
        return {}
    return {var: coeff * scale % P for var, coeff in a.items()}


@dataclass
class Constraint:
    a: LinearCombination
    b: LinearCombination
    c: LinearCombination
    name: str


class ConstraintSystem:
    def __init__(self):
        self.assignment: list[int] = [1]
        self.inputs: list[int] = []
        self.constraints: list[Constraint] = []
        self._namespace: list[str] = []

    @property
    def num_constraints(self) -> int:
        return len(self.constraints)

    @property
    def num_inputs(self) -> int:
        return len(self.inputs)

    @property
    def num_witnesses(self) -> int:
        return len(self.assignment) - 1 - len(self.inputs)

    @contextmanager
    def namespace(self, name: str):
        self._namespace.append(name)
        try:
            yield self
        finally:
            self._namespace.pop()

    def _alloc(self, value) -> int:
        self.assignment.append(int(value) % P)
        return len(self.assignment) - 1

    def alloc_input(self, value) -> "FieldVar":
        index = self._alloc(value)
        self.inputs.append(index)
        return FieldVar(self, {index: 1}, self.assignment[index])

    def alloc_witness(self, value) -> "FieldVar":
        index = self._alloc(value)
        return FieldVar(self, {index: 1}, self.assignment[index])

    def constant(self, value) -> "FieldVar":
        return FieldVar.constant(value)

    def alloc(self, value, mode: AllocationMode) -> "FieldVar":
        if mode == AllocationMode.INPUT:
            return self.alloc_input(value)
        if mode == AllocationMode.WITNESS:
            return self.alloc_witness(value)
        return FieldVar.constant(value)

    def enforce(self, a, b, c, name: str | None = None):
        name = name or f"constraint_{len(self.constraints)}"
        name = "/".join([*self._namespace, name])
        self.constraints.append(Constraint(_as_lc(a), _as_lc(b), _as_lc(c), name))

    def eval(self, lc: LinearCombination) -> int:
        return sum(coeff * self.assignment[var] for var, coeff in lc.items()) % P

    def which_is_unsatisfied(self) -> str | None:
        for constraint in self.constraints:
            a = self.eval(constraint.a)
            b = self.eval(constraint.b)
            if a * b % P != self.eval(constraint.c):
                logger.debug(f"constraint {constraint.name} is not satisfied")
                return constraint.name
        return None

    def is_satisfied(self) -> bool:
        return self.which_is_unsatisfied() is None

    def public_inputs(self) -> list[Fr]:
        return [Fr(self.assignment[i]) for i in self.inputs]


def _as_lc(x) -> LinearCombination:
    if isinstance(x, FieldVar):
        return x.lc
    if isinstance(x, Boolean):
        return x.var.lc
    if isinstance(x, dict):
        return x
    return FieldVar.constant(x).lc


class FieldVar:
    """
    A field element inside the constraint system: a linear combination of
    allocated variables together with its assigned value. Constants carry no
    constraint system at all.
    """

    def __init__(self, cs: ConstraintSystem | None, lc: LinearCombination, value: int):
        self.cs = cs
        self.lc = lc
        self._value = value % P

    @classmethod
    def constant(cls, value) -> "FieldVar":
        v = int(value) % P
        return cls(None, {ONE: v} if v else {}, v)

    @classmethod
    def zero(cls) -> "FieldVar":
        return cls.constant(0)

    @classmethod
    def one(cls) -> "FieldVar":
        return cls.constant(1)

    @property
    def is_constant(self) -> bool:
        return all(var == ONE for var in self.lc)

    def value(self) -> Fr:
        return Fr(self._value)

    def __repr__(self):
        kind = "constant" if self.is_constant else "var"
        return f"FieldVar({kind}, {self._value})"

    def _cs_with(self, other: "FieldVar") -> ConstraintSystem | None:
        if self.cs is not None and other.cs is not None:
            assert self.cs is other.cs, "variables belong to different constraint systems"
        return self.cs if self.cs is not None else other.cs

    def __add__(self, other) -> "FieldVar":
        other = as_field_var(other)
        return FieldVar(
            self._cs_with(other), _lc_add(self.lc, other.lc), self._value + other._value
        )

    def __radd__(self, other) -> "FieldVar":
        return self + other

    def __neg__(self) -> "FieldVar":
        return FieldVar(self.cs, _lc_scale(self.lc, -1), -self._value)

    def __sub__(self, other) -> "FieldVar":
        other = as_field_var(other)
        return FieldVar(
            self._cs_with(other),
            _lc_add(self.lc, other.lc, scale=-1),
            self._value - other._value,
        )

    def __rsub__(self, other) -> "FieldVar":
        return as_field_var(other) - self

    def __mul__(self, other) -> "FieldVar":
        other = as_field_var(other)
        if other.is_constant:
            return FieldVar(self.cs, _lc_scale(self.lc, other._value), self._value * other._value)
        if self.is_constant:
            return other * self

        cs = self._cs_with(other)
        out = cs.alloc_witness(self._value * other._value)
        cs.enforce(self, other, out, "mul")
        return out

    def __rmul__(self, other) -> "FieldVar":
        return self * other

    def square(self) -> "FieldVar":
        return self * self

    def pow5(self) -> "FieldVar":
        x2 = self.square()
        x4 = x2.square()
        return x4 * self

    def inverse(self) -> "FieldVar":
        if self.is_constant:
            return FieldVar.constant(prime_field_inv(self._value, P))
        inv = self.cs.alloc_witness(prime_field_inv(self._value, P) if self._value else 0)
        self.cs.enforce(self, inv, FieldVar.one(), "inverse")
        return inv

    def enforce_equal(self, other, name: str = "enforce_equal"):
        other = as_field_var(other)
        cs = self._cs_with(other)
        if cs is None:
            if self._value != other._value:
                raise ConstraintUnsatisfied(name)
            return
        cs.enforce(self - other, FieldVar.one(), FieldVar.zero(), name)

    def is_zero(self) -> "Boolean":
        if self.is_constant:
            return Boolean.constant(self._value == 0)
        cs = self.cs
        is_zero = self._value == 0
        out = cs.alloc_witness(int(is_zero))
        inv = cs.alloc_witness(0 if is_zero else prime_field_inv(self._value, P))
        # self * inv = 1 - out and self * out = 0 together pin out to (self == 0)
        cs.enforce(self, inv, FieldVar.one() - out, "is_zero_inv")
        cs.enforce(self, out, FieldVar.zero(), "is_zero_out")
        return Boolean(out, is_zero)

    def is_eq(self, other) -> "Boolean":
        return (self - as_field_var(other)).is_zero()

    def is_neq(self, other) -> "Boolean":
        return self.is_eq(other).not_()

    def to_bits_le(self, num_bits: int = NUM_BITS) -> list["Boolean"]:
        """
        Little-endian bit decomposition. The bits are booleans whose weighted
        sum equals self; they are not constrained to encode a canonical value.
        """
        if self.is_constant:
            return [Boolean.constant(bool((self._value >> i) & 1)) for i in range(num_bits)]
        bits = [Boolean.new_witness(self.cs, bool((self._value >> i) & 1)) for i in range(num_bits)]
        packed = FieldVar.zero()
        for i, bit in enumerate(bits):
            packed = packed + bit.var * (1 << i)
        self.enforce_equal(packed, "to_bits_le")
        return bits

    @staticmethod
    def conditionally_select(cond: "Boolean", true_value, false_value) -> "FieldVar":
        true_value = as_field_var(true_value)
        false_value = as_field_var(false_value)
        if cond.is_constant:
            return true_value if cond.value() else false_value

        diff = true_value - false_value
        if diff.is_constant:
            return false_value + cond.var * diff

        cs = cond.var.cs
        out = cs.alloc_witness(true_value._value if cond.value() else false_value._value)
        # cond * (t - f) = out - f
        cs.enforce(cond, diff, out - false_value, "conditionally_select")
        return out


def as_field_var(x) -> FieldVar:
    if isinstance(x, FieldVar):
        return x
    if isinstance(x, Boolean):
        return x.var
    return FieldVar.constant(x)


class Boolean:
    """A FieldVar constrained to be 0 or 1."""

    def __init__(self, var: FieldVar, value: bool):
        self.var = var
        self._value = bool(value)

    @classmethod
    def constant(cls, value: bool) -> "Boolean":
        return cls(FieldVar.constant(int(value)), value)

    @classmethod
    def new_witness(cls, cs: ConstraintSystem, value: bool) -> "Boolean":
        var = cs.alloc_witness(int(value))
        cs.enforce(var, FieldVar.one() - var, FieldVar.zero(), "boolean")
        return cls(var, value)

    @property
    def is_constant(self) -> bool:
        return self.var.is_constant

    def value(self) -> bool:
        return self._value

    def __repr__(self):
        return f"Boolean({self._value})"

    def not_(self) -> "Boolean":
        return Boolean(FieldVar.one() - self.var, not self._value)

    def and_(self, other: "Boolean") -> "Boolean":
        if self.is_constant:
            return other if self._value else Boolean.constant(False)
        if other.is_constant:
            return self if other.value() else Boolean.constant(False)
        return Boolean(self.var * other.var, self._value and other._value)

    def or_(self, other: "Boolean") -> "Boolean":
        # a | b = !(!a & !b)
        return self.not_().and_(other.not_()).not_()

    def __invert__(self) -> "Boolean":
        return self.not_()

    def __and__(self, other: "Boolean") -> "Boolean":
        return self.and_(other)

    def __or__(self, other: "Boolean") -> "Boolean":
        return self.or_(other)

    def enforce_equal(self, other: "Boolean", name: str = "boolean_enforce_equal"):
        self.var.enforce_equal(other.var, name)

    def conditional_enforce_equal(
        self, other: "Boolean", condition: "Boolean", name: str = "conditional_enforce_equal"
    ):
        """Enforces self == other whenever condition holds."""
        if condition.is_constant:
            if condition.value():
                self.enforce_equal(other, name)
            return
        cs = condition.var.cs
        cs.enforce(self.var - other.var, condition, FieldVar.zero(), name)
