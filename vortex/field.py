from py_ecc.bn128 import curve_order
from py_ecc.fields.field_elements import FQ

from .errors import SerializationError

# !Important! The scalar field here must agree with the proving system.
# Groth16 over BN254 proves statements over the curve's scalar field.
FIELD_MODULUS = curve_order

# Bit length of the modulus, used for in-circuit decompositions.
NUM_BITS = FIELD_MODULUS.bit_length()

BYTES_LEN = 32


class Fr(FQ):
    field_modulus = FIELD_MODULUS

    def __eq__(self, other):
        if isinstance(other, (FQ, int)):
            return super().__eq__(other)
        return NotImplemented

    def __hash__(self):
        return hash(("Fr", self.n))

    def __bool__(self):
        return self.n != 0

    def __str__(self):
        return str(self.n)

    def __repr__(self):
        return f"Fr({self.n})"

    @classmethod
    def from_decimal(cls, s: str) -> "Fr":
        """
        Parses the canonical decimal representation of a field element.
        """
        if not isinstance(s, str) or not (s.isascii() and s.isdigit()):
            raise SerializationError(f"not a decimal field element: {s!r}")
        v = int(s)
        if v >= FIELD_MODULUS:
            raise SerializationError(f"{s} is not smaller than the field modulus")
        return cls(v)

    def to_decimal(self) -> str:
        return str(self.n)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Fr":
        """
        Parses a 32 byte big-endian encoding, the layout used for
        commitments and nullifiers in event records.
        """
        if len(data) != BYTES_LEN:
            raise SerializationError(f"expected {BYTES_LEN} bytes, got {len(data)}")
        v = int.from_bytes(data, "big")
        if v >= FIELD_MODULUS:
            raise SerializationError("non-canonical field element encoding")
        return cls(v)

    def to_bytes(self) -> bytes:
        return self.n.to_bytes(BYTES_LEN, "big")

    def to_hex(self) -> str:
        return "0x" + self.to_bytes().hex()

    def bits_le(self, num_bits: int = NUM_BITS) -> list[bool]:
        return [bool((self.n >> i) & 1) for i in range(num_bits)]


def parse_address(address: str) -> Fr:
    """
    Embeds a hex encoded address into the field. The value is reduced modulo
    the field size, so addresses wider than the field wrap around.
    """
    clean = address[2:] if address.startswith("0x") else address
    try:
        v = int(clean, 16)
    except ValueError:
        raise SerializationError(f"invalid hex address: {address!r}")
    return Fr(v)


def string_to_field(s: str) -> Fr:
    return Fr(int.from_bytes(s.encode("utf-8"), "big"))
