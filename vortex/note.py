import secrets
from dataclasses import dataclass

from .field import FIELD_MODULUS, Fr
from .hashing import Hasher


def random_field() -> Fr:
    return Fr(secrets.randbelow(FIELD_MODULUS))


@dataclass(unsafe_hash=True)
class Keypair:
    private_key: Fr

    def __post_init__(self):
        if isinstance(self.private_key, int):
            self.private_key = Fr(self.private_key)
        assert isinstance(self.private_key, Fr), f"private_key is {type(self.private_key)}"

    @classmethod
    def random(cls) -> "Keypair":
        return cls(random_field())

    def public_key(self, hasher: Hasher) -> Fr:
        return hasher.hash1(self.private_key)


@dataclass(unsafe_hash=True)
class Utxo:
    """
    A private note. Only the owner knows `private_key`; anyone paying to the
    owner only needs `public_key`. `index` is the note's leaf position in the
    commitment tree once inserted.
    """

    amount: Fr
    public_key: Fr
    blinding: Fr
    private_key: Fr | None = None
    index: int = 0

    def __post_init__(self):
        if isinstance(self.amount, int):
            self.amount = Fr(self.amount)
        if isinstance(self.public_key, int):
            self.public_key = Fr(self.public_key)
        if isinstance(self.blinding, int):
            self.blinding = Fr(self.blinding)
        if isinstance(self.private_key, int):
            self.private_key = Fr(self.private_key)
        assert isinstance(self.amount, Fr), f"amount is {type(self.amount)}"
        assert isinstance(self.public_key, Fr), f"public_key is {type(self.public_key)}"
        assert isinstance(self.blinding, Fr), f"blinding is {type(self.blinding)}"
        assert self.private_key is None or isinstance(
            self.private_key, Fr
        ), f"private_key is {type(self.private_key)}"
        assert self.index >= 0, f"index is {self.index}"

    @classmethod
    def owned(
        cls,
        keypair: Keypair,
        amount,
        hasher: Hasher,
        blinding: Fr | None = None,
        index: int = 0,
    ) -> "Utxo":
        return cls(
            amount=amount,
            public_key=keypair.public_key(hasher),
            blinding=random_field() if blinding is None else blinding,
            private_key=keypair.private_key,
            index=index,
        )

    def commitment(self, hasher: Hasher) -> Fr:
        return hasher.hash3(self.amount, self.public_key, self.blinding)

    def signature(self, hasher: Hasher) -> Fr:
        """
        Binds the note's private key to its commitment and tree position.
        """
        if self.private_key is None:
            raise ValueError("cannot sign a note without its private key")
        return hasher.hash3(self.private_key, self.commitment(hasher), self.index)

    def nullifier(self, hasher: Hasher) -> Fr:
        """
        The value revealed when spending this note. It is a pure function of
        the note, so spending the same note twice reveals the same nullifier.
        """
        commitment = self.commitment(hasher)
        return hasher.hash3(commitment, self.index, self.signature(hasher))
