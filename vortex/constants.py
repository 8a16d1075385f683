from .field import Fr

# Height of the commitment tree. Supports 2^26 = 67,108,864 commitments and
# must match the on-chain contract's tree height.
LEVELS = 26

# Number of notes spent and created by one transaction.
N_INS = 2
N_OUTS = 2

# Amounts are bounded below 2^248 so that the conservation sum
# sum(inputs) + public_amount cannot wrap around the field.
MAX_AMOUNT_BITS = 248

# Empty leaf of the commitment tree: Poseidon1 of the field encoding of "vortex".
ZERO_VALUE = Fr(
    18688842432741139442778047327644092677418528270738216181718229581494125774932
)
