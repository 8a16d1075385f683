class ConfigMismatch(Exception):
    def __init__(self, expected_width: int, actual_width: int):
        super().__init__(expected_width, actual_width)
        self.expected_width = expected_width
        self.actual_width = actual_width

    def __str__(self):
        return (
            f"hash of width {self.expected_width} called with a "
            f"width {self.actual_width} configuration"
        )


class MalformedConstant(Exception):
    def __init__(self, width: int, detail: str):
        super().__init__(width, detail)
        self.width = width
        self.detail = detail

    def __str__(self):
        return f"Malformed Poseidon constant for width {self.width}: {self.detail}"


class CapacityExceeded(Exception):
    def __init__(self, capacity: int):
        super().__init__(capacity)
        self.capacity = capacity

    def __str__(self):
        return f"Merkle tree is full ({self.capacity} leaves)"


class IndexOutOfBounds(Exception):
    def __init__(self, index: int, size: int):
        super().__init__(index, size)
        self.index = index
        self.size = size

    def __str__(self):
        return f"Index {self.index} out of bounds (size {self.size})"


class PathLengthMismatch(Exception):
    def __init__(self, expected: int, actual: int):
        super().__init__(expected, actual)
        self.expected = expected
        self.actual = actual

    def __str__(self):
        return f"Expected a path of {self.expected} levels, got {self.actual}"


class ConstraintUnsatisfied(Exception):
    def __init__(self, constraint: str | None):
        super().__init__(constraint)
        self.constraint = constraint

    def __str__(self):
        return f"Constraint system is not satisfied (first failure: {self.constraint})"


class SerializationError(Exception):
    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    def __str__(self):
        return f"Serialization error: {self.detail}"
