from heartwood.batch import execute_each, partition, sequence
from heartwood.either import Either, Left, Right
from heartwood.errors import IllegalStateError
from heartwood.result import Failure, Success, Try

__all__ = [
    "Try",
    "Success",
    "Failure",
    "Either",
    "Left",
    "Right",
    "IllegalStateError",
    "execute_each",
    "sequence",
    "partition",
]
