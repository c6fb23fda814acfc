from __future__ import annotations

from enum import IntEnum


class BinaryOperatorType(IntEnum):
    # arithmetic
    addOpType = 0
    subOpType = 1
    mulOpType = 2
    divOpType = 3
    powOpType = 4

    # comparison
    ltOpType = 5
    gtOpType = 6
    lteOpType = 7
    gteOpType = 8
    eqOpType = 9
    neOpType = 10

    maxBinaryOpType = 11  # end of the binary opcodes
