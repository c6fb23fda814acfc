from __future__ import annotations

from enum import IntEnum


class UnaryOperatorType(IntEnum):
    absOpType = 0
    signOpType = 1
    ceilOpType = 2
    floorOpType = 3

    # differentiable
    sinOpType = 4
    cosOpType = 5
    expOpType = 6
    lnOpType = 7
    log2OpType = 8
    negOpType = 9
    squareOpType = 10
    sqrtOpType = 11
    inverseOpType = 12  # multiplicative inverse
    inverseSqrtOpType = 13  # 1/sqrt(x)

    # activation functions
    cubeOpType = 14
    tanhOpType = 15
    sigmoidOpType = 16

    # numerically stable variants
    log1pOpType = 17
    expm1OpType = 18
    softplusOpType = 19

    maxUnaryOperator = 20  # end of the unary opcodes
