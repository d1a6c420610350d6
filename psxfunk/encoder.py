"""Encoding of MIPS R3000 instructions into 32-bit words."""

from __future__ import annotations

import enum
from typing import Union


class Reg(enum.IntEnum):
    """General purpose registers, numbered as in the instruction encoding."""

    R0 = 0
    AT = 1
    V0 = 2
    V1 = 3
    A0 = 4
    A1 = 5
    A2 = 6
    A3 = 7
    T0 = 8
    T1 = 9
    T2 = 10
    T3 = 11
    T4 = 12
    T5 = 13
    T6 = 14
    T7 = 15
    S0 = 16
    S1 = 17
    S2 = 18
    S3 = 19
    S4 = 20
    S5 = 21
    S6 = 22
    S7 = 23
    T8 = 24
    T9 = 25
    K0 = 26
    K1 = 27
    GP = 28
    SP = 29
    S8 = 30
    RA = 31


RegLike = Union[Reg, int]

_WORD = 0xFFFFFFFF


def _s16(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def _u16(value: int) -> int:
    return value & 0xFFFF


def _iclass(value: int) -> int:
    return (value << 26) & _WORD


def _dst(r: RegLike) -> int:
    return int(Reg(r)) << 11


def _tgt(r: RegLike) -> int:
    return int(Reg(r)) << 16


def _src(r: RegLike) -> int:
    return int(Reg(r)) << 21


def _rtype(dst: RegLike, src: RegLike, tgt: RegLike, funct: int) -> int:
    return _dst(dst) | _tgt(tgt) | _src(src) | funct


def _itype_signed(op: int, tgt: RegLike, src: RegLike, value: int) -> int:
    return _iclass(op) | _src(src) | _tgt(tgt) | (_s16(value) & 0xFFFF)


def _itype_unsigned(op: int, tgt: RegLike, src: RegLike, value: int) -> int:
    return _iclass(op) | _src(src) | _tgt(tgt) | _u16(value)


def _branch(op: int, rt: int, src: RegLike, offset: int) -> int:
    return _iclass(op) | (rt << 16) | _src(src) | ((_s16(offset) >> 2) & 0xFFFF)


# ALU

def add(dst: RegLike, src: RegLike, tgt: RegLike) -> int:
    return _rtype(dst, src, tgt, 0b100000)


def addu(dst: RegLike, src: RegLike, tgt: RegLike) -> int:
    return _rtype(dst, src, tgt, 0b100001)


def addi(tgt: RegLike, src: RegLike, value: int) -> int:
    return _itype_signed(0b001000, tgt, src, value)


def addiu(tgt: RegLike, src: RegLike, value: int) -> int:
    return _itype_signed(0b001001, tgt, src, value)


def andd(dst: RegLike, src: RegLike, tgt: RegLike) -> int:
    return _rtype(dst, src, tgt, 0b100100)


def andi(tgt: RegLike, src: RegLike, value: int) -> int:
    return _itype_unsigned(0b001100, tgt, src, value)


def lui(tgt: RegLike, value: int) -> int:
    return _iclass(0b001111) | _tgt(tgt) | _u16(value)


def nor(dst: RegLike, src: RegLike, tgt: RegLike) -> int:
    return _rtype(dst, src, tgt, 0b100111)


def orr(dst: RegLike, src: RegLike, tgt: RegLike) -> int:
    return _rtype(dst, src, tgt, 0b100101)


def ori(tgt: RegLike, src: RegLike, value: int) -> int:
    return _itype_unsigned(0b001101, tgt, src, value)


def slt(dst: RegLike, src: RegLike, tgt: RegLike) -> int:
    return _rtype(dst, src, tgt, 0b101010)


def sltu(dst: RegLike, src: RegLike, tgt: RegLike) -> int:
    return _rtype(dst, src, tgt, 0b101011)


def slti(tgt: RegLike, src: RegLike, value: int) -> int:
    return _itype_signed(0b001010, tgt, src, value)


def sltiu(tgt: RegLike, src: RegLike, value: int) -> int:
    return _itype_unsigned(0b001011, tgt, src, value)


def sub(dst: RegLike, src: RegLike, tgt: RegLike) -> int:
    return _rtype(dst, src, tgt, 0b100010)


def subu(dst: RegLike, src: RegLike, tgt: RegLike) -> int:
    return _rtype(dst, src, tgt, 0b100011)


def xorr(dst: RegLike, src: RegLike, tgt: RegLike) -> int:
    return _rtype(dst, src, tgt, 0b100110)


def xori(tgt: RegLike, src: RegLike, value: int) -> int:
    return _itype_unsigned(0b001110, tgt, src, value)


# Shifts

def _shift_imm(dst: RegLike, tgt: RegLike, sa: int, funct: int) -> int:
    return (_dst(dst) | _tgt(tgt) | (_u16(sa) << 6) | funct) & _WORD


def sll(dst: RegLike, tgt: RegLike, sa: int) -> int:
    return _shift_imm(dst, tgt, sa, 0b000000)


def sllv(dst: RegLike, tgt: RegLike, src: RegLike) -> int:
    return _rtype(dst, src, tgt, 0b000100)


def sra(dst: RegLike, tgt: RegLike, sa: int) -> int:
    return _shift_imm(dst, tgt, sa, 0b000011)


def srav(dst: RegLike, tgt: RegLike, src: RegLike) -> int:
    return _rtype(dst, src, tgt, 0b000111)


def srl(dst: RegLike, tgt: RegLike, sa: int) -> int:
    return _shift_imm(dst, tgt, sa, 0b000010)


def srlv(dst: RegLike, tgt: RegLike, src: RegLike) -> int:
    return _rtype(dst, src, tgt, 0b000110)


# Multiply and divide

def div(src: RegLike, tgt: RegLike) -> int:
    return _tgt(tgt) | _src(src) | 0b011010


def divu(src: RegLike, tgt: RegLike) -> int:
    return _tgt(tgt) | _src(src) | 0b011011


def mfhi(dst: RegLike) -> int:
    return _dst(dst) | 0b010000


def mflo(dst: RegLike) -> int:
    return _dst(dst) | 0b010010


def mthi(dst: RegLike) -> int:
    return _dst(dst) | 0b010001


def mtlo(dst: RegLike) -> int:
    return _dst(dst) | 0b010011


def mult(src: RegLike, tgt: RegLike) -> int:
    return _tgt(tgt) | _src(src) | 0b011000


def multu(src: RegLike, tgt: RegLike) -> int:
    return _tgt(tgt) | _src(src) | 0b011001


# Branches and jumps

def beq(src: RegLike, tgt: RegLike, offset: int) -> int:
    return _branch(0b000100, int(Reg(tgt)), src, offset)


def bgez(src: RegLike, offset: int) -> int:
    return _branch(0b000001, 0b00001, src, offset)


def bgezal(src: RegLike, offset: int) -> int:
    return _branch(0b000001, 0b10001, src, offset)


def bgtz(src: RegLike, offset: int) -> int:
    return _branch(0b000111, 0b00000, src, offset)


def blez(src: RegLike, offset: int) -> int:
    return _branch(0b000110, 0b00000, src, offset)


def bltz(src: RegLike, offset: int) -> int:
    return _branch(0b000001, 0b00000, src, offset)


def bltzal(src: RegLike, offset: int) -> int:
    return _branch(0b000001, 0b10000, src, offset)


def bne(src: RegLike, tgt: RegLike, offset: int) -> int:
    return _branch(0b000101, int(Reg(tgt)), src, offset)


def brk(code: int) -> int:
    return (((code & _WORD) << 6) | 0b001101) & _WORD


def j(addr: int) -> int:
    return _iclass(0b000010) | (((addr & _WORD) >> 2) & 0x03FFFFFF)


def jal(addr: int) -> int:
    return _iclass(0b000011) | (((addr & _WORD) >> 2) & 0x03FFFFFF)


def jalr(src: RegLike, dst: RegLike = Reg.RA) -> int:
    return _dst(dst) | _src(src) | 0b001001


def jr(src: RegLike) -> int:
    return _src(src) | 0b001000


def syscall() -> int:
    return 0b001100


# Memory

def lb(tgt: RegLike, offset: int, src: RegLike) -> int:
    return _itype_signed(0b100000, tgt, src, offset)


def lbu(tgt: RegLike, offset: int, src: RegLike) -> int:
    return _itype_signed(0b100100, tgt, src, offset)


def lh(tgt: RegLike, offset: int, src: RegLike) -> int:
    return _itype_signed(0b100001, tgt, src, offset)


def lhu(tgt: RegLike, offset: int, src: RegLike) -> int:
    return _itype_signed(0b100101, tgt, src, offset)


def lw(tgt: RegLike, offset: int, src: RegLike) -> int:
    return _itype_signed(0b100011, tgt, src, offset)


def lwl(tgt: RegLike, offset: int, src: RegLike) -> int:
    return _itype_signed(0b100010, tgt, src, offset)


def lwr(tgt: RegLike, offset: int, src: RegLike) -> int:
    return _itype_signed(0b100110, tgt, src, offset)


def sb(tgt: RegLike, offset: int, src: RegLike) -> int:
    return _itype_signed(0b101000, tgt, src, offset)


def sh(tgt: RegLike, offset: int, src: RegLike) -> int:
    return _itype_signed(0b101001, tgt, src, offset)


def sw(tgt: RegLike, offset: int, src: RegLike) -> int:
    return _itype_signed(0b101011, tgt, src, offset)


def swl(tgt: RegLike, offset: int, src: RegLike) -> int:
    return _itype_signed(0b101010, tgt, src, offset)


def swr(tgt: RegLike, offset: int, src: RegLike) -> int:
    return _itype_signed(0b101110, tgt, src, offset)


# Pseudo instructions

def nop() -> int:
    return 0