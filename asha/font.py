"""An 8x8 bitmap font covering ASCII; bit ``x`` of row ``y`` is pixel (x, y)."""

from __future__ import annotations

FONT8X8_BASIC: bytes = bytes(8 * 0x20) + bytes.fromhex(
    "00 00 00 00 00 00 00 00"  # space
    "18 3C 3C 18 18 00 18 00"  # !
    "36 36 00 00 00 00 00 00"  # "
    "36 36 7F 36 7F 36 36 00"  # #
    "0C 3E 03 1E 30 1F 0C 00"  # $
    "00 63 33 18 0C 66 63 00"  # %
    "1C 36 1C 6E 3B 33 6E 00"  # &
    "06 06 03 00 00 00 00 00"  # '
    "18 0C 06 06 06 0C 18 00"  # (
    "06 0C 18 18 18 0C 06 00"  # )
    "00 66 3C FF 3C 66 00 00"  # *
    "00 0C 0C 3F 0C 0C 00 00"  # +
    "00 00 00 00 00 0C 0C 06"  # ,
    "00 00 00 3F 00 00 00 00"  # -
    "00 00 00 00 00 0C 0C 00"  # .
    "60 30 18 0C 06 03 01 00"  # /
    "3E 63 73 7B 6F 67 3E 00"  # 0
    "0C 0E 0C 0C 0C 0C 3F 00"  # 1
    "1E 33 30 1C 06 33 3F 00"  # 2
    "1E 33 30 1C 30 33 1E 00"  # 3
    "38 3C 36 33 7F 30 78 00"  # 4
    "3F 03 1F 30 30 33 1E 00"  # 5
    "1C 06 03 1F 33 33 1E 00"  # 6
    "3F 33 30 18 0C 0C 0C 00"  # 7
    "1E 33 33 1E 33 33 1E 00"  # 8
    "1E 33 33 3E 30 18 0E 00"  # 9
    "00 0C 0C 00 00 0C 0C 00"  # :
    "00 0C 0C 00 00 0C 0C 06"  # ;
    "18 0C 06 03 06 0C 18 00"  # <
    "00 00 3F 00 00 3F 00 00"  # =
    "06 0C 18 30 18 0C 06 00"  # >
    "1E 33 30 18 0C 00 0C 00"  # ?
    "3E 63 7B 7B 7B 03 1E 00"  # @
    "0C 1E 33 33 3F 33 33 00"  # A
    "3F 66 66 3E 66 66 3F 00"  # B
    "3C 66 03 03 03 66 3C 00"  # C
    "1F 36 66 66 66 36 1F 00"  # D
    "7F 46 16 1E 16 46 7F 00"  # E
    "7F 46 16 1E 16 06 0F 00"  # F
    "3C 66 03 03 73 66 7C 00"  # G
    "33 33 33 3F 33 33 33 00"  # H
    "1E 0C 0C 0C 0C 0C 1E 00"  # I
    "78 30 30 30 33 33 1E 00"  # J
    "67 66 36 1E 36 66 67 00"  # K
    "0F 06 06 06 46 66 7F 00"  # L
    "63 77 7F 7F 6B 63 63 00"  # M
    "63 67 6F 7B 73 63 63 00"  # N
    "1C 36 63 63 63 36 1C 00"  # O
    "3F 66 66 3E 06 06 0F 00"  # P
    "1E 33 33 33 3B 1E 38 00"  # Q
    "3F 66 66 3E 36 66 67 00"  # R
    "1E 33 07 0E 38 33 1E 00"  # S
    "3F 2D 0C 0C 0C 0C 1E 00"  # T
    "33 33 33 33 33 33 3F 00"  # U
    "33 33 33 33 33 1E 0C 00"  # V
    "63 63 63 6B 7F 77 63 00"  # W
    "63 63 36 1C 1C 36 63 00"  # X
    "33 33 33 1E 0C 0C 1E 00"  # Y
    "7F 63 31 18 4C 66 7F 00"  # Z
    "1E 06 06 06 06 06 1E 00"  # [
    "03 06 0C 18 30 60 40 00"  # backslash
    "1E 18 18 18 18 18 1E 00"  # ]
    "08 1C 36 63 00 00 00 00"  # ^
    "00 00 00 00 00 00 00 FF"  # _
    "0C 0C 18 00 00 00 00 00"  # `
    "00 00 1E 30 3E 33 6E 00"  # a
    "07 06 06 3E 66 66 3B 00"  # b
    "00 00 1E 33 03 33 1E 00"  # c
    "38 30 30 3E 33 33 6E 00"  # d
    "00 00 1E 33 3F 03 1E 00"  # e
    "1C 36 06 0F 06 06 0F 00"  # f
    "00 00 6E 33 33 3E 30 1F"  # g
    "07 06 36 6E 66 66 67 00"  # h
    "0C 00 0E 0C 0C 0C 1E 00"  # i
    "30 00 30 30 30 33 33 1E"  # j
    "07 06 66 36 1E 36 67 00"  # k
    "0E 0C 0C 0C 0C 0C 1E 00"  # l
    "00 00 33 7F 7F 6B 63 00"  # m
    "00 00 1F 33 33 33 33 00"  # n
    "00 00 1E 33 33 33 1E 00"  # o
    "00 00 3B 66 66 3E 06 0F"  # p
    "00 00 6E 33 33 3E 30 78"  # q
    "00 00 3B 6E 66 06 0F 00"  # r
    "00 00 3E 03 1E 30 1F 00"  # s
    "08 0C 3E 0C 0C 2C 18 00"  # t
    "00 00 33 33 33 33 6E 00"  # u
    "00 00 33 33 33 1E 0C 00"  # v
    "00 00 63 6B 7F 7F 36 00"  # w
    "00 00 63 36 1C 36 63 00"  # x
    "00 00 33 33 33 3E 30 1F"  # y
    "00 00 3F 19 0C 26 3F 00"  # z
    "38 0C 0C 07 0C 0C 38 00"  # {
    "18 18 18 00 18 18 18 00"  # |
    "07 0C 0C 38 0C 0C 07 00"  # }
    "6E 3B 00 00 00 00 00 00"  # ~
    "00 00 00 00 00 00 00 00"  # DEL
)

GLYPH_COUNT = len(FONT8X8_BASIC) // 8


def glyph(code: int) -> bytes:
    """The eight rows of the glyph for character ``code`` (0 to 127)."""
    if not 0 <= code < GLYPH_COUNT:
        raise ValueError(f"no glyph for character code {code}")
    return FONT8X8_BASIC[code * 8 : code * 8 + 8]