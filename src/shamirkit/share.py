# SPDX-FileCopyrightText: 2025 shamirkit contributors
# SPDX-License-Identifier: MIT

"""One evaluation point of a secret-encoding polynomial."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .encoding import base36_to_int, int_to_base36, urlsafe_decode, urlsafe_encode
from .errors import InvalidEncoding, InvalidShare

_TAG = re.compile(r"[0-9a-f]+")


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Share:
    x: int
    y: int
    prime: int
    tag_fragment: Optional[str] = None

    def __post_init__(self) -> None:
        if not (_is_int(self.x) and _is_int(self.y) and _is_int(self.prime)):
            raise InvalidShare("share coordinates and prime must be integers")
        if self.prime <= 2:
            raise InvalidShare("share prime must be an odd prime")
        # x = 0 is where the polynomial holds the secret itself
        if self.x == 0:
            raise InvalidShare("share x coordinate must not be 0")
        if not 0 < self.x < self.prime:
            raise InvalidShare("share x coordinate lies outside the field")
        if not 0 <= self.y < self.prime:
            raise InvalidShare("share y coordinate lies outside the field")
        if self.tag_fragment is not None and not _TAG.fullmatch(self.tag_fragment):
            raise InvalidShare("tag fragment must be lowercase hex")

    @property
    def point(self) -> tuple[int, int]:
        return self.x, self.y

    def encode(self) -> str:
        fields = [int_to_base36(self.x), int_to_base36(self.y), int_to_base36(self.prime)]
        if self.tag_fragment:
            fields.append(self.tag_fragment)
        return urlsafe_encode(".".join(fields).encode("ascii"))

    @classmethod
    def decode(cls, text: str) -> "Share":
        if not isinstance(text, str):
            raise InvalidEncoding(f"share must be text, not {type(text).__name__!r}")
        data = urlsafe_decode(text.strip())
        try:
            fields = data.decode("ascii").split(".")
        except UnicodeDecodeError as exc:
            raise InvalidEncoding("share payload is not ASCII text") from exc
        if len(fields) not in (3, 4):
            raise InvalidEncoding(f"share payload has {len(fields)} fields, expected 3 or 4")
        x, y, prime = (base36_to_int(field) for field in fields[:3])
        tag = fields[3] if len(fields) == 4 else None
        return cls(x, y, prime, tag)

    def __str__(self) -> str:
        return self.encode()

    def __repr__(self) -> str:
        return f"Share(x={self.x}, prime_bits={self.prime.bit_length()})"


__all__ = ["Share"]
