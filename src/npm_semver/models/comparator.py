"""Single relational constraint against a version."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Literal, Union

from ..errors import InvalidComparator, InvalidVersion
from ..grammar import dialect
from ..options import Options, OptionsLike
from .version import Version


class Operator(str, enum.Enum):
    """Relational operators; ``=`` is normalised to the empty operator."""

    LT = "<"
    LTE = "<="
    EQ = ""
    GTE = ">="
    GT = ">"

    @classmethod
    def from_symbol(cls, symbol: str) -> Operator:
        return cls.EQ if symbol == "=" else cls(symbol)

    def accepts(self, order: int) -> bool:
        """Return whether a three-way ``compare`` result satisfies the operator."""
        if self is Operator.LT:
            return order < 0
        if self is Operator.LTE:
            return order <= 0
        if self is Operator.GT:
            return order > 0
        if self is Operator.GTE:
            return order >= 0
        return order == 0


class AnyVersion(enum.Enum):
    """Operand of a comparator that places no constraint on the version."""

    ANY = "ANY"

    def __str__(self) -> str:
        return ""


ANY = AnyVersion.ANY

Operand = Union[Version, Literal[AnyVersion.ANY]]


@dataclass(slots=True, frozen=True)
class Comparator:
    """One ``operator`` + ``operand`` constraint, or the universal constraint."""

    operator: Operator
    operand: Operand
    loose: bool = False

    def __post_init__(self) -> None:
        if self.operand is ANY and self.operator is not Operator.EQ:
            raise InvalidComparator("An ANY comparator cannot carry an operator")

    @classmethod
    def parse(cls, text: str, options: OptionsLike = None) -> Comparator:
        """Parse ``<op><version>`` or the empty string (any version).

        Raises:
            InvalidComparator: if ``text`` does not match the comparator grammar
                of the selected dialect.
        """
        opts = Options.coerce(options)
        match = dialect(opts.loose).comparator.fullmatch(text)
        if match is None:
            raise InvalidComparator(f"Invalid comparator: {text}")

        symbol, operand = match.group(1), match.group(2)
        if not operand:
            return cls(operator=Operator.EQ, operand=ANY, loose=opts.loose)
        try:
            version = Version.parse(operand, opts.loose)
        except InvalidVersion as exc:
            raise InvalidComparator(f"Invalid comparator: {text}") from exc
        return cls(operator=Operator.from_symbol(symbol or ""), operand=version, loose=opts.loose)

    @property
    def value(self) -> str:
        if self.operand is ANY:
            return ""
        return f"{self.operator.value}{self.operand.version}"

    def __str__(self) -> str:
        return self.value

    def test(self, version: Version | str) -> bool:
        """Return whether ``version`` satisfies this constraint.

        Raises:
            InvalidVersion: if ``version`` is a string that does not parse.
        """
        if self.operand is ANY:
            return True
        if not isinstance(version, Version):
            version = Version.parse(version, self.loose)
        return self.operator.accepts(version.compare(self.operand))
