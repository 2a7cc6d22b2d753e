"""
Positional argument classification for redis-stat

Splits the tokens left over after option parsing into numbers
(interval, count) and host specifiers, by lexical shape only.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class Positionals:
    """Result of classifying positional tokens"""
    interval: Optional[float] = None
    count: Optional[float] = None
    hosts: Tuple[str, ...] = ()
    ignored: Tuple[str, ...] = ()


class PositionalClassifier:
    """Classifies positional tokens into numbers and host specifiers"""

    # 2, 10, 0, 0.5, 10.5, 3.  (no sign, no exponent)
    NUMBER_PATTERN = re.compile(r"^[1-9][0-9]*$|^[0-9]+\.?[0-9]*$")

    @classmethod
    def is_number(cls, token: str) -> bool:
        """Check whether a token is an interval/count rather than a host"""
        return bool(cls.NUMBER_PATTERN.match(token))

    @classmethod
    def classify(cls, tokens: Sequence[str]) -> Positionals:
        """
        Partition tokens, preserving argument order

        Args:
            tokens: Positional tokens in command-line order

        Returns:
            Positionals with the first number as interval, the second as count
        """
        numbers: List[str] = []
        hosts: List[str] = []
        for token in tokens:
            if cls.is_number(token):
                numbers.append(token)
            else:
                hosts.append(token)

        interval = float(numbers[0]) if len(numbers) > 0 else None
        count = float(numbers[1]) if len(numbers) > 1 else None
        ignored = tuple(numbers[2:])
        if ignored:
            logging.warning(f"Ignoring extra numeric arguments: {' '.join(ignored)}")

        return Positionals(interval=interval, count=count, hosts=tuple(hosts), ignored=ignored)
