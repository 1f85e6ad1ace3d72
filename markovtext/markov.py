#!/usr/bin/env python3
"""
Character-Level Markov Chain
============================
Learns which characters follow each fixed-length context in a corpus and
uses those distributions to synthesize new text.

Theory:
-------
The model estimates P(next_char | previous K chars). K (the "order") trades
novelty for fidelity: small K produces chaotic output, large K mostly
replays the corpus. Training is a single counting pass over every K-length
window followed by a separate normalization pass, so each context's
distribution sums to 1.0.

Generation picks a seed context uniformly from the table, then repeatedly
samples the next character from the current context's distribution. When
the trailing K characters form a context that was never followed by
anything in the corpus, a space is emitted instead and the context is kept.
"""

import logging
import random
from collections import defaultdict
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Protocol

from .errors import EmptyTable, InvalidConfiguration

logger = logging.getLogger(__name__)

# Emitted when the chain walks off the trained contexts
FALLBACK_CHAR = ' '


class RandomSource(Protocol):
    """Anything with a uniform random() in [0, 1), e.g. random.Random."""

    def random(self) -> float: ...


# =============================================================================
# PROBABILITY TABLE
# =============================================================================

@dataclass(frozen=True)
class ProbabilityTable:
    """Read-only mapping of K-character contexts to next-character probabilities"""
    context_length: int
    rows: Mapping[str, Mapping[str, float]] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )

    def __post_init__(self):
        k = self.context_length
        if isinstance(k, bool) or not isinstance(k, int) or k <= 0:
            raise InvalidConfiguration(f"Context length must be a positive integer, got {k!r}")
        for context, row in self.rows.items():
            if not isinstance(context, str) or len(context) != k:
                raise InvalidConfiguration(f"Context {context!r} does not have length {k}")
            if not row:
                raise InvalidConfiguration(f"Context {context!r} has an empty distribution")
            if any(p < 0 for p in row.values()):
                raise InvalidConfiguration(f"Context {context!r} has a negative probability")

    @classmethod
    def from_rows(cls, context_length: int,
                  rows: Dict[str, Dict[str, float]]) -> 'ProbabilityTable':
        """Freeze plain nested dicts into a table"""
        frozen = {ctx: MappingProxyType(dict(row)) for ctx, row in rows.items()}
        return cls(context_length=context_length, rows=MappingProxyType(frozen))

    def __contains__(self, context: object) -> bool:
        return context in self.rows

    def __getitem__(self, context: str) -> Mapping[str, float]:
        return self.rows[context]

    def __iter__(self) -> Iterator[str]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def contexts(self) -> List[str]:
        return list(self.rows)

    def to_dict(self) -> dict:
        """Copy the table into plain dicts (for display and comparison)"""
        return {ctx: dict(row) for ctx, row in self.rows.items()}


# =============================================================================
# HELPERS
# =============================================================================

def row_sum(row: Mapping[str, float]) -> float:
    """Sum the values of a single table row."""
    total = 0.0
    for value in row.values():
        total += value
    return total


def pick_random_context(table: ProbabilityTable,
                        rng: Optional[RandomSource] = None) -> str:
    """Choose a context uniformly at random from the table."""
    rng = rng or random
    keys = table.contexts()
    if not keys:
        raise EmptyTable("Cannot pick a context from an empty table")
    index = min(int(len(keys) * rng.random()), len(keys) - 1)
    return keys[index]


def pick_next_char(row: Mapping[str, float],
                   rng: Optional[RandomSource] = None) -> str:
    """
    Weighted random choice of the next character.

    Walks the row in insertion order accumulating probabilities and returns
    the first character whose running sum exceeds the draw. If rounding
    keeps the sum below the draw, the last character seen is returned.
    """
    rng = rng or random
    r = rng.random()
    cumulative = 0.0
    last_char = FALLBACK_CHAR

    for char, probability in row.items():
        cumulative += probability
        if r < cumulative:
            return char
        last_char = char

    return last_char


# =============================================================================
# TRAINING
# =============================================================================

class MarkovTrainer:
    """Builds probability tables from a corpus string"""

    def __init__(self, order: int = 4):
        self.order = order

    def _validate(self, corpus: str):
        if isinstance(self.order, bool) or not isinstance(self.order, int):
            raise InvalidConfiguration(f"Context length must be an integer, got {self.order!r}")
        if self.order <= 0:
            raise InvalidConfiguration(f"Context length must be positive, got {self.order}")
        if self.order >= len(corpus):
            raise InvalidConfiguration(
                f"Corpus of {len(corpus)} characters is too short for context length {self.order}"
            )

    def count(self, corpus: str) -> Dict[str, Dict[str, int]]:
        """Count how often each character follows each context"""
        counts: Dict[str, Dict[str, int]] = defaultdict(dict)
        k = self.order

        for i in range(len(corpus) - k):
            context = corpus[i:i + k]
            next_char = corpus[i + k]
            row = counts[context]
            row[next_char] = row.get(next_char, 0) + 1

        return counts

    def train(self, corpus: str) -> ProbabilityTable:
        """
        Train a probability table on a corpus.

        Args:
            corpus: Training text, already flattened to a single string

        Returns:
            ProbabilityTable keyed by every context that has a successor

        Raises:
            InvalidConfiguration: If the order is not positive or the corpus
                is not longer than the order
        """
        self._validate(corpus)
        counts = self.count(corpus)

        # Normalize only after every window has been counted
        rows = {}
        for context, row in counts.items():
            total = row_sum(row)
            rows[context] = {char: n / total for char, n in row.items()}

        logger.debug(f"Trained order-{self.order} table: "
                     f"{len(corpus) - self.order} windows, {len(rows)} contexts")
        return ProbabilityTable.from_rows(self.order, rows)


# =============================================================================
# GENERATION
# =============================================================================

class MarkovGenerator:
    """Generates text from a trained ProbabilityTable"""

    def __init__(self, table: ProbabilityTable, rng: Optional[RandomSource] = None):
        """
        Args:
            table: Trained probability table (never modified)
            rng: Source of uniform [0, 1) draws; defaults to the random module
        """
        self.table = table
        self.rng = rng or random

    def generate(self, n: int) -> str:
        """
        Generate text starting from a random seed context.

        Args:
            n: Number of characters to append after the seed

        Returns:
            The seed followed by n generated characters (K + n in total)
        """
        if not len(self.table):
            raise EmptyTable("Cannot generate text from an empty table")
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise InvalidConfiguration(f"Generation length must be a non-negative integer, got {n!r}")

        k = self.table.context_length
        context = pick_random_context(self.table, self.rng)
        output = list(context)
        fallbacks = 0

        for _ in range(n):
            if context not in self.table:
                output.append(FALLBACK_CHAR)
                fallbacks += 1
                continue

            output.append(pick_next_char(self.table[context], self.rng))
            context = ''.join(output[-k:])

        if fallbacks:
            logger.debug(f"Off-table context {context!r}: emitted {fallbacks} fallback spaces")
        return ''.join(output)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def train(corpus: str, k: int) -> ProbabilityTable:
    """Train a table with context length k."""
    return MarkovTrainer(order=k).train(corpus)


def generate(table: ProbabilityTable, n: int, rng: Optional[RandomSource] = None) -> str:
    """Generate K + n characters from a table."""
    return MarkovGenerator(table, rng=rng).generate(n)


__all__ = [
    "FALLBACK_CHAR",
    "RandomSource",
    "ProbabilityTable",
    "row_sum",
    "pick_random_context",
    "pick_next_char",
    "MarkovTrainer",
    "MarkovGenerator",
    "train",
    "generate",
]
