#!/usr/bin/env python3
"""
markovtext - Character-Level Markov Chain Text Generator
========================================================

Quick Start
-----------
    from markovtext import read_corpus, train, generate

    table = train(read_corpus("corpus.txt"), 4)
    print(generate(table, 500))

Modules
-------
    markovtext.markov   - ProbabilityTable, trainer, generator, sampling helpers
    markovtext.corpus   - Corpus file loading
    markovtext.report   - Console rendering of tables and output
    markovtext.settings - YAML configuration (configs/app.yaml)
    markovtext.errors   - Exception types

CLI Usage
---------
    python -m markovtext path/to/corpus.txt
"""

__version__ = "0.1.0"

from .errors import (
    MarkovTextError,
    InvalidConfiguration,
    EmptyTable,
    CorpusReadError,
)
from .markov import (
    ProbabilityTable,
    MarkovTrainer,
    MarkovGenerator,
    row_sum,
    pick_random_context,
    pick_next_char,
    train,
    generate,
)
from .corpus import read_corpus

__all__ = [
    "__version__",
    "MarkovTextError",
    "InvalidConfiguration",
    "EmptyTable",
    "CorpusReadError",
    "ProbabilityTable",
    "MarkovTrainer",
    "MarkovGenerator",
    "row_sum",
    "pick_random_context",
    "pick_next_char",
    "train",
    "generate",
    "read_corpus",
]
