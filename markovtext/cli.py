#!/usr/bin/env python3
"""
markovtext CLI
==============
Train a character-level Markov chain on a corpus file and print generated text.

Usage:
    markovtext                       # trains on ./corpus.txt
    markovtext path/to/corpus.txt
    markovtext corpus.txt -n 1000 -k 5 --seed 42 --no-table
"""

import argparse
import logging
import random
import sys

from markovtext import __version__
from markovtext.corpus import read_corpus
from markovtext.errors import MarkovTextError
from markovtext.markov import MarkovGenerator, MarkovTrainer
from markovtext.report import Output, format_generated, format_table
from markovtext.settings import get_setting, require_setting, resolve_path

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False):
    level = logging.DEBUG if verbose else get_setting("logging.level", "WARNING")
    logging.basicConfig(
        level=level,
        format=get_setting("logging.format", "%(levelname)s %(name)s: %(message)s"),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='markovtext',
        description='Character-level Markov chain text generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  markovtext                      Train on ./corpus.txt and print 500 characters
  markovtext novel.txt -n 2000    Train on novel.txt and print 2000 characters
  markovtext novel.txt --seed 7   Reproducible output
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('corpus', nargs='?', default=None,
                        help='Corpus file (default: corpus.default_path in app.yaml)')
    parser.add_argument('-n', '--length', type=int, default=None,
                        help='Characters to generate after the seed context')
    parser.add_argument('-k', '--order', type=int, default=None,
                        help='Context length in characters')
    parser.add_argument('--seed', type=int, help='Random seed for reproducible output')
    parser.add_argument('--no-table', action='store_true', help='Do not print the probability table')
    parser.add_argument('--quiet', '-q', action='store_true', help='Print only the generated text')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')
    return parser


def run(args, out: Output) -> int:
    """Load, train, report and generate. Errors propagate to main()."""
    order = args.order if args.order is not None else require_setting("markov.context_length")
    length = args.length if args.length is not None else require_setting("markov.generate_length")
    path = resolve_path(args.corpus or require_setting("corpus.default_path"))

    # Read the whole corpus before training; a read failure aborts the run
    corpus = read_corpus(path)
    logger.info(f"Training order-{order} model on {len(corpus)} characters from {path}")
    table = MarkovTrainer(order=order).train(corpus)

    if not args.no_table:
        out.print(format_table(table))

    rng = random.Random(args.seed) if args.seed is not None else None
    text = MarkovGenerator(table, rng=rng).generate(length)

    if args.quiet:
        out.result(text)
    else:
        out.print(format_generated(text))
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    out = Output(quiet=args.quiet)

    try:
        return run(args, out)
    except KeyboardInterrupt:
        out.error("Cancelled.")
        return 130
    except MarkovTextError as e:
        out.error(str(e))
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
