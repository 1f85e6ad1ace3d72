#!/usr/bin/env python3
"""
Corpus Loading
==============
Reads a training corpus from disk as one continuous string.

Line boundaries are dropped rather than replaced, so "ab\\ncd" trains as
"abcd". Any line ending (\\n, \\r\\n, \\r) is treated the same way.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .errors import CorpusReadError
from .settings import get_setting

logger = logging.getLogger(__name__)


def join_lines(text: str) -> str:
    """Concatenate the lines of text with no separator."""
    return text.replace('\r\n', '').replace('\r', '').replace('\n', '')


def read_corpus(path: Union[str, Path], encoding: Optional[str] = None) -> str:
    """
    Read a corpus file and flatten it to a single line.

    Args:
        path: Corpus file path
        encoding: Text encoding (default: corpus.encoding from app.yaml)

    Raises:
        CorpusReadError: If the file is missing, unreadable or not decodable
    """
    path = Path(path)
    encoding = encoding or get_setting("corpus.encoding", "utf-8")

    try:
        with open(path, 'r', encoding=encoding, newline='') as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise CorpusReadError(f"Cannot decode {path} as {encoding}: {e}") from e
    except OSError as e:
        raise CorpusReadError(f"Cannot read corpus {path}: {e.strerror or e}") from e

    corpus = join_lines(text)
    logger.debug(f"Read {len(corpus)} characters from {path}")
    return corpus


__all__ = ["join_lines", "read_corpus"]
