"""
Warden Corpus
==============

Read-only word lists consulted by the pattern detector, indexed once for
membership and substring queries.
"""

from warden.corpus.loader import Corpus, default_corpus, load_corpus
from warden.corpus.wordset import WordSet

__all__ = ["Corpus", "WordSet", "default_corpus", "load_corpus"]
