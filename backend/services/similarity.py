"""Lexical similarity between candidate and job text.

Used by the skill-overlap scorer when a posting names no known skill.
"""

import logging

import numpy as np
from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.metrics.pairwise import cosine_similarity as sklearn_cosine

logger = logging.getLogger(__name__)


def _fit_pair(text_a: str, text_b: str, **vectorizer_options):
    """Fit TF-IDF on exactly two documents. None when either is blank or nothing survives stop words."""
    if not text_a.strip() or not text_b.strip():
        return None
    vectorizer = TfidfVectorizer(stop_words="english", sublinear_tf=True, **vectorizer_options)
    try:
        matrix = vectorizer.fit_transform([text_a, text_b])
    except ValueError:
        logger.debug("Empty TF-IDF vocabulary for text pair")
        return None
    return vectorizer, matrix


def tfidf_cosine_similarity(text_a: str, text_b: str) -> float:
    """Cosine of the two texts' TF-IDF vectors (unigrams and bigrams), in [0, 1]."""
    fitted = _fit_pair(text_a, text_b, max_features=5000, ngram_range=(1, 2))
    if fitted is None:
        return 0.0
    _, matrix = fitted
    score = sklearn_cosine(matrix[0:1], matrix[1:2])[0][0]
    return float(np.clip(score, 0.0, 1.0))


def shared_terms(text_a: str, text_b: str, top_n: int = 5) -> list[str]:
    """Terms present in both texts, strongest first.

    A term's strength is the smaller of its two TF-IDF weights.
    """
    fitted = _fit_pair(text_a, text_b)
    if fitted is None:
        return []
    vectorizer, matrix = fitted

    weights = matrix.toarray()
    common = np.minimum(weights[0], weights[1])
    vocabulary = vectorizer.get_feature_names_out()
    order = np.argsort(common)[::-1][:top_n]
    return [str(vocabulary[i]) for i in order if common[i] > 0]
