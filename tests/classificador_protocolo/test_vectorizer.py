# tests/classificador_protocolo/test_vectorizer.py
"""
Testes da vetorização TF-IDF.
"""

import numpy as np
import pytest

from sistemas.classificador_protocolo.vectorizer import VocabularyVectorizer
from sistemas.classificador_protocolo.vocabulary import VocabularyIndex


def _vectorizer(terms, weights):
    return VocabularyVectorizer(VocabularyIndex.from_dict({"vocabulary": terms, "idf_values": weights}))


class TestTransform:
    """Cálculo do vetor de features."""

    def test_term_frequency_times_idf(self):
        vectorizer = _vectorizer({"a": 0, "b": 1}, [1.0, 2.0])
        vector = vectorizer.transform("a a b")
        assert vector.tolist() == pytest.approx([2 / 3, 2 / 3], rel=1e-6)

    def test_dtype_and_length(self):
        vectorizer = _vectorizer({"a": 0, "b": 1, "c": 2}, [1.0, 1.0, 1.0])
        vector = vectorizer.transform("a")
        assert vector.dtype == np.float32
        assert vector.shape == (3,)
        assert vectorizer.size == 3

    def test_out_of_vocabulary_tokens_count_in_total(self):
        vectorizer = _vectorizer({"laudo": 0}, [3.0])
        vector = vectorizer.transform("laudo pericial juntado")
        assert vector[0] == pytest.approx(1.0)

    def test_empty_text_gives_zero_vector(self):
        vectorizer = _vectorizer({"a": 0, "b": 1}, [1.0, 2.0])
        for text in ("", None):
            vector = vectorizer.transform(text)
            assert vector.shape == (2,)
            assert not vector.any()

    def test_only_unknown_tokens_gives_zero_vector(self):
        vectorizer = _vectorizer({"a": 0}, [1.0])
        assert not vectorizer.transform("x y z").any()

    def test_out_of_range_index_is_skipped(self):
        vectorizer = _vectorizer({"a": 0, "b": 5}, [1.0, 2.0])
        vector = vectorizer.transform("a b")
        assert vector.shape == (2,)
        assert vector[0] == pytest.approx(0.5)
        assert vector[1] == 0.0

    def test_negative_index_is_skipped(self):
        vectorizer = _vectorizer({"a": -1, "b": 1}, [1.0, 2.0])
        vector = vectorizer.transform("a b")
        assert vector[0] == 0.0
        assert vector[1] == pytest.approx(1.0)

    def test_features_are_non_negative_and_bounded(self):
        weights = [0.5, 1.5, 2.5]
        vectorizer = _vectorizer({"x": 0, "y": 1, "z": 2}, weights)
        vector = vectorizer.transform("x y y z z z w")
        assert (vector >= 0).all()
        assert all(vector[i] <= weights[i] + 1e-6 for i in range(3))

    def test_deterministic(self):
        vectorizer = _vectorizer({"a": 0, "b": 1}, [1.0, 2.0])
        assert np.array_equal(vectorizer.transform("b a b"), vectorizer.transform("b a b"))
