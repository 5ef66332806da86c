"""
Tests for result ranking.
"""

import numpy as np

from langsift.core.config.validation import DetectionConfig
from langsift.detection.ranker import Language, map_code, rank


class TestRank:
    """Test cases for rank()."""

    def test_descending_order(self):
        """Test results are sorted by probability"""
        results = rank([0.2, 0.5, 0.3], ["a", "b", "c"], None, DetectionConfig())

        assert [r.code for r in results] == ["b", "c", "a"]

    def test_ties_keep_load_order(self):
        """Test equal probabilities keep load order"""
        results = rank(
            [0.3, 0.4, 0.3, 0.4], ["a", "b", "c", "d"], None, DetectionConfig()
        )

        assert [r.code for r in results] == ["b", "d", "a", "c"]

    def test_threshold_is_strict(self):
        """Test a probability equal to the threshold is dropped"""
        config = DetectionConfig(prob_threshold=0.1)
        results = rank([0.1, 0.9, 0.05], ["a", "b", "c"], None, config)

        assert results == [Language("b", 0.9)]

    def test_truncation(self):
        """Test results are cut to max_results"""
        config = DetectionConfig(prob_threshold=0.0, max_results=2)
        results = rank([0.2, 0.5, 0.3], ["a", "b", "c"], None, config)

        assert [r.code for r in results] == ["b", "c"]

    def test_max_results_zero(self):
        """Test max_results of zero returns nothing"""
        config = DetectionConfig(max_results=0)

        assert rank([0.9], ["a"], None, config) == []

    def test_code_map_applied(self):
        """Test codes are remapped"""
        results = rank([0.9, 0.0], ["en", "de"], {"en": "eng"}, DetectionConfig())

        assert results == [Language("eng", 0.9)]

    def test_probabilities_are_floats(self):
        """Test probabilities are plain floats"""
        results = rank(np.array([0.7]), ["en"], None, DetectionConfig())

        assert type(results[0].probability) is float

    def test_map_code_passthrough(self):
        """Test unmapped codes are returned as is"""
        assert map_code("fr", {"en": "eng"}) == "fr"
        assert map_code("fr", None) == "fr"

    def test_language_to_dict(self):
        """Test Language serialization"""
        assert Language("en", 0.5).to_dict() == {"code": "en", "probability": 0.5}
