"""
Ranking of classifier output into detection results.

Languages above the probability threshold are inserted one by one, in store
order, in front of the first result with a strictly lower probability. The
result is sorted by descending probability and, among equal probabilities,
keeps the language loaded first in front.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence

from langsift.core.config.validation import DetectionConfig


@dataclass(frozen=True)
class Language:
    """A detected language code and its probability"""

    code: str
    probability: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def map_code(code: str, code_map: Optional[Mapping[str, str]]) -> str:
    if code_map and code in code_map:
        return code_map[code]
    return code


def rank(
    probabilities: Sequence[float],
    languages: Sequence[str],
    code_map: Optional[Mapping[str, str]],
    config: DetectionConfig,
) -> List[Language]:
    """
    Filter, order, remap and truncate a probability vector.

    Args:
        probabilities: One probability per language, in store order
        languages: Language codes in store order
        code_map: Optional internal code to display code mapping
        config: Supplies ``prob_threshold`` and ``max_results``

    Returns:
        List[Language]: Results in descending probability order
    """
    results: List[Language] = []
    for code, p in zip(languages, probabilities):
        p = float(p)
        if p <= config.prob_threshold:
            continue
        position = len(results)
        for i, existing in enumerate(results):
            if existing.probability < p:
                position = i
                break
        results.insert(position, Language(map_code(code, code_map), p))

    if config.max_results is not None:
        return results[: config.max_results]
    return results
