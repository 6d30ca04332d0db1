# Overview: Random but valid variation schemas for product fixtures.

"""
Variation schema generation.

A schema is an ordered mapping of group name -> values. Combinations are
the Cartesian product of the value lists with the FIRST group as the
outer loop, joined with "|":

    {"vi_var1": ["vi_var1_1", "vi_var1_2"], "vi_var2": ["vi_var2_1"]}
    -> ["vi_var1_1|vi_var2_1", "vi_var1_2|vi_var2_1"]

BOUNDS:
- 1 or 2 groups
- one group: 1..20 values
- two groups: 1..50 combinations, split by the smallest factor below 20
  (a prime count ends up as 1 x N)

Nothing is cached at module level; every call returns a fresh schema.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence


logger = logging.getLogger(__name__)

MAX_VARIATION_GROUPS = 2
MAX_VALUES_PER_GROUP = 20
MAX_COMBINATIONS = 50

SUPPORTED_LANGUAGES = ("vi", "en")
DEFAULT_LANGUAGE = "vi"


@dataclass
class VariationSchema:
    """Generated groups and their flattened combinations."""
    language: str
    groups: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def group_name(self) -> str:
        return variation_group_label(self.groups)

    @property
    def combinations(self) -> List[str]:
        return combine_values(list(self.groups.values()))


def resolve_language(language: Optional[str], default: str = DEFAULT_LANGUAGE) -> str:
    if language in SUPPORTED_LANGUAGES:
        return language
    logger.warning("Unsupported language %r, using %r", language, default)
    return default


def values_per_group(number_of_combinations: int, number_of_groups: int) -> List[int]:
    """Split a combination count across 1 or 2 groups."""
    if number_of_groups == 1:
        return [number_of_combinations]

    factor = next(
        (i for i in range(2, min(number_of_combinations, MAX_VALUES_PER_GROUP))
         if number_of_combinations % i == 0),
        1,
    )
    return [factor, number_of_combinations // factor]


def generate_values(language: str, group_index: int, size: int) -> List[str]:
    return [f"{language}_var{group_index}_{i}" for i in range(1, size + 1)]


def combine_values(value_lists: Sequence[Sequence[str]]) -> List[str]:
    """Cartesian product of `value_lists`, first list outermost, joined with "|"."""
    if not value_lists:
        return []
    combinations = list(value_lists[0])
    for values in value_lists[1:]:
        combinations = [f"{left}|{right}" for left in combinations for right in values]
    return combinations


def variation_group_label(groups: Dict[str, List[str]]) -> str:
    return "|".join(groups.keys())


def random_variation_schema(language: Optional[str], rng: random.Random) -> VariationSchema:
    """Pick group count and combination count from `rng` and build the schema."""
    language = resolve_language(language)
    number_of_groups = rng.randint(1, MAX_VARIATION_GROUPS)
    upper = MAX_VALUES_PER_GROUP if number_of_groups == 1 else MAX_COMBINATIONS
    number_of_combinations = rng.randint(1, upper)

    groups: Dict[str, List[str]] = {}
    for index, size in enumerate(values_per_group(number_of_combinations, number_of_groups), start=1):
        groups[f"{language}_var{index}"] = generate_values(language, index, size)

    return VariationSchema(language=language, groups=groups)
