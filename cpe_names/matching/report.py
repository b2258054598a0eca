"""Serializable summary of a name-to-name comparison."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from cpe_names.grammar.model import WellFormedName
from cpe_names.grammar.types import Attribute, Relation
from cpe_names.matching.matcher import (
    compare_all,
    relations_disjoint,
    relations_equal,
    relations_subset,
    relations_superset,
)


class MatchReport(BaseModel):
    """Per-attribute relations of a source name against a target name.

    The four predicates are folded from ``relations`` once, so a report can
    be rendered or dumped to JSON without comparing the names again.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    relations: dict[Attribute, Relation] = Field(
        description="Relation of each source attribute to the target attribute."
    )
    disjoint: bool
    equal: bool
    subset: bool
    superset: bool

    @classmethod
    def from_names(cls, source: WellFormedName, target: WellFormedName) -> MatchReport:
        relations = compare_all(source, target)
        return cls(
            relations=relations,
            disjoint=relations_disjoint(relations),
            equal=relations_equal(relations),
            subset=relations_subset(relations),
            superset=relations_superset(relations),
        )


__all__ = ["MatchReport"]
