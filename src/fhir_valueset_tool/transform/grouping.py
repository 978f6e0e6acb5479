# src/fhir_valueset_tool/transform/grouping.py
"""
Group concepts into ValueSet inclusion groups by source system.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from ..models import Concept, ValueSetInclude

SystemConcept = Tuple[Optional[str], Concept]


def group_by_system(records: Iterable[SystemConcept]) -> List[ValueSetInclude]:
    """
    Group (system, concept) pairs into inclusion groups.

    Groups appear in order of first occurrence of their system; concepts keep
    their arrival order within a group. Systems are compared by exact value,
    so None (no system column) and "" (empty system column) are separate
    groups. Duplicate codes are kept.

    Parameters
    ----------
    records : Iterable[Tuple[str or None, Concept]]
        Source system and concept, in input order.

    Returns
    -------
    List[ValueSetInclude]
        One group per distinct system value.
    """
    groups: List[ValueSetInclude] = []
    by_system: Dict[Optional[str], ValueSetInclude] = {}
    for system, concept in records:
        group = by_system.get(system)
        if group is None:
            group = ValueSetInclude(system=system, concept=[])
            by_system[system] = group
            groups.append(group)
        group.concept.append(concept)
    return groups
