"""Demonstrate unbinding, matching and binding CPE names.

Run with the project venv activated:
    python examples/cpe_name_usage.py
"""

from __future__ import annotations

from cpe_names import (
    MatchReport,
    WellFormedName,
    bind_to_fs,
    bind_to_uri,
    is_disjoint,
    is_equal,
    is_subset,
    is_superset,
    unbind_fs,
    unbind_uri,
)


def examples() -> None:
    # Unbind both bindings into Well-Formed Names
    source = unbind_uri("cpe:/a:microsoft:internet_explorer%01%01%01%01:8%02:beta")
    target = unbind_fs("cpe:2.3:a:microsoft:internet_explorer:8.0.6001:beta:*:*:*:*:*:*")
    print("Source:", source)
    print("Target:", target)

    # Name-level predicates
    print("Disjoint:", is_disjoint(source, target))  # False
    print("Equal:", is_equal(source, target))  # False
    print("Subset:", is_subset(source, target))  # False
    print("Superset:", is_superset(source, target))  # True

    # Full report, ready for JSON tooling
    print("Report:", MatchReport.from_names(source, target).model_dump_json())

    # Build a name attribute by attribute and bind it
    wfn = WellFormedName()
    wfn.set("part", "a")
    wfn.set("vendor", "microsoft")
    wfn.set("product", "internet_explorer????")
    wfn.set("version", "8\\.0\\.6001")
    print("URI:", bind_to_uri(wfn))  # cpe:/a:microsoft:internet_explorer%01%01%01%01:8.0.6001
    # cpe:2.3:a:microsoft:internet_explorer????:8.0.6001:*:*:*:*:*:*:*
    print("FS:", bind_to_fs(wfn))


if __name__ == "__main__":
    examples()
