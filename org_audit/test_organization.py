"""
Org Audit Kernel v1.0: Organization Model Tests

Covers:
  - Build + finalize, queries, arrival-order direct reports
  - DuplicateIdentifierError, MultipleRootsError, MissingRootError
  - UnknownManagerError (Scenario F)
  - CyclicReportingStructureError (self loop, 2-cycle, detached ring)
  - Read-only after finalize, queries before finalize
  - Loader: header skip, blank lines, line numbers, file round trip

Run:  py -3 -m org_audit.test_organization
"""

from __future__ import annotations

import os
import sys
import tempfile

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from org_audit.domain_types import Employee
from org_audit.errors import (
    CyclicReportingStructureError,
    DuplicateIdentifierError,
    InvalidSalaryError,
    MalformedRecordError,
    MissingRootError,
    MultipleRootsError,
    OrgDataError,
    UnknownManagerError,
)
from org_audit.loader import load_file, load_lines
from org_audit.organization import Organization


_pass = 0
_fail = 0


def _test(name, fn):
    global _pass, _fail
    try:
        fn()
        print(f"  [PASS] {name}")
        _pass += 1
    except Exception as exc:
        print(f"  [FAIL] {name}: {exc}")
        _fail += 1


def _emp(eid: str, salary: float = 1000.0, manager: str | None = None) -> Employee:
    return Employee(eid, f"First{eid}", f"Last{eid}", salary, manager)


SAMPLE_CSV = [
    "Id,firstName,lastName,salary,managerId",
    "123,Joe,Doe,60000,",
    "124,Martin,Chekov,45000,123",
    "125,Bob,Ronstad,47000,123",
    "300,Alice,Hasacat,50000,124",
    "305,Brett,Hardleaf,34000,300",
]


# ---------------------------------------------------------------------------
# Construction + queries
# ---------------------------------------------------------------------------

def test_build_and_query():
    org = load_lines(SAMPLE_CSV)
    assert org.is_finalized
    assert len(org) == 5
    assert org.root().id == "123"
    assert org.employee("300").full_name == "Alice Hasacat"
    assert org.employee("999") is None
    assert [e.id for e in org.direct_reports("123")] == ["124", "125"]
    assert org.direct_reports("305") == ()
    assert org.is_manager("124")
    assert not org.is_manager("125")
    assert "305" in org
    assert [e.id for e in org.managers()] == ["123", "124", "300"]


def test_exactly_one_root():
    org = load_lines(SAMPLE_CSV)
    roots = [e for e in org.employees() if e.manager_id is None]
    assert len(roots) == 1
    assert roots[0] == org.root()


def test_direct_reports_arrival_order():
    org = Organization.from_employees([
        _emp("r"), _emp("z", manager="r"), _emp("a", manager="r"), _emp("m", manager="r"),
    ])
    assert [e.id for e in org.direct_reports("r")] == ["z", "a", "m"]


def test_manager_may_appear_after_report():
    org = Organization.from_employees([_emp("b", manager="a"), _emp("a")])
    assert org.root().id == "a"
    assert [e.id for e in org.direct_reports("a")] == ["b"]


def test_reports_map_read_only():
    org = load_lines(SAMPLE_CSV)
    reports = org.reports_map()
    assert reports["123"] == ("124", "125")
    try:
        reports["x"] = ()  # type: ignore[index]
        raise AssertionError("Expected TypeError on read-only map")
    except TypeError:
        pass


def test_finalize_idempotent():
    org = Organization()
    org.add(_emp("r"))
    first = org.finalize()
    assert org.finalize() is first


# ---------------------------------------------------------------------------
# Structural errors
# ---------------------------------------------------------------------------

def test_duplicate_identifier():
    org = Organization()
    org.add(_emp("r"))
    org.add(_emp("a", manager="r"))
    try:
        org.add(_emp("a", manager="r"))
        raise AssertionError("Expected DuplicateIdentifierError")
    except DuplicateIdentifierError as exc:
        assert exc.employee_id == "a"


def test_multiple_roots():
    org = Organization()
    org.add(_emp("r1"))
    try:
        org.add(_emp("r2"))
        raise AssertionError("Expected MultipleRootsError")
    except MultipleRootsError as exc:
        assert exc.first_root_id == "r1"
        assert exc.second_root_id == "r2"


def test_missing_root():
    org = Organization()
    org.add(_emp("a", manager="b"))
    org.add(_emp("b", manager="a"))
    try:
        org.finalize()
        raise AssertionError("Expected MissingRootError")
    except MissingRootError as exc:
        assert exc.rule == "missing_root"


def test_empty_input_missing_root():
    try:
        load_lines(["Id,firstName,lastName,salary,managerId"])
        raise AssertionError("Expected MissingRootError")
    except MissingRootError:
        pass


def test_unknown_manager_scenario_f():
    try:
        load_lines(SAMPLE_CSV + ["400,Ghost,Report,1000,999"])
        raise AssertionError("Expected UnknownManagerError")
    except UnknownManagerError as exc:
        assert exc.employee_id == "400"
        assert exc.manager_id == "999"
        assert isinstance(exc, OrgDataError)


def test_self_managed_cycle():
    org = Organization()
    org.add(_emp("r"))
    org.add(_emp("a", manager="a"))
    try:
        org.finalize()
        raise AssertionError("Expected CyclicReportingStructureError")
    except CyclicReportingStructureError as exc:
        assert exc.employee_id == "a"
        assert exc.cycle == ("a", "a")


def test_detached_ring_cycle():
    org = Organization()
    for e in (_emp("r"), _emp("x", manager="r"),
              _emp("a", manager="b"), _emp("b", manager="c"), _emp("c", manager="a")):
        org.add(e)
    try:
        org.finalize()
        raise AssertionError("Expected CyclicReportingStructureError")
    except CyclicReportingStructureError as exc:
        assert exc.cycle[0] == exc.cycle[-1] == "a"
        assert set(exc.cycle) == {"a", "b", "c"}


def test_tail_into_cycle_names_revisited_employee():
    org = Organization()
    for e in (_emp("r"), _emp("t", manager="a"),
              _emp("a", manager="b"), _emp("b", manager="a")):
        org.add(e)
    try:
        org.finalize()
        raise AssertionError("Expected CyclicReportingStructureError")
    except CyclicReportingStructureError as exc:
        assert exc.employee_id == "a"
        assert exc.cycle == ("a", "b", "a")


def test_failed_finalize_leaves_model_unfinalized():
    org = Organization()
    org.add(_emp("a", manager="nobody"))
    org.add(_emp("r"))
    try:
        org.finalize()
        raise AssertionError("Expected UnknownManagerError")
    except UnknownManagerError:
        pass
    assert not org.is_finalized


# ---------------------------------------------------------------------------
# Lifecycle guards
# ---------------------------------------------------------------------------

def test_add_after_finalize_rejected():
    org = Organization.from_employees([_emp("r")])
    try:
        org.add(_emp("late", manager="r"))
        raise AssertionError("Expected RuntimeError")
    except RuntimeError:
        pass
    assert len(org) == 1


def test_query_before_finalize_rejected():
    org = Organization()
    org.add(_emp("r"))
    try:
        org.root()
        raise AssertionError("Expected RuntimeError")
    except RuntimeError:
        pass


def test_employee_is_immutable():
    emp = _emp("r")
    try:
        emp.salary = 1.0  # type: ignore[misc]
        raise AssertionError("Expected FrozenInstanceError")
    except AttributeError:
        pass


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------

def test_loader_skips_blank_lines():
    lines = SAMPLE_CSV[:3] + ["", "   ", "\n"] + SAMPLE_CSV[3:]
    org = load_lines(lines)
    assert len(org) == 5


def test_loader_header_only_discarded_once():
    # A data row that looks like a header is still parsed (and rejected).
    try:
        load_lines(SAMPLE_CSV + ["Id,firstName,lastName,salary,managerId"])
        raise AssertionError("Expected InvalidSalaryError")
    except InvalidSalaryError as exc:
        assert exc.employee_id == "Id"
        assert exc.line_number == 7


def test_loader_reports_line_number():
    try:
        load_lines(SAMPLE_CSV[:2] + ["bad,row"])
        raise AssertionError("Expected MalformedRecordError")
    except MalformedRecordError as exc:
        assert exc.line_number == 3


def test_loader_without_header():
    org = load_lines(SAMPLE_CSV[1:], skip_header=False)
    assert len(org) == 5


def test_load_file_roundtrip():
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "employees.csv")
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write("\ufeff" + "\r\n".join(SAMPLE_CSV) + "\r\n")
        org = load_file(path)
        assert len(org) == 5
        assert org.root().id == "123"
        assert org.employee("305").manager_id == "300"


def test_load_file_missing():
    try:
        load_file(os.path.join(tempfile.gettempdir(), "no_such_dir_xyz", "e.csv"))
        raise AssertionError("Expected OSError")
    except OSError:
        pass


def test_reload_builds_fresh_instance():
    first = load_lines(SAMPLE_CSV)
    second = load_lines(SAMPLE_CSV[:3])
    assert first is not second
    assert len(first) == 5
    assert len(second) == 2


# ---------------------------------------------------------------------------

def main():
    tests = [
        ("Model: build + query", test_build_and_query),
        ("Model: exactly one root", test_exactly_one_root),
        ("Model: direct reports arrival order", test_direct_reports_arrival_order),
        ("Model: manager after report", test_manager_may_appear_after_report),
        ("Model: reports map read-only", test_reports_map_read_only),
        ("Model: finalize idempotent", test_finalize_idempotent),
        ("Error: duplicate identifier", test_duplicate_identifier),
        ("Error: multiple roots", test_multiple_roots),
        ("Error: missing root", test_missing_root),
        ("Error: empty input", test_empty_input_missing_root),
        ("Error: unknown manager (F)", test_unknown_manager_scenario_f),
        ("Error: self-managed cycle", test_self_managed_cycle),
        ("Error: detached ring", test_detached_ring_cycle),
        ("Error: tail into cycle", test_tail_into_cycle_names_revisited_employee),
        ("Error: failed finalize", test_failed_finalize_leaves_model_unfinalized),
        ("Lifecycle: add after finalize", test_add_after_finalize_rejected),
        ("Lifecycle: query before finalize", test_query_before_finalize_rejected),
        ("Lifecycle: employee frozen", test_employee_is_immutable),
        ("Loader: blank lines", test_loader_skips_blank_lines),
        ("Loader: header once", test_loader_header_only_discarded_once),
        ("Loader: line number", test_loader_reports_line_number),
        ("Loader: no header", test_loader_without_header),
        ("Loader: file round trip", test_load_file_roundtrip),
        ("Loader: missing file", test_load_file_missing),
        ("Loader: reload fresh", test_reload_builds_fresh_instance),
    ]

    print(f"\nRunning {len(tests)} tests...\n")
    for name, fn in tests:
        _test(name, fn)

    print(f"\n{'='*60}")
    print(f"  {_pass} passed, {_fail} failed out of {_pass + _fail}")
    print(f"{'='*60}")

    if _fail > 0:
        sys.exit(1)


if __name__ == "__main__":
    main()
