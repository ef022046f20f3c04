# test_report.py
# Run with: python3 tests/test_report.py  (or: pytest)
import io

from report import explain, format_verdict, write_report
from validator import validate


def test_valid_line_has_trailing_space():
    lines = format_verdict(7, validate("LOOP ADD AREG DATA1".split()))
    assert lines == ["[VALID] Line 7: LOOP ADD AREG DATA1 "], lines


def test_valid_single_and_blank():
    assert format_verdict(1, validate(["STOP"])) == ["[VALID] Line 1: STOP "]
    assert format_verdict(2, validate([])) == ["[VALID] Line 2: "]


def test_one_error_line_per_violation():
    lines = format_verdict(3, validate("ADD AREG BREG".split()))
    assert lines == [
        "Error (Line 3): Invalid Symbolic Name 'ADD'",
        "Error (Line 3): Invalid Mnemonic Instruction 'AREG'",
        "Error (Line 3): Invalid Symbolic Name (Memory Operand) 'BREG'",
    ], lines


def test_unsupported_shape_error():
    lines = format_verdict(4, validate("A B C D E".split(), reject_unsupported=True))
    assert lines == ["Error (Line 4): Unsupported statement shape 'A B C D E'"]


def test_write_report():
    buf = io.StringIO()
    write_report(1, validate(["HALT"]), buf)
    write_report(2, validate(["LTORG"]), buf)
    assert buf.getvalue() == (
        "Error (Line 1): Invalid Mnemonic Instruction 'HALT'\n"
        "[VALID] Line 2: LTORG \n"
    )


def test_explain():
    notes = explain(validate("ADD AREG BREG".split()))
    assert notes == [
        "'ADD' is an Imperative Statement",
        "'AREG' is a Register",
        "'BREG' is a Register",
    ], notes
    assert explain(validate(["HALT"])) == ["'HALT' is not an allowed word here"]
    assert explain(validate([], reject_unsupported=True)) == [
        "no rule covers a statement of 0 token(s)"
    ]
    assert explain(validate(["STOP"])) == []


def run_all():
    tests = [
        test_valid_line_has_trailing_space,
        test_valid_single_and_blank,
        test_one_error_line_per_violation,
        test_unsupported_shape_error,
        test_write_report,
        test_explain,
    ]
    passed = 0
    for t in tests:
        try:
            t()
            print(f"[PASS] {t.__name__}")
            passed += 1
        except Exception as e:
            print(f"[FAIL] {t.__name__}: {e}")
    total = len(tests)
    print(f"\n[SUMMARY] {passed} passed, {total - passed} failed (total {total})")
    return passed == total


if __name__ == "__main__":
    raise SystemExit(0 if run_all() else 1)
