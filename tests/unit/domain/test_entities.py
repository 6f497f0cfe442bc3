import unittest

from pattern_catalog.domain.entities import (
    Category,
    Example,
    Failure,
    Result,
    RunReport,
    Transcript,
)


class TestCategory(unittest.TestCase):
    def test_values_are_the_cli_spellings(self) -> None:
        self.assertEqual(
            [category.value for category in Category],
            ["creational", "structural", "behavioral", "solid"],
        )

    def test_label(self) -> None:
        self.assertEqual(Category.BEHAVIORAL.label, "Behavioral")


class TestResult(unittest.TestCase):
    def test_ok_has_no_failure(self) -> None:
        result = Result.ok(["a", "b"])
        self.assertTrue(result.succeeded)
        self.assertIsNone(result.failure)
        self.assertEqual(result.output_lines, ("a", "b"))

    def test_failed_carries_failure(self) -> None:
        result = Result.failed("ExecutionError", "boom", ["partial"], cause="RuntimeError")
        self.assertFalse(result.succeeded)
        self.assertEqual(result.failure, Failure("ExecutionError", "boom", "RuntimeError"))
        self.assertEqual(result.output_lines, ("partial",))

    def test_failure_present_iff_not_succeeded(self) -> None:
        with self.assertRaises(ValueError):
            Result(succeeded=True, failure=Failure("X", "y"))
        with self.assertRaises(ValueError):
            Result(succeeded=False)

    def test_list_output_is_stored_as_tuple(self) -> None:
        result = Result(output_lines=["x"])  # type: ignore[arg-type]
        self.assertEqual(result.output_lines, ("x",))


class TestExample(unittest.TestCase):
    def test_empty_name_rejected(self) -> None:
        for name in ("", "   "):
            with self.assertRaises(ValueError):
                Example(name, Category.SOLID, Result.ok)

    def test_non_callable_action_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Example("Broken", Category.SOLID, "not callable")  # type: ignore[arg-type]

    def test_is_immutable(self) -> None:
        example = Example("Builder", Category.CREATIONAL, Result.ok)
        with self.assertRaises(AttributeError):
            example.name = "Other"  # type: ignore[misc]


class TestRunReport(unittest.TestCase):
    def test_counts(self) -> None:
        report = RunReport(results=(
            ("a", Result.ok()),
            ("b", Result.failed("ExecutionError", "boom")),
            ("c", Result.ok()),
        ))
        self.assertEqual(report.pass_count, 2)
        self.assertEqual(report.fail_count, 1)
        self.assertEqual(report.total, 3)
        self.assertFalse(report.all_passed)
        self.assertEqual([name for name, _ in report.failures()], ["b"])

    def test_empty_report_passes(self) -> None:
        report = RunReport()
        self.assertEqual((report.pass_count, report.fail_count), (0, 0))
        self.assertTrue(report.all_passed)


class TestTranscript(unittest.TestCase):
    def test_result_snapshots_lines(self) -> None:
        out = Transcript()
        out.say("first")
        out.extend(["second", "third"])
        result = out.result()
        out.say("later")
        self.assertEqual(result.output_lines, ("first", "second", "third"))

    def test_failed_keeps_lines(self) -> None:
        out = Transcript()
        out.say("before")
        result = out.failed("InvariantViolation", "bad")
        self.assertFalse(result.succeeded)
        self.assertEqual(result.output_lines, ("before",))


if __name__ == "__main__":
    unittest.main()
