import unittest

from tracker.errors import MalformedIdentifierError, TaskValidationError
from tracker.models import Task, parse_timestamp, utc_timestamp
from tracker.validation import (
    generate_task_id,
    validate_completed,
    validate_description,
    validate_task_id,
    validate_title,
)


class TestFieldValidation(unittest.TestCase):
    def test_title_is_trimmed(self) -> None:
        self.assertEqual(validate_title("  Buy milk  "), "Buy milk")

    def test_blank_title_is_rejected(self) -> None:
        for value in ("", "   ", "\t\n"):
            with self.assertRaises(TaskValidationError):
                validate_title(value)

    def test_title_length_limit(self) -> None:
        self.assertEqual(len(validate_title("x" * 100)), 100)
        with self.assertRaises(TaskValidationError):
            validate_title("x" * 101)

    def test_title_length_is_measured_after_trimming(self) -> None:
        self.assertEqual(validate_title("  " + "x" * 100 + "  "), "x" * 100)

    def test_non_string_title_is_rejected(self) -> None:
        with self.assertRaises(TaskValidationError):
            validate_title(42)

    def test_empty_description_is_allowed(self) -> None:
        self.assertEqual(validate_description(""), "")

    def test_description_length_limit(self) -> None:
        self.assertEqual(len(validate_description("d" * 200)), 200)
        with self.assertRaises(TaskValidationError):
            validate_description("d" * 201)

    def test_completed_must_be_boolean(self) -> None:
        self.assertIs(validate_completed(False), False)
        with self.assertRaises(TaskValidationError):
            validate_completed("yes")
        with self.assertRaises(TaskValidationError):
            validate_completed(1)


class TestTaskIdentifiers(unittest.TestCase):
    def test_generated_ids_are_accepted_and_unique(self) -> None:
        ids = {generate_task_id() for _ in range(50)}
        self.assertEqual(len(ids), 50)
        for task_id in ids:
            self.assertEqual(validate_task_id(task_id), task_id)

    def test_uppercase_uuid_is_accepted(self) -> None:
        value = "3F2504E0-4F89-41D3-9A0C-0305E82C3301"
        self.assertEqual(validate_task_id(value), value)

    def test_malformed_ids_are_rejected(self) -> None:
        for value in ("1", "not-a-uuid", "3f2504e04f8941d39a0c0305e82c3301x", "", None):
            with self.assertRaises(MalformedIdentifierError):
                validate_task_id(value)

    def test_malformed_id_is_a_validation_error(self) -> None:
        self.assertTrue(issubclass(MalformedIdentifierError, TaskValidationError))


class TestTaskRecord(unittest.TestCase):
    def test_to_dict_omits_unset_updated_at(self) -> None:
        task = Task(id="a", title="t", created_at="2024-01-01T00:00:00.000Z")
        self.assertNotIn("updatedAt", task.to_dict())

    def test_from_dict_defaults_optional_fields(self) -> None:
        task = Task.from_dict({"id": "a", "title": "t", "createdAt": "2024-01-01T00:00:00.000Z"})
        self.assertEqual(task.description, "")
        self.assertFalse(task.completed)
        self.assertIsNone(task.updated_at)

    def test_from_dict_rejects_bad_types(self) -> None:
        with self.assertRaises(ValueError):
            Task.from_dict({"id": "a", "title": "t", "createdAt": "2024-01-01T00:00:00.000Z", "completed": "no"})

    def test_timestamp_format(self) -> None:
        stamp = utc_timestamp()
        self.assertRegex(stamp, r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")
        self.assertEqual(parse_timestamp(stamp).utcoffset().total_seconds(), 0)

    def test_parse_timestamp_accepts_offsets(self) -> None:
        self.assertEqual(
            parse_timestamp("2024-01-01T00:00:00.000Z"),
            parse_timestamp("2024-01-01T00:00:00+00:00"),
        )
