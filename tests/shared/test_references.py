"""Tests for order, transaction and correlation references."""

from shared.references import (
    CORRELATION_PREFIX,
    ORDER_PREFIX,
    TRANSACTION_PREFIX,
    generate_reference,
    reference_pattern,
)


class TestGenerateReference:
    def test_order_reference_format(self):
        reference = generate_reference(ORDER_PREFIX)
        assert reference_pattern(ORDER_PREFIX).match(reference)

    def test_transaction_reference_format(self):
        reference = generate_reference(TRANSACTION_PREFIX)
        assert reference.startswith("TXN-")
        assert reference_pattern(TRANSACTION_PREFIX).match(reference)

    def test_correlation_reference_format(self):
        assert reference_pattern(CORRELATION_PREFIX).match(generate_reference(CORRELATION_PREFIX))

    def test_uses_given_timestamp(self):
        reference = generate_reference(ORDER_PREFIX, now_ms=1718035200000)
        assert reference.startswith("ORD-1718035200000-")

    def test_suffix_is_nine_uppercase_base36_chars(self):
        suffix = generate_reference(ORDER_PREFIX).rsplit("-", 1)[1]
        assert len(suffix) == 9
        assert suffix == suffix.upper()
        assert suffix.isalnum()

    def test_references_differ(self):
        references = {generate_reference(ORDER_PREFIX, now_ms=1) for _ in range(100)}
        assert len(references) == 100


class TestReferencePattern:
    def test_rejects_other_prefix(self):
        assert not reference_pattern(ORDER_PREFIX).match("TXN-1718035200000-ABCDEFGHI")

    def test_rejects_lowercase_suffix(self):
        assert not reference_pattern(ORDER_PREFIX).match("ORD-1718035200000-abcdefghi")

    def test_rejects_short_suffix(self):
        assert not reference_pattern(ORDER_PREFIX).match("ORD-1718035200000-ABC")
