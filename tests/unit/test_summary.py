"""
Unit tests for describe() (axon_parser.summary).
"""

from __future__ import annotations

import logging

from axon_parser import parse
from axon_parser.summary import BlockSummary, describe


class TestDescribe:

    def test_schemas_and_blocks(self, user_doc):
        summary = describe(parse(user_doc))
        assert summary.schemas == {"User": ["id", "name", "active", "age"]}
        assert summary.blocks == [BlockSummary("User", 2, 2)]
        assert summary.total_rows == 2
        assert summary.count_mismatches == []

    def test_count_mismatch_reported_not_raised(self, caplog):
        text = "@schema User\nid:I\n@end\n@data User[999]\n1\n2\n@end\n"
        with caplog.at_level(logging.WARNING, logger="axon_parser.summary"):
            summary = describe(parse(text))
        assert summary.count_mismatches == [BlockSummary("User", 999, 2)]
        assert "declares 999" in caplog.text

    def test_duplicate_schemas_listed_once(self):
        text = (
            "@schema User\nid:I\n@end\n"
            "@schema User\nname:S\n@end\n"
            "@schema User\nx:B\n@end\n"
        )
        summary = describe(parse(text))
        assert summary.schemas == {"User": ["id"]}
        assert summary.duplicate_schemas == ["User"]

    def test_empty_result(self):
        summary = describe(parse(""))
        assert summary.schemas == {}
        assert summary.blocks == []
        assert summary.total_rows == 0


class TestBlockSummary:

    def test_count_matches(self):
        assert BlockSummary("T", 2, 2).count_matches is True
        assert BlockSummary("T", 3, 2).count_matches is False
