"""
Tests for the console runner

Author: TM3
Date: 2025-10-17
"""
import logging
from unittest.mock import patch

from storefront import main as runner
from storefront.domain import Snapshot


class TestRunner:
    """Test the question catalogue runner"""

    def test_catalogue_has_every_question(self):
        assert len(runner.build_questions()) == 15

    def test_all_questions_answer_on_sample_snapshot(self, snapshot):
        assert runner.run_questions(snapshot, runner.build_questions()) == 0

    def test_failed_question_is_logged_and_skipped(self, caplog):
        # Empty snapshot: only the cheapest-in-category question fails
        with caplog.at_level(logging.WARNING):
            failures = runner.run_questions(Snapshot(), runner.build_questions())

        assert failures == 1
        assert "Cheapest Books product" in caplog.text

    @patch('storefront.main.SnapshotService')
    def test_main_returns_exit_code(self, mock_service, snapshot):
        mock_service.return_value.load.return_value = snapshot

        assert runner.main() == 0

        mock_service.return_value.load.return_value = Snapshot()

        assert runner.main() == 1
