"""
Unit tests for the result reporting helpers

Author: TM3
Date: 2025-10-17
"""
import json
import logging
from datetime import date
from decimal import Decimal

from storefront.domain import PriceStatistics
from storefront.services import analytics_service as analytics
from storefront.services.report_service import report, to_reportable


class TestToReportable:
    """Test conversion of query results"""

    def test_scalars(self):
        assert to_reportable(Decimal("76.67")) == 76.67
        assert to_reportable(date(2021, 3, 15)) == "2021-03-15"
        assert to_reportable(3) == 3

    def test_product_list(self, products):
        result = to_reportable(products[:1])

        assert result == [{"id": 1, "name": "Dune", "category": "Books", "price": 120.0}]

    def test_entity_keys_render_as_ids(self, snapshot):
        totals = to_reportable(analytics.order_totals(snapshot))

        assert totals["10"] == 170.0
        assert totals["15"] == 0.0

    def test_grouped_orders(self, snapshot):
        grouped = to_reportable(analytics.orders_by_customer(snapshot))

        assert [o["id"] for o in grouped["1"]] == [11]

    def test_statistics_record(self):
        assert to_reportable(PriceStatistics())["min"] is None


class TestReport:
    """Test report logging"""

    def test_report_logs_title_and_json(self, snapshot, caplog):
        # Act
        with caplog.at_level(logging.INFO, logger="storefront.services.report_service"):
            rendered = report("Product count by order id", analytics.product_count_by_order(snapshot))

        # Assert
        assert json.loads(rendered)["15"] == 0
        assert "Product count by order id" in caplog.text
