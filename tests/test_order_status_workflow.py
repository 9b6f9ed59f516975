"""
Tests for applying order status changes and the history they leave behind.
"""
import logging

import pytest
from django.db import IntegrityError, transaction

from base.constants import Constants
from base.exceptions import ConcurrencyConflict, InvalidTransition, NotFound, PersistenceError, ValidationError
from base.models import OrderHistoryModel, OrderLineModel, OrderModel
from base.services import DjangoRowSource, OrderStatusWorkflow


@pytest.fixture
def order(make_customer, make_order, order_statuses):
    customer = make_customer("Ada", "Lovelace")
    return make_order(customer, status=order_statuses[1])


@pytest.fixture
def workflow():
    return OrderStatusWorkflow(DjangoRowSource())


class FailingHistoryRowSource(DjangoRowSource):
    def append_history(self, entry):
        raise PersistenceError("disk full")


class VanishingOrderRowSource(DjangoRowSource):
    """Another request deletes the order between our read and our write."""

    def get_order(self, order_id):
        order = super().get_order(order_id)
        OrderLineModel.objects.filter(order_id=order_id).delete()
        OrderModel.objects.filter(pk=order_id).delete()
        return order


class StaleWriteRowSource(DjangoRowSource):
    def update_order(self, order, fields):
        raise ConcurrencyConflict("stale")


@pytest.mark.django_db
def test_valid_change_updates_order_and_appends_one_history_row(order, workflow):
    history = workflow.apply_status_change(order.id, 3)

    order.refresh_from_db()
    assert order.currentStatus_id == 3
    rows = OrderHistoryModel.objects.filter(order=order)
    assert rows.count() == 1
    assert rows.get().status_id == 3
    assert rows.get().id == history.id


@pytest.mark.django_db
def test_history_is_additive(order, workflow):
    workflow.apply_status_change(order.id, 2)
    workflow.apply_status_change(order.id, 3)
    workflow.apply_status_change(order.id, 2)

    order.refresh_from_db()
    assert order.currentStatus_id == 2
    ids = list(OrderHistoryModel.objects.filter(order=order).values_list("id", flat=True))
    assert len(ids) == 3
    assert len(set(ids)) == 3


@pytest.mark.django_db
@pytest.mark.parametrize("status_id", [4, 5, 6])
def test_status_at_or_above_threshold_is_rejected_without_mutation(order, workflow, status_id):
    with pytest.raises(InvalidTransition) as exc_info:
        workflow.apply_status_change(order.id, status_id)

    assert exc_info.value.message == "Cannot change status to a value of 4 or higher"
    assert isinstance(exc_info.value, ValidationError)
    order.refresh_from_db()
    assert order.currentStatus_id == 1
    assert not OrderHistoryModel.objects.filter(order=order).exists()


@pytest.mark.django_db
def test_threshold_comes_from_settings(order, settings):
    settings.ORDER_STATUS_SELECTABLE_BELOW = 6
    workflow = OrderStatusWorkflow(DjangoRowSource())

    workflow.apply_status_change(order.id, 5)

    order.refresh_from_db()
    assert order.currentStatus_id == 5


@pytest.mark.django_db
def test_unknown_order_is_not_found(order_statuses, workflow):
    with pytest.raises(NotFound):
        workflow.apply_status_change(9999, 2)


@pytest.mark.django_db
def test_status_missing_from_catalog_is_a_validation_error(order, workflow):
    with pytest.raises(ValidationError):
        workflow.apply_status_change(order.id, 0)
    assert not OrderHistoryModel.objects.exists()


@pytest.mark.django_db
def test_persistence_failure_rolls_back_order_update(order):
    workflow = OrderStatusWorkflow(FailingHistoryRowSource())

    with pytest.raises(PersistenceError) as exc_info:
        workflow.apply_status_change(order.id, 3)
    assert exc_info.value.message == Constants.Messages.STATUS_SAVE_FAILED

    order.refresh_from_db()
    assert order.currentStatus_id == 1
    assert not OrderHistoryModel.objects.exists()


@pytest.mark.django_db
def test_persistence_failure_is_logged_with_traceback(order, caplog):
    workflow = OrderStatusWorkflow(FailingHistoryRowSource())

    with caplog.at_level(logging.ERROR, logger="base.services.order_status_workflow"):
        with pytest.raises(PersistenceError):
            workflow.apply_status_change(order.id, 2)

    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert f"order {order.id}" in record.getMessage()
    assert record.exc_info is not None


@pytest.mark.django_db
def test_conflict_on_deleted_order_reports_not_found(order):
    workflow = OrderStatusWorkflow(VanishingOrderRowSource())

    with pytest.raises(NotFound):
        workflow.apply_status_change(order.id, 2)


@pytest.mark.django_db
def test_conflict_on_existing_order_is_reraised(order):
    workflow = OrderStatusWorkflow(StaleWriteRowSource())

    with pytest.raises(ConcurrencyConflict):
        workflow.apply_status_change(order.id, 2)
    assert not OrderHistoryModel.objects.exists()


@pytest.mark.django_db
def test_describe_resolves_current_status_text(order, workflow):
    view_model = workflow.describe(order.id)

    assert view_model.orderId == order.id
    assert view_model.customerId == order.customer_id
    assert view_model.currentStatus == "Order Received"
    assert [status.id for status in view_model.statuses] == [1, 2, 3, 4, 5, 6]


@pytest.mark.django_db
def test_current_status_text_is_none_without_status(make_customer, make_order, order_statuses, workflow):
    order = make_order(make_customer("No", "Status"))
    assert workflow.current_status_text(order) is None


@pytest.mark.django_db
def test_selectable_statuses(order_statuses, workflow):
    assert [status.id for status in workflow.selectable_statuses()] == [1, 2, 3]


@pytest.mark.django_db
def test_history_rows_cannot_be_updated(order, workflow):
    history = workflow.apply_status_change(order.id, 2)
    history.statusDate = history.statusDate.replace(year=2000)

    with pytest.raises(IntegrityError), transaction.atomic():
        history.save()
