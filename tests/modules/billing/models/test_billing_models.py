# -*- coding: utf-8 -*-
from qorinti.modules.billing.enums import CommissionStatus
from qorinti.modules.billing.models import Commission, Payment, PaymentMethod, Receipt


def test_payment_reads_camel_case_and_ignores_extra():
    payment = Payment.model_validate(
        {
            "id": "p1",
            "paymentMethodId": "M1",
            "assignmentId": "A1",
            "totalAmount": "100",
            "issueReceipt": True,
            "somethingElse": 1,
        }
    )
    assert payment.payment_method_id == "M1"
    assert payment.assignment_id == "A1"
    assert payment.total_amount == "100"
    assert payment.wants_receipt is True


def test_payment_wants_receipt_is_truthiness():
    assert Payment(issue_receipt=None).wants_receipt is False
    assert Payment(issue_receipt=0).wants_receipt is False
    assert Payment(issue_receipt="yes").wants_receipt is True


def test_payment_method_normalized_code():
    assert PaymentMethod(code=" app_card ").normalized_code == "APP_CARD"
    assert PaymentMethod().normalized_code == ""


def test_commission_coerces_amounts_and_status():
    c = Commission.model_validate({"amount": "abc", "baseAmount": "100", "status": "partial"})
    assert c.amount == 0.0
    assert c.base_amount == 100.0
    assert CommissionStatus.parse(c.status) is CommissionStatus.PARTIAL

    assert CommissionStatus.parse(Commission().status) is CommissionStatus.GENERATED


def test_receipt_dump_uses_wire_names():
    receipt = Receipt(
        payment_id="p1",
        receipt_type="INVOICE",
        issuer_fiscal_id="QORINTI",
        series="F001",
        number="00000001",
        series_number="F001-00000001",
        total=10.005,
    )
    data = receipt.model_dump(by_alias=True, exclude={"id"})
    assert data["paymentId"] == "p1"
    assert data["receiptType"] == "INVOICE"
    assert data["seriesNumber"] == "F001-00000001"
    assert data["total"] == 10.01
    assert data["currency"] == "PEN"
# Fin del archivo tests/modules/billing/models/test_billing_models.py
